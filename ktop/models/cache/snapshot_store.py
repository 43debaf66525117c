"""Snapshot store: the single owner of the "current snapshot" reference."""

from __future__ import annotations

import threading

from ktop.models.core.cluster_metrics import ClusterMetrics


class SnapshotStore:
    """Holds the most recently completed snapshot and the namespace side cache.

    Notes:
    - There is exactly one writer (the collector driven by the scheduler).
      It builds the new snapshot completely before calling ``replace()``,
      so the lock is only ever held for a reference swap.
    - Readers take the lock only to copy the reference out. Snapshots are
      frozen, so handing out the shared instance is safe.
    - The lock is a ``threading.Lock`` rather than an ``asyncio.Lock`` so the
      store can be read from Textual thread workers as well as coroutines.
      It is never held across an ``await``.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._current: ClusterMetrics | None = None
        self._namespaces: tuple[str, ...] = ()

    def get(self) -> ClusterMetrics | None:
        """Return the current snapshot, or None before the first collection."""
        with self._lock:
            return self._current

    def replace(self, snapshot: ClusterMetrics, namespaces: list[str] | None = None) -> None:
        """Install a completed snapshot (and optionally the namespace list)."""
        with self._lock:
            self._current = snapshot
            if namespaces is not None:
                self._namespaces = tuple(namespaces)

    def get_namespaces(self) -> list[str]:
        """Return a copy of the sorted namespace list from the last collection."""
        with self._lock:
            return list(self._namespaces)
