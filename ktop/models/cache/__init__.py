"""Snapshot storage."""

from ktop.models.cache.snapshot_store import SnapshotStore

__all__ = ["SnapshotStore"]
