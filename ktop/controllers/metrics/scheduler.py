"""Polling scheduler driving the metrics collector."""

from __future__ import annotations

import asyncio
import logging
import math
import time
from collections.abc import Callable

from ktop.constants.enums import SchedulerState
from ktop.constants.limits import REFRESH_INTERVAL_MAX, REFRESH_INTERVAL_MIN
from ktop.constants.timeouts import REFRESH_INTERVAL_DEFAULT
from ktop.controllers.base import WorkerResult
from ktop.controllers.metrics.collector import CollectionError, MetricsCollector
from ktop.models.core.cluster_metrics import ClusterMetrics

logger = logging.getLogger(__name__)


class PollingScheduler:
    """Runs collection cycles on an interval plus on-demand refreshes.

    One cycle runs immediately when ``run`` starts, then one per interval tick
    or refresh request, never two at once. Refresh requests go through a
    single-slot queue, so any number of requests made while a cycle is pending
    coalesce into one extra cycle. ``stop`` lets the in-flight cycle finish
    and starts no new one.
    """

    def __init__(
        self,
        collector: MetricsCollector,
        interval: float = REFRESH_INTERVAL_DEFAULT,
        on_snapshot: Callable[[ClusterMetrics], None] | None = None,
    ) -> None:
        self._collector = collector
        if math.isnan(interval):
            interval = REFRESH_INTERVAL_DEFAULT
        self.interval = min(max(interval, REFRESH_INTERVAL_MIN), REFRESH_INTERVAL_MAX)
        self._on_snapshot = on_snapshot
        self._refresh_queue: asyncio.Queue[None] = asyncio.Queue(maxsize=1)
        self._stop_event = asyncio.Event()
        self._state = SchedulerState.IDLE
        self.cycle_count = 0
        self.last_error: str | None = None
        self.last_result: WorkerResult | None = None

    @property
    def state(self) -> SchedulerState:
        return self._state

    def request_refresh(self) -> bool:
        """Ask for a cycle as soon as possible.

        Returns:
            False when a refresh is already pending and this one was coalesced.
        """
        try:
            self._refresh_queue.put_nowait(None)
        except asyncio.QueueFull:
            return False
        return True

    def stop(self) -> None:
        self._stop_event.set()

    async def run_cycle(self) -> WorkerResult:
        """Run one collection cycle, absorbing collection failures."""
        self._state = SchedulerState.COLLECTING
        start = time.perf_counter()
        try:
            snapshot = await self._collector.collect()
        except CollectionError as e:
            logger.warning("Collection cycle failed: %s", e)
            self.last_error = str(e)
            result = WorkerResult(
                success=False,
                error=str(e),
                duration_ms=(time.perf_counter() - start) * 1000,
            )
        else:
            self.last_error = None
            result = WorkerResult(
                success=True,
                data=snapshot,
                duration_ms=(time.perf_counter() - start) * 1000,
            )
            if self._on_snapshot is not None:
                self._on_snapshot(snapshot)
        finally:
            self._state = SchedulerState.IDLE

        self.cycle_count += 1
        self.last_result = result
        return result

    async def _wait_for_trigger(self) -> str:
        refresh = asyncio.ensure_future(self._refresh_queue.get())
        stop = asyncio.ensure_future(self._stop_event.wait())
        try:
            done, _ = await asyncio.wait(
                {refresh, stop},
                timeout=self.interval,
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            for waiter in (refresh, stop):
                if not waiter.done():
                    waiter.cancel()
        if stop in done:
            return "stop"
        if refresh in done:
            return "refresh"
        return "interval"

    async def run(self) -> None:
        """Loop until ``stop`` is called."""
        logger.info("Polling every %.1fs", self.interval)
        try:
            while not self._stop_event.is_set():
                await self.run_cycle()
                if self._stop_event.is_set():
                    break
                trigger = await self._wait_for_trigger()
                logger.debug("Cycle %d triggered by %s", self.cycle_count + 1, trigger)
        finally:
            self._state = SchedulerState.STOPPED
            logger.info("Polling stopped after %d cycles", self.cycle_count)
