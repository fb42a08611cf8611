"""Fixed-period poll loop: fetch, merge, persist, sleep, repeat."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Protocol

from smm2wr.exceptions import UpstreamUnavailableError
from smm2wr.history.merge import History, merge_observations
from smm2wr.history.store import HistoryStore
from smm2wr.models.record import Observation, RecordEntry

_logger = logging.getLogger(__name__)


class SchedulerPhase(StrEnum):
    IDLE = "idle"
    FETCHING = "fetching"
    MERGING = "merging"
    PERSISTING = "persisting"
    SLEEPING = "sleeping"


class RecordSource(Protocol):
    async def fetch_world_records(self, course_ids: Sequence[str]) -> list[Observation]:
        ...


@dataclass
class CycleResult:
    """Outcome of one poll cycle."""

    ok: bool
    elapsed: float
    appended: list[tuple[str, RecordEntry]] = field(default_factory=list)
    error: UpstreamUnavailableError | None = None


def next_delay(elapsed: float, period: float) -> float:
    """Seconds to sleep so the next cycle starts *period* after this one did."""
    return max(period - elapsed, 0.0)


class PollScheduler:
    """Drive poll cycles back to back at a fixed period.

    The scheduler owns the in-memory history. Cycles never overlap, so the
    history is only ever touched by one cycle at a time.
    """

    def __init__(
        self,
        source: RecordSource,
        store: HistoryStore,
        history: History,
        course_ids: Sequence[str],
        *,
        period: float,
        monotonic: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self._source = source
        self._store = store
        self._history = history
        self._course_ids = tuple(course_ids)
        self._period = period
        self._monotonic = monotonic
        self._sleep = sleep
        self._phase = SchedulerPhase.IDLE

    @property
    def phase(self) -> SchedulerPhase:
        return self._phase

    @property
    def history(self) -> History:
        return self._history

    async def run_cycle(self) -> CycleResult:
        """Run one fetch, merge, persist pass.

        If the fetch gives up, the cycle is abandoned before anything is
        merged or written and the error is returned in the result.
        """
        start = self._monotonic()
        _logger.info("Updating world records for %d courses...", len(self._course_ids))

        self._phase = SchedulerPhase.FETCHING
        try:
            observations = await self._source.fetch_world_records(self._course_ids)
        except UpstreamUnavailableError as exc:
            _logger.error("Skipping this update: %s", exc)
            return CycleResult(ok=False, elapsed=self._monotonic() - start, error=exc)

        self._phase = SchedulerPhase.MERGING
        appended = merge_observations(self._history, observations)

        self._phase = SchedulerPhase.PERSISTING
        self._store.save(self._history)

        elapsed = self._monotonic() - start
        _logger.info(
            "Saved world records (%d new) in %.1fs.",
            len(appended),
            elapsed,
        )
        return CycleResult(ok=True, elapsed=elapsed, appended=appended)

    async def run_forever(self, max_cycles: int | None = None) -> None:
        """Run cycles until cancelled, or until *max_cycles* have run.

        No sleep follows the last of *max_cycles* cycles.
        """
        cycles = 0
        while True:
            result = await self.run_cycle()
            cycles += 1
            if max_cycles is not None and cycles >= max_cycles:
                self._phase = SchedulerPhase.IDLE
                return

            delay = next_delay(result.elapsed, self._period)
            _logger.debug("Next update in %.1fs", delay)
            self._phase = SchedulerPhase.SLEEPING
            await self._sleep(delay)
