"""Append-on-change merge of fresh observations into the history."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from smm2wr.models.record import Observation, RecordEntry

_logger = logging.getLogger(__name__)

History = dict[str, list[RecordEntry]]


def last_value(entries: list[RecordEntry]) -> float:
    """Value of the latest entry, or ``inf`` when the course has none yet."""
    return entries[-1].value if entries else math.inf


def merge_observations(history: History, observations: Iterable[Observation]) -> list[tuple[str, RecordEntry]]:
    """Append each observation whose value differs from its course's latest entry.

    *history* is mutated in place. Existing entries are never touched, so
    merging the same observations twice is a no-op the second time.

    Returns the ``(course_id, entry)`` pairs that were appended.
    """
    appended: list[tuple[str, RecordEntry]] = []
    for observation in observations:
        entries = history.setdefault(observation.course_id, [])
        previous = last_value(entries)
        if observation.value == previous:
            continue

        entry = observation.to_entry()
        entries.append(entry)
        appended.append((observation.course_id, entry))
        if math.isinf(previous):
            _logger.info(
                "First record for %s: %d ms by %s",
                observation.course_id,
                entry.value,
                entry.holder_id,
            )
        else:
            _logger.info(
                "New record for %s: %d ms by %s (was %d ms)",
                observation.course_id,
                entry.value,
                entry.holder_id,
                previous,
            )
    return appended
