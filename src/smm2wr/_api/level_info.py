"""Batched level info endpoint.

Endpoint:
  - /mm2/level_info_multiple/<id1,id2,...>?noCaching=1
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from pydantic import ValidationError

from smm2wr._constants import LEVEL_INFO_MULTIPLE_ENDPOINT, LOG_BODY_LIMIT
from smm2wr._transport import Transport
from smm2wr.exceptions import UpstreamResponseError
from smm2wr.models.course import LevelInfoMultiple
from smm2wr.models.record import Observation

_logger = logging.getLogger(__name__)

#: Ask the mirror to bypass its cache so records are current.
_QUERY = {"noCaching": "1"}


def build_endpoint(course_ids: Sequence[str]) -> str:
    return f"{LEVEL_INFO_MULTIPLE_ENDPOINT}/{','.join(course_ids)}"


def parse_level_info_multiple(body: Any, observed_at: int, *, endpoint: str = "") -> list[Observation]:
    """Turn a batched level-info body into observations.

    All observations share *observed_at*. Courses without a world record
    (nobody has cleared them yet) are skipped.

    Raises
    ------
    UpstreamResponseError
        If *body* does not have the ``{"courses": [...]}`` shape.
    """
    try:
        parsed = LevelInfoMultiple.model_validate(body)
    except ValidationError as exc:
        snippet = repr(body)[:LOG_BODY_LIMIT]
        raise UpstreamResponseError(
            f"Unexpected level info payload from {endpoint}: {snippet}",
            endpoint=endpoint,
        ) from exc

    observations: list[Observation] = []
    for course in parsed.courses:
        if not course.has_world_record:
            _logger.warning("Course %s has no world record yet; skipping", course.course_id)
            continue
        assert course.world_record is not None and course.holder_code is not None  # noqa: S101
        observations.append(
            Observation(
                course_id=course.course_id,
                value=course.world_record,
                holder_id=course.holder_code,
                observed_at=observed_at,
            )
        )
    return observations


async def fetch_level_info_multiple(
    transport: Transport,
    course_ids: Sequence[str],
    observed_at_ms: Callable[[], int],
) -> list[Observation]:
    """Fetch the current world records of *course_ids* in one request.

    *observed_at_ms* is called once the body has arrived; its value stamps
    every observation of the batch.
    """
    endpoint = build_endpoint(course_ids)
    body = await transport.get_json(endpoint, _QUERY)
    return parse_level_info_multiple(body, observed_at_ms(), endpoint=endpoint)
