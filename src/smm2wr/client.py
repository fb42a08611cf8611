"""High-level async client for the Mario Maker 2 world-record API."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

import aiohttp

from smm2wr._api.level_info import build_endpoint, fetch_level_info_multiple
from smm2wr._transport import JsonTransport, Transport
from smm2wr.config import LoggerConfig
from smm2wr.exceptions import (
    Smm2wrError,
    UpstreamResponseError,
    UpstreamTransportError,
    UpstreamUnavailableError,
)
from smm2wr.models.record import Observation

_logger = logging.getLogger(__name__)


def _now_ms() -> int:
    """Current epoch timestamp in milliseconds."""
    return int(time.time() * 1000)


class WorldRecordClient:
    """Async client fetching current world records with bounded retries.

    Usage::

        async with WorldRecordClient(config) as client:
            observations = await client.fetch_world_records(course_ids)
    """

    def __init__(
        self,
        config: LoggerConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
        clock: Callable[[], int] = _now_ms,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport = transport
        self._clock = clock
        self._sleep = sleep

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> WorldRecordClient:
        if self._transport is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = JsonTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
            self._transport = None

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise Smm2wrError("Client not initialized. Use 'async with WorldRecordClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # World records
    # ------------------------------------------------------------------

    async def fetch_world_records(self, course_ids: Sequence[str]) -> list[Observation]:
        """Fetch the current world record of every course in one batch.

        Failed attempts (bad status, unparseable body, network error or
        timeout) are logged and retried after ``config.retry_interval``
        seconds, up to ``config.max_attempts`` attempts in total.

        Raises
        ------
        UpstreamUnavailableError
            If every attempt failed.
        """
        transport = self._require_transport()
        max_attempts = self._config.max_attempts
        endpoint = build_endpoint(course_ids)

        for attempt in range(1, max_attempts + 1):
            try:
                observations = await fetch_level_info_multiple(transport, course_ids, self._clock)
            except UpstreamTransportError as exc:
                _logger.warning(
                    "Fetch attempt %d/%d failed (status=%s): %s",
                    attempt,
                    max_attempts,
                    exc.status_code,
                    exc,
                )
            except UpstreamResponseError as exc:
                _logger.warning("Fetch attempt %d/%d returned an unusable body: %s", attempt, max_attempts, exc)
            else:
                if attempt > 1:
                    _logger.info("Fetch succeeded on attempt %d/%d", attempt, max_attempts)
                return observations

            if attempt < max_attempts:
                _logger.debug("Retrying in %.0fs", self._config.retry_interval)
                await self._sleep(self._config.retry_interval)

        raise UpstreamUnavailableError(
            f"Failed to fetch world records from {endpoint} after {max_attempts} attempts",
            endpoint=endpoint,
            attempts=max_attempts,
        )
