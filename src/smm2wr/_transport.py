"""HTTP transport for the Mario Maker 2 API mirror."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from smm2wr._constants import LOG_BODY_LIMIT, USER_AGENT
from smm2wr.config import LoggerConfig
from smm2wr.exceptions import UpstreamTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by the endpoint modules.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`JsonTransport`) concrete.
    """

    async def get_json(self, endpoint: str, params: Mapping[str, str] | None = None) -> Any:
        ...


class JsonTransport:
    """Issue a GET and decode the JSON body, one attempt per call."""

    def __init__(self, config: LoggerConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    async def get_json(self, endpoint: str, params: Mapping[str, str] | None = None) -> Any:
        """GET ``base_url + endpoint`` and return the decoded JSON body.

        Every failure (transport error, timeout, non-200 status, body that is
        not JSON) is raised as :class:`UpstreamTransportError`.
        """
        url = f"{self._config.base_url.rstrip('/')}{endpoint}"
        headers = {"accept": "application/json", "user-agent": USER_AGENT}

        _logger.debug("GET %s", url)

        try:
            async with self._http.get(url, params=params, headers=headers, timeout=self._timeout) as resp:
                body = await resp.read()
                charset = resp.charset or "utf-8"
                if resp.status != 200:
                    snippet = body[:LOG_BODY_LIMIT].decode("utf-8", errors="replace")
                    raise UpstreamTransportError(
                        f"HTTP {resp.status} from {endpoint}: {snippet}",
                        status_code=resp.status,
                        endpoint=endpoint,
                    )
        except UpstreamTransportError:
            raise
        except TimeoutError as exc:
            raise UpstreamTransportError(
                f"Request to {endpoint} timed out after {self._config.request_timeout:g}s",
                endpoint=endpoint,
            ) from exc
        except aiohttp.ClientError as exc:
            raise UpstreamTransportError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc

        try:
            return json.loads(body.decode(charset))
        except (UnicodeDecodeError, LookupError, json.JSONDecodeError) as exc:
            snippet = body[:LOG_BODY_LIMIT].decode("utf-8", errors="replace")
            raise UpstreamTransportError(
                f"Invalid JSON from {endpoint}: {snippet}",
                status_code=resp.status,
                endpoint=endpoint,
            ) from exc
