"""Custom exception hierarchy for smm2wr."""

from __future__ import annotations


class Smm2wrError(Exception):
    """Base exception for all smm2wr errors."""


class ConfigurationError(Smm2wrError):
    """Invalid or missing configuration (course IDs, settings)."""


class CorruptDataError(Smm2wrError):
    """The persisted world-record history could not be read."""

    def __init__(self, message: str, *, path: str = "") -> None:
        self.path = path
        super().__init__(message)


class UpstreamTransportError(Smm2wrError):
    """HTTP-level failure for one attempt (network, timeout, non-200, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class UpstreamResponseError(Smm2wrError):
    """The upstream answered with JSON that does not look like a level listing."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class UpstreamUnavailableError(Smm2wrError):
    """Every fetch attempt of a poll cycle failed.

    The scheduler abandons the current cycle when this is raised and
    tries again on the next one.
    """

    def __init__(self, message: str, *, endpoint: str = "", attempts: int = 0) -> None:
        self.endpoint = endpoint
        self.attempts = attempts
        super().__init__(message)
