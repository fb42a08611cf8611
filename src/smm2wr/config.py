"""Logger configuration for smm2wr."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from smm2wr._constants import (
    BASE_URL,
    DEFAULT_COURSE_IDS_PATH,
    DEFAULT_HISTORY_PATH,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_POLL_PERIOD_S,
    DEFAULT_REQUEST_TIMEOUT_S,
    DEFAULT_RETRY_INTERVAL_S,
)
from smm2wr.exceptions import ConfigurationError


def _env_number(env_key: str, value: str, kind: type[int] | type[float]) -> int | float:
    try:
        return kind(value.strip())
    except ValueError as exc:
        raise ConfigurationError(f"{env_key} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class LoggerConfig:
    """Logger configuration.

    Parameters
    ----------
    base_url : str
        Root URL of the Mario Maker 2 API mirror.
    course_ids_path : str
        JSON file holding the list of course IDs to track.
    history_path : str
        JSON file the world-record history is persisted to.
    poll_period : float
        Target seconds between the starts of two poll cycles.
    max_attempts : int
        Fetch attempts per poll cycle before the cycle is abandoned.
    retry_interval : float
        Flat wait in seconds between two failed fetch attempts.
    request_timeout : float
        Upper bound in seconds for a single HTTP attempt.
    """

    base_url: str = BASE_URL
    course_ids_path: str = DEFAULT_COURSE_IDS_PATH
    history_path: str = DEFAULT_HISTORY_PATH
    poll_period: float = DEFAULT_POLL_PERIOD_S
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    retry_interval: float = DEFAULT_RETRY_INTERVAL_S
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT_S

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ConfigurationError(f"max_attempts must be at least 1, got {self.max_attempts}")
        for name in ("poll_period", "retry_interval"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must not be negative, got {getattr(self, name)}")
        if self.request_timeout <= 0:
            raise ConfigurationError(f"request_timeout must be positive, got {self.request_timeout}")

    @classmethod
    def from_env(cls, **overrides: Any) -> LoggerConfig:
        """Create configuration from ``SMM2WR_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ
        # argparse hands us None for options the user did not pass
        explicit = {key: value for key, value in overrides.items() if value is not None}

        _ENV_STR_MAP = {
            "SMM2WR_BASE_URL": "base_url",
            "SMM2WR_COURSE_IDS_PATH": "course_ids_path",
            "SMM2WR_HISTORY_PATH": "history_path",
        }
        _ENV_NUMBER_MAP: dict[str, tuple[str, type[int] | type[float]]] = {
            "SMM2WR_POLL_PERIOD": ("poll_period", float),
            "SMM2WR_MAX_ATTEMPTS": ("max_attempts", int),
            "SMM2WR_RETRY_INTERVAL": ("retry_interval", float),
            "SMM2WR_REQUEST_TIMEOUT": ("request_timeout", float),
        }

        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_STR_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        for env_key, (field_name, kind) in _ENV_NUMBER_MAP.items():
            val = env.get(env_key)
            if val is not None and field_name not in explicit:
                config_kwargs[field_name] = _env_number(env_key, val, kind)

        config_kwargs.update(explicit)

        return cls(**config_kwargs)
