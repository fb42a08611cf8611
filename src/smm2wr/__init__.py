"""smm2wr - Super Mario Maker 2 world-record logger."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("smm2wr")
except PackageNotFoundError:
    __version__ = "0+local"
from smm2wr.client import WorldRecordClient
from smm2wr.config import LoggerConfig
from smm2wr.course_ids import load_course_ids, normalize_course_id, normalize_course_ids
from smm2wr.exceptions import (
    ConfigurationError,
    CorruptDataError,
    Smm2wrError,
    UpstreamResponseError,
    UpstreamTransportError,
    UpstreamUnavailableError,
)
from smm2wr.history import History, HistoryStore, merge_observations
from smm2wr.models import CourseInfo, LevelInfoMultiple, Observation, RecordEntry, RecordHolder
from smm2wr.scheduler import CycleResult, PollScheduler, SchedulerPhase, next_delay

__all__ = [
    "__version__",
    "ConfigurationError",
    "CorruptDataError",
    "CourseInfo",
    "CycleResult",
    "History",
    "HistoryStore",
    "LevelInfoMultiple",
    "LoggerConfig",
    "Observation",
    "PollScheduler",
    "RecordEntry",
    "RecordHolder",
    "SchedulerPhase",
    "Smm2wrError",
    "UpstreamResponseError",
    "UpstreamTransportError",
    "UpstreamUnavailableError",
    "WorldRecordClient",
    "load_course_ids",
    "merge_observations",
    "next_delay",
]
