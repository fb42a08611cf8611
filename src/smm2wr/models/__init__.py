"""Pydantic models for API payloads and the persisted history."""

from smm2wr.models.course import CourseInfo, LevelInfoMultiple, RecordHolder
from smm2wr.models.record import Observation, RecordEntry

__all__ = [
    "CourseInfo",
    "LevelInfoMultiple",
    "Observation",
    "RecordEntry",
    "RecordHolder",
]
