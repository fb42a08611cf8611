"""World-record history models.

These are what the logger persists. JSON keys are camelCase
(``holderId``, ``observedAt``, ``courseId``).
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _RecordModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )


class RecordEntry(_RecordModel):
    """One observed world record of a course.

    Entries are immutable once written. Files written by earlier
    versions of the logger used ``worldRecordTime``/``recordHolderId``/``timeWhenRecorded``;
    those keys are still accepted on load.
    """

    value: int = Field(
        validation_alias=AliasChoices("value", "worldRecordTime"),
        serialization_alias="value",
    )
    """Record time in milliseconds."""
    holder_id: str = Field(
        validation_alias=AliasChoices("holderId", "holder_id", "recordHolderId"),
        serialization_alias="holderId",
    )
    """Maker code of the record holder."""
    observed_at: int = Field(
        validation_alias=AliasChoices("observedAt", "observed_at", "timeWhenRecorded"),
        serialization_alias="observedAt",
    )
    """Epoch milliseconds at which the logger saw this record."""


class Observation(_RecordModel):
    """The current world record of one course, as seen by a single fetch."""

    course_id: str
    value: int
    holder_id: str
    observed_at: int

    def to_entry(self) -> RecordEntry:
        return RecordEntry(value=self.value, holder_id=self.holder_id, observed_at=self.observed_at)
