"""Course models returned by ``/mm2/level_info_multiple``."""

from __future__ import annotations

from pydantic import Field

from smm2wr.models._base import Smm2BaseModel


class RecordHolder(Smm2BaseModel):
    """The player currently holding a course's world record."""

    code: str | None = None
    """Maker code of the player, e.g. ``"7N1MVBWKF"``."""
    name: str | None = None


class CourseInfo(Smm2BaseModel):
    """One course of a batched level-info response.

    Only the fields the logger needs are modelled; everything else the API
    sends survives in ``raw``.
    """

    course_id: str
    name: str | None = None
    world_record: int | None = Field(default=None, description="Record time in milliseconds")
    record_holder: RecordHolder | None = None

    @property
    def holder_code(self) -> str | None:
        return self.record_holder.code if self.record_holder is not None else None

    @property
    def has_world_record(self) -> bool:
        return self.world_record is not None and bool(self.holder_code)


class LevelInfoMultiple(Smm2BaseModel):
    """Response body of a batched level-info query."""

    courses: list[CourseInfo]
