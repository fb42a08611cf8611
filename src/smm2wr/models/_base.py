"""Base model for Mario Maker 2 API payloads.

Every upstream response model inherits from :class:`Smm2BaseModel`,
which is frozen, ignores fields we do not model, and keeps the original
payload in ``raw`` for debugging.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Smm2BaseModel(BaseModel):
    """Base for API response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict)
    """Original API response dict."""

    @model_validator(mode="before")
    @classmethod
    def _stash_raw(cls, values: Any) -> Any:
        if not isinstance(values, dict) or "raw" in values:
            return values
        return {**values, "raw": dict(values)}
