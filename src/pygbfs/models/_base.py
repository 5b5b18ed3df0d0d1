"""Base models for GBFS feed documents.

Every GBFS model inherits from :class:`GbfsBaseModel` which provides:

* frozen, immutable instances (a refetch replaces a document wholesale),
* tolerance for keys the models do not declare,
* a ``raw`` dict that captures the original payload.

Every top-level document inherits from :class:`GbfsFeed`, which adds the
``last_updated``/``ttl`` header shared by all GBFS files and derives the
normalized ``last_updated_timestamp`` and ``ttl_duration`` fields as part
of validation.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

# 9999-12-31T23:59:59Z, the last second a datetime can hold.
MAX_EPOCH_SECONDS = 253_402_300_799

EpochSeconds = Annotated[int, Field(ge=0, le=MAX_EPOCH_SECONDS)]
"""Non-negative POSIX seconds that convert to a datetime without overflow."""


def parse_epoch_seconds(value: int | None) -> datetime | None:
    """Convert a GBFS POSIX timestamp (seconds) to a UTC datetime."""
    if value is None:
        return None
    return _EPOCH + timedelta(seconds=value)


class GbfsBaseModel(BaseModel):
    """Base for GBFS payload models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict, repr=False)
    """Original payload dict."""

    @model_validator(mode="before")
    @classmethod
    def _stash_raw(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        # A payload key named "raw" is kept inside the stash, never validated.
        return {**values, "raw": dict(values)}


class GbfsFeed(GbfsBaseModel):
    """Header fields shared by every GBFS document.

    ``last_updated`` and ``ttl`` keep the integers as published;
    ``last_updated_timestamp`` and ``ttl_duration`` are derived from
    them once validation succeeds.
    """

    last_updated: EpochSeconds
    ttl: EpochSeconds
    last_updated_timestamp: datetime | None = None
    ttl_duration: timedelta | None = None

    @model_validator(mode="after")
    def _derive_header_fields(self) -> GbfsFeed:
        object.__setattr__(self, "last_updated_timestamp", parse_epoch_seconds(self.last_updated))
        object.__setattr__(self, "ttl_duration", timedelta(seconds=self.ttl))
        return self
