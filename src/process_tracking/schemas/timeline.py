# This project was developed with assistance from AI tools.
"""Timeline event schemas."""

from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from db.enums import TimelineEventType
from pydantic import BaseModel, Field, field_validator, model_validator

from ..core.config import settings


class TimelineEventCreate(BaseModel):
    """Input for appending one event to a client's timeline."""

    client_id: UUID
    event_type: TimelineEventType
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    related_entity_type: str | None = Field(default=None, max_length=50)
    related_entity_id: UUID | None = None
    performed_by: UUID | None = None


class TimelineEvent(BaseModel):
    """A persisted timeline event."""

    id: UUID
    client_id: UUID
    event_type: TimelineEventType
    title: str
    description: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    related_entity_type: str | None = None
    related_entity_id: UUID | None = None
    performed_by: UUID | None = None
    performer_first_name: str | None = None
    performer_last_name: str | None = None
    created_at: datetime


class TimelineQuery(BaseModel):
    """Filter and paging options for a timeline listing."""

    limit: int = Field(default_factory=lambda: settings.TIMELINE_DEFAULT_LIMIT, ge=1)
    offset: int = Field(default=0, ge=0)
    event_types: list[TimelineEventType] | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None

    @field_validator("start_date", "end_date")
    @classmethod
    def _assume_utc(cls, v: datetime | None) -> datetime | None:
        # Naive bounds are read as UTC so they compare with stored timestamps.
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @model_validator(mode="after")
    def _check_bounds(self) -> "TimelineQuery":
        if self.limit > settings.TIMELINE_MAX_LIMIT:
            raise ValueError(f"limit must be <= {settings.TIMELINE_MAX_LIMIT}")
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValueError("start_date must not be after end_date")
        return self


class TimelinePage(BaseModel):
    """One page of timeline events plus the filtered total."""

    events: list[TimelineEvent]
    total: int
