"""ScheduleEvent — a planned flight slot on the operations calendar.

Stored at: ``/schedules/{schedule_id}``

Only ``starts_at`` / ``ends_at`` matter to the overlap index; the rest is
carried for the calendar views.
"""

from datetime import datetime, timezone
from typing import Self

from pydantic import BaseModel, Field, field_validator, model_validator

from airzone.contracts.common import FirestoreModel, ensure_utc
from airzone.contracts.enums import ScheduleStatus


class ScheduleEvent(FirestoreModel):
    """A time interval ``[starts_at, ends_at)`` with display metadata."""

    id: str | None = None
    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    starts_at: datetime
    ends_at: datetime
    location_name: str | None = None
    lat: float | None = Field(default=None, ge=-90, le=90)
    lng: float | None = Field(default=None, ge=-180, le=180)
    status: ScheduleStatus = ScheduleStatus.PLANNED
    created_at: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))
    updated_at: datetime | None = None

    @field_validator("starts_at", "ends_at")
    @classmethod
    def as_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @model_validator(mode="after")
    def validate_interval(self) -> Self:
        if not self.title.strip():
            raise ValueError("title is required")
        if self.starts_at >= self.ends_at:
            raise ValueError("starts_at must be before ends_at")
        return self


class ScheduleUpdate(BaseModel):
    """Partial update body. ``None`` fields are left unchanged.

    Ranges and the interval are checked by the repository against the
    merged event, so a request moving only ``ends_at`` is still checked
    against the stored ``starts_at``.
    """

    title: str | None = None
    description: str | None = None
    starts_at: datetime | None = None
    ends_at: datetime | None = None
    location_name: str | None = None
    lat: float | None = None
    lng: float | None = None
    status: ScheduleStatus | None = None
