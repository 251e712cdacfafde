"""Repository for scheduled flight events."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Mapping

from airzone.contracts.common import Page, ensure_utc
from airzone.contracts.enums import ScheduleStatus
from airzone.contracts.schedule import ScheduleEvent, ScheduleUpdate
from airzone.persistence.errors import DocumentNotFoundError, ScheduleRejectedError
from airzone.persistence.repositories.base import BaseRepository
from airzone.services.schedule_overlap import ScheduleOverlapIndex

logger = logging.getLogger(__name__)

COLLECTION = "schedules"


def _check_update(fields: Mapping[str, Any]) -> None:
    if len(fields.get("title", "")) > 200:
        raise ScheduleRejectedError("title must be at most 200 characters")
    lat = fields.get("lat")
    if lat is not None and not -90 <= lat <= 90:
        raise ScheduleRejectedError("lat must be between -90 and 90")
    lng = fields.get("lng")
    if lng is not None and not -180 <= lng <= 180:
        raise ScheduleRejectedError("lng must be between -180 and 180")


class ScheduleRepository(BaseRepository[ScheduleEvent]):
    def __init__(self):
        super().__init__(ScheduleEvent, COLLECTION)

    async def create_event(self, event: ScheduleEvent) -> ScheduleEvent:
        stored = event.model_copy(update={"id": None, "updated_at": event.created_at})
        doc_id = await self.create(stored)
        logger.info("Created schedule %s (%s)", doc_id, stored.title)
        return stored.model_copy(update={"id": doc_id})

    async def get_or_raise(self, event_id: str) -> ScheduleEvent:
        event = await self.get(event_id)
        if event is None:
            raise DocumentNotFoundError(COLLECTION, event_id)
        return event

    async def update_event(
        self, event_id: str, update: ScheduleUpdate | Mapping[str, Any]
    ) -> ScheduleEvent:
        """Merge the supplied fields over the stored event.

        A blank ``title`` is ignored. Coordinate ranges and
        ``starts_at < ends_at`` are checked on the merged values; on
        failure ``ScheduleRejectedError`` is raised and nothing is written.
        """
        event = await self.get_or_raise(event_id)
        fields = ScheduleUpdate.model_validate(update).model_dump(exclude_none=True)
        if "title" in fields and not fields["title"].strip():
            del fields["title"]
        _check_update(fields)

        for key in ("starts_at", "ends_at"):
            if key in fields:
                fields[key] = ensure_utc(fields[key])
        starts_at = fields.get("starts_at", event.starts_at)
        ends_at = fields.get("ends_at", event.ends_at)
        if starts_at >= ends_at:
            raise ScheduleRejectedError("starts_at must be before ends_at")

        fields["updated_at"] = datetime.now(tz=timezone.utc)
        updated = event.model_copy(update=fields)
        await self.replace(event_id, updated)
        logger.info("Updated schedule %s", event_id)
        return updated

    async def update_status(self, event_id: str, status: ScheduleStatus) -> ScheduleEvent:
        event = await self.get_or_raise(event_id)
        updated = event.model_copy(
            update={"status": status, "updated_at": datetime.now(tz=timezone.utc)}
        )
        await self.replace(event_id, updated)
        return updated

    async def find_overlapping(
        self, start: datetime, end: datetime, number: int = 0, size: int = 50
    ) -> Page[ScheduleEvent]:
        """Page ``number`` of the events intersecting ``[start, end)``."""
        index = ScheduleOverlapIndex(await self.list_all())
        return index.page(start, end, number, size)
