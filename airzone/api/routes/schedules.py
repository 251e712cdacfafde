"""Schedule endpoints: time-window listing plus minimal CRUD."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Body, Depends, Query

from airzone.api.deps import get_current_user, get_schedule_repo
from airzone.contracts.common import ensure_utc
from airzone.contracts.enums import ScheduleStatus
from airzone.contracts.schedule import ScheduleEvent, ScheduleUpdate
from airzone.persistence.errors import ScheduleRejectedError
from airzone.persistence.repositories.schedule_repo import ScheduleRepository

router = APIRouter(prefix="/schedules", tags=["schedules"])

DEFAULT_PAGE_SIZE = 50


@router.get("")
async def list_schedules(
    start: datetime | None = Query(None, alias="from", description="ISO-8601 date-time"),
    end: datetime | None = Query(None, alias="to", description="ISO-8601 date-time"),
    page: int = Query(0, ge=0),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=500),
    repo: ScheduleRepository = Depends(get_schedule_repo),
) -> dict:
    """Events overlapping ``[from, to)``, paginated."""
    if start is None or end is None:
        raise ScheduleRejectedError("from and to are required")
    start, end = ensure_utc(start), ensure_utc(end)
    if start >= end:
        raise ScheduleRejectedError("from must be before to")
    result = await repo.find_overlapping(start, end, page, size)
    return result.model_dump(mode="json", exclude_none=True)


@router.get("/{schedule_id}")
async def get_schedule(
    schedule_id: str,
    repo: ScheduleRepository = Depends(get_schedule_repo),
) -> dict:
    event = await repo.get_or_raise(schedule_id)
    return event.to_firestore()


@router.post("", status_code=201)
async def create_schedule(
    event: ScheduleEvent,
    user_id: str = Depends(get_current_user),
    repo: ScheduleRepository = Depends(get_schedule_repo),
) -> dict:
    stored = await repo.create_event(event)
    return stored.to_firestore()


@router.put("/{schedule_id}")
async def update_schedule(
    schedule_id: str,
    update: ScheduleUpdate,
    user_id: str = Depends(get_current_user),
    repo: ScheduleRepository = Depends(get_schedule_repo),
) -> dict:
    updated = await repo.update_event(schedule_id, update)
    return updated.to_firestore()


@router.patch("/{schedule_id}/status")
async def update_schedule_status(
    schedule_id: str,
    status: ScheduleStatus = Body(..., embed=True),
    user_id: str = Depends(get_current_user),
    repo: ScheduleRepository = Depends(get_schedule_repo),
) -> dict:
    updated = await repo.update_status(schedule_id, status)
    return updated.to_firestore()


@router.delete("/{schedule_id}", status_code=204)
async def delete_schedule(
    schedule_id: str,
    user_id: str = Depends(get_current_user),
    repo: ScheduleRepository = Depends(get_schedule_repo),
) -> None:
    await repo.get_or_raise(schedule_id)
    await repo.delete(schedule_id)
