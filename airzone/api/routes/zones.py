"""Flight zone CRUD endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from airzone.adapters.geojson import polygon_geometry
from airzone.api.deps import get_current_user, get_zone_repo
from airzone.contracts.enums import ZoneType
from airzone.contracts.verdict import Rejected
from airzone.contracts.zone import ZoneRequest
from airzone.persistence.repositories.zone_repo import ZoneRepository
from airzone.services.zone_validator import validate

router = APIRouter(prefix="/flight-zones", tags=["flight-zones"])


@router.get("")
async def list_zones(
    type: ZoneType | None = None,
    repo: ZoneRepository = Depends(get_zone_repo),
) -> list[dict]:
    if type is not None:
        items = await repo.list_by_type(type)
    else:
        items = await repo.list_all()
    return [z.to_response() for z in items]


@router.post("/validate")
async def validate_zone(request: ZoneRequest, is_create: bool = True) -> dict:
    """Dry run of the write rules; nothing is stored."""
    verdict = validate(request, is_create=is_create)
    if isinstance(verdict, Rejected):
        return {"valid": False, "reason": verdict.reason.value, "message": verdict.message}
    result: dict = {"valid": True}
    if verdict.ring:
        result["boundary"] = polygon_geometry(verdict.ring)
    return result


@router.get("/{zone_id}")
async def get_zone(
    zone_id: int,
    repo: ZoneRepository = Depends(get_zone_repo),
) -> dict:
    zone = await repo.get_or_raise(zone_id)
    return zone.to_response()


@router.post("", status_code=201)
async def create_zone(
    request: ZoneRequest,
    user_id: str = Depends(get_current_user),
    repo: ZoneRepository = Depends(get_zone_repo),
) -> dict:
    zone = await repo.create_zone(request)
    return zone.to_response()


@router.put("/{zone_id}")
async def update_zone(
    zone_id: int,
    request: ZoneRequest,
    user_id: str = Depends(get_current_user),
    repo: ZoneRepository = Depends(get_zone_repo),
) -> dict:
    zone = await repo.update_zone(zone_id, request)
    return zone.to_response()


@router.delete("/{zone_id}", status_code=204)
async def delete_zone(
    zone_id: int,
    user_id: str = Depends(get_current_user),
    repo: ZoneRepository = Depends(get_zone_repo),
) -> None:
    await repo.delete_zone(zone_id)
