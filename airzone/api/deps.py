"""FastAPI dependency injection wiring."""

from __future__ import annotations

from fastapi import Depends

from airzone.api.auth import UserClaims, verify_firebase_token
from airzone.persistence.repositories.schedule_repo import ScheduleRepository
from airzone.persistence.repositories.zone_repo import ZoneRepository


# ------------------------------------------------------------------
# Current user
# ------------------------------------------------------------------


def get_current_user(
    claims: UserClaims = Depends(verify_firebase_token),
) -> str:
    """Return the authenticated operator ID."""
    return claims.uid


# ------------------------------------------------------------------
# Repositories (stateless, one instance per request)
# ------------------------------------------------------------------


def get_zone_repo() -> ZoneRepository:
    return ZoneRepository()


def get_schedule_repo() -> ScheduleRepository:
    return ScheduleRepository()
