"""airzone data contracts — Pydantic v2 models for restricted airspace zones.

Data authority
--------------

**Firestore** (source of truth):
- ``FlightZone`` — ``/flight_zones/{id}`` (integer IDs, boundary stored as GeoJSON text)
- ``ScheduleEvent`` — ``/schedules/{id}``

Calculated (never persisted)
----------------------------
- ``Accepted`` / ``Rejected`` — validation verdicts
- ``Page`` — one slice of a paginated listing
"""

from airzone.contracts.common import FirestoreModel, Page, ensure_utc
from airzone.contracts.enums import (
    FormMode,
    RejectReason,
    ScheduleStatus,
    SessionMode,
    ZoneType,
)
from airzone.contracts.schedule import ScheduleEvent, ScheduleUpdate
from airzone.contracts.verdict import Accepted, Point, Rejected, Ring
from airzone.contracts.zone import FlightZone, PolygonGeometry, ZoneRequest

__all__ = [
    "Accepted",
    "FirestoreModel",
    "FlightZone",
    "FormMode",
    "Page",
    "Point",
    "PolygonGeometry",
    "Rejected",
    "RejectReason",
    "Ring",
    "ScheduleEvent",
    "ScheduleStatus",
    "ScheduleUpdate",
    "SessionMode",
    "ZoneRequest",
    "ZoneType",
    "ensure_utc",
]
