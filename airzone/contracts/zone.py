"""FlightZone — a persisted restricted airspace boundary.

Stored at: ``/flight_zones/{zone_id}``

Firestore rejects nested arrays, so ``boundary`` is written as GeoJSON
text and decoded again on load. API responses carry it as an object.
"""

import json
from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, Field

from airzone.contracts.common import FirestoreModel
from airzone.contracts.enums import ZoneType


class PolygonGeometry(BaseModel):
    """GeoJSON Polygon restricted to a single closed outer ring."""

    type: Literal["Polygon"] = "Polygon"
    coordinates: list[list[list[float]]] = Field(..., min_length=1, max_length=1)


class ZoneRequest(BaseModel):
    """Create/update body for a flight zone.

    Deliberately loose: ``name``, ``type``, ``altitude_limit`` and
    ``boundary`` accept any JSON value (``boundary`` may also be GeoJSON
    text), so the validator, not the framework, decides which rule failed
    and reports its reason code. ``None`` means omitted.
    """

    name: Any = None
    type: Any = None
    altitude_limit: Any = None
    time_window: str | None = None
    boundary: Any = None


class FlightZone(FirestoreModel):
    """A no-fly / restricted-fly zone.

    The boundary always holds a validated simple polygon; the store never
    writes one that fails the geometry kernel.
    """

    id: int | None = None
    name: str = Field(..., min_length=1)
    type: ZoneType
    altitude_limit: int | None = Field(default=None, ge=0, description="Meters")
    time_window: str | None = Field(default=None, max_length=255)
    boundary: PolygonGeometry
    created_at: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))
    updated_at: datetime | None = None

    def to_firestore(self) -> dict[str, Any]:
        data = super().to_firestore()
        data["boundary"] = json.dumps(data["boundary"], separators=(",", ":"))
        return data

    @classmethod
    def from_firestore(cls, data: dict[str, Any]) -> "FlightZone":
        data = dict(data)
        if isinstance(data.get("boundary"), str):
            data["boundary"] = json.loads(data["boundary"])
        return cls.model_validate(data)

    def to_response(self) -> dict[str, Any]:
        """API representation: boundary stays a GeoJSON object."""
        return self.model_dump(mode="json", exclude_none=True)

    def as_request(self) -> dict[str, Any]:
        """Stored fields in request form, the base of a partial update merge."""
        return {
            "name": self.name,
            "type": self.type,
            "altitude_limit": self.altitude_limit,
            "time_window": self.time_window,
            "boundary": self.boundary.model_dump(),
        }
