"""Field and boundary rules for flight zone writes.

Pure check, no I/O: persisting an accepted request is the store's job.
Rules run in a fixed order and the first failure wins, so a request with
several problems always reports the same reason.
"""

from __future__ import annotations

from typing import Any, Mapping

from airzone.adapters.geojson import parse_polygon_ring
from airzone.contracts.enums import RejectReason, ZoneType
from airzone.contracts.verdict import Accepted, Rejected
from airzone.contracts.zone import ZoneRequest
from airzone.services.geometry import check_ring

MAX_TIME_WINDOW_LENGTH = 255

_ZONE_TYPES = {t.value for t in ZoneType}


def validate_boundary(value: Any) -> Accepted | Rejected:
    """Geometry rules only: parse the Polygon, normalize, simple-polygon test."""
    raw_ring = parse_polygon_ring(value)
    if isinstance(raw_ring, Rejected):
        return raw_ring
    ring = check_ring(raw_ring)
    if isinstance(ring, Rejected):
        return ring
    return Accepted(ring)


def validate(
    request: ZoneRequest | Mapping[str, Any], is_create: bool
) -> Accepted | Rejected:
    """Check a zone request.

    On create ``name``, ``type`` and ``boundary`` are mandatory. On update
    only supplied (non-``None``) fields are checked. An accepted update
    without a boundary carries an empty ring: there was nothing to
    normalize.
    """
    if isinstance(request, ZoneRequest):
        fields: Mapping[str, Any] = request.model_dump()
    else:
        fields = request

    name = fields.get("name")
    if is_create or name is not None:
        if not isinstance(name, str) or not name.strip():
            return Rejected(RejectReason.NAME_REQUIRED)

    zone_type = fields.get("type")
    if isinstance(zone_type, ZoneType):
        zone_type = zone_type.value
    if zone_type is None:
        if is_create:
            return Rejected(RejectReason.TYPE_REQUIRED)
    elif not isinstance(zone_type, str) or zone_type not in _ZONE_TYPES:
        return Rejected(RejectReason.INVALID_TYPE)

    altitude = fields.get("altitude_limit")
    if altitude is not None:
        if isinstance(altitude, bool) or not isinstance(altitude, int):
            return Rejected(RejectReason.INVALID_ALTITUDE)
        if altitude < 0:
            return Rejected(RejectReason.NEGATIVE_ALTITUDE)

    time_window = fields.get("time_window")
    if time_window is not None and len(str(time_window)) > MAX_TIME_WINDOW_LENGTH:
        return Rejected(RejectReason.TIME_WINDOW_TOO_LONG)

    boundary = fields.get("boundary")
    if is_create or boundary is not None:
        return validate_boundary(boundary)

    return Accepted(())
