"""GeoJSON boundary parser.

Accepts the wire subset used for zone boundaries::

    {"type": "Polygon", "coordinates": [[[lng, lat], ...]]}

optionally wrapped in ``{"type": "Feature", "geometry": ...}``, either as
a decoded object or as JSON text (the editor's form field holds text).
Exactly one ring is allowed; holes are rejected, never dropped.
"""

import json
from typing import Any, Sequence

from airzone.contracts.enums import RejectReason
from airzone.contracts.verdict import Point, Rejected
from airzone.services.geometry import close_ring


def parse_polygon_ring(value: Any) -> list | Rejected:
    """Extract the raw outer ring of a Polygon boundary.

    The ring is returned as supplied (closing point included, nothing
    coerced); :func:`airzone.services.geometry.normalize_ring` takes it
    from there.
    """
    if value is None:
        return Rejected(RejectReason.MISSING_GEOMETRY)

    if isinstance(value, str):
        if not value.strip():
            return Rejected(RejectReason.MISSING_GEOMETRY)
        try:
            value = json.loads(value)
        except ValueError:
            return Rejected(RejectReason.MALFORMED_INPUT, "boundary must be valid JSON")

    if not isinstance(value, dict):
        return Rejected(RejectReason.MALFORMED_INPUT, "boundary must be a GeoJSON object")

    if value.get("type") == "Feature":
        value = value.get("geometry")
        if value is None:
            return Rejected(RejectReason.MISSING_GEOMETRY)
        if not isinstance(value, dict):
            return Rejected(RejectReason.MALFORMED_INPUT, "Feature geometry must be an object")

    if value.get("type") != "Polygon":
        return Rejected(
            RejectReason.UNSUPPORTED_GEOMETRY,
            f"boundary must be a Polygon, got {value.get('type')!r}",
        )

    coordinates = value.get("coordinates")
    if coordinates is None:
        return Rejected(RejectReason.MALFORMED_INPUT, "boundary coordinates are missing")
    if not isinstance(coordinates, list):
        return Rejected(RejectReason.MALFORMED_INPUT, "boundary coordinates must be a list")
    if not coordinates:
        return Rejected(RejectReason.MISSING_GEOMETRY)
    if len(coordinates) > 1:
        return Rejected(
            RejectReason.UNSUPPORTED_GEOMETRY, "Polygons with holes are not supported"
        )

    ring = coordinates[0]
    if not isinstance(ring, list):
        return Rejected(RejectReason.MALFORMED_INPUT, "Polygon ring must be a list")
    if not ring:
        return Rejected(RejectReason.MISSING_GEOMETRY)
    return ring


def polygon_geometry(ring: Sequence[Point]) -> dict[str, Any]:
    """Single-ring GeoJSON Polygon for a validated ring."""
    return {"type": "Polygon", "coordinates": [close_ring(ring)]}
