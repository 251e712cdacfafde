"""Tests for FlightZone and ZoneRequest contracts."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from airzone.contracts.enums import ZoneType
from airzone.contracts.zone import FlightZone, PolygonGeometry, ZoneRequest

SQUARE = {"type": "Polygon", "coordinates": [[[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]]]}


def _zone(**overrides) -> FlightZone:
    data = {
        "id": 3,
        "name": "Han River",
        "type": ZoneType.PROHIBITED,
        "boundary": SQUARE,
        "created_at": datetime(2026, 3, 15, 10, 0, tzinfo=timezone.utc),
    }
    data.update(overrides)
    return FlightZone(**data)


class TestFlightZone:
    def test_enum_stored_as_value(self):
        assert _zone().type == "PROHIBITED"

    def test_negative_altitude_rejected(self):
        with pytest.raises(ValidationError):
            _zone(altitude_limit=-1)

    def test_time_window_limit(self):
        with pytest.raises(ValidationError):
            _zone(time_window="x" * 256)

    def test_holes_do_not_fit_the_contract(self):
        with pytest.raises(ValidationError):
            PolygonGeometry(coordinates=[SQUARE["coordinates"][0], SQUARE["coordinates"][0]])

    def test_firestore_stores_boundary_as_text(self):
        data = _zone().to_firestore()
        assert isinstance(data["boundary"], str)
        assert data["boundary"].startswith('{"type":"Polygon"')
        assert "altitude_limit" not in data

    def test_firestore_roundtrip(self):
        zone = _zone(altitude_limit=120, time_window="09:00-18:00")
        data = zone.to_firestore()
        data["id"] = "3"
        restored = FlightZone.from_firestore(data)
        assert restored.id == 3
        assert restored.boundary == zone.boundary
        assert restored.created_at == zone.created_at

    def test_response_keeps_boundary_object(self):
        body = _zone().to_response()
        assert body["boundary"]["type"] == "Polygon"
        assert body["boundary"]["coordinates"][0][0] == [0.0, 0.0]

    def test_as_request(self):
        fields = _zone(altitude_limit=50).as_request()
        assert fields["name"] == "Han River"
        assert fields["altitude_limit"] == 50
        assert fields["boundary"]["type"] == "Polygon"


class TestZoneRequest:
    def test_everything_optional(self):
        request = ZoneRequest()
        assert request.model_dump() == {
            "name": None,
            "type": None,
            "altitude_limit": None,
            "time_window": None,
            "boundary": None,
        }

    def test_boundary_accepts_text(self):
        request = ZoneRequest(boundary='{"type": "Polygon"}')
        assert isinstance(request.boundary, str)

    def test_type_is_not_checked_here(self):
        assert ZoneRequest(type="NOT_A_TYPE").type == "NOT_A_TYPE"

    def test_altitude_is_not_coerced(self):
        assert ZoneRequest(altitude_limit=1.5).altitude_limit == 1.5
        assert ZoneRequest(altitude_limit="100").altitude_limit == "100"
