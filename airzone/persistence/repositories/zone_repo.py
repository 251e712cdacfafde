"""Repository for flight zones, the only path by which zones are written.

Every create and update goes through the zone validator first, so a stored
boundary is always a simple polygon. Document IDs are the decimal form of
the integer zone ID, allocated from ``/counters/flight_zones``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Mapping

from google.cloud import firestore

from airzone.adapters.geojson import polygon_geometry
from airzone.contracts.enums import ZoneType
from airzone.contracts.verdict import Rejected
from airzone.contracts.zone import FlightZone, ZoneRequest
from airzone.persistence.errors import DocumentNotFoundError, ZoneRejectedError
from airzone.persistence.firestore_client import get_firestore_client
from airzone.persistence.repositories.base import BaseRepository
from airzone.services.zone_validator import validate

logger = logging.getLogger(__name__)

COLLECTION = "flight_zones"


def _fields(request: ZoneRequest | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(request, ZoneRequest):
        return request.model_dump()
    return dict(request)


def _clean(value: str | None) -> str | None:
    return value.strip() if isinstance(value, str) else value


class ZoneRepository(BaseRepository[FlightZone]):
    def __init__(self):
        super().__init__(FlightZone, COLLECTION)

    async def _insert_with_next_id(self, build: Callable[[int], FlightZone]) -> FlightZone:
        """Allocate the next ID and write the zone built for it in one transaction.

        The new document is written with ``create``, which fails instead of
        overwriting if the ID is somehow taken. Firestore retries the whole
        transaction when the counter changed underneath it.
        """
        client = get_firestore_client()
        counter = client.collection("counters").document(COLLECTION)
        collection = self._collection_ref()

        @firestore.async_transactional
        async def allocate(transaction) -> FlightZone:
            snapshot = await counter.get(transaction=transaction)
            current = snapshot.to_dict().get("value", 0) if snapshot.exists else 0
            zone = build(current + 1)
            data = zone.to_firestore()
            data.pop("id", None)
            transaction.set(counter, {"value": current + 1})
            transaction.create(collection.document(str(zone.id)), data)
            return zone

        return await allocate(client.transaction())

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_or_raise(self, zone_id: int) -> FlightZone:
        zone = await self.get(str(zone_id))
        if zone is None:
            raise DocumentNotFoundError(COLLECTION, str(zone_id))
        return zone

    async def list_all(self) -> list[FlightZone]:
        """Every zone, ordered by name."""
        zones = await super().list_all()
        return sorted(zones, key=lambda z: z.name)

    async def list_by_type(self, zone_type: ZoneType) -> list[FlightZone]:
        """Zones of one restriction level, ordered by name."""
        query = self._collection_ref().where("type", "==", ZoneType(zone_type).value)
        results: list[FlightZone] = []
        async for doc in query.stream():
            results.append(self._hydrate(doc))
        return sorted(results, key=lambda z: z.name)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create_zone(self, request: ZoneRequest | Mapping[str, Any]) -> FlightZone:
        """Validate and store a new zone.

        Raises ``ZoneRejectedError`` with the validator's reason; nothing is
        written in that case (not even an ID is allocated).
        """
        fields = _fields(request)
        verdict = validate(fields, is_create=True)
        if isinstance(verdict, Rejected):
            logger.info("Zone create rejected: %s", verdict.reason.value)
            raise ZoneRejectedError(verdict.reason, verdict.message)

        now = datetime.now(tz=timezone.utc)
        zone = await self._insert_with_next_id(
            lambda zone_id: FlightZone(
                id=zone_id,
                name=_clean(fields["name"]),
                type=fields["type"],
                altitude_limit=fields.get("altitude_limit"),
                time_window=_clean(fields.get("time_window")),
                boundary=polygon_geometry(verdict.ring),
                created_at=now,
                updated_at=now,
            )
        )
        logger.info("Created zone %d (%s, %s)", zone.id, zone.name, zone.type)
        return zone

    async def update_zone(
        self, zone_id: int, request: ZoneRequest | Mapping[str, Any]
    ) -> FlightZone:
        """Merge supplied fields over the stored zone and re-validate the result.

        ``None`` fields are treated as omitted. The merged record is checked
        as a whole, so the stored boundary is re-validated even when only
        the name changes. On rejection the stored zone is left untouched.
        """
        existing = await self.get_or_raise(zone_id)
        supplied = {k: v for k, v in _fields(request).items() if v is not None}
        merged = {**existing.as_request(), **supplied}

        verdict = validate(merged, is_create=False)
        if isinstance(verdict, Rejected):
            logger.info("Zone %s update rejected: %s", zone_id, verdict.reason.value)
            raise ZoneRejectedError(verdict.reason, verdict.message)

        zone = FlightZone(
            id=existing.id,
            name=_clean(merged["name"]),
            type=merged["type"],
            altitude_limit=merged.get("altitude_limit"),
            time_window=_clean(merged.get("time_window")),
            boundary=polygon_geometry(verdict.ring),
            created_at=existing.created_at,
            updated_at=datetime.now(tz=timezone.utc),
        )
        await self.replace(str(zone_id), zone)
        logger.info("Updated zone %s", zone_id)
        return zone

    async def delete_zone(self, zone_id: int) -> None:
        await self.get_or_raise(zone_id)
        await self.delete(str(zone_id))
        logger.info("Deleted zone %s", zone_id)
