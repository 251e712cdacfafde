"""Base classes and shared types for airzone contracts.

Conventions (all contracts and API responses):
- **Coordinates**: ``[lng, lat]`` decimal degrees, GeoJSON axis order.
  No CRS transform is ever applied.
- **Altitudes**: meters — suffix ``_limit`` on zones
- **Datetimes**: always UTC, ISO 8601 in serialized form
"""

from datetime import datetime, timezone
from math import ceil
from typing import Any, Generic, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class FirestoreModel(BaseModel):
    """Base model with Firestore-friendly serialization.

    - Enums serialize as string values (Firestore stores strings).
    - ``to_firestore()`` produces a JSON-safe dict (datetimes as ISO 8601).
    - ``from_firestore()`` hydrates from a Firestore document dict.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_firestore(self) -> dict[str, Any]:
        """Dump to Firestore-compatible dict."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_firestore(cls, data: dict[str, Any]) -> "FirestoreModel":
        """Create model instance from Firestore document dict."""
        return cls.model_validate(data)


class Page(BaseModel, Generic[T]):
    """One slice of a paginated collection (``number`` is 0-based)."""

    content: list[T] = Field(default_factory=list)
    total_elements: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)
    size: int = Field(..., ge=1)
    number: int = Field(..., ge=0)

    @classmethod
    def slice(cls, items: Sequence[T], number: int, size: int) -> "Page[T]":
        """Cut page ``number`` out of an already-ordered sequence."""
        start = number * size
        return cls(
            content=list(items[start:start + size]),
            total_elements=len(items),
            total_pages=ceil(len(items) / size),
            size=size,
            number=number,
        )


def ensure_utc(value: datetime) -> datetime:
    """Read naive datetimes as UTC so every comparison is between aware values."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
