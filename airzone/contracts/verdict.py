"""Validation verdicts shared by the geometry kernel, validator and editor.

A verdict is a value, never an exception: the kernel and the validator are
total functions, and callers branch on ``isinstance(result, Rejected)``.
"""

from __future__ import annotations

from dataclasses import dataclass

from airzone.contracts.enums import RejectReason

Point = tuple[float, float]
Ring = tuple[Point, ...]

MESSAGES: dict[RejectReason, str] = {
    RejectReason.MALFORMED_INPUT: "boundary must be a Polygon of [lng, lat] pairs",
    RejectReason.MISSING_GEOMETRY: "boundary is required",
    RejectReason.UNSUPPORTED_GEOMETRY: "boundary must be a single-ring Polygon",
    RejectReason.DEGENERATE_GEOMETRY: "Polygon needs at least three distinct points and a non-zero area",
    RejectReason.SELF_INTERSECTING_GEOMETRY: "Polygon must not self-intersect",
    RejectReason.NAME_REQUIRED: "name is required",
    RejectReason.TYPE_REQUIRED: "type is required",
    RejectReason.INVALID_TYPE: "type must be one of PROHIBITED, RESTRICTED, CAUTION",
    RejectReason.INVALID_ALTITUDE: "altitude_limit must be an integer",
    RejectReason.NEGATIVE_ALTITUDE: "altitude_limit must be 0 or greater",
    RejectReason.TIME_WINDOW_TOO_LONG: "time_window is too long",
}


@dataclass(frozen=True)
class Rejected:
    reason: RejectReason
    message: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            object.__setattr__(self, "message", MESSAGES[self.reason])


@dataclass(frozen=True)
class Accepted:
    ring: Ring
