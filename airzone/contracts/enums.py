"""Enumerations shared across all airzone contracts."""

from enum import Enum


class ZoneType(str, Enum):
    """Restriction level of a flight zone."""
    PROHIBITED = "PROHIBITED"
    RESTRICTED = "RESTRICTED"
    CAUTION = "CAUTION"


class ScheduleStatus(str, Enum):
    PLANNED = "PLANNED"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"


class RejectReason(str, Enum):
    """Machine-readable reason attached to every validation rejection.

    Values are stable: clients key their messages on them.
    """
    MALFORMED_INPUT = "MalformedInput"
    MISSING_GEOMETRY = "MissingGeometry"
    UNSUPPORTED_GEOMETRY = "UnsupportedGeometry"
    DEGENERATE_GEOMETRY = "DegenerateGeometry"
    SELF_INTERSECTING_GEOMETRY = "SelfIntersectingGeometry"
    NAME_REQUIRED = "NameRequired"
    TYPE_REQUIRED = "TypeRequired"
    INVALID_TYPE = "InvalidType"
    INVALID_ALTITUDE = "InvalidAltitude"
    NEGATIVE_ALTITUDE = "NegativeAltitude"
    TIME_WINDOW_TOO_LONG = "TimeWindowTooLong"


class SessionMode(str, Enum):
    """State of the interactive drawing surface."""
    IDLE = "idle"
    DRAWING = "drawing"
    EDITING_EXISTING = "editing_existing"


class FormMode(str, Enum):
    NEW = "new"
    EDIT = "edit"
