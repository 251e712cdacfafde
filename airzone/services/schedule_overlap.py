"""Time-window lookup over scheduled events.

Intervals are half-open ``[starts_at, ends_at)``: an event ending exactly
when the window opens, or starting exactly when it closes, does not
overlap it.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from airzone.contracts.common import Page, ensure_utc
from airzone.contracts.schedule import ScheduleEvent


def overlaps(event: ScheduleEvent, start: datetime, end: datetime) -> bool:
    return event.ends_at > ensure_utc(start) and event.starts_at < ensure_utc(end)


class ScheduleOverlapIndex:
    """Events in a fixed order so repeated page queries return the same slice.

    The caller guarantees ``start < end``; validating the window is the
    transport layer's concern.
    """

    def __init__(self, events: Iterable[ScheduleEvent]):
        self._events = sorted(
            events, key=lambda e: (e.starts_at, e.ends_at, e.id or "")
        )

    def __len__(self) -> int:
        return len(self._events)

    def find_overlapping(self, start: datetime, end: datetime) -> list[ScheduleEvent]:
        return [e for e in self._events if overlaps(e, start, end)]

    def page(
        self, start: datetime, end: datetime, number: int = 0, size: int = 50
    ) -> Page[ScheduleEvent]:
        return Page[ScheduleEvent].slice(self.find_overlapping(start, end), number, size)
