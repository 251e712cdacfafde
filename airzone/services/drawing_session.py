"""Interactive zone editor state machine.

Headless core behind the map editor: the UI forwards clicks and drags
here and renders ``vertices`` / ``error`` back. Every vertex event re-runs
the same boundary validation the server applies on submit, so the user
sees problems while drawing. An invalid ring is annotated, never blocked.

States::

    IDLE ──start_new──▶ DRAWING ──complete / cancel──▶ IDLE
    IDLE ──open_existing──▶ EDITING_EXISTING
    any  ──close_form──▶ IDLE
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from airzone.adapters.geojson import parse_polygon_ring, polygon_geometry
from airzone.contracts.enums import FormMode, RejectReason, SessionMode
from airzone.contracts.verdict import Accepted, Point, Rejected
from airzone.services.geometry import coincident, normalize_ring
from airzone.services.zone_validator import validate_boundary

logger = logging.getLogger(__name__)

Listener = Callable[["DrawingSession"], None]


class SessionStateError(RuntimeError):
    """Raised when an editor action is not allowed in the current state."""


class MapInteraction:
    """The map's gesture handlers, suspended while vertices are placed.

    ``on_toggle(handler, enabled)`` is where a UI binding flips the real
    map handler; both directions are idempotent.
    """

    HANDLERS = (
        "dragging",
        "double_click_zoom",
        "scroll_wheel_zoom",
        "box_zoom",
        "keyboard",
        "touch_zoom",
    )

    def __init__(self, on_toggle: Callable[[str, bool], None] | None = None):
        self._on_toggle = on_toggle
        self.enabled: dict[str, bool] = {name: True for name in self.HANDLERS}
        self.suspended = False

    def suspend(self) -> None:
        if self.suspended:
            return
        self.suspended = True
        self._set_all(False)

    def resume(self) -> None:
        if not self.suspended:
            return
        self.suspended = False
        self._set_all(True)

    def _set_all(self, enabled: bool) -> None:
        for name in self.HANDLERS:
            self.enabled[name] = enabled
            if self._on_toggle is not None:
                self._on_toggle(name, enabled)


class DrawingSession:
    """One editor surface: mode, in-progress ring and its live verdict."""

    def __init__(self, interaction: MapInteraction | None = None):
        self.interaction = interaction or MapInteraction()
        self.mode = SessionMode.IDLE
        self.form_mode: FormMode | None = None
        self.zone_id: int | None = None
        self.vertices: list[Point] = []
        self.verdict: Accepted | Rejected | None = None
        self._listeners: list[Listener] = []

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(session)`` after every change; returns an unsubscribe."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def _changed(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    @property
    def reason(self) -> RejectReason | None:
        if isinstance(self.verdict, Rejected):
            return self.verdict.reason
        return None

    @property
    def error(self) -> str | None:
        if isinstance(self.verdict, Rejected):
            return self.verdict.message
        return None

    @property
    def is_valid(self) -> bool:
        return isinstance(self.verdict, Accepted)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start_new(self) -> None:
        """Open a blank form and start placing vertices."""
        if self.mode is not SessionMode.IDLE:
            raise SessionStateError(f"cannot start drawing while {self.mode.value}")
        self.form_mode = FormMode.NEW
        self.zone_id = None
        self.vertices = []
        self.verdict = None
        self.mode = SessionMode.DRAWING
        self.interaction.suspend()
        self._changed()

    def add_vertex(self, lng: float, lat: float) -> None:
        """Place the next vertex. Clicking the first one again adds nothing:
        the ring is closed implicitly.
        """
        self._require(SessionMode.DRAWING)
        if len(self.vertices) >= 3 and coincident(self.vertices[0], (lng, lat)):
            logger.debug("Closing click on the first vertex")
            self._changed()
            return
        self.vertices.append((lng, lat))
        self._revalidate()

    def complete(self) -> Accepted | Rejected:
        """Closing gesture: stop drawing, keep the ring for edit and submit."""
        self._require(SessionMode.DRAWING)
        self.mode = SessionMode.IDLE
        self.interaction.resume()
        self._revalidate()
        logger.debug("Ring completed with %d vertices", len(self.vertices))
        return self.verdict

    def cancel(self) -> None:
        """Abandon the ring being drawn; the form stays open and empty."""
        self._require(SessionMode.DRAWING)
        self.mode = SessionMode.IDLE
        self.interaction.resume()
        self.vertices = []
        self.verdict = None
        self._changed()

    def open_existing(self, zone_id: int, boundary: Any) -> Accepted | Rejected:
        """Load a stored zone's ring for vertex editing.

        Map gestures stay enabled: editing drags existing vertices rather
        than clicking new ones onto the map.
        """
        self.interaction.resume()
        self.mode = SessionMode.EDITING_EXISTING
        self.form_mode = FormMode.EDIT
        self.zone_id = zone_id

        raw = parse_polygon_ring(boundary)
        ring = raw if isinstance(raw, Rejected) else normalize_ring(raw)
        if isinstance(ring, Rejected):
            logger.warning("Zone %s has an unreadable boundary: %s", zone_id, ring.message)
            self.vertices = []
            self.verdict = ring
            self._changed()
            return ring

        self.vertices = list(ring)
        self._revalidate()
        return self.verdict

    def close_form(self) -> None:
        """Back to IDLE from anywhere, discarding every drawing artifact."""
        self.mode = SessionMode.IDLE
        self.form_mode = None
        self.zone_id = None
        self.vertices = []
        self.verdict = None
        self.interaction.resume()
        self._changed()

    # ------------------------------------------------------------------
    # Vertex edits
    # ------------------------------------------------------------------

    def move_vertex(self, index: int, lng: float, lat: float) -> None:
        self._require_editable()
        self._require_index(index, len(self.vertices))
        self.vertices[index] = (lng, lat)
        self._revalidate()

    def insert_vertex(self, index: int, lng: float, lat: float) -> None:
        """Insert before ``index``; ``len(vertices)`` appends."""
        self._require_editable()
        self._require_index(index, len(self.vertices) + 1)
        self.vertices.insert(index, (lng, lat))
        self._revalidate()

    def delete_vertex(self, index: int) -> None:
        self._require_editable()
        self._require_index(index, len(self.vertices))
        del self.vertices[index]
        self._revalidate()

    def clear_vertices(self) -> None:
        """Delete the whole ring (the editor's delete-layer action)."""
        self._require_editable()
        self.vertices = []
        self._revalidate()

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    def geometry(self) -> dict[str, Any] | None:
        """GeoJSON Polygon of the current ring, ``None`` when nothing is drawn."""
        if not self.vertices:
            return None
        return polygon_geometry(self.vertices)

    def check_submit(self) -> Accepted | Rejected:
        """The verdict the server will reach for the current boundary."""
        return validate_boundary(self.geometry())

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require(self, mode: SessionMode) -> None:
        if self.mode is not mode:
            raise SessionStateError(
                f"expected {mode.value}, session is {self.mode.value}"
            )

    def _require_editable(self) -> None:
        if self.mode is SessionMode.EDITING_EXISTING:
            return
        if self.mode is SessionMode.IDLE and self.form_mode is FormMode.NEW:
            return
        raise SessionStateError(f"no ring under edit while {self.mode.value}")

    @staticmethod
    def _require_index(index: int, limit: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < limit:
            raise SessionStateError(f"vertex index {index!r} out of range")

    def _revalidate(self) -> None:
        self.verdict = self.check_submit()
        self._changed()
