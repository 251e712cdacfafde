"""Planar polygon kernel: ring normalization and the simple-polygon test.

Both the editor's live check and the store's authoritative check run these
functions, so a ring accepted while drawing is accepted on submit.

Coordinates are ``(lng, lat)`` degrees treated as planar x/y. One tolerance,
``EPSILON``, governs point coincidence, orientation collinearity, bounding
box containment and the zero-area test.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Sequence

from airzone.contracts.enums import RejectReason
from airzone.contracts.verdict import Point, Rejected, Ring

EPSILON = 1e-9


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def coincident(a: Point, b: Point) -> bool:
    """Same point within ``EPSILON`` on both axes."""
    return abs(a[0] - b[0]) < EPSILON and abs(a[1] - b[1]) < EPSILON


def normalize_ring(raw_points: Any) -> Ring | Rejected:
    """Turn raw ``[[lng, lat], ...]`` input into an open ring.

    A closing point equal to the first one is dropped. Rejects non-numeric
    or non-finite coordinates, points without exactly two components, fewer
    than three points, and any pair of coincident points (not only
    neighbours, which also catches back-and-forth spikes).
    """
    if isinstance(raw_points, (str, bytes)) or not isinstance(raw_points, Sequence):
        return Rejected(RejectReason.MALFORMED_INPUT)

    points: list[Point] = []
    for raw in raw_points:
        if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence) or len(raw) != 2:
            return Rejected(
                RejectReason.MALFORMED_INPUT, "Each coordinate must contain [lng, lat]"
            )
        lng, lat = raw
        if not (_is_number(lng) and _is_number(lat)):
            return Rejected(RejectReason.MALFORMED_INPUT, "Coordinates must be numbers")
        try:
            point = (float(lng), float(lat))
        except OverflowError:
            # ints beyond the float range
            return Rejected(RejectReason.MALFORMED_INPUT, "Coordinates must be finite")
        if not (math.isfinite(point[0]) and math.isfinite(point[1])):
            return Rejected(RejectReason.MALFORMED_INPUT, "Coordinates must be finite")
        points.append(point)

    if len(points) >= 2 and coincident(points[0], points[-1]):
        points.pop()

    if len(points) < 3:
        return Rejected(RejectReason.DEGENERATE_GEOMETRY)

    for i in range(len(points)):
        for j in range(i + 1, len(points)):
            if coincident(points[i], points[j]):
                return Rejected(
                    RejectReason.DEGENERATE_GEOMETRY,
                    f"Polygon repeats a point (vertices {i} and {j})",
                )

    return tuple(points)


def signed_area(ring: Sequence[Point]) -> float:
    """Shoelace area; positive for counter-clockwise rings."""
    n = len(ring)
    total = 0.0
    for i in range(n):
        x1, y1 = ring[i]
        x2, y2 = ring[(i + 1) % n]
        total += x1 * y2 - x2 * y1
    return total / 2.0


def orientation(a: Point, b: Point, c: Point) -> int:
    """Turn direction of a→b→c: 1 counter-clockwise, -1 clockwise, 0 collinear."""
    cross = (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])
    if abs(cross) < EPSILON:
        return 0
    return 1 if cross > 0 else -1


def on_segment(a: Point, b: Point, c: Point) -> bool:
    """True when c lies inside the bounding box of segment ab (with slack)."""
    return (
        min(a[0], b[0]) - EPSILON <= c[0] <= max(a[0], b[0]) + EPSILON
        and min(a[1], b[1]) - EPSILON <= c[1] <= max(a[1], b[1]) + EPSILON
    )


def segments_intersect(p1: Point, p2: Point, q1: Point, q2: Point) -> bool:
    """Orientation test for segments p1p2 and q1q2; touching counts."""
    o1 = orientation(p1, p2, q1)
    o2 = orientation(p1, p2, q2)
    o3 = orientation(q1, q2, p1)
    o4 = orientation(q1, q2, p2)

    if o1 != o2 and o3 != o4:
        return True

    if o1 == 0 and on_segment(p1, p2, q1):
        return True
    if o2 == 0 and on_segment(p1, p2, q2):
        return True
    if o3 == 0 and on_segment(q1, q2, p1):
        return True
    if o4 == 0 and on_segment(q1, q2, p2):
        return True

    return False


def find_crossing(ring: Sequence[Point]) -> tuple[int, int] | None:
    """Indices of the first pair of non-adjacent edges that meet, if any.

    Edge ``i`` runs from ``ring[i]`` to ``ring[i + 1]`` (wrapping). Neighbouring
    edges share a vertex by construction and are skipped, including the
    first/last pair that meets at ``ring[0]``.
    """
    n = len(ring)
    for i in range(n):
        a1, a2 = ring[i], ring[(i + 1) % n]
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue
            if segments_intersect(a1, a2, ring[j], ring[(j + 1) % n]):
                return i, j
    return None


def is_simple_polygon(ring: Sequence[Point]) -> bool:
    """Non-degenerate ring whose non-adjacent edges never cross or touch."""
    if len(ring) < 3:
        return False
    if abs(signed_area(ring)) < EPSILON:
        return False
    return find_crossing(ring) is None


def check_ring(raw_points: Any) -> Ring | Rejected:
    """Normalize and run the simple-polygon test, naming the failing rule."""
    ring = normalize_ring(raw_points)
    if isinstance(ring, Rejected):
        return ring
    # Crossings first: a symmetric bowtie also has zero signed area.
    crossing = find_crossing(ring)
    if crossing is not None:
        return Rejected(
            RejectReason.SELF_INTERSECTING_GEOMETRY,
            "Polygon must not self-intersect (edges %d and %d meet)" % crossing,
        )
    if abs(signed_area(ring)) < EPSILON:
        return Rejected(RejectReason.DEGENERATE_GEOMETRY)
    return ring


def close_ring(ring: Sequence[Point]) -> list[list[float]]:
    """GeoJSON coordinate list for a ring, first point repeated at the end."""
    coords = [[lng, lat] for lng, lat in ring]
    if coords:
        coords.append(list(coords[0]))
    return coords
