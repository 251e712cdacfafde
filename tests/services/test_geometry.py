"""Tests for the planar polygon kernel."""

from __future__ import annotations

import json
import math
from pathlib import Path

import pytest

from airzone.contracts.enums import RejectReason
from airzone.contracts.verdict import Rejected
from airzone.services.geometry import (
    EPSILON,
    check_ring,
    close_ring,
    find_crossing,
    is_simple_polygon,
    normalize_ring,
    on_segment,
    orientation,
    segments_intersect,
    signed_area,
)
from airzone.services.zone_validator import validate_boundary

VECTORS_PATH = Path(__file__).resolve().parents[1] / "golden" / "ring_vectors.json"
VECTORS = json.loads(VECTORS_PATH.read_text())["vectors"]


def _label(result) -> str:
    return result.reason.value if isinstance(result, Rejected) else "accepted"


@pytest.mark.parametrize("vector", VECTORS, ids=[v["name"] for v in VECTORS])
def test_golden_vectors(vector):
    if "boundary" in vector:
        result = validate_boundary(vector["boundary"])
    else:
        result = check_ring(vector["ring"])
    assert _label(result) == vector["expected"]


class TestNormalizeRing:
    def test_drops_closing_duplicate(self):
        ring = normalize_ring([[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]])
        assert ring == ((0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0))

    def test_open_ring_unchanged(self):
        ring = normalize_ring([[0, 0], [0, 1], [1, 1]])
        assert len(ring) == 3

    def test_drops_only_one_closing_point(self):
        result = normalize_ring([[0, 0], [0, 1], [1, 1], [0, 0], [0, 0]])
        assert isinstance(result, Rejected)
        assert result.reason == RejectReason.DEGENERATE_GEOMETRY

    @pytest.mark.parametrize(
        "raw",
        [
            [],
            [[0, 0]],
            [[0, 0], [1, 1]],
            [[0, 0], [1, 1], [0, 0]],
        ],
    )
    def test_fewer_than_three_distinct_points(self, raw):
        result = normalize_ring(raw)
        assert isinstance(result, Rejected)
        assert result.reason == RejectReason.DEGENERATE_GEOMETRY

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_coordinates(self, bad):
        result = normalize_ring([[0, 0], [bad, 1], [1, 1]])
        assert isinstance(result, Rejected)
        assert result.reason == RejectReason.MALFORMED_INPUT

    def test_integer_beyond_float_range(self):
        result = normalize_ring([[10**400, 0], [1, 0], [0, 1]])
        assert isinstance(result, Rejected)
        assert result.reason == RejectReason.MALFORMED_INPUT
        assert result.message == "Coordinates must be finite"

    def test_huge_integer_in_boundary_text(self):
        text = '{"type": "Polygon", "coordinates": [[[1' + "0" * 400 + ", 0], [1, 0], [0, 1]]]}"
        assert validate_boundary(text).reason == RejectReason.MALFORMED_INPUT

    @pytest.mark.parametrize(
        "raw",
        [
            "0,0 1,1 2,2",
            None,
            [[0], [1, 1], [2, 0]],
            [[0, 0], [1, 1, 1], [2, 0]],
            [[0, 0], [True, 1], [2, 0]],
            [[0, 0], None, [2, 0]],
            [[0, 0], "ab", [2, 0]],
        ],
    )
    def test_malformed_input(self, raw):
        result = normalize_ring(raw)
        assert isinstance(result, Rejected)
        assert result.reason == RejectReason.MALFORMED_INPUT

    def test_accepts_tuples(self):
        ring = normalize_ring(((0, 0), (2, 0), (1, 1)))
        assert ring == ((0.0, 0.0), (2.0, 0.0), (1.0, 1.0))

    def test_coincident_within_tolerance(self):
        result = normalize_ring([[0, 0], [1, 0], [1, EPSILON / 10], [0, 1]])
        assert isinstance(result, Rejected)
        assert result.reason == RejectReason.DEGENERATE_GEOMETRY
        assert "vertices 1 and 2" in result.message


class TestSignedArea:
    def test_counter_clockwise_positive(self):
        assert signed_area([(0, 0), (1, 0), (1, 1), (0, 1)]) == pytest.approx(1.0)

    def test_clockwise_negative(self):
        assert signed_area([(0, 0), (0, 1), (1, 1), (1, 0)]) == pytest.approx(-1.0)

    def test_collinear_zero(self):
        assert signed_area([(0, 0), (1, 0), (2, 0)]) == 0.0


class TestSegments:
    def test_orientation(self):
        assert orientation((0, 0), (1, 0), (0, 1)) == 1
        assert orientation((0, 0), (1, 0), (0, -1)) == -1
        assert orientation((0, 0), (1, 0), (2, 0)) == 0

    def test_orientation_collinear_within_tolerance(self):
        assert orientation((0, 0), (1, 0), (2, EPSILON / 10)) == 0

    def test_on_segment_uses_bounding_box(self):
        assert on_segment((0, 0), (2, 2), (1, 1))
        assert not on_segment((0, 0), (2, 2), (3, 3))

    def test_proper_crossing(self):
        assert segments_intersect((0, 0), (2, 2), (0, 2), (2, 0))

    def test_disjoint(self):
        assert not segments_intersect((0, 0), (1, 0), (0, 1), (1, 1))

    def test_touching_endpoint_counts(self):
        assert segments_intersect((0, 0), (2, 0), (1, 0), (1, 5))

    def test_collinear_overlap(self):
        assert segments_intersect((0, 0), (2, 0), (1, 0), (3, 0))

    def test_collinear_apart(self):
        assert not segments_intersect((0, 0), (1, 0), (2, 0), (3, 0))


class TestSimplePolygon:
    def test_square(self):
        assert is_simple_polygon([(0, 0), (0, 1), (1, 1), (1, 0)])

    def test_bowtie(self):
        ring = [(0, 0), (1, 1), (1, 0), (0, 1)]
        assert not is_simple_polygon(ring)
        assert find_crossing(ring) == (0, 2)

    def test_degenerate(self):
        assert not is_simple_polygon([(0, 0), (1, 0), (2, 0)])

    def test_too_few_points(self):
        assert not is_simple_polygon([(0, 0), (1, 0)])

    def test_every_starting_vertex(self):
        square = [(0, 0), (2, 0), (2, 2), (0, 2)]
        for start in range(len(square)):
            rotated = square[start:] + square[:start]
            assert is_simple_polygon(rotated)
            assert is_simple_polygon(list(reversed(rotated)))

    def test_verdict_is_idempotent(self):
        raw = [[0, 0], [1, 1], [1, 0], [0, 1]]
        first = check_ring(raw)
        second = check_ring(raw)
        assert first == second
        assert raw == [[0, 0], [1, 1], [1, 0], [0, 1]]

    def test_many_vertices(self):
        n = 64
        ring = [
            (math.cos(2 * math.pi * k / n), math.sin(2 * math.pi * k / n))
            for k in range(n)
        ]
        assert is_simple_polygon(ring)


class TestCheckRing:
    def test_self_intersection_message_names_edges(self):
        result = check_ring([[0, 0], [1, 1], [1, 0], [0, 1]])
        assert result.reason == RejectReason.SELF_INTERSECTING_GEOMETRY
        assert "edges 0 and 2" in result.message

    def test_returns_normalized_ring(self):
        assert check_ring([[0, 0], [0, 1], [1, 1], [0, 0]]) == (
            (0.0, 0.0),
            (0.0, 1.0),
            (1.0, 1.0),
        )


def test_close_ring_repeats_first_point():
    assert close_ring([(0, 0), (0, 1), (1, 1)]) == [[0, 0], [0, 1], [1, 1], [0, 0]]
    assert close_ring([]) == []
