"""Tests for the boundary check command line."""

from __future__ import annotations

import json
from pathlib import Path

from airzone.cli import check_golden, main

VECTORS_PATH = Path(__file__).resolve().parent / "golden" / "ring_vectors.json"

SQUARE = {"type": "Polygon", "coordinates": [[[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]]]}
BOWTIE = {"type": "Polygon", "coordinates": [[[0, 0], [1, 1], [1, 0], [0, 1], [0, 0]]]}


def test_shipped_vectors_pass():
    assert check_golden(VECTORS_PATH) == []


def test_golden_reports_mismatch(tmp_path):
    vectors = tmp_path / "vectors.json"
    vectors.write_text(json.dumps({
        "epsilon": 1e-9,
        "vectors": [{"name": "bowtie", "ring": BOWTIE["coordinates"][0], "expected": "accepted"}],
    }))

    failures = check_golden(vectors)
    assert failures == ["bowtie: expected accepted, got SelfIntersectingGeometry"]
    assert main(["golden", str(vectors)]) == 1


def test_validate_files(tmp_path, capsys):
    good = tmp_path / "good.geojson"
    good.write_text(json.dumps(SQUARE))
    bad = tmp_path / "bad.geojson"
    bad.write_text(json.dumps(BOWTIE))

    assert main(["validate", str(good)]) == 0
    assert main(["validate", str(good), str(bad)]) == 1

    out = capsys.readouterr().out
    assert "good.geojson: ok (4 vertices)" in out
    assert "bad.geojson: SelfIntersectingGeometry" in out
