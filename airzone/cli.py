"""Command line checks for zone boundaries.

Usage:
    python -m airzone.cli validate zone.geojson [more.geojson ...]
    python -m airzone.cli golden tests/golden/ring_vectors.json

``golden`` replays shared ring vectors through the geometry kernel. Any
other implementation of the editor check (e.g. the browser one) runs the
same file, which keeps the two verdicts identical.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from airzone.contracts.verdict import Rejected
from airzone.services.geometry import EPSILON, check_ring
from airzone.services.zone_validator import validate_boundary

logger = logging.getLogger(__name__)

ACCEPTED = "accepted"


def verdict_label(result: Any) -> str:
    """``accepted`` or the rejection's reason code."""
    if isinstance(result, Rejected):
        return result.reason.value
    return ACCEPTED


def run_vector(vector: dict[str, Any]) -> str:
    if "boundary" in vector:
        return verdict_label(validate_boundary(vector["boundary"]))
    return verdict_label(check_ring(vector["ring"]))


def check_golden(path: Path) -> list[str]:
    """Replay a vector file; returns one line per mismatch."""
    payload = json.loads(path.read_text())
    if payload.get("epsilon", EPSILON) != EPSILON:
        logger.warning(
            "Vector file tolerance %s differs from kernel tolerance %s",
            payload["epsilon"],
            EPSILON,
        )
    failures = []
    for vector in payload["vectors"]:
        got = run_vector(vector)
        if got != vector["expected"]:
            failures.append(f"{vector['name']}: expected {vector['expected']}, got {got}")
    logger.info("Checked %d vectors, %d mismatches", len(payload["vectors"]), len(failures))
    return failures


def _validate_files(paths: list[Path]) -> int:
    exit_code = 0
    for path in paths:
        result = validate_boundary(path.read_text())
        if isinstance(result, Rejected):
            print(f"{path}: {result.reason.value}: {result.message}")
            exit_code = 1
        else:
            print(f"{path}: ok ({len(result.ring)} vertices)")
    return exit_code


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="airzone boundary checks")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    p_validate = sub.add_parser("validate", help="Validate GeoJSON Polygon files")
    p_validate.add_argument("paths", type=Path, nargs="+")

    p_golden = sub.add_parser("golden", help="Replay shared ring vectors")
    p_golden.add_argument("vectors", type=Path)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "validate":
        return _validate_files(args.paths)

    failures = check_golden(args.vectors)
    for line in failures:
        print(line)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
