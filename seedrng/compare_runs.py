#!/usr/bin/env python3
from __future__ import annotations

"""Check that two run_engine dumps describe bit-identical sequences."""

import argparse
import json
from pathlib import Path
from typing import Any, Dict, Optional, Sequence


def load_json(path: Path) -> Dict[str, Any]:
    """Read a JSON file and return the parsed dictionary."""
    with path.open() as f:
        return json.load(f)


def compare_dumps(lhs: Dict[str, Any], rhs: Dict[str, Any]) -> None:
    """Raise ``AssertionError`` at the first field where the dumps disagree."""
    for field in ("engine", "count"):
        if lhs.get(field) != rhs.get(field):
            raise AssertionError(f"{field} mismatch: {lhs.get(field)} vs {rhs.get(field)}")

    lhs_values = lhs.get("values", [])
    rhs_values = rhs.get("values", [])
    if len(lhs_values) != len(rhs_values):
        raise AssertionError(f"values length mismatch: {len(lhs_values)} vs {len(rhs_values)}")
    for i, (lv, rv) in enumerate(zip(lhs_values, rhs_values)):
        # Exact equality: any drift means the kernels diverged.
        if lv != rv:
            raise AssertionError(f"values[{i}] mismatch: {lv!r} vs {rv!r}")

    if lhs.get("state") != rhs.get("state"):
        raise AssertionError("final state mismatch")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Compare two run_engine JSON outputs.")
    parser.add_argument("--lhs", required=True, help="Path to the first JSON output.")
    parser.add_argument("--rhs", required=True, help="Path to the second JSON output.")
    args = parser.parse_args(argv)

    compare_dumps(load_json(Path(args.lhs)), load_json(Path(args.rhs)))
    print("Engine outputs match for all comparable fields.")


if __name__ == "__main__":
    main()
