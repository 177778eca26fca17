#!/usr/bin/env python3
from __future__ import annotations

"""CLI entry point that draws numbers from one engine and dumps them as JSON."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from seedrng.factory import EngineType, create_engine, create_engine_with_state
from seedrng.rng_engine import RngEngine


def load_state(path: Path) -> str:
    """Read a saved state; accepts a bare snapshot or a previous run dump."""
    text = path.read_text().strip()
    try:
        data = json.loads(text)
    except ValueError:
        return text
    if isinstance(data, dict) and "state" in data and "engine" in data:
        return data["state"]
    return text


def draw(engine: RngEngine, count: int) -> List[float]:
    """Advance ``engine`` ``count`` times."""
    return [engine.next() for _ in range(count)]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw numbers from a seeded RNG engine.")
    parser.add_argument(
        "--engine",
        choices=[e.value for e in EngineType],
        default=EngineType.MULBERRY32.value,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--seed", help="String seed source (omit for a random seed).")
    source.add_argument("--state", help="Resume from a get_state() snapshot.")
    source.add_argument("--state-file", help="Resume from a snapshot or a previous run dump on disk.")
    parser.add_argument("--count", type=int, default=10, help="Number of values to draw.")
    parser.add_argument("--log-level", default="WARNING")
    return parser


def run(args: argparse.Namespace) -> Dict[str, Any]:
    if args.count < 0:
        raise ValueError("--count must be non-negative")
    state: Optional[str] = args.state
    if args.state_file:
        state = load_state(Path(args.state_file))
    if state is not None:
        engine = create_engine_with_state(args.engine, state)
    else:
        engine = create_engine(args.engine, args.seed)
    values = draw(engine, args.count)
    return {
        "engine": args.engine,
        "seed": args.seed,
        "count": args.count,
        "values": values,
        "state": engine.get_state(),
    }


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))
    print(json.dumps(run(args), indent=2))


if __name__ == "__main__":
    main()
