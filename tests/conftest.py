"""Shared fixtures; also makes the seedrng package importable for local pytest runs."""

import sys
from pathlib import Path
from typing import List, Sequence

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from seedrng.factory import EngineType, create_engine_from_seed
from seedrng.rng_engine import RngEngine

ALL_VARIANTS = [e.value for e in EngineType]


class FixedEngine(RngEngine):
    """Engine that replays a scripted list of draws."""

    variant = "fixed"

    def __init__(self, draws: Sequence[float]) -> None:
        self.draws: List[float] = list(draws)
        self.calls = 0

    def next(self) -> float:
        value = self.draws[self.calls]
        self.calls += 1
        return value

    def get_state(self) -> str:
        return str(self.calls)

    def set_state(self, state: str) -> None:
        self.calls = int(state)


@pytest.fixture
def fixed_engine():
    return FixedEngine


@pytest.fixture(params=ALL_VARIANTS)
def variant(request):
    return request.param


@pytest.fixture
def seeded(variant):
    """Factory for engines of the parametrised variant."""

    def build(seed: int = 12345) -> RngEngine:
        return create_engine_from_seed(variant, seed)

    return build
