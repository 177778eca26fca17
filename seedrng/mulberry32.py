from __future__ import annotations

"""Mulberry32: a single 32-bit word generator with a Math.random-like interface."""

import logging
import re
from dataclasses import dataclass, field

from seedrng.errors import InvalidStateError
from seedrng.rng_engine import UINT32_MASK, UINT32_SCALE, RngEngine

logger = logging.getLogger(__name__)

MULBERRY32_INCREMENT = 0x6D2B79F5
DECIMAL_STATE = re.compile(r"[+-]?[0-9]+")


@dataclass(repr=False)
class Mulberry32Engine(RngEngine):
    """Mulberry32 generator; the whole state is one 32-bit word."""

    seed: int
    _state: int = field(init=False)

    variant = "mulberry32"

    def __post_init__(self) -> None:
        self._state = int(self.seed)

    def next(self) -> float:
        """Return a float in [0, 1) using the Mulberry32 mix."""
        state = (self._state + MULBERRY32_INCREMENT) & UINT32_MASK
        self._state = state
        t = ((state ^ (state >> 15)) * (state | 1)) & UINT32_MASK
        t = ((t + (((t ^ (t >> 7)) * (t | 61)) & UINT32_MASK)) & UINT32_MASK) ^ t
        return ((t ^ (t >> 14)) & UINT32_MASK) / UINT32_SCALE

    def get_state(self) -> str:
        return str(self._state)

    def set_state(self, state: str) -> None:
        # Out-of-range values are accepted; next() masks them to 32 bits.
        text = str(state).strip()
        if not DECIMAL_STATE.fullmatch(text):
            raise InvalidStateError(f"Mulberry32 state must be a decimal integer, got {state!r}")
        self._state = int(text, 10)
        logger.debug("Restored mulberry32 state %d", self._state)
