from __future__ import annotations

"""XorShift128+ generator over two 64-bit words."""

import json
import logging
from typing import List

from seedrng.errors import InvalidArgumentError, InvalidStateError
from seedrng.rng_engine import UINT64_MASK, UINT64_SCALE, RngEngine

logger = logging.getLogger(__name__)

# Odd 64-bit constant (golden ratio) used to derive the second word from the seed.
GOLDEN_GAMMA = 0x9E3779B97F4A7C15


class XorShift128PlusEngine(RngEngine):
    """XorShift128+ with the word swap performed on every step.

    ``state[0]`` is read as ``s1`` and ``state[1]`` as ``s0``; after a step
    the old ``s0`` moves into slot 0 and the freshly mixed word into slot 1.
    """

    variant = "xorshift128plus"

    def __init__(self, seed: int) -> None:
        if seed == 0:
            raise InvalidArgumentError("Seed value cannot be zero.")
        first = int(seed) & UINT64_MASK
        self.state: List[int] = [first, (first ^ GOLDEN_GAMMA) & UINT64_MASK]

    def next_u64(self) -> int:
        """Advance one step and return the raw 64-bit output."""
        s1, s0 = self.state
        self.state[0] = s0
        s1 ^= (s1 << 23) & UINT64_MASK
        self.state[1] = (s1 ^ s0 ^ (s1 >> 17) ^ (s0 >> 26)) & UINT64_MASK
        return (self.state[1] + s0) & UINT64_MASK

    def next(self) -> float:
        # int / int is correctly rounded, so outputs just under 2**64 round to
        # 1.0 the same way a double-precision reference does.
        return self.next_u64() / UINT64_SCALE

    def get_state(self) -> str:
        return json.dumps([str(word) for word in self.state])

    def set_state(self, state: str) -> None:
        try:
            parsed = json.loads(state)
        except (TypeError, ValueError) as exc:
            raise InvalidStateError(f"Failed to parse XorShift128+ state: {exc}") from exc
        if not isinstance(parsed, list) or len(parsed) != 2:
            raise InvalidStateError("Invalid state format: expected a list of two 64-bit words.")
        try:
            words = [int(word) & UINT64_MASK for word in parsed]
        except (TypeError, ValueError, OverflowError) as exc:
            raise InvalidStateError(f"Invalid state format: {exc}") from exc
        self.state = words
        logger.debug("Restored xorshift128plus state %s", words)
