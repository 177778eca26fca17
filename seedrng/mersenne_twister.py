from __future__ import annotations

"""MT19937 Mersenne Twister returning floats in [0, 1)."""

import json
import logging
from typing import Any, List, Optional

from seedrng.errors import InvalidStateError
from seedrng.rng_engine import UINT32_MASK, UINT32_SCALE, RngEngine
from seedrng.seed import generate_seed

logger = logging.getLogger(__name__)

STATE_SIZE = 624
SHIFT_SIZE = 397
MATRIX_A = 0x9908B0DF
UPPER_MASK = 0x80000000
LOWER_MASK = 0x7FFFFFFF
INIT_MULTIPLIER = 1812433253


class MersenneTwisterEngine(RngEngine):
    """Classic 624-word MT19937 with lazy twisting.

    The state is regenerated whenever ``index`` is 0, i.e. on the first call
    and then once every 624 outputs.
    """

    variant = "mersenne-twister"

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = generate_seed()
        self.index = 0
        mt = [0] * STATE_SIZE
        mt[0] = int(seed) & UINT32_MASK
        for i in range(1, STATE_SIZE):
            prev = mt[i - 1]
            mt[i] = (INIT_MULTIPLIER * (prev ^ (prev >> 30)) + i) & UINT32_MASK
        self.mt: List[int] = mt

    def _twist(self) -> None:
        """Regenerate all 624 words in place."""
        mt = self.mt
        for i in range(STATE_SIZE):
            y = (mt[i] & UPPER_MASK) | (mt[(i + 1) % STATE_SIZE] & LOWER_MASK)
            word = mt[(i + SHIFT_SIZE) % STATE_SIZE] ^ (y >> 1)
            if y & 1:
                word ^= MATRIX_A
            mt[i] = word

    def next_u32(self) -> int:
        """Return the next tempered 32-bit word."""
        if self.index == 0:
            self._twist()
        y = self.mt[self.index]
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        self.index = (self.index + 1) % STATE_SIZE
        return y & UINT32_MASK

    def next(self) -> float:
        return self.next_u32() / UINT32_SCALE

    def get_state(self) -> str:
        return json.dumps({"MT": list(self.mt), "index": self.index})

    def set_state(self, state: str) -> None:
        try:
            parsed: Any = json.loads(state)
        except (TypeError, ValueError) as exc:
            raise InvalidStateError(f"Failed to parse state: {exc}") from exc
        if not isinstance(parsed, dict):
            raise InvalidStateError("Invalid state format: expected an object with 'MT' and 'index'.")
        words = parsed.get("MT")
        index = parsed.get("index")
        if not isinstance(words, list) or len(words) != STATE_SIZE:
            raise InvalidStateError(f"Invalid state format: 'MT' must be a list of {STATE_SIZE} words.")
        if isinstance(index, bool) or not isinstance(index, (int, float)):
            raise InvalidStateError(f"Invalid state format: 'index' must be numeric, got {index!r}.")
        if (isinstance(index, float) and not index.is_integer()) or not 0 <= index < STATE_SIZE:
            raise InvalidStateError(f"Invalid state format: 'index' must be an integer in [0, {STATE_SIZE}).")
        try:
            mt = [int(word) & UINT32_MASK for word in words]
        except (TypeError, ValueError, OverflowError) as exc:
            raise InvalidStateError(f"Invalid state format: {exc}") from exc
        self.mt = mt
        self.index = int(index)
        logger.debug("Restored mersenne-twister state at index %d", self.index)
