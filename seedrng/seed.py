from __future__ import annotations

"""Seed derivation from optional string seed sources."""

import random
from typing import Optional

UNSEEDED_RANGE = (1, 100000)


def _utf16_units(text: str):
    """Yield UTF-16 code units so astral characters fold as surrogate pairs."""
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def hash_string_to_seed(text: str) -> int:
    """Fold ``text`` into an unsigned 32-bit seed with the ``h * 31 + c`` hash."""
    h = 0
    for unit in _utf16_units(text):
        h = (h * 31 + unit) & 0xFFFFFFFF
    return h


def generate_seed(text: Optional[str] = None) -> int:
    """Return a deterministic seed for ``text`` or a fresh random one when absent."""
    if text is None:
        return random.randrange(*UNSEEDED_RANGE)
    return hash_string_to_seed(text)
