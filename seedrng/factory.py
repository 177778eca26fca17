from __future__ import annotations

"""Engine construction by variant tag, from a seed source or a saved state."""

import logging
from enum import Enum
from typing import Callable, Dict, Optional, Union

from seedrng.errors import UnsupportedVariantError
from seedrng.mersenne_twister import MersenneTwisterEngine
from seedrng.mulberry32 import Mulberry32Engine
from seedrng.rng_engine import RngEngine
from seedrng.seed import generate_seed
from seedrng.xorshift128plus import XorShift128PlusEngine

logger = logging.getLogger(__name__)

# Placeholder seed for engines that are about to have their state overwritten.
RESTORE_SEED = 100


class EngineType(str, Enum):
    MULBERRY32 = "mulberry32"
    XORSHIFT128PLUS = "xorshift128plus"
    MERSENNE_TWISTER = "mersenne-twister"


EngineTag = Union[EngineType, str]

ENGINE_CLASSES: Dict[str, Callable[[int], RngEngine]] = {
    EngineType.MULBERRY32.value: Mulberry32Engine,
    EngineType.XORSHIFT128PLUS.value: XorShift128PlusEngine,
    EngineType.MERSENNE_TWISTER.value: MersenneTwisterEngine,
}


def _resolve(variant: EngineTag) -> Callable[[int], RngEngine]:
    key = variant.value if isinstance(variant, EngineType) else variant
    try:
        return ENGINE_CLASSES[key]
    except (KeyError, TypeError):
        raise UnsupportedVariantError(variant) from None


def create_engine_from_seed(variant: EngineTag, seed: int) -> RngEngine:
    """Build an engine of ``variant`` from an already numeric seed."""
    engine_cls = _resolve(variant)
    engine = engine_cls(seed)
    logger.debug("Created %s engine from seed %d", engine.variant, seed)
    return engine


def create_engine(variant: EngineTag, seed: Optional[str] = None) -> RngEngine:
    """Build an engine of ``variant`` seeded from the string ``seed``.

    Without a seed source the engine gets a non-deterministic seed.
    """
    engine_cls = _resolve(variant)
    numeric_seed = generate_seed(seed)
    engine = engine_cls(numeric_seed)
    logger.debug("Created %s engine from seed source %r (seed %d)", engine.variant, seed, numeric_seed)
    return engine


def create_engine_with_state(variant: EngineTag, state: str) -> RngEngine:
    """Build an engine of ``variant`` and resume it from a ``get_state()`` snapshot."""
    engine = create_engine_from_seed(variant, RESTORE_SEED)
    engine.set_state(state)
    return engine
