"""Deterministic seedable RNG engines and the sampling helpers built on them."""

from .errors import InvalidArgumentError, InvalidStateError, RngError, UnsupportedVariantError
from .factory import EngineType, create_engine, create_engine_from_seed, create_engine_with_state
from .mersenne_twister import MersenneTwisterEngine
from .mulberry32 import Mulberry32Engine
from .rng_engine import RngEngine
from .sampling import (
    random_in_range,
    random_item_from_array,
    random_items_from_array,
    random_with_weights,
    shuffle,
)
from .seed import generate_seed, hash_string_to_seed
from .xorshift128plus import XorShift128PlusEngine

__all__ = [
    "RngEngine",
    "Mulberry32Engine",
    "XorShift128PlusEngine",
    "MersenneTwisterEngine",
    "EngineType",
    "create_engine",
    "create_engine_from_seed",
    "create_engine_with_state",
    "generate_seed",
    "hash_string_to_seed",
    "random_in_range",
    "random_item_from_array",
    "random_items_from_array",
    "random_with_weights",
    "shuffle",
    "RngError",
    "InvalidArgumentError",
    "InvalidStateError",
    "UnsupportedVariantError",
]
