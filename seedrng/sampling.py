from __future__ import annotations

"""Sampling helpers that draw only through the ``RngEngine.next`` contract."""

import math
from typing import Callable, List, Sequence, Set, TypeVar

from seedrng.errors import InvalidArgumentError
from seedrng.rng_engine import RngEngine

T = TypeVar("T")


def _scaled_index(draw: float, size: int) -> int:
    # XorShift128+ can round a draw up to exactly 1.0; keep it in the top slot.
    return min(math.floor(draw * size), size - 1)


def random_in_range(engine: RngEngine, min_value: int, max_value: int) -> int:
    """Return an integer in ``[min_value, max_value]`` (both inclusive)."""
    if min_value > max_value:
        raise InvalidArgumentError(f"Min {min_value} is out of range {max_value}")
    return _scaled_index(engine.next(), max_value - min_value + 1) + min_value


def random_item_from_array(engine: RngEngine, items: Sequence[T]) -> T:
    """Pick one element uniformly at random."""
    if len(items) == 0:
        raise InvalidArgumentError("Can't get an item from an empty array")
    return items[_scaled_index(engine.next(), len(items))]


def random_items_from_array(engine: RngEngine, items: Sequence[T], count: int) -> List[T]:
    """Pick ``count`` distinct positions of ``items``, returned in draw order.

    Asking for every element returns a copy in the original order and draws
    nothing. Otherwise indices are drawn with :func:`random_in_range` and
    duplicates are rejected, so the engine may be advanced more than ``count``
    times.
    """
    if count <= 0:
        raise InvalidArgumentError("You must request at least 1 item.")
    if count > len(items):
        raise InvalidArgumentError("You can't request more items than the array size.")
    if count == len(items):
        return list(items)

    selected: Set[int] = set()
    result: List[T] = []
    while len(selected) < count:
        index = random_in_range(engine, 0, len(items) - 1)
        if index not in selected:
            selected.add(index)
            result.append(items[index])
    return result


def random_with_weights(engine: RngEngine, items: Sequence[T], get_weight: Callable[[T], float]) -> T:
    """Pick an element with probability proportional to ``get_weight(item)``.

    The first element whose cumulative weight exceeds the scaled draw wins.
    When nothing qualifies (all weights zero, or rounding pushed the draw up
    to the total) the last element is returned.
    """
    if len(items) == 0:
        raise InvalidArgumentError("Can't get an item from an empty array")
    total_weight = sum(get_weight(item) for item in items)
    target = engine.next() * total_weight

    cumulative = 0.0
    for item in items:
        cumulative += get_weight(item)
        if target < cumulative:
            return item
    return items[-1]


def shuffle(engine: RngEngine, items: Sequence[T]) -> List[T]:
    """Return a Fisher-Yates shuffled copy; ``items`` is left untouched."""
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = _scaled_index(engine.next(), i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
