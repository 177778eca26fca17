"""Edge-case policy of the sampling helpers."""

from collections import Counter

import pytest

from seedrng.errors import InvalidArgumentError
from seedrng.sampling import (
    random_in_range,
    random_item_from_array,
    random_items_from_array,
    random_with_weights,
    shuffle,
)

JUST_BELOW_ONE = 0.9999999999


def test_random_in_range_bounds(fixed_engine):
    assert random_in_range(fixed_engine([0.0]), 3, 9) == 3
    assert random_in_range(fixed_engine([JUST_BELOW_ONE]), 3, 9) == 9
    assert random_in_range(fixed_engine([0.5]), -5, 5) == 0


def test_random_in_range_single_value(fixed_engine):
    assert random_in_range(fixed_engine([0.73]), 4, 4) == 4


def test_random_in_range_rejects_inverted_bounds(fixed_engine):
    with pytest.raises(InvalidArgumentError):
        random_in_range(fixed_engine([0.5]), 10, 1)


def test_random_in_range_covers_every_value(seeded):
    engine = seeded(8)
    seen = {random_in_range(engine, 1, 6) for _ in range(2000)}
    assert seen == {1, 2, 3, 4, 5, 6}


def test_random_item_from_array_index(fixed_engine):
    items = ["a", "b", "c", "d"]
    assert random_item_from_array(fixed_engine([0.0]), items) == "a"
    assert random_item_from_array(fixed_engine([0.5]), items) == "c"
    assert random_item_from_array(fixed_engine([JUST_BELOW_ONE]), items) == "d"


def test_random_item_from_array_rejects_empty(fixed_engine):
    with pytest.raises(InvalidArgumentError):
        random_item_from_array(fixed_engine([0.5]), [])


def test_random_items_from_array_rejects_bad_counts(fixed_engine):
    items = [1, 2, 3]
    with pytest.raises(InvalidArgumentError):
        random_items_from_array(fixed_engine([]), items, 0)
    with pytest.raises(InvalidArgumentError):
        random_items_from_array(fixed_engine([]), items, -2)
    with pytest.raises(InvalidArgumentError):
        random_items_from_array(fixed_engine([]), items, 4)


def test_random_items_full_length_is_ordered_copy(fixed_engine):
    items = ["x", "y", "z"]
    engine = fixed_engine([])
    picked = random_items_from_array(engine, items, 3)
    assert picked == items
    assert picked is not items
    assert engine.calls == 0


def test_random_items_rejects_duplicates_in_draw_order(fixed_engine):
    items = ["a", "b", "c", "d", "e"]
    # Indices drawn: 3, 3 (rejected), 0, 3 (rejected), 4.
    engine = fixed_engine([0.7, 0.7, 0.1, 0.65, 0.95])
    assert random_items_from_array(engine, items, 3) == ["d", "a", "e"]
    assert engine.calls == 5


def test_random_items_are_distinct(seeded):
    engine = seeded(31)
    items = list(range(20))
    for _ in range(50):
        picked = random_items_from_array(engine, items, 7)
        assert len(picked) == 7
        assert len(set(picked)) == 7


def test_random_with_weights_selects_by_cumulative_weight(fixed_engine):
    items = [("A", 10), ("B", 30), ("C", 60)]
    engine = fixed_engine([0.05, 0.2, 0.9])
    picks = [random_with_weights(engine, items, lambda item: item[1])[0] for _ in range(3)]
    assert picks == ["A", "B", "C"]


def test_random_with_weights_boundary_goes_to_next_item(fixed_engine):
    items = [("A", 10), ("B", 30), ("C", 60)]
    assert random_with_weights(fixed_engine([0.1]), items, lambda item: item[1])[0] == "B"


def test_random_with_weights_all_zero_returns_last(fixed_engine):
    items = ["first", "middle", "last"]
    assert random_with_weights(fixed_engine([0.3]), items, lambda item: 0) == "last"


def test_random_with_weights_rounding_fallback_returns_last(fixed_engine):
    items = ["a", "b"]
    # A draw that scales to the full total matches no cumulative bucket.
    assert random_with_weights(fixed_engine([1.0]), items, lambda item: 1.0) == "b"


def test_random_with_weights_skips_zero_weight_items(seeded):
    engine = seeded(99)
    items = ["never", "always"]
    weights = {"never": 0, "always": 5}
    for _ in range(200):
        assert random_with_weights(engine, items, weights.get) == "always"


def test_random_with_weights_rejects_empty(fixed_engine):
    with pytest.raises(InvalidArgumentError):
        random_with_weights(fixed_engine([0.5]), [], lambda item: 1)


def test_random_with_weights_tracks_proportions(seeded):
    engine = seeded(4242)
    weights = {"A": 1, "B": 3, "C": 6}
    counts = Counter(random_with_weights(engine, list(weights), weights.get) for _ in range(20_000))
    assert counts["A"] / 20_000 == pytest.approx(0.1, abs=0.02)
    assert counts["B"] / 20_000 == pytest.approx(0.3, abs=0.02)
    assert counts["C"] / 20_000 == pytest.approx(0.6, abs=0.02)


def test_shuffle_does_not_mutate_input(seeded):
    items = list(range(10))
    original = list(items)
    result = shuffle(seeded(3), items)
    assert items == original
    assert sorted(result) == original
    assert len(result) == len(original)


def test_shuffle_keeps_multiset_with_duplicates(seeded):
    items = ["a", "a", "b", "c", "c", "c"]
    assert Counter(shuffle(seeded(11), items)) == Counter(items)


def test_shuffle_fisher_yates_steps(fixed_engine):
    # i=3 -> j=0, i=2 -> j=2, i=1 -> j=0
    engine = fixed_engine([0.1, 0.9, 0.2])
    assert shuffle(engine, [1, 2, 3, 4]) == [2, 4, 3, 1]
    assert engine.calls == 3


def test_shuffle_small_inputs_are_copies(fixed_engine):
    empty = []
    single = ["only"]
    engine = fixed_engine([])
    assert shuffle(engine, empty) == [] and shuffle(engine, empty) is not empty
    result = shuffle(engine, single)
    assert result == ["only"] and result is not single
    assert engine.calls == 0


def test_shuffle_differs_between_engine_sequences(seeded):
    items = list(range(30))
    assert shuffle(seeded(1), items) != shuffle(seeded(2), items)


def test_helpers_accept_tuples(fixed_engine):
    assert random_item_from_array(fixed_engine([0.0]), ("t",)) == "t"
    assert shuffle(fixed_engine([0.0]), (1, 2)) == [2, 1]


def test_draw_of_exactly_one_stays_in_bounds(fixed_engine):
    # XorShift128+ can round its largest raw values up to 1.0.
    assert random_in_range(fixed_engine([1.0]), 3, 9) == 9
    assert random_item_from_array(fixed_engine([1.0]), ["a", "b", "c"]) == "c"
    assert shuffle(fixed_engine([1.0, 1.0, 1.0]), [1, 2, 3, 4]) == [1, 2, 3, 4]
    assert random_items_from_array(fixed_engine([1.0, 0.0]), ["a", "b", "c"], 2) == ["c", "a"]
