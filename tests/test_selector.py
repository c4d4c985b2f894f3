"""Tests for the seeded offer selector."""

import pytest

from wego_planner.agents.selector import rotate, select
from wego_planner.catalog import DEFAULT_CATALOG


def _ids(offers):
    return [o.id for o in offers]


def test_select_matches_browser_shuffle_for_known_seeds():
    ids = ["q1", "q2", "q3", "q4", "q5", "q6"]

    assert select(ids, 3, 1) == ["q1", "q4", "q5"]
    assert select(ids, 3, 2) == ["q3", "q5", "q4"]
    assert select(ids, 6, 11) == ["q6", "q3", "q1", "q2", "q5", "q4"]
    assert select(["a", "b", "c", "d", "e"], 5, 7) == ["b", "d", "a", "e", "c"]


@pytest.mark.parametrize("seed", [1, 2, 3, 11, 12, 97, 233279, 10**6])
@pytest.mark.parametrize("count", [0, 1, 3, 6, 10])
def test_select_returns_permutation_prefix(seed, count):
    items = list(range(6))
    picked = select(items, count, seed)

    assert len(picked) == min(count, len(items))
    assert len(set(picked)) == len(picked)
    assert set(picked) <= set(items)


def test_select_is_repeatable_across_equal_inputs():
    first = select([o for o in DEFAULT_CATALOG], 3, 5)
    second = select(tuple(DEFAULT_CATALOG), 3, 5)

    assert first == second
    assert _ids(first) == _ids(select(list(DEFAULT_CATALOG), 3, 5))


@pytest.mark.parametrize("size", range(2, 9))
def test_initial_and_recommendation_seeds_differ(size):
    items = list(range(size))
    assert select(items, size, 1) != select(items, size, 11)


def test_select_does_not_mutate_input():
    items = ["a", "b", "c", "d"]
    select(items, 4, 3)
    assert items == ["a", "b", "c", "d"]


def test_zero_or_missing_seed_behaves_like_one():
    items = list(range(6))
    assert select(items, 6, 0) == select(items, 6, 1)
    assert select(items, 6, None) == select(items, 6, 1)


def test_select_handles_trivial_inputs():
    assert select([], 3, 4) == []
    assert select(["only"], 3, 4) == ["only"]
    assert select(["a", "b"], -1, 1) == []


def test_rotate_uses_default_display_count():
    assert _ids(rotate(DEFAULT_CATALOG, 1)) == ["q1", "q4", "q5"]
    assert _ids(rotate(DEFAULT_CATALOG, 2)) == ["q3", "q5", "q4"]
    assert len(rotate(DEFAULT_CATALOG, 1, count=5)) == 5
