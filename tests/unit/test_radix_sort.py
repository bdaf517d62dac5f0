from __future__ import annotations

import random

import pytest

from locale_radix.collation.cache import ComparisonCache
from locale_radix.sorting.radix import TERMINAL, RadixSorter, SortState, radix_sort


class CasefoldEngine:
    """Stands in for a base-sensitivity collator: case-insensitive code point order."""

    def __init__(self, calls: list):
        self.calls = calls

    def compare(self, left: str, right: str) -> int:
        self.calls.append((left, right))
        a, b = left.casefold(), right.casefold()
        return (a > b) - (a < b)


@pytest.fixture
def engine_calls() -> list:
    return []


@pytest.fixture
def sorter(engine_calls) -> RadixSorter:
    return RadixSorter(ComparisonCache(lambda locale: CasefoldEngine(engine_calls)))


def identity(value: str) -> str:
    return value


def test_sort_empty_input_returns_empty_list(sorter, engine_calls):
    def to_key(_item):
        raise AssertionError("to_key must not be called")

    assert sorter.sort([], "en", to_key) == []
    assert engine_calls == []


def test_sort_single_item(sorter):
    assert sorter.sort(["x"], "en", identity) == ["x"]


def test_sort_is_case_insensitive_under_base_comparison(sorter):
    assert sorter.sort(["bob", "Alice", "charlie"], "en", identity) == ["Alice", "bob", "charlie"]


def test_sort_places_prefix_before_longer_keys(sorter):
    assert sorter.sort(["ABCD", "ABC", "ABCE"], "en", identity) == ["ABC", "ABCD", "ABCE"]


def test_sort_emits_empty_key_first(sorter):
    assert sorter.sort(["b", "", "a"], "en", identity) == ["", "a", "b"]


def test_sort_keeps_duplicate_keys_in_input_order(sorter):
    items = [{"id": 1, "name": "Anne"}, {"id": 2, "name": "anna"}, {"id": 3, "name": "Anne"}]

    ordered = sorter.sort(items, "en", lambda item: item["name"])

    assert [item["id"] for item in ordered] == [1, 3, 2]
    assert ordered[0] is items[0]


def test_sort_keeps_first_seen_order_for_labels_that_compare_equal(sorter):
    # "a" and "A" tie at depth 0, so their buckets keep arrival order.
    assert sorter.sort(["ab", "Aa"], "en", identity) == ["ab", "Aa"]


def test_sort_matches_sorted_for_lowercase_words(sorter):
    rng = random.Random(1729)
    words = ["".join(rng.choice("abcde") for _ in range(rng.randint(0, 6))) for _ in range(300)]

    ordered = sorter.sort(words, "en", identity)

    assert ordered == sorted(words)
    assert sorted(ordered) == sorted(words)


def test_sort_is_idempotent(sorter):
    first = sorter.sort(["pear", "Apple", "fig", "apple", "Fig", "date"], "en", identity)
    assert sorter.sort(first, "en", identity) == first


def test_sort_calls_to_key_once_per_item(sorter):
    seen = []

    def to_key(item):
        seen.append(item)
        return item["name"]

    items = [{"name": "bb"}, {"name": "ba"}, {"name": "a"}]
    sorter.sort(items, "en", to_key)

    assert len(seen) == 3


def test_sort_propagates_to_key_failures(sorter):
    with pytest.raises(KeyError):
        sorter.sort([{"name": "a"}, {}], "en", lambda item: item["name"])


def test_sort_only_compares_single_characters(sorter, engine_calls):
    sorter.sort(["ABC", "ABCD", "AB", "B", "", "ABCE"], "en", identity)

    assert engine_calls
    for left, right in engine_calls:
        assert isinstance(left, str) and len(left) == 1
        assert isinstance(right, str) and len(right) == 1


def test_second_sort_reuses_cached_character_comparisons(sorter, engine_calls):
    assert sorter.sort(["Apple", "Banana"], "en", identity) == ["Apple", "Banana"]
    calls_after_first = list(engine_calls)

    assert sorter.sort(["Avocado", "Blueberry"], "en", identity) == ["Avocado", "Blueberry"]

    assert engine_calls == calls_after_first


def test_sort_handles_long_shared_prefixes(sorter):
    prefix = "x" * 300
    items = [prefix + "b", prefix, prefix + "a"]
    assert sorter.sort(items, "en", identity) == [prefix, prefix + "a", prefix + "b"]


def test_radix_sort_uses_given_cache(engine_calls):
    cache = ComparisonCache(lambda locale: CasefoldEngine(engine_calls))

    assert radix_sort(["b", "a"], "en", identity, cache=cache) == ["a", "b"]
    assert cache.stats().misses == 1


def test_sort_state_routes_exhausted_keys_to_terminal():
    state = SortState(original="ab", key="ab")

    assert state.next_label() == "a"
    assert state.next_label() == "b"
    assert state.next_label() is TERMINAL
    assert state.next_label() is TERMINAL
    assert state.cursor == 4


def test_sort_propagates_engine_failures():
    class CollatorUnavailable(Exception):
        pass

    def factory(locale: str):
        raise CollatorUnavailable(locale)

    sorter = RadixSorter(ComparisonCache(factory))

    with pytest.raises(CollatorUnavailable, match="xx-INVALID"):
        sorter.sort(["b", "", "a"], "xx-INVALID", identity)
    assert sorter.cache.stats().entries == 0


def test_sort_orders_labels_under_the_requested_locale():
    class ReversedEngine(CasefoldEngine):
        def compare(self, left: str, right: str) -> int:
            return -super().compare(left, right)

    calls: list = []

    def factory(locale: str):
        return ReversedEngine(calls) if locale == "zz" else CasefoldEngine(calls)

    sorter = RadixSorter(ComparisonCache(factory))
    words = ["bob", "Alice", "charlie", "al"]

    assert sorter.sort(words, "en", identity) == ["Alice", "al", "bob", "charlie"]
    assert sorter.sort(words, "zz", identity) == ["charlie", "bob", "Alice", "al"]
    assert sorter.cache.stats().engines == 2


def test_sort_walks_astral_characters_as_single_labels(sorter, engine_calls):
    ordered = sorter.sort(["a\U0001F601", "a\U0001F600", "a"], "en", identity)

    assert ordered == ["a", "a\U0001F600", "a\U0001F601"]
    assert ("\U0001F600", "\U0001F601") in engine_calls or ("\U0001F601", "\U0001F600") in engine_calls
    state = SortState(original="a\U0001F600", key="a\U0001F600")
    assert [state.next_label(), state.next_label()] == ["a", "\U0001F600"]
    assert state.next_label() is TERMINAL
