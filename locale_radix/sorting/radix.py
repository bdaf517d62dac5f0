"""Locale-aware radix sorting of items by string key."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Callable, Generic, Sequence, TypeVar

from locale_radix.collation.cache import ComparisonCache, default_cache

T = TypeVar("T")


class _Terminal:
    def __repr__(self) -> str:
        return "TERMINAL"


# Label for states whose key is fully consumed; never equal to a character.
TERMINAL = _Terminal()


@dataclass
class SortState(Generic[T]):
    original: T
    key: str
    cursor: int = 0

    def next_label(self) -> str | _Terminal:
        label: str | _Terminal = self.key[self.cursor] if self.cursor < len(self.key) else TERMINAL
        self.cursor += 1
        return label


class RadixSorter:
    """Sorts items by recursively bucketing their keys one character at a time.

    Sibling bucket labels are ordered through ``cache``; keys that end at a
    given depth are emitted before any longer key sharing their prefix.
    """

    def __init__(self, cache: ComparisonCache | None = None) -> None:
        self.cache = cache if cache is not None else default_cache()

    def sort(self, inputs: Sequence[T], locale: str, to_key: Callable[[T], str]) -> list[T]:
        results: list[T] = []
        if not inputs:
            return results
        states = [SortState(original=item, key=to_key(item)) for item in inputs]
        self._partition(states, locale, results)
        return results

    def _order_labels(self, labels: list[str], locale: str) -> list[str]:
        return sorted(labels, key=cmp_to_key(lambda left, right: self.cache.compare(left, right, locale)))

    def _partition(self, states: list[SortState[T]], locale: str, results: list[T]) -> None:
        buckets: dict[str | _Terminal, list[SortState[T]]] = {}
        for state in states:
            buckets.setdefault(state.next_label(), []).append(state)

        terminal = buckets.pop(TERMINAL, None)
        if terminal:
            results.extend(state.original for state in terminal)

        for label in self._order_labels(list(buckets), locale):
            self._partition(buckets[label], locale, results)


def radix_sort(
    inputs: Sequence[T],
    locale: str,
    to_key: Callable[[T], str],
    *,
    cache: ComparisonCache | None = None,
) -> list[T]:
    return RadixSorter(cache).sort(inputs, locale, to_key)
