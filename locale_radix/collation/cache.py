"""Memoized locale comparisons.

Two maps back every lookup: one ICU engine per locale, created on first use,
and one result per ``(locale, left, right)`` triple. Entries are directional;
``(a, b)`` never answers a request for ``(b, a)``. Nothing is evicted.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass

from locale_radix.collation.engine import ComparisonEngine, EngineFactory, icu_engine_factory, parse_sensitivity
from locale_radix.common.constants import DEFAULT_SENSITIVITY


@dataclass(frozen=True)
class CacheStats:
    hits: int
    misses: int
    engines: int
    entries: int


class ComparisonCache:
    def __init__(
        self,
        engine_factory: EngineFactory | None = None,
        *,
        sensitivity: str = DEFAULT_SENSITIVITY,
    ) -> None:
        self.sensitivity = parse_sensitivity(sensitivity)
        self.engine_factory = engine_factory or icu_engine_factory(self.sensitivity)
        self.engines: dict[str, ComparisonEngine] = {}
        self.results: dict[tuple[str, str, str], int] = {}
        self.hits = 0
        self.misses = 0
        self.lock = threading.Lock()

    def _engine(self, locale: str) -> ComparisonEngine:
        engine = self.engines.get(locale)
        if engine is None:
            engine = self.engine_factory(locale)
            self.engines[locale] = engine
        return engine

    def compare(self, left: str, right: str, locale: str) -> int:
        cache_key = (locale, left, right)
        with self.lock:
            cached = self.results.get(cache_key)
            if cached is not None:
                self.hits += 1
                return cached
            result = self._engine(locale).compare(left, right)
            self.results[cache_key] = result
            self.misses += 1
            return result

    def stats(self) -> CacheStats:
        with self.lock:
            return CacheStats(
                hits=self.hits,
                misses=self.misses,
                engines=len(self.engines),
                entries=len(self.results),
            )

    def clear(self) -> None:
        with self.lock:
            self.engines.clear()
            self.results.clear()
            self.hits = 0
            self.misses = 0


_default_cache: ComparisonCache | None = None
_default_cache_lock = threading.Lock()


def default_cache() -> ComparisonCache:
    """Process-wide cache backing :func:`locale_radix.sorting.radix.radix_sort`."""
    global _default_cache
    with _default_cache_lock:
        if _default_cache is None:
            _default_cache = ComparisonCache()
        return _default_cache
