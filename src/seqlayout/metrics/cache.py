"""Memoizing wrapper around any TextMetrics implementation."""

from __future__ import annotations

from seqlayout.metrics.base import TextMetrics


class CachedMetrics:
    """Caches measurements per (text, font, max_width)."""

    def __init__(self, inner: TextMetrics) -> None:
        self.inner = inner
        self._cache: dict[tuple[str, str, float], tuple[float, float]] = {}
        self.hits = 0
        self.misses = 0

    def measure(self, text: str, font: str, max_width: float) -> tuple[float, float]:
        key = (text, font, max_width)
        cached = self._cache.get(key)
        if cached is not None:
            self.hits += 1
            return cached
        self.misses += 1
        result = self.inner.measure(text, font, max_width)
        self._cache[key] = result
        return result

    def clear(self) -> None:
        self._cache.clear()
        self.hits = 0
        self.misses = 0
