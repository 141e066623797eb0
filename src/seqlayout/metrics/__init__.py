"""Text metrics port and its bundled adapters."""

from seqlayout.metrics.base import TextMetrics
from seqlayout.metrics.cache import CachedMetrics
from seqlayout.metrics.fixed import FixedPitchMetrics, font_size, strip_markup, wrap_lines

__all__ = [
    "CachedMetrics",
    "FixedPitchMetrics",
    "TextMetrics",
    "font_size",
    "strip_markup",
    "wrap_lines",
]
