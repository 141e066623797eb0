"""Bridge between the layout passes and the text metrics port."""

from __future__ import annotations

import logging

from seqlayout.layout.types import TextBlock
from seqlayout.metrics.base import TextMetrics

logger = logging.getLogger(__name__)


def measure_text(metrics: TextMetrics, text: str | None, font: str, max_width: float) -> TextBlock | None:
    """Measure ``text`` or return None when there is nothing to measure."""
    if text is None:
        return None
    width, height = metrics.measure(text, font, max(max_width, 0.0))
    logger.debug("measured %r in %r (max %g): %g x %g", text, font, max_width, width, height)
    return TextBlock(text=text, width=width, height=height)
