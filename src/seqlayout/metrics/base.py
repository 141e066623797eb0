"""Text metrics port protocol."""

from __future__ import annotations

from typing import Protocol


class TextMetrics(Protocol):
    """Protocol that all text measurement services must implement."""

    def measure(self, text: str, font: str, max_width: float) -> tuple[float, float]:
        """Return the (width, height) ``text`` needs in ``font``.

        ``max_width`` limits the line length; 0 means unconstrained.
        """
        ...
