"""Base renderer protocol."""

from __future__ import annotations

from typing import Protocol

from seqlayout.layout.types import Layout


class Renderer(Protocol):
    """Protocol that all renderers must implement."""

    def render(self, layout: Layout) -> str:
        """Render an arranged diagram to an output string."""
        ...
