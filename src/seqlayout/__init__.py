"""seqlayout: arrange sequence diagrams into page geometry."""

from __future__ import annotations

from typing import Any

from seqlayout.config import LayoutConfig
from seqlayout.errors import LayoutError
from seqlayout.ir.model import DiagramModel
from seqlayout.layout.engine import SequenceLayout, arrange
from seqlayout.layout.types import Layout
from seqlayout.loaders import load, loads
from seqlayout.metrics.base import TextMetrics
from seqlayout.renderers.json import JsonRenderer

__all__ = [
    "DiagramModel",
    "Layout",
    "LayoutConfig",
    "LayoutError",
    "SequenceLayout",
    "arrange",
    "layout_document",
    "load",
    "loads",
    "render_json",
]


def layout_document(
    document: Any,
    config: LayoutConfig | None = None,
    metrics: TextMetrics | None = None,
) -> Layout:
    """Load a diagram document and arrange it.

    Args:
        document: A decoded mapping, or JSON text.
        config: Page and spacing parameters; defaults to US Letter with half-inch margins.
        metrics: Text measurement backend; defaults to fixed-pitch estimates.

    Returns:
        The arranged Layout.

    Raises:
        ValueError: If the document is malformed or violates a diagram constraint
            (LayoutError is a ValueError subclass).
    """
    loaded = loads(document) if isinstance(document, str) else load(document)
    return SequenceLayout(config, metrics, loaded.style).layout(loaded.model)


def render_json(document: Any, config: LayoutConfig | None = None, indent: int | None = 2) -> str:
    """Load, arrange and serialise a diagram document as JSON text."""
    return JsonRenderer(indent=indent).render(layout_document(document, config))
