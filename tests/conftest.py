"""Shared fixtures: deterministic text metrics and small prebuilt diagrams."""

from __future__ import annotations

import pytest

from seqlayout.config import LayoutConfig
from seqlayout.ir.model import DiagramModel
from seqlayout.layout.engine import SequenceLayout


class StubMetrics:
    """Every glyph is 6pt wide, every text block 10pt tall."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, float]] = []

    def measure(self, text: str, font: str, max_width: float) -> tuple[float, float]:
        self.calls.append((text, font, max_width))
        return (6.0 * len(text), 10.0)


@pytest.fixture
def metrics() -> StubMetrics:
    return StubMetrics()


@pytest.fixture
def engine(metrics: StubMetrics) -> SequenceLayout:
    return SequenceLayout(LayoutConfig(), metrics)


@pytest.fixture
def three_actors() -> DiagramModel:
    """Actors a0, a1, a2 in columns 0..2 titled A, B, C."""
    model = DiagramModel()
    for column, title in enumerate("ABC"):
        model.add_actor(f"a{column}", None, column, title)
    return model
