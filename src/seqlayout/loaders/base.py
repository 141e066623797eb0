"""Base loader protocol."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from seqlayout.ir.model import DiagramModel
from seqlayout.style import StyleTable


@dataclass
class LoadedDiagram:
    """A populated model plus the presentation parameters that came with it."""

    model: DiagramModel
    style: StyleTable = field(default_factory=StyleTable)


class Loader(Protocol):
    """Protocol that all document loaders must implement."""

    def load(self, document: Any) -> LoadedDiagram:
        """Populate a fresh DiagramModel from ``document``."""
        ...
