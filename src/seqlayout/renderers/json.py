"""JSON renderer — dumps an arranged diagram for downstream drawing code.

Boxes become ``{"top", "bottom", "start", "end"}`` objects, points become
``{"x", "y"}``, colours become ``[r, g, b, a]`` lists and enums are written
by member name.
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

from seqlayout.layout.types import Layout
from seqlayout.style import Color


def to_data(value: Any) -> Any:
    """Convert layout objects into plain JSON-compatible values."""
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, Color):
        return list(value.to_tuple())
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_data(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, (list, tuple)):
        return [to_data(v) for v in value]
    if isinstance(value, dict):
        return {str(k): to_data(v) for k, v in value.items()}
    return value


class JsonRenderer:
    """Serialise a Layout as JSON text."""

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def render(self, layout: Layout) -> str:
        return json.dumps(to_data(layout), indent=self.indent) + "\n"
