"""Loader registry — decode a diagram document and populate a model."""

from __future__ import annotations

import json
from typing import Any

from seqlayout.loaders.base import LoadedDiagram, Loader
from seqlayout.loaders.mapping import MappingLoader, normalize_text

__all__ = [
    "LoadedDiagram",
    "Loader",
    "MappingLoader",
    "load",
    "loads",
    "normalize_text",
]


def load(document: Any) -> LoadedDiagram:
    """Populate a model from an already-decoded document."""
    return MappingLoader().load(document)


def loads(src: str) -> LoadedDiagram:
    """Decode JSON text and populate a model."""
    try:
        document = json.loads(src)
    except json.JSONDecodeError as e:
        raise ValueError(f"invalid JSON at line {e.lineno} column {e.colno}: {e.msg}") from e
    return load(document)
