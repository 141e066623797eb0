"""Renderers for arranged sequence diagrams."""

from seqlayout.renderers.base import Renderer
from seqlayout.renderers.json import JsonRenderer, to_data

__all__ = ["JsonRenderer", "Renderer", "to_data"]
