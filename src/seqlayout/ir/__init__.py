"""Intermediate representation: diagram entities, event layers and the model registry."""

from seqlayout.ir.entities import Actor, ActorRegion, BoxRegion, Entity, Event, Note
from seqlayout.ir.layers import EXTERNAL_MASK, EventLayer, event_mask
from seqlayout.ir.model import DiagramModel

__all__ = [
    "EXTERNAL_MASK",
    "Actor",
    "ActorRegion",
    "BoxRegion",
    "DiagramModel",
    "Entity",
    "Event",
    "EventLayer",
    "Note",
    "event_mask",
]
