"""Shared type definitions for seqlayout.

Enums used across the diagram model, layout engine, loaders and renderers.
"""

from __future__ import annotations

from enum import Enum, auto


class EntityKind(Enum):
    Actor = auto()
    Event = auto()
    Note = auto()
    ActorRegion = auto()
    BoxRegion = auto()


class ArrowDir(Enum):
    ExternalTo = auto()  # off-diagram participant -> actor
    ExternalFrom = auto()  # actor -> off-diagram participant
    LeftToRight = auto()
    RightToLeft = auto()
    Step = auto()  # actor -> itself

    @property
    def is_external(self) -> bool:
        return self in (ArrowDir.ExternalTo, ArrowDir.ExternalFrom)


class LayerKind(Enum):
    Empty = auto()
    Directed = auto()
    Step = auto()
    External = auto()

    @classmethod
    def of(cls, arrow: ArrowDir) -> LayerKind:
        if arrow.is_external:
            return cls.External
        if arrow is ArrowDir.Step:
            return cls.Step
        return cls.Directed


class NoteRefKind(Enum):
    NONE = auto()  # free-standing note
    Actor = auto()
    EventStart = auto()
    EventMiddle = auto()
    EventEnd = auto()
    VerticalSpan = auto()  # actor region
    BoxSpan = auto()  # box region

    @property
    def target_kind(self) -> EntityKind | None:
        """The entity kind a note of this reference kind must point at."""
        return _REF_TARGETS.get(self)


_REF_TARGETS: dict[NoteRefKind, EntityKind] = {
    NoteRefKind.Actor: EntityKind.Actor,
    NoteRefKind.EventStart: EntityKind.Event,
    NoteRefKind.EventMiddle: EntityKind.Event,
    NoteRefKind.EventEnd: EntityKind.Event,
    NoteRefKind.VerticalSpan: EntityKind.ActorRegion,
    NoteRefKind.BoxSpan: EntityKind.BoxRegion,
}


class ElementKind(Enum):
    """Presentation families looked up in the style table."""

    Default = auto()
    Title = auto()
    Description = auto()
    Actor = auto()
    Event = auto()
    Note = auto()
    NoteRef = auto()
    ActorRegion = auto()
    BoxRegion = auto()
