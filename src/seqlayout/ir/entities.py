"""Semantic diagram entities.

These types hold only what the document says: identifiers, ordering keys,
text and cross-references by identifier. Geometry lives in layout output
types and is never written back here.
"""

from __future__ import annotations

from dataclasses import dataclass

from seqlayout.types import ArrowDir, EntityKind, NoteRefKind


@dataclass(frozen=True)
class Actor:
    id: str
    column: int
    title: str | None = None
    style_class: str | None = None

    kind = EntityKind.Actor

    @property
    def index(self) -> int:
        return self.column


@dataclass(frozen=True)
class Event:
    id: str
    slot: int
    arrow: ArrowDir
    start_actor: str
    start_column: int
    end_actor: str | None = None
    end_column: int | None = None
    upper_text: str | None = None
    lower_text: str | None = None
    style_class: str | None = None

    kind = EntityKind.Event

    @property
    def index(self) -> int:
        return self.slot

    @property
    def columns(self) -> range:
        """Inclusive span of actor columns the event touches."""
        if self.end_column is None:
            return range(self.start_column, self.start_column + 1)
        lo, hi = sorted((self.start_column, self.end_column))
        return range(lo, hi + 1)

    @property
    def actor_ids(self) -> tuple[str, ...]:
        if self.end_actor is None:
            return (self.start_actor,)
        return (self.start_actor, self.end_actor)


@dataclass(frozen=True)
class Note:
    id: str
    index: int
    ref_kind: NoteRefKind = NoteRefKind.NONE
    ref_id: str | None = None
    text: str | None = None
    style_class: str | None = None

    kind = EntityKind.Note


@dataclass(frozen=True)
class ActorRegion:
    id: str
    actor: str
    start_event: str
    end_event: str
    style_class: str | None = None

    kind = EntityKind.ActorRegion
    index = 0


@dataclass(frozen=True)
class BoxRegion:
    id: str
    start_actor: str
    end_actor: str
    start_event: str
    end_event: str
    style_class: str | None = None

    kind = EntityKind.BoxRegion
    index = 0


Entity = Actor | Event | Note | ActorRegion | BoxRegion
