"""Layout types shared across the arrangers and renderers.

Everything here is immutable: one arrangement pass produces a fresh
``Layout`` and never edits a previous one.
"""

from __future__ import annotations

from dataclasses import dataclass

from seqlayout.style import Presentation
from seqlayout.types import ArrowDir, LayerKind, NoteRefKind


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle in page points; ``start``/``end`` run left to right."""

    top: float
    bottom: float
    start: float
    end: float

    @property
    def width(self) -> float:
        return self.end - self.start

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center_x(self) -> float:
        return self.start + (self.end - self.start) / 2.0

    @property
    def center_y(self) -> float:
        return (self.top + self.bottom) / 2.0

    def shifted(self, dy: float) -> Box:
        return Box(top=self.top + dy, bottom=self.bottom + dy, start=self.start, end=self.end)


@dataclass(frozen=True)
class Point:
    """A 2D point in page points (x = start, y = top)."""

    x: float
    y: float


@dataclass(frozen=True)
class TextBlock:
    """A string with its measured extents."""

    text: str
    width: float
    height: float


@dataclass(frozen=True)
class TitleLayout:
    title: TextBlock | None
    title_bar: Box | None
    title_box: Box
    description: TextBlock | None
    description_box: Box
    title_style: Presentation
    description_style: Presentation


@dataclass(frozen=True)
class ActorLayout:
    id: str
    column: int
    name: TextBlock | None
    bounds: Box
    name_box: Box
    baseline_box: Box
    stem_box: Box
    style: Presentation
    style_class: str | None = None


@dataclass(frozen=True)
class EventLayout:
    id: str
    slot: int
    arrow: ArrowDir
    actor_ids: tuple[str, ...]
    height: float
    event_box: Box
    stem_box: Box
    upper_text: TextBlock | None
    upper_box: Box | None
    lower_text: TextBlock | None
    lower_box: Box | None
    style: Presentation
    style_class: str | None = None

    def shifted(self, dy: float) -> EventLayout:
        return EventLayout(
            id=self.id,
            slot=self.slot,
            arrow=self.arrow,
            actor_ids=self.actor_ids,
            height=self.height,
            event_box=self.event_box.shifted(dy),
            stem_box=self.stem_box.shifted(dy),
            upper_text=self.upper_text,
            upper_box=self.upper_box.shifted(dy) if self.upper_box else None,
            lower_text=self.lower_text,
            lower_box=self.lower_box.shifted(dy) if self.lower_box else None,
            style=self.style,
            style_class=self.style_class,
        )


@dataclass(frozen=True)
class LayerLayout:
    slot: int
    kind: LayerKind
    height: float
    box: Box
    event_ids: tuple[str, ...]


@dataclass(frozen=True)
class NoteLayout:
    id: str
    index: int
    ref_kind: NoteRefKind
    ref_id: str | None
    text: TextBlock | None
    bounds: Box
    leader_start: Point
    leader_end: Point | None
    style: Presentation
    leader_style: Presentation
    style_class: str | None = None


@dataclass(frozen=True)
class ActorRegionLayout:
    id: str
    actor_id: str
    start_event_id: str
    end_event_id: str
    bounds: Box
    style: Presentation
    style_class: str | None = None


@dataclass(frozen=True)
class BoxRegionLayout:
    id: str
    start_actor_id: str
    end_actor_id: str
    start_event_id: str
    end_event_id: str
    bounds: Box
    style: Presentation
    style_class: str | None = None


@dataclass(frozen=True)
class Layout:
    """Self-contained arrangement output — everything renderers need."""

    page: Box
    header: TitleLayout
    actor_box: Box
    sequence_box: Box
    note_box: Box | None
    column_width: float
    actors: tuple[ActorLayout, ...]
    layers: tuple[LayerLayout, ...]
    events: tuple[EventLayout, ...]
    notes: tuple[NoteLayout, ...]
    actor_regions: tuple[ActorRegionLayout, ...]
    box_regions: tuple[BoxRegionLayout, ...]
    line_width: float = 2.0
    arrow_width: float = 6.0
    arrow_length: float = 6.0

    def actor(self, ident: str) -> ActorLayout:
        return _find(self.actors, ident)

    def event(self, ident: str) -> EventLayout:
        return _find(self.events, ident)

    def note(self, ident: str) -> NoteLayout:
        return _find(self.notes, ident)

    def actor_region(self, ident: str) -> ActorRegionLayout:
        return _find(self.actor_regions, ident)

    def box_region(self, ident: str) -> BoxRegionLayout:
        return _find(self.box_regions, ident)


def _find(items, ident: str):
    for item in items:
        if item.id == ident:
            return item
    raise KeyError(ident)
