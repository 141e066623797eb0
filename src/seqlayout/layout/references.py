"""Reference resolver: where a note's leader line ends.

"Start" and "end" of an event follow the arrow, so they are mirrored for
right-to-left and outbound external events. The middle of a step event sits
past its label so the leader does not cross the loop.
"""

from __future__ import annotations

from dataclasses import replace

from seqlayout.config import LayoutConfig
from seqlayout.errors import TypeMismatch, UnsupportedReference
from seqlayout.layout.types import ActorLayout, ActorRegionLayout, BoxRegionLayout, EventLayout, NoteLayout, Point
from seqlayout.types import ArrowDir, EntityKind, NoteRefKind

Target = ActorLayout | EventLayout | ActorRegionLayout | BoxRegionLayout

_EVENT_KINDS = (NoteRefKind.EventStart, NoteRefKind.EventMiddle, NoteRefKind.EventEnd)

# Arrows whose stem runs in the direction of reading (start is the left end).
_FORWARD = (ArrowDir.LeftToRight, ArrowDir.ExternalTo)


def actor_point(actor: ActorLayout) -> Point:
    """Where the actor's baseline meets its stem centreline."""
    return Point(x=actor.stem_box.center_x, y=actor.baseline_box.bottom)


def event_point(event: EventLayout, kind: NoteRefKind, config: LayoutConfig) -> Point:
    stem = event.stem_box
    if kind is NoteRefKind.EventMiddle:
        if event.arrow is ArrowDir.Step:
            return Point(x=event.event_box.end + 2.0 * config.line_width, y=event.event_box.center_y)
        return Point(x=stem.center_x, y=stem.top)

    if event.arrow is ArrowDir.Step:
        if kind is NoteRefKind.EventStart:
            return Point(x=stem.start, y=stem.top)
        return Point(x=stem.start, y=stem.bottom)

    forward = event.arrow in _FORWARD
    at_start = kind is NoteRefKind.EventStart
    x = stem.start if forward == at_start else stem.end
    return Point(x=x, y=stem.top)


def actor_region_point(region: ActorRegionLayout, config: LayoutConfig) -> Point:
    return Point(x=region.bounds.end, y=region.bounds.top + 5.0 * config.line_width)


def box_region_point(region: BoxRegionLayout, config: LayoutConfig) -> Point:
    return Point(x=region.bounds.end - 3.0 * config.line_width, y=region.bounds.top + 3.0 * config.line_width)


def _expect(note_id: str, target: Target, layout_type: type, kind: EntityKind) -> None:
    if not isinstance(target, layout_type):
        raise TypeMismatch(note_id, target.id, kind, type(target).__name__)


def resolve_reference(
    kind: NoteRefKind,
    target: Target | None,
    config: LayoutConfig,
    note_id: str = "",
) -> Point | None:
    """Far end of a leader line pointing at ``target``; None for free notes."""
    if kind is NoteRefKind.NONE:
        return None
    if target is None:
        raise UnsupportedReference(note_id, kind)

    if kind is NoteRefKind.Actor:
        _expect(note_id, target, ActorLayout, EntityKind.Actor)
        return actor_point(target)
    if kind in _EVENT_KINDS:
        _expect(note_id, target, EventLayout, EntityKind.Event)
        return event_point(target, kind, config)
    if kind is NoteRefKind.VerticalSpan:
        _expect(note_id, target, ActorRegionLayout, EntityKind.ActorRegion)
        return actor_region_point(target, config)
    if kind is NoteRefKind.BoxSpan:
        _expect(note_id, target, BoxRegionLayout, EntityKind.BoxRegion)
        return box_region_point(target, config)
    raise UnsupportedReference(note_id, kind)


def resolve_notes(notes: list[NoteLayout], targets: dict[str, Target], config: LayoutConfig) -> list[NoteLayout]:
    """Fill in ``leader_end`` on every note."""
    resolved: list[NoteLayout] = []
    for note in notes:
        target = targets.get(note.ref_id) if note.ref_id is not None else None
        end = resolve_reference(note.ref_kind, target, config, note.id)
        resolved.append(replace(note, leader_end=end))
    return resolved
