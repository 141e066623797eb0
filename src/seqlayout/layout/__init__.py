"""Layout engine public API."""

from __future__ import annotations

from seqlayout.layout.actors import NAME_WIDTH_RATIO, arrange_actors, column_boxes, order_by_column
from seqlayout.layout.engine import SequenceLayout, arrange
from seqlayout.layout.events import EventContext, arrange_events, measure_event
from seqlayout.layout.notes import arrange_notes, note_column
from seqlayout.layout.references import (
    actor_point,
    actor_region_point,
    box_region_point,
    event_point,
    resolve_notes,
    resolve_reference,
)
from seqlayout.layout.regions import arrange_actor_region, arrange_box_region
from seqlayout.layout.types import (
    ActorLayout,
    ActorRegionLayout,
    Box,
    BoxRegionLayout,
    EventLayout,
    LayerLayout,
    Layout,
    NoteLayout,
    Point,
    TextBlock,
    TitleLayout,
)

__all__ = [
    "NAME_WIDTH_RATIO",
    "ActorLayout",
    "ActorRegionLayout",
    "Box",
    "BoxRegionLayout",
    "EventContext",
    "EventLayout",
    "LayerLayout",
    "Layout",
    "NoteLayout",
    "Point",
    "SequenceLayout",
    "TextBlock",
    "TitleLayout",
    "actor_point",
    "actor_region_point",
    "arrange",
    "arrange_actor_region",
    "arrange_actors",
    "arrange_box_region",
    "arrange_events",
    "arrange_notes",
    "box_region_point",
    "column_boxes",
    "event_point",
    "measure_event",
    "note_column",
    "order_by_column",
    "resolve_notes",
    "resolve_reference",
]
