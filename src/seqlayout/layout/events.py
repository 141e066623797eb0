"""Event layer engine: per-event geometry and layer stacking.

Phases:
  1. Measure every event against a layer top of 0 and record each layer's
     tallest member.
  2. Stack layers by ascending slot (missing slots are zero-height) and move
     every event down to its layer's top.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from seqlayout.config import LayoutConfig
from seqlayout.ir.entities import Event
from seqlayout.ir.layers import EventLayer
from seqlayout.layout.measure import measure_text
from seqlayout.layout.types import ActorLayout, Box, EventLayout, LayerLayout, TextBlock
from seqlayout.metrics.base import TextMetrics
from seqlayout.style import Presentation, StyleTable
from seqlayout.types import ArrowDir, ElementKind, LayerKind

logger = logging.getLogger(__name__)


@dataclass
class EventContext:
    """Inputs every per-event computation needs."""

    actors: dict[str, ActorLayout]
    band: Box
    column_width: float
    config: LayoutConfig
    metrics: TextMetrics
    style: StyleTable


def _label_room(span: float, config: LayoutConfig) -> float:
    """Width left for a label between the arrow heads of a stem ``span`` wide."""
    return max(span - 2 * (config.text_pad + config.arrow_length), 1.0)


def _label_band(text: TextBlock | None, config: LayoutConfig) -> float:
    """Vertical room reserved above or below a stem."""
    if text is None:
        return config.min_event_pad
    return max(2 * config.text_pad + text.height, config.min_event_pad)


def _centered(text: TextBlock, stem: Box, top: float) -> Box:
    start = stem.center_x - text.width / 2.0
    return Box(top=top, bottom=top + text.height, start=start, end=start + text.width)


def _directed(event: Event, ctx: EventContext, presentation: Presentation) -> EventLayout:
    cfg = ctx.config
    lw = cfg.line_width
    start_actor = ctx.actors[event.start_actor]
    end_actor = ctx.actors[event.end_actor]

    if event.arrow is ArrowDir.LeftToRight:
        stem_start = start_actor.stem_box.start + lw / 2.0
        stem_end = end_actor.stem_box.start - lw / 2.0
    else:
        stem_start = end_actor.stem_box.start + lw * 3.0 / 2.0
        stem_end = start_actor.stem_box.start

    room = _label_room(stem_end - stem_start, cfg)
    upper = measure_text(ctx.metrics, event.upper_text, presentation.font, room)
    lower = measure_text(ctx.metrics, event.lower_text, presentation.font, room)

    height = _label_band(upper, cfg)
    stem = Box(top=height, bottom=height + lw, start=stem_start, end=stem_end)
    height += lw

    upper_box = None
    if upper is not None:
        upper_box = _centered(upper, stem, stem.top - cfg.text_pad - upper.height)

    lower_box = None
    if lower is not None:
        lower_box = _centered(lower, stem, stem.bottom + cfg.text_pad)
    height += _label_band(lower, cfg)

    return EventLayout(
        id=event.id,
        slot=event.slot,
        arrow=event.arrow,
        actor_ids=event.actor_ids,
        height=height,
        event_box=Box(top=0.0, bottom=height, start=stem_start, end=stem_end),
        stem_box=stem,
        upper_text=upper,
        upper_box=upper_box,
        lower_text=lower,
        lower_box=lower_box,
        style=presentation,
        style_class=event.style_class,
    )


def _step(event: Event, ctx: EventContext, presentation: Presentation) -> EventLayout:
    cfg = ctx.config
    lw = cfg.line_width
    actor = ctx.actors[event.start_actor]

    room = 3.0 * (ctx.column_width / 4.0) - 2 * cfg.text_pad
    label = measure_text(ctx.metrics, event.upper_text, presentation.font, room)

    if label is None:
        height = cfg.min_event_pad + cfg.step_extra_pad
    else:
        height = _label_band(label, cfg)
    height += lw

    stem_start = actor.stem_box.start + 2 * lw
    stem_end = actor.stem_box.start + ctx.column_width / 4.0
    label_width = label.width if label is not None else 0.0
    event_box = Box(top=0.0, bottom=height, start=stem_start, end=stem_end + label_width + 2 * cfg.text_pad)
    stem = Box(top=lw, bottom=height - lw, start=stem_start, end=stem_end)

    label_box = None
    if label is not None:
        label_top = height / 2.0 - label.height / 2.0
        label_box = Box(
            top=label_top,
            bottom=label_top + label.height,
            start=stem_end + cfg.text_pad,
            end=event_box.end,
        )

    return EventLayout(
        id=event.id,
        slot=event.slot,
        arrow=event.arrow,
        actor_ids=event.actor_ids,
        height=height,
        event_box=event_box,
        stem_box=stem,
        upper_text=label,
        upper_box=label_box,
        lower_text=None,
        lower_box=None,
        style=presentation,
        style_class=event.style_class,
    )


def _external(event: Event, ctx: EventContext, presentation: Presentation) -> EventLayout:
    cfg = ctx.config
    lw = cfg.line_width
    actor = ctx.actors[event.start_actor]

    stem_start = ctx.band.start
    if event.arrow is ArrowDir.ExternalFrom:
        stem_end = actor.stem_box.start
    else:
        stem_end = actor.stem_box.start - lw / 2.0

    room = _label_room(stem_end - stem_start, cfg)
    label = measure_text(ctx.metrics, event.upper_text, presentation.font, room)

    height = _label_band(label, cfg)
    label_box = None
    if label is not None:
        label_top = height - cfg.text_pad - label.height
        label_box = Box(top=label_top, bottom=label_top + label.height, start=stem_start, end=stem_start + label.width)

    stem = Box(top=height, bottom=height + lw, start=stem_start, end=stem_end)
    height += lw + cfg.min_event_pad

    return EventLayout(
        id=event.id,
        slot=event.slot,
        arrow=event.arrow,
        actor_ids=event.actor_ids,
        height=height,
        event_box=Box(top=0.0, bottom=height, start=stem_start, end=stem_end),
        stem_box=stem,
        upper_text=label,
        upper_box=label_box,
        lower_text=None,
        lower_box=None,
        style=presentation,
        style_class=event.style_class,
    )


def measure_event(event: Event, ctx: EventContext) -> EventLayout:
    """Geometry of ``event`` relative to a layer top of 0."""
    presentation = ctx.style.presentation(ElementKind.Event, event.style_class)
    if event.arrow is ArrowDir.Step:
        return _step(event, ctx, presentation)
    if event.arrow.is_external:
        return _external(event, ctx, presentation)
    return _directed(event, ctx, presentation)


def arrange_events(
    events: list[Event],
    layers: dict[int, EventLayer],
    max_slot: int,
    ctx: EventContext,
) -> tuple[list[EventLayout], list[LayerLayout]]:
    """Measure, stack and position every event layer starting at ``ctx.band.top``."""
    by_id = {e.id: e for e in events}

    # Phase 1: per-event geometry at top 0, layer heights.
    measured: dict[int, list[EventLayout]] = {}
    heights: dict[int, float] = {}
    for slot in range(max_slot + 1):
        layer = layers.get(slot)
        frames = [measure_event(by_id[ident], ctx) for ident in (layer.events if layer else [])]
        measured[slot] = frames
        heights[slot] = max((f.height for f in frames), default=0.0)

    # Phase 2: cumulative tops.
    placed: list[EventLayout] = []
    layer_layouts: list[LayerLayout] = []
    top = ctx.band.top
    for slot in range(max_slot + 1):
        layer = layers.get(slot)
        height = heights[slot]
        for frame in measured[slot]:
            placed.append(frame.shifted(top))
        layer_layouts.append(
            LayerLayout(
                slot=slot,
                kind=layer.kind if layer else LayerKind.Empty,
                height=height,
                box=Box(top=top, bottom=top + height, start=ctx.band.start, end=ctx.band.end),
                event_ids=tuple(layer.events) if layer else (),
            )
        )
        logger.debug("layer %d top=%g height=%g", slot, top, height)
        top += height

    return placed, layer_layouts
