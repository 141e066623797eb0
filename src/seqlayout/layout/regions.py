"""Region arranger: actor regions (one lifeline) and box regions (a rectangle)."""

from __future__ import annotations

import logging

from seqlayout.config import LayoutConfig
from seqlayout.errors import InvalidRegionOrder
from seqlayout.ir.entities import ActorRegion, BoxRegion
from seqlayout.layout.types import ActorLayout, ActorRegionLayout, Box, BoxRegionLayout, EventLayout
from seqlayout.style import StyleTable
from seqlayout.types import ElementKind

logger = logging.getLogger(__name__)


def arrange_actor_region(
    region: ActorRegion,
    actors: dict[str, ActorLayout],
    events: dict[str, EventLayout],
    config: LayoutConfig,
    style: StyleTable,
) -> ActorRegionLayout:
    """Highlight band straddling an actor's stem between two events' stems."""
    start_event = events[region.start_event]
    end_event = events[region.end_event]
    if start_event.stem_box.top >= end_event.stem_box.bottom:
        raise InvalidRegionOrder(
            region.id,
            f"start event '{region.start_event}' must precede end event '{region.end_event}'",
        )

    lw = config.line_width
    axis = actors[region.actor].stem_box.start + lw / 2.0
    bounds = Box(
        top=start_event.stem_box.center_y,
        bottom=end_event.stem_box.center_y,
        start=axis - 2.0 * lw,
        end=axis + 2.0 * lw,
    )
    logger.debug("actor region %s bounds=%s", region.id, bounds)
    return ActorRegionLayout(
        id=region.id,
        actor_id=region.actor,
        start_event_id=region.start_event,
        end_event_id=region.end_event,
        bounds=bounds,
        style=style.presentation(ElementKind.ActorRegion, region.style_class),
        style_class=region.style_class,
    )


def arrange_box_region(
    region: BoxRegion,
    actors: dict[str, ActorLayout],
    events: dict[str, EventLayout],
    style: StyleTable,
) -> BoxRegionLayout:
    """Rectangle over an actor column range and an event range."""
    start_event = events[region.start_event]
    end_event = events[region.end_event]
    if start_event.event_box.top >= end_event.event_box.bottom:
        raise InvalidRegionOrder(
            region.id,
            f"start event '{region.start_event}' must precede end event '{region.end_event}'",
        )

    start_actor = actors[region.start_actor]
    end_actor = actors[region.end_actor]
    if start_actor.column >= end_actor.column:
        raise InvalidRegionOrder(
            region.id,
            f"start actor '{region.start_actor}' must be left of end actor '{region.end_actor}'",
        )

    bounds = Box(
        top=start_event.event_box.top,
        bottom=end_event.event_box.bottom,
        start=start_actor.bounds.start,
        end=end_actor.bounds.end,
    )
    logger.debug("box region %s bounds=%s", region.id, bounds)
    return BoxRegionLayout(
        id=region.id,
        start_actor_id=region.start_actor,
        end_actor_id=region.end_actor,
        start_event_id=region.start_event,
        end_event_id=region.end_event,
        bounds=bounds,
        style=style.presentation(ElementKind.BoxRegion, region.style_class),
        style_class=region.style_class,
    )
