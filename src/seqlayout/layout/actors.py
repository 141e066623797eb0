"""Actor arranger: columns, name boxes, baselines and stems.

Every name box shares the widest and tallest measured title so the header
row reads as one aligned band.
"""

from __future__ import annotations

import logging

from seqlayout.config import LayoutConfig
from seqlayout.errors import ActorColumnError
from seqlayout.ir.entities import Actor
from seqlayout.layout.measure import measure_text
from seqlayout.layout.types import ActorLayout, Box
from seqlayout.metrics.base import TextMetrics
from seqlayout.style import StyleTable
from seqlayout.types import ElementKind

logger = logging.getLogger(__name__)

# Titles use the middle two thirds of a column.
NAME_WIDTH_RATIO: float = 2.0 / 3.0


def order_by_column(actors: list[Actor]) -> list[Actor]:
    """Sort actors by column, requiring columns 0..N-1 with no repeats."""
    ordered = sorted(actors, key=lambda a: a.column)
    for expected, actor in enumerate(ordered):
        if actor.column == expected:
            continue
        if expected > 0 and ordered[expected - 1].column == actor.column:
            raise ActorColumnError(
                f"actors '{ordered[expected - 1].id}' and '{actor.id}' share column {actor.column}",
                ordered[expected - 1].id,
                actor.id,
            )
        raise ActorColumnError(f"actor columns must be contiguous from 0; column {expected} is empty", actor.id)
    return ordered


def column_boxes(band: Box, count: int) -> list[Box]:
    """Split ``band`` into ``count`` equal, contiguous columns."""
    if count == 0:
        return []
    width = band.width / count
    return [
        Box(top=band.top, bottom=band.bottom, start=band.start + i * width, end=band.start + (i + 1) * width)
        for i in range(count)
    ]


def arrange_actors(
    actors: list[Actor],
    band: Box,
    config: LayoutConfig,
    metrics: TextMetrics,
    style: StyleTable,
) -> tuple[list[ActorLayout], float, float]:
    """Lay out actor columns inside ``band``.

    Returns (actor layouts in column order, event band top, column width).
    """
    ordered = order_by_column(actors)
    if not ordered:
        return [], band.top, 0.0

    columns = column_boxes(band, len(ordered))
    column_width = band.width / len(ordered)
    text_width = column_width * NAME_WIDTH_RATIO
    logger.debug("actor columns: %d x %g (text %g)", len(ordered), column_width, text_width)

    styles = [style.presentation(ElementKind.Actor, a.style_class) for a in ordered]
    names = [measure_text(metrics, a.title, s.font, text_width) for a, s in zip(ordered, styles)]

    max_h = max((n.height for n in names if n is not None), default=0.0)
    max_w = max((n.width for n in names if n is not None), default=0.0)

    pad = config.text_pad
    lw = config.line_width
    top = band.top + config.element_pad

    result: list[ActorLayout] = []
    event_top = 0.0
    for actor, column, name, presentation in zip(ordered, columns, names, styles):
        name_start = column.start + column_width / 2.0 - max_w / 2.0 - pad
        name_box = Box(top=top, bottom=top + max_h + 2 * pad, start=name_start, end=name_start + max_w + 2 * pad)
        baseline = Box(top=name_box.bottom, bottom=name_box.bottom + lw, start=name_box.start, end=name_box.end)
        stem_start = name_box.center_x - lw
        stem = Box(
            top=baseline.top,
            bottom=band.bottom - config.element_pad,
            start=stem_start,
            end=stem_start + 2 * lw,
        )
        bounds = Box(top=top, bottom=band.bottom, start=column.start, end=column.end)
        logger.debug("actor %s bounds=%s name=%s stem=%s", actor.id, bounds, name_box, stem)

        event_top = max(event_top, stem.top + config.element_pad)
        result.append(
            ActorLayout(
                id=actor.id,
                column=actor.column,
                name=name,
                bounds=bounds,
                name_box=name_box,
                baseline_box=baseline,
                stem_box=stem,
                style=presentation,
                style_class=actor.style_class,
            )
        )

    return result, event_top, column_width
