"""Note arranger: stacks notes down the side column in index order."""

from __future__ import annotations

import logging

from seqlayout.config import LayoutConfig
from seqlayout.ir.entities import Note
from seqlayout.layout.measure import measure_text
from seqlayout.layout.types import Box, NoteLayout, Point
from seqlayout.metrics.base import TextMetrics
from seqlayout.style import StyleTable
from seqlayout.types import ElementKind

logger = logging.getLogger(__name__)


def note_column(config: LayoutConfig) -> tuple[float, float]:
    """Horizontal (start, end) of the note column at the right page margin."""
    end = config.page_width - config.margin
    return end - config.note_box_width, end


def arrange_notes(
    notes: list[Note],
    column: Box,
    config: LayoutConfig,
    metrics: TextMetrics,
    style: StyleTable,
) -> list[NoteLayout]:
    """Size and stack ``notes`` inside ``column``.

    Leader lines start at each note's top-left corner; their far end is left
    unresolved (None) until the reference pass.
    """
    text_width = config.note_box_width - 2 * config.text_pad
    top = column.top + config.element_pad

    ordered = sorted(enumerate(notes), key=lambda pair: (pair[1].index, pair[0]))
    result: list[NoteLayout] = []
    for _, note in ordered:
        presentation = style.presentation(ElementKind.Note, note.style_class)
        text = measure_text(metrics, note.text, presentation.font, text_width)
        text_height = text.height if text is not None else 0.0

        bounds = Box(top=top, bottom=top + text_height + 2 * config.text_pad, start=column.start, end=column.end)
        logger.debug("note %s bounds=%s", note.id, bounds)
        result.append(
            NoteLayout(
                id=note.id,
                index=note.index,
                ref_kind=note.ref_kind,
                ref_id=note.ref_id,
                text=text,
                bounds=bounds,
                leader_start=Point(x=bounds.start, y=bounds.top),
                leader_end=None,
                style=presentation,
                leader_style=style.presentation(ElementKind.NoteRef, note.style_class),
                style_class=note.style_class,
            )
        )
        top = bounds.bottom + config.element_pad

    return result
