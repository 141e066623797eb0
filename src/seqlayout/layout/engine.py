"""Sequence diagram arrangement pipeline.

Phases:
  1. Title and description blocks
  2. Page split into actor band and (when notes exist) note column
  3. Actor columns
  4. Note stacking
  5. Event layers
  6. Actor regions, then box regions
  7. Note leader references
"""

from __future__ import annotations

import logging

from seqlayout.config import LayoutConfig
from seqlayout.errors import PageTooSmall
from seqlayout.ir.model import DiagramModel
from seqlayout.layout.actors import arrange_actors
from seqlayout.layout.events import EventContext, arrange_events
from seqlayout.layout.measure import measure_text
from seqlayout.layout.notes import arrange_notes, note_column
from seqlayout.layout.references import Target, resolve_notes
from seqlayout.layout.regions import arrange_actor_region, arrange_box_region
from seqlayout.layout.types import Box, Layout, TitleLayout
from seqlayout.metrics.base import TextMetrics
from seqlayout.metrics.cache import CachedMetrics
from seqlayout.metrics.fixed import FixedPitchMetrics
from seqlayout.style import StyleTable
from seqlayout.types import ElementKind

logger = logging.getLogger(__name__)


class SequenceLayout:
    """Arranges a DiagramModel into page geometry.

    The engine holds no per-diagram state: every call to ``layout`` builds a
    new Layout, so re-running it on an unchanged model gives the same result.
    """

    def __init__(
        self,
        config: LayoutConfig | None = None,
        metrics: TextMetrics | None = None,
        style: StyleTable | None = None,
    ) -> None:
        self.config = config if config is not None else LayoutConfig()
        self.metrics = metrics if metrics is not None else CachedMetrics(FixedPitchMetrics())
        self.style = style if style is not None else StyleTable()

    def arrange_header(self, model: DiagramModel) -> TitleLayout:
        cfg = self.config
        pad = cfg.text_pad
        start = cfg.margin
        end = cfg.page_width - cfg.margin

        title_style = self.style.presentation(ElementKind.Title)
        description_style = self.style.presentation(ElementKind.Description)

        title = measure_text(self.metrics, model.title, title_style.font, end - start - 2 * pad)
        title_bar = None
        title_bottom = cfg.margin
        if title is not None:
            bar_top = cfg.margin + cfg.element_pad
            title_bar = Box(top=bar_top, bottom=bar_top + title.height + 2 * pad, start=start, end=end)
            title_bottom = title_bar.bottom + cfg.element_pad
        title_box = Box(top=cfg.margin, bottom=title_bottom, start=start, end=end)

        description = measure_text(self.metrics, model.description, description_style.font, end - start - 2 * pad)
        description_bottom = title_box.bottom
        if description is not None:
            description_bottom += description.height + 2 * cfg.element_pad + 2 * pad
        description_box = Box(top=title_box.bottom, bottom=description_bottom, start=start, end=end)

        return TitleLayout(
            title=title,
            title_bar=title_bar,
            title_box=title_box,
            description=description,
            description_box=description_box,
            title_style=title_style,
            description_style=description_style,
        )

    def layout(self, model: DiagramModel) -> Layout:
        cfg = self.config
        page = Box(top=0.0, bottom=cfg.page_height, start=0.0, end=cfg.page_width)

        band_end = cfg.page_width - cfg.margin
        if model.notes:
            note_start, _ = note_column(cfg)
            band_end = note_start - cfg.element_pad
        if band_end <= cfg.margin:
            room = "margins and note column" if model.notes else "margins"
            raise PageTooSmall(f"page width {cfg.page_width:g} leaves no room for actors inside the {room}")

        header = self.arrange_header(model)
        band_top = header.description_box.bottom
        band_bottom = cfg.page_height - cfg.margin
        if band_bottom <= band_top:
            raise PageTooSmall(f"page height {cfg.page_height:g} leaves no room for actors below the margin and header")
        actor_band = Box(top=band_top, bottom=band_bottom, start=cfg.margin, end=band_end)

        actors, event_top, column_width = arrange_actors(model.actors, actor_band, cfg, self.metrics, self.style)
        actor_map = {a.id: a for a in actors}

        note_box = None
        notes = []
        if model.notes:
            note_start, note_end = note_column(cfg)
            note_box = Box(top=event_top, bottom=band_bottom, start=note_start, end=note_end)
            notes = arrange_notes(model.notes, note_box, cfg, self.metrics, self.style)

        sequence_box = Box(top=event_top, bottom=actor_band.bottom, start=actor_band.start, end=actor_band.end)
        ctx = EventContext(
            actors=actor_map,
            band=sequence_box,
            column_width=column_width,
            config=cfg,
            metrics=self.metrics,
            style=self.style,
        )
        events, layers = arrange_events(model.events, model.layers, model.max_slot, ctx)
        event_map = {e.id: e for e in events}

        actor_regions = [
            arrange_actor_region(r, actor_map, event_map, cfg, self.style) for r in model.actor_regions
        ]
        box_regions = [arrange_box_region(r, actor_map, event_map, self.style) for r in model.box_regions]

        targets: dict[str, Target] = {}
        targets.update(actor_map)
        targets.update(event_map)
        targets.update({r.id: r for r in actor_regions})
        targets.update({r.id: r for r in box_regions})
        notes = resolve_notes(notes, targets, cfg)

        logger.debug(
            "arranged %d actors, %d events in %d layers, %d notes, %d regions",
            len(actors),
            len(events),
            len(layers),
            len(notes),
            len(actor_regions) + len(box_regions),
        )
        return Layout(
            page=page,
            header=header,
            actor_box=actor_band,
            sequence_box=sequence_box,
            note_box=note_box,
            column_width=column_width,
            actors=tuple(actors),
            layers=tuple(layers),
            events=tuple(events),
            notes=tuple(notes),
            actor_regions=tuple(actor_regions),
            box_regions=tuple(box_regions),
            line_width=cfg.line_width,
            arrow_width=cfg.arrow_width,
            arrow_length=cfg.arrow_length,
        )


def arrange(
    model: DiagramModel,
    config: LayoutConfig | None = None,
    metrics: TextMetrics | None = None,
    style: StyleTable | None = None,
) -> Layout:
    """Run the full arrangement pipeline."""
    return SequenceLayout(config, metrics, style).layout(model)
