"""Centralized configuration for seqlayout.

All lengths are in points (72 per inch).
"""

from __future__ import annotations

from dataclasses import dataclass

POINTS_PER_INCH: float = 72.0


@dataclass(frozen=True)
class LayoutConfig:
    """Page geometry and padding constants for the arrangement pipeline."""

    page_width: float = 8 * POINTS_PER_INCH
    page_height: float = 11 * POINTS_PER_INCH
    margin: float = 0.5 * POINTS_PER_INCH

    text_pad: float = 2.0
    element_pad: float = 2.0
    line_width: float = 2.0

    min_event_pad: float = 20.0
    step_extra_pad: float = 20.0  # unlabelled step loops
    arrow_width: float = 6.0
    arrow_length: float = 6.0

    note_box_width: float = 2 * POINTS_PER_INCH
