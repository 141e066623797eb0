"""Fixed-pitch text metrics estimator.

Approximates a shaping engine well enough for layout without a font stack:
every glyph is ``char_ratio`` of the font size wide and every line is
``line_ratio`` of it tall. Pango-style markup tags are ignored.
"""

from __future__ import annotations

import html
import re
import textwrap

DEFAULT_FONT_SIZE: float = 10.0

_MARKUP_RE = re.compile(r"<[^>]*>")
_SIZE_RE = re.compile(r"(\d+(?:\.\d+)?)(?:px)?$")


def font_size(font: str) -> float:
    """Extract the point size from a descriptor like ``"Times Bold 10"``."""
    m = _SIZE_RE.search(font.strip())
    if m is None:
        return DEFAULT_FONT_SIZE
    return float(m.group(1))


def strip_markup(text: str) -> str:
    return html.unescape(_MARKUP_RE.sub("", text))


def wrap_lines(text: str, chars_per_line: int | None) -> list[str]:
    """Split into display lines, word-wrapping when a limit is given."""
    lines: list[str] = []
    for paragraph in text.split("\n"):
        if chars_per_line is None or len(paragraph) <= chars_per_line:
            lines.append(paragraph)
            continue
        lines.extend(textwrap.wrap(paragraph, width=chars_per_line) or [""])
    return lines


class FixedPitchMetrics:
    """Default TextMetrics adapter."""

    def __init__(self, char_ratio: float = 0.5, line_ratio: float = 1.2) -> None:
        self.char_ratio = char_ratio
        self.line_ratio = line_ratio

    def measure(self, text: str, font: str, max_width: float) -> tuple[float, float]:
        size = font_size(font)
        char_w = size * self.char_ratio
        line_h = size * self.line_ratio

        plain = strip_markup(text)
        limit = max(1, int(max_width // char_w)) if max_width > 0 else None
        lines = wrap_lines(plain, limit)

        width = max(len(line) for line in lines) * char_w
        return (width, len(lines) * line_h)
