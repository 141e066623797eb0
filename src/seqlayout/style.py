"""Presentation parameters: cascading lookup, colour parsing, per-element styles.

Parameters are plain strings keyed by name (``"font"``, ``"actor.fill.color"``)
and optionally scoped to a style class (``"warning.fill.color"``). A lookup
tries the class-qualified name first and falls back to the bare name.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from seqlayout.types import ElementKind

logger = logging.getLogger(__name__)

DEFAULT_PARAMETERS: dict[str, str] = {
    "font": "Times 10",
    "description.font": "Courier 8",
    "title.font": "Impact 10",
    "note.font": "Times 6",
    "text.color": "95,158,160,255",
    "line.color": "0,0,0,255",
    "fill.color": "255,228,196,255",
    "actor.stem.color": "128,128,128,128",
    "noteref.stem.color": "100,100,100,128",
    "actor-region.fill.color": "255,127,80,100",
    "box-region.fill.color": "205,92,92,100",
}


@dataclass(frozen=True)
class Color:
    """RGBA colour with channels in 0.0..1.0."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0
    alpha: float = 1.0

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.red, self.green, self.blue, self.alpha)


BLACK = Color()


@dataclass(frozen=True)
class Presentation:
    """Font and colours resolved for one diagram element."""

    font: str
    text_color: Color
    line_color: Color
    fill_color: Color
    stem_color: Color


def _parse_channel(token: str) -> int:
    token = token.strip()
    if token.lower().startswith("0x"):
        return int(token, 16)
    return int(token, 10)


def parse_color(value: str | None) -> Color:
    """Decode an ``"r,g,b,a"`` string of 0-255 channels.

    Missing, malformed or out-of-range input yields opaque black.
    """
    if not value:
        return BLACK
    tokens = value.split(",")
    if len(tokens) < 4:
        return BLACK
    channels: list[float] = []
    for token in tokens[:4]:
        try:
            channel = _parse_channel(token)
        except ValueError:
            return BLACK
        if channel < 0 or channel > 255:
            return BLACK
        channels.append(channel / 255.0)
    return Color(*channels)


# Per-field parameter cascades, most specific name first. Fields an element
# does not override come from the default presentation.
_CASCADES: dict[ElementKind, dict[str, tuple[str, ...]]] = {
    ElementKind.Default: {},
    ElementKind.Title: {"font": ("title.font", "font"), "fill_color": ("title.color", "fill.color")},
    ElementKind.Description: {"font": ("description.font", "font")},
    ElementKind.Actor: {
        "font": ("actor.font", "font"),
        "fill_color": ("actor.fill.color", "fill.color"),
        "stem_color": ("actor.stem.color", "line.color"),
    },
    ElementKind.Event: {
        "font": ("event.font", "font"),
        "stem_color": ("event.stem.color", "line.color"),
    },
    ElementKind.Note: {
        "font": ("note.font", "font"),
        "fill_color": ("note.fill.color", "fill.color"),
    },
    ElementKind.NoteRef: {"stem_color": ("noteref.stem.color", "line.color")},
    ElementKind.ActorRegion: {"fill_color": ("actor-region.fill.color", "fill.color")},
    ElementKind.BoxRegion: {"fill_color": ("box-region.fill.color", "fill.color")},
}


def _qualified(param: str, style_class: str | None) -> str:
    return f"{style_class}.{param}" if style_class else param


class StyleTable:
    """String-keyed presentation parameter table."""

    def __init__(self, parameters: dict[str, str] | None = None, defaults: bool = True) -> None:
        self._params: dict[str, str] = dict(DEFAULT_PARAMETERS) if defaults else {}
        if parameters:
            self._params.update(parameters)

    def set(self, param: str, value: str, style_class: str | None = None) -> None:
        self._params[_qualified(param, style_class)] = value

    def resolve(self, param: str, style_class: str | None = None) -> str | None:
        """Look up ``class.param``, then ``param``."""
        if style_class:
            value = self._params.get(_qualified(param, style_class))
            if value is not None:
                return value
        return self._params.get(param)

    def cascade(self, params: tuple[str, ...], style_class: str | None = None) -> str | None:
        """Try every name with the class, then every name without it."""
        if style_class:
            for param in params:
                value = self._params.get(_qualified(param, style_class))
                if value is not None:
                    return value
        for param in params:
            value = self._params.get(param)
            if value is not None:
                return value
        return None

    def default_presentation(self) -> Presentation:
        line = parse_color(self.resolve("line.color"))
        return Presentation(
            font=self.resolve("font") or "",
            text_color=parse_color(self.resolve("text.color")),
            line_color=line,
            fill_color=parse_color(self.resolve("fill.color")),
            stem_color=line,
        )

    def presentation(self, element: ElementKind, style_class: str | None = None) -> Presentation:
        """Resolve the presentation of one element, starting from the defaults."""
        base = self.default_presentation()
        fields: dict[str, object] = {
            "font": base.font,
            "text_color": base.text_color,
            "line_color": base.line_color,
            "fill_color": base.fill_color,
            "stem_color": base.stem_color,
        }
        for field_name, params in _CASCADES[element].items():
            value = self.cascade(params, style_class)
            if value is None:
                continue
            fields[field_name] = value if field_name == "font" else parse_color(value)
        presentation = Presentation(**fields)  # type: ignore[arg-type]
        logger.debug("presentation(%s, %s) = %s", element.name, style_class, presentation)
        return presentation

    def __len__(self) -> int:
        return len(self._params)

    def __contains__(self, param: str) -> bool:
        return param in self._params
