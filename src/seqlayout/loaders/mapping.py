"""Mapping loader — populates a DiagramModel from a JSON-style document.

Document shape::

    {
      "name": "Login", "description": "...",
      "presentation": [{"param": "font", "value": "Sans 9", "class": "loud"}],
      "actors":  [{"id": "a", "column": 0, "title": "Alice", "class": null}],
      "events":  [{"id": "e1", "slot": 0, "kind": "directed",
                   "from": "a", "to": "b", "label": "hi", "bottom_label": "ok"},
                  {"id": "e2", "slot": 1, "kind": "step", "actor": "a", "label": "think"},
                  {"id": "e3", "slot": 2, "kind": "external-from", "actor": "b"}],
      "regions": [{"id": "r1", "kind": "actor", "actor": "a", "start": "e1", "end": "e2"},
                  {"id": "r2", "kind": "box", "start_actor": "a", "end_actor": "b",
                   "start": "e1", "end": "e3"}],
      "notes":   [{"id": "n1", "index": 0, "ref": "event-middle", "target": "e1", "text": "..."}]
    }

Sections are applied in dependency order: actors, events, regions, notes.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from seqlayout.ir.model import DiagramModel
from seqlayout.loaders.base import LoadedDiagram
from seqlayout.style import StyleTable
from seqlayout.types import NoteRefKind

_WHITESPACE_RE = re.compile(r"\s+")

_REF_KINDS: dict[str, NoteRefKind] = {
    "none": NoteRefKind.NONE,
    "actor": NoteRefKind.Actor,
    "event-start": NoteRefKind.EventStart,
    "event-middle": NoteRefKind.EventMiddle,
    "event-end": NoteRefKind.EventEnd,
    "vertical-span": NoteRefKind.VerticalSpan,
    "box-span": NoteRefKind.BoxSpan,
}

_EVENT_KINDS = ("directed", "step", "external-to", "external-from")


def normalize_text(value: str | None) -> str | None:
    """Collapse runs of whitespace (including newlines) to single spaces."""
    if value is None:
        return None
    return _WHITESPACE_RE.sub(" ", value).strip()


def _section(document: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    items = document.get(key) or []
    if not isinstance(items, list):
        raise ValueError(f"'{key}' must be a list")
    for i, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise ValueError(f"{key}[{i}] must be an object")
    return items


def _required(item: Mapping[str, Any], key: str, where: str) -> Any:
    if key not in item or item[key] is None:
        raise ValueError(f"{where}: missing required field '{key}'")
    return item[key]


def _text(item: Mapping[str, Any], key: str) -> str | None:
    value = item.get(key)
    if value is None:
        return None
    return normalize_text(str(value))


class MappingLoader:
    """Loader for already-decoded JSON documents."""

    def load(self, document: Any) -> LoadedDiagram:
        if not isinstance(document, Mapping):
            raise ValueError("diagram document must be a JSON object")

        model = DiagramModel()
        style = StyleTable()

        model.set_name(_text(document, "name"))
        model.set_description(_text(document, "description"))

        for i, item in enumerate(_section(document, "presentation")):
            where = f"presentation[{i}]"
            style.set(str(_required(item, "param", where)), str(_required(item, "value", where)), item.get("class"))

        for i, item in enumerate(_section(document, "actors")):
            where = f"actors[{i}]"
            model.add_actor(
                str(_required(item, "id", where)),
                item.get("class"),
                _required(item, "column", where),
                _text(item, "title"),
            )

        for i, item in enumerate(_section(document, "events")):
            self._load_event(model, item, f"events[{i}]")

        for i, item in enumerate(_section(document, "regions")):
            self._load_region(model, item, f"regions[{i}]")

        for i, item in enumerate(_section(document, "notes")):
            where = f"notes[{i}]"
            ref_name = str(item.get("ref", "none"))
            if ref_name not in _REF_KINDS:
                raise ValueError(f"{where}: unknown reference kind '{ref_name}'")
            target = item.get("target")
            model.add_note(
                str(_required(item, "id", where)),
                item.get("class"),
                _required(item, "index", where),
                _REF_KINDS[ref_name],
                str(target) if target is not None else None,
                _text(item, "text"),
            )

        return LoadedDiagram(model=model, style=style)

    def _load_event(self, model: DiagramModel, item: Mapping[str, Any], where: str) -> None:
        ident = str(_required(item, "id", where))
        kind = item.get("kind", "directed")
        slot = _required(item, "slot", where)
        style_class = item.get("class")

        if kind == "directed":
            model.add_directed_event(
                ident,
                style_class,
                slot,
                str(_required(item, "from", where)),
                str(_required(item, "to", where)),
                _text(item, "label"),
                _text(item, "bottom_label"),
            )
        elif kind == "step":
            model.add_step_event(ident, style_class, slot, str(_required(item, "actor", where)), _text(item, "label"))
        elif kind in ("external-to", "external-from"):
            model.add_external_event(
                ident,
                style_class,
                slot,
                str(_required(item, "actor", where)),
                _text(item, "label"),
                from_external=kind == "external-from",
            )
        else:
            raise ValueError(f"{where}: unknown event kind '{kind}'; use one of {', '.join(_EVENT_KINDS)}")

    def _load_region(self, model: DiagramModel, item: Mapping[str, Any], where: str) -> None:
        ident = str(_required(item, "id", where))
        kind = item.get("kind", "actor")
        style_class = item.get("class")
        start = str(_required(item, "start", where))
        end = str(_required(item, "end", where))

        if kind == "actor":
            model.add_actor_region(ident, style_class, str(_required(item, "actor", where)), start, end)
        elif kind == "box":
            model.add_box_region(
                ident,
                style_class,
                str(_required(item, "start_actor", where)),
                str(_required(item, "end_actor", where)),
                start,
                end,
            )
        else:
            raise ValueError(f"{where}: unknown region kind '{kind}'; use 'actor' or 'box'")
