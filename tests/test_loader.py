"""Tests for seqlayout.loaders — building a model from a JSON document."""

import json

import pytest

from seqlayout.errors import EventCollision, UnknownReference
from seqlayout.loaders import load, loads, normalize_text
from seqlayout.types import ArrowDir, NoteRefKind


def _document(**overrides):
    doc = {
        "name": "Login",
        "actors": [
            {"id": "user", "column": 0, "title": "User"},
            {"id": "server", "column": 1, "title": "Server", "class": "backend"},
        ],
        "events": [
            {"id": "req", "slot": 0, "from": "user", "to": "server", "label": "POST /login"},
            {"id": "check", "slot": 1, "kind": "step", "actor": "server", "label": "verify"},
            {"id": "resp", "slot": 2, "from": "server", "to": "user", "label": "200", "bottom_label": "cookie"},
            {"id": "audit", "slot": 3, "kind": "external-from", "actor": "server"},
        ],
        "regions": [
            {"id": "busy", "actor": "server", "start": "req", "end": "resp"},
            {"id": "txn", "kind": "box", "start_actor": "user", "end_actor": "server", "start": "req", "end": "resp"},
        ],
        "notes": [
            {"id": "n1", "index": 0, "ref": "event-middle", "target": "check", "text": "hash compare"},
            {"id": "n2", "index": 1, "text": "free standing"},
        ],
    }
    doc.update(overrides)
    return doc


class TestLoad:
    def test_sections_populated(self):
        model = load(_document()).model
        assert model.title == "Login"
        assert [a.id for a in model.actors] == ["user", "server"]
        assert [e.id for e in model.events] == ["req", "check", "resp", "audit"]
        assert len(model.actor_regions) == 1
        assert len(model.box_regions) == 1
        assert len(model.notes) == 2

    def test_event_kinds(self):
        model = load(_document()).model
        arrows = {e.id: e.arrow for e in model.events}
        assert arrows == {
            "req": ArrowDir.LeftToRight,
            "check": ArrowDir.Step,
            "resp": ArrowDir.RightToLeft,
            "audit": ArrowDir.ExternalFrom,
        }
        assert model.event("resp").lower_text == "cookie"

    def test_note_reference_kinds(self):
        model = load(_document()).model
        n1, n2 = model.notes
        assert n1.ref_kind is NoteRefKind.EventMiddle
        assert n1.ref_id == "check"
        assert n2.ref_kind is NoteRefKind.NONE

    def test_style_class_kept(self):
        assert load(_document()).model.actor("server").style_class == "backend"

    def test_presentation(self):
        loaded = load(_document(presentation=[{"param": "font", "value": "Sans 9", "class": "backend"}]))
        assert loaded.style.resolve("font", "backend") == "Sans 9"
        assert loaded.style.resolve("font") == "Times 10"

    def test_whitespace_collapsed(self):
        model = load(_document(description="one\n   two\tthree ")).model
        assert model.description == "one two three"
        assert normalize_text(None) is None

    def test_empty_document(self):
        model = load({}).model
        assert len(model) == 0


class TestErrors:
    def test_not_an_object(self):
        with pytest.raises(ValueError, match="JSON object"):
            load([1, 2, 3])

    def test_section_not_a_list(self):
        with pytest.raises(ValueError, match="'actors' must be a list"):
            load({"actors": {"id": "a"}})

    def test_missing_field(self):
        with pytest.raises(ValueError, match=r"actors\[0\]: missing required field 'column'"):
            load({"actors": [{"id": "a"}]})

    def test_unknown_event_kind(self):
        doc = _document(events=[{"id": "e", "slot": 0, "kind": "teleport", "actor": "user"}])
        with pytest.raises(ValueError, match="unknown event kind 'teleport'"):
            load(doc)

    def test_unknown_region_kind(self):
        doc = _document(regions=[{"id": "r", "kind": "circle", "start": "req", "end": "resp"}])
        with pytest.raises(ValueError, match="unknown region kind"):
            load(doc)

    def test_unknown_ref_kind(self):
        doc = _document(notes=[{"id": "n", "index": 0, "ref": "sideways", "target": "req"}])
        with pytest.raises(ValueError, match="unknown reference kind"):
            load(doc)

    def test_model_errors_propagate(self):
        doc = _document(events=[{"id": "e", "slot": 0, "from": "user", "to": "nobody"}], regions=[], notes=[])
        with pytest.raises(UnknownReference):
            load(doc)

    def test_collision_propagates(self):
        events = [
            {"id": "a", "slot": 0, "from": "user", "to": "server"},
            {"id": "b", "slot": 0, "from": "server", "to": "user"},
        ]
        with pytest.raises(EventCollision):
            load(_document(events=events, regions=[], notes=[]))


class TestLoads:
    def test_json_text(self):
        model = loads(json.dumps(_document())).model
        assert len(model.events) == 4

    def test_invalid_json(self):
        with pytest.raises(ValueError, match="invalid JSON at line 1"):
            loads("{not json")
