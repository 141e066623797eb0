"""End-to-end tests for the seqlayout command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from seqlayout.__main__ import main

_DOC = {
    "name": "Checkout",
    "actors": [
        {"id": "cart", "column": 0, "title": "Cart"},
        {"id": "pay", "column": 1, "title": "Payments"},
        {"id": "ship", "column": 2, "title": "Shipping"},
    ],
    "events": [
        {"id": "charge", "slot": 0, "from": "cart", "to": "pay", "label": "charge"},
        {"id": "ok", "slot": 1, "from": "pay", "to": "cart", "label": "ok"},
        {"id": "dispatch", "slot": 2, "from": "cart", "to": "ship"},
    ],
    "regions": [{"id": "hold", "actor": "pay", "start": "charge", "end": "ok"}],
    "notes": [{"id": "n", "index": 0, "ref": "vertical-span", "target": "hold", "text": "funds held"}],
}


def _write(tmp_path: Path, doc) -> str:
    path = tmp_path / "diagram.json"
    path.write_text(json.dumps(doc))
    return str(path)


def test_file_input(tmp_path):
    result = CliRunner().invoke(main, [_write(tmp_path, _DOC)])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert [e["id"] for e in data["events"]] == ["charge", "ok", "dispatch"]
    assert data["notes"][0]["leader_end"] is not None


def test_stdin_input():
    result = CliRunner().invoke(main, [], input=json.dumps(_DOC))
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["header"]["title"]["text"] == "Checkout"


def test_output_file(tmp_path):
    out = tmp_path / "layout.json"
    result = CliRunner().invoke(main, [_write(tmp_path, _DOC), "--output", str(out)])
    assert result.exit_code == 0, result.output
    assert result.output == ""
    assert json.loads(out.read_text())["actors"][0]["id"] == "cart"


def test_page_options(tmp_path):
    result = CliRunner().invoke(main, [_write(tmp_path, _DOC), "--width", "800", "--height", "600", "--margin", "0"])
    assert result.exit_code == 0, result.output
    page = json.loads(result.output)["page"]
    assert (page["end"], page["bottom"]) == (800, 600)


def test_margin_too_large(tmp_path):
    result = CliRunner().invoke(main, [_write(tmp_path, _DOC), "--width", "100", "--margin", "60"])
    assert result.exit_code == 1
    assert "margins" in result.output


def test_page_narrower_than_note_column(tmp_path):
    result = CliRunner().invoke(main, [_write(tmp_path, _DOC), "--width", "200"])
    assert result.exit_code == 1
    assert "note column" in result.output


def test_narrow_page_without_notes(tmp_path):
    doc = dict(_DOC, notes=[])
    result = CliRunner().invoke(main, [_write(tmp_path, doc), "--width", "200"])
    assert result.exit_code == 0, result.output
    box = json.loads(result.output)["actor_box"]
    assert box["start"] < box["end"]


def test_collision_reported(tmp_path):
    doc = dict(_DOC, events=[
        {"id": "a", "slot": 0, "from": "cart", "to": "pay"},
        {"id": "b", "slot": 0, "from": "pay", "to": "ship"},
    ], regions=[], notes=[])
    result = CliRunner().invoke(main, [_write(tmp_path, doc)])
    assert result.exit_code == 1
    assert "layout error" in result.output
    assert "overlaps" in result.output


def test_region_order_reported(tmp_path):
    doc = dict(_DOC, regions=[{"id": "hold", "actor": "pay", "start": "ok", "end": "charge"}])
    result = CliRunner().invoke(main, [_write(tmp_path, doc)])
    assert result.exit_code == 1
    assert "region 'hold'" in result.output


def test_invalid_json():
    result = CliRunner().invoke(main, [], input="{")
    assert result.exit_code == 1
    assert "invalid JSON" in result.output


def test_missing_file(tmp_path):
    result = CliRunner().invoke(main, [str(tmp_path / "nope.json")])
    assert result.exit_code == 2
