"""Public API runs end to end."""

from seqlayout import arrange, layout_document, render_json
from seqlayout.ir.model import DiagramModel


def test_import():
    assert layout_document is not None
    assert render_json is not None


def test_arrange_empty_model():
    layout = arrange(DiagramModel())
    assert layout.actors == ()
    assert layout.events == ()


def test_layout_document_from_text():
    layout = layout_document('{"actors": [{"id": "a", "column": 0, "title": "Solo"}]}')
    assert [a.id for a in layout.actors] == ["a"]
