"""Tests for seqlayout.style — colour parsing and parameter cascades."""

from seqlayout.style import BLACK, Color, StyleTable, parse_color
from seqlayout.types import ElementKind


def _rgba(r: int, g: int, b: int, a: int) -> Color:
    return Color(r / 255.0, g / 255.0, b / 255.0, a / 255.0)


class TestParseColor:
    def test_decimal_channels(self):
        assert parse_color("255,0,0,255") == Color(1.0, 0.0, 0.0, 1.0)

    def test_hex_channels(self):
        assert parse_color("0xff, 0x00, 0x80, 0xff") == _rgba(255, 0, 128, 255)

    def test_missing_is_black(self):
        assert parse_color(None) == BLACK
        assert parse_color("") == BLACK

    def test_too_few_channels(self):
        assert parse_color("1,2,3") == BLACK

    def test_out_of_range(self):
        assert parse_color("256,0,0,255") == BLACK
        assert parse_color("-1,0,0,255") == BLACK

    def test_garbage(self):
        assert parse_color("red,green,blue,alpha") == BLACK

    def test_black_is_opaque(self):
        assert BLACK.to_tuple() == (0.0, 0.0, 0.0, 1.0)


class TestLookup:
    def test_defaults_loaded(self):
        table = StyleTable()
        assert table.resolve("font") == "Times 10"
        assert "box-region.fill.color" in table

    def test_empty_table(self):
        table = StyleTable(defaults=False)
        assert len(table) == 0
        assert table.resolve("font") is None

    def test_class_falls_back_to_bare(self):
        table = StyleTable()
        table.set("font", "Sans 12", "loud")
        assert table.resolve("font", "loud") == "Sans 12"
        assert table.resolve("font", "quiet") == "Times 10"
        assert table.resolve("font") == "Times 10"

    def test_cascade_prefers_class_over_specific(self):
        """Every name is tried with the class before any is tried without it."""
        table = StyleTable()
        table.set("font", "Sans 12", "loud")
        assert table.cascade(("actor.font", "font"), "loud") == "Sans 12"

    def test_cascade_falls_through_names(self):
        table = StyleTable()
        assert table.cascade(("actor.font", "font")) == "Times 10"
        assert table.cascade(("nothing", "also.nothing")) is None


class TestPresentation:
    def test_default_stem_follows_line(self):
        p = StyleTable().default_presentation()
        assert p.stem_color == p.line_color == _rgba(0, 0, 0, 255)
        assert p.text_color == _rgba(95, 158, 160, 255)
        assert p.fill_color == _rgba(255, 228, 196, 255)

    def test_actor_stem_color(self):
        p = StyleTable().presentation(ElementKind.Actor)
        assert p.stem_color == _rgba(128, 128, 128, 128)
        assert p.font == "Times 10"

    def test_element_fonts(self):
        table = StyleTable()
        assert table.presentation(ElementKind.Title).font == "Impact 10"
        assert table.presentation(ElementKind.Description).font == "Courier 8"
        assert table.presentation(ElementKind.Note).font == "Times 6"

    def test_region_fills(self):
        table = StyleTable()
        assert table.presentation(ElementKind.ActorRegion).fill_color == _rgba(255, 127, 80, 100)
        assert table.presentation(ElementKind.BoxRegion).fill_color == _rgba(205, 92, 92, 100)

    def test_noteref_stem(self):
        assert StyleTable().presentation(ElementKind.NoteRef).stem_color == _rgba(100, 100, 100, 128)

    def test_class_override(self):
        table = StyleTable()
        table.set("event.stem.color", "255,0,0,255", "error")
        assert table.presentation(ElementKind.Event, "error").stem_color == Color(1.0, 0.0, 0.0, 1.0)
        assert table.presentation(ElementKind.Event).stem_color == BLACK
