"""Tests for seqlayout.metrics — fixed-pitch estimates and the measurement cache."""

from seqlayout.metrics import CachedMetrics, FixedPitchMetrics, font_size, strip_markup, wrap_lines


class TestHelpers:
    def test_font_size(self):
        assert font_size("Times 10") == 10.0
        assert font_size("Courier 8") == 8.0
        assert font_size("Sans Bold 9.5") == 9.5

    def test_font_size_default(self):
        assert font_size("Impact") == 10.0

    def test_strip_markup(self):
        assert strip_markup("<b>bold</b> &amp; <i>it</i>") == "bold & it"

    def test_wrap_lines(self):
        assert wrap_lines("aaaa bbbb", 5) == ["aaaa", "bbbb"]
        assert wrap_lines("one\ntwo", None) == ["one", "two"]


class TestFixedPitchMetrics:
    def test_single_line(self):
        assert FixedPitchMetrics().measure("abcd", "Times 10", 0) == (20.0, 12.0)

    def test_wraps_at_limit(self):
        assert FixedPitchMetrics().measure("aaaa bbbb", "Times 10", 25) == (20.0, 24.0)

    def test_empty_text_is_one_line(self):
        assert FixedPitchMetrics().measure("", "Times 10", 0) == (0.0, 12.0)

    def test_markup_not_measured(self):
        m = FixedPitchMetrics()
        assert m.measure("<b>ab</b>", "Times 10", 0) == m.measure("ab", "Times 10", 0)


class _Counting:
    def __init__(self):
        self.calls = 0

    def measure(self, text, font, max_width):
        self.calls += 1
        return (float(len(text)), 1.0)


class TestCachedMetrics:
    def test_repeated_measure_hits_cache(self):
        inner = _Counting()
        cached = CachedMetrics(inner)
        assert cached.measure("hi", "Times 10", 50) == (2.0, 1.0)
        assert cached.measure("hi", "Times 10", 50) == (2.0, 1.0)
        assert inner.calls == 1
        assert (cached.hits, cached.misses) == (1, 1)

    def test_key_includes_width(self):
        inner = _Counting()
        cached = CachedMetrics(inner)
        cached.measure("hi", "Times 10", 50)
        cached.measure("hi", "Times 10", 60)
        assert inner.calls == 2

    def test_clear(self):
        inner = _Counting()
        cached = CachedMetrics(inner)
        cached.measure("hi", "Times 10", 50)
        cached.clear()
        cached.measure("hi", "Times 10", 50)
        assert inner.calls == 2
        assert cached.misses == 1
