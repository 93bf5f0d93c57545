"""Tests for line rendering (core/renderer.py).

WHY: Alignment is a pure whitespace transformation of a finished line.
These tests pin the exact padding for each style, including the halved
justification slot count.
"""

from text_reflow.core.line import Line
from text_reflow.core.renderer import LineRenderer, justify
from text_reflow.models import FormatStyle, FormatterConfig


def _line(*words):
    line = Line()
    for word in words:
        line.append(word)
    return line


def _render(line, style, width, indent=0, last=False, **settings):
    renderer = LineRenderer(FormatterConfig(format_style=style, **settings))
    return renderer.render(line, indent, width, last=last)


class TestJustifyFunction:

    def test_two_pieces(self):
        assert justify(["aa", " bb"], 3) == ["aa", "    bb"]

    def test_remainder_goes_to_later_gaps(self):
        assert justify(["a", " b", " c", " d"], 3) == ["a", "  b", "  c", "   d"]

    def test_halved_slots_can_overflow(self):
        pieces = justify(["a", " b", " c"], 2)
        assert pieces == ["a", "   b", "   c"]
        assert sum(len(p) for p in pieces) == 5 + 4

    def test_single_piece_unchanged(self):
        assert justify(["word"], 5) == ["word"]

    def test_no_extra_space(self):
        assert justify(["a", " b"], 0) == ["a", " b"]

    def test_input_not_mutated(self):
        pieces = ["a", " b"]
        justify(pieces, 4)
        assert pieces == ["a", " b"]


class TestLineRenderer:

    def test_left_with_margin_and_indent(self):
        out = _render(_line("a", "b"), FormatStyle.LEFT, 10, indent=2, left_margin=1)
        assert out == "   a b\n"

    def test_fill_pads_to_width(self):
        assert _render(_line("a", "b"), FormatStyle.FILL, 10) == "a b       \n"

    def test_fill_does_not_pad_overlong_line(self):
        assert _render(_line("abcdefgh"), FormatStyle.FILL, 5) == "abcdefgh\n"

    def test_justify_inner_line(self):
        assert _render(_line("aa", "bb"), FormatStyle.JUSTIFY, 8) == "aa    bb\n"

    def test_justify_last_line_is_filled(self):
        assert _render(_line("aa", "bb"), FormatStyle.JUSTIFY, 8, last=True) == "aa bb   \n"

    def test_justify_single_word_is_filled(self):
        assert _render(_line("aa"), FormatStyle.JUSTIFY, 5) == "aa   \n"

    def test_right_aligns_to_right_margin(self):
        out = _render(_line("ab"), FormatStyle.RIGHT, 9, columns=10, right_margin=1)
        assert out == "       ab\n"
        assert len(out.rstrip("\n")) == 9

    def test_right_includes_margin_and_indent(self):
        out = _render(_line("ab"), FormatStyle.RIGHT, 6, indent=2, columns=10, left_margin=2)
        assert out == " " * 8 + "ab\n"
        assert len(out.rstrip("\n")) == 10

    def test_empty_line_renders_nothing(self):
        assert _render(Line(), FormatStyle.FILL, 10) == ""

    def test_extra_space_separator_preserved(self):
        line = Line()
        line.append("Go.")
        line.append("Now.", "  ")
        assert _render(line, FormatStyle.LEFT, 20) == "Go.  Now.\n"
