"""Tests for the Hyphenator capability (hyphenation.py).

WHY: Hyphenators come from callers in several shapes. They must be
adapted once, with their arity checked up front, and must all answer
``(first, rest)`` or ``(None, word)``.
"""

import pytest

from text_reflow.hyphenation import (
    CallableHyphenator,
    ContinuationHyphenator,
    Hyphenator,
    PyphenHyphenator,
    as_hyphenator,
    split_word_to,
)
from text_reflow.models import FormatterConfig


class TestContinuationHyphenator:

    def test_mark_counts_toward_size(self):
        first, rest = ContinuationHyphenator().hyphenate_to("representation", 5)
        assert first == "repr\\"
        assert rest == "esentation"
        assert len(first) == 5

    def test_too_small_fails(self):
        assert ContinuationHyphenator().hyphenate_to("word", 1) == (None, "word")
        assert ContinuationHyphenator().hyphenate_to("word", 0) == (None, "word")

    def test_custom_mark(self):
        first, rest = ContinuationHyphenator(mark="+").hyphenate_to("abcdef", 3)
        assert (first, rest) == ("ab+", "cdef")


class TestPyphenHyphenator:
    """WHY: Dictionary hyphenation must break only at syllable boundaries
    and still honour the size limit, mark included.
    """

    def test_breaks_at_syllable_within_size(self):
        first, rest = PyphenHyphenator().hyphenate_to("hyphenation", 8)
        assert first is not None
        assert first.endswith("-")
        assert len(first) <= 8
        assert first[:-1] + rest == "hyphenation"

    def test_no_break_fits(self):
        assert PyphenHyphenator().hyphenate_to("hyphenation", 2) == (None, "hyphenation")

    def test_custom_mark(self):
        first, rest = PyphenHyphenator(hyphen="=").hyphenate_to("hyphenation", 8)
        assert first.endswith("=")
        assert first[:-1] + rest == "hyphenation"

    def test_is_accepted_as_is(self):
        hyphenator = PyphenHyphenator()
        assert as_hyphenator(hyphenator) is hyphenator


class TestAsHyphenator:

    def test_none_gives_continuation(self):
        assert isinstance(as_hyphenator(None), ContinuationHyphenator)

    def test_instance_passes_through(self):
        hyph = ContinuationHyphenator()
        assert as_hyphenator(hyph) is hyph

    def test_two_argument_callable(self):
        hyph = as_hyphenator(lambda word, size: (word[:size], word[size:]))
        assert isinstance(hyph, Hyphenator)
        assert hyph.hyphenate_to("abcdef", 2, FormatterConfig()) == ("ab", "cdef")

    def test_three_argument_callable_gets_config(self):
        seen = []

        def hyphenate(word, size, config):
            seen.append(config)
            return None, word

        cfg = FormatterConfig()
        hyph = as_hyphenator(hyphenate)
        assert hyph.hyphenate_to("abc", 2, cfg) == (None, "abc")
        assert seen == [cfg]

    def test_object_with_method(self):
        class Dictionary:
            def hyphenate_to(self, word, size):
                return word[: size - 1] + "-", word[size - 1:]

        hyph = as_hyphenator(Dictionary())
        assert hyph.hyphenate_to("football", 5) == ("foot-", "ball")

    @pytest.mark.parametrize("func", [
        lambda word: word,
        lambda word, size, config, extra: word,
        lambda *args: args,
    ])
    def test_wrong_arity_rejected(self, func):
        with pytest.raises(TypeError):
            as_hyphenator(func)

    def test_not_callable_rejected(self):
        with pytest.raises(TypeError):
            as_hyphenator(42)

    def test_callable_adapter_direct(self):
        adapter = CallableHyphenator(lambda w, s, c: (None, w))
        assert adapter.wants_config is True


class TestSplitWordTo:

    def test_exact_offset(self):
        assert split_word_to("abcdef", 4) == ("abcd", "ef")

    def test_size_beyond_word(self):
        assert split_word_to("abc", 10) == ("abc", "")
