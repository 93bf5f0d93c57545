"""Overflow word splitting: how a word is divided across a line boundary.

WHY: A word that does not fit the remaining space is normally carried to
the next line whole. Two situations call for dividing it instead: a word
with a literal hyphen can always break after that hyphen, and with
``hard_margins`` on no word may run past the margin at all.

HOW: ``OverflowSplitter.overflow()`` handles two cases:
  1. Shrink: the line is already too wide because its (single) last word
     is longer than the width. That word is divided at the space left for
     it and the remainder goes back to the word stream.
  2. Grow: the line has slack and the incoming word does not fit. The
     first part of the word is appended (after one space) to fill the
     slack and the remainder goes back to the word stream.
In both cases the policies run in a fixed order, once:
literal hyphen, then (hard margins only) HYPHENATION, CONTINUATION, FIXED.

RULES:
- A successful split always appends a SplitWord to the shared log
- Without hard margins only the literal-hyphen split is attempted
- FIXED also applies when an earlier policy left a rest wider than the
  line that would receive it
- A lone word that cannot be divided stays whole on its own line
- The split decision is a single pass; remainders are handled by the next
  line's own overflow
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from text_reflow.core.line import Line
from text_reflow.hyphenation import (
    ContinuationHyphenator,
    Hyphenator,
    SplitResult,
    split_word_to,
)
from text_reflow.models import FormatterConfig, SplitRule, SplitWord

logger = logging.getLogger(__name__)


def split_at_hyphen(word: str, budget: int) -> SplitResult:
    """Break ``word`` after its last hyphen that fits within ``budget``.

    The hyphen stays with the first part. Leading and trailing hyphens are
    not break points.
    """
    index = word.rfind("-", 1, budget)
    if index < 1 or index >= len(word) - 1:
        return None, word
    return word[: index + 1], word[index + 1 :]


class OverflowSplitter:
    """Divides overflowing words according to the configured split rules."""

    def __init__(
        self,
        config: FormatterConfig,
        hyphenator: Hyphenator,
        log: List[SplitWord],
        continuation: Optional[Hyphenator] = None,
    ) -> None:
        self.config = config
        self.hyphenator = hyphenator
        self.continuation = continuation or ContinuationHyphenator()
        self.log = log

    def overflow(
        self,
        line: Line,
        word: Optional[str],
        width: int,
        next_width: Optional[int] = None,
    ) -> List[str]:
        """Resolve an overflow of ``line`` at ``width``.

        Args:
            line: The line being finished. Modified in place.
            word: The incoming word that did not fit, or None when the
                  paragraph is being flushed.
            width: The width available to words on this line.
            next_width: The width of the line that receives the remainder.
                  Defaults to ``width``.

        Returns:
            Words to put back at the front of the word stream, in order.
        """
        if next_width is None:
            next_width = width
        pending = [word] if word else []
        if not line:
            return pending
        if line.width > width:
            return self._shrink(line, width, next_width) + pending
        if word is None:
            return pending
        return self._grow(line, word, width, next_width)

    def _shrink(self, line: Line, width: int, next_width: int) -> List[str]:
        token = line.tokens[-1]
        budget = width - (line.width - len(token.text))
        if budget < 1:
            return self._evict(line)

        word = token.text
        first, rest = self._divide(word, budget, next_width)
        if first is None:
            return self._evict(line)

        line.replace_last(first)
        self._record(word, first, rest)
        return [rest] if rest else []

    def _grow(self, line: Line, word: str, width: int, next_width: int) -> List[str]:
        budget = width - line.width - 1
        if budget < 1 or len(word) <= budget:
            return [word]

        first, rest = self._divide(word, budget, next_width)
        if first is None:
            return [word]

        line.append(first, " ", split=True)
        self._record(word, first, rest)
        return [rest] if rest else []

    def _evict(self, line: Line) -> List[str]:
        # A lone word is emitted whole; deferring it would never terminate.
        if len(line) == 1:
            return []
        return [line.pop().text]

    def _divide(self, word: str, budget: int, next_width: int) -> SplitResult:
        first, rest = split_at_hyphen(word, budget)
        if first:
            return first, rest
        if not self.config.hard_margins:
            return None, word

        rules = self.config.split_rules
        first, rest = None, None
        if SplitRule.HYPHENATION in rules:
            first, rest = self._accept(
                self.hyphenator.hyphenate_to(word, budget, self.config), budget
            )
        if first is None and SplitRule.CONTINUATION in rules:
            first, rest = self._accept(
                self.continuation.hyphenate_to(word, budget, self.config), budget
            )
        if first is None and (
            SplitRule.FIXED in rules or (rest is not None and len(rest) > next_width)
        ):
            first, rest = split_word_to(word, budget)

        if not first:
            return None, word
        return first, rest

    @staticmethod
    def _accept(result: SplitResult, budget: int) -> Tuple[Optional[str], Optional[str]]:
        first, rest = result
        if not first or len(first) > budget:
            return None, rest
        return first, rest

    def _record(self, word: str, first: str, rest: Optional[str]) -> None:
        logger.debug("Split %r into %r + %r", word, first, rest)
        self.log.append(SplitWord(word=word, first=first, rest=rest))
