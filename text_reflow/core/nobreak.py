"""Nobreak guard: keeps configured word pairs on the same line.

WHY: Some word pairs read badly when a line break falls between them
("Mr." / "Jones", "Jones" / "Jr."). When the line would break inside such
a pair, the break point is moved back to the nearest allowed boundary.

HOW: Each (first, second) pattern pair is tested with ``re.search`` against
two adjacent words. If the line's last word and the incoming word form a
forbidden pair, the guard walks back through the line's word boundaries
and cuts at the first one that is not forbidden. Everything after the cut
goes to the next line together with the incoming word.

RULES:
- A single-word line is never cut
- If every boundary on the line is forbidden, nothing moves and the line
  breaks at its end regardless
"""

from __future__ import annotations

import logging
from re import Pattern
from typing import Iterable, List, Tuple

from text_reflow.core.line import Line

logger = logging.getLogger(__name__)


class NoBreakGuard:
    """Backtracks a line break out of a forbidden word pair."""

    def __init__(self, pairs: Iterable[Tuple[Pattern, Pattern]]) -> None:
        self.pairs = list(pairs)

    def forbids(self, left: str, right: str) -> bool:
        """True when a break between ``left`` and ``right`` is not allowed."""
        for first, second in self.pairs:
            if first.search(left) and second.search(right):
                return True
        return False

    def backtrack(self, line: Line, word: str) -> List[str]:
        """Cut ``line`` so that it does not end inside a forbidden pair.

        Args:
            line: The full line. Shortened in place when a cut is made.
            word: The incoming word that overflowed the line.

        Returns:
            The words removed from the end of the line, in order (without
            ``word``). Empty when no cut was needed or possible.
        """
        words = line.words
        if not words or not self.forbids(words[-1], word):
            return []

        for index in range(len(words) - 1, 0, -1):
            if not self.forbids(words[index - 1], words[index]):
                moved = line.truncate(index)
                logger.debug("Moved %r to the next line to keep %r together", moved, word)
                return moved
        return []
