"""Greedy line filling for one paragraph.

WHY: This is the heart of the formatter. Words are packed onto a line
until the next one does not fit; the overflow is then resolved by the
nobreak guard or the splitter, the line is rendered, and filling starts
over on a fresh line.

HOW: Words come from a WordSource. For each word the separator width (one
space, or two after a sentence end) is chosen from the line's current last
word. If the word fits it is appended. Otherwise:
  1. With ``nobreak`` on, NoBreakGuard may cut trailing words off the line;
     those words and the incoming word go back to the stream.
  2. Otherwise OverflowSplitter resolves the overflow, possibly dividing a
     word, and returns the words to retry on the next line.
The line is rendered and the width switches from the first-line indent to
the body indent. When the stream runs dry the splitter runs once more on
the last line (with no incoming word) so a trailing overlong word is
divided too; any remainder is fed back through the same loop.

RULES:
- The first line uses first_indent; every later line uses body_indent
- A line is terminal only when no words remain to be placed
- Every iteration emits or appends at least one word, so the loop ends
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from text_reflow.core.line import Line, SentenceRules
from text_reflow.core.nobreak import NoBreakGuard
from text_reflow.core.renderer import LineRenderer
from text_reflow.core.splitter import OverflowSplitter
from text_reflow.core.words import WordSource
from text_reflow.models import FormatterConfig


class LineBuilder:
    """Fills and renders the lines of one paragraph."""

    def __init__(
        self,
        config: FormatterConfig,
        splitter: OverflowSplitter,
        renderer: LineRenderer,
    ) -> None:
        self.config = config
        self.splitter = splitter
        self.renderer = renderer
        self.rules = SentenceRules(config)
        self.guard: Optional[NoBreakGuard] = None
        if config.nobreak:
            self.guard = NoBreakGuard(config.nobreak_pairs)

    def _first_layout(self) -> Tuple[int, int]:
        indent = self.config.first_indent
        return indent, self.config.text_width(indent)

    def _body_layout(self) -> Tuple[int, int]:
        indent = self.config.body_indent
        return indent, self.config.text_width(indent)

    def build(self, text: str) -> List[str]:
        """Format ``text`` as one paragraph.

        Returns:
            The rendered lines, each ending in a newline. Empty for blank text.
        """
        source = WordSource(text)
        lines: List[str] = []
        indent, width = self._first_layout()
        _, body_width = self._body_layout()
        line = Line()

        while True:
            while source:
                word = source.pop()
                if not line:
                    line.append(word)
                    continue

                separator = self.rules.separator_after(line.last_word)
                line.extra_space_pending = len(separator) > 1
                if line.width + len(separator) + len(word) <= width:
                    line.append(word, separator)
                    continue

                source.push_front(self._resolve_overflow(line, word, width, body_width))
                lines.append(self.renderer.render(line, indent, width, last=not source))
                indent, width = self._body_layout()
                line = Line()

            if not line:
                break

            pending = self.splitter.overflow(line, None, width, body_width)
            lines.append(self.renderer.render(line, indent, width, last=not pending))
            indent, width = self._body_layout()
            line = Line()
            source.push_front(pending)

        return lines

    def _resolve_overflow(
        self, line: Line, word: str, width: int, next_width: int
    ) -> List[str]:
        if self.guard is not None:
            moved = self.guard.backtrack(line, word)
            if moved:
                return moved + [word]
        return self.splitter.overflow(line, word, width, next_width)
