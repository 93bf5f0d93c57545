"""TextFormatter: the public formatting engine.

WHY: Callers need one object that holds their settings, their hyphenator
and the record of words it had to split, and that can format a single
paragraph, a run of paragraphs, or center/tab-convert text. This is the
entry point the CLI and the HTTP API both use.

HOW: ``format()`` builds the lines of one paragraph with a fresh
LineBuilder (core/builder.py) and places the paragraph tag.
``paragraphs()`` splits text on blank lines and formats each piece,
handing the paragraph at position *i* the *i*-th tag (empty paragraphs
count as positions too). ``center()``, ``expand()`` and ``unexpand()``
are simple per-line utilities driven by the same settings.

RULES:
- The split-word log accumulates across calls until clear_split_words()
- The hyphenator is validated on assignment; a bad one raises TypeError
  and the previous hyphenator stays in effect
- Config validation errors come from pydantic (ValidationError)
- Formatting never raises for any text content or width
- Not thread-safe: serialize calls on a shared instance
"""

from __future__ import annotations

import logging
import re
from typing import Any, List, Optional, Sequence, Tuple, Union

from text_reflow.core.builder import LineBuilder
from text_reflow.core.renderer import LineRenderer
from text_reflow.core.splitter import OverflowSplitter
from text_reflow.hyphenation import (
    ContinuationHyphenator,
    Hyphenator,
    SplitResult,
    as_hyphenator,
    split_word_to,
)
from text_reflow.models import FormatterConfig, SplitWord

logger = logging.getLogger(__name__)

PARAGRAPH_SEPARATOR = re.compile(r"\n{2}")

TextInput = Union[str, Sequence[str]]


class TextFormatter:
    """Formats fixed-width text with margins, indents and alignment.

    Args:
        config: Settings to use. Defaults to ``FormatterConfig()``.
        hyphenator: Hyphenator for SplitRule.HYPHENATION; a Hyphenator,
            an object with ``hyphenate_to``, or a callable taking
            ``(word, size)`` or ``(word, size, config)``. Defaults to the
            built-in continuation hyphenator.
        **overrides: Config fields applied on top of ``config``.

    Example::

        fmt = TextFormatter(columns=40, first_indent=0)
        print(fmt.paragraphs(text))
    """

    def __init__(
        self,
        config: Optional[FormatterConfig] = None,
        hyphenator: Any = None,
        **overrides: Any,
    ) -> None:
        if config is None:
            config = FormatterConfig(**overrides)
        elif overrides:
            config = FormatterConfig.model_validate({**config.model_dump(), **overrides})
        self.config = config
        self._continuation = ContinuationHyphenator()
        self._hyphenator = as_hyphenator(hyphenator)
        self._split_words: List[SplitWord] = []

    # ------------------------------------------------------------------
    # Hyphenation and split log
    # ------------------------------------------------------------------

    @property
    def hyphenator(self) -> Hyphenator:
        return self._hyphenator

    @hyphenator.setter
    def hyphenator(self, value: Any) -> None:
        self._hyphenator = as_hyphenator(value)

    @property
    def split_words(self) -> List[SplitWord]:
        """Words divided since the last clear_split_words(), oldest first."""
        return list(self._split_words)

    def clear_split_words(self) -> None:
        self._split_words.clear()

    def hyphenate_to(self, word: str, size: int) -> SplitResult:
        """Continuation split of ``word`` to at most ``size`` characters."""
        return self._continuation.hyphenate_to(word, size, self.config)

    def split_word_to(self, word: str, size: int) -> Tuple[str, str]:
        return split_word_to(word, size)

    # ------------------------------------------------------------------
    # Paragraph formatting
    # ------------------------------------------------------------------

    def _builder(self) -> LineBuilder:
        splitter = OverflowSplitter(
            self.config,
            self._hyphenator,
            self._split_words,
            continuation=self._continuation,
        )
        return LineBuilder(self.config, splitter, LineRenderer(self.config))

    def format(self, text: str, tag: Optional[str] = None) -> str:
        """Format ``text`` as a single paragraph.

        Args:
            text: The paragraph. All whitespace runs are word boundaries.
            tag: Tag placed before the paragraph. Defaults to the first
                 element of ``tag_text`` when ``tag_paragraph`` is on.

        Returns:
            The formatted lines, each ending in a newline; "" for blank text.
        """
        if tag is None and self.config.tag_paragraph and self.config.tag_text:
            tag = self.config.tag_text[0]
        return self._format_paragraph(text, tag)

    def _format_paragraph(self, text: str, tag: Optional[str]) -> str:
        lines = self._builder().build(text or "")
        if tag and lines:
            self._place_tag(lines, tag)
        logger.debug("Formatted paragraph into %d lines", len(lines))
        return "".join(lines)

    def _place_tag(self, lines: List[str], tag: str) -> None:
        """Put ``tag`` into the first line's leading space, or above it.

        The tag replaces the leading whitespace only when that leaves more
        than one space between the tag and the text.
        """
        margin = " " * self.config.left_margin
        first = lines[0]
        white = len(first) - len(first.lstrip())
        if white - self.config.left_margin - 1 > len(tag):
            lines[0] = margin + tag + first[self.config.left_margin + len(tag):]
        else:
            lines.insert(0, "{}{}\n".format(margin, tag))

    def paragraphs(
        self,
        text: TextInput,
        separator: Union[str, re.Pattern] = PARAGRAPH_SEPARATOR,
    ) -> str:
        """Format each paragraph of ``text``.

        Args:
            text: A string (split on ``separator``) or a sequence of
                  paragraph strings.
            separator: Regular expression separating paragraphs in a string.

        Returns:
            The formatted paragraphs. When first_indent equals body_indent,
            or tagging is on, paragraphs are separated by a blank line. The
            final newline is dropped.
        """
        if isinstance(text, str):
            chunks = re.split(separator, text)
        else:
            chunks = list(text)

        cfg = self.config
        if cfg.first_indent == cfg.body_indent or cfg.tag_paragraph:
            paragraph_end = "\n"
        else:
            paragraph_end = ""

        out: List[str] = []
        for index, chunk in enumerate(chunks):
            tag = None
            if cfg.tag_paragraph and index < len(cfg.tag_text):
                tag = cfg.tag_text[index]
            formatted = self._format_paragraph(chunk, tag)
            if formatted:
                out.append(formatted + paragraph_end)

        if out and out[-1].endswith("\n"):
            out[-1] = out[-1][:-1]
        return "".join(out)

    # ------------------------------------------------------------------
    # Line utilities
    # ------------------------------------------------------------------

    def center(self, text: TextInput) -> str:
        """Center each line of ``text`` within the margins.

        Tabs count as ``tabstop`` columns. Blank lines are kept blank.
        """
        lines = text.splitlines() if isinstance(text, str) else list(text)
        cfg = self.config
        width = cfg.columns - cfg.left_margin - cfg.right_margin
        margin = " " * cfg.left_margin

        centered = []
        for raw in lines:
            stripped = raw.strip()
            if not stripped:
                centered.append("\n")
                continue
            visual = len(stripped) + stripped.count("\t") * (cfg.tabstop - 1)
            line_width = (width - visual) // 2
            centered.append(margin + " " * (width - line_width - visual) + stripped + "\n")
        return "".join(centered)

    def expand(self, text: TextInput) -> Union[str, List[str]]:
        """Replace every tab with ``tabstop`` spaces."""
        spaces = " " * self.config.tabstop
        if isinstance(text, str):
            return text.replace("\t", spaces)
        return [item.replace("\t", spaces) for item in text]

    def unexpand(self, text: TextInput) -> Union[str, List[str]]:
        """Replace every run of ``tabstop`` spaces with a tab."""
        if self.config.tabstop == 0:
            return text if isinstance(text, str) else list(text)
        run = re.compile(" {%d}" % self.config.tabstop)
        if isinstance(text, str):
            return run.sub("\t", text)
        return [run.sub("\t", item) for item in text]
