"""Working state of the line being filled, and the sentence-spacing rules.

WHY: The builder, the splitter and the nobreak guard all edit the same
line: they append words, shrink the last word, or cut trailing words off.
A small Line type keeps the running width consistent with its tokens so
none of them has to re-measure.

HOW: Each WordToken stores its own leading separator ("", " " or "  "),
chosen when the word is appended. The line width is the sum of separators
and word lengths. SentenceRules decides whether the separator after a
word is one space or two.

RULES:
- The first token of a line never carries a separator
- Line.width always equals the sum of its token widths
- Sentence spacing is decided from the line's current last word
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional

from text_reflow.config import ABBREVIATIONS, TERMINAL_PUNCTUATION, TERMINAL_QUOTES
from text_reflow.models import FormatterConfig


@dataclass
class WordToken:
    """One word on a line.

    Attributes:
        text: The word (or the first part of a split word).
        separator: Spaces placed before the word on this line.
        split: True when the text is the first part of a divided word.
    """

    text: str
    separator: str = ""
    split: bool = False

    @property
    def width(self) -> int:
        return len(self.separator) + len(self.text)

    def rendered(self) -> str:
        return self.separator + self.text


@dataclass
class Line:
    """Ordered words of the line under construction."""

    tokens: List[WordToken] = field(default_factory=list)
    width: int = 0
    extra_space_pending: bool = False

    def __len__(self) -> int:
        return len(self.tokens)

    def __bool__(self) -> bool:
        return bool(self.tokens)

    @property
    def words(self) -> List[str]:
        return [token.text for token in self.tokens]

    @property
    def last_word(self) -> Optional[str]:
        if not self.tokens:
            return None
        return self.tokens[-1].text

    def append(self, text: str, separator: str = " ", split: bool = False) -> WordToken:
        """Add a word at the end; the separator is dropped on an empty line."""
        if not self.tokens:
            separator = ""
        token = WordToken(text=text, separator=separator, split=split)
        self.tokens.append(token)
        self.width += token.width
        return token

    def pop(self) -> WordToken:
        token = self.tokens.pop()
        self.width -= token.width
        return token

    def replace_last(self, text: str) -> None:
        """Replace the last word with the first part of its split."""
        token = self.tokens[-1]
        self.width += len(text) - len(token.text)
        token.text = text
        token.split = True

    def truncate(self, index: int) -> List[str]:
        """Remove the words from ``index`` on and return them in order."""
        moved = self.tokens[index:]
        del self.tokens[index:]
        self.width -= sum(token.width for token in moved)
        return [token.text for token in moved]


def _char_class(chars: str) -> str:
    return "".join(re.escape(ch) for ch in chars)


class SentenceRules:
    """Decides when a word is followed by two spaces instead of one.

    A word earns the extra space when ``extra_space`` is on, the word minus
    one trailing period is not an abbreviation, and the word ends with
    terminal punctuation optionally followed by a closing quote.
    """

    def __init__(self, config: FormatterConfig) -> None:
        self.enabled = config.extra_space
        self.abbreviations = set(ABBREVIATIONS) | set(config.abbreviations)
        self.sentence_end = re.compile(
            "[{}][{}]?$".format(
                _char_class(TERMINAL_PUNCTUATION + config.terminal_punctuation),
                _char_class(TERMINAL_QUOTES + config.terminal_quotes),
            )
        )

    def is_abbreviation(self, word: str) -> bool:
        stem = word[:-1] if word.endswith(".") else word
        return stem in self.abbreviations

    def ends_sentence(self, word: str) -> bool:
        return self.sentence_end.search(word) is not None

    def wants_extra_space(self, word: Optional[str]) -> bool:
        if not self.enabled or not word:
            return False
        if self.is_abbreviation(word):
            return False
        return self.ends_sentence(word)

    def separator_after(self, word: Optional[str]) -> str:
        return "  " if self.wants_extra_space(word) else " "
