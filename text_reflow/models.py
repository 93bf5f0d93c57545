"""Data models for the text formatter.

WHY: Every stage of the reflow pipeline reads the same settings, and the
engine reports the words it had to divide. Centralizing the configuration
model, the style/split enumerations, and the split audit record keeps the
contract between the engine, the CLI, and the HTTP API in one place.

HOW: FormatterConfig is a Pydantic model with ``validate_assignment`` so
that every mutation between formatting calls is revalidated. A rejected
assignment raises ``pydantic.ValidationError`` and leaves the previous value
in place. SplitRule is an IntFlag so policies combine with ``|`` and are
tested with ``in``.

RULES:
- Widths, margins, indents and tabstop are coerced to ``abs(int(value))``
- split_rules must be within [1, 7]; anything else is rejected
- nobreak_pairs is ordered; a mapping is accepted and read in insertion order
- SplitWord records are immutable; the engine only ever appends them
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Any, List, Optional, Set, Tuple

from pydantic import BaseModel, Field, field_validator

from text_reflow.config import (
    DEFAULT_BODY_INDENT,
    DEFAULT_COLUMNS,
    DEFAULT_FIRST_INDENT,
    DEFAULT_TABSTOP,
)


class FormatStyle(str, Enum):
    """Horizontal alignment of formatted lines.

    - LEFT: flush left, ragged right, no padding
    - RIGHT: flush right at ``columns - right_margin``
    - FILL: flush left, padded with spaces up to the line width
    - JUSTIFY: flush on both sides except the last line of a paragraph
    """

    LEFT = "left"
    RIGHT = "right"
    FILL = "fill"
    JUSTIFY = "justify"


class SplitRule(IntFlag):
    """Word-division policies used when ``hard_margins`` is on.

    Priority is always HYPHENATION, then CONTINUATION, then FIXED.
    """

    FIXED = 1
    CONTINUATION = 2
    HYPHENATION = 4
    CONTINUATION_FIXED = 3
    HYPHENATION_FIXED = 5
    HYPHENATION_CONTINUATION = 6
    ALL = 7


_NON_NEGATIVE_FIELDS = (
    "columns",
    "left_margin",
    "right_margin",
    "first_indent",
    "body_indent",
    "tabstop",
)


class FormatterConfig(BaseModel):
    """Settings for one formatting call.

    WHY: Callers tune width, indentation, alignment, word splitting and
    sentence spacing independently. A validated model catches bad values at
    the point of assignment instead of deep inside the line-breaking loop.

    RULES:
    - Constructed once, may be mutated between calls
    - Invalid format_style / split_rules / patterns raise ValidationError
    """

    columns: int = Field(default=DEFAULT_COLUMNS, description="Total width of the format area.")
    left_margin: int = Field(default=0, description="Spaces before every line.")
    right_margin: int = Field(default=0, description="Columns kept free at the right edge.")
    first_indent: int = Field(
        default=DEFAULT_FIRST_INDENT,
        description="Indent of the first line of a paragraph.",
    )
    body_indent: int = Field(
        default=DEFAULT_BODY_INDENT,
        description="Indent of every line after the first.",
    )
    tabstop: int = Field(default=DEFAULT_TABSTOP, description="Spaces represented by one tab.")
    format_style: FormatStyle = Field(default=FormatStyle.LEFT, description="Line alignment.")
    hard_margins: bool = Field(
        default=False,
        description="Split words that do not fit instead of overrunning the margin.",
    )
    split_rules: SplitRule = Field(
        default=SplitRule.FIXED,
        description="Bitmask of FIXED=1, CONTINUATION=2, HYPHENATION=4.",
    )
    extra_space: bool = Field(
        default=False,
        description="Put two spaces after sentence-ending words.",
    )
    abbreviations: Set[str] = Field(
        default_factory=set,
        description="Extra abbreviations (without the period) never double-spaced.",
    )
    terminal_punctuation: str = Field(
        default="",
        description="Characters added to the built-in sentence punctuation '.?!'.",
    )
    terminal_quotes: str = Field(
        default="",
        description="Characters added to the built-in closing quotes.",
    )
    nobreak: bool = Field(default=False, description="Honor nobreak_pairs.")
    nobreak_pairs: List[Tuple[re.Pattern, re.Pattern]] = Field(
        default_factory=list,
        description="(last word, next word) pattern pairs that must not be broken apart.",
    )
    tag_paragraph: bool = Field(default=False, description="Prefix paragraphs with tag_text.")
    tag_text: List[str] = Field(
        default_factory=list,
        description="Pre-rendered paragraph tags, one per paragraph.",
    )

    model_config = {"validate_assignment": True}

    @field_validator(*_NON_NEGATIVE_FIELDS, mode="before")
    @classmethod
    def _absolute(cls, value: Any) -> int:
        return abs(int(value))

    @field_validator("split_rules", mode="before")
    @classmethod
    def _check_split_rules(cls, value: Any) -> SplitRule:
        rules = int(value)
        if rules < SplitRule.FIXED or rules > SplitRule.ALL:
            raise ValueError("Invalid value provided for split_rules: {}".format(value))
        return SplitRule(rules)

    @field_validator("nobreak_pairs", mode="before")
    @classmethod
    def _pairs_from_mapping(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return list(value.items())
        return value

    def text_width(self, indent: int) -> int:
        """Width available to words on a line indented by ``indent``."""
        return self.columns - self.left_margin - self.right_margin - indent


@dataclass(frozen=True)
class SplitWord:
    """A word the formatter had to divide across a line boundary.

    Attributes:
        word: The word as it was before splitting.
        first: The part left on the current line (may end in a mark).
        rest: The part carried to the next line; empty or None if nothing
              was carried.
    """

    word: str
    first: str
    rest: Optional[str]
