"""Text Reflow: fixed-width paragraph formatting.

WHY: Plain-text documents (READMEs, commit messages, mail, legal clauses)
need to be rewrapped to a fixed width with margins, indentation, alignment
and occasional word splitting. This package turns raw paragraphs into
formatted lines and reports every word it had to divide.

HOW: Three layers. ``core`` fills and renders the lines of one paragraph;
``formatter.TextFormatter`` drives it over paragraphs, tags and tabs; the
CLI and the FastAPI server expose the formatter to shells and HTTP clients.

RULES:
- All settings live in one validated FormatterConfig
- Formatting is pure: the only side effect is the split-word log
- Hyphenation is pluggable through the Hyphenator ABC
"""

from text_reflow.formatter import TextFormatter
from text_reflow.hyphenation import ContinuationHyphenator, Hyphenator, PyphenHyphenator
from text_reflow.models import FormatStyle, FormatterConfig, SplitRule, SplitWord
from text_reflow.tags import make_tags

__version__ = "0.1.0"

__all__ = [
    "ContinuationHyphenator",
    "FormatStyle",
    "FormatterConfig",
    "Hyphenator",
    "PyphenHyphenator",
    "SplitRule",
    "SplitWord",
    "TextFormatter",
    "make_tags",
]
