"""Configuration constants, sentence tables, and .env loading.

WHY: The formatter, CLI, and HTTP server all need the same built-in
abbreviation list and sentence-end character classes, and the entry points
need overridable defaults. Keeping them as plain module-level data means
both humans and tools can adjust them without touching any logic.

HOW: python-dotenv loads the .env file on import. Library defaults
(72 columns, 4-space first indent, 8-space tabs) are constants; the CLI and
server read their defaults from environment variables that fall back to
those constants.

RULES:
- ABBREVIATIONS are matched exactly, without the trailing period
- TERMINAL_PUNCTUATION / TERMINAL_QUOTES are the built-in sentence-end
  character classes; configured characters are appended, never replacing
- Environment overrides only affect the CLI and server, never the library
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Sentence rules
# ---------------------------------------------------------------------------

ABBREVIATIONS: frozenset[str] = frozenset({"Mr", "Mrs", "Ms", "Jr", "Sr", "Dr"})
"""Common English abbreviations never followed by a sentence double space."""

TERMINAL_PUNCTUATION = ".?!"
TERMINAL_QUOTES = "'\""

CONTINUATION_MARK = "\\"
"""Mark appended to the first half of a continuation split."""

# ---------------------------------------------------------------------------
# Library defaults
# ---------------------------------------------------------------------------

DEFAULT_COLUMNS = 72
DEFAULT_FIRST_INDENT = 4
DEFAULT_BODY_INDENT = 0
DEFAULT_TABSTOP = 8


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Entry point defaults (CLI and server)
# ---------------------------------------------------------------------------

ENV_COLUMNS = _env_int("TEXT_REFLOW_COLUMNS", DEFAULT_COLUMNS)
ENV_FIRST_INDENT = _env_int("TEXT_REFLOW_FIRST_INDENT", DEFAULT_FIRST_INDENT)
ENV_BODY_INDENT = _env_int("TEXT_REFLOW_BODY_INDENT", DEFAULT_BODY_INDENT)
ENV_TABSTOP = _env_int("TEXT_REFLOW_TABSTOP", DEFAULT_TABSTOP)

LOG_LEVEL = os.getenv("TEXT_REFLOW_LOG_LEVEL", "").strip().upper()
SERVER_HOST = os.getenv("TEXT_REFLOW_HOST", "127.0.0.1")
SERVER_PORT = _env_int("TEXT_REFLOW_PORT", 8000)
