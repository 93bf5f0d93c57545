"""Shared test fixtures for the text_reflow test suite.

WHY: Most tests format the same handful of paragraphs under different
settings. Centralizing the sample text and a formatter factory keeps the
expected outputs in one vocabulary across modules.

HOW: ``make_formatter`` builds a TextFormatter with ``first_indent=0`` (so
hand-computed line widths stay simple) plus any overrides. The sample
paragraphs are plain module constants so parametrized tests can use them.

RULES:
- Fixtures never depend on environment variables
- Expected outputs in tests are computed by hand, not by the code under test
"""

from typing import Any, Callable

import pytest

from text_reflow.formatter import TextFormatter

FOX = "The quick brown fox jumps over the lazy dog."

LOREM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do "
    "eiusmod tempor incididunt ut labore et dolore magna aliqua. Ut enim "
    "ad minim veniam, quis nostrud exercitation ullamco laboris nisi ut "
    "aliquip ex ea commodo consequat."
)


@pytest.fixture
def make_formatter() -> Callable[..., TextFormatter]:
    """Factory for formatters with no first-line indent by default."""

    def _make(**overrides: Any) -> TextFormatter:
        overrides.setdefault("first_indent", 0)
        return TextFormatter(**overrides)

    return _make


@pytest.fixture
def fox() -> str:
    return FOX


@pytest.fixture
def lorem() -> str:
    return LOREM
