"""Hyphenator capability: how an overlong word is divided.

WHY: When ``hard_margins`` is on and SplitRule.HYPHENATION is selected, the
formatter asks a pluggable hyphenator where a word may be broken. Callers
may bring their own (dictionary based, language aware, ...) while the
formatter ships a continuation-mark hyphenator that is always available.

HOW: Hyphenator is an ABC with a single context-carrying method,
``hyphenate_to(word, size, config)``. Plain callables and third-party
objects that only take ``(word, size)`` or ``(word, size, config)`` are
wrapped once by ``as_hyphenator()``; their arity is checked at that point so
the line-breaking loop never inspects signatures.

RULES:
- ``size`` is the MAXIMUM length of the first part, marks included
- A hyphenator returns ``(first, rest)`` or ``(None, word)`` if it cannot split
- The continuation hyphenator fails for ``size < 2`` (no room for the mark)
- PyphenHyphenator fails when no syllable break fits in ``size``
- Wrong arity raises TypeError at assignment time
"""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Optional, Tuple

import pyphen

from text_reflow.config import CONTINUATION_MARK

if TYPE_CHECKING:
    from text_reflow.models import FormatterConfig

SplitResult = Tuple[Optional[str], str]


class Hyphenator(ABC):
    """Abstract base for word hyphenators.

    To plug in a new hyphenation strategy:
    1. Subclass Hyphenator
    2. Implement hyphenate_to()
    3. Assign an instance to ``TextFormatter.hyphenator``
    """

    @abstractmethod
    def hyphenate_to(
        self,
        word: str,
        size: int,
        config: Optional[FormatterConfig] = None,
    ) -> SplitResult:
        """Divide ``word`` so the first part is at most ``size`` characters.

        Args:
            word: The word to divide.
            size: Maximum length of the first part, including any mark.
            config: The active formatter settings, for context.

        Returns:
            ``(first, rest)`` on success, ``(None, word)`` otherwise.
        """


class ContinuationHyphenator(Hyphenator):
    """Split with a trailing continuation mark, e.g. ``repr\\`` + ``esentation``."""

    def __init__(self, mark: str = CONTINUATION_MARK) -> None:
        self.mark = mark

    def hyphenate_to(
        self,
        word: str,
        size: int,
        config: Optional[FormatterConfig] = None,
    ) -> SplitResult:
        keep = size - len(self.mark)
        if keep < 1:
            return None, word
        return word[:keep] + self.mark, word[keep:]


class PyphenHyphenator(Hyphenator):
    """Dictionary hyphenation at syllable boundaries, backed by pyphen.

    Args:
        lang: pyphen dictionary name, e.g. ``en_US`` or ``de_DE``.
        hyphen: Mark appended to the first part.

    Raises:
        KeyError: If pyphen has no dictionary for ``lang``.
    """

    def __init__(self, lang: str = "en_US", hyphen: str = "-") -> None:
        self.dictionary = pyphen.Pyphen(lang=lang)
        self.hyphen = hyphen

    def hyphenate_to(
        self,
        word: str,
        size: int,
        config: Optional[FormatterConfig] = None,
    ) -> SplitResult:
        parts = self.dictionary.wrap(word, size, hyphen=self.hyphen)
        if parts is None:
            return None, word
        first, rest = parts
        return first, rest


class CallableHyphenator(Hyphenator):
    """Adapter for a function (or bound method) taking 2 or 3 arguments."""

    def __init__(self, func: Callable[..., Any]) -> None:
        arity = _positional_arity(func)
        if arity not in (2, 3):
            raise TypeError(
                "{!r} must take exactly two or three arguments (word, size[, config]).".format(func)
            )
        self.func = func
        self.wants_config = arity == 3

    def hyphenate_to(
        self,
        word: str,
        size: int,
        config: Optional[FormatterConfig] = None,
    ) -> SplitResult:
        if self.wants_config:
            first, rest = self.func(word, size, config)
        else:
            first, rest = self.func(word, size)
        return first, rest


def _positional_arity(func: Callable[..., Any]) -> int:
    """Count the positional parameters of ``func``; -1 if it takes *args."""
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        return -1
    count = 0
    for param in params:
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return -1
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return count


def as_hyphenator(candidate: Any) -> Hyphenator:
    """Coerce ``candidate`` into a Hyphenator.

    Accepts None (the built-in continuation hyphenator), a Hyphenator
    instance, any object with a ``hyphenate_to`` method, or a plain callable.

    Raises:
        TypeError: If the candidate cannot hyphenate or has the wrong arity.
    """
    if candidate is None:
        return ContinuationHyphenator()
    if isinstance(candidate, Hyphenator):
        return candidate
    method = getattr(candidate, "hyphenate_to", None)
    if method is not None and callable(method):
        return CallableHyphenator(method)
    if callable(candidate):
        return CallableHyphenator(candidate)
    raise TypeError("{!r} is not a valid hyphenator.".format(candidate))


def split_word_to(word: str, size: int) -> Tuple[str, str]:
    """Split ``word`` at exactly ``size`` characters with no decoration."""
    return word[:size], word[size:]
