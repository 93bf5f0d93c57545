"""Word stream consumed by the line builder."""

from __future__ import annotations

from typing import Iterable, List, Optional


class WordSource:
    """Whitespace-delimited words of one paragraph, consumed from the front.

    Words are stored reversed so that taking the next word is a ``pop()``
    from the end of a list. Words the builder cannot place yet are pushed
    back with ``push_front()`` and come out again in their original order.
    """

    def __init__(self, text: str) -> None:
        self._stack: List[str] = text.split()[::-1]

    def __len__(self) -> int:
        return len(self._stack)

    def __bool__(self) -> bool:
        return bool(self._stack)

    def pop(self) -> Optional[str]:
        """Take the next word, or None when the paragraph is exhausted."""
        if not self._stack:
            return None
        return self._stack.pop()

    def push_front(self, words: Iterable[str]) -> None:
        """Return ``words`` to the front of the stream, first word first out."""
        for word in reversed([w for w in words if w]):
            self._stack.append(word)
