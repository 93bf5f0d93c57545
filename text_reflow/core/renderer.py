"""Line rendering: margins, indentation, padding and justification.

WHY: Word-to-line assignment is the same for every alignment style; only
the whitespace differs. Rendering is therefore a separate last step that
turns a finished Line into text.

HOW: The rendered words (with their separators) are joined after the left
margin and indent. FILL pads to the line width. JUSTIFY spreads the
missing width over the separators, walking from the last word back to the
second. RIGHT shifts the whole assembled line so its last character sits
at ``columns - right_margin``.

RULES:
- Justification uses ``word_count // 2`` slots, not ``word_count - 1``.
  This halving is long-standing observable behavior and is kept; with
  three or more words it can push a line past its width.
- The terminal line of a paragraph and single-word lines are never
  justified; under JUSTIFY they are filled instead
- Every rendered line ends with a newline; an empty line renders to ""
"""

from __future__ import annotations

from typing import List

from text_reflow.core.line import Line
from text_reflow.models import FormatStyle, FormatterConfig


def justify(pieces: List[str], extra: int) -> List[str]:
    """Distribute ``extra`` spaces over the separators of ``pieces``.

    ``pieces`` are rendered words; every piece but the first starts with
    its separator. Returns a new list.
    """
    slots = len(pieces) // 2
    out = list(pieces)
    if slots == 0 or extra <= 0:
        return out
    base, remainder = divmod(extra, slots)
    for index in range(len(out) - 1, 0, -1):
        pad = base
        if remainder > 0:
            pad += 1
            remainder -= 1
        out[index] = " " * pad + out[index]
    return out


class LineRenderer:
    """Turns finished lines into text under the configured style."""

    def __init__(self, config: FormatterConfig) -> None:
        self.config = config

    def render(self, line: Line, indent: int, width: int, last: bool = False) -> str:
        """Render one line.

        Args:
            line: The finished line.
            indent: Indent (in spaces) after the left margin.
            width: Width available to words on this line.
            last: True for the terminal line of the paragraph.

        Returns:
            The rendered line including its trailing newline.
        """
        if not line:
            return ""

        style = self.config.format_style
        pieces = [token.rendered() for token in line.tokens]
        size = sum(len(piece) for piece in pieces)

        justified = style == FormatStyle.JUSTIFY and not last and len(pieces) > 1
        if justified:
            pieces = justify(pieces, width - size)

        fill = ""
        if style == FormatStyle.FILL or (style == FormatStyle.JUSTIFY and not justified):
            if size <= width:
                fill = " " * (width - size)

        text = "{}{}{}{}\n".format(
            " " * self.config.left_margin, " " * indent, "".join(pieces), fill
        )

        if style == FormatStyle.RIGHT:
            shift = self.config.columns - self.config.right_margin - (len(text) - 1)
            text = " " * shift + text
        return text
