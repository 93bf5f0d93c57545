"""Paragraph numbering labels.

WHY: Tagged paragraphs (numbered lists, lettered clauses) need one
pre-rendered label per paragraph. The formatter only consumes an ordered
list of strings; this module produces the common sequences.

HOW: Each style converts a 1-based position into a label body, which is
then wrapped by a ``template`` such as ``"{}."`` or ``"({})"``.

RULES:
- Positions are 1-based; position 0 and below are rejected
- Alpha labels continue past "z" as "aa", "ab", ... (bijective base 26)
- Roman numerals are standard subtractive form, 1..3999
"""

from __future__ import annotations

from typing import Callable, Dict, List

_ROMAN_NUMERALS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


def int_to_roman(number: int) -> str:
    """Convert 1..3999 to an upper-case roman numeral."""
    if number < 1 or number > 3999:
        raise ValueError("Roman numerals cover 1..3999, got {}".format(number))
    parts = []
    for value, numeral in _ROMAN_NUMERALS:
        count, number = divmod(number, value)
        parts.append(numeral * count)
    return "".join(parts)


def int_to_alpha(number: int) -> str:
    """Convert a 1-based position to a lower-case letter label (1 -> 'a')."""
    if number < 1:
        raise ValueError("Alpha labels start at 1, got {}".format(number))
    letters = []
    while number > 0:
        number, offset = divmod(number - 1, 26)
        letters.append(chr(ord("a") + offset))
    return "".join(reversed(letters))


TAG_STYLES: Dict[str, Callable[[int], str]] = {
    "number": str,
    "alpha": int_to_alpha,
    "ALPHA": lambda n: int_to_alpha(n).upper(),
    "roman": lambda n: int_to_roman(n).lower(),
    "ROMAN": int_to_roman,
}


def make_tags(style: str, count: int, start: int = 1, template: str = "{}.") -> List[str]:
    """Build ``count`` labels of ``style`` beginning at position ``start``.

    Raises:
        ValueError: If the style is unknown or a position is out of range.
    """
    if style not in TAG_STYLES:
        raise ValueError(
            "Unknown tag style '{}'. Available: {}".format(style, ", ".join(TAG_STYLES))
        )
    if start < 1:
        raise ValueError("Tag positions start at 1, got {}".format(start))
    label = TAG_STYLES[style]
    return [template.format(label(position)) for position in range(start, start + count)]
