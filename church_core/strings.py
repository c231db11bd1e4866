# church_core/strings.py
"""
Strings as lists of numeral character codes.

Concatenation and equality are the list operations; the only new code
is the boundary conversion to and from host text.
"""

from __future__ import annotations

from functools import reduce

from church_core.core.booleans import Fn
from church_core.core.numbers import num, to_int
from church_core.listutils import NIL, LIST_NODE, APPEND, LIST_EQ, to_array

STR_CONCAT: Fn = APPEND
STR_EQ: Fn = LIST_EQ


def to_church_string(text: str) -> Fn:
    """Encode host text, folding characters right to left onto NIL."""
    return reduce(
        lambda acc, ch: LIST_NODE(num(ord(ch)))(acc),
        reversed(text),
        NIL,
    )


def from_church_string(s: Fn) -> str:
    """Decode a Church string back to host text."""
    return "".join(chr(code) for code in to_array(s, to_int))
