# church_core/core/numbers.py
"""
Church numerals and arithmetic.

A numeral n is "apply f to x exactly n times". There are no negative
numerals: PRED and SUB saturate at ZERO, and the comparisons below are
built on that saturation (EQUALS is a two-sided zero check on SUB, not
a direct comparison).

Bridges to host ints live at the bottom (num / to_int).
"""

from __future__ import annotations

from .booleans import TRUE, FALSE, AND, NOT, Fn
from .pairs import PAIR, FIRST, SECOND


# ---------------------------------------------------------------------------
# Literals and successor
# ---------------------------------------------------------------------------

ZERO: Fn = lambda f: lambda x: x
ONE: Fn = lambda f: lambda x: f(x)
TWO: Fn = lambda f: lambda x: f(f(x))
THREE: Fn = lambda f: lambda x: f(f(f(x)))
FOUR: Fn = lambda f: lambda x: f(f(f(f(x))))
FIVE: Fn = lambda f: lambda x: f(f(f(f(f(x)))))

SUCC: Fn = lambda n: lambda f: lambda x: f(n(f)(x))

SIX = SUCC(FIVE)
SEVEN = SUCC(SIX)
EIGHT = SUCC(SEVEN)
NINE = SUCC(EIGHT)
TEN = SUCC(NINE)


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------

ADD: Fn = lambda m: lambda n: lambda f: lambda x: m(f)(n(f)(x))
MUL: Fn = lambda m: lambda n: lambda f: m(n(f))
POW: Fn = lambda m: lambda n: lambda f: n(m)(f)

DOUBLE: Fn = lambda n: ADD(n)(n)
SQUARE: Fn = lambda n: MUL(n)(n)

# (a, b) -> (b, b + 1); n shifts from (0, 0) leave n - 1 in the first slot.
_SHIFT: Fn = lambda p: PAIR(SECOND(p))(SUCC(SECOND(p)))

PRED: Fn = lambda n: FIRST(n(_SHIFT)(PAIR(ZERO)(ZERO)))
SUB: Fn = lambda m: lambda n: n(PRED)(m)


# ---------------------------------------------------------------------------
# Predicates and comparisons
# ---------------------------------------------------------------------------

IS_ZERO: Fn = lambda n: n(lambda _: FALSE)(TRUE)

EQUALS: Fn = lambda m: lambda n: AND(IS_ZERO(SUB(m)(n)))(IS_ZERO(SUB(n)(m)))

LEQ: Fn = lambda m: lambda n: IS_ZERO(SUB(m)(n))
GT: Fn = lambda m: lambda n: NOT(LEQ(m)(n))
LT: Fn = lambda m: lambda n: NOT(LEQ(n)(m))


# ---------------------------------------------------------------------------
# Host bridges
# ---------------------------------------------------------------------------

def num(n: int) -> Fn:
    """
    Build the numeral for host int n.

    The returned numeral applies f with a host loop rather than nesting
    SUCC, so building large numerals (character codes, say) does not
    cost stack depth. It is interchangeable with SUCC^n(ZERO).
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"num expects a non-negative int, got {type(n).__name__}")
    if n < 0:
        raise ValueError("num only supports n>=0")

    def numeral(f):
        def apply(x):
            for _ in range(n):
                x = f(x)
            return x
        return apply

    return numeral


def to_int(n: Fn) -> int:
    """Bridge a numeral to a host int by counting applications from 0."""
    return n(lambda i: i + 1)(0)
