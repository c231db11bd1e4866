# church_core/core/pairs.py
"""
Pairs: the only aggregate-of-two in the encoding.

    PAIR(x)(y) = f => f(x)(y)

FIRST hands the pair the TRUE selector, SECOND the FALSE selector.
List nodes, loop state and the PRED shift all sit on top of this.
"""

from __future__ import annotations

from .booleans import TRUE, FALSE, Fn

PAIR: Fn = lambda x: lambda y: lambda f: f(x)(y)
FIRST: Fn = lambda p: p(TRUE)
SECOND: Fn = lambda p: p(FALSE)
