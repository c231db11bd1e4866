# church_core/programs.py
"""
Ready-made encoded programs.

These are the worked examples the rest of the tooling (registry, CLI,
demo) runs. Each is built only from the combinators, so they double as
end-to-end checks of the layers underneath:

    FAC          factorial through Y
    SUM_0TON     0 + 1 + ... + n with WHILE over (index, acc)
    MUL_1TON     1 * 2 * ... * n with FOR
    DOG_AGE      method reading AGE from self; make_user builds an object
"""

from __future__ import annotations

from church_core.core.booleans import NOT, Fn
from church_core.core.pairs import PAIR, FIRST, SECOND
from church_core.core.combinators import Y, IF
from church_core.core.numbers import (
    ZERO,
    ONE,
    TWO,
    THREE,
    FOUR,
    SEVEN,
    SUCC,
    PRED,
    ADD,
    MUL,
    IS_ZERO,
    LEQ,
)
from church_core.control import LET, WHILE, FOR
from church_core.objects import EMPTY_OBJ, SET, method

# Object keys used by the examples.
NAME = ONE
AGE = TWO
CITY = THREE
DOGAGE = FOUR

# n <= 1 stops the recursion, so FAC(ZERO) is ONE as well.
FAC: Fn = Y(lambda self: lambda n:
    IF(LEQ(n)(ONE))
      (lambda: ONE)
      (lambda: MUL(n)(self(PRED(n)))))

SUM_0TON: Fn = lambda n: SECOND(
    WHILE
      (lambda p: NOT(IS_ZERO(FIRST(p))))
      (lambda p:
          LET(FIRST(p))(lambda i:
              LET(SECOND(p))(lambda a:
                  PAIR(PRED(i))(ADD(i)(a)))))
      (PAIR(n)(ZERO)))

MUL_1TON: Fn = lambda n: FOR(ONE)(lambda i: LEQ(i)(n))(SUCC)(ONE)(lambda acc: lambda i: MUL(acc)(i))


def dog_age(self: Fn) -> Fn:
    """Age in dog years: self's AGE times seven."""
    return MUL(self(AGE))(SEVEN)


DOG_AGE = method(dog_age)


def make_user(age: Fn, name: Fn = ONE) -> Fn:
    """{NAME: name, AGE: age, DOGAGE: <method>}"""
    return SET(SET(SET(EMPTY_OBJ)(NAME)(name))(DOGAGE)(DOG_AGE))(AGE)(age)
