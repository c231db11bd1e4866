# church_core/control.py
"""
Structured control flow.

    LET(v)(body)                 body(v)
    WHILE(cond)(step)(state)     step state until cond(state) is FALSE
    FOR(i0)(cond)(step)(acc0)(body)
                                 WHILE over PAIR(index)(acc); cond sees the
                                 index, each round yields
                                 PAIR(step(i))(body(acc)(i)); returns acc

Every round builds a new state value. Termination is the caller's job:
a condition that never turns FALSE recurses until the host stack runs out.
"""

from __future__ import annotations

from church_core.core.booleans import Fn
from church_core.core.pairs import PAIR, FIRST, SECOND
from church_core.core.combinators import Y, IF

LET: Fn = lambda v: lambda body: body(v)

WHILE: Fn = Y(lambda self: lambda cond: lambda transform: lambda state:
    IF(cond(state))
      (lambda: self(cond)(transform)(transform(state)))
      (lambda: state))

FOR: Fn = lambda init_i: lambda cond: lambda step: lambda init_acc: lambda body: SECOND(
    WHILE
      (lambda p: cond(FIRST(p)))
      (lambda p:
          LET(FIRST(p))(lambda i:
              LET(SECOND(p))(lambda acc:
                  PAIR(step(i))(body(acc)(i)))))
      (PAIR(init_i)(init_acc)))
