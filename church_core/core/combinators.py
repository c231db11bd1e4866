# church_core/core/combinators.py
"""
Fixed point and conditional.

Python evaluates arguments eagerly, so both combinators delay work:

    Y  - the self application x(x) is eta-expanded to y => x(x)(y),
         so the recursive step only unrolls when it is called.
    IF - both branches are zero-argument thunks; the boolean picks
         one and only that one is invoked.

Any conditional that guards a recursive call must go through IF with
thunks, otherwise the unchosen branch recurses first and never returns.
"""

from __future__ import annotations

from .booleans import Fn

Y: Fn = lambda f: (lambda x: x(x))(lambda x: f(lambda y: x(x)(y)))

IF: Fn = lambda p: lambda a: lambda b: p(a)(b)()
