# church_core/core/booleans.py
"""
Church booleans.

A boolean is a two-argument selector:

    TRUE  = a => b => a
    FALSE = a => b => b

AND / OR / NOT only re-select between their arguments and the two
constants; there is no host-level branching anywhere in this module.
"""

from __future__ import annotations

from typing import Any, Callable

Fn = Callable[[Any], Any]

TRUE: Fn = lambda a: lambda b: a
FALSE: Fn = lambda a: lambda b: b

AND: Fn = lambda p: lambda q: p(q)(p)
OR: Fn = lambda p: lambda q: p(p)(q)
NOT: Fn = lambda p: p(FALSE)(TRUE)


def to_bool(b: Fn) -> bool:
    """Bridge a Church boolean to a host bool."""
    return b(True)(False)
