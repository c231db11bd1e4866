# church_core/program_registry.py
"""
Simple in-memory registry for named Church programs.

Lets the API and CLI talk in terms of names like "factorial" instead of
passing encoded functions around.

Design:

- Registry is a dict[str, NamedProgram].
- Helpers: register_program, get_program, has_program, clear_registry,
  list_program_names.
- Built-in programs are seeded lazily on first lookup, which keeps this
  module free of import-order problems.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict

from church_core.core.booleans import Fn, to_bool
from church_core.core.numbers import to_int

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamedProgram:
    """
    A Church program plus what the host needs to call it.

    fn:          curried Church function
    arity:       number of numeral arguments (ignored when takes_list)
    decode:      Church result -> host value
    takes_list:  pass the whole input as one Church list of numerals
    """

    name: str
    fn: Fn
    arity: int
    decode: Callable[[Any], Any] = to_int
    takes_list: bool = False
    doc: str = ""


_REGISTRY: Dict[str, NamedProgram] = {}
_defaults_seeded = False


# ---------------------------------------------------------------------------
# Core registry operations
# ---------------------------------------------------------------------------

def register_program(program: NamedProgram) -> None:
    """Register (or overwrite) a named program."""
    if program.name in _REGISTRY:
        _logger.debug("overwriting program %r", program.name)
    _REGISTRY[program.name] = program


def get_program(name: str) -> NamedProgram | None:
    """Look up a program by name, or None."""
    _ensure_defaults()
    return _REGISTRY.get(name)


def has_program(name: str) -> bool:
    _ensure_defaults()
    return name in _REGISTRY


def clear_registry() -> None:
    """
    Remove all registered programs, built-ins included.

    Built-ins come back on the next lookup.
    """
    global _defaults_seeded
    _REGISTRY.clear()
    _defaults_seeded = False


def list_program_names() -> list[str]:
    """All registered names, sorted for stability."""
    _ensure_defaults()
    return sorted(_REGISTRY.keys())


# ---------------------------------------------------------------------------
# Default / built-in programs
# ---------------------------------------------------------------------------

def _to_int_list(lst: Fn) -> list[int]:
    from church_core.listutils import to_array

    return to_array(lst, to_int)


def _ensure_defaults() -> None:
    global _defaults_seeded
    if _defaults_seeded:
        return
    _defaults_seeded = True

    # Local imports avoid a cycle through church_core/__init__.
    from church_core.core import numbers as n
    from church_core.listutils import SUMLIST, MAP
    from church_core.objects import SEND
    from church_core.programs import FAC, SUM_0TON, MUL_1TON, DOGAGE, make_user

    builtins = [
        NamedProgram("succ", n.SUCC, 1, doc="n + 1"),
        NamedProgram("pred", n.PRED, 1, doc="n - 1, saturating at 0"),
        NamedProgram("add", n.ADD, 2, doc="m + n"),
        NamedProgram("sub", n.SUB, 2, doc="m - n, saturating at 0"),
        NamedProgram("mul", n.MUL, 2, doc="m * n"),
        NamedProgram("pow", n.POW, 2, doc="m ** n"),
        NamedProgram("double", n.DOUBLE, 1, doc="n + n"),
        NamedProgram("square", n.SQUARE, 1, doc="n * n"),
        NamedProgram("is-zero", n.IS_ZERO, 1, decode=to_bool, doc="n == 0"),
        NamedProgram("equals", n.EQUALS, 2, decode=to_bool, doc="m == n"),
        NamedProgram("leq", n.LEQ, 2, decode=to_bool, doc="m <= n"),
        NamedProgram("lt", n.LT, 2, decode=to_bool, doc="m < n"),
        NamedProgram("gt", n.GT, 2, decode=to_bool, doc="m > n"),
        NamedProgram("factorial", FAC, 1, doc="n! through Y"),
        NamedProgram("sum-to", SUM_0TON, 1, doc="0 + ... + n with WHILE"),
        NamedProgram("product-to", MUL_1TON, 1, doc="1 * ... * n with FOR"),
        NamedProgram(
            "dog-age",
            lambda age: SEND(make_user(age))(DOGAGE),
            1,
            doc="SEND DOGAGE to a user of the given age",
        ),
        NamedProgram("sum-list", SUMLIST, 0, takes_list=True, doc="sum of a list"),
        NamedProgram(
            "double-list",
            MAP(n.DOUBLE),
            0,
            decode=_to_int_list,
            takes_list=True,
            doc="MAP(DOUBLE) over a list",
        ),
    ]
    for prog in builtins:
        if prog.name not in _REGISTRY:
            register_program(prog)
    _logger.debug("seeded %d built-in programs", len(builtins))
