# church_core/api.py
"""
High-level API over named programs.

    run_named_program(name, xs)  encode host ints, run, decode

Arguments are always non-negative host ints. A program that takes_list
receives xs as one Church list; otherwise each int becomes a numeral and
the program is applied to them one at a time (curried).
"""

from __future__ import annotations

import logging
from typing import Any, List

from church_core.core.numbers import num
from church_core.listutils import list_from_py
from church_core.program_registry import get_program

_logger = logging.getLogger(__name__)


def run_named_program(name: str, xs: List[int]) -> Any:
    """
    Look up a registered program and run it on host ints.

    Raises:
        KeyError    no such program
        ValueError  wrong argument count, or a negative argument
    """
    prog = get_program(name)
    if prog is None:
        raise KeyError(f"No program named {name!r} is registered")

    _logger.debug("running %s on %r", name, xs)
    if prog.takes_list:
        result = prog.fn(list_from_py(xs, num))
    else:
        if len(xs) != prog.arity:
            raise ValueError(
                f"{name} expects {prog.arity} argument(s), got {len(xs)}"
            )
        result = prog.fn
        for x in xs:
            result = result(num(x))

    out = prog.decode(result)
    _logger.debug("%s%r -> %r", name, tuple(xs), out)
    return out
