# church_core/listutils.py
"""
Singly linked lists over pairs.

Design:
-------
* NIL              -> PAIR(TRUE)(TRUE)            (tag TRUE = empty)
* LIST_NODE(h)(t)  -> PAIR(FALSE)(PAIR(h)(t))     (tag FALSE = node)

IS_NIL reads the tag; HEAD / TAIL project through the inner pair.

The traversals (SUMLIST, MAP, APPEND, LIST_EQ) are Y + IF case splits
on IS_NIL. They are linear, use one stack frame group per element, and
never terminate on a cyclic list.

Host bridges (list_from_py / to_array) are the only functions here that
use Python control flow.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

from church_core.core.booleans import TRUE, FALSE, AND, Fn, to_bool
from church_core.core.pairs import PAIR, FIRST, SECOND
from church_core.core.combinators import Y, IF
from church_core.core.numbers import ZERO, ADD, EQUALS


# ---------------------------------------------------------------------------
# Core constructors and accessors
# ---------------------------------------------------------------------------

NIL: Fn = PAIR(TRUE)(TRUE)

LIST_NODE: Fn = lambda x: lambda y: PAIR(FALSE)(PAIR(x)(y))

IS_NIL: Fn = lambda lst: FIRST(lst)
HEAD: Fn = lambda lst: FIRST(SECOND(lst))
TAIL: Fn = lambda lst: SECOND(SECOND(lst))


# ---------------------------------------------------------------------------
# Traversals
# ---------------------------------------------------------------------------

SUMLIST: Fn = Y(lambda self: lambda lst:
    IF(IS_NIL(lst))
      (lambda: ZERO)
      (lambda: ADD(HEAD(lst))(self(TAIL(lst)))))

MAP: Fn = Y(lambda self: lambda f: lambda lst:
    IF(IS_NIL(lst))
      (lambda: NIL)
      (lambda: LIST_NODE(f(HEAD(lst)))(self(f)(TAIL(lst)))))

APPEND: Fn = Y(lambda self: lambda l1: lambda l2:
    IF(IS_NIL(l1))
      (lambda: l2)
      (lambda: LIST_NODE(HEAD(l1))(self(TAIL(l1))(l2))))

# Equal only if both run out together; a length mismatch is FALSE.
LIST_EQ: Fn = Y(lambda self: lambda l1: lambda l2:
    IF(IS_NIL(l1))
      (lambda: IS_NIL(l2))
      (lambda: IF(IS_NIL(l2))
          (lambda: FALSE)
          (lambda: AND(EQUALS(HEAD(l1))(HEAD(l2)))(self(TAIL(l1))(TAIL(l2))))))


# ---------------------------------------------------------------------------
# Python list <-> Church list bridges
# ---------------------------------------------------------------------------

def _identity(x: Any) -> Any:
    return x


def list_from_py(
    seq: Iterable[Any],
    element_converter: Callable[[Any], Any] = _identity,
) -> Fn:
    """
    Build a Church list from a Python iterable, keeping reading order.

    Example:
        list_from_py([3, 2, 1], num)  ->
            LIST_NODE(num(3))(LIST_NODE(num(2))(LIST_NODE(num(1))(NIL)))
    """
    m = NIL
    for item in reversed(list(seq)):
        m = LIST_NODE(element_converter(item))(m)
    return m


def to_array(
    lst: Fn,
    element_converter: Callable[[Any], Any] = _identity,
) -> list[Any]:
    """
    Walk a Church list into a Python list.

    Elements are returned raw unless element_converter is given
    (to_int is the usual choice for lists of numerals).
    """
    out: list[Any] = []
    cur = lst
    while not to_bool(IS_NIL(cur)):
        out.append(element_converter(HEAD(cur)))
        cur = TAIL(cur)
    return out
