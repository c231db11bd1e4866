# church_core/__init__.py
"""
church-core public API surface.

Everything is a function. This module re-exports the layers, leaf first:

    - Booleans: TRUE, FALSE, AND, OR, NOT, to_bool
    - Pairs: PAIR, FIRST, SECOND
    - Recursion / selection: Y, IF
    - Numerals: ZERO..TEN, SUCC, PRED, ADD, SUB, MUL, POW, DOUBLE, SQUARE,
                IS_ZERO, EQUALS, LEQ, LT, GT, num, to_int
    - Lists: NIL, LIST_NODE, IS_NIL, HEAD, TAIL, SUMLIST, MAP, APPEND,
             LIST_EQ, list_from_py, to_array
    - Strings: to_church_string, from_church_string, STR_CONCAT, STR_EQ
    - Objects: EMPTY_OBJ, SET, GET, SEND, method, ObjectShapeError
    - Control flow: LET, WHILE, FOR
    - Programs: FAC, SUM_0TON, MUL_1TON, make_user, run_named_program
"""

from __future__ import annotations

from .core.booleans import TRUE, FALSE, AND, OR, NOT, to_bool
from .core.pairs import PAIR, FIRST, SECOND
from .core.combinators import Y, IF
from .core.numbers import (
    ZERO,
    ONE,
    TWO,
    THREE,
    FOUR,
    FIVE,
    SIX,
    SEVEN,
    EIGHT,
    NINE,
    TEN,
    SUCC,
    PRED,
    ADD,
    SUB,
    MUL,
    POW,
    DOUBLE,
    SQUARE,
    IS_ZERO,
    EQUALS,
    LEQ,
    LT,
    GT,
    num,
    to_int,
)
from .listutils import (
    NIL,
    LIST_NODE,
    IS_NIL,
    HEAD,
    TAIL,
    SUMLIST,
    MAP,
    APPEND,
    LIST_EQ,
    list_from_py,
    to_array,
)
from .strings import to_church_string, from_church_string, STR_CONCAT, STR_EQ
from .objects import EMPTY_OBJ, SET, GET, SEND, method, Method, ObjectShapeError
from .control import LET, WHILE, FOR
from .programs import FAC, SUM_0TON, MUL_1TON, make_user
from .api import run_named_program

__all__ = [
    "TRUE", "FALSE", "AND", "OR", "NOT", "to_bool",
    "PAIR", "FIRST", "SECOND",
    "Y", "IF",
    "ZERO", "ONE", "TWO", "THREE", "FOUR", "FIVE",
    "SIX", "SEVEN", "EIGHT", "NINE", "TEN",
    "SUCC", "PRED", "ADD", "SUB", "MUL", "POW", "DOUBLE", "SQUARE",
    "IS_ZERO", "EQUALS", "LEQ", "LT", "GT", "num", "to_int",
    "NIL", "LIST_NODE", "IS_NIL", "HEAD", "TAIL",
    "SUMLIST", "MAP", "APPEND", "LIST_EQ", "list_from_py", "to_array",
    "to_church_string", "from_church_string", "STR_CONCAT", "STR_EQ",
    "EMPTY_OBJ", "SET", "GET", "SEND", "method", "Method", "ObjectShapeError",
    "LET", "WHILE", "FOR",
    "FAC", "SUM_0TON", "MUL_1TON", "make_user",
    "run_named_program",
]
