#!/usr/bin/env python3
"""
demo_church.py

Tiny, friendly walkthrough of the church-core encodings:

- Booleans and their truth tables
- Numerals and arithmetic (with saturating subtraction)
- Factorial through Y
- Lists and strings
- Objects, shadowing and SEND
- LET / WHILE / FOR

Run with:
    python3 demo_church.py
"""

from __future__ import annotations

import church_core as c
from church_core import config


def demo_booleans() -> None:
    print("=== Booleans ===")
    for p_name, p in (("true", c.TRUE), ("false", c.FALSE)):
        for q_name, q in (("true", c.TRUE), ("false", c.FALSE)):
            print(f"{p_name} & {q_name}:", c.to_bool(c.AND(p)(q)))
            print(f"{p_name} | {q_name}:", c.to_bool(c.OR(p)(q)))
        print(f"!{p_name}:", c.to_bool(c.NOT(p)))
    print()


def demo_numbers() -> None:
    print("=== Numbers ===")
    print("4++:", c.to_int(c.SUCC(c.FOUR)))
    print("5--:", c.to_int(c.PRED(c.FIVE)))
    print("0--:", c.to_int(c.PRED(c.ZERO)))
    print("6+7:", c.to_int(c.ADD(c.SIX)(c.SEVEN)))
    print("7-6:", c.to_int(c.SUB(c.SEVEN)(c.SIX)))
    print("6-7:", c.to_int(c.SUB(c.SIX)(c.SEVEN)))
    print("8*9:", c.to_int(c.MUL(c.EIGHT)(c.NINE)))
    print("10^2:", c.to_int(c.POW(c.TEN)(c.TWO)))
    print("2<=4:", c.to_bool(c.LEQ(c.TWO)(c.FOUR)))
    print("4<=2:", c.to_bool(c.LEQ(c.FOUR)(c.TWO)))
    print("2<4:", c.to_bool(c.LT(c.TWO)(c.FOUR)))
    print("FAC(5):", c.to_int(c.FAC(c.FIVE)))
    print()


def demo_lists_and_strings() -> None:
    print("=== Lists ===")
    xs = c.list_from_py([3, 2, 1], c.num)
    print("[3,2,1]:", c.to_array(xs, c.to_int))
    print("SUM:", c.to_int(c.SUMLIST(xs)))
    print("MAP(DOUBLE):", c.to_array(c.MAP(c.DOUBLE)(xs), c.to_int))
    print("HEAD:", c.to_int(c.HEAD(xs)), "TAIL:", c.to_array(c.TAIL(xs), c.to_int))
    print()

    print("=== Strings ===")
    hello = c.to_church_string("Hello ")
    world = c.to_church_string("world")
    print('"Hello "+"world":', c.from_church_string(c.STR_CONCAT(hello)(world)))
    foo = c.to_church_string("foo")
    print('"foo"=="foo":', c.to_bool(c.STR_EQ(foo)(c.to_church_string("foo"))))
    print('"foo"=="bar":', c.to_bool(c.STR_EQ(foo)(c.to_church_string("bar"))))
    print()


def demo_objects() -> None:
    from church_core.programs import AGE, DOGAGE

    print("=== Objects ===")
    user = c.make_user(c.THREE)
    older = c.SET(user)(AGE)(c.FIVE)
    print("AGE:", c.to_int(c.GET(user)(AGE)), "-> shadowed:", c.to_int(c.GET(older)(AGE)))
    print("dog years:", c.to_int(c.SEND(user)(DOGAGE)), c.to_int(c.SEND(older)(DOGAGE)))
    print()


def demo_control_flow() -> None:
    print("=== Control flow ===")
    print("let x=4; let y=7; x+y:", c.to_int(c.LET(c.FOUR)(lambda x: c.LET(c.SEVEN)(lambda y: c.ADD(x)(y)))))
    print("0+1+...+5 (WHILE):", c.to_int(c.SUM_0TON(c.FIVE)))
    print("1*2*...*5 (FOR):", c.to_int(c.MUL_1TON(c.FIVE)))
    print()


def main() -> None:
    config.apply_recursion_limit()
    demo_booleans()
    demo_numbers()
    demo_lists_and_strings()
    demo_objects()
    demo_control_flow()


if __name__ == "__main__":
    main()
