"""
Numeral invariants.

- num <-> to_int round trip
- ADD / MUL / POW against host arithmetic on small grids
- saturating PRED / SUB
- comparisons built on saturation
"""

import pytest

from church_core import (
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
    to_bool,
)

LITERALS = [ZERO, ONE, TWO, THREE, FOUR, FIVE, SIX, SEVEN, EIGHT, NINE, TEN]


@pytest.mark.parametrize("n", range(0, 16))
def test_num_roundtrip(n):
    assert to_int(num(n)) == n


@pytest.mark.parametrize("n, literal", list(enumerate(LITERALS)))
def test_literals(n, literal):
    assert to_int(literal) == n
    assert to_bool(EQUALS(literal)(num(n)))


def test_num_rejects_negative_and_non_int():
    with pytest.raises(ValueError):
        num(-1)
    with pytest.raises(TypeError):
        num(2.0)
    with pytest.raises(TypeError):
        num(True)


@pytest.mark.parametrize("n", range(0, 10))
def test_succ_pred(n):
    assert to_int(SUCC(num(n))) == n + 1
    assert to_int(PRED(SUCC(num(n)))) == n


def test_pred_of_zero_saturates():
    assert to_int(PRED(ZERO)) == 0
    assert to_int(PRED(PRED(ONE))) == 0


@pytest.mark.parametrize("a", range(0, 11))
@pytest.mark.parametrize("b", range(0, 11))
def test_add_mul_grid(a, b):
    assert to_int(ADD(num(a))(num(b))) == a + b
    assert to_int(MUL(num(a))(num(b))) == a * b


@pytest.mark.parametrize("a", range(0, 6))
@pytest.mark.parametrize("b", range(0, 4))
def test_pow_small_exponents(a, b):
    assert to_int(POW(num(a))(num(b))) == a ** b


@pytest.mark.parametrize("a", range(0, 9))
@pytest.mark.parametrize("b", range(0, 9))
def test_sub_saturates(a, b):
    assert to_int(SUB(num(a))(num(b))) == max(a - b, 0)


def test_double_and_square():
    assert to_int(DOUBLE(SEVEN)) == 14
    assert to_int(SQUARE(SIX)) == 36


def test_is_zero():
    assert to_bool(IS_ZERO(ZERO))
    assert not to_bool(IS_ZERO(ONE))
    assert to_bool(IS_ZERO(SUB(TWO)(FIVE)))


def test_comparisons():
    assert to_bool(LEQ(TWO)(FOUR)) is True
    assert to_bool(LEQ(FOUR)(TWO)) is False
    assert to_bool(LEQ(TWO)(TWO)) is True
    assert to_bool(LT(TWO)(FOUR)) is True
    assert to_bool(LT(FOUR)(TWO)) is False
    assert to_bool(LT(TWO)(TWO)) is False
    assert to_bool(GT(FOUR)(TWO)) is True
    assert to_bool(GT(TWO)(FOUR)) is False


@pytest.mark.parametrize("a", range(0, 7))
@pytest.mark.parametrize("b", range(0, 7))
def test_comparison_grid(a, b):
    m, n = num(a), num(b)
    assert to_bool(EQUALS(m)(n)) == (a == b)
    assert to_bool(LEQ(m)(n)) == (a <= b)
    assert to_bool(LT(m)(n)) == (a < b)
    assert to_bool(GT(m)(n)) == (a > b)


def test_literal_and_loop_numerals_mix():
    # SUCC-built and num-built numerals are interchangeable.
    assert to_int(ADD(TEN)(num(5))) == 15
    assert to_bool(EQUALS(SUCC(SUCC(EIGHT)))(num(10)))
