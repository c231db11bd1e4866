"""PAIR projections, IF laziness and recursion through Y."""

from church_core import (
    PAIR,
    FIRST,
    SECOND,
    TRUE,
    FALSE,
    IF,
    Y,
    ONE,
    FIVE,
    num,
    to_int,
    FAC,
)


def test_pair_projections():
    a, b = object(), object()
    p = PAIR(a)(b)
    assert FIRST(p) is a
    assert SECOND(p) is b


def test_pairs_nest():
    p = PAIR(PAIR(1)(2))(3)
    assert SECOND(FIRST(p)) == 2
    assert SECOND(p) == 3


def test_if_only_forces_selected_branch():
    forced = []

    def branch(tag):
        def thunk():
            forced.append(tag)
            return tag
        return thunk

    assert IF(TRUE)(branch("then"))(branch("else")) == "then"
    assert IF(FALSE)(branch("then"))(branch("else")) == "else"
    assert forced == ["then", "else"]


def test_if_never_touches_a_diverging_branch():
    def diverge():
        raise AssertionError("unchosen branch was evaluated")

    assert IF(TRUE)(lambda: 1)(diverge) == 1


def test_y_builds_recursive_host_function():
    # Y works on any curried function, not just encoded values.
    countdown = Y(lambda self: lambda n: [] if n == 0 else [n] + self(n - 1))
    assert countdown(4) == [4, 3, 2, 1]


def test_factorial_via_fixed_point():
    assert to_int(FAC(FIVE)) == 120
    assert to_int(FAC(num(6))) == 720


def test_factorial_base_cases():
    assert to_int(FAC(num(0))) == 1
    assert to_int(FAC(ONE)) == 1
