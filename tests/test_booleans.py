"""Boolean selectors and the truth tables of AND / OR / NOT."""

import itertools

import pytest

from church_core import TRUE, FALSE, AND, OR, NOT, to_bool

BOOLS = [(TRUE, True), (FALSE, False)]


def test_bridge_constants():
    assert to_bool(TRUE) is True
    assert to_bool(FALSE) is False


def test_selectors_pick_an_argument():
    a, b = object(), object()
    assert TRUE(a)(b) is a
    assert FALSE(a)(b) is b


@pytest.mark.parametrize("p, q", list(itertools.product(BOOLS, BOOLS)))
def test_and_or_truth_table(p, q):
    (pc, pn), (qc, qn) = p, q
    assert to_bool(AND(pc)(qc)) == (pn and qn)
    assert to_bool(OR(pc)(qc)) == (pn or qn)


@pytest.mark.parametrize("p, native", BOOLS)
def test_not(p, native):
    assert to_bool(NOT(p)) == (not native)
    assert to_bool(NOT(NOT(p))) == native


def test_results_are_still_selectors():
    # AND/OR hand back one of their inputs, not a host value.
    assert AND(TRUE)(FALSE) is FALSE
    assert OR(FALSE)(TRUE) is TRUE
