"""
Property-based checks for the string encoding.

Run with: pytest tests/test_strings_fuzzer.py --hypothesis-show-statistics
"""

import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis required for fuzzer tests")

from hypothesis import given, strategies as st

from church_core import to_church_string, from_church_string, STR_CONCAT, STR_EQ, to_bool

printable_ascii = st.text(alphabet=st.characters(min_codepoint=32, max_codepoint=126), max_size=30)


@given(printable_ascii)
def test_printable_ascii_roundtrip(text):
    assert from_church_string(to_church_string(text)) == text


# Code points below the surrogate block; to_int cost grows with the code.
@given(st.text(alphabet=st.characters(max_codepoint=0x7FF), max_size=8))
def test_wider_roundtrip(text):
    assert from_church_string(to_church_string(text)) == text


@given(
    st.text(alphabet="abc", max_size=5),
    st.text(alphabet="abc", max_size=5),
)
def test_equality_matches_host(a, b):
    assert to_bool(STR_EQ(to_church_string(a))(to_church_string(b))) == (a == b)


@given(printable_ascii, printable_ascii)
def test_concat_matches_host(a, b):
    assert from_church_string(STR_CONCAT(to_church_string(a))(to_church_string(b))) == a + b
