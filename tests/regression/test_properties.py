"""
Property-based tests using Hypothesis.

These tests check the validate-then-compute invariants across a wide
range of generated inputs.
"""

import math

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from safecalc.components.arithmetic import difference, safe_percent, safe_sqrt
from safecalc.components.parsing import parse_int
from safecalc.domain.errors import InvalidArgument

ints = st.integers(min_value=-(10**12), max_value=10**12)


@given(part=ints, whole=ints)
@settings(max_examples=200)
def test_percent_matches_truncated_division(part: int, whole: int) -> None:
    """safe_percent(p, w) == (p*100)/w truncated toward zero, for w != 0."""
    assume(whole != 0)
    expected = abs(part * 100) // abs(whole)
    if (part < 0) != (whole < 0):
        expected = -expected
    assert safe_percent(part, whole) == expected


@given(part=ints)
def test_percent_zero_whole_always_fails(part: int) -> None:
    with pytest.raises(InvalidArgument):
        safe_percent(part, 0)


@given(a=ints, b=ints)
def test_difference_contract(a: int, b: int) -> None:
    """a >= b gives a - b; a < b fails."""
    if a >= b:
        assert difference(a, b) == a - b
    else:
        with pytest.raises(InvalidArgument):
            difference(a, b)


@given(n=ints)
def test_difference_with_itself_is_zero(n: int) -> None:
    assert difference(n, n) == 0


@given(n=ints)
def test_parse_int_accepts_its_own_output(n: int) -> None:
    assert parse_int(str(n)) == n


@given(x=st.floats(min_value=0, max_value=1e12, allow_nan=False, allow_infinity=False))
def test_sqrt_squares_back(x: float) -> None:
    root = safe_sqrt(x)
    assert root >= 0
    assert math.isclose(root * root, x, rel_tol=1e-9, abs_tol=1e-12)
