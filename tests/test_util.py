import pytest
from hypothesis import given
from hypothesis import strategies as st

from typeset.util import F32_EPSILON, nearly_eq, nearly_zero


def test_equal_values_are_nearly_equal():
    assert nearly_eq(1.0, 1.0) is True


def test_distant_values_are_not_nearly_equal():
    assert nearly_eq(1.0, 1.001) is False


def test_difference_of_epsilon_is_not_nearly_equal():
    assert nearly_eq(0.0, F32_EPSILON) is False


def test_tiny_value_is_nearly_zero():
    assert nearly_zero(1e-9) is True


def test_one_is_not_nearly_zero():
    assert nearly_zero(1.0) is False


@pytest.mark.parametrize("value", [0.0, -0.0])
def test_zero_is_nearly_zero(value):
    assert nearly_zero(value)


@given(
    st.floats(allow_nan=False, allow_infinity=False, width=32),
    st.floats(allow_nan=False, allow_infinity=False, width=32),
)
def test_nearly_eq_is_symmetric(x, y):
    assert nearly_eq(x, y) == nearly_eq(y, x)


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_nearly_eq_is_reflexive(x):
    assert nearly_eq(x, x)