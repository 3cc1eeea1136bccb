"""Formatter tests.

Idempotence is only claimed away from the two notation thresholds: a value
just above 1e12 prints as ``1e+12``, which reads back as exactly 1e12 and is
then printed in fixed notation (and likewise just below 1e-6).
"""

import math

import pytest
from hypothesis import given, strategies as st

from calculator import compute
from numfmt import format_number


@pytest.mark.parametrize(
    "value,expected",
    [
        (2.5, "2.5"),
        (17.0, "17"),
        (100.0, "100"),
        (0.0, "0"),
        (-0.0, "0"),
        (-3.25, "-3.25"),
        (0.1 + 0.2, "0.3"),
        (1 / 3, "0.333333333333"),
        (1e-6, "0.000001"),
        (1e12, "1000000000000"),
        (1000000000000.5, "1e+12"),
        (123456789012345.0, "1.234568e+14"),
        (0.0000001, "1e-7"),
        (-0.00000025, "-2.5e-7"),
        (1.5e300, "1.5e+300"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_precision():
    assert format_number(1 / 3, 4) == "0.3333"
    assert format_number(2 / 3, 2) == "0.67"
    assert format_number(-0.001, 2) == "0"
    assert format_number(12.0, 0) == "12"


def test_non_finite_values_do_not_raise():
    assert format_number(math.inf) == "inf"
    assert format_number(-math.inf) == "-inf"
    assert format_number(math.nan) == "nan"


def signed(strategy):
    return strategy | strategy.map(lambda v: -v)


fixed_range = signed(st.floats(min_value=1e-5, max_value=1e11))
scientific_range = signed(
    st.floats(min_value=1e13, max_value=1e300) | st.floats(min_value=1e-300, max_value=1e-7)
)


@given(fixed_range | scientific_range | st.just(0.0))
def test_format_is_idempotent(v):
    once = format_number(v)
    assert format_number(float(once)) == once


@given(signed(st.floats(min_value=1e-6, max_value=1e11)) | st.just(0.0))
def test_format_roundtrips_through_pipeline(v):
    res = compute(format_number(v))
    assert res.ok
    assert abs(res.value - v) <= 1e-12
