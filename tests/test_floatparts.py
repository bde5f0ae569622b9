import math

import pytest

from printmarquee.floatparts import FloatParts, make_float, normalize, split_float


def _rebuild(parts: FloatParts) -> float:
    base = parts.integral + parts.decimal / 10**parts.decimal_places
    return base * 10.0**parts.exponent


def test_normalize_large_value():
    value, exponent = normalize(1e10)
    assert exponent == 10
    assert value == pytest.approx(1.0)


def test_normalize_small_value():
    value, exponent = normalize(1e-6)
    assert exponent == -6
    assert value == pytest.approx(1.0)


def test_normalize_leaves_moderate_values_alone():
    assert normalize(123.25) == (123.25, 0)


@pytest.mark.parametrize("value", [1e8, 3.3e45, 7.1e200, 2.5e-7, 9.9e-100])
def test_normalize_puts_extremes_in_unit_range(value):
    scaled, exponent = normalize(value)
    assert 1.0 <= scaled < 10.0
    assert scaled * 10.0**exponent == pytest.approx(value, rel=1e-9)


def test_split_simple_value():
    parts = split_float(3.5)
    assert (parts.integral, parts.decimal, parts.decimal_places, parts.exponent) == (
        3,
        5,
        1,
        0,
    )


def test_split_integer_value_has_no_decimals():
    parts = split_float(42.0)
    assert parts.integral == 42
    assert parts.decimal_places == 0


def test_split_rounds_up_into_integral():
    parts = split_float(0.9999999999)
    assert parts.integral == 1
    assert parts.decimal == 0
    assert parts.decimal_places == 0


@pytest.mark.parametrize("value", [0.5, 1.25, 3.14159, 1234.5678, 2.5e12, 4.75e-9])
def test_split_rebuilds_value(value):
    assert _rebuild(split_float(value)) == pytest.approx(value, rel=1e-6)


def test_split_single_precision_uses_fewer_places():
    parts = split_float(1.0 / 3.0, double=False)
    assert parts.decimal_places <= 6
    assert _rebuild(parts) == pytest.approx(1.0 / 3.0, rel=1e-5)


def test_make_float_positive_exponent():
    assert make_float(1.5, 3) == pytest.approx(1500.0)


def test_make_float_negative_exponent():
    assert make_float(2.0, -2) == pytest.approx(0.02)


def test_make_float_zero_exponent_is_identity():
    assert make_float(7.25, 0) == 7.25


def test_make_float_single_precision_range_is_limited():
    with pytest.raises(ValueError):
        make_float(1.0, 100, double=False)


def test_make_float_round_trips_normalize():
    value = 6.02e23
    scaled, exponent = normalize(value)
    assert make_float(scaled, exponent) == pytest.approx(value, rel=1e-12)
    assert math.isfinite(make_float(1.0, 300))