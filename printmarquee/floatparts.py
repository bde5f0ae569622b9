"""Decomposition of floating point numbers into printable parts."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import Callable, Tuple

POSITIVE_EXPONENTIATION_THRESHOLD = 1e7
NEGATIVE_EXPONENTIATION_THRESHOLD = 1e-5


def _to_single(value: float) -> float:
    """Round a Python float to the nearest IEEE single precision value."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


@dataclass(frozen=True)
class _Traits:
    positive: Tuple[float, ...]
    negative: Tuple[float, ...]
    negative_plus_one: Tuple[float, ...]
    rounder: Callable[[float], float]
    max_decimal_part: int
    decimal_places: int


_DOUBLE = _Traits(
    positive=(1e1, 1e2, 1e4, 1e8, 1e16, 1e32, 1e64, 1e128, 1e256),
    negative=(1e-1, 1e-2, 1e-4, 1e-8, 1e-16, 1e-32, 1e-64, 1e-128, 1e-256),
    negative_plus_one=(1e0, 1e-1, 1e-3, 1e-7, 1e-15, 1e-31, 1e-63, 1e-127, 1e-255),
    rounder=float,
    max_decimal_part=1_000_000_000,
    decimal_places=9,
)

_SINGLE = _Traits(
    positive=tuple(_to_single(f) for f in (1e1, 1e2, 1e4, 1e8, 1e16, 1e32)),
    negative=tuple(_to_single(f) for f in (1e-1, 1e-2, 1e-4, 1e-8, 1e-16, 1e-32)),
    negative_plus_one=tuple(
        _to_single(f) for f in (1e0, 1e-1, 1e-3, 1e-7, 1e-15, 1e-31)
    ),
    rounder=_to_single,
    max_decimal_part=1_000_000,
    decimal_places=6,
)


def _traits(double: bool) -> _Traits:
    return _DOUBLE if double else _SINGLE


@dataclass(frozen=True)
class FloatParts:
    """A positive float split into integral digits, decimals and exponent."""

    integral: int
    decimal: int
    exponent: int
    decimal_places: int


def normalize(value: float, double: bool = True) -> Tuple[float, int]:
    """Scale a large or tiny value into [1, 10) and return it with its power of ten."""
    traits = _traits(double)
    value = traits.rounder(value)
    powers_of_ten = 0
    top = len(traits.positive) - 1

    if value >= POSITIVE_EXPONENTIATION_THRESHOLD:
        for index in range(top, -1, -1):
            if value >= traits.positive[index]:
                value = traits.rounder(value * traits.negative[index])
                powers_of_ten += 1 << index

    if 0 < value <= NEGATIVE_EXPONENTIATION_THRESHOLD:
        for index in range(top, -1, -1):
            if value < traits.negative_plus_one[index]:
                value = traits.rounder(value * traits.positive[index])
                powers_of_ten -= 1 << index

    return value, powers_of_ten


def split_float(value: float, double: bool = True) -> FloatParts:
    """Split a non-negative finite value into the parts used to print it."""
    traits = _traits(double)
    max_decimal_part = traits.max_decimal_part
    decimal_places = traits.decimal_places

    value, exponent = normalize(value, double)
    integral = int(value)

    tmp = integral
    while tmp >= 10:
        max_decimal_part //= 10
        decimal_places -= 1
        tmp //= 10

    remainder = traits.rounder((value - integral) * max_decimal_part)
    decimal = int(remainder)
    remainder = traits.rounder(remainder - decimal)

    # round half up
    decimal += int(remainder * 2)
    if decimal >= max_decimal_part:
        decimal = 0
        integral += 1
        if exponent and integral >= 10:
            exponent += 1
            integral = 1

    while decimal % 10 == 0 and decimal_places > 0:
        decimal //= 10
        decimal_places -= 1

    return FloatParts(integral, decimal, exponent, decimal_places)


def make_float(mantissa: float, exponent: int, double: bool = True) -> float:
    """Return mantissa * 10**exponent computed with binary powers of ten."""
    traits = _traits(double)
    result = traits.rounder(float(mantissa))
    table = traits.positive if exponent > 0 else traits.negative
    remaining = abs(exponent)
    index = 0
    while remaining:
        if index >= len(table):
            raise ValueError(f"exponent {exponent} is out of range")
        if remaining & 1:
            result = traits.rounder(result * table[index])
        remaining >>= 1
        index += 1
    return result