"""
checked_int32.py - overflow-checked arithmetic on signed 32-bit integers.

Each helper returns the result, or None when it does not fit in int32
(or, for division, when the divisor is zero). Python ints never wrap, so
the exact result is computed first and range-checked afterwards.
"""
from __future__ import annotations

from contracts import INT32_MAX, INT32_MIN


def fits_int32(value: int) -> bool:
    return INT32_MIN <= value <= INT32_MAX


def _checked(value: int) -> int | None:
    return value if fits_int32(value) else None


def checked_add(a: int, b: int) -> int | None:
    return _checked(a + b)


def checked_sub(a: int, b: int) -> int | None:
    return _checked(a - b)


def checked_mul(a: int, b: int) -> int | None:
    return _checked(a * b)


def checked_div(a: int, b: int) -> int | None:
    """Division truncating toward zero; None for b == 0 and INT32_MIN / -1."""
    if b == 0:
        return None
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return _checked(quotient)
