"""Bit-level helpers for integers: powers of two and parity."""

from __future__ import annotations

import operator

__all__ = ["next_pow_of_2", "is_even", "is_odd"]


def next_pow_of_2(value: int) -> int:
    """Return the power of two that follows ``value``.

    For positive numbers the result is always strictly greater than the
    argument, so ``next_pow_of_2(256) == 512``. Negative numbers are mirrored:
    ``next_pow_of_2(-x) == -next_pow_of_2(x)``. Zero maps to zero.
    """
    value = operator.index(value)
    if value == 0:
        return 0
    magnitude = 1 << abs(value).bit_length()
    return magnitude if value > 0 else -magnitude


def is_even(value: int) -> bool:
    """Return True when ``value`` is divisible by two."""
    return operator.index(value) & 1 == 0


def is_odd(value: int) -> bool:
    """Return True when ``value`` is not divisible by two."""
    return operator.index(value) & 1 == 1