"""Rounding, truncation and averaging helpers with saturating semantics."""

from __future__ import annotations

import math

__all__ = ["round_to_unsigned", "round_to_signed", "trunc_to_unsigned", "average"]


def _check_finite(value: float) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"cannot convert non-finite value {value!r} to an integer")
    return value


def trunc_to_unsigned(value: float) -> int:
    """Truncate towards zero, saturating negative results at 0."""
    return max(0, int(_check_finite(value)))


def round_to_unsigned(value: float) -> int:
    """Round half up to a non-negative integer; negative inputs give 0."""
    return trunc_to_unsigned(_check_finite(value) + 0.5)


def round_to_signed(value: float) -> int:
    """Round to the nearest integer, with halves rounded away from zero."""
    value = _check_finite(value)
    if value < 0:
        return -round_to_unsigned(-value)
    return round_to_unsigned(value)


def average(a, b):
    """Average of two numbers.

    Integer pairs give an integer result truncated towards zero; any other
    pair gives a true division.
    """
    total = a + b
    if isinstance(total, int):
        half = abs(total) // 2
        return half if total >= 0 else -half
    return total / 2