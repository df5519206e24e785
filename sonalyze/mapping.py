"""Linear one-dimensional mappings between intervals."""

from __future__ import annotations

__all__ = ["map_range", "map_range_clamped", "map_ratio", "map_ratio_clamped"]


def _divide(numerator, denominator):
    if isinstance(numerator, int) and isinstance(denominator, int):
        quotient = abs(numerator) // abs(denominator)
        return quotient if (numerator >= 0) == (denominator >= 0) else -quotient
    return numerator / denominator


def _clamp(value, bounds):
    low, high = min(bounds), max(bounds)
    return min(max(value, low), high)


def map_range(value, in_interval, out_interval):
    """Map ``value`` linearly from ``in_interval`` to ``out_interval``.

    Integer arguments use integer division truncated towards zero.
    """
    in_start, in_end = in_interval
    out_start, out_end = out_interval
    return _divide((value - in_start) * (out_end - out_start), in_end - in_start) + out_start


def map_range_clamped(value, in_interval, out_interval):
    """Like :func:`map_range`, with the result clamped to ``out_interval``."""
    return _clamp(map_range(value, in_interval, out_interval), out_interval)


def map_ratio(value, out_interval):
    """Map a ratio (0 at the start, 1 at the end) onto ``out_interval``."""
    out_start, out_end = out_interval
    return value * (out_end - out_start) + out_start


def map_ratio_clamped(value, out_interval):
    """Like :func:`map_ratio`, with the result clamped to ``out_interval``."""
    return _clamp(map_ratio(value, out_interval), out_interval)