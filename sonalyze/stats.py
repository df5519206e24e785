"""Descriptive statistics over a non-empty series, computed lazily."""

from __future__ import annotations

import math
from collections.abc import Iterable

__all__ = ["StatisticsError", "SeriesStatistics"]


class StatisticsError(ValueError):
    """Raised when statistics are requested for an empty series."""

    def __init__(self, message: str = "common stats are undefined on empty series") -> None:
        super().__init__(message)


_UNSET = object()


class SeriesStatistics:
    """Common statistics of a numeric series.

    Sum, mean, variance, maximum and minimum are computed on first use and
    cached. The median takes the middle element(s) of the series as given,
    so the series is expected to be sorted already.
    """

    def __init__(self, series: Iterable) -> None:
        self._series = tuple(series)
        if not self._series:
            raise StatisticsError()
        self._cache: dict[str, object] = {}

    def _cached(self, key: str, compute):
        value = self._cache.get(key, _UNSET)
        if value is _UNSET:
            value = compute()
            self._cache[key] = value
        return value

    @property
    def series(self) -> tuple:
        """The values the statistics are computed on."""
        return self._series

    def __len__(self) -> int:
        return len(self._series)

    def sum(self):
        """Sum of all the values."""

        def compute():
            iterator = iter(self._series)
            total = next(iterator)
            for value in iterator:
                total = total + value
            return total

        return self._cached("sum", compute)

    def mean(self):
        """Arithmetic mean."""
        return self._cached("mean", lambda: self.sum() / len(self._series))

    def max(self):
        """Largest value; the first one wins on ties."""

        def compute():
            best = self._series[0]
            for value in self._series[1:]:
                if value >= best:
                    best = value
            return best

        return self._cached("max", compute)

    def min(self):
        """Smallest value; the first one wins on ties."""

        def compute():
            best = self._series[0]
            for value in self._series[1:]:
                if value < best:
                    best = value
            return best

        return self._cached("min", compute)

    def mid_range(self):
        """Midpoint between the minimum and the maximum."""
        return (self.max() + self.min()) / 2

    def median(self):
        """Middle value of the series, or the mean of the two middle values."""
        length = len(self._series)
        half = length // 2
        if length % 2 == 0:
            return (self._series[half - 1] + self._series[half]) / 2
        return self._series[half]

    def variance(self):
        """Population variance."""

        def compute():
            mean = self.mean()
            squares = [(mean - value) * (mean - value) for value in self._series]
            total = squares[0]
            for square in squares[1:]:
                total = total + square
            return total / len(self._series)

        return self._cached("variance", compute)

    def std_dev(self) -> float:
        """Population standard deviation."""
        return math.sqrt(self.variance())

    def __repr__(self) -> str:
        return f"SeriesStatistics({list(self._series)!r})"