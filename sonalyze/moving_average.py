"""A fixed-window moving average."""

from __future__ import annotations

import operator
from collections import deque
from functools import reduce

__all__ = ["MovingAverage"]


class MovingAverage:
    """Average of the last ``window_size`` pushed values.

    Works with any type supporting ``+`` and division by an int, such as
    floats or :class:`datetime.timedelta`. ``default`` is returned while no
    value has been pushed.
    """

    def __init__(self, window_size: int, default=0.0) -> None:
        if window_size < 1:
            raise ValueError("window_size must be greater than 0")
        self._series: deque = deque(maxlen=window_size)
        self._default = default

    def push(self, value) -> None:
        """Add a value, evicting the oldest one when the window is full."""
        self._series.append(value)

    def avg(self):
        """Return the average of the values currently in the window."""
        if not self._series:
            return self._default
        return reduce(operator.add, self._series) / len(self._series)

    def __len__(self) -> int:
        return len(self._series)

    def __repr__(self) -> str:
        return f"MovingAverage(window_size={self._series.maxlen}, values={list(self._series)!r})"