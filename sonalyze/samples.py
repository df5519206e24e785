"""Conversions between durations and counts of sampling points."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from datetime import timedelta

__all__ = ["duration_to_n_of_samples", "n_of_samples_to_duration", "NOfSamples"]

_MICROSECOND = timedelta(microseconds=1)


def duration_to_n_of_samples(duration: timedelta, sample_rate: int) -> int:
    """Number of samples in ``duration``, computed at microsecond precision."""
    return sample_rate * (duration // _MICROSECOND) // 1_000_000


def n_of_samples_to_duration(samples: int, sample_rate: int) -> timedelta:
    """Duration of ``samples`` samples, truncated to whole microseconds."""
    return timedelta(microseconds=samples * 1_000_000 // sample_rate)


@dataclass(frozen=True, order=True)
class NOfSamples:
    """A non-negative number of sampling points at a given sample rate."""

    value: int
    sample_rate: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"number of samples cannot be negative: {self.value}")
        if self.sample_rate <= 0:
            raise ValueError(f"sample rate must be positive: {self.sample_rate}")

    @classmethod
    def from_duration(cls, duration: timedelta, sample_rate: int) -> NOfSamples:
        """Number of samples in ``duration`` at ``sample_rate``."""
        return cls(duration_to_n_of_samples(duration, sample_rate), sample_rate)

    def to_duration(self) -> timedelta:
        """Duration covered by these samples."""
        return n_of_samples_to_duration(self.value, self.sample_rate)

    def _operand(self, other) -> int:
        if isinstance(other, NOfSamples):
            if other.sample_rate != self.sample_rate:
                raise ValueError(
                    f"sample rates differ: {self.sample_rate} and {other.sample_rate}"
                )
            return other.value
        return operator.index(other)

    def __add__(self, other) -> NOfSamples:
        try:
            rhs = self._operand(other)
        except TypeError:
            return NotImplemented
        return NOfSamples(self.value + rhs, self.sample_rate)

    def __sub__(self, other) -> NOfSamples:
        try:
            rhs = self._operand(other)
        except TypeError:
            return NotImplemented
        return NOfSamples(self.value - rhs, self.sample_rate)

    def __mul__(self, other) -> NOfSamples:
        if isinstance(other, NOfSamples):
            return NotImplemented
        try:
            rhs = operator.index(other)
        except TypeError:
            return NotImplemented
        return NOfSamples(self.value * rhs, self.sample_rate)

    def __floordiv__(self, other) -> NOfSamples:
        if isinstance(other, NOfSamples):
            return NotImplemented
        try:
            rhs = operator.index(other)
        except TypeError:
            return NotImplemented
        return NOfSamples(self.value // rhs, self.sample_rate)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value