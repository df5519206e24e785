"""Frequency bins of a discrete Fourier transform."""

from __future__ import annotations

import dataclasses
import operator
from dataclasses import dataclass

from sonalyze.discrete_interval import DiscreteInterval

__all__ = [
    "dft_frequency_interval",
    "frequency_to_bin_idx",
    "frequency_gap",
    "bin_idx_to_frequency",
    "frequency_interval",
    "all_frequency_bins",
    "n_of_frequency_bins",
    "FrequencyBin",
]


def n_of_frequency_bins(samples: int) -> int:
    """Number of meaningful DFT bins for a window of ``samples`` samples.

    DFT results are mirrored, so only the bins from 0Hz up to and including
    the Nyquist frequency are counted.
    """
    return samples // 2 + 1


def dft_frequency_interval(sample_rate: int, samples: int) -> DiscreteInterval:
    """The DFT bins as a discrete interval, each bin centred on its frequency.

    Bin 0 is centred at 0Hz, so it spans ``(-width / 2, width / 2)``; the last
    bin is centred on the Nyquist frequency ``sample_rate / 2``.
    """
    if sample_rate <= 0:
        raise ValueError(f"sample rate must be positive: {sample_rate}")
    if samples <= 0:
        raise ValueError(f"number of samples must be positive: {samples}")
    half_gap = sample_rate / 2 / samples
    return DiscreteInterval(
        (-half_gap, sample_rate / 2 + half_gap), n_of_frequency_bins(samples)
    )


def frequency_to_bin_idx(sample_rate: int, samples: int, frequency: float) -> int:
    """Index of the bin containing ``frequency``."""
    return dft_frequency_interval(sample_rate, samples).value_to_bin(frequency)


def frequency_gap(sample_rate: int, samples: int) -> float:
    """Width in Hz of each bin."""
    return dft_frequency_interval(sample_rate, samples).bin_width()


def bin_idx_to_frequency(sample_rate: int, samples: int, bin_idx: int) -> float:
    """Centre frequency of the bin at ``bin_idx``."""
    return dft_frequency_interval(sample_rate, samples).bin_midpoint(bin_idx)


def frequency_interval(sample_rate: int, samples: int, bin_idx: int) -> tuple[float, float]:
    """Lower and upper frequency of the bin at ``bin_idx``."""
    return dft_frequency_interval(sample_rate, samples).bin_range(bin_idx)


def all_frequency_bins(sample_rate: int, samples: int) -> list[FrequencyBin]:
    """Every bin from 0Hz to the Nyquist frequency, in order."""
    return [
        FrequencyBin(sample_rate, samples, bin_idx)
        for bin_idx in range(n_of_frequency_bins(samples))
    ]


@dataclass(frozen=True, order=True)
class FrequencyBin:
    """One DFT bin of a window of ``samples`` samples taken at ``sample_rate``."""

    sample_rate: int
    samples: int
    bin_idx: int = 0

    def __post_init__(self) -> None:
        if self.sample_rate <= 0:
            raise ValueError(f"sample rate must be positive: {self.sample_rate}")
        if self.samples <= 0:
            raise ValueError(f"number of samples must be positive: {self.samples}")
        if self.bin_idx < 0:
            raise ValueError(f"bin index cannot be negative: {self.bin_idx}")

    @classmethod
    def from_frequency(cls, sample_rate: int, samples: int, frequency: float) -> FrequencyBin:
        """The bin containing ``frequency``."""
        return cls(sample_rate, samples, frequency_to_bin_idx(sample_rate, samples, frequency))

    def frequency(self) -> float:
        """Centre frequency of this bin."""
        return bin_idx_to_frequency(self.sample_rate, self.samples, self.bin_idx)

    def frequency_interval(self) -> tuple[float, float]:
        """Lower and upper frequency of this bin."""
        return frequency_interval(self.sample_rate, self.samples, self.bin_idx)

    def __add__(self, other) -> FrequencyBin:
        try:
            offset = operator.index(other)
        except TypeError:
            return NotImplemented
        return dataclasses.replace(self, bin_idx=self.bin_idx + offset)

    def __sub__(self, other) -> FrequencyBin:
        try:
            offset = operator.index(other)
        except TypeError:
            return NotImplemented
        return dataclasses.replace(self, bin_idx=self.bin_idx - offset)