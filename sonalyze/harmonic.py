"""A single DFT component: a phasor at a frequency bin."""

from __future__ import annotations

import cmath
from dataclasses import dataclass

from sonalyze.frequency_bin import FrequencyBin

__all__ = ["Harmonic"]


@dataclass(frozen=True)
class Harmonic:
    """Amplitude and phase (as a complex phasor) of one frequency bin."""

    phasor: complex
    frequency_bin: FrequencyBin

    def __post_init__(self) -> None:
        object.__setattr__(self, "phasor", complex(self.phasor))

    @classmethod
    def from_bin_idx(
        cls, phasor: complex, sample_rate: int, samples: int, bin_idx: int
    ) -> Harmonic:
        """A harmonic at the bin with index ``bin_idx``."""
        return cls(phasor, FrequencyBin(sample_rate, samples, bin_idx))

    @classmethod
    def from_frequency(
        cls, phasor: complex, sample_rate: int, samples: int, frequency: float
    ) -> Harmonic:
        """A harmonic at the bin containing ``frequency``."""
        return cls(phasor, FrequencyBin.from_frequency(sample_rate, samples, frequency))

    def frequency(self) -> float:
        """Centre frequency of the harmonic's bin."""
        return self.frequency_bin.frequency()

    def bin_idx(self) -> int:
        """Index of the harmonic's bin."""
        return self.frequency_bin.bin_idx

    def phase(self) -> float:
        """Phase offset of a cosine wave, in radians."""
        return cmath.phase(self.phasor)

    def amplitude(self) -> float:
        """Magnitude of the phasor."""
        return abs(self.phasor)

    def power(self) -> float:
        """Squared magnitude: the unitless energy over the sampling period."""
        return self.phasor.real * self.phasor.real + self.phasor.imag * self.phasor.imag