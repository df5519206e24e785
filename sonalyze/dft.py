"""Spectral analysers: a Goertzel filter bank and a short-time Fourier transform."""

from __future__ import annotations

import math
import operator
from collections.abc import Iterable, Sequence

import numpy as np

from sonalyze.frequency_bin import FrequencyBin, n_of_frequency_bins
from sonalyze.harmonic import Harmonic
from sonalyze.windowing import HannWindow, WindowingFn

__all__ = ["GoertzelAnalyzer", "StftAnalyzer"]


def _check_window_params(sample_rate: int, samples_per_window: int) -> None:
    if sample_rate <= 0:
        raise ValueError(f"sample rate must be positive: {sample_rate}")
    if samples_per_window <= 0:
        raise ValueError(f"samples per window must be positive: {samples_per_window}")


def _windowing_values(windowing_fn: WindowingFn, samples_per_window: int) -> np.ndarray:
    return np.array(
        [windowing_fn.ratio_at(i, samples_per_window) for i in range(samples_per_window)],
        dtype=np.float64,
    )


def _windowed(signal: Sequence[float], window: np.ndarray) -> np.ndarray:
    samples = np.asarray(signal, dtype=np.float64)
    if samples.shape != window.shape:
        raise ValueError(
            "signal with incompatible length received: "
            f"expected {window.size} samples, got {samples.size}"
        )
    return samples * window


class GoertzelAnalyzer:
    """Computes the DFT only at selected frequency bins.

    Bins may be given as :class:`FrequencyBin` instances matching the
    analyser's sample rate and window size, or as plain bin indices. The
    results of :meth:`analyze` are sorted by bin.
    """

    def __init__(
        self,
        sample_rate: int,
        samples_per_window: int,
        frequency_bins: Iterable[FrequencyBin | int],
        windowing_fn: WindowingFn,
    ) -> None:
        _check_window_params(sample_rate, samples_per_window)
        self._sample_rate = sample_rate
        self._samples_per_window = samples_per_window
        self._frequency_bins = tuple(sorted(self._to_bin(b) for b in frequency_bins))
        self._windowing_values = _windowing_values(windowing_fn, samples_per_window)
        self._normalization_factor = 1.0 / math.sqrt(samples_per_window)

        # The recurrence z0 = x + 2cos(w) z1 - z2 followed by
        # z1 e^{iw} - z2 sums x[n] e^{iw(N - n)}; its terms are precomputed here.
        omegas = np.array(
            [math.tau * b.bin_idx / samples_per_window for b in self._frequency_bins],
            dtype=np.float64,
        )
        steps = samples_per_window - np.arange(samples_per_window, dtype=np.float64)
        self._kernel = np.exp(1j * np.outer(omegas, steps))

    def _to_bin(self, candidate: FrequencyBin | int) -> FrequencyBin:
        if isinstance(candidate, FrequencyBin):
            if (candidate.sample_rate, candidate.samples) != (
                self._sample_rate,
                self._samples_per_window,
            ):
                raise ValueError(
                    f"frequency bin {candidate!r} does not match "
                    f"{self._sample_rate}Hz with {self._samples_per_window} samples"
                )
            return candidate
        return FrequencyBin(self._sample_rate, self._samples_per_window, operator.index(candidate))

    @property
    def sample_rate(self) -> int:
        return self._sample_rate

    @property
    def samples_per_window(self) -> int:
        return self._samples_per_window

    @property
    def frequency_bins(self) -> tuple[FrequencyBin, ...]:
        """The analysed bins, in ascending order."""
        return self._frequency_bins

    def analyze(self, signal: Sequence[float]) -> list[Harmonic]:
        """Analyse a window of ``samples_per_window`` time-domain samples.

        Raises ValueError when the signal has a different length.
        """
        windowed = _windowed(signal, self._windowing_values)
        phasors = (self._kernel @ windowed) * self._normalization_factor
        return [
            Harmonic(complex(phasor), frequency_bin)
            for phasor, frequency_bin in zip(phasors, self._frequency_bins)
        ]

    def __repr__(self) -> str:
        return (
            f"GoertzelAnalyzer(sample_rate={self._sample_rate}, "
            f"samples_per_window={self._samples_per_window}, "
            f"bins={[b.bin_idx for b in self._frequency_bins]})"
        )


class StftAnalyzer:
    """Computes every DFT bin from 0Hz to the Nyquist frequency with an FFT."""

    def __init__(
        self,
        sample_rate: int,
        samples_per_window: int,
        windowing_fn: WindowingFn = HannWindow(),
    ) -> None:
        _check_window_params(sample_rate, samples_per_window)
        self._sample_rate = sample_rate
        self._samples_per_window = samples_per_window
        self._windowing_values = _windowing_values(windowing_fn, samples_per_window)
        self._normalization_factor = 1.0 / math.sqrt(samples_per_window)
        self._frequency_bins = [
            FrequencyBin(sample_rate, samples_per_window, bin_idx)
            for bin_idx in range(n_of_frequency_bins(samples_per_window))
        ]

    @property
    def sample_rate(self) -> int:
        return self._sample_rate

    @property
    def samples_per_window(self) -> int:
        return self._samples_per_window

    def analyze(self, signal: Sequence[float]) -> list[Harmonic]:
        """Analyse a window of ``samples_per_window`` time-domain samples.

        The result holds one harmonic per bin, sorted by bin. Raises
        ValueError when the signal has a different length.
        """
        windowed = _windowed(signal, self._windowing_values)
        spectrum = np.fft.fft(windowed)[: len(self._frequency_bins)]
        spectrum = spectrum * self._normalization_factor
        return [
            Harmonic(complex(phasor), frequency_bin)
            for phasor, frequency_bin in zip(spectrum, self._frequency_bins)
        ]

    def __repr__(self) -> str:
        return (
            f"StftAnalyzer(sample_rate={self._sample_rate}, "
            f"samples_per_window={self._samples_per_window})"
        )