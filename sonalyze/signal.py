"""Synthesis of test signals from sums of cosine waves."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from sonalyze.buffers import InterleavedAudioBuffer

__all__ = ["frequencies_to_samples"]


def frequencies_to_samples(
    sample_rate: int, samples: int, frequencies: Sequence[float], phase: float
) -> InterleavedAudioBuffer:
    """A mono signal summing cosine waves at ``frequencies`` with ``phase``.

    The result is normalised so that its largest absolute sample is 1; a
    silent signal is left at zero.
    """
    if sample_rate <= 0:
        raise ValueError(f"sample rate must be positive: {sample_rate}")
    if samples < 0:
        raise ValueError(f"number of samples cannot be negative: {samples}")
    times = np.arange(samples, dtype=np.float64) / sample_rate
    freqs = np.asarray(list(frequencies), dtype=np.float64).reshape(-1, 1)
    mono = np.cos(phase + math.tau * freqs * times).sum(axis=0)
    if mono.size:
        abs_max = float(np.abs(mono).max())
        if abs_max > 0.0:
            mono = mono / abs_max
    return InterleavedAudioBuffer(mono.tolist(), 1, sample_rate)