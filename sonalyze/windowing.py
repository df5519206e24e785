"""Windowing functions applied to a signal before spectral analysis."""

from __future__ import annotations

import abc
import math
from dataclasses import dataclass

__all__ = ["WindowingFn", "HannWindow", "RectangleWindow", "IdentityWindow"]


class WindowingFn(abc.ABC):
    """Gives the weight of each sample within a window."""

    @abc.abstractmethod
    def ratio_at(self, sample_idx: int, n_of_samples: int) -> float:
        """Weight of the sample at ``sample_idx`` in a window of ``n_of_samples``."""


@dataclass(frozen=True)
class HannWindow(WindowingFn):
    """Raised-cosine window, zero at both ends."""

    def ratio_at(self, sample_idx: int, n_of_samples: int) -> float:
        if n_of_samples < 2:
            raise ValueError("a Hann window needs at least 2 samples")
        return 0.5 * (1.0 - math.cos(math.tau * sample_idx / (n_of_samples - 1)))


@dataclass(frozen=True)
class RectangleWindow(WindowingFn):
    """One over a centred run of ``rect_width`` samples, zero elsewhere."""

    rect_width: int

    def ratio_at(self, sample_idx: int, n_of_samples: int) -> float:
        rect_width = min(self.rect_width, n_of_samples)
        offset = (n_of_samples - rect_width) // 2
        if sample_idx < offset or sample_idx > n_of_samples - 1 - offset:
            return 0.0
        return 1.0


@dataclass(frozen=True)
class IdentityWindow(WindowingFn):
    """Leaves every sample unchanged."""

    def ratio_at(self, sample_idx: int, n_of_samples: int) -> float:
        return 1.0