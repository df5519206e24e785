"""A continuous interval split into equally wide bins."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DiscreteInterval"]


@dataclass(frozen=True)
class DiscreteInterval:
    """Maps values in ``interval`` to and from ``n_of_bins`` equal bins."""

    interval: tuple[float, float]
    n_of_bins: int

    def __post_init__(self) -> None:
        if self.n_of_bins < 1:
            raise ValueError("n_of_bins must be greater than 0")

    def _check_bin(self, bin_idx: int) -> None:
        if not 0 <= bin_idx < self.n_of_bins:
            raise ValueError(
                f"index {bin_idx} is out of range. n_of_bins is {self.n_of_bins}"
            )

    def value_to_bin(self, value: float) -> int:
        """Index of the bin containing ``value``; the upper bound maps to the last bin."""
        start, end = self.interval
        if not start <= value <= end:
            raise ValueError(f"value {value} is out of range {start}..={end}")
        return min(max(0, int((value - start) / self.bin_width())), self.n_of_bins - 1)

    def bin_width(self) -> float:
        """Width of each bin."""
        start, end = self.interval
        return (end - start) / self.n_of_bins

    def bin_to_range_start(self, bin_idx: int) -> float:
        """Lower bound of the given bin."""
        self._check_bin(bin_idx)
        return self.interval[0] + self.bin_width() * bin_idx

    def bin_to_range_end(self, bin_idx: int) -> float:
        """Upper bound of the given bin."""
        self._check_bin(bin_idx)
        return self.interval[0] + self.bin_width() * (bin_idx + 1)

    def bin_range(self, bin_idx: int) -> tuple[float, float]:
        """Lower and upper bounds of the given bin."""
        start = self.bin_to_range_start(bin_idx)
        return start, start + self.bin_width()

    def bin_midpoint(self, bin_idx: int) -> float:
        """Centre of the given bin."""
        return self.bin_to_range_start(bin_idx) + self.bin_width() / 2