"""Multi-channel audio frames and interleaved sample buffers."""

from __future__ import annotations

import functools
from collections.abc import Iterable, Iterator

from sonalyze.samples import NOfSamples

__all__ = ["AudioFrame", "InterleavedAudioBuffer"]


@functools.total_ordering
class AudioFrame:
    """The samples of every channel at one point in time.

    A frame either owns its samples or is a view into an
    :class:`InterleavedAudioBuffer`; writing to a view writes to the buffer.
    """

    __slots__ = ("_store", "_start", "_n")
    __hash__ = None  # mutable

    def __init__(self, samples: Iterable[float]) -> None:
        store = [float(sample) for sample in samples]
        if not store:
            raise ValueError("a frame needs at least one channel")
        self._store = store
        self._start = 0
        self._n = len(store)

    @classmethod
    def _view(cls, store: list[float], start: int, n: int) -> AudioFrame:
        frame = cls.__new__(cls)
        frame._store = store
        frame._start = start
        frame._n = n
        return frame

    @property
    def samples(self) -> list[float]:
        """A copy of the channel samples."""
        return self._store[self._start : self._start + self._n]

    @property
    def n_of_channels(self) -> int:
        return self._n

    def copied(self) -> AudioFrame:
        """An independent frame holding the same samples."""
        return AudioFrame(self.samples)

    def to_mono(self) -> float:
        """Average of the channel samples."""
        if self._n == 1:
            return self._store[self._start]
        return sum(self) / self._n

    def __len__(self) -> int:
        return self._n

    def __getitem__(self, index):
        positions = range(self._start, self._start + self._n)[index]
        if isinstance(positions, range):
            return [self._store[position] for position in positions]
        return self._store[positions]

    def __setitem__(self, index: int, value: float) -> None:
        position = range(self._start, self._start + self._n)[index]
        self._store[position] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self.samples)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AudioFrame):
            return NotImplemented
        return self.samples == other.samples

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, AudioFrame):
            return NotImplemented
        return self.samples < other.samples

    def __repr__(self) -> str:
        return f"AudioFrame({self.samples!r})"


@functools.total_ordering
class InterleavedAudioBuffer:
    """Samples of several channels stored interleaved, frame after frame."""

    __hash__ = None  # mutable

    def __init__(
        self, raw_buffer: Iterable[float], n_of_channels: int, sample_rate: int
    ) -> None:
        if n_of_channels < 1:
            raise ValueError("n_of_channels must be greater than 0")
        if sample_rate < 1:
            raise ValueError("sample_rate must be greater than 0")
        raw = [float(sample) for sample in raw_buffer]
        if len(raw) % n_of_channels != 0:
            raise ValueError("buffer size must be a multiple of the number of channels")
        self.raw_buffer = raw
        self.n_of_channels = n_of_channels
        self.sample_rate = sample_rate

    @classmethod
    def from_frames(
        cls, frames: Iterable[AudioFrame], n_of_channels: int, sample_rate: int
    ) -> InterleavedAudioBuffer:
        """Build a buffer from frames of ``n_of_channels`` samples each."""
        buffer = cls([], n_of_channels, sample_rate)
        buffer.extend(frames)
        return buffer

    def _check_compatible(self, other: InterleavedAudioBuffer) -> None:
        if (other.n_of_channels, other.sample_rate) != (self.n_of_channels, self.sample_rate):
            raise ValueError(
                "buffers differ in number of channels or sample rate: "
                f"{self.n_of_channels}@{self.sample_rate} and "
                f"{other.n_of_channels}@{other.sample_rate}"
            )

    def at(self, index: int) -> AudioFrame:
        """The frame at ``index``, as a view into this buffer."""
        if not 0 <= index < len(self):
            raise IndexError(f"frame index {index} out of range 0..{len(self)}")
        return AudioFrame._view(self.raw_buffer, index * self.n_of_channels, self.n_of_channels)

    def concat(self, other: InterleavedAudioBuffer) -> InterleavedAudioBuffer:
        """A new buffer with the frames of ``other`` after those of this one."""
        self._check_compatible(other)
        return InterleavedAudioBuffer(
            self.raw_buffer + other.raw_buffer, self.n_of_channels, self.sample_rate
        )

    def __iter__(self) -> Iterator[AudioFrame]:
        for index in range(len(self)):
            yield self.at(index)

    def __len__(self) -> int:
        return len(self.raw_buffer) // self.n_of_channels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InterleavedAudioBuffer):
            return NotImplemented
        return (
            self.n_of_channels == other.n_of_channels
            and self.sample_rate == other.sample_rate
            and self.raw_buffer == other.raw_buffer
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, InterleavedAudioBuffer):
            return NotImplemented
        self._check_compatible(other)
        return self.raw_buffer < other.raw_buffer

    def n_of_samples(self) -> NOfSamples:
        """Number of sampling points in time, regardless of the channels."""
        return NOfSamples(len(self), self.sample_rate)

    def to_mono(self) -> list[float]:
        """A mono track where each sample averages the channels of one frame."""
        if self.n_of_channels == 1:
            return list(self.raw_buffer)
        return [frame.to_mono() for frame in self]

    def as_mono(self) -> list[float]:
        """The raw samples of a single-channel buffer."""
        if self.n_of_channels != 1:
            raise ValueError(
                f"as_mono requires a single channel, buffer has {self.n_of_channels}"
            )
        return self.raw_buffer

    def multiply(self, out_n_of_channels: int) -> InterleavedAudioBuffer:
        """Replicate a mono signal onto ``out_n_of_channels`` channels."""
        mono = self.as_mono()
        raw = [sample for sample in mono for _ in range(out_n_of_channels)]
        return InterleavedAudioBuffer(raw, out_n_of_channels, self.sample_rate)

    def extend(self, frames: Iterable[AudioFrame]) -> None:
        """Append frames, each with exactly ``n_of_channels`` samples."""
        for frame in frames:
            if len(frame) != self.n_of_channels:
                raise ValueError(
                    f"frame has {len(frame)} channels, buffer has {self.n_of_channels}"
                )
            self.raw_buffer.extend(frame.samples)

    def cloned(self) -> InterleavedAudioBuffer:
        """An independent copy of this buffer."""
        return InterleavedAudioBuffer(self.raw_buffer, self.n_of_channels, self.sample_rate)

    def __repr__(self) -> str:
        return (
            f"InterleavedAudioBuffer(n_of_channels={self.n_of_channels}, "
            f"sample_rate={self.sample_rate}, frames={len(self)})"
        )