"""Error types and sampling state shared by audio streams."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from sonalyze.daemon import DaemonPhase, DaemonState

__all__ = [
    "AudioStreamBuilderError",
    "AudioStreamError",
    "IOMode",
    "AudioStreamSamplingState",
    "sampling_state",
]


class AudioStreamBuilderError(Exception):
    """Raised when no suitable device or stream configuration is available."""

    class Kind(enum.Enum):
        UNABLE_TO_LIST_DEVICES = "unable to list Input devices"
        NO_DEVICE_FOUND = "no available device found"
        NO_CONFIG_FOUND = "no available stream configuration found"

    def __init__(self, kind: AudioStreamBuilderError.Kind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AudioStreamBuilderError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


class AudioStreamError(Exception):
    """Raised, or recorded, when a running stream fails or stops."""

    class Kind(enum.Enum):
        BUILD_FAILED = "unable to build stream"
        START_FAILED = "unable to start stream"
        SAMPLING_ERROR = "error while sampling"
        CANCELLED = "stopped"

    def __init__(self, kind: AudioStreamError.Kind, detail: str | None = None) -> None:
        super().__init__(kind.value)
        self.kind = kind
        self.detail = detail

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AudioStreamError):
            return NotImplemented
        return self.kind is other.kind and self.detail == other.detail

    def __hash__(self) -> int:
        return hash((self.kind, self.detail))


class IOMode(enum.Enum):
    """Direction of an audio stream."""

    INPUT = "input"
    OUTPUT = "output"


@dataclass(frozen=True)
class AudioStreamSamplingState:
    """Either sampling (no error) or stopped with the error that stopped it."""

    error: AudioStreamError | None = None

    @property
    def is_sampling(self) -> bool:
        return self.error is None

    @property
    def is_stopped(self) -> bool:
        return self.error is not None


def sampling_state(daemon_state: DaemonState) -> AudioStreamSamplingState:
    """Translate the state of a stream's daemon into a sampling state.

    A daemon that quit without a reason counts as cancelled; a reason that is
    not an :class:`AudioStreamError` is reported as a sampling error.
    """
    if daemon_state.phase is DaemonPhase.HOLDING:
        return AudioStreamSamplingState()
    reason = daemon_state.reason
    if reason is None:
        error = AudioStreamError(AudioStreamError.Kind.CANCELLED)
    elif isinstance(reason, AudioStreamError):
        error = reason
    else:
        error = AudioStreamError(AudioStreamError.Kind.SAMPLING_ERROR, str(reason))
    return AudioStreamSamplingState(error)