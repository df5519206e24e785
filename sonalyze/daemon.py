"""Hold a resource on a background thread until asked to let it go."""

from __future__ import annotations

import enum
import threading
from dataclasses import dataclass
from typing import Any, Callable

__all__ = ["DaemonPhase", "DaemonState", "QuitSignal", "ResourceDaemon"]


class DaemonPhase(enum.Enum):
    """Lifecycle phase of a :class:`ResourceDaemon`."""

    HOLDING = "holding"
    QUITTING = "quitting"
    QUIT = "quit"


@dataclass(frozen=True)
class DaemonState:
    """Phase of a daemon together with the reason it quit, if any."""

    phase: DaemonPhase
    reason: Any = None


class _Shared:
    def __init__(self) -> None:
        self.condition = threading.Condition()
        self.state = DaemonState(DaemonPhase.HOLDING)

    def wake_to_quit(self, reason) -> None:
        with self.condition:
            if self.state.phase is DaemonPhase.HOLDING:
                self.state = DaemonState(DaemonPhase.QUITTING, reason)
                self.condition.notify_all()


class QuitSignal:
    """Handed to a resource provider so the resource can ask the daemon to quit."""

    def __init__(self, shared: _Shared) -> None:
        self._shared = shared

    def dispatch(self, reason) -> None:
        """Request the daemon to release its resource, recording ``reason``.

        Ignored once the daemon is already quitting or has quit.
        """
        self._shared.wake_to_quit(reason)


def _release(resource) -> None:
    close = getattr(resource, "close", None)
    if callable(close):
        close()


class ResourceDaemon:
    """Creates a resource on a dedicated thread and keeps it alive.

    ``resource_provider`` is called on the thread with a :class:`QuitSignal`.
    If it raises, the daemon quits with the exception as its reason.
    Otherwise the returned resource is held until :meth:`quit`, :meth:`close`
    or a dispatched quit signal; it is then released by calling its
    ``close()`` method, when it has one.
    """

    def __init__(self, resource_provider: Callable[[QuitSignal], Any]) -> None:
        self._shared = _Shared()
        self._thread: threading.Thread | None = threading.Thread(
            target=self._run, args=(resource_provider,), daemon=True
        )
        self._thread.start()

    def _run(self, resource_provider) -> None:
        shared = self._shared
        try:
            resource = resource_provider(QuitSignal(shared))
        except Exception as err:  # the failure becomes the quit reason
            with shared.condition:
                shared.state = DaemonState(DaemonPhase.QUIT, err)
            return

        with shared.condition:
            shared.condition.wait_for(lambda: shared.state.phase is not DaemonPhase.HOLDING)

        # The lock is not held while releasing, so the resource may still
        # dispatch quit signals without deadlocking.
        try:
            _release(resource)
        finally:
            del resource
            with shared.condition:
                if shared.state.phase is not DaemonPhase.QUIT:
                    shared.state = DaemonState(DaemonPhase.QUIT, shared.state.reason)

    def _wake_to_quit_and_join(self, reason) -> None:
        self._shared.wake_to_quit(reason)
        thread, self._thread = self._thread, None
        if thread is not None:
            thread.join()

    def quit(self, reason) -> None:
        """Release the resource with ``reason`` and wait for the thread to stop."""
        self._wake_to_quit_and_join(reason)

    def close(self) -> None:
        """Release the resource without a reason and wait for the thread to stop."""
        self._wake_to_quit_and_join(None)

    def state(self) -> DaemonState:
        """Current state of the daemon."""
        with self._shared.condition:
            return self._shared.state

    def __enter__(self) -> ResourceDaemon:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()