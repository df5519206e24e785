"""Helpers to run a callable while holding a lock."""

from __future__ import annotations

from typing import Callable, TypeVar

__all__ = ["with_lock", "try_with_lock"]

T = TypeVar("T")


def with_lock(lock, op: Callable[[], T]) -> T:
    """Acquire ``lock``, call ``op`` and return its result, releasing the lock afterwards."""
    with lock:
        return op()


def try_with_lock(lock, op: Callable[[], T]) -> T | None:
    """Call ``op`` under ``lock`` only if the lock is free right now.

    Returns ``op``'s result, or None when the lock could not be acquired
    without blocking.
    """
    if not lock.acquire(blocking=False):
        return None
    try:
        return op()
    finally:
        lock.release()