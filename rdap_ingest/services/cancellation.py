"""Broadcast cancellation shared by the file walker and the worker pool."""

from __future__ import annotations

import threading


class CancellationToken:
    """One-way, thread-safe stop signal.

    Any number of threads may call :meth:`cancel`; only the first call flips
    the token and returns ``True``. Waiters are never blocked by a signaller,
    so concurrent failures cannot deadlock each other.
    """

    def __init__(self) -> None:
        self._event = threading.Event()
        self._lock = threading.Lock()

    def cancel(self) -> bool:
        with self._lock:
            if self._event.is_set():
                return False
            self._event.set()
            return True

    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        return self._event.wait(timeout)
