r"""Pluggable and cancellable sleep functions used for backoff waits."""

from __future__ import annotations

__all__ = ["CancellableSleep", "Sleeper", "WaitCancelledError", "default_sleep"]

import threading
import time
from collections.abc import Callable

Sleeper = Callable[[float], None]


class WaitCancelledError(RuntimeError):
    """Raised by ``CancellableSleep`` when a wait is cancelled."""


def default_sleep(seconds: float) -> None:
    """Block the current thread for ``seconds``.

    The lookup of ``time.sleep`` happens at call time so tests can patch
    it.
    """
    time.sleep(seconds)


class CancellableSleep:
    r"""Sleep function that another thread can interrupt.

    Once ``cancel`` is called, a pending wait returns early by raising
    ``WaitCancelledError``, and so does every later wait until
    ``reset`` is called.

    Example:
        ```pycon
        >>> from chainhttp.utils.sleep import CancellableSleep
        >>> sleep = CancellableSleep()
        >>> sleep(0.0)
        >>> sleep.cancel()
        >>> sleep(10.0)
        Traceback (most recent call last):
            ...
        chainhttp.utils.sleep.WaitCancelledError: wait cancelled
        >>> sleep.reset()
        >>> sleep.cancelled
        False

        ```
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def __call__(self, seconds: float) -> None:
        if self._event.wait(timeout=seconds):
            msg = "wait cancelled"
            raise WaitCancelledError(msg)

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    def reset(self) -> None:
        self._event.clear()
