"""
Debounce: delay an action until calls stop arriving for a quiet period.

Each call cancels the pending timer (if any) and schedules a new one with the
latest arguments, so a burst of calls produces a single firing.
"""

import functools
import inspect
import logging
import threading
from collections.abc import Callable
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class Scheduler(Protocol):
    """Something that can run a callback later and cancel it."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> Any:
        """Run `callback` after `delay` seconds and return a handle for cancel()."""

    def cancel(self, handle: Any) -> None:
        """Cancel a callback scheduled with call_later, if it has not run yet."""


def run_logged(callback: Callable[[], None]) -> None:
    """Top-level dispatch of a timer callback: errors are logged, not raised."""
    try:
        callback()
    except Exception:
        logger.exception(f"Error in scheduled callback {getattr(callback, '__name__', callback)!r}")


class ThreadingScheduler:
    """Scheduler backed by threading.Timer."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay, run_logged, args=(callback,))
        timer.daemon = True
        timer.start()
        return timer

    def cancel(self, handle: threading.Timer) -> None:
        handle.cancel()


class Debouncer:
    """
    Coalesce bursts of calls into one call of `callback`.

    Args:
        callback: Function to run once the calls stop
        ms: Quiet period in milliseconds
        scheduler: Timer implementation (threading.Timer based if omitted)
    """

    def __init__(self, callback: Callable[..., Any], ms: float, scheduler: Scheduler | None = None):
        if ms < 0:
            raise ValueError(f"Debounce delay cannot be negative, got {ms}")
        self.callback = callback
        self.ms = ms
        self.scheduler = scheduler if scheduler is not None else ThreadingScheduler()
        self._pending: Any = None
        self._lock = threading.Lock()
        # Attribute dicts are copied from plain functions only
        functools.update_wrapper(self, callback, updated=functools.WRAPPER_UPDATES if inspect.isfunction(callback) else ())

    @property
    def pending(self) -> bool:
        """Whether a firing is scheduled."""
        return self._pending is not None

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._pending is not None:
                self.scheduler.cancel(self._pending)

            handle_box: list[Any] = []

            def on_complete() -> None:
                with self._lock:
                    # A newer call replaced this timer after it was already due
                    if self._pending is not handle_box[0]:
                        return
                    self._pending = None
                self.callback(*args, **kwargs)

            handle = self.scheduler.call_later(self.ms / 1000, on_complete)
            handle_box.append(handle)
            self._pending = handle

    def cancel(self) -> None:
        """Drop the pending firing, if any."""
        with self._lock:
            if self._pending is not None:
                self.scheduler.cancel(self._pending)
                self._pending = None


def debounce(ms: float, scheduler: Scheduler | None = None) -> Callable[[Callable[..., Any]], Debouncer]:
    """
    Decorator form of Debouncer.

    Example:
        >>> @debounce(200)
        ... def resize(width, height):
        ...     print(width, height)
    """
    def decorator(callback: Callable[..., Any]) -> Debouncer:
        return Debouncer(callback, ms, scheduler)

    return decorator
