"""Unit tests for utils/debounce.py"""

import logging
import threading

import pytest

from utils.debounce import Debouncer, ThreadingScheduler, debounce, run_logged


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, *args, **kwargs):
        self.calls.append((args, kwargs))


def test_burst_fires_once_with_last_arguments(scheduler) -> None:
    recorder = Recorder()
    debounced = Debouncer(recorder, 200, scheduler)

    for width in (100, 200, 300, 400):
        debounced(width, height=50)
        scheduler.advance(0.1)
    assert recorder.calls == []

    # Last call was at t=0.3, so nothing before t=0.5
    scheduler.advance(0.05)
    assert recorder.calls == []
    scheduler.advance(0.1)
    assert recorder.calls == [((400,), {"height": 50})]
    assert not debounced.pending


def test_fires_no_earlier_than_delay_after_last_call(scheduler) -> None:
    recorder = Recorder()
    debounced = Debouncer(recorder, 200, scheduler)
    debounced("a")
    scheduler.advance(0.19)
    assert recorder.calls == []
    scheduler.advance(0.02)
    assert len(recorder.calls) == 1


def test_separated_calls_fire_independently(scheduler) -> None:
    recorder = Recorder()
    debounced = Debouncer(recorder, 200, scheduler)

    debounced(1)
    scheduler.advance(0.5)
    debounced(2)
    scheduler.advance(0.5)

    assert [args for args, _ in recorder.calls] == [(1,), (2,)]


def test_only_one_timer_is_pending(scheduler) -> None:
    debounced = Debouncer(Recorder(), 200, scheduler)
    for _ in range(5):
        debounced()
    assert scheduler.pending == 1
    assert debounced.pending


def test_cancel_drops_pending_call(scheduler) -> None:
    recorder = Recorder()
    debounced = Debouncer(recorder, 200, scheduler)
    debounced()
    debounced.cancel()
    scheduler.advance(1.0)
    assert recorder.calls == []
    assert not debounced.pending
    # Cancelling again is harmless
    debounced.cancel()


def test_decorator_form(scheduler) -> None:
    calls = []

    @debounce(50, scheduler)
    def resize(width, height):
        """Resize the surface."""
        calls.append((width, height))

    resize(1, 2)
    resize(3, 4)
    scheduler.advance(0.1)
    assert calls == [(3, 4)]
    assert isinstance(resize, Debouncer)
    assert resize.__name__ == "resize"
    assert resize.__doc__ == "Resize the surface."


def test_callable_object_state_is_not_copied(scheduler) -> None:
    recorder = Recorder()
    debounced = Debouncer(recorder, 100, scheduler)
    assert "calls" not in vars(debounced)
    assert debounced.callback is recorder


def test_negative_delay_is_rejected() -> None:
    with pytest.raises(ValueError):
        Debouncer(Recorder(), -1)


def test_run_logged_reports_errors(caplog) -> None:
    def broken():
        raise RuntimeError("resize failed")

    with caplog.at_level(logging.ERROR):
        run_logged(broken)
    assert "broken" in caplog.text
    assert "resize failed" in caplog.text


def test_threading_scheduler_runs_and_cancels() -> None:
    fired = threading.Event()
    cancelled = threading.Event()
    scheduler = ThreadingScheduler()

    scheduler.call_later(0.01, fired.set)
    handle = scheduler.call_later(0.05, cancelled.set)
    scheduler.cancel(handle)

    assert fired.wait(timeout=2.0)
    assert not cancelled.wait(timeout=0.2)


def test_debouncer_with_real_timers() -> None:
    done = threading.Event()
    received = []

    def callback(value):
        received.append(value)
        done.set()

    debounced = Debouncer(callback, 20)
    for value in range(5):
        debounced(value)

    assert done.wait(timeout=2.0)
    assert received == [4]
