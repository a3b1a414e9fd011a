"""Periodic preemption requests raised by a background timer."""

from __future__ import annotations

import threading

_stop = threading.Event()
_requested = threading.Event()
_flag_lock = threading.Lock()
_timer_thread: threading.Thread | None = None
_enabled = False


def _tick(interval: float, stop: threading.Event) -> None:
    while not stop.wait(interval):
        _requested.set()


def init_timer(interval_ms: int) -> None:
    """Start a timer that requests preemption every ``interval_ms`` milliseconds."""
    global _timer_thread, _enabled, _stop
    if interval_ms < 0:
        raise ValueError(f"interval must not be negative: {interval_ms}")
    if _timer_thread is not None:
        disable_preemption()
    _stop = threading.Event()
    _requested.clear()
    _timer_thread = threading.Thread(
        target=_tick,
        args=(interval_ms / 1000.0, _stop),
        name="lachesis-timer",
        daemon=True,
    )
    _timer_thread.start()
    _enabled = True


def enable_preemption_with_interval(interval_ms: int) -> None:
    """Turn preemption on with the given timer interval."""
    global _enabled
    _enabled = True
    _requested.clear()
    init_timer(interval_ms)


def disable_preemption() -> None:
    """Stop the timer and drop any pending preemption request."""
    global _timer_thread, _enabled
    _stop.set()
    thread, _timer_thread = _timer_thread, None
    if thread is not None:
        thread.join()
    _enabled = False
    _requested.clear()


def is_preemption_enabled() -> bool:
    """Tell whether the preemption timer is active."""
    return _enabled


def take_preemption_request() -> bool:
    """Consume a pending preemption request; False when none or disabled."""
    if not _enabled:
        return False
    with _flag_lock:
        if _requested.is_set():
            _requested.clear()
            return True
    return False