"""Green-thread runtime: a run queue of contexts that pass a single baton.

The context at the front of the queue is the one running. ``schedule``
rotates the queue and hands the baton to the next context. When a body
finishes, its context leaves the queue. When the queue is empty, control
returns to the caller of ``spawn_from_main``.
"""

from __future__ import annotations

import random
import threading
from collections import deque
from typing import Callable

from .context import Context
from .errors import AlreadyInitializedError, NotInitializedError
from .timer import (
    disable_preemption,
    enable_preemption_with_interval,
    take_preemption_request,
)
from .types import Entry, ThreadState

_contexts: deque[Context] = deque()
_ids: set[int] | None = None
_main_done: threading.Event | None = None
_failure: BaseException | None = None
_current_thread_id = 0


def get_id() -> int:
    """Draw a random 64-bit thread id that no live thread uses."""
    if _ids is None:
        raise NotInitializedError()
    while True:
        candidate = random.getrandbits(64)
        if candidate not in _ids:
            _ids.add(candidate)
            return candidate


def current_thread_id() -> int:
    """Return the id of the green thread that was last switched to."""
    return _current_thread_id


def spawn(func: Callable[[], None], stack_size: int) -> int:
    """Queue ``func`` as a new green thread, yield once, and return its id.

    Must be called from inside a running green thread.
    """
    thread_id = get_id()
    try:
        ctx = Context(thread_id, stack_size, executable=func)
    except Exception:
        if _ids is not None:
            _ids.discard(thread_id)
        raise
    ctx.on_exit = _finish
    _contexts.append(ctx)
    schedule()
    return thread_id


def schedule() -> None:
    """Give the baton to the next ready green thread.

    Does nothing when fewer than two threads are queued. Must be called from
    inside a running green thread.
    """
    global _current_thread_id
    if len(_contexts) <= 1:
        return
    current = _contexts.popleft()
    current.state = ThreadState.READY
    _contexts.append(current)
    upcoming = _contexts[0]
    _current_thread_id = upcoming.id
    upcoming.wake()
    current.wait()


def check_preemption() -> None:
    """Safe point: yield if the preemption timer has asked for it."""
    if take_preemption_request():
        schedule()


def _finish(ctx: Context) -> None:
    global _current_thread_id, _failure
    if _contexts and _contexts[0] is ctx:
        _contexts.popleft()
    elif ctx in _contexts:
        _contexts.remove(ctx)
    ctx.state = ThreadState.TERMINATED
    if ctx.error is not None and _failure is None:
        _failure = ctx.error
    if _ids is not None:
        _ids.discard(ctx.id)
    if _contexts:
        upcoming = _contexts[0]
        _current_thread_id = upcoming.id
        upcoming.wake()
    else:
        disable_preemption()
        if _main_done is not None:
            _main_done.set()


def spawn_from_main(func: Entry, stack_size: int, preemption_interval: int) -> None:
    """Run ``func`` as the first green thread and block until all threads end.

    The first exception raised by any green thread is raised again here once
    the runtime has shut down.
    """
    global _ids, _main_done, _failure, _current_thread_id
    if _main_done is not None:
        raise AlreadyInitializedError("spawn_from_main is called twice")
    done = threading.Event()
    _main_done = done
    _ids = set()
    _failure = None
    try:
        enable_preemption_with_interval(preemption_interval)
        first = Context(get_id(), stack_size, entry=func)
        first.on_exit = _finish
        _current_thread_id = first.id
        _contexts.append(first)
        first.wake()
        done.wait()
    finally:
        disable_preemption()
        _contexts.clear()
        _main_done = None
        _ids = None
        failure, _failure = _failure, None
    if failure is not None:
        raise failure


def execute_main(
    wrapper: Callable[[], None], stack_size: int, preemption_interval: int
) -> None:
    """Run an arbitrary callable as the main green thread."""

    def main_entry() -> None:
        wrapper()

    spawn_from_main(main_entry, stack_size, preemption_interval)