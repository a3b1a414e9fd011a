"""Execution context of one green thread."""

from __future__ import annotations

import threading
from typing import Callable

from .errors import InvalidStackSizeError
from .types import Entry, Task, ThreadInfo, ThreadState

PAGE_SIZE = 4 * 1024


class Context:
    """A green thread: its body, its state and the baton that lets it run.

    The body runs on its own system thread, but only while the context holds
    the baton: ``wake`` hands it over and ``wait`` blocks until it comes back.
    """

    def __init__(
        self,
        thread_id: int,
        stack_size: int,
        entry: Entry | None = None,
        executable: Task | None = None,
    ) -> None:
        if stack_size < PAGE_SIZE:
            raise InvalidStackSizeError(stack_size, PAGE_SIZE)
        self.id = thread_id
        self.stack_size = stack_size
        self.entry = entry
        self.executable = executable
        self.state = ThreadState.READY
        self.on_exit: Callable[[Context], None] | None = None
        self.error: BaseException | None = None
        self._resume = threading.Event()
        self._thread: threading.Thread | None = None
        self._start_lock = threading.Lock()

    def info(self) -> ThreadInfo:
        """Return the thread's id and current state."""
        return ThreadInfo(self.id, self.state)

    def wake(self) -> None:
        """Mark the context running and let its body proceed."""
        self.state = ThreadState.RUNNING
        self._resume.set()
        with self._start_lock:
            if self._thread is None:
                self._thread = threading.Thread(
                    target=self._bootstrap,
                    name=f"green-{self.id:x}",
                    daemon=True,
                )
                self._thread.start()

    def wait(self) -> None:
        """Block the calling body until the context is woken again."""
        self._resume.wait()
        self._resume.clear()

    def run_body(self) -> None:
        """Run the executable if one is set, otherwise the entry function."""
        executable, self.executable = self.executable, None
        try:
            if executable is not None:
                executable()
            elif self.entry is not None:
                self.entry()
        finally:
            self.state = ThreadState.TERMINATED

    def _bootstrap(self) -> None:
        self.wait()
        try:
            self.run_body()
        except BaseException as exc:  # reported through self.error
            self.error = exc
        if self.on_exit is not None:
            self.on_exit(self)