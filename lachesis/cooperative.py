"""A run-to-completion task queue."""

from __future__ import annotations

import threading
from collections import deque

from .types import Task


class CooperativeScheduler:
    """Runs queued tasks one after another, in the order they were added."""

    def __init__(self) -> None:
        self._queue: deque[Task] = deque()
        self._lock = threading.Lock()

    def add_task(self, task: Task) -> None:
        """Append a task to the queue."""
        with self._lock:
            self._queue.append(task)

    def _next(self) -> Task | None:
        with self._lock:
            return self._queue.popleft() if self._queue else None

    def run(self) -> None:
        """Run tasks until the queue is empty, including ones added meanwhile."""
        while (task := self._next()) is not None:
            task()