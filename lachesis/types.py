"""Shared data types of the scheduler."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable

Task = Callable[[], None]
Entry = Callable[[], None]
ThreadId = int

DEFAULT_STACK_SIZE = 2 * 1024 * 1024
DEFAULT_PREEMPTION_INTERVAL_MS = 10


class ThreadState(enum.Enum):
    """Life-cycle state of a green thread."""

    READY = "ready"
    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class ThreadInfo:
    """Snapshot of a green thread's identity and state."""

    id: ThreadId
    state: ThreadState


@dataclass
class SchedulerConfig:
    """Settings used when starting the green-thread scheduler."""

    default_stack_size: int = DEFAULT_STACK_SIZE
    preemption_interval_ms: int = DEFAULT_PREEMPTION_INTERVAL_MS