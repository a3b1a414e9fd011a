"""Exceptions raised by the scheduler."""

from __future__ import annotations


class LachesisError(Exception):
    """Base class of every scheduler error."""

    recoverable: bool = False
    message: str = "Scheduler error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.message)

    def is_recoverable(self) -> bool:
        """Tell whether the caller may carry on after this error."""
        return self.recoverable


class AlreadyInitializedError(LachesisError):
    """The scheduler is already running."""

    message = "Scheduler already initialized"


class NotInitializedError(LachesisError):
    """The scheduler has not been started."""

    message = "Scheduler not initialized"


class ThreadNotFoundError(LachesisError):
    """No green thread carries the given id."""

    recoverable = True

    def __init__(self, thread_id: int) -> None:
        self.thread_id = thread_id
        super().__init__(f"Thread not found: {thread_id}")


class DeadlockError(LachesisError):
    """No thread can make progress."""

    recoverable = True
    message = "Deadlock detected"


class LockFailedError(LachesisError):
    """A shared lock could not be acquired."""

    recoverable = True
    message = "Lock acquisition failed"


class InvalidStackSizeError(LachesisError):
    """The requested stack is smaller than allowed."""

    def __init__(self, size: int, minimum: int) -> None:
        self.size = size
        self.minimum = minimum
        super().__init__(
            f"Invalid stack size: {size}. Minimum size is {minimum} bytes"
        )


class SpawnFailedError(LachesisError):
    """A green thread could not be started."""

    recoverable = True
    message = "Thread spawn failed"


class SystemResourceError(LachesisError):
    """An operating-system resource was unavailable."""

    recoverable = True

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"System resource error: {detail}")


class ConfigurationError(LachesisError):
    """The scheduler configuration is unusable."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Configuration error: {detail}")