import pytest

from lachesis.errors import (
    AlreadyInitializedError,
    ConfigurationError,
    DeadlockError,
    InvalidStackSizeError,
    LachesisError,
    LockFailedError,
    NotInitializedError,
    SpawnFailedError,
    SystemResourceError,
    ThreadNotFoundError,
)


def test_messages_of_plain_errors():
    assert str(AlreadyInitializedError()) == "Scheduler already initialized"
    assert str(NotInitializedError()) == "Scheduler not initialized"
    assert str(DeadlockError()) == "Deadlock detected"
    assert str(LockFailedError()) == "Lock acquisition failed"
    assert str(SpawnFailedError()) == "Thread spawn failed"


def test_thread_not_found_carries_id():
    err = ThreadNotFoundError(42)
    assert err.thread_id == 42
    assert str(err) == "Thread not found: 42"


def test_invalid_stack_size_message():
    err = InvalidStackSizeError(1024, 65536)
    assert (err.size, err.minimum) == (1024, 65536)
    assert str(err) == "Invalid stack size: 1024. Minimum size is 65536 bytes"


def test_detail_errors():
    assert str(SystemResourceError("no memory")) == "System resource error: no memory"
    assert str(ConfigurationError("bad interval")) == "Configuration error: bad interval"


@pytest.mark.parametrize(
    "err, expected",
    [
        (AlreadyInitializedError(), False),
        (NotInitializedError(), False),
        (InvalidStackSizeError(1, 2), False),
        (ConfigurationError("x"), False),
        (ThreadNotFoundError(1), True),
        (DeadlockError(), True),
        (LockFailedError(), True),
        (SpawnFailedError(), True),
        (SystemResourceError("x"), True),
    ],
)
def test_recoverability(err, expected):
    assert err.is_recoverable() is expected


def test_all_derive_from_base():
    assert issubclass(DeadlockError, LachesisError)
    assert DeadlockError().is_recoverable() is True
    assert str(DeadlockError()) == "Deadlock detected"