import pytest

from lachesis import runtime
from lachesis.errors import AlreadyInitializedError, InvalidStackSizeError
from lachesis.scheduler import ConfigBuilder, Lachesis
from lachesis.types import SchedulerConfig


def test_builder_defaults_match_default_config():
    scheduler = Lachesis.builder().build()
    assert scheduler.config == SchedulerConfig()


def test_builder_sets_values():
    scheduler = (
        Lachesis.builder().stack_size(4 * 1024 * 1024).preemption_interval(10).build()
    )
    assert scheduler.config.default_stack_size == 4 * 1024 * 1024
    assert scheduler.config.preemption_interval_ms == 10


def test_build_copies_configuration():
    builder = ConfigBuilder().stack_size(128 * 1024)
    first = builder.build()
    builder.stack_size(256 * 1024)
    assert first.config.default_stack_size == 128 * 1024
    assert builder.build().config.default_stack_size == 256 * 1024


def test_new_without_config_uses_defaults():
    assert Lachesis(None).config == SchedulerConfig()


def test_run_executes_main_and_spawned_threads():
    records = []

    def main_func():
        runtime.spawn(lambda: records.append("child"), 64 * 1024)
        records.append("main")

    outcome = Lachesis(SchedulerConfig()).run(main_func)
    assert (outcome, sorted(records)) == (None, ["child", "main"])


def test_run_twice_sequentially():
    scheduler = Lachesis.builder().build()
    records = []
    first = scheduler.run(lambda: records.append(1))
    second = scheduler.run(lambda: records.append(2))
    assert (first, second, records) == (None, None, [1, 2])


def test_stack_size_below_minimum():
    scheduler = Lachesis.builder().stack_size(1024).build()
    with pytest.raises(InvalidStackSizeError) as info:
        scheduler.run(lambda: None)
    assert info.value.size == 1024
    assert info.value.minimum == 64 * 1024
    assert info.value.is_recoverable() is False


def test_stack_size_failure_leaves_scheduler_initialized():
    scheduler = Lachesis.builder().stack_size(1024).build()
    with pytest.raises(InvalidStackSizeError):
        scheduler.run(lambda: None)
    with pytest.raises(AlreadyInitializedError):
        scheduler.run(lambda: None)


def test_nested_run_raises_already_initialized():
    scheduler = Lachesis.builder().build()
    caught = []

    def main_func():
        try:
            scheduler.run(lambda: None)
        except AlreadyInitializedError as exc:
            caught.append(str(exc))

    outcome = scheduler.run(main_func)
    assert (outcome, caught) == (None, ["Scheduler already initialized"])


def test_error_in_main_resets_scheduler():
    scheduler = Lachesis.builder().build()

    def failing():
        raise RuntimeError("fail")

    with pytest.raises(RuntimeError, match="fail"):
        scheduler.run(failing)
    records = []
    outcome = scheduler.run(lambda: records.append("again"))
    assert (outcome, records) == (None, ["again"])