"""Entry point that configures and runs the green-thread runtime."""

from __future__ import annotations

import dataclasses
import threading
from typing import Callable

from .errors import AlreadyInitializedError, InvalidStackSizeError
from .runtime import execute_main
from .types import SchedulerConfig

MIN_STACK_SIZE = 64 * 1024


class Lachesis:
    """Runs a main function as a green thread under a given configuration."""

    def __init__(self, config: SchedulerConfig | None = None) -> None:
        self._config = config if config is not None else SchedulerConfig()
        self._initialized = False
        self._lock = threading.Lock()

    @property
    def config(self) -> SchedulerConfig:
        return self._config

    @staticmethod
    def builder() -> ConfigBuilder:
        """Return a builder starting from the default configuration."""
        return ConfigBuilder()

    def run(self, main_func: Callable[[], None]) -> None:
        """Run ``main_func`` and every thread it spawns to completion."""
        with self._lock:
            if self._initialized:
                raise AlreadyInitializedError()
            self._initialized = True

        stack_size = self._config.default_stack_size
        if stack_size < MIN_STACK_SIZE:
            raise InvalidStackSizeError(stack_size, MIN_STACK_SIZE)

        try:
            execute_main(
                main_func, stack_size, self._config.preemption_interval_ms
            )
        finally:
            with self._lock:
                self._initialized = False


class ConfigBuilder:
    """Fluent construction of a configured :class:`Lachesis`."""

    def __init__(self) -> None:
        self._config = SchedulerConfig()

    def stack_size(self, size: int) -> ConfigBuilder:
        """Set the stack size of green threads, in bytes."""
        self._config.default_stack_size = size
        return self

    def preemption_interval(self, ms: int) -> ConfigBuilder:
        """Set the preemption timer interval, in milliseconds."""
        self._config.preemption_interval_ms = ms
        return self

    def build(self) -> Lachesis:
        """Create the scheduler with the configuration gathered so far."""
        return Lachesis(dataclasses.replace(self._config))