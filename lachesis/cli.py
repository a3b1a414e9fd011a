"""Demonstration command running both schedulers."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence

from .cooperative import CooperativeScheduler
from .errors import LachesisError
from .runtime import check_preemption, spawn
from .scheduler import Lachesis

WORKER_STACK = 2 * 1024 * 1024


def _spin(value: int, count: int) -> None:
    for j in range(count):
        _ = value * j


def _worker(name: str, iterations: int, work: int) -> Callable[[], None]:
    def body() -> None:
        print(f"{name} starting")
        for i in range(iterations):
            print(f"{name}: {i}")
            _spin(i, work)
            check_preemption()

    return body


def _closure_worker_1(work: int) -> Callable[[], None]:
    thread_name = "Closure Worker 1"
    iteration_count = 8

    def body() -> None:
        print(f"{thread_name} starting")
        for i in range(iteration_count):
            print(f"{thread_name}: {i}")
            _spin(i, work)
            check_preemption()
        print(f"{thread_name} finished")

    return body


def _closure_worker_2(work: int) -> Callable[[], None]:
    shared_data = (10, 20, 30, 40, 50)
    multiplier = 2

    def body() -> None:
        print("Closure Worker 2")
        for idx, value in enumerate(shared_data):
            result = value * multiplier
            print(
                f"Closure Worker 2: data[{idx}] = {value} * {multiplier} = {result}"
            )
            _spin(result, work)
            check_preemption()
        print("Closure Worker 2 finished")

    return body


def _main_green_thread(scale: float) -> Callable[[], None]:
    def amount(count: int) -> int:
        return int(count * scale)

    def body() -> None:
        spawn(_worker("Worker 1", 10, amount(1_000_000)), WORKER_STACK)
        spawn(_worker("Worker 2", 10, amount(800_000)), WORKER_STACK)
        spawn(_closure_worker_1(amount(900_000)), WORKER_STACK)
        spawn(_closure_worker_2(amount(700_000)), WORKER_STACK)

        for i in range(5):
            print(f"Main Thread: {i}")
            for j in range(amount(600_000)):
                _ = i * j
                if j % 60_000 == 0:
                    check_preemption()
        for i in range(5, 8):
            print(f"Main Thread: {i}")
            _spin(i, amount(400_000))

    return body


def _run_cooperative() -> bool:
    print("\n--- Running Cooperative Scheduler ---")
    scheduler = CooperativeScheduler()

    def make_task(i: int) -> Callable[[], None]:
        def task() -> None:
            for j in range(3):
                _ = i * j
                print(f"Task {i}: Executing inner loop {j}")

        return task

    for i in range(3):
        try:
            scheduler.add_task(make_task(i))
        except LachesisError as exc:
            print(f"Failed to add task: {exc}", file=sys.stderr)
            if not exc.is_recoverable():
                return False

    try:
        scheduler.run()
    except LachesisError as exc:
        print(f"Failed to run cooperative scheduler: {exc}", file=sys.stderr)
    return True


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lachesis",
        description="Run the cooperative and green-thread scheduler demos.",
    )
    parser.add_argument(
        "--work-scale",
        type=float,
        default=1.0,
        help="factor applied to the busy-work loop lengths (default: 1.0)",
    )
    args = parser.parse_args(argv)
    if args.work_scale < 0:
        parser.error("--work-scale must not be negative")

    if not _run_cooperative():
        return 0

    print("\n--- Running Green Thread Scheduler ---")
    scheduler = (
        Lachesis.builder().stack_size(4 * 1024 * 1024).preemption_interval(10).build()
    )
    try:
        scheduler.run(_main_green_thread(args.work_scale))
    except LachesisError as exc:
        print(f"Failed to run green thread scheduler: {exc}", file=sys.stderr)
        if not exc.is_recoverable():
            print("Error is not recoverable, exiting...")
            return 0

    print("\nAll done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())