# lachesis

A small scheduling library offering two models:

- **`CooperativeScheduler`** (`lachesis.cooperative`): a FIFO queue of
  callables, run one after another until the queue is empty. Tasks added
  while the queue is running are run too.
- **`Lachesis`** (`lachesis.scheduler`): a green-thread scheduler. Green
  threads take turns on a single run queue, yield with
  `lachesis.runtime.schedule()`, and give up control at safe points with
  `lachesis.runtime.check_preemption()` once a background timer has asked for
  preemption.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Cooperative tasks

```python
from lachesis.cooperative import CooperativeScheduler

scheduler = CooperativeScheduler()
results = []
for i in range(3):
    scheduler.add_task(lambda i=i: results.append(i))
scheduler.run()
assert results == [0, 1, 2]
```

## Green threads

```python
from lachesis.runtime import spawn, check_preemption
from lachesis.scheduler import Lachesis

def worker():
    for i in range(10):
        print("worker", i)
        check_preemption()  # a safe point where the thread may be switched out

def main_thread():
    spawn(worker, 2 * 1024 * 1024)
    for i in range(5):
        print("main", i)
        check_preemption()

scheduler = (
    Lachesis.builder()
    .stack_size(4 * 1024 * 1024)
    .preemption_interval(10)
    .build()
)
scheduler.run(main_thread)
```

- `Lachesis.run(main_func)` returns once every green thread has finished.
  If a green thread raised an exception, the first such exception is raised
  again from `run` after the runtime has shut down.
- The configured stack size must be at least 64 KiB, otherwise
  `InvalidStackSizeError` is raised. Calling `run` on the same scheduler
  while it is still running raises `AlreadyInitializedError`.
- The defaults, held in `lachesis.types.SchedulerConfig`, are a 2 MiB stack
  and a 10 ms preemption interval.
- `spawn(func, stack_size)` and `schedule()` must be called from inside a
  running green thread. `spawn` returns a random 64-bit id, unique among live
  threads, and yields once. `current_thread_id()` returns the id of the
  thread last switched to.
- `schedule()` does nothing when fewer than two threads are queued.

### Lower-level pieces

- `lachesis.runtime.spawn_from_main(func, stack_size, preemption_interval)`
  and `execute_main(...)` run the first green thread directly, without the
  64 KiB check; a second, nested call raises `AlreadyInitializedError`.
- `lachesis.timer` holds the preemption timer: `enable_preemption_with_interval`,
  `init_timer`, `disable_preemption`, `is_preemption_enabled` and
  `take_preemption_request`, which consumes a pending request.
- `lachesis.context.Context` is one green thread: its body, its state
  (`ThreadState.READY`, `RUNNING`, `TERMINATED`) and `info()`, which returns a
  `ThreadInfo`.

## Errors

All errors derive from `lachesis.errors.LachesisError`. Each one reports
through `is_recoverable()` whether a caller could reasonably carry on:
`ThreadNotFoundError`, `DeadlockError`, `LockFailedError`,
`SpawnFailedError` and `SystemResourceError` are recoverable;
`AlreadyInitializedError`, `NotInitializedError`, `InvalidStackSizeError`
and `ConfigurationError` are not.

## What it does not do

Each green thread's body runs on its own system thread, and only one of them
holds the baton at any time; switching happens only at `schedule()` and at
`check_preemption()` safe points. A thread that never reaches a safe point is
never switched out. The stack size is validated and recorded but does not
allocate memory or set a real stack limit: a green thread's Python stack is
that of its system thread.

## Demo

A demo that runs a few cooperative tasks followed by several preemptible green
threads:

```
lachesis
```

`--work-scale FACTOR` multiplies the length of the busy-work loops (default
1.0; must not be negative), so `lachesis --work-scale 0.01` finishes quickly.