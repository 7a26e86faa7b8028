# urclient

Small building blocks for robot client code:

- `urclient.log`: a logging facade with severity levels and a replaceable
  handler.
- `urclient.semaphore`: `LightweightSemaphore`, a counting semaphore with
  non-blocking, blocking and timed waits.
- `urclient.rwqueue`: `ReaderWriterQueue`, a growable single-producer,
  single-consumer FIFO made of fixed-size circular blocks, plus the
  `QueueEmpty` exception and the helper `ceil_to_pow2`.
- `urclient.blocking`: `BlockingReaderWriterQueue`, the same queue with
  blocking and timed dequeue operations.

The package has no third-party dependencies.

## Installation

```
pip install .
```

## Logging

```python
from urclient.log import (
    LogHandler, LogLevel, get_log_level, log, register_log_handler,
    set_log_level, unregister_log_handler,
)

set_log_level(LogLevel.DEBUG)
log(__file__, 10, LogLevel.INFO, "connected to %s", "robot")


class Collect(LogHandler):
    def __init__(self):
        self.messages = []

    def log(self, file, line, loglevel, message):
        self.messages.append((loglevel, message))


register_log_handler(Collect())
```

- `LogLevel` is an `IntEnum`: `DEBUG`, `INFO`, `WARN`, `ERROR`, `FATAL`,
  `NONE`, in increasing order.
- The starting level is `LogLevel.WARN`. `set_log_level` accepts a
  `LogLevel` or its integer value; `get_log_level()` returns the current one.
  Messages below it are dropped.
- `log(file, line, level, fmt, *args)` formats `fmt % args` when arguments are
  given and passes the message as-is otherwise.
- `DefaultLogHandler` writes `LEVEL file line: message` to standard error.
- `register_log_handler` requires a `LogHandler` instance (otherwise
  `TypeError`); passing `None`, or calling `unregister_log_handler()`, restores
  the `DefaultLogHandler`.

## Semaphore

```python
from urclient.semaphore import LightweightSemaphore

sema = LightweightSemaphore()   # initial count 0; negative raises ValueError
sema.signal(2)
sema.try_wait()                 # True, never blocks
sema.wait(0.5)                  # True, or False once 0.5 s passed
sema.available_approx()         # 0
```

`wait(None)` or a negative timeout waits without limit; `wait(0)` only polls.
`signal` with a negative count raises `ValueError`.

## Queues

```python
from urclient.rwqueue import QueueEmpty, ReaderWriterQueue
from urclient.blocking import BlockingReaderWriterQueue

q = ReaderWriterQueue(15)       # max_size=15, max_block_size=512
q.enqueue("a")                  # adds a block when full
q.try_enqueue("b")              # never adds storage; False when full
q.peek()                        # "a"
q.try_dequeue()                 # "a"
q.pop()                         # True: "b" dropped
len(q)                          # 0, same as q.size_approx()
q.capacity()                    # usable slots across all blocks

bq = BlockingReaderWriterQueue()
bq.enqueue(42)
bq.wait_dequeue_timed(0.1)      # 42, or raises QueueEmpty on timeout
```

- `ReaderWriterQueue(max_size, max_block_size)` raises `ValueError` unless
  `max_size` is positive and `max_block_size` is a power of two of at least 2.
  Each block keeps one slot unused, and blocks are never removed once added.
- `try_dequeue` and `peek` raise `QueueEmpty` on an empty queue; `pop`
  returns `False` instead.
- `BlockingReaderWriterQueue` has the same `try_enqueue`, `enqueue`,
  `try_dequeue`, `peek`, `pop` and `size_approx`, plus `wait_dequeue()`, which
  waits without limit, and `wait_dequeue_timed(timeout)`, which takes seconds
  (`None` or negative waits without limit).
- `ceil_to_pow2(x)` returns the smallest power of two not less than `x`;
  `ceil_to_pow2(0)` is `0` and negative input raises `ValueError`.

## What this package does not do

It contains no network code: there is no dashboard, RTDE or primary-interface
client, no robot driver and no command-line program. It only provides the
logging and queueing pieces such a client would be built on.

## Running the tests

```
pip install .[test]
pytest
```