import threading
import time

import pytest

from urclient.blocking import BlockingReaderWriterQueue
from urclient.rwqueue import QueueEmpty


def test_fifo_order():
    q = BlockingReaderWriterQueue()
    items = list(range(40))
    for item in items:
        q.enqueue(item)
    assert [q.try_dequeue() for _ in items] == items


def test_try_dequeue_on_empty_raises():
    q = BlockingReaderWriterQueue()
    with pytest.raises(QueueEmpty):
        q.try_dequeue()


def test_try_enqueue_respects_initial_capacity():
    q = BlockingReaderWriterQueue(max_size=15)
    results = [q.try_enqueue(i) for i in range(15)]
    assert all(results)
    assert q.try_enqueue(99) is False
    assert q.size_approx() == 15


def test_enqueue_grows_beyond_capacity():
    q = BlockingReaderWriterQueue(max_size=3)
    for i in range(100):
        q.enqueue(i)
    assert q.size_approx() == 100
    assert [q.wait_dequeue() for _ in range(100)] == list(range(100))


def test_size_approx_tracks_operations():
    q = BlockingReaderWriterQueue()
    assert q.size_approx() == 0
    q.enqueue("a")
    q.enqueue("b")
    assert len(q) == 2
    q.try_dequeue()
    assert len(q) == 1


def test_peek_does_not_remove():
    q = BlockingReaderWriterQueue()
    q.enqueue("first")
    q.enqueue("second")
    assert q.peek() == "first"
    assert q.size_approx() == 2
    assert q.try_dequeue() == "first"


def test_peek_on_empty_raises():
    q = BlockingReaderWriterQueue()
    with pytest.raises(QueueEmpty):
        q.peek()


def test_pop():
    q = BlockingReaderWriterQueue()
    assert q.pop() is False
    q.enqueue(1)
    q.enqueue(2)
    assert q.pop() is True
    assert q.try_dequeue() == 2
    assert q.pop() is False


def test_wait_dequeue_timed_returns_available_element():
    q = BlockingReaderWriterQueue()
    q.enqueue("x")
    assert q.wait_dequeue_timed(0.5) == "x"


def test_wait_dequeue_timed_times_out():
    q = BlockingReaderWriterQueue()
    start = time.monotonic()
    with pytest.raises(QueueEmpty):
        q.wait_dequeue_timed(0.05)
    assert time.monotonic() - start >= 0.04


def test_wait_dequeue_timed_zero_polls():
    q = BlockingReaderWriterQueue()
    with pytest.raises(QueueEmpty):
        q.wait_dequeue_timed(0)
    q.enqueue(5)
    assert q.wait_dequeue_timed(0) == 5


def test_wait_dequeue_timed_negative_waits_for_producer():
    q = BlockingReaderWriterQueue()
    timer = threading.Timer(0.05, q.enqueue, args=("late",))
    timer.start()
    try:
        assert q.wait_dequeue_timed(-1) == "late"
    finally:
        timer.join()


def test_wait_dequeue_blocks_until_enqueue():
    q = BlockingReaderWriterQueue()
    received = []

    def consumer():
        received.append(q.wait_dequeue())

    thread = threading.Thread(target=consumer)
    thread.start()
    time.sleep(0.05)
    assert received == []
    assert q.size_approx() == 0
    q.enqueue("hello")
    thread.join(timeout=2)
    assert received == ["hello"]
    assert q.size_approx() == 0
    with pytest.raises(QueueEmpty):
        q.try_dequeue()


def test_producer_consumer_threads_preserve_order():
    q = BlockingReaderWriterQueue(max_size=4)
    count = 2000
    received = []

    def producer():
        for i in range(count):
            q.enqueue(i)

    def consumer():
        for _ in range(count):
            received.append(q.wait_dequeue_timed(5))

    threads = [threading.Thread(target=producer), threading.Thread(target=consumer)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)
    assert received == list(range(count))
    assert q.size_approx() == 0


def test_invalid_max_size_raises():
    with pytest.raises(ValueError):
        BlockingReaderWriterQueue(max_size=0)


def test_invalid_block_size_raises():
    with pytest.raises(ValueError):
        BlockingReaderWriterQueue(max_block_size=3)