"""Thread demonstrations: shared totals, a bounded buffer and lock ordering."""

from __future__ import annotations

import threading
import time
from collections import deque
from collections.abc import Iterable


def parallel_sums(numbers: Iterable[int]) -> tuple[int, int]:
    """Return (sum, sum of squares), each computed on its own thread."""
    values = list(numbers)
    totals = {"sum": 0, "squares": 0}
    lock = threading.Lock()

    def add_sum() -> None:
        local = sum(values)
        with lock:
            totals["sum"] += local

    def add_squares() -> None:
        local = sum(value * value for value in values)
        with lock:
            totals["squares"] += local

    workers = [threading.Thread(target=add_sum), threading.Thread(target=add_squares)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return totals["sum"], totals["squares"]


def producer_consumer(count: int, buffer_size: int = 5) -> list[int]:
    """Pass ``count`` items through a bounded buffer; return them as consumed."""
    if count < 0:
        raise ValueError("count must be non-negative")
    if buffer_size < 1:
        raise ValueError("buffer_size must be at least 1")
    buffer: deque[int] = deque()
    lock = threading.Lock()
    not_empty = threading.Condition(lock)
    not_full = threading.Condition(lock)
    consumed: list[int] = []

    def producer() -> None:
        for item in range(count):
            with not_full:
                not_full.wait_for(lambda: len(buffer) < buffer_size)
                buffer.append(item)
                not_empty.notify()

    def consumer() -> None:
        for _ in range(count):
            with not_empty:
                not_empty.wait_for(lambda: bool(buffer))
                consumed.append(buffer.popleft())
                not_full.notify()

    workers = [threading.Thread(target=producer), threading.Thread(target=consumer)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return consumed


def opposite_lock_order(hold_time: float = 1.0, timeout: float = 2.0) -> bool:
    """Take two locks in opposite orders on two threads.

    Each thread holds its first lock for ``hold_time`` seconds, then waits at
    most ``timeout`` seconds for the second. Returns True if either thread gave
    up waiting, i.e. the threads would have deadlocked.
    """
    if timeout <= 0:
        raise ValueError("timeout must be positive")
    if hold_time < 0:
        raise ValueError("hold_time must be non-negative")
    lock_a = threading.Lock()
    lock_b = threading.Lock()
    stuck: list[str] = []

    def worker(name: str, first: threading.Lock, second: threading.Lock) -> None:
        with first:
            time.sleep(hold_time)
            if second.acquire(timeout=timeout):
                second.release()
            else:
                stuck.append(name)

    workers = [
        threading.Thread(target=worker, args=("thread-1", lock_a, lock_b)),
        threading.Thread(target=worker, args=("thread-2", lock_b, lock_a)),
    ]
    for thread in workers:
        thread.start()
    for thread in workers:
        thread.join()
    return bool(stuck)