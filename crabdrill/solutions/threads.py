"""Reference solutions for the thread exercises."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field


def _timed_sleep(delay: float) -> int:
    start = time.perf_counter_ns()
    time.sleep(delay)
    return (time.perf_counter_ns() - start) // 1_000_000


def run_timed_workers(count: int = 10, delay: float = 0.25) -> list[int]:
    """Run workers concurrently, each sleeping delay seconds; return their durations in ms."""
    if count <= 0:
        return []
    with ThreadPoolExecutor(max_workers=count) as pool:
        futures = [pool.submit(_timed_sleep, delay) for _ in range(count)]
        return [future.result() for future in futures]


@dataclass
class JobStatus:
    """A counter of completed jobs shared between threads."""

    jobs_completed: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def complete_one(self) -> None:
        with self._lock:
            self.jobs_completed += 1


def count_jobs(count: int = 10, delay: float = 0.25) -> int:
    """Have count threads each record one finished job; return the total."""
    status = JobStatus()

    def job() -> None:
        time.sleep(delay)
        status.complete_one()

    workers = [threading.Thread(target=job) for _ in range(count)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return status.jobs_completed


@dataclass
class Queue:
    """Ten numbers split into two halves."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])


def send_tx(queue: Queue, channel, delay: float = 1.0) -> list[threading.Thread]:
    """Send both halves into channel from two threads; return the started threads."""

    def send(values: list[int]) -> None:
        for value in values:
            channel.put(value)
            time.sleep(delay)

    senders = [
        threading.Thread(target=send, args=(queue.first_half,)),
        threading.Thread(target=send, args=(queue.second_half,)),
    ]
    for sender in senders:
        sender.start()
    return senders