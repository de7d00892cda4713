"""Thread exercises: joining workers, sharing a counter and sending over a channel."""

from __future__ import annotations

import queue as channels
import threading
import time
from dataclasses import dataclass, field


def run_sleepers(count: int = 10, delay: float = 0.25) -> int:
    """Start count threads that sleep, wait for all of them and return how many finished."""

    def sleeper(index: int) -> None:
        time.sleep(delay)
        print(f"thread {index} is complete")

    handles = [threading.Thread(target=sleeper, args=(index,)) for index in range(count)]
    for handle in handles:
        handle.start()

    completed_threads = 0
    for handle in handles:
        handle.join()
        completed_threads += 1

    if completed_threads != count:
        raise RuntimeError("Oh no! All the spawned threads did not finish!")
    return completed_threads


@dataclass
class JobStatus:
    """A count of completed jobs."""

    jobs_completed: int = 0


def complete_jobs(count: int = 10, delay: float = 0.25) -> JobStatus:
    """Let count threads each record one completed job in a shared status."""
    status = JobStatus()
    lock = threading.Lock()

    def job() -> None:
        time.sleep(delay)
        with lock:
            status.jobs_completed += 1

    handles = [threading.Thread(target=job) for _ in range(count)]
    for handle in handles:
        handle.start()
    for handle in handles:
        handle.join()
        with lock:
            print(f"jobs completed {status.jobs_completed}")
    return status


@dataclass(frozen=True)
class Queue:
    """Ten numbers split into two halves."""

    length: int = 10
    first_half: tuple[int, ...] = field(default=(1, 2, 3, 4, 5))
    second_half: tuple[int, ...] = field(default=(6, 7, 8, 9, 10))


def send_tx(
    queue: Queue, channel: "channels.Queue[int]", delay: float = 1.0
) -> list[threading.Thread]:
    """Send each half of the queue over channel from its own thread; return the threads."""

    def sender(values: tuple[int, ...]) -> None:
        for value in values:
            print(f"sending {value}")
            channel.put(value)
            time.sleep(delay)

    threads = [
        threading.Thread(target=sender, args=(half,))
        for half in (queue.first_half, queue.second_half)
    ]
    for thread in threads:
        thread.start()
    return threads


def receive_all(queue: Queue | None = None, delay: float = 1.0) -> list[int]:
    """Receive every value sent for queue until all senders have finished."""
    queue = queue if queue is not None else Queue()
    channel: "channels.Queue[int]" = channels.Queue()
    senders = send_tx(queue, channel, delay)

    received: list[int] = []
    while True:
        try:
            value = channel.get(timeout=0.05)
        except channels.Empty:
            if not any(sender.is_alive() for sender in senders) and channel.empty():
                break
            continue
        print(f"Got: {value}")
        received.append(value)

    print(f"total numbers received: {len(received)}")
    if len(received) != queue.length:
        raise RuntimeError(
            f"received {len(received)} numbers, expected {queue.length}"
        )
    return received