"""Solutions to the concurrency exercises: shared data across threads and a channel."""

from __future__ import annotations

import queue
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterable, Sequence

_STRIDE = 8


def _offset_sum(numbers: Sequence[int], offset: int) -> int:
    total = sum(n for n in numbers if n % _STRIDE == offset)
    print(f"Sum of offset {offset} is {total}")
    return total


def offset_sums(numbers: Sequence[int], offsets: Iterable[int]) -> dict[int, int]:
    """Sum every eighth number for each offset, one thread per offset.

    All threads read the same sequence; nothing is copied.
    """
    offsets = list(offsets)
    with ThreadPoolExecutor(max_workers=max(1, len(offsets))) as pool:
        futures = {offset: pool.submit(_offset_sum, numbers, offset) for offset in offsets}
    return {offset: future.result() for offset, future in futures.items()}


@dataclass
class SplitQueue:
    """Values to send, split into two halves sent by separate threads."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])
    delay: float = 1.0


def _send_values(values: Sequence[int], channel: queue.Queue, delay: float) -> None:
    for value in values:
        print(f"sending {value!r}")
        channel.put(value)
        time.sleep(delay)


def send_tx(split_queue: SplitQueue, channel: queue.Queue) -> list[threading.Thread]:
    """Start one sender thread per half; return the started threads."""
    senders = [
        threading.Thread(
            target=_send_values, args=(half, channel, split_queue.delay), daemon=True
        )
        for half in (split_queue.first_half, split_queue.second_half)
    ]
    for sender in senders:
        sender.start()
    return senders


def receive_all(split_queue: SplitQueue) -> list[int]:
    """Send both halves and collect every value until the senders are done.

    Raise RuntimeError if the number received differs from the queue's length.
    """
    channel: queue.Queue = queue.Queue()
    senders = send_tx(split_queue, channel)
    received: list[int] = []
    while any(sender.is_alive() for sender in senders) or not channel.empty():
        try:
            value = channel.get(timeout=0.05)
        except queue.Empty:
            continue
        print(f"Got: {value}")
        received.append(value)

    print(f"total numbers received: {len(received)}")
    if len(received) != split_queue.length:
        raise RuntimeError(
            f"received {len(received)} values, expected {split_queue.length}"
        )
    return received