"""One-shot timers for presentation pacing.

The battle core already knows each turn's result; these timers only delay
when the result is surfaced. Everything runs on the caller's thread: the
event loop calls :meth:`Scheduler.run_due` between key reads.
"""
from __future__ import annotations
from dataclasses import dataclass, field
import heapq
import time
from typing import Callable, List, Optional


@dataclass(order=True)
class Timer:
    deadline: float
    seq: int
    fn: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self):
        self.cancelled = True


class Scheduler:
    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._heap: List[Timer] = []
        self._seq = 0

    def call_later(self, delay: float, fn: Callable[[], None]) -> Timer:
        self._seq += 1
        timer = Timer(self.clock() + max(0.0, delay), self._seq, fn)
        heapq.heappush(self._heap, timer)
        return timer

    def _prune(self):
        while self._heap and self._heap[0].cancelled:
            heapq.heappop(self._heap)

    @property
    def pending(self) -> int:
        return sum(1 for t in self._heap if not t.cancelled)

    def next_deadline(self) -> Optional[float]:
        self._prune()
        return self._heap[0].deadline if self._heap else None

    def run_due(self, now: Optional[float] = None) -> int:
        """Run every live timer whose deadline has passed; returns how many ran."""
        now = self.clock() if now is None else now
        ran = 0
        while True:
            self._prune()
            if not self._heap or self._heap[0].deadline > now:
                return ran
            timer = heapq.heappop(self._heap)
            timer.fn()
            ran += 1

    def cancel_all(self):
        for t in self._heap:
            t.cancel()
        self._heap.clear()


__all__ = ["Scheduler", "Timer"]
