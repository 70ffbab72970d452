#!filepath: stattrak/dedup/scheduler.py
from __future__ import annotations

import heapq
import itertools
import threading
import time
from typing import Callable, Protocol

from stattrak.utils.logger import logs

Task = Callable[[], None]


class Scheduler(Protocol):
    """
    Scheduler Contract

    The only job: run ``fn`` once, ``ticks`` logical ticks from now,
    on a thread the caller does not have to keep alive.
    """

    def call_later(self, ticks: int, fn: Task) -> None:
        ...

    def shutdown(self) -> None:
        ...


class TimerScheduler:
    """
    Wall-clock scheduler backed by one daemon worker thread.

    - 1 tick = ``tick_seconds`` (default 50 ms, one server tick)
    - tasks are kept in a heap ordered by due time
    - a failing task is logged and never kills the worker
    """

    def __init__(self, tick_seconds: float = 0.05, name: str = "stattrak-scheduler"):
        self.tick_seconds = tick_seconds
        self._heap: list[tuple[float, int, Task]] = []
        self._seq = itertools.count()
        self._cond = threading.Condition()
        self._closed = False
        self._worker = threading.Thread(target=self._run, name=name, daemon=True)
        self._worker.start()

    def call_later(self, ticks: int, fn: Task) -> None:
        due = time.monotonic() + max(0, ticks) * self.tick_seconds
        with self._cond:
            if self._closed:
                logs.warning("[TimerScheduler] call_later after shutdown, task dropped")
                return
            heapq.heappush(self._heap, (due, next(self._seq), fn))
            self._cond.notify()

    def pending(self) -> int:
        with self._cond:
            return len(self._heap)

    def shutdown(self, wait: bool = True) -> None:
        """
        Stop the worker. With ``wait`` the tasks already queued still run first.
        """
        with self._cond:
            self._closed = True
            if not wait:
                self._heap.clear()
            self._cond.notify()
        self._worker.join()

    # ---------------- internal ----------------

    def _run(self) -> None:
        while True:
            with self._cond:
                while True:
                    if not self._heap:
                        if self._closed:
                            return
                        self._cond.wait()
                        continue

                    due = self._heap[0][0]
                    delay = due - time.monotonic()
                    if delay <= 0:
                        _, _, fn = heapq.heappop(self._heap)
                        break
                    self._cond.wait(timeout=delay)

            try:
                fn()
            except Exception:
                logs.exception("[TimerScheduler] scheduled task failed")


class TickScheduler:
    """
    Host-driven scheduler: time only moves when ``tick()`` is called.

    Suits hosts with their own game loop, and deterministic tests.
    """

    def __init__(self):
        self._now = 0
        self._heap: list[tuple[int, int, Task]] = []
        self._seq = itertools.count()
        self._lock = threading.Lock()

    @property
    def now(self) -> int:
        return self._now

    def call_later(self, ticks: int, fn: Task) -> None:
        with self._lock:
            heapq.heappush(self._heap, (self._now + max(0, ticks), next(self._seq), fn))

    def pending(self) -> int:
        with self._lock:
            return len(self._heap)

    def tick(self, n: int = 1) -> int:
        """
        Advance ``n`` ticks; returns how many tasks ran.
        """
        ran = 0
        for _ in range(n):
            with self._lock:
                self._now += 1
                due = []
                while self._heap and self._heap[0][0] <= self._now:
                    due.append(heapq.heappop(self._heap)[2])

            for fn in due:
                try:
                    fn()
                except Exception:
                    logs.exception("[TickScheduler] scheduled task failed")
                ran += 1
        return ran

    def shutdown(self) -> None:
        with self._lock:
            self._heap.clear()
