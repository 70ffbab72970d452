#!filepath: stattrak/dedup/window.py
from __future__ import annotations

import threading
from typing import Hashable, Optional

from stattrak.dedup.scheduler import Scheduler
from stattrak.utils.logger import logs


class DeduplicationWindow:
    """
    At-most-once gate for occurrence ids.

    - try_claim() is one atomic test-and-set
    - an id is released by the scheduler after ``release_delay_ticks``,
      never earlier
    - the window only absorbs redeliveries of the SAME occurrence;
      an id reused later is a new occurrence again
    """

    def __init__(self, scheduler: Scheduler, release_delay_ticks: int = 1):
        self.scheduler = scheduler
        self.release_delay_ticks = release_delay_ticks
        self._ids: set[Hashable] = set()
        self._lock = threading.Lock()

    def try_claim(self, occurrence_id: Hashable) -> bool:
        with self._lock:
            if occurrence_id in self._ids:
                return False
            self._ids.add(occurrence_id)
            return True

    def schedule_release(self, occurrence_id: Hashable, delay_ticks: Optional[int] = None) -> None:
        ticks = self.release_delay_ticks if delay_ticks is None else delay_ticks
        self.scheduler.call_later(ticks, lambda: self._release(occurrence_id))

    def claim(self, occurrence_id: Hashable) -> bool:
        """
        try_claim + schedule_release on success.
        """
        if not self.try_claim(occurrence_id):
            logs.debug(f"[DeduplicationWindow] duplicate occurrence {occurrence_id!r} skipped")
            return False
        self.schedule_release(occurrence_id)
        return True

    def _release(self, occurrence_id: Hashable) -> None:
        with self._lock:
            self._ids.discard(occurrence_id)

    def __contains__(self, occurrence_id: Hashable) -> bool:
        with self._lock:
            return occurrence_id in self._ids

    def __len__(self) -> int:
        with self._lock:
            return len(self._ids)
