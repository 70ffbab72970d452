#!filepath: stattrak/observability/metrics.py
import threading
from dataclasses import dataclass, field
from typing import Dict, Any

from stattrak.utils.logger import logs


@dataclass
class MetricRecorder:
    """
    Counters + last-value gauges, safe to call from several event threads.
    """
    enabled: bool = True
    metrics: Dict[str, Any] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def record(self, name: str, value: Any):
        if not self.enabled:
            return
        with self._lock:
            self.metrics[name] = value
        logs.debug(f"[Metric] {name} = {value}")

    def incr(self, name: str, n: int = 1) -> None:
        if not self.enabled:
            return
        with self._lock:
            self.metrics[name] = self.metrics.get(name, 0) + n

    def get(self, name: str, default: Any = 0) -> Any:
        with self._lock:
            return self.metrics.get(name, default)

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return dict(self.metrics)
