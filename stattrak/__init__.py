#!filepath: stattrak/__init__.py

from .utils.logger import Logging, logs, init_logging
from .config.app_config import AppConfig
from .ledger.stat_ledger import StatLedger, StatRecord, StatUpdate
from .dedup.window import DeduplicationWindow
from .dedup.scheduler import TimerScheduler, TickScheduler
from .allocation.damage_allocator import DamageAllocator

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging", "init_logging",
    "AppConfig",
    "StatLedger", "StatRecord", "StatUpdate",
    "DeduplicationWindow", "TimerScheduler", "TickScheduler",
    "DamageAllocator",
    "__version__",
]
