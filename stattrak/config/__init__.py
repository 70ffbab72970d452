#!filepath: stattrak/config/__init__.py
from .app_config import AppConfig, project_root
from .log_config import LogConfig
from .ledger_config import LedgerConfig
from .dedup_config import DedupConfig

__all__ = ["AppConfig", "LogConfig", "LedgerConfig", "DedupConfig", "project_root"]
