#!filepath: stattrak/config/app_config.py
import os

import yaml
from pydantic import BaseModel
from dotenv import load_dotenv

from .log_config import LogConfig
from .ledger_config import LedgerConfig
from .dedup_config import DedupConfig
from stattrak.utils.logger import logs


def project_root() -> str:
    """
    Repository root derived from this file's location:
    stattrak/config/app_config.py → stattrak/config → stattrak → root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig
    ledger: LedgerConfig
    dedup: DedupConfig

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Load YAML config + .env
        - defaults to stattrak/config/base.yml (independent of cwd)
        - STATTRAK_LOG_LEVEL / STATTRAK_LOG_DIR override the log section
        """
        # 1) .env at the project root, if any
        load_dotenv(os.path.join(project_root(), ".env"))

        # 2) resolve config path
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) read YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) env overrides
        if isinstance(raw.get("log"), dict):
            level = os.getenv("STATTRAK_LOG_LEVEL")
            log_dir = os.getenv("STATTRAK_LOG_DIR")
            if level:
                raw["log"]["level"] = level
            if log_dir:
                raw["log"]["dir"] = log_dir

        cfg = cls(**raw)
        logs.debug(f"[AppConfig] loaded {path}")
        return cfg
