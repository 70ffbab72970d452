#!filepath: stattrak/utils/logger.py
import os
import sys
from functools import wraps
from time import perf_counter
from typing import Callable, Optional

from loguru import logger


class Logging:
    """
    Project logger (loguru)
    ---------------------------------------
    - stderr sink always on
    - optional daily-rotated file sink
    - retention period for file logs
    - function-level catch/timing decorator
    ---------------------------------------
    """

    FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "INFO",
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)
        self._configure()

    def _configure(self) -> None:
        """
        Reset the global loguru logger to this instance's sinks.
        """

        logger.remove()

        logger.add(sys.stderr, level=self.level, format=self.FORMAT)

        if self.log_dir:
            logger.add(
                sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
                rotation=self.rotation,
                retention=self.retention,
                level=self.level,
                format=self.FORMAT,
                enqueue=True,  # events arrive from several threads
                backtrace=True,
                diagnose=True,
            )
            logger.info(f"[Logging] file sink at {self.log_dir} level={self.level}")

    # ----------- log methods -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.opt(depth=1).debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.opt(depth=1).info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.opt(depth=1).warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.opt(depth=1).error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.opt(depth=1).exception(msg, *args, **kwargs)

    # ---------- decorator ----------
    def catch(self, msg: str = "Exception occurred", log_time: bool = True) -> Callable:
        """
        Log any exception raised by ``func`` with traceback, then re-raise.
        ``log_time`` adds a DEBUG record with the call duration.
        """

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):
                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except Exception:
                    logger.exception(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_time:
                    cost = perf_counter() - start
                    logger.debug(f"[TIME] {func.__name__} took {cost:.4f}s")

                return result

            return wrapper

        return decorator


# global logs, replaced by init_logging()
logs = Logging()


def init_logging(cfg) -> Logging:
    """
    Reconfigure the global ``logs`` in place from a LogConfig,
    so modules holding a reference keep logging to the new sinks.
    """
    logs.log_dir = cfg.dir
    logs.rotation = cfg.rotation
    logs.retention = cfg.retention
    logs.level = cfg.level
    if logs.log_dir:
        os.makedirs(logs.log_dir, exist_ok=True)
    logs._configure()
    return logs
