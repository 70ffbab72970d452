# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger

from stattrak.dedup.scheduler import TickScheduler
from stattrak.dedup.window import DeduplicationWindow
from stattrak.events.router import EventRouter, StatNames
from stattrak.ledger.stat_ledger import StatLedger


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture
def log_messages():
    """
    Collect loguru records as (level, message) pairs.
    """
    records: list[tuple[str, str]] = []
    sink_id = logger.add(
        lambda msg: records.append((msg.record["level"].name, msg.record["message"])),
        level="DEBUG",
    )
    yield records
    logger.remove(sink_id)


@pytest.fixture
def ledger() -> StatLedger:
    return StatLedger(marker="§d")


@pytest.fixture
def tick_scheduler() -> TickScheduler:
    return TickScheduler()


@pytest.fixture
def window(tick_scheduler) -> DeduplicationWindow:
    return DeduplicationWindow(tick_scheduler, release_delay_ticks=1)


@pytest.fixture
def stat_names() -> StatNames:
    return StatNames(kills="Kills", blocks_mined="Blocks Mined", damage_taken="Damage Taken")


@pytest.fixture
def router(ledger, window, stat_names) -> EventRouter:
    return EventRouter(ledger=ledger, window=window, stats=stat_names)
