#!filepath: stattrak/workflows/stat_trak.py
from __future__ import annotations

from stattrak.config.app_config import AppConfig
from stattrak.dedup.scheduler import Scheduler, TimerScheduler
from stattrak.dedup.window import DeduplicationWindow
from stattrak.events.occurrences import StatChange
from stattrak.events.router import EventRouter, StatNames
from stattrak.ledger.stat_ledger import StatLedger
from stattrak.observability.metrics import MetricRecorder
from stattrak.utils.logger import logs


class StatTrak:
    """
    Process-lifetime owner of the router and its dedup window.

    Usage:
        with build_stat_trak() as st:
            st.handle(EntityDeath(entity_id=uuid, killer=player))
    """

    def __init__(self, router: EventRouter, scheduler: Scheduler):
        self.router = router
        self.scheduler = scheduler
        self._closed = False
        logs.info("StatTrak enabled")

    @property
    def metrics(self) -> MetricRecorder:
        return self.router.metrics

    @logs.catch(msg="occurrence handling failed", log_time=False)
    def handle(self, occurrence) -> list[StatChange]:
        return self.router.handle(occurrence)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.scheduler.shutdown()
        logs.info(f"StatTrak disabled | metrics={self.metrics.snapshot()}")

    def __enter__(self) -> "StatTrak":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def build_stat_trak(
        cfg: AppConfig | None = None,
        scheduler: Scheduler | None = None,
) -> StatTrak:
    """
    Wiring (config → ledger / scheduler / window → router).

    ``scheduler`` defaults to a TimerScheduler ticking at
    ``cfg.dedup.tick_seconds``; pass a TickScheduler for hosts that
    drive their own loop.
    """
    cfg = cfg or AppConfig.load()

    ledger = StatLedger(marker=cfg.ledger.marker)
    scheduler = scheduler or TimerScheduler(tick_seconds=cfg.dedup.tick_seconds)
    window = DeduplicationWindow(scheduler, release_delay_ticks=cfg.dedup.release_delay_ticks)

    router = EventRouter(
        ledger=ledger,
        window=window,
        stats=StatNames.from_config(cfg.ledger),
        metrics=MetricRecorder(),
    )
    return StatTrak(router=router, scheduler=scheduler)
