#!filepath: tests/dedup/test_scheduler.py
import threading
import time

from stattrak.dedup.scheduler import TickScheduler, TimerScheduler


def test_tick_scheduler_runs_due_tasks_in_order():
    s = TickScheduler()
    ran = []

    s.call_later(2, lambda: ran.append("b"))
    s.call_later(1, lambda: ran.append("a"))
    s.call_later(2, lambda: ran.append("c"))

    assert s.tick() == 1
    assert ran == ["a"]
    assert s.tick() == 2
    assert ran == ["a", "b", "c"]
    assert s.now == 2


def test_tick_scheduler_zero_delay_runs_next_tick():
    s = TickScheduler()
    ran = []
    s.call_later(0, lambda: ran.append(1))

    assert ran == []
    s.tick()
    assert ran == [1]


def test_tick_scheduler_task_failure_is_logged(log_messages):
    s = TickScheduler()
    ran = []

    def _boom():
        raise ValueError("boom")

    s.call_later(1, _boom)
    s.call_later(1, lambda: ran.append("after"))
    s.tick()

    assert ran == ["after"]
    assert any(lvl == "ERROR" for lvl, _ in log_messages)


def test_timer_scheduler_runs_task():
    s = TimerScheduler(tick_seconds=0.01)
    done = threading.Event()
    try:
        s.call_later(1, done.set)
        assert done.wait(timeout=2.0)
    finally:
        s.shutdown()


def test_timer_scheduler_respects_delay():
    s = TimerScheduler(tick_seconds=0.05)
    stamps = []
    start = time.monotonic()
    try:
        s.call_later(2, lambda: stamps.append(time.monotonic() - start))
    finally:
        s.shutdown(wait=True)

    assert len(stamps) == 1
    assert stamps[0] >= 0.09


def test_timer_scheduler_survives_failing_task(log_messages):
    s = TimerScheduler(tick_seconds=0.001)
    done = threading.Event()

    def _boom():
        raise RuntimeError("boom")

    try:
        s.call_later(0, _boom)
        s.call_later(1, done.set)
        assert done.wait(timeout=2.0)
    finally:
        s.shutdown()

    assert any(lvl == "ERROR" for lvl, _ in log_messages)


def test_timer_scheduler_shutdown_without_wait_drops_tasks():
    s = TimerScheduler(tick_seconds=10)
    ran = []
    s.call_later(1, lambda: ran.append(1))

    s.shutdown(wait=False)

    assert ran == []
    assert s.pending() == 0


def test_timer_scheduler_rejects_after_shutdown(log_messages):
    s = TimerScheduler(tick_seconds=0.001)
    s.shutdown()
    s.call_later(0, lambda: None)

    assert s.pending() == 0
    assert any(lvl == "WARNING" and "after shutdown" in m for lvl, m in log_messages)
