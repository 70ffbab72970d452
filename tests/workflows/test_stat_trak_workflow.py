#!filepath: tests/workflows/test_stat_trak_workflow.py
from stattrak.config import AppConfig
from stattrak.dedup.scheduler import TickScheduler
from stattrak.events.occurrences import EntityDeath
from stattrak.items.item import ItemStack, Player
from stattrak.workflows.stat_trak import build_stat_trak


def test_build_from_default_config():
    scheduler = TickScheduler()
    sword = ItemStack("NETHERITE_SWORD")
    player = Player(player_id="p1", main_hand=sword)

    with build_stat_trak(AppConfig.load(), scheduler=scheduler) as st:
        st.handle(EntityDeath(entity_id="e1", killer=player))
        st.handle(EntityDeath(entity_id="e1", killer=player))

        assert sword.lore == ["§d StatTrak™ Kills: 1"]
        assert st.metrics.get("occurrence.duplicate") == 1


def test_timer_scheduler_released_on_close():
    st = build_stat_trak(AppConfig.load())
    st.close()
    st.close()

    assert not st.scheduler._worker.is_alive()


def test_lifecycle_logged(log_messages):
    with build_stat_trak(AppConfig.load(), scheduler=TickScheduler()):
        pass

    messages = [m for _, m in log_messages]
    assert "StatTrak enabled" in messages
    assert any(m.startswith("StatTrak disabled") for m in messages)
