#!filepath: tests/base_test/test_app_config.py
import yaml
import pytest

from stattrak.config import AppConfig
from stattrak.config.log_config import LogConfig
from stattrak.config.ledger_config import LedgerConfig
from stattrak.config.dedup_config import DedupConfig


@pytest.fixture
def sample_config_file(tmp_path):
    """
    Temporary YAML config, cleaned up by pytest.
    """
    data = {
        "log": {
            "dir": None,
            "rotation": "1 day",
            "retention": "30 days",
            "level": "DEBUG",
        },
        "ledger": {
            "marker": "§7",
            "kills": "Kills",
            "blocks_mined": "Blocks Mined",
            "damage_taken": "Damage Taken",
        },
        "dedup": {
            "release_delay_ticks": 2,
            "tick_seconds": 0.1,
        },
    }

    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")
    return config_file


def test_app_config_load(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))

    assert isinstance(cfg, AppConfig)
    assert isinstance(cfg.log, LogConfig)
    assert isinstance(cfg.ledger, LedgerConfig)
    assert isinstance(cfg.dedup, DedupConfig)


def test_values(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.log.level == "DEBUG"
    assert cfg.ledger.marker == "§7"
    assert cfg.ledger.kills == "Kills"
    assert cfg.dedup.release_delay_ticks == 2
    assert cfg.dedup.tick_seconds == 0.1


def test_default_config_file():
    """The packaged base.yml matches the in-game defaults"""
    cfg = AppConfig.load()

    assert cfg.ledger.marker == "§d"
    assert cfg.ledger.kills == "StatTrak™ Kills"
    assert cfg.ledger.blocks_mined == "StatTrak™ Blocks Mined"
    assert cfg.ledger.damage_taken == "StatTrak™ Damage Taken"
    assert cfg.dedup.release_delay_ticks == 1
    assert cfg.log.dir is None


def test_env_overrides_log_level(sample_config_file, monkeypatch, tmp_path):
    monkeypatch.setenv("STATTRAK_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("STATTRAK_LOG_DIR", str(tmp_path / "logs"))

    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.log.level == "WARNING"
    assert cfg.log.dir == str(tmp_path / "logs")


def test_section_defaults(tmp_path):
    bad_file = tmp_path / "partial.yaml"
    bad_file.write_text(yaml.safe_dump({"log": {}, "ledger": {}, "dedup": {}}))

    cfg = AppConfig.load(path=str(bad_file))

    assert cfg.ledger.marker == "§d"
    assert cfg.dedup.tick_seconds == 0.05


def test_missing_section_should_fail(tmp_path):
    """A missing section is a ValidationError"""
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text(yaml.safe_dump({"log": {"level": "INFO"}}))

    with pytest.raises(Exception):
        AppConfig.load(path=str(bad_file))


def test_negative_delay_rejected(tmp_path):
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text(yaml.safe_dump({"log": {}, "ledger": {}, "dedup": {"release_delay_ticks": -1}}))

    with pytest.raises(Exception):
        AppConfig.load(path=str(bad_file))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        AppConfig.load(path=str(tmp_path / "nope.yml"))
