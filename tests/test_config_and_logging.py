import json

import pytest

from labyrinth.dungeon import ConfigurationError, Dungeon, DungeonConfig
from labyrinth.logging_utils import get_logger, log


def test_defaults_validate():
    cfg = DungeonConfig().validate()
    assert (cfg.width, cfg.height, cfg.floors, cfg.view_radius) == (10, 10, 3, 3)
    assert cfg.secret_door_chance == pytest.approx(0.10)


def test_from_env(monkeypatch):
    monkeypatch.setenv("LABYRINTH_WIDTH", "7")
    monkeypatch.setenv("LABYRINTH_FLOORS", "2")
    monkeypatch.setenv("LABYRINTH_SECRET_CHANCE", "0.25")
    monkeypatch.setenv("LABYRINTH_SEED", "99")
    cfg = DungeonConfig.from_env()
    assert cfg.width == 7 and cfg.floors == 2 and cfg.seed == 99
    assert cfg.secret_door_chance == pytest.approx(0.25)


def test_overrides_beat_env(monkeypatch):
    monkeypatch.setenv("LABYRINTH_WIDTH", "7")
    cfg = DungeonConfig.from_env(width=12, height=None)
    assert cfg.width == 12
    assert cfg.height == 10


def test_bad_env_value(monkeypatch):
    monkeypatch.setenv("LABYRINTH_HEIGHT", "tall")
    with pytest.raises(ConfigurationError) as exc:
        DungeonConfig.from_env()
    assert exc.value.field == "height"
    assert isinstance(exc.value, ValueError)


def test_json_log_line_on_generation(monkeypatch, capsys):
    monkeypatch.setenv("LABYRINTH_LOG_LEVEL", "info")
    monkeypatch.setenv("LABYRINTH_LOG_JSON", "1")
    Dungeon(seed=7, size=(4, 4, 2))
    err = capsys.readouterr().err.strip().splitlines()
    records = [json.loads(ln) for ln in err]
    gen = [r for r in records if r.get("event") == "dungeon_generated"]
    assert gen and gen[0]["seed"] == 7 and gen[0]["floors"] == 2
    assert gen[0]["level"] == "info" and gen[0]["logger"] == "dungeon"


def test_key_value_format_and_threshold(monkeypatch, capsys):
    monkeypatch.setenv("LABYRINTH_LOG_LEVEL", "warn")
    monkeypatch.delenv("LABYRINTH_LOG_JSON", raising=False)
    log.info(event="hidden")
    log.warn(event="shown", note="two words")
    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "level=warn" in err and "event=shown" in err and "note=two_words" in err


def test_get_logger_is_cached():
    assert get_logger("turns") is get_logger("turns")
