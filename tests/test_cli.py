import importlib
import json
import sys

import pytest

# run.py is imported as a module; the Textual launcher is patched so no UI starts.


@pytest.fixture()
def run_module():
    if "run" in sys.modules:
        del sys.modules["run"]
    return importlib.import_module("run")


@pytest.fixture()
def fake_tui(monkeypatch):
    calls = {}

    def fake_run_tui(config=None):
        calls["config"] = config

    import labyrinth.tui as tui_mod

    monkeypatch.setattr(tui_mod, "run_tui", fake_run_tui)
    return calls


def test_version_flag_outputs_version(run_module, capsys):
    with pytest.raises(SystemExit) as exc:
        run_module.parse_args(["--version"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert run_module.__version__ in out
    assert "Labyrinth Adventures" in out


def test_default_command_is_play(run_module):
    assert run_module.parse_args([]).command == "play"


def test_play_passes_flags_to_tui(run_module, fake_tui, capsys):
    assert run_module.main(["play", "--width", "6", "--floors", "1", "--seed", "3", "--radius", "2"]) == 0
    cfg = fake_tui["config"]
    assert (cfg.width, cfg.floors, cfg.seed, cfg.view_radius) == (6, 1, 3, 2)
    assert "Labyrinth Adventures" in capsys.readouterr().out


def test_env_file_argument(run_module, fake_tui, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("LABYRINTH_HEIGHT=4\nLABYRINTH_FLOORS=2\n")
    run_module.main(["--env-file", str(env_file), "play", "--floors", "5"])
    cfg = fake_tui["config"]
    assert cfg.height == 4
    assert cfg.floors == 5


def test_render_prints_every_floor(run_module, capsys):
    assert run_module.main(["render", "--seed", "5", "--width", "4", "--height", "3", "--floors", "2"]) == 0
    out = capsys.readouterr().out
    assert "Floor 1/2" in out and "Floor 2/2" in out
    assert "╔" in out


def test_render_json(run_module, capsys):
    run_module.main(["render", "--json", "--seed", "8", "--width", "3", "--height", "3", "--floors", "1"])
    data = json.loads(capsys.readouterr().out)
    assert data["seed"] == 8
    assert data["metrics"]["per_floor"][0]["open_passages"] == 8


def test_render_ascii(run_module, capsys):
    run_module.main(["render", "--ascii", "--seed", "8", "--width", "3", "--height", "2", "--floors", "1"])
    out = capsys.readouterr().out.strip().splitlines()
    assert out[0] == "Floor 1/1"
    assert out[1] == "+---+---+---+"
    assert out[-1] == "+---+---+---+"


def test_configuration_error_exit_code(run_module, capsys):
    assert run_module.main(["render", "--width", "0"]) == 2
    assert "[ERROR] width" in capsys.readouterr().err
