"""
Tests for services.config_manager - settings persistence
"""

from __future__ import annotations

import json

import pytest

from models.highlight import HighlightPalette
from services.config_manager import ConfigManager


def test_uses_env_directory(config_dir):
    manager = ConfigManager()
    assert manager.config_file == config_dir / "config.json"


def test_defaults_when_no_file():
    config = ConfigManager().get_config()
    assert config["diff"] == {"ignoreWhitespace": False, "ignoreCase": False, "contextLines": None}
    assert config["theme"]["insertBackground"] == "#4060D820"
    assert "Consolas" in config["theme"]["fontFamily"]


def test_save_and_reload(config_dir):
    manager = ConfigManager()
    manager.set("diff", {"contextLines": 3})

    stored = json.loads((config_dir / "config.json").read_text())
    assert stored["diff"]["contextLines"] == 3

    # partial sections are merged over the defaults
    reloaded = ConfigManager().get_config()
    assert reloaded["diff"]["contextLines"] == 3
    assert reloaded["diff"]["ignoreCase"] is False


def test_corrupt_file_falls_back_to_defaults(config_dir, capsys):
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "config.json").write_text("{not json")
    config = ConfigManager().get_config()
    assert config["server"]["port"] == 8000
    assert "[ConfigManager]" in capsys.readouterr().out


def test_get_instance_is_singleton():
    assert ConfigManager.get_instance() is ConfigManager.get_instance()


def test_get_palette_from_theme():
    manager = ConfigManager()
    assert manager.get_palette() == HighlightPalette()

    manager.set("theme", {**manager.get("theme"), "deleteBackground": "#80FF0000"})
    palette = manager.get_palette()
    assert palette.delete_background == "#80FF0000"
    assert palette.insert_background == "#4060D820"


def test_save_failure_raises_runtime_error(config_dir, monkeypatch):
    manager = ConfigManager()

    def fail(*args, **kwargs):
        raise OSError("read-only")

    monkeypatch.setattr("services.config_manager.open", fail, raising=False)
    with pytest.raises(RuntimeError, match="Failed to save config"):
        manager.save_config({"diff": {}})
