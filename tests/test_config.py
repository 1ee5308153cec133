"""Test configuration loading, saving and validation."""

import io
import json

import pytest
from rich.console import Console

from treepick.config.defaults import default_config, get_config_path, sanitize_config_name
from treepick.config.manager import ConfigManager


@pytest.fixture
def manager(tmp_path):
    return ConfigManager(Console(file=io.StringIO()), config_dir=str(tmp_path))


def test_config_paths(tmp_path):
    """Test that names are sanitized into file paths."""
    assert sanitize_config_name("My Config!") == "myconfig"
    assert sanitize_config_name("???") == "default"
    assert get_config_path("default", str(tmp_path)) == str(tmp_path / "config.json")
    assert get_config_path("Work", str(tmp_path)) == str(tmp_path / "work.json")


def test_missing_config_gives_defaults(manager):
    """Test the fallback when no file exists."""
    assert not manager.config_exists()
    assert manager.load_configuration("absent") == default_config()


def test_save_and_load(manager, tmp_path):
    """Test that saved settings are loaded back."""
    config = default_config()
    config["matching"]["caseSensitivity"] = "respect"
    config["displaySettings"]["showHelp"] = False
    assert manager.save_configuration(config, "work")
    assert (tmp_path / "work.json").exists()
    assert manager.config_exists("work")
    assert manager.load_configuration("work") == config


def test_validation_replaces_invalid_values(manager, tmp_path):
    """Test that bad values fall back to defaults and unknown keys are dropped."""
    (tmp_path / "config.json").write_text(json.dumps({
        "matching": {"caseSensitivity": "sometimes"},
        "displaySettings": {"showHelp": 0},
        "style": {"candidate.selected": "bg:ansired", "broken": 3},
        "unknown": True,
    }))
    config = manager.load_configuration()
    assert config["matching"]["caseSensitivity"] == "smart"
    assert config["displaySettings"]["showHelp"] is False
    assert config["style"]["candidate.selected"] == "bg:ansired"
    assert "broken" not in config["style"]
    assert "unknown" not in config


def test_unreadable_config_gives_defaults(manager, tmp_path):
    """Test that invalid JSON or a non-object falls back to defaults."""
    (tmp_path / "config.json").write_text("{oops")
    assert manager.load_configuration() == default_config()

    (tmp_path / "config.json").write_text("[1, 2]")
    assert manager.load_configuration() == default_config()


def test_reset_configuration(manager):
    assert manager.reset_configuration() == default_config()
