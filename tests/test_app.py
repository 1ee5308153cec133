"""Test the command line and the screen contents."""

import io
import json

import pytest
from prompt_toolkit.input import DummyInput, create_pipe_input
from prompt_toolkit.output import DummyOutput
from rich.console import Console

from treepick.app import PickerApp, build_parser, load_settings, main
from treepick.config.defaults import default_config
from treepick.config.manager import ConfigManager


def _quiet_console():
    return Console(file=io.StringIO())


def test_parser_defaults():
    """Test command line defaults."""
    args = build_parser().parse_args(["commands.json"])
    assert args.input_file == "commands.json"
    assert args.format == "auto"
    assert args.case is None
    assert args.config is None


def test_parser_rejects_unknown_case():
    """Test that argparse validates choices."""
    with pytest.raises(SystemExit):
        build_parser().parse_args(["commands.json", "--case", "sometimes"])


def test_flags_override_configuration(tmp_path):
    """Test that --case wins over the configuration file."""
    manager = ConfigManager(_quiet_console(), config_dir=str(tmp_path))
    saved = default_config()
    saved["matching"]["caseSensitivity"] = "ignore"
    manager.save_configuration(saved, "default")

    args = build_parser().parse_args(["x.json"])
    assert load_settings(args, manager)["matching"]["caseSensitivity"] == "ignore"

    args = build_parser().parse_args(["x.json", "--case", "respect"])
    assert load_settings(args, manager)["matching"]["caseSensitivity"] == "respect"


def test_screen_contents(commands):
    """Test the filter line and candidate list rendering."""
    app = PickerApp(commands, console=_quiet_console())
    app.controller.confirm()
    app.controller.insert_text("s")
    app.controller.select_next()
    assert app.filter_line() == "systemctl s"

    fragments = app.candidate_fragments()
    assert ("class:candidate", "--system\n") in fragments
    assert ("class:candidate.selected", "--user\n") in fragments
    assert fragments.index(("[SetCursorPosition]", "")) == 1

    app.controller.insert_text("zz")
    assert app.candidate_fragments() == []


def test_application_builds(commands):
    """Test that the prompt_toolkit application can be assembled."""
    config = default_config()
    config["style"]["candidate.selected"] = "not-a-colour"
    console = _quiet_console()
    app = PickerApp(commands, config, console)
    assert app.build_application(DummyInput(), DummyOutput()) is not None
    assert "Invalid style" in console.file.getvalue()


def test_main_reports_load_errors(tmp_path, capsys):
    """Test that an unreadable document ends with status 1 and nothing on stdout."""
    broken = tmp_path / "broken.json"
    broken.write_text("{")
    assert main([str(broken)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Could not load" in captured.err


def test_main_prints_answer(tmp_path, capsys, monkeypatch, commands):
    """Test that the chosen path is the only thing written to stdout."""
    path = tmp_path / "commands.json"
    path.write_text(json.dumps(commands))
    monkeypatch.setattr(PickerApp, "run", lambda self: "systemctl --user restart gmail")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "systemctl --user restart gmail\n"

    # Emoji codes and tabs are part of the path, not markup
    monkeypatch.setattr(PickerApp, "run", lambda self: "deploy :rocket: build\tfast")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "deploy :rocket: build\tfast\n"

    monkeypatch.setattr(PickerApp, "run", lambda self: None)
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == ""


def _type_keys(document, keys):
    """Run the picker against keystrokes sent through a pipe."""
    app = PickerApp(document, console=_quiet_console())
    with create_pipe_input() as pipe:
        pipe.send_text(keys)
        return app.run(input=pipe, output=DummyOutput())


def test_keys_choose_a_value(commands):
    """Test typing and Enter down to a leaf."""
    assert _type_keys(commands, "sys\rsys\rres\rgm\r") == "systemctl --system restart gmail"


def test_keys_edit_and_ascend(commands):
    """Test Backspace stepping back up, then Ctrl-U clearing the filter."""
    keys = "sys\r\x7f\x7f\x7f\x15\rus\r\rgm\r"
    assert _type_keys(commands, keys) == "systemctl --user restart gmail"


def test_keys_ignore_control_characters(commands):
    """Test that unbound control keys do not reach the filter."""
    assert _type_keys(commands, "s\x02ys\r\x02\rres\r\x0ef\r") == "systemctl --system restart firefox"


def test_keys_move_and_cancel(commands):
    """Test Ctrl-J/Ctrl-K movement and Ctrl-C exiting without an answer."""
    assert _type_keys(commands, "\r\n\r\r\n\n\x0b\r") == "systemctl --user restart firefox"
    assert _type_keys(commands, "sys\r\x03") is None


def test_save_and_reset_flags(tmp_path):
    """Test that --save-config stores the effective settings and --reset-config ignores them."""
    manager = ConfigManager(_quiet_console(), config_dir=str(tmp_path))

    args = build_parser().parse_args(["x.json", "--case", "ignore", "--save-config", "work"])
    load_settings(args, manager)
    assert manager.load_configuration("work")["matching"]["caseSensitivity"] == "ignore"

    args = build_parser().parse_args(["x.json", "--case", "respect", "--save-config"])
    load_settings(args, manager)
    assert json.loads((tmp_path / "config.json").read_text())["matching"]["caseSensitivity"] == "respect"

    args = build_parser().parse_args(["x.json", "--reset-config"])
    assert load_settings(args, manager) == default_config()
