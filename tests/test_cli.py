import logging

import pytest

from artillery_game import cli
from artillery_game.core.game import Command
from artillery_game.ui import FrontendError


def test_parser_defaults():
    args = cli.build_parser().parse_args([])

    assert args.frontend == "terminal"
    assert args.gravity == pytest.approx(9.81)
    assert args.octaves == 6
    assert args.keep_aim is False
    assert args.seed is None


def test_main_runs_selected_frontend(monkeypatch):
    sessions = []

    def fake_frontend(session):
        sessions.append(session)
        session.handle(Command.QUIT)

    monkeypatch.setattr(cli, "load_frontend", lambda name: fake_frontend)

    status = cli.main(["--seed", "5", "--keep-aim", "--gravity", "5.0"])

    assert status == 0
    (session,) = sessions
    assert session.running is False
    assert session.config.seed == 5
    assert session.config.preserve_aim is True
    assert session.config.gravity == 5.0


def test_frontend_failure_exits_non_zero(monkeypatch, capsys):
    def broken_frontend(session):
        raise FrontendError("terminal unavailable: no tty")

    monkeypatch.setattr(cli, "load_frontend", lambda name: broken_frontend)

    status = cli.main([])

    assert status == 1
    assert "Error starting game: terminal unavailable: no tty" in capsys.readouterr().err


def test_invalid_settings_rejected(capsys):
    status = cli.main(["--octaves", "0"])

    assert status == 2
    assert "Invalid settings" in capsys.readouterr().err


def test_keyboard_interrupt_exits_cleanly(monkeypatch):
    def interrupted(session):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "load_frontend", lambda name: interrupted)

    assert cli.main([]) == 0


def test_load_frontend_returns_terminal_runner():
    from artillery_game.terminal import run_terminal

    assert cli.load_frontend("terminal") is run_terminal


def test_terminal_logs_to_a_file_by_default(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    handler = cli.log_handler(None, "terminal")

    try:
        assert isinstance(handler, logging.FileHandler)
        assert handler.baseFilename == str(tmp_path / cli.TERMINAL_LOG_FILE)
        assert not (tmp_path / cli.TERMINAL_LOG_FILE).exists()
    finally:
        handler.close()


def test_explicit_log_file_wins(tmp_path):
    path = tmp_path / "debug.log"

    handler = cli.log_handler(str(path), "pygame")

    try:
        assert isinstance(handler, logging.FileHandler)
        assert handler.baseFilename == str(path)
    finally:
        handler.close()


def test_pygame_logs_to_stderr_without_log_file():
    handler = cli.log_handler(None, "pygame")

    assert type(handler) is logging.StreamHandler


def test_root_script_delegates_to_package_cli():
    import main

    assert main.main is cli.main
