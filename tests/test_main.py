"""Unit tests for main.py, the CLI entry point."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from pomotask_cli import __version__
from pomotask_cli.main import app, main
from pomotask_cli.models.focus.state import SnapshotGateway

runner = CliRunner()


def _invoke(*args):
    return runner.invoke(app, list(args))


class TestTopLevelHelp:
    def test_help_flag_exits_zero(self):
        result = _invoke("--help")
        assert result.exit_code == 0

    @pytest.mark.parametrize("name", ["timer", "tasks", "config", "version", "run", "add"])
    def test_commands_are_listed(self, name):
        assert name in _invoke("--help").output

    @pytest.mark.parametrize("group", ["timer", "tasks", "config"])
    def test_group_help(self, group):
        assert _invoke(group, "--help").exit_code == 0


class TestTopLevelCommands:
    def test_version(self):
        result = _invoke("version")
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_quick_add(self):
        result = _invoke("add", "read a chapter")
        assert result.exit_code == 0
        assert [t.text for t in SnapshotGateway().load().tasks] == ["read a chapter"]

    def test_quick_add_blank(self):
        assert _invoke("add", " ").exit_code == 2

    def test_run_opens_live_timer(self):
        with patch("pomotask_cli.commands.timer.TimerDisplay") as display_cls:
            result = _invoke("run")
        assert result.exit_code == 0
        display_cls.return_value.run.assert_called_once()

    def test_typo_suggests_command(self):
        result = _invoke("tasks", "lst")
        assert result.exit_code == 1
        assert "Did you mean" in result.output
        assert "list" in result.output

    def test_timer_and_tasks_share_state(self):
        _invoke("timer", "toggle")
        _invoke("tasks", "add", "shared")
        snapshot = SnapshotGateway().load()
        assert snapshot.session.is_running is True
        assert [t.text for t in snapshot.tasks] == ["shared"]


def test_main_invokes_app():
    with patch("pomotask_cli.main.app") as mock_app:
        main()
    mock_app.assert_called_once()
