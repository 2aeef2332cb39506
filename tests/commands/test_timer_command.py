"""Unit tests for the timer commands (status, toggle, mode, reset, run)."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from pomotask_cli.commands.timer import app, session_to_dict
from pomotask_cli.models.focus.state import SnapshotGateway, TimerSession

runner = CliRunner()


@pytest.fixture()
def slot() -> SnapshotGateway:
    """Gateway pointing at the same default slot the commands use."""
    return SnapshotGateway()


# ---------------------------------------------------------------------------
# Help flags
# ---------------------------------------------------------------------------


class TestHelpFlags:
    @pytest.mark.parametrize("cmd", ["status", "toggle", "mode", "reset", "run"])
    def test_subcommand_help(self, cmd):
        result = runner.invoke(app, [cmd, "--help"])
        assert result.exit_code == 0


# ---------------------------------------------------------------------------
# status
# ---------------------------------------------------------------------------


class TestStatus:
    def test_default_panel(self):
        result = runner.invoke(app, ["status"])
        assert result.exit_code == 0
        assert "25:00" in result.output
        assert "Pomodoro" in result.output
        assert "Pomodoros Completed: 0" in result.output

    def test_json_output(self, slot):
        slot.save(TimerSession(remaining_seconds=61, mode="short_break"), [])
        result = runner.invoke(app, ["status", "--output", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["mode"] == "short_break"
        assert data["remaining"] == "01:01"
        assert data["remaining_seconds"] == 61

    def test_yaml_output(self):
        result = runner.invoke(app, ["status", "-o", "yaml"])
        assert result.exit_code == 0
        assert "mode: focus" in result.output


def test_session_to_dict():
    data = session_to_dict(TimerSession(remaining_seconds=5, is_running=True))
    assert data["remaining"] == "00:05"
    assert data["is_running"] is True


# ---------------------------------------------------------------------------
# toggle
# ---------------------------------------------------------------------------


class TestToggle:
    def test_start_then_pause(self, slot):
        result = runner.invoke(app, ["toggle"])
        assert result.exit_code == 0
        assert "Timer started" in result.output
        assert "only advances while 'pomotask run' is open" in result.output
        assert slot.load().session.is_running is True

        result = runner.invoke(app, ["toggle"])
        assert result.exit_code == 0
        assert "Timer paused at 25:00" in result.output
        assert slot.load().session.is_running is False


# ---------------------------------------------------------------------------
# mode
# ---------------------------------------------------------------------------


class TestMode:
    @pytest.mark.parametrize(
        "arg,mode,label",
        [
            ("short_break", "short_break", "Short Break (05:00)"),
            ("long-break", "long_break", "Long Break (15:00)"),
            ("FOCUS", "focus", "Pomodoro (25:00)"),
        ],
    )
    def test_switch(self, slot, arg, mode, label):
        result = runner.invoke(app, ["mode", arg])
        assert result.exit_code == 0
        assert label in result.output
        assert slot.load().session.mode == mode

    def test_switch_keeps_counters(self, slot):
        slot.save(TimerSession(pomodoros_completed=2, is_running=True), [])
        runner.invoke(app, ["mode", "long_break"])
        session = slot.load().session
        assert session.pomodoros_completed == 2
        assert session.is_running is False

    def test_invalid_mode(self, slot):
        result = runner.invoke(app, ["mode", "nap"])
        assert result.exit_code == 2
        assert "Invalid mode" in result.output
        assert slot.load() is None


# ---------------------------------------------------------------------------
# reset
# ---------------------------------------------------------------------------


class TestReset:
    def test_soft_reset_keeps_tasks(self, slot):
        from pomotask_cli.models.task import Task

        slot.save(
            TimerSession(remaining_seconds=10, pomodoros_completed=3),
            [Task(id="t1", text="keep")],
        )
        result = runner.invoke(app, ["reset"])
        assert result.exit_code == 0
        assert "Timer reset" in result.output

        snapshot = slot.load()
        assert snapshot.session == TimerSession()
        assert [t.text for t in snapshot.tasks] == ["keep"]

    def test_hard_reset_deletes_slot(self, slot):
        slot.save(TimerSession(pomodoros_completed=1), [])
        result = runner.invoke(app, ["reset", "--hard", "--yes"])
        assert result.exit_code == 0
        assert "Saved session deleted" in result.output
        assert slot.load() is None

    def test_hard_reset_can_be_cancelled(self, slot):
        slot.save(TimerSession(pomodoros_completed=1), [])
        result = runner.invoke(app, ["reset", "--hard"], input="n\n")
        assert result.exit_code == 0
        assert "Reset cancelled" in result.output
        assert slot.load().session.pomodoros_completed == 1


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------


class TestRun:
    def test_run_prints_summary(self):
        with patch("pomotask_cli.commands.timer.TimerDisplay") as display_cls:
            result = runner.invoke(app, ["run"])
        assert result.exit_code == 0
        display_cls.return_value.run.assert_called_once()
        assert "Pomodoros Completed: 0" in result.output

    def test_run_uses_configured_refresh_rate(self):
        from pomotask_cli.config import get_config_manager

        get_config_manager().set("timer.refresh_per_second", 10)
        with patch("pomotask_cli.commands.timer.TimerDisplay") as display_cls:
            runner.invoke(app, ["run"])
        assert display_cls.call_args.kwargs["refresh_per_second"] == 10
