"""Unit tests for command decorators."""

from unittest.mock import patch

import pytest
import typer

from pomotask_cli.commands.decorators import AppError, command_wrapper
from pomotask_cli.utils.exit_codes import ERROR_GENERAL, ERROR_NOT_FOUND


class TestAppError:
    def test_default_exit_code(self):
        err = AppError("boom")
        assert str(err) == "boom"
        assert err.exit_code == ERROR_GENERAL

    def test_custom_exit_code(self):
        assert AppError("missing", exit_code=ERROR_NOT_FOUND).exit_code == ERROR_NOT_FOUND


class TestCommandWrapper:
    def test_returns_result(self):
        @command_wrapper
        def ok(x):
            return x * 2

        assert ok(21) == 42

    def test_preserves_name(self):
        @command_wrapper
        def named():
            pass

        assert named.__name__ == "named"

    def test_app_error_maps_to_exit_code(self):
        @command_wrapper
        def fails():
            raise AppError("not here", exit_code=ERROR_NOT_FOUND)

        with patch("pomotask_cli.commands.decorators.format_error") as fmt:
            with pytest.raises(typer.Exit) as exc_info:
                fails()
        assert exc_info.value.exit_code == ERROR_NOT_FOUND
        fmt.assert_called_once_with("not here")

    def test_typer_exit_passes_through(self):
        @command_wrapper
        def exits():
            raise typer.Exit(code=0)

        with patch("pomotask_cli.commands.decorators.format_error") as fmt:
            with pytest.raises(typer.Exit) as exc_info:
                exits()
        assert exc_info.value.exit_code == 0
        fmt.assert_not_called()

    def test_unexpected_error_exits_one(self):
        @command_wrapper
        def crashes():
            raise RuntimeError("disk on fire")

        with patch("pomotask_cli.commands.decorators.format_error") as fmt:
            with pytest.raises(typer.Exit) as exc_info:
                crashes()
        assert exc_info.value.exit_code == ERROR_GENERAL
        assert "disk on fire" in fmt.call_args.args[0]

    def test_failures_are_logged(self, isolated_dirs):
        @command_wrapper
        def crashes():
            raise RuntimeError("logged failure")

        with patch("pomotask_cli.commands.decorators.format_error"):
            with pytest.raises(typer.Exit):
                crashes()

        from pomotask_cli.utils.logger import get_logger

        for handler in get_logger().handlers:
            handler.flush()
        log_text = (isolated_dirs / "logs" / "pomotask.log").read_text(encoding="utf-8")
        assert "command failed: crashes" in log_text
        assert "logged failure" in log_text

    def test_app_error_log_names_exit_code(self, isolated_dirs):
        @command_wrapper
        def missing():
            raise AppError("no such task", exit_code=ERROR_NOT_FOUND)

        with patch("pomotask_cli.commands.decorators.format_error"):
            with pytest.raises(typer.Exit):
                missing()

        from pomotask_cli.utils.logger import get_logger

        for handler in get_logger().handlers:
            handler.flush()
        log_text = (isolated_dirs / "logs" / "pomotask.log").read_text(encoding="utf-8")
        assert "command failed: missing" in log_text
        assert "[ERROR_NOT_FOUND] - no such task" in log_text
