"""Tests for output formatters."""

from __future__ import annotations

import json

import pytest

from pomotask_cli.utils.ui.formatters import (
    calculate_unique_suffixes,
    format_error,
    format_info,
    format_output,
    format_success,
    format_tasks_table,
    short_ids,
)


class TestUniqueSuffixes:
    def test_single_id_needs_one_char(self):
        assert calculate_unique_suffixes(["abc123"]) == {"abc123": 1}

    def test_shared_tail_grows_suffix(self):
        result = calculate_unique_suffixes(["aa11", "bb11", "cc22"])
        assert result == {"aa11": 3, "bb11": 3, "cc22": 1}

    def test_id_that_is_suffix_of_another(self):
        result = calculate_unique_suffixes(["11", "a11"])
        assert result["11"] == 2

    def test_short_ids_respect_minimum(self):
        ids = short_ids(["0123456789", "abcdefghij"])
        assert ids == {"0123456789": "6789", "abcdefghij": "ghij"}


class TestFormatOutput:
    def test_json(self, capsys):
        format_output({"mode": "focus", "remaining_seconds": 1500}, "json")
        assert json.loads(capsys.readouterr().out) == {
            "mode": "focus",
            "remaining_seconds": 1500,
        }

    def test_yaml_keeps_key_order(self, capsys):
        format_output({"zeta": 1, "alpha": 2}, "yaml")
        out = capsys.readouterr().out
        assert out.index("zeta") < out.index("alpha")

    def test_table_for_list(self, capsys):
        format_output([{"task_name": "x", "done": True}], "table")
        out = capsys.readouterr().out
        assert "Task Name" in out
        assert "✓" in out

    def test_table_for_empty_list(self, capsys):
        format_output([], "table")
        assert "No items found" in capsys.readouterr().out

    def test_single_item(self, capsys):
        format_output({"state_dir": None}, "table")
        out = capsys.readouterr().out
        assert "State Dir" in out
        assert "-" in out


class TestFormatTasksTable:
    def test_empty(self, capsys):
        format_tasks_table([])
        assert "No tasks yet" in capsys.readouterr().out

    def test_rows_escape_markup(self, capsys):
        format_tasks_table(
            [
                {"id": "aaaa1111", "text": "[red]not markup[/red]", "completed": False},
                {"id": "bbbb2222", "text": "done thing", "completed": True},
            ]
        )
        out = capsys.readouterr().out
        assert "[red]not markup[/red]" in out
        assert "done thing" in out
        assert "1111" in out


@pytest.mark.parametrize(
    "func,prefix",
    [
        (format_error, "Error:"),
        (format_success, "Success:"),
        (format_info, "Info:"),
    ],
)
def test_message_prefixes(capsys, func, prefix):
    func("hello")
    assert f"{prefix} hello" in capsys.readouterr().out
