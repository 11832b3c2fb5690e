"""Tests for the show, length, at, and slice commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from strctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestShowCommand:
    def test_show(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["show", "hello"])
        assert result.exit_code == 0
        assert "OK: show" in result.output
        assert "value: hello" in result.output

    def test_show_keeps_first_token(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "show", "hello world"])
        assert result.exit_code == 0
        assert result.output == "hello\n"

    def test_show_from_stdin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "show", "-"], input="  piped text\n")
        assert result.exit_code == 0
        assert result.output == "piped\n"

    def test_show_empty_warns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["show", ""])
        assert result.exit_code == 0
        assert "WARNING: No token available" in result.output

    def test_show_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "show", "abc"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "show"
        assert data["data"] == {"value": "abc"}


@pytest.mark.usefixtures("_isolated_cwd")
class TestLengthCommand:
    def test_length(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "length", "abcd"])
        assert result.exit_code == 0
        assert result.output == "4\n"


@pytest.mark.usefixtures("_isolated_cwd")
class TestAtCommand:
    def test_at(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "at", "abc", "2"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"] == {"index": 2, "char": "c"}

    def test_at_out_of_range(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["at", "abc", "5"])
        assert result.exit_code == 1
        assert "ERROR: char_at - String error: Index out of range: 5" in result.output

    def test_at_negative_index(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "at", "abc", "--", "-1"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error"]["code"] == "OUT_OF_RANGE"

    def test_at_rejects_non_integer(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["at", "abc", "x"])
        assert result.exit_code == 2


@pytest.mark.usefixtures("_isolated_cwd")
class TestSliceCommand:
    @pytest.mark.parametrize(
        ("start", "count", "expected"),
        [("1", "2", "bc"), ("1", "100", "bc"), ("3", "2", ""), ("0", "0", "")],
    )
    def test_slice(self, cli_runner: CliRunner, start: str, count: str, expected: str) -> None:
        result = cli_runner.invoke(cli, ["-q", "slice", "abc", start, count])
        assert result.exit_code == 0
        assert result.output == f"{expected}\n"

    def test_slice_start_past_end(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "slice", "abc", "4", "1"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["op"] == "substring"
        assert data["error"]["code"] == "OUT_OF_RANGE"
        assert data["error"]["detail"] == {"index": 4}
