"""Tests for the command-line interface and settings."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner
from pydantic import ValidationError

from dictarith.cli import main
from dictarith.config import Settings


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


# ---------------------------------------------------------------------------
# subtract
# ---------------------------------------------------------------------------

class TestSubtract:
    def test_text_and_pattern(self, runner: CliRunner, json_file) -> None:
        path = json_file({"a": 1, "abc": 4, "b": 2, "c": 3})
        result = runner.invoke(main, ["subtract", str(path), "c", "/^a/"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {"b": 2}

    def test_symbol_notation(self, runner: CliRunner, json_file) -> None:
        path = json_file({"a": 1, "b": 2})
        result = runner.invoke(main, ["subtract", str(path), ":a"])
        assert json.loads(result.output) == {"b": 2}

    def test_no_specs_unchanged(self, runner: CliRunner, json_file) -> None:
        path = json_file({"a": 1})
        result = runner.invoke(main, ["subtract", str(path)])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"a": 1}

    def test_ignore_case(self, runner: CliRunner, json_file) -> None:
        path = json_file({"Secret": 1, "b": 2})
        sensitive = runner.invoke(main, ["subtract", str(path), "/secret/"])
        insensitive = runner.invoke(main, ["subtract", str(path), "/secret/", "-i"])
        assert json.loads(sensitive.output) == {"Secret": 1, "b": 2}
        assert json.loads(insensitive.output) == {"b": 2}

    def test_stdin(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["subtract", "-", "x"], input='{"x": 1, "y": 2}')
        assert json.loads(result.output) == {"y": 2}

    def test_invalid_pattern(self, runner: CliRunner, json_file) -> None:
        path = json_file({"a": 1})
        result = runner.invoke(main, ["subtract", str(path), "/(/"])
        assert result.exit_code == 2
        assert "Invalid pattern" in result.output

    def test_non_object_rejected(self, runner: CliRunner, json_file) -> None:
        path = json_file([1, 2, 3])
        result = runner.invoke(main, ["subtract", str(path), "a"])
        assert result.exit_code == 2
        assert "expected a JSON object" in result.output

    def test_invalid_json(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{nope", encoding="utf-8")
        result = runner.invoke(main, ["subtract", str(path), "a"])
        assert result.exit_code == 2
        assert "invalid JSON" in result.output

    def test_table_output(self, runner: CliRunner, json_file) -> None:
        path = json_file({"keep_me": 1, "drop": 2})
        result = runner.invoke(main, ["subtract", str(path), "drop", "--output", "table"])
        assert result.exit_code == 0
        assert "keep_me" in result.output
        assert "1 keys" in result.output


# ---------------------------------------------------------------------------
# add
# ---------------------------------------------------------------------------

class TestAdd:
    def test_merge_left_to_right(self, runner: CliRunner, json_file) -> None:
        base = json_file({"a": 1, "b": 2}, name="base.json")
        over = json_file({"b": 3}, name="over.json")
        extra = json_file({"c": 4}, name="extra.json")
        result = runner.invoke(main, ["add", str(base), str(over), str(extra)])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {"a": 1, "b": 3, "c": 4}

    def test_single_file(self, runner: CliRunner, json_file) -> None:
        path = json_file({"a": 1})
        result = runner.invoke(main, ["add", str(path)])
        assert json.loads(result.output) == {"a": 1}

    def test_empty_table(self, runner: CliRunner, json_file) -> None:
        path = json_file({})
        result = runner.invoke(main, ["add", str(path), "-o", "table"])
        assert "Empty mapping" in result.output


class TestVersion:
    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--version"])
        assert "1.0.0" in result.output


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ("DICTARITH_IGNORE_CASE", "DICTARITH_OUTPUT", "DICTARITH_LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)
        s = Settings(_env_file=None)
        assert s.ignore_case is False
        assert s.output == "json"
        assert s.log_level == "WARNING"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DICTARITH_IGNORE_CASE", "true")
        monkeypatch.setenv("DICTARITH_OUTPUT", "table")
        s = Settings(_env_file=None)
        assert s.ignore_case is True
        assert s.output == "table"

    def test_log_level_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DICTARITH_LOG_LEVEL", "debug")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_invalid_log_level_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DICTARITH_LOG_LEVEL", "FOO")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_invalid_output_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DICTARITH_OUTPUT", "xml")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
