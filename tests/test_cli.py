"""Tests for the pluglog CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from pluglog.cli import app
from pluglog.cli.log import coerce_arg, coerce_args

runner = CliRunner()


@pytest.fixture
def descriptor(tmp_path: Path) -> Path:
    path = tmp_path / "plugin.json"
    path.write_text(
        json.dumps({"name": "Test", "version": "1.0", "data_dir": "data"}),
        encoding="utf-8",
    )
    return path


class TestLogCommand:
    """Tests for `pluglog log`."""

    def test_logs_prefixed_message(self, descriptor: Path) -> None:
        result = runner.invoke(app, ["log", "Hello %s", "world", "--plugin", str(descriptor)])

        assert result.exit_code == 0
        assert "INFO: [Test] Hello world" in result.output

    def test_show_version(self, descriptor: Path) -> None:
        result = runner.invoke(
            app, ["log", "Hi", "--plugin", str(descriptor), "--level", "warning", "--show-version"]
        )

        assert result.exit_code == 0
        assert "WARNING: [Test 1.0] Hi" in result.output

    def test_numeric_args(self, descriptor: Path) -> None:
        result = runner.invoke(app, ["log", "%d items at %.1f", "3", "2.5", "-p", str(descriptor)])

        assert result.exit_code == 0
        assert "[Test] 3 items at 2.5" in result.output

    def test_string_args_keep_their_text(self, descriptor: Path) -> None:
        """Number-like values for %s should be printed exactly as given."""
        result = runner.invoke(app, ["log", "Version %s id %s", "1.10", "007", "-p", str(descriptor)])

        assert result.exit_code == 0
        assert "INFO: [Test] Version 1.10 id 007" in result.output

    def test_mixed_conversions(self, descriptor: Path) -> None:
        result = runner.invoke(app, ["log", "%s has %d players", "1_000", "12", "-p", str(descriptor)])

        assert result.exit_code == 0
        assert "[Test] 1_000 has 12 players" in result.output

    def test_debug_message_written_to_file(self, descriptor: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["log", "tick", "-p", str(descriptor), "-l", "FINE", "-d", "1", "--debug-prefix", "-dbg"],
        )

        assert result.exit_code == 0
        assert "INFO: [Test-dbg] tick" in result.output
        content = (tmp_path / "data" / "debug.log").read_text(encoding="utf-8")
        assert "[INFO] [Test-dbg] tick" in content

    def test_debug_message_filtered(self, descriptor: Path, tmp_path: Path) -> None:
        result = runner.invoke(app, ["log", "tick", "-p", str(descriptor), "-l", "FINER", "-d", "1"])

        assert result.exit_code == 0
        assert "tick" not in result.output

    def test_missing_argument(self, descriptor: Path) -> None:
        result = runner.invoke(app, ["log", "a %s b", "-p", str(descriptor)])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_invalid_level(self, descriptor: Path) -> None:
        result = runner.invoke(app, ["log", "x", "-p", str(descriptor), "-l", "LOUD"])

        assert result.exit_code == 1
        assert "Unknown log level" in result.output

    def test_invalid_debug_level(self, descriptor: Path) -> None:
        result = runner.invoke(app, ["log", "x", "-p", str(descriptor), "-d", "4"])

        assert result.exit_code == 1
        assert "debug level" in result.output

    def test_bad_descriptor(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["log", "x", "-p", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "Could not read plugin descriptor" in result.output


class TestDescribeCommand:
    """Tests for `pluglog plugin describe`."""

    def test_text_output(self, descriptor: Path, tmp_path: Path) -> None:
        result = runner.invoke(app, ["plugin", "describe", "-p", str(descriptor)])

        assert result.exit_code == 0
        assert "Name:      Test" in result.output
        assert "Version:   1.0" in result.output
        assert str(tmp_path / "data" / "debug.log") in result.output

    def test_json_output(self, descriptor: Path, tmp_path: Path) -> None:
        result = runner.invoke(app, ["plugin", "describe", "-p", str(descriptor), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {
            "name": "Test",
            "version": "1.0",
            "data_dir": str(tmp_path / "data"),
            "debug_log": str(tmp_path / "data" / "debug.log"),
        }

    def test_bad_descriptor(self, tmp_path: Path) -> None:
        bad = tmp_path / "plugin.json"
        bad.write_text('{"name": "Test"}', encoding="utf-8")

        result = runner.invoke(app, ["plugin", "describe", "-p", str(bad)])

        assert result.exit_code == 1
        assert "version" in result.output


class TestCoerceArg:
    """Tests for coerce_arg and coerce_args."""

    @pytest.mark.parametrize("conversion", ["d", "i", "x"])
    def test_integer_conversion(self, conversion: str) -> None:
        assert coerce_arg("42", conversion) == 42

    def test_integer_conversion_accepts_float(self) -> None:
        assert coerce_arg("2.5", "d") == 2.5

    @pytest.mark.parametrize("conversion", ["f", "e", "g"])
    def test_float_conversion(self, conversion: str) -> None:
        assert coerce_arg("2", conversion) == 2.0
        assert isinstance(coerce_arg("2", conversion), float)

    @pytest.mark.parametrize("conversion", ["s", "r", "c", None])
    def test_non_numeric_conversion_keeps_string(self, conversion: str | None) -> None:
        assert coerce_arg("007", conversion) == "007"

    def test_unparseable_value_stays_string(self) -> None:
        assert coerce_arg("world", "d") == "world"

    def test_coerce_args_follows_template(self) -> None:
        assert coerce_args("%s %d %.1f", ["1.10", "3", "4"]) == ["1.10", 3, 4.0]

    def test_coerce_args_surplus_values(self) -> None:
        assert coerce_args("%d", ["1", "2"]) == [1, "2"]
