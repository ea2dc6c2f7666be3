"""End-to-end tests for the Fuzzinator CLI.

This module tests the CLI interface using Typer's CliRunner.
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from fuzzinator import __version__
from fuzzinator.cli import app


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a CliRunner instance for testing."""
    return CliRunner()


@pytest.fixture
def candidates_file(temp_dir: Path) -> Path:
    """Write a candidates file with a blank line in the middle."""
    path = temp_dir / "cities.txt"
    path.write_text("New York\nNewark\n\nBoston\nnew york\n", encoding="utf-8")
    return path


@pytest.fixture
def config_file(temp_dir: Path):
    """Return a helper writing a JSON config file."""
    def write(payload) -> Path:
        path = temp_dir / "config.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path
    return write


class TestVersionFlag:
    """Tests for --version flag."""

    def test_version(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"Fuzzinator v{__version__}" in result.output


class TestRankCommand:
    """Tests for the rank command."""

    def test_rank_arguments(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["rank", "cat", "dog", "bat", "cat"])
        assert result.exit_code == 0, result.output
        assert "Rank Results" in result.output
        assert "Candidates ranked: 3" in result.output
        assert result.output.index("bat") < result.output.index("dog")

    def test_rank_candidates_file(self, cli_runner: CliRunner, candidates_file: Path):
        result = cli_runner.invoke(app, ["rank", "new york", "-f", str(candidates_file)])
        assert result.exit_code == 0, result.output
        assert "Candidates ranked: 4" in result.output
        assert "Boston" in result.output

    def test_rank_threshold(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["rank", "cat", "dog", "bat", "--threshold", "10"])
        assert result.exit_code == 0, result.output
        assert "Results kept: 1" in result.output
        assert "dog" not in result.output.split("Ranked Candidates")[-1]

    def test_rank_no_sort(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["rank", "cat", "dog", "bat", "--no-sort"])
        assert result.exit_code == 0, result.output
        table = result.output.split("Ranked Candidates")[-1]
        assert table.index("dog") < table.index("bat")

    def test_rank_no_candidates(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["rank", "cat"])
        assert result.exit_code == 1
        assert "No candidates given" in result.output

    def test_rank_negative_threshold_rejected(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["rank", "cat", "bat", "--threshold", "-1"])
        assert result.exit_code != 0

    def test_rank_with_preset_and_formula(self, cli_runner: CliRunner):
        result = cli_runner.invoke(
            app, ["rank", "cat", "bat", "--preset", "focus_drop_near", "--formula", "l1"]
        )
        assert result.exit_code == 0, result.output

    def test_rank_unknown_preset(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["rank", "cat", "bat", "--preset", "focus_drop_nearr"])
        assert result.exit_code == 1
        assert "Unknown preset" in result.output
        assert "focus_drop_near" in result.output

    def test_rank_log_file(self, cli_runner: CliRunner, temp_dir: Path):
        log_path = temp_dir / "rank.log"
        result = cli_runner.invoke(
            app, ["rank", "cat", "bat", "dog", "--log-file", str(log_path), "--verbose"]
        )
        assert result.exit_code == 0, result.output
        content = log_path.read_text()
        assert "RANK PHASE 1" in content
        assert "Preset: default" in content

    def test_rank_invalid_formula_from_config(self, cli_runner: CliRunner, config_file):
        path = config_file({"scoring": {"formula": "l3"}})
        result = cli_runner.invoke(app, ["rank", "cat", "bat", "--config", str(path)])
        assert result.exit_code == 1
        assert "l3" in result.output


class TestConfigFile:
    """Tests for --config handling."""

    def test_config_overrides_preset(self, cli_runner: CliRunner, config_file):
        path = config_file({"scalars": {"capital_distance": 0.5}, "scoring": {"formula": "l1"}})
        result = cli_runner.invoke(app, ["distance", "a", "A", "--config", str(path)])
        assert result.exit_code == 0, result.output
        assert "Distance: 0.5" in result.output

    def test_formula_flag_overrides_config(self, cli_runner: CliRunner, config_file):
        path = config_file({"scalars": {"capital_distance": 0.5}, "scoring": {"formula": "l1"}})
        result = cli_runner.invoke(
            app, ["distance", "a", "A", "--config", str(path), "--formula", "l2"]
        )
        assert result.exit_code == 0, result.output
        assert "Distance: 0.25" in result.output

    def test_out_of_range_capital_distance(self, cli_runner: CliRunner, config_file):
        path = config_file({"scalars": {"capital_distance": 2}})
        result = cli_runner.invoke(app, ["vector", "a", "--config", str(path)])
        assert result.exit_code == 1
        assert "capital_distance" in result.output

    def test_nan_capital_distance_rejected(self, cli_runner: CliRunner, config_file):
        path = config_file({"scalars": {"capital_distance": float("nan")}})
        result = cli_runner.invoke(app, ["distance", "a", "A", "--config", str(path)])
        assert result.exit_code == 1
        assert "capital_distance" in result.output

    def test_markup_in_error_message_is_printed_literally(
        self, cli_runner: CliRunner, config_file
    ):
        path = config_file({"scoring": {"formula": "[/x]"}})
        result = cli_runner.invoke(app, ["distance", "a", "b", "--config", str(path)])
        assert result.exit_code == 1
        assert "[/x]" in result.output

    def test_markup_in_rank_error_is_printed_literally(
        self, cli_runner: CliRunner, config_file
    ):
        path = config_file({"scoring": {"formula": "[bold]l3"}})
        result = cli_runner.invoke(app, ["rank", "cat", "bat", "--config", str(path)])
        assert result.exit_code == 1
        assert "[bold]l3" in result.output

    def test_unknown_key(self, cli_runner: CliRunner, config_file):
        path = config_file({"scalars": {"capitalDistance": 0.1}})
        result = cli_runner.invoke(app, ["vector", "a", "--config", str(path)])
        assert result.exit_code == 1
        assert "capitalDistance" in result.output

    def test_invalid_json(self, cli_runner: CliRunner, temp_dir: Path):
        path = temp_dir / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        result = cli_runner.invoke(app, ["vector", "a", "--config", str(path)])
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_non_object_json(self, cli_runner: CliRunner, config_file):
        path = config_file(["l1"])
        result = cli_runner.invoke(app, ["vector", "a", "--config", str(path)])
        assert result.exit_code == 1
        assert "JSON object" in result.output

    def test_missing_config_file(self, cli_runner: CliRunner, temp_dir: Path):
        result = cli_runner.invoke(app, ["vector", "a", "--config", str(temp_dir / "nope.json")])
        assert result.exit_code == 1
        assert "does not exist" in result.output


class TestOtherCommands:
    """Tests for distance, vector and presets commands."""

    def test_distance_l1(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["distance", "a", "A", "--formula", "l1"])
        assert result.exit_code == 0, result.output
        assert "Distance: 0.001" in result.output

    def test_distance_identical(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["distance", "cat", "cat"])
        assert result.exit_code == 0, result.output
        assert "Distance: 0" in result.output
        assert "Score: 100.0%" in result.output

    def test_vector(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["vector", "ab"])
        assert result.exit_code == 0, result.output
        assert "Length: 2" in result.output
        assert "7" in result.output

    def test_presets(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["presets"])
        assert result.exit_code == 0, result.output
        assert "focus_drop_far" in result.output
        assert "focus_drop_near" in result.output
