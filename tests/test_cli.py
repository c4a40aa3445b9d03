"""CLI tests for the decision tree visualizer via Click's CliRunner."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from decision_tree.cli import cli


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def runner():
    """Create a Click test runner."""
    return CliRunner()


def _invoke(runner: CliRunner, *args: str, query: str | None = None):
    argv = ["--query", query] if query is not None else []
    return runner.invoke(cli, [*argv, *args])


# ---------------------------------------------------------------------------
# show
# ---------------------------------------------------------------------------

class TestShowCommand:
    def test_grid(self, runner: CliRunner):
        result = _invoke(runner, "show", query="steps=a,b_c,d")
        assert result.exit_code == 0
        for path in ("a-c", "a-d", "b-c", "b-d"):
            assert path in result.output

    def test_form_when_absent(self, runner: CliRunner):
        result = _invoke(runner, "show")
        assert result.exit_code == 0
        assert "Enter steps formula" in result.output

    def test_form_when_invalid(self, runner: CliRunner):
        result = _invoke(runner, "show", query="steps=")
        assert result.exit_code == 0
        assert "Enter steps formula" in result.output

    def test_query_from_environment(self, runner: CliRunner):
        result = runner.invoke(cli, ["show"], env={"DECISION_TREE_QUERY": "steps=x,y"})
        assert result.exit_code == 0
        assert "x" in result.output
        assert "Enter steps formula" not in result.output


# ---------------------------------------------------------------------------
# set
# ---------------------------------------------------------------------------

class TestSetCommand:
    def test_set_formula(self, runner: CliRunner):
        result = _invoke(runner, "set", "a,b_c")
        assert result.exit_code == 0
        assert "?steps=a%2Cb_c" in result.output
        assert "a-c" in result.output
        assert "b-c" in result.output

    def test_invalid_formula_resets(self, runner: CliRunner):
        result = _invoke(runner, "set", "", query="steps=a")
        assert result.exit_code == 0
        assert "Invalid formula" in result.output
        assert "Enter steps formula" in result.output

    def test_too_long_formula_resets(self, runner: CliRunner):
        result = _invoke(runner, "set", "a" * 1001, query="steps=a")
        assert result.exit_code == 0
        assert "Invalid formula" in result.output


# ---------------------------------------------------------------------------
# copy
# ---------------------------------------------------------------------------

class TestCopyCommand:
    def test_copy(self, runner: CliRunner):
        result = _invoke(runner, "copy", "2", "3", query="steps=a,b_c,d")
        assert result.exit_code == 0
        assert result.output.strip() == "b-c"

    def test_out_of_range(self, runner: CliRunner):
        result = _invoke(runner, "copy", "3", "1", query="steps=a,b_c,d")
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_without_formula(self, runner: CliRunner):
        result = _invoke(runner, "copy", "1", "1")
        assert result.exit_code == 1
        assert "No steps formula" in result.output

    def test_zero_index_rejected_by_click(self, runner: CliRunner):
        result = _invoke(runner, "copy", "0", "1", query="steps=a")
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# levels
# ---------------------------------------------------------------------------

class TestLevelsCommand:
    def test_counts(self, runner: CliRunner):
        result = _invoke(runner, "levels", query="steps=a,b_c,d,e")
        assert result.exit_code == 0
        assert "1: 2" in result.output
        assert "2: 6" in result.output

    def test_no_steps(self, runner: CliRunner):
        result = _invoke(runner, "levels")
        assert result.exit_code == 0
        assert "No steps" in result.output
