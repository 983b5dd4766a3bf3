"""Tests for formval CLI utility functions."""

from __future__ import annotations

from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from formval.cli_utils import (
    EXIT_FAIL,
    EXIT_USAGE_ERROR,
    error,
    wire_config,
)
from formval.config import FormvalConfig

# Default CliRunner - note that stderr is mixed into stdout by default
runner = CliRunner()


class TestExitCodes:
    """Tests for exit code constants."""

    def test_values(self) -> None:
        """Test the exit code conventions."""
        assert EXIT_FAIL == 1
        assert EXIT_USAGE_ERROR == 2


class TestErrorFormatting:
    """Tests for error formatting helpers."""

    def test_error_exits_with_usage_error_code_by_default(self) -> None:
        """Test that error() exits with EXIT_USAGE_ERROR by default."""
        app = typer.Typer()

        @app.command()
        def cmd() -> None:
            error("Test error message")

        result = runner.invoke(app, [])
        assert result.exit_code == EXIT_USAGE_ERROR
        assert "Error:" in result.output
        assert "Test error message" in result.output

    def test_error_exits_with_custom_exit_code(self) -> None:
        """Test that error() can use a custom exit code."""
        app = typer.Typer()

        @app.command()
        def cmd() -> None:
            error("Failed", exit_code=EXIT_FAIL)

        result = runner.invoke(app, [])
        assert result.exit_code == EXIT_FAIL


class TestWireConfig:
    """Tests for wire_config."""

    @pytest.fixture(autouse=True)
    def isolated(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Run from an empty directory with no FORMVAL_* variables."""
        monkeypatch.chdir(tmp_path)
        for var in ("FORMVAL_DAYFIRST", "FORMVAL_STRICT_PARENS", "FORMVAL_OUTPUT"):
            monkeypatch.delenv(var, raising=False)

    def test_defaults(self) -> None:
        """Test no options gives the default config."""
        assert wire_config() == FormvalConfig()

    def test_overrides(self) -> None:
        """Test options are passed through."""
        config = wire_config(dayfirst=True, strict_parens=True, json_output=True)
        assert config == FormvalConfig(dayfirst=True, strict_parens=True, output="json")

    def test_json_false_does_not_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test --json absent leaves FORMVAL_OUTPUT in effect."""
        monkeypatch.setenv("FORMVAL_OUTPUT", "json")
        assert wire_config(json_output=False).output == "json"

    def test_invalid_config_exits(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test invalid configuration exits with EXIT_USAGE_ERROR."""
        monkeypatch.setenv("FORMVAL_OUTPUT", "xml")
        with pytest.raises(typer.Exit) as exc_info:
            wire_config()
        assert exc_info.value.exit_code == EXIT_USAGE_ERROR
