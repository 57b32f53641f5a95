"""Tests for CLI interface implementation."""

from __future__ import annotations

import json
import re
import textwrap
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import typer
from typer.testing import CliRunner

from confusion_metrics.interfaces.base import BaseInterface
from confusion_metrics.interfaces.cli import CLIInterface, _format_value, _split_labels
from confusion_metrics.utils.settings import reset_settings


def _clean(output: str) -> str:
    """Strip ANSI escape sequences from rich output."""
    return re.sub(r"\x1b\[[0-9;]*m", "", output)


class TestCLIInterface:
    """Test CLI interface functionality."""

    def test_cli_interface_inherits_base(self) -> None:
        """Test that CLIInterface inherits from BaseInterface."""
        assert issubclass(CLIInterface, BaseInterface)

    def test_cli_interface_has_name(self) -> None:
        """Test that CLIInterface has correct name."""
        cli = CLIInterface()
        assert cli.name == "CLI"

    def test_cli_interface_has_typer_app(self) -> None:
        """Test that CLIInterface has Typer app."""
        cli = CLIInterface()
        assert isinstance(cli.app, typer.Typer)

    def test_cli_run_method(self) -> None:
        """Test CLI run method executes typer app."""
        cli = CLIInterface()
        cli.app = MagicMock()

        cli.run()

        cli.app.assert_called_once()


class TestCountsCommand:
    """Validate the ``counts`` command."""

    def test_table_output(self) -> None:
        """Metrics are rendered as a table."""
        result = CliRunner().invoke(
            CLIInterface().app,
            ["counts", "--tp", "70", "--tn", "100", "--fp", "10", "--fn", "20"],
        )

        assert result.exit_code == 0
        output = _clean(result.stdout)
        assert "Confusion metrics" in output
        assert "lrPlus" in output
        assert "0.8750" in output
        assert "200" in output

    def test_json_output(self) -> None:
        """``--json`` prints a JSON object with null for undefined ratios."""
        result = CliRunner().invoke(
            CLIInterface().app,
            ["counts", "--tp", "0", "--tn", "0", "--fp", "0", "--fn", "0", "--json"],
        )

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["total"] == 0
        assert payload["tpr"] is None
        assert payload["for"] is None

    def test_nan_display_setting(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Undefined ratios use the configured placeholder."""
        monkeypatch.setenv("CONFUSION_METRICS_OUTPUT_NAN_DISPLAY", "n/a")
        monkeypatch.setenv("CONFUSION_METRICS_OUTPUT_DECIMAL_PLACES", "2")
        reset_settings()

        result = CliRunner().invoke(
            CLIInterface().app,
            ["counts", "--tp", "3", "--tn", "0", "--fp", "1", "--fn", "0"],
        )

        assert result.exit_code == 0
        output = _clean(result.stdout)
        assert "n/a" in output
        assert "0.75" in output
        assert "0.7500" not in output

    def test_negative_counts_rejected(self) -> None:
        """Counts below zero are refused by the option parser."""
        result = CliRunner().invoke(
            CLIInterface().app,
            ["counts", "--tp", "-1", "--tn", "0", "--fp", "0", "--fn", "0"],
        )

        assert result.exit_code != 0


class TestLabelsCommand:
    """Validate the ``labels`` command."""

    def test_default_positive_rule(self) -> None:
        """String labels follow the default ``1``/``true`` rule."""
        result = CliRunner().invoke(
            CLIInterface().app,
            ["labels", "-p", "1,true,0,no", "-a", "1, 0, TRUE, yes", "--json"],
        )

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert (payload["tp"], payload["fp"], payload["fn"], payload["tn"]) == (
            1,
            1,
            1,
            1,
        )

    def test_custom_positive_value(self) -> None:
        """``--positive`` selects the positive class."""
        result = CliRunner().invoke(
            CLIInterface().app,
            [
                "labels",
                "--predicted",
                "cat,cat,dog",
                "--actual",
                "cat,dog,dog",
                "--positive",
                "cat",
                "--json",
            ],
        )

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["tp"] == 1
        assert payload["fp"] == 1
        assert payload["tn"] == 1
        assert payload["ppv"] == pytest.approx(0.5)

    def test_length_mismatch_is_usage_error(self) -> None:
        """Mismatched label lists exit with a usage error."""
        result = CliRunner().invoke(
            CLIInterface().app,
            ["labels", "-p", "1,0", "-a", "1"],
        )

        assert result.exit_code == 2


class TestLabelsFileCommand:
    """Validate the ``labels-file`` command."""

    def test_yaml_document(self, tmp_path: Path) -> None:
        """YAML documents are evaluated with their native label types."""
        path = tmp_path / "labels.yaml"
        path.write_text(
            textwrap.dedent(
                """
                predicted: [true, true, false, false]
                actual: [true, false, true, false]
                """,
            ).strip()
            + "\n",
            encoding="utf-8",
        )

        result = CliRunner().invoke(
            CLIInterface().app,
            ["labels-file", str(path), "--json"],
        )

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["accuracy"] == pytest.approx(0.5)
        assert payload["mcc"] == pytest.approx(0.0)

    def test_missing_document(self, tmp_path: Path) -> None:
        """Missing documents exit with a usage error."""
        result = CliRunner().invoke(
            CLIInterface().app,
            ["labels-file", str(tmp_path / "nope.yaml")],
        )

        assert result.exit_code == 2


class TestHelpers:
    """Validate CLI formatting helpers."""

    def test_split_labels(self) -> None:
        """Labels are split on commas and stripped."""
        assert _split_labels(" a , b,c ") == ["a", "b", "c"]
        assert _split_labels("  ") == []

    def test_format_value(self) -> None:
        """Floats are rounded, NaN replaced, integers untouched."""
        assert _format_value(0.123456, decimal_places=3, nan_display="-") == "0.123"
        assert _format_value(float("nan"), decimal_places=3, nan_display="-") == "-"
        assert _format_value(12, decimal_places=3, nan_display="-") == "12"
