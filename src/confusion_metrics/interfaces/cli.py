"""CLI interface implementation using Typer."""

import math
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from confusion_metrics.evaluation import (
    ConfusionMetrics,
    LengthMismatchError,
    compute_metrics_from_counts,
    compute_metrics_from_labels,
    load_labels_document,
)
from confusion_metrics.utils.settings import get_output_settings

from .base import BaseInterface

# Configure console for better test compatibility
# Force terminal mode even in non-TTY environments
console = Console(force_terminal=True, force_interactive=False)


def _split_labels(raw: str) -> list[str]:
    """Split a comma separated label list, ignoring surrounding whitespace."""
    if not raw.strip():
        return []
    return [label.strip() for label in raw.split(",")]


def _format_value(value: object, *, decimal_places: int, nan_display: str) -> str:
    """Render a single metric value for table output."""
    if isinstance(value, bool) or not isinstance(value, float):
        return str(value)
    if math.isnan(value):
        return nan_display
    return f"{value:.{decimal_places}f}"


def _display_metrics(metrics: ConfusionMetrics, *, as_json: bool) -> None:
    """Render metrics either as JSON or as a rich table."""
    if as_json:
        # NaN is not valid JSON and is emitted as null
        typer.echo(metrics.model_dump_json(by_alias=True))
        return

    output_settings = get_output_settings()
    table = Table(title="Confusion metrics")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    for name, value in metrics.to_dict().items():
        table.add_row(
            name,
            _format_value(
                value,
                decimal_places=output_settings.decimal_places,
                nan_display=output_settings.nan_display,
            ),
        )
    console.print(table)
    console.file.flush()


COUNT_TP_OPTION = typer.Option(..., "--tp", min=0, help="True positive count.")
COUNT_TN_OPTION = typer.Option(..., "--tn", min=0, help="True negative count.")
COUNT_FP_OPTION = typer.Option(..., "--fp", min=0, help="False positive count.")
COUNT_FN_OPTION = typer.Option(..., "--fn", min=0, help="False negative count.")
JSON_OPTION = typer.Option(
    False,
    "--json",
    help="Print metrics as a JSON object instead of a table.",
)

LABELS_PREDICTED_OPTION = typer.Option(
    ...,
    "--predicted",
    "-p",
    help="Comma separated predicted labels.",
)
LABELS_ACTUAL_OPTION = typer.Option(
    ...,
    "--actual",
    "-a",
    help="Comma separated actual labels.",
)
LABELS_POSITIVE_OPTION = typer.Option(
    None,
    "--positive",
    help="Label treated as positive. Defaults to '1' or 'true' (any case).",
)

LABELS_FILE_ARGUMENT = typer.Argument(
    ...,
    help="YAML or JSON document with 'predicted', 'actual' and 'positive_value'.",
)


class CLIInterface(BaseInterface):
    """Command Line Interface implementation."""

    def __init__(self) -> None:
        """Initialize the CLI interface."""
        super().__init__()
        self.app = typer.Typer(
            name="confusion-metrics",
            help="Compute binary confusion matrix metrics.",
            add_completion=False,
        )
        self._setup_commands()

    @property
    def name(self) -> str:
        """Get the interface name.

        Returns:
            str: The interface name

        """
        return "CLI"

    def _setup_commands(self) -> None:
        """Set up CLI commands."""
        self.app.command(name="counts")(self.from_counts)
        self.app.command(name="labels")(self.from_labels)
        self.app.command(name="labels-file")(self.from_labels_file)

        self.app.callback(invoke_without_command=True)(self._main_callback)

    def _main_callback(self, ctx: typer.Context) -> None:  # pragma: no cover
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            console.print(ctx.get_help())
            raise typer.Exit(0)

    def from_counts(
        self,
        tp: int = COUNT_TP_OPTION,
        tn: int = COUNT_TN_OPTION,
        fp: int = COUNT_FP_OPTION,
        fn: int = COUNT_FN_OPTION,
        as_json: bool = JSON_OPTION,
    ) -> None:
        """Compute metrics from raw confusion counts."""
        metrics = compute_metrics_from_counts(
            {"tp": tp, "tn": tn, "fp": fp, "fn": fn},
        )
        self.logger.info("Computed metrics from counts", total=metrics.total)
        _display_metrics(metrics, as_json=as_json)

    def from_labels(
        self,
        predicted: str = LABELS_PREDICTED_OPTION,
        actual: str = LABELS_ACTUAL_OPTION,
        positive: str | None = LABELS_POSITIVE_OPTION,
        as_json: bool = JSON_OPTION,
    ) -> None:
        """Compute metrics from comma separated predicted and actual labels."""
        predicted_labels = _split_labels(predicted)
        actual_labels = _split_labels(actual)
        try:
            metrics = compute_metrics_from_labels(
                predicted_labels,
                actual_labels,
                positive,
            )
        except LengthMismatchError as exc:
            self.logger.error(
                "Label sequences differ in length",
                predicted_length=exc.predicted_length,
                actual_length=exc.actual_length,
            )
            raise typer.BadParameter(str(exc)) from exc

        self.logger.info(
            "Computed metrics from labels",
            total=metrics.total,
            positive_value=positive,
        )
        _display_metrics(metrics, as_json=as_json)

    def from_labels_file(
        self,
        path: Path = LABELS_FILE_ARGUMENT,
        as_json: bool = JSON_OPTION,
    ) -> None:
        """Compute metrics from a labels document."""
        try:
            document = load_labels_document(path)
            metrics = document.to_metrics()
        except (FileNotFoundError, ValueError) as exc:
            self.logger.error(
                "Could not evaluate labels document",
                path=str(path),
                error=str(exc),
            )
            raise typer.BadParameter(str(exc)) from exc

        self.logger.info(
            "Computed metrics from labels document",
            path=str(path),
            total=metrics.total,
        )
        _display_metrics(metrics, as_json=as_json)

    def run(self) -> None:
        """Run the CLI interface."""
        # Let Typer handle the command parsing
        self.app()
