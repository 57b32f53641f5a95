"""Loading paired label documents from YAML or JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, cast
from collections.abc import Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .labels import ConfusionCounts, compute_counts_from_labels
from .metrics import ConfusionMetrics, compute_metrics_from_counts

LabelValue = bool | int | float | str | None


class LabelsDocument(BaseModel):
    """Predicted and actual labels for a single evaluation run."""

    predicted: tuple[LabelValue, ...] = Field(
        description="Labels produced by the classifier, in sample order",
    )
    actual: tuple[LabelValue, ...] = Field(
        description="Ground truth labels, in the same order as ``predicted``",
    )
    positive_value: bool | int | float | str | None = Field(
        default=None,
        description=(
            "Label treated as the positive class. When omitted the default "
            "boolean/numeric/string rule applies."
        ),
    )

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    def to_counts(self) -> ConfusionCounts:
        """Classify the labels into confusion counts."""
        return compute_counts_from_labels(
            self.predicted,
            self.actual,
            self.positive_value,
        )

    def to_metrics(self) -> ConfusionMetrics:
        """Compute confusion metrics for the labels."""
        return compute_metrics_from_counts(self.to_counts())

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> LabelsDocument:
        """Validate and construct a document from a mapping."""
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            errors = exc.errors()
            if errors:
                location = ".".join(str(part) for part in errors[0].get("loc", ()))
                detail = errors[0].get("msg")
                if detail:
                    message = f"{location}: {detail}" if location else detail
                    raise ValueError(message) from exc
            message = "Invalid labels document payload"
            raise ValueError(message) from exc

    @classmethod
    def from_path(cls, path: Path | str) -> LabelsDocument:
        """Load a labels document from a JSON or YAML file."""
        resolved = Path(path)
        if not resolved.exists():
            msg = f"Labels document not found: {resolved}"
            raise FileNotFoundError(msg)

        raw = resolved.read_text(encoding="utf-8")
        loaded: Any
        suffix = resolved.suffix.lower()
        try:
            if suffix in {".yaml", ".yml"}:
                loaded = yaml.safe_load(raw) or {}
            elif suffix == ".json":
                loaded = json.loads(raw or "{}")
            else:
                msg = f"Unsupported labels document format: {resolved.suffix}"
                raise ValueError(msg)
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            msg = f"Could not parse labels document {resolved}: {exc}"
            raise ValueError(msg) from exc

        if not isinstance(loaded, Mapping):
            msg = "Labels document must contain a mapping at the top level"
            raise ValueError(msg)

        mapping = cast("Mapping[str, Any]", loaded)
        return cls.from_mapping(mapping)


def load_labels_document(path: Path | str) -> LabelsDocument:
    """Load a labels document from the provided path."""
    return LabelsDocument.from_path(path)


__all__ = ["LabelValue", "LabelsDocument", "load_labels_document"]
