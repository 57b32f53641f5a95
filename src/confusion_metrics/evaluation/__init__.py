"""Confusion matrix counting and metric computation."""

from .documents import LabelsDocument, load_labels_document
from .labels import (
    ConfusionCounts,
    LabelKind,
    LengthMismatchError,
    compute_counts_from_labels,
    is_positive,
    label_kind,
)
from .metrics import (
    ConfusionMetrics,
    compute_metrics_from_counts,
    compute_metrics_from_labels,
    divide,
)

__all__ = [
    "ConfusionCounts",
    "ConfusionMetrics",
    "LabelKind",
    "LabelsDocument",
    "LengthMismatchError",
    "compute_counts_from_labels",
    "compute_metrics_from_counts",
    "compute_metrics_from_labels",
    "divide",
    "is_positive",
    "label_kind",
    "load_labels_document",
]
