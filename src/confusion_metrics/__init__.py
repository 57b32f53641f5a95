"""Binary classification metrics computed from confusion counts or labels.

The package namespace bundles the three entry points::

    import confusion_metrics

    counts = confusion_metrics.compute_counts_from_labels(predicted, actual)
    metrics = confusion_metrics.compute_metrics_from_counts(counts)
    metrics = confusion_metrics.compute_metrics_from_labels(predicted, actual)
"""

from .evaluation import (
    ConfusionCounts,
    ConfusionMetrics,
    LabelKind,
    LengthMismatchError,
    compute_counts_from_labels,
    compute_metrics_from_counts,
    compute_metrics_from_labels,
    divide,
    is_positive,
    label_kind,
)

__all__ = [
    "ConfusionCounts",
    "ConfusionMetrics",
    "LabelKind",
    "LengthMismatchError",
    "compute_counts_from_labels",
    "compute_metrics_from_counts",
    "compute_metrics_from_labels",
    "divide",
    "is_positive",
    "label_kind",
]
