"""Metric computation helpers for binary confusion matrices."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from pydantic import Field

from .labels import ConfusionCounts, Count, compute_counts_from_labels

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


class ConfusionMetrics(ConfusionCounts):
    """Statistics derived from a single set of confusion counts.

    Ratios whose denominator is zero are ``NaN`` rather than an error, and the
    fields computed from such ratios inherit the ``NaN``.
    """

    total: Count = Field(description="Total number of samples")
    prevalence: float = Field(description="Share of actual positives")
    tpr: float = Field(description="True positive rate / sensitivity / recall")
    fpr: float = Field(description="False positive rate / fall-out")
    fnr: float = Field(description="False negative rate / miss rate")
    tnr: float = Field(description="True negative rate / specificity")
    ppv: float = Field(description="Positive predictive value / precision")
    npv: float = Field(description="Negative predictive value")
    lr_plus: float = Field(description="Positive likelihood ratio")
    lr_minus: float = Field(description="Negative likelihood ratio")
    accuracy: float = Field(description="Share of correct predictions")
    fdr: float = Field(description="False discovery rate")
    for_: float = Field(alias="for", description="False omission rate")
    markedness: float = Field(description="Markedness / deltaP")
    dor: float = Field(description="Diagnostic odds ratio")
    balanced_accuracy: float = Field(description="Mean of TPR and TNR")
    f1: float = Field(description="F1 score")
    fm: float = Field(description="Fowlkes-Mallows index")
    mcc: float = Field(description="Matthews correlation coefficient")
    ts: float = Field(description="Threat score / Jaccard index")

    @property
    def counts(self) -> ConfusionCounts:
        """Return the counts these metrics were derived from."""
        return ConfusionCounts(tp=self.tp, tn=self.tn, fp=self.fp, fn=self.fn)


def divide(numerator: float, denominator: float) -> float:
    """Divide, returning ``NaN`` instead of raising on a zero denominator."""
    if denominator == 0:
        return math.nan
    return numerator / denominator


def compute_metrics_from_counts(
    counts: ConfusionCounts | Mapping[str, int],
) -> ConfusionMetrics:
    """Compute the full set of confusion matrix metrics from raw counts."""
    if not isinstance(counts, ConfusionCounts):
        counts = ConfusionCounts.model_validate(counts)

    tp, tn, fp, fn = counts.tp, counts.tn, counts.fp, counts.fn
    positive = tp + fn
    negative = tn + fp
    total = positive + negative

    tpr = divide(tp, positive)
    fnr = divide(fn, positive)
    tnr = divide(tn, negative)
    fpr = divide(fp, negative)
    ppv = divide(tp, tp + fp)
    npv = divide(tn, tn + fn)
    # per-factor roots keep very large counts within float range
    mcc_denominator = (
        math.sqrt(tp + fp)
        * math.sqrt(tp + fn)
        * math.sqrt(tn + fp)
        * math.sqrt(tn + fn)
    )

    return ConfusionMetrics(
        tp=tp,
        tn=tn,
        fp=fp,
        fn=fn,
        total=total,
        prevalence=divide(positive, total),
        tpr=tpr,
        fpr=fpr,
        fnr=fnr,
        tnr=tnr,
        ppv=ppv,
        npv=npv,
        lr_plus=divide(tpr, fpr),
        lr_minus=divide(fnr, tnr),
        accuracy=divide(tp + tn, total),
        fdr=1 - ppv,
        for_=1 - npv,
        markedness=ppv + npv - 1,
        # equals lr_plus / lr_minus when both are defined
        dor=divide(tp * tn, fp * fn),
        balanced_accuracy=(tpr + tnr) / 2,
        f1=divide(2 * tp, 2 * tp + fp + fn),
        fm=math.sqrt(ppv * tpr),
        mcc=divide(tp * tn - fp * fn, mcc_denominator),
        ts=divide(tp, tp + fp + fn),
    )


def compute_metrics_from_labels(
    predicted: Sequence[object],
    actual: Sequence[object],
    positive_value: object | None = None,
) -> ConfusionMetrics:
    """Classify paired labels and compute metrics from the resulting counts."""
    counts = compute_counts_from_labels(predicted, actual, positive_value)
    return compute_metrics_from_counts(counts)


__all__ = [
    "ConfusionMetrics",
    "compute_metrics_from_counts",
    "compute_metrics_from_labels",
    "divide",
]
