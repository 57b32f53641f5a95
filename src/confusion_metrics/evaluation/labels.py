"""Conversion of predicted/actual label sequences into confusion counts."""

from __future__ import annotations

import decimal
import numbers
from enum import Enum
from typing import TYPE_CHECKING, Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from collections.abc import Sequence

_BOOLEAN_TYPE_NAMES = frozenset({"bool", "bool_"})


def _is_boolean(value: object) -> bool:
    """Return whether ``value`` is a Python or numpy boolean scalar."""
    if isinstance(value, bool):
        return True
    value_type = type(value)
    return (
        value_type.__module__ == "numpy"
        and value_type.__name__ in _BOOLEAN_TYPE_NAMES
    )


def _validate_count(value: object) -> object:
    """Accept any integral scalar except booleans."""
    if _is_boolean(value) or not isinstance(value, numbers.Integral):
        msg = f"count must be an integer, got {value!r}"
        raise ValueError(msg)
    return int(value)


Count = Annotated[int, BeforeValidator(_validate_count), Field(ge=0)]


class LengthMismatchError(ValueError):
    """Raised when predicted and actual label sequences differ in length."""

    def __init__(self, predicted_length: int, actual_length: int) -> None:
        """Record both lengths so callers can report the offending inputs."""
        self.predicted_length = predicted_length
        self.actual_length = actual_length
        msg = (
            "predicted and actual must have the same length "
            f"(got {predicted_length} and {actual_length})"
        )
        super().__init__(msg)


class LabelKind(str, Enum):
    """Label kinds recognised by the default positivity rule."""

    BOOLEAN = "boolean"
    NUMERIC = "numeric"
    STRING = "string"
    UNSUPPORTED = "unsupported"


class ConfusionCounts(BaseModel):
    """True/false positive and negative counts of a binary classifier."""

    tp: Count = Field(description="True positives")
    tn: Count = Field(description="True negatives")
    fp: Count = Field(description="False positives")
    fn: Count = Field(description="False negatives")

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self) -> dict[str, object]:
        """Return a plain mapping keyed by wire names."""
        return self.model_dump(by_alias=True)


def label_kind(value: object) -> LabelKind:
    """Resolve which default positivity rule applies to ``value``."""
    # bool is a subclass of int and must be matched first
    if _is_boolean(value):
        return LabelKind.BOOLEAN
    if isinstance(value, (numbers.Real, decimal.Decimal)):
        return LabelKind.NUMERIC
    if isinstance(value, str):
        return LabelKind.STRING
    return LabelKind.UNSUPPORTED


def _strictly_equal(value: object, expected: object) -> bool:
    if _is_boolean(value) != _is_boolean(expected):
        return False
    return bool(value == expected)


def is_positive(value: object, positive_value: object | None = None) -> bool:
    """Return whether a single label counts as the positive class.

    When ``positive_value`` is given the label must strictly equal it. Otherwise
    booleans (including numpy booleans) are positive when true, numbers
    (including ``Decimal`` and numpy scalars) when equal to ``1`` and strings
    when they read ``"1"`` or ``"true"`` in any case. Labels of any other type
    are negative.
    """
    if positive_value is not None:
        return _strictly_equal(value, positive_value)

    kind = label_kind(value)
    if kind is LabelKind.BOOLEAN:
        return bool(value)
    if kind is LabelKind.NUMERIC:
        return bool(value == 1)
    if kind is LabelKind.STRING:
        text = str(value)
        return text == "1" or text.lower() == "true"
    return False


def compute_counts_from_labels(
    predicted: Sequence[object],
    actual: Sequence[object],
    positive_value: object | None = None,
) -> ConfusionCounts:
    """Count true/false positives and negatives across paired labels."""
    if len(predicted) != len(actual):
        raise LengthMismatchError(len(predicted), len(actual))

    tp = tn = fp = fn = 0
    for prediction, truth in zip(predicted, actual, strict=False):
        predicted_positive = is_positive(prediction, positive_value)
        actual_positive = is_positive(truth, positive_value)
        if predicted_positive and actual_positive:
            tp += 1
        elif predicted_positive:
            fp += 1
        elif actual_positive:
            fn += 1
        else:
            tn += 1

    return ConfusionCounts(tp=tp, tn=tn, fp=fp, fn=fn)


__all__ = [
    "ConfusionCounts",
    "LabelKind",
    "LengthMismatchError",
    "compute_counts_from_labels",
    "is_positive",
    "label_kind",
]
