"""Shared fixtures for the confusion metrics test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from confusion_metrics.utils.logger import configure_logging
from confusion_metrics.utils.settings import reset_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep environment driven settings and logging from leaking across tests."""
    for name in (
        "CONFUSION_METRICS_LOG_LEVEL",
        "CONFUSION_METRICS_LOG_FORMAT",
        "CONFUSION_METRICS_LOG_FILE_PATH",
        "CONFUSION_METRICS_OUTPUT_DECIMAL_PLACES",
        "CONFUSION_METRICS_OUTPUT_NAN_DISPLAY",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    configure_logging(log_level="WARNING")
    yield
    reset_settings()
