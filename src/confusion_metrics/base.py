"""Base component providing a named structured logger."""

from __future__ import annotations

from typing import Any

from confusion_metrics.utils.logger import get_logger


class BaseComponent:
    """Base class for components that log through structlog."""

    def __init__(self) -> None:
        """Bind a logger named after the concrete component class."""
        self.logger: Any = get_logger(self.__class__.__name__)
