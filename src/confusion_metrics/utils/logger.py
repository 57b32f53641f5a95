"""Structured logging configuration built on structlog."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from .settings import LogFormat

if TYPE_CHECKING:
    from structlog.typing import Processor


def _select_renderer(log_format: LogFormat) -> Processor:
    if log_format is LogFormat.JSON:
        return structlog.processors.JSONRenderer()
    if log_format is LogFormat.PLAIN:
        return structlog.processors.LogfmtRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def configure_logging(
    log_level: str = "INFO",
    log_format: LogFormat | str = LogFormat.CONSOLE,
    log_file: Path | str | None = None,
) -> None:
    """Configure structlog and the standard library root logger.

    Records are written to stderr and, when ``log_file`` is given, appended
    to that file as well.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        msg = f"Unknown log level: {log_level}"
        raise ValueError(msg)

    selected_format = LogFormat(log_format)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(
        format="%(message)s",
        level=level,
        handlers=handlers,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _select_renderer(selected_format),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name, **initial_values)


__all__ = ["configure_logging", "get_logger"]
