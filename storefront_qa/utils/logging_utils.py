"""Central logging configuration using Loguru JSON sinks."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from loguru import logger as loguru_logger


class InterceptHandler(logging.Handler):
    """Forward stdlib log records to Loguru, keeping the originating logger name."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        message = record.getMessage()
        if record.exc_info:
            loguru_logger.bind(logger_name=record.name).opt(exception=record.exc_info).log(level, message)
        else:
            loguru_logger.bind(logger_name=record.name).log(level, message)


def configure_json_logging(level: str = "INFO", sink: TextIO | None = None) -> None:
    """Route stdlib logging through a serialized Loguru sink (stderr by default).

    Stdout is reserved for the console report.
    """
    loguru_logger.remove()
    loguru_logger.add(
        sink or sys.stderr,
        level=level.upper(),
        serialize=True,
        enqueue=False,
        backtrace=False,
        diagnose=False,
    )

    logging.basicConfig(
        handlers=[InterceptHandler()],
        level=getattr(logging, level.upper(), logging.INFO),
        force=True,
    )
