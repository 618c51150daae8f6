from __future__ import annotations

import logging
import os
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from ...infrastructure.metrics import METRICS_LOGGER_NAME


class ResilientTimedRotatingFileHandler(TimedRotatingFileHandler):
    """
    TimedRotatingFileHandler that reopens its file when something deleted it
    while the process was still writing.
    """

    def emit(self, record):
        if self.stream and not Path(self.baseFilename).exists():
            self.stream.close()
            self.stream = self._open()
        super().emit(record)


def configure_metrics_logger(
    path: str,
    *,
    when: str = "midnight",
    backups: int = 30,
    logger_name: str = METRICS_LOGGER_NAME,
) -> logging.Logger:
    """
    Route the metrics logger to a JSON lines file, rotated daily by default.
    Calling it again with the same path keeps the existing handler.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    if logger.handlers:
        if all(getattr(handler, "baseFilename", None) == os.path.abspath(target) for handler in logger.handlers):
            return logger
        release_metrics_logger(logger)

    handler = ResilientTimedRotatingFileHandler(
        filename=target,
        when=when,
        backupCount=backups,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger


def release_metrics_logger(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
