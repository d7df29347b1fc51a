"""Logging setup for the dblayout command-line tooling.

Records go to stderr so that stdout carries only command output (layout roots,
database listings) and stays safe to pipe.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME = "dblayout"
STDERR_HANDLER_NAME = "dblayout.stderr"

_FORMATTER = logging.Formatter(fmt="%(asctime)s %(levelname)s %(name)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")


def configure_logging(*, level: str | int = "INFO", log_path: Path | None = None) -> logging.Logger:
    """Attach the stderr handler and an optional file handler to the ``dblayout`` logger.

    Repeated calls only adjust the level; a handler is never installed twice.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    installed = {handler.get_name() for handler in logger.handlers}

    if STDERR_HANDLER_NAME not in installed:
        logger.addHandler(_named(_StderrHandler(), STDERR_HANDLER_NAME))

    if log_path is not None:
        log_path = Path(log_path).absolute()
        file_handler_name = f"{LOGGER_NAME}.file:{log_path}"
        if file_handler_name not in installed:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            logger.addHandler(_named(logging.FileHandler(log_path, encoding="utf-8"), file_handler_name))

    return logger


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stderr`` is when a record is emitted."""

    def __init__(self) -> None:
        logging.Handler.__init__(self)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr


def _named(handler: logging.Handler, name: str) -> logging.Handler:
    handler.set_name(name)
    handler.setFormatter(_FORMATTER)
    return handler


__all__ = ["LOGGER_NAME", "configure_logging"]
