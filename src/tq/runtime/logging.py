from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from ..config import TQ_CONFIG

LOGGER_NAME = "tq"


class _TqRichConsoleHandler(RichHandler):
    """Rich handler writing tq records to stderr."""

    def __init__(self, level: int) -> None:
        super().__init__(
            level=level,
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
            rich_tracebacks=False,
        )


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logging(level: int | None = None) -> logging.Logger:
    """Attach the rich console handler to the ``tq`` logger.

    Safe to call repeatedly: an existing handler is reused and only its level
    is updated.
    """

    resolved = TQ_CONFIG.log_level if level is None else level
    logger = get_logger()
    logger.setLevel(resolved)
    logger.propagate = False

    for handler in logger.handlers:
        if isinstance(handler, _TqRichConsoleHandler):
            handler.setLevel(resolved)
            return logger

    logger.addHandler(_TqRichConsoleHandler(resolved))
    return logger
