"""Logging setup - routes the standard logging module through Rich on stderr."""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from .config import LoggingConfig

_configured = False


def configure_logging(config: LoggingConfig | None = None) -> None:
    """
    Install a Rich handler on the package logger.

    LGT_LOG_LEVEL overrides the configured level. Only the first call has an
    effect; later calls keep the existing handler.
    """
    global _configured
    if _configured:
        return

    config = config or LoggingConfig()
    level_name = os.environ.get("LGT_LOG_LEVEL", config.level).upper()

    logger = logging.getLogger("logger_tasks")
    logger.setLevel(getattr(logging, level_name, logging.INFO))
    if config.console_logging:
        handler = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    _configured = True
