"""Logging setup for the chatwire CLI."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from chatwire.ui.console import get_error_console

LOG_FORMAT = "%(name)s: %(message)s"


def setup_logging(level: int = logging.WARNING) -> None:
    """Route log records through a rich handler on stderr.

    Replaces any handlers already installed on the root logger so repeated
    calls do not duplicate output.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    handler = RichHandler(
        console=get_error_console(),
        show_path=False,
        rich_tracebacks=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)

    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
    logging.getLogger("httpcore").setLevel(max(level, logging.WARNING))
