"""Shared consoles for the chatwire CLI."""

from __future__ import annotations

from rich.console import Console

from chatwire.ui.theme import THEME

_CONSOLE = Console(theme=THEME, highlight=False)
_ERR_CONSOLE = Console(theme=THEME, highlight=False, stderr=True)


def get_console() -> Console:
    return _CONSOLE


def get_error_console() -> Console:
    """Console bound to stderr, used for log records."""
    return _ERR_CONSOLE
