"""Render helpers for the chatwire CLI."""

from __future__ import annotations

from typing import Mapping, Sequence

from rich import box
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from chatwire.types import ChatCompletionResponse
from chatwire.ui.console import get_console


def render_banner(title: str, subtitle: str) -> None:
    console = get_console()
    panel = Panel(
        Group(Text(subtitle, style="subtitle")),
        title=Text(title, style="section"),
        title_align="left",
        box=box.ROUNDED,
        border_style="border",
        padding=(0, 2),
        expand=True,
    )
    console.print(panel)


def render_info(text: str) -> None:
    get_console().print(text, style="info", markup=False)


def render_warning(text: str) -> None:
    get_console().print(text, style="warning", markup=False)


def render_success(text: str) -> None:
    get_console().print(text, style="success", markup=False)


def render_error(text: str) -> None:
    console = get_console()
    panel = Panel(
        Text(text, style="error"),
        box=box.ROUNDED,
        border_style="error",
        padding=(0, 2),
        expand=True,
    )
    console.print(panel)


def render_summary_table(rows: Mapping[str, str] | Sequence[tuple[str, str]], title: str = "Summary") -> None:
    console = get_console()
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column(style="label", no_wrap=True, justify="right")
    table.add_column(style="value")

    items = rows.items() if hasattr(rows, "items") else rows
    for key, value in items:
        table.add_row(Text(str(key), style="label"), Text(str(value), style="value"))

    panel = Panel(
        table,
        title=Text(title, style="section"),
        title_align="left",
        border_style="border",
        box=box.ROUNDED,
        padding=(0, 2),
        expand=True,
    )
    console.print(panel)


def render_response(response: ChatCompletionResponse) -> None:
    console = get_console()
    for choice in response.choices:
        header = Text()
        header.append(choice.message.role or "unknown", style="role")
        header.append(f"  #{choice.index}", style="label")
        if choice.finish_reason:
            header.append(f"  finish={choice.finish_reason}", style="label")
        panel = Panel(
            Text(choice.message.content, style="value"),
            title=header,
            title_align="left",
            box=box.ROUNDED,
            border_style="border",
            padding=(0, 2),
            expand=True,
        )
        console.print(panel)

    render_summary_table(
        [
            ("id", response.id),
            ("model", response.model),
            ("created", response.created),
            ("prompt tokens", response.usage.prompt_tokens),
            ("completion tokens", response.usage.completion_tokens),
            ("total tokens", response.usage.total_tokens),
        ],
        title="Response",
    )
