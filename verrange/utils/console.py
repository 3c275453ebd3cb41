"""
Console output utilities for verrange using Rich.

User-facing CLI output goes through this module; diagnostics go through
:mod:`verrange.utils.logger`.
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Any, Dict, List, Optional

from rich.text import Text
from rich.table import Table
from rich.theme import Theme
from rich.console import Console

VERRANGE_THEME = Theme(
    {
        "success": "bold green",
        "error": "bold red",
        "warning": "bold yellow",
        "info": "bold cyan",
        "dim": "dim",
        "bound": "bold magenta",
    }
)

_console: Optional[Console] = None
_console_lock = threading.Lock()


def _should_use_color() -> bool:
    """Return True if colored output should be enabled."""
    if os.environ.get("NO_COLOR") or os.environ.get("CI"):
        return False
    try:
        return sys.stdout.isatty()
    except (AttributeError, OSError):
        return False


def _get_console() -> Console:
    """Return the shared Rich Console, creating it on first use."""
    global _console

    if _console is None:
        with _console_lock:
            if _console is None:
                use_color = _should_use_color()
                _console = Console(
                    theme=VERRANGE_THEME,
                    no_color=not use_color,
                    highlight=False,
                )
    return _console


def reconfigure_console() -> None:
    """Drop the shared console so the next call picks up a changed environment."""
    global _console
    with _console_lock:
        _console = None


def get_raw_console() -> Console:
    """Return the underlying Rich Console instance."""
    return _get_console()


def print_success(message: str, *, prefix: str = "[OK]") -> None:
    _get_console().print(
        f"{prefix} {message}", style="success", markup=False, soft_wrap=True
    )


def print_error(message: str, *, prefix: str = "[ERROR]") -> None:
    _get_console().print(
        f"{prefix} {message}", style="error", markup=False, soft_wrap=True
    )


def print_warning(message: str, *, prefix: str = "[WARNING]") -> None:
    _get_console().print(
        f"{prefix} {message}", style="warning", markup=False, soft_wrap=True
    )


def print_plain(message: str) -> None:
    """Print text verbatim, without markup or highlighting."""
    _get_console().print(message, markup=False, highlight=False, soft_wrap=True)


def print_table(
    data: List[Dict[str, Any]],
    *,
    headers: Optional[List[str]] = None,
    title: Optional[str] = None,
    column_styles: Optional[Dict[str, Dict[str, Any]]] = None,
) -> None:
    """Render rows of data as a Rich table.

    Cell values are rendered literally; range brackets are never read as
    Rich markup.

    Args:
        data: List of row dictionaries.
        headers: Column order. Defaults to keys of the first row.
        title: Optional table title.
        column_styles: Per-column ``style``/``justify``/``no_wrap`` settings.
    """
    if not data:
        return

    if headers is None:
        headers = list(data[0].keys())

    table = Table(title=title, show_header=True, header_style="bold")

    column_styles = column_styles or {}
    for header in headers:
        config = column_styles.get(header, {})
        table.add_column(
            header,
            style=config.get("style"),
            justify=config.get("justify", "default"),
            no_wrap=config.get("no_wrap", False),
        )

    for row in data:
        table.add_row(*(_literal(row.get(h, "")) for h in headers))

    _get_console().print(table)


def _literal(value: Any) -> Text:
    return Text("" if value is None else str(value))
