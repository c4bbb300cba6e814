"""User-facing console lines for the before/after commands.

These are the only lines a user sees on a normal run: one per per-package
problem or update, printed to stderr. The summary line goes to stdout from
the command itself. Structlog events never reach the console unless
``--verbose`` is passed (see ``depchangelog.core.logging``).
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console

_console = Console(stderr=True, highlight=False)

_MARKERS = {
    "success": "[green]✓[/green] ",
    "warning": "[yellow]![/yellow] ",
    "error": "[red]✗[/red] ",
    "info": "  ",
}

_live = threading.local()


def is_console_suppressed() -> bool:
    """True while a spinner owns the terminal."""
    return getattr(_live, "active", False)


@contextmanager
def suppress_console_logs() -> Iterator[None]:
    _live.active = True
    try:
        yield
    finally:
        _live.active = False


def status(message: str, *, style: str = "info") -> None:
    """Print one marked line, e.g. ``! Skipped packages/old/package.json``."""
    _console.print(f"{_MARKERS.get(style, '')}{message}")


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """``pluralize(1, "package")`` -> "1 package", ``pluralize(3, ...)`` -> "3 packages"."""
    word = singular if count == 1 else (plural or singular + "s")
    return f"{count} {word}"


@contextmanager
def spinner(message: str) -> Iterator[None]:
    """Show a spinner while the body runs. No-op when stderr is not a TTY."""
    if not sys.stderr.isatty():
        yield
        return
    with suppress_console_logs(), _console.status(f"[cyan]{message}[/cyan]", spinner="dots"):
        yield
