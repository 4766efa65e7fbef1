"""CLI console helpers: Rich output and the loguru sink.

Consoles are created per call so that output always goes to the
current ``sys.stdout`` / ``sys.stderr`` (which tests may replace).
"""

from __future__ import annotations

import os
import sys
from typing import Any

from loguru import logger

from flagkit.exceptions import EnvironmentError, FlagkitError

LOG_LEVEL_ENV: str = "FLAGKIT_LOG_LEVEL"


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console instance targeting stderr (or stdout)."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr, highlight=False)


class _ConsoleProxy:
    """Rich-backed writer bound to one standard stream."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object) -> None:
        """Render *objects* with Rich markup."""
        get_rich_console(stderr=self._stderr).print(*objects)

    def write(self, text: str) -> None:
        """Write *text* verbatim — no markup, wrapping, or highlighting."""
        get_rich_console(stderr=self._stderr).out(text, end="", highlight=False)

    def error(self, message: str, hint: str | None = None) -> None:
        """Render an error line and an optional hint line."""
        from rich.markup import escape

        rich_console = get_rich_console(stderr=self._stderr)
        rich_console.print(
            f"[bold red]Error:[/bold red] {escape(message)}",
            soft_wrap=True,
            emoji=False,
        )
        if hint:
            rich_console.print(
                f"[yellow]Hint:[/yellow] {escape(hint)}",
                soft_wrap=True,
                emoji=False,
            )


console = _ConsoleProxy(stderr=True)
out = _ConsoleProxy(stderr=False)


def configure_logging(verbose: bool = False) -> None:
    """Enable flagkit logs and route them to stderr.

    The level is DEBUG with *verbose*, otherwise ``$FLAGKIT_LOG_LEVEL``
    or WARNING.
    """
    level = "DEBUG" if verbose else os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    try:
        logger.level(level)
    except ValueError as exc:
        raise FlagkitError(
            f"Unknown log level: {level}",
            hint=f"Set {LOG_LEVEL_ENV} to DEBUG, INFO, WARNING, or ERROR.",
        ) from exc
    logger.remove()
    logger.add(sys.stderr, level=level, format="{level: <8} | {name}:{line} - {message}")
    logger.enable("flagkit")
