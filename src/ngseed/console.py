"""Styled terminal output and logging setup."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

__all__ = [
    "DEBUG",
    "ERROR",
    "INFO",
    "VERBOSE",
    "VERBOSE_PRIORITY",
    "WARN",
    "Logger",
    "configure_logging",
]


INFO = "[green]%s[/green]"
WARN = "[bold yellow]%s[/bold yellow]"
ERROR = "[bold red]%s[/bold red]"
VERBOSE = "[blue]%s[/blue]"
VERBOSE_PRIORITY = "[bold blue]%s[/bold blue]"
DEBUG = "[magenta]%s[/magenta]"

_LOGGING_CONFIGURED = False


def configure_logging(*, debug: bool = False) -> None:
    """Install a Rich handler on the root logger once per process."""

    global _LOGGING_CONFIGURED  # noqa: PLW0603
    if _LOGGING_CONFIGURED:
        return
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
    )
    _LOGGING_CONFIGURED = True


class Logger:
    """Print human readable messages through one of the style templates."""

    def __init__(
        self,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        self.console = console or Console()
        if error_console is None:
            error_console = Console(stderr=True) if console is None else console
        self.error_console = error_console

    def log(self, template: str, message: object) -> None:
        """Render ``message`` into ``template`` and print it."""

        self.console.print(template % escape(str(message)), soft_wrap=True)

    def info(self, message: object) -> None:
        self.log(INFO, message)

    def warn(self, message: object) -> None:
        self.log(WARN, message)

    def error(self, message: object) -> None:
        self.error_console.print(ERROR % escape(str(message)), soft_wrap=True)
