"""Console output and logging helpers for the CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print a success line."""
    console.print(f"[green]✓[/green] {escape(message)}", soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error line."""
    console.print(f"[red]✗[/red] {escape(message)}", soft_wrap=True)


def setup_logging(level: str | int) -> None:
    """Route log records to stderr through rich.

    Args:
        level: Logging level name or number for the ``xsemver`` logger.
    """
    logger = logging.getLogger("xsemver")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(
            RichHandler(console=err_console, show_path=False, show_time=False)
        )
