"""Logging setup for the command line."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING", console: Console | None = None) -> None:
    """Route the package's log records through rich.

    Args:
        level: Log level name, e.g. "INFO".
        console: Console to write to. Defaults to stderr.
    """
    handler = RichHandler(
        console=console if console is not None else Console(stderr=True),
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger("requireflow")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level.upper())
