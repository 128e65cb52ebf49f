"""Central logging setup for the command line."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"


def resolve_level(level: str | int) -> int:
    """
    Turn a level name ("debug", "WARNING") or number into a logging level.

    Raises:
        ValueError: If the name is not a registered logging level
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(level: str | int = logging.WARNING) -> None:
    """
    Send log records to stderr through rich.

    Library modules only create loggers; handlers are installed here, once,
    by the CLI.
    """
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
