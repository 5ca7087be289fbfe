import logging
import os

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "mcp_introspection"
LOG_LEVEL_ENV = "MCP_INTROSPECTION_LOG_LEVEL"
DEFAULT_LEVEL = "WARNING"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def resolve_level(level: str | int | None = None) -> int:
    """
    Turn a level name or number into a logging level.

    Falls back to the MCP_INTROSPECTION_LOG_LEVEL environment variable and
    then to WARNING. Unknown names raise ValueError.
    """
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV) or DEFAULT_LEVEL
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{level}'")
    return resolved


def configure_logging(
    level: str | int | None = None,
    logger: logging.Logger | None = None,
) -> logging.Logger:
    """Attach a single stderr RichHandler to the package logger."""
    if logger is None:
        logger = logging.getLogger(ROOT_LOGGER)

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger.setLevel(resolve_level(level))
    for existing in logger.handlers[:]:
        logger.removeHandler(existing)
    logger.addHandler(handler)

    return logger
