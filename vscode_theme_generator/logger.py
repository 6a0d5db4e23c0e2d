"""Logging configuration using loguru.

The library itself never writes anywhere: the default loguru handler is
removed on import and only the CLI attaches a stderr sink.
"""

import sys
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    import loguru

# Remove default handler
logger.remove()

CONSOLE_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"


class _LoggingState:
    """Tracks the console sink so it can be swapped or removed."""

    def __init__(self) -> None:
        self.console_handler_id: int | None = None


_state = _LoggingState()


def get_logger(name: str) -> "loguru.Logger":
    """Get a logger instance with the given name.

    Args:
        name: The name for the logger (typically __name__).

    Returns:
        A logger bound with ``name``.
    """
    return logger.bind(name=name)


def enable_console(level: str = "INFO", sink=None) -> int:
    """Send log records to stderr (or ``sink``).

    Calling it again replaces the previous console sink.

    Args:
        level: Minimum level to emit.
        sink: Optional loguru sink, defaults to ``sys.stderr``.

    Returns:
        The loguru handler id.
    """
    disable_console()
    _state.console_handler_id = logger.add(
        sink if sink is not None else sys.stderr,
        level=level,
        format=CONSOLE_FORMAT,
        colorize=sink is None,
    )
    return _state.console_handler_id


def disable_console() -> None:
    """Remove the console sink if one is installed."""
    if _state.console_handler_id is not None:
        logger.remove(_state.console_handler_id)
        _state.console_handler_id = None
