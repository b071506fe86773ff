"""Logging configuration and utilities."""

import logging
from typing import Any

import structlog

from ..exceptions import VidmetaConfigError


def get_context_logger(name: str) -> structlog.BoundLogger:
    """Get a context-aware logger.

    Args:
        name: Logger name

    Returns:
        Structured logger instance
    """
    return structlog.get_logger(name)


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """Configure structlog for the whole process.

    Args:
        level: Minimum log level name (e.g. "DEBUG", "INFO")
        json_output: Render JSON lines instead of the console renderer

    Raises:
        VidmetaConfigError: If ``level`` is not a known level name
    """
    level_no = logging.getLevelName(level.upper())
    # getLevelName maps unknown names to a "Level X" string
    if not isinstance(level_no, int):
        raise VidmetaConfigError(f"Unknown log level: {level!r}")

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_no),
    )


class SearchRequestContext:
    """Context manager binding request fields (query, region, ...) to every log line."""

    def __init__(self, **context: Any):
        """Initialize with context variables.

        Args:
            **context: Context key-value pairs
        """
        self.context = context

    def __enter__(self):
        """Enter context."""
        structlog.contextvars.bind_contextvars(**self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context."""
        structlog.contextvars.unbind_contextvars(*self.context.keys())


__all__ = [
    "get_context_logger",
    "configure_logging",
    "SearchRequestContext",
]
