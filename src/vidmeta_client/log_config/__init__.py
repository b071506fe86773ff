"""Logging configuration package."""

from .main import (
    SearchRequestContext,
    configure_logging,
    get_context_logger,
)


__all__ = [
    "get_context_logger",
    "configure_logging",
    "SearchRequestContext",
]
