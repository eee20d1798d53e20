"""Observability module for Identifi.

Structured logging with console output for development and JSON output
for production.

Example:
    >>> from identifi.observability import get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.info("packet.rejected", code="identifi:packet/invalid_rating")
"""

from identifi.observability.logging import (
    configure_logging,
    get_logger,
    is_debug_mode,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "is_debug_mode",
]
