"""Shared utilities."""

from .logging_utils import LOG_FORMAT, configure_logging

__all__ = [
    "LOG_FORMAT",
    "configure_logging",
]
