"""
Logging setup for command-line use.
"""
from __future__ import annotations

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Configure root logging for command-line use.

    Args:
        level: Level number or name ("DEBUG", "info", ...)

    Raises:
        ValueError: If a level name is not recognised
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
