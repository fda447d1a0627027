"""
Swoosh Toolkit Core Package

Shared data models and errors used across the toolkit.
"""

from .models import SlotRect, CollageLayout
from .errors import IndexOutOfRangeError

__all__ = [
    "SlotRect",
    "CollageLayout",
    "IndexOutOfRangeError",
]
