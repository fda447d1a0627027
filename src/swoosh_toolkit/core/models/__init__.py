"""
Core Models Package

Immutable data models shared by the collage engine and the screens.

- `SlotRect`: destination rectangle on the canvas bound to one slot
- `CollageLayout`: closed enumeration of canvas partitions
"""

from .rects import SlotRect
from .layouts import CollageLayout, DEFAULT_MAIN_FRACTION

__all__ = [
    "SlotRect",
    "CollageLayout",
    "DEFAULT_MAIN_FRACTION",
]
