"""
Module: collage.history

Purpose:
    Bounded, oldest-first history of composed collage images.
    Appending at capacity evicts the oldest entry first.

Key Classes:
    - CollageHistory: Bounded image history

Dependencies:
    - collections.deque (std)

Used By:
    - collage.engine: CollageEngine
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterator, Optional, Tuple

from PIL import Image

from swoosh_toolkit.core.errors import check_index

logger = logging.getLogger(__name__)


class CollageHistory:
    """
    Bounded list of previously composed images, most recent last.

    Index 0 is always the oldest entry. Stored images are returned
    unchanged; the history never copies or mutates them.

    Example:
        >>> history = CollageHistory(limit=2)
        >>> history.append(a); history.append(b); history.append(c)
        >>> history.entries == (b, c)
        True
    """

    def __init__(self, limit: int = 10) -> None:
        """
        Initialize history.

        Args:
            limit: Maximum number of entries kept
        """
        if limit <= 0:
            raise ValueError(f"limit must be positive: {limit}")
        self.limit = limit
        self._entries: deque[Image.Image] = deque(maxlen=limit)

    def append(self, image: Image.Image) -> Optional[Image.Image]:
        """
        Append a composed image, evicting the oldest entry if full.

        Returns:
            The evicted image, or None if nothing was evicted
        """
        evicted = self._entries[0] if self.is_full else None
        self._entries.append(image)
        if evicted is not None:
            logger.debug(f"History full ({self.limit}), evicted oldest entry")
        return evicted

    def get(self, index: int) -> Image.Image:
        """
        Get an entry without modifying the history.

        Raises:
            IndexOutOfRangeError: If index not in [0, len)
        """
        check_index(index, len(self._entries), "history")
        return self._entries[index]

    def delete(self, index: int) -> Image.Image:
        """
        Remove one entry.

        Returns:
            The removed image

        Raises:
            IndexOutOfRangeError: If index not in [0, len)
        """
        check_index(index, len(self._entries), "history")
        image = self._entries[index]
        del self._entries[index]
        return image

    def clear(self) -> int:
        """Remove all entries. Returns how many were removed."""
        count = len(self._entries)
        self._entries.clear()
        return count

    @property
    def entries(self) -> Tuple[Image.Image, ...]:
        """Snapshot of entries, oldest first."""
        return tuple(self._entries)

    @property
    def is_full(self) -> bool:
        return len(self._entries) >= self.limit

    @property
    def latest(self) -> Optional[Image.Image]:
        """Most recent entry, or None if empty."""
        return self._entries[-1] if self._entries else None

    def get_stats(self) -> dict:
        """
        Get statistics about history usage.

        Returns:
            dict: count, limit and whether the history is full
        """
        return {
            "count": len(self._entries),
            "limit": self.limit,
            "full": self.is_full,
        }

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Image.Image]:
        return iter(tuple(self._entries))

    def __bool__(self) -> bool:
        return bool(self._entries)
