"""
Module: collage.engine

Purpose:
    The collage engine: four image slots, the active layout, compose,
    and a bounded history of composed images. Single-owner, synchronous;
    never calls platform services itself.

Key Classes:
    - CollageEngine: Slot/layout state, compose and history operations

Dependencies:
    - PIL: Image type
    - collage.compositor: compose_collage
    - collage.history: CollageHistory

Used By:
    - screens.collage: CollageScreen
    - cli: collage subcommand
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from PIL import Image

from swoosh_toolkit.core.errors import check_index
from swoosh_toolkit.core.models import CollageLayout

from .compositor import compose_collage
from .config import CollageConfig, FillPolicy
from .errors import InsufficientImagesError
from .history import CollageHistory

logger = logging.getLogger(__name__)

SLOT_COUNT = 4


class CollageEngine:
    """
    Owns the slot set, the active layout and the compose history.

    Readiness ("under-filled" vs "ready to compose") is derived from the
    slots and layout on every call, never stored.

    Example:
        >>> engine = CollageEngine()
        >>> engine.set_layout(CollageLayout.VERTICAL_SPLIT)
        >>> engine.set_slot(0, left); engine.set_slot(1, right)
        >>> collage = engine.compose()
        >>> collage.size, len(engine.history)
        ((600, 600), 1)
    """

    def __init__(
        self,
        config: Optional[CollageConfig] = None,
        layout: CollageLayout = CollageLayout.GRID_2X2,
    ) -> None:
        self.config = config or CollageConfig()
        self._slots: List[Optional[Image.Image]] = [None] * SLOT_COUNT
        self._layout = CollageLayout.from_name(layout)
        self._history = CollageHistory(self.config.history_limit)
        self._current: Optional[Image.Image] = None

    # ─────────────────────────────────────────────────────────────────────────
    # Slots and layout
    # ─────────────────────────────────────────────────────────────────────────

    def set_slot(self, index: int, image: Optional[Image.Image]) -> None:
        """
        Replace a slot unconditionally.

        Args:
            index: Slot index in [0, 4)
            image: Decoded image, or None to clear the slot

        Raises:
            IndexOutOfRangeError: If index is out of range
        """
        check_index(index, SLOT_COUNT, "slot")
        self._slots[index] = image
        logger.debug(f"Slot {index} {'cleared' if image is None else 'set'}")

    def clear_slot(self, index: int) -> None:
        """Empty a single slot."""
        self.set_slot(index, None)

    def get_slot(self, index: int) -> Optional[Image.Image]:
        """Image in a slot, or None if empty."""
        check_index(index, SLOT_COUNT, "slot")
        return self._slots[index]

    def set_layout(self, layout: "CollageLayout | str") -> None:
        """
        Select the active layout.

        Does not validate slot fill; fill is checked at compose time.
        Slots are never touched.
        """
        self._layout = CollageLayout.from_name(layout)
        logger.debug(f"Layout set to {self._layout.label}")

    @property
    def layout(self) -> CollageLayout:
        return self._layout

    @property
    def slots(self) -> Tuple[Optional[Image.Image], ...]:
        """Snapshot of all 4 slots."""
        return tuple(self._slots)

    @property
    def filled_count(self) -> int:
        """Number of non-empty slots across the whole set."""
        return sum(1 for image in self._slots if image is not None)

    def missing_slots(self) -> Tuple[int, ...]:
        """Slot indices the active layout reads that are empty."""
        return tuple(i for i in self._layout.used_slots if self._slots[i] is None)

    # ─────────────────────────────────────────────────────────────────────────
    # Compose
    # ─────────────────────────────────────────────────────────────────────────

    def can_compose(self) -> bool:
        """
        Check whether compose() would pass fill validation.

        REQUIRED_SLOTS: every slot in 0 ..< required_count is filled.
        TOTAL_COUNT: at least required_count slots are filled anywhere.
        """
        if self.config.fill_policy is FillPolicy.TOTAL_COUNT:
            return self.filled_count >= self._layout.required_count
        return not self.missing_slots()

    def compose(self) -> Image.Image:
        """
        Rasterize the active layout into a new image.

        On success the image becomes the current result and is appended to
        history (evicting the oldest entry at capacity). On failure nothing
        is mutated.

        Returns:
            Composed RGB image of config.canvas_size

        Raises:
            InsufficientImagesError: If fill validation fails
            RasterizationFailedError: If the canvas could not be drawn
        """
        layout = self._layout
        if not self.can_compose():
            missing = self.missing_slots()
            logger.info(
                f"Compose refused: {layout.label} needs {layout.required_count} images, "
                f"missing slots {list(missing)}"
            )
            raise InsufficientImagesError(layout.required_count, layout.label, missing)

        image = compose_collage(self._slots, layout, self.config)

        self._current = image
        evicted = self._history.append(image)
        logger.info(
            f"Composed {layout.label} collage; history {len(self._history)}/{self._history.limit}"
            + (" (evicted oldest)" if evicted is not None else "")
        )
        return image

    @property
    def current(self) -> Optional[Image.Image]:
        """Most recently composed or restored image, None after reset()."""
        return self._current

    # ─────────────────────────────────────────────────────────────────────────
    # History
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def history(self) -> Tuple[Image.Image, ...]:
        """Composed images, oldest first."""
        return self._history.entries

    def restore(self, history_index: int) -> Image.Image:
        """
        Return a stored image unchanged and make it the current result.

        Slots, layout and history are not modified.

        Raises:
            IndexOutOfRangeError: If history_index is invalid
        """
        image = self._history.get(history_index)
        self._current = image
        logger.debug(f"Restored history entry {history_index}")
        return image

    def delete_history_entry(self, history_index: int) -> None:
        """
        Remove one history entry.

        Raises:
            IndexOutOfRangeError: If history_index is invalid (including empty history)
        """
        self._history.delete(history_index)
        logger.debug(f"Deleted history entry {history_index}")

    def clear_history(self) -> None:
        """Remove all history entries."""
        count = self._history.clear()
        logger.debug(f"Cleared {count} history entries")

    # ─────────────────────────────────────────────────────────────────────────
    # Session
    # ─────────────────────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Empty all slots and drop the current result. History is kept."""
        self._slots = [None] * SLOT_COUNT
        self._current = None
        logger.debug("Slots reset")

    def get_stats(self) -> dict:
        """Snapshot of engine state for display and diagnostics."""
        return {
            "layout": self._layout.label,
            "filled": self.filled_count,
            "required": self._layout.required_count,
            "ready": self.can_compose(),
            "history": self._history.get_stats(),
        }
