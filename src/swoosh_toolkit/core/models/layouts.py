"""
Module: layouts

Purpose:
    Provides the CollageLayout enumeration - the closed set of canvas
    partitions a collage can use. Each member carries its display label
    and required slot count as data; its partition is a pure function of
    the canvas size.

Key Functions:
    - CollageLayout.required_count: Number of slots the layout reads
    - CollageLayout.used_slots: Slot indices the layout reads
    - CollageLayout.draws_partial: Whether a partly filled layout still draws
    - CollageLayout.slot_rects(width, height): Partition the canvas
    - CollageLayout.from_name(value): Resolve a member from name or label

Dependencies:
    - enum (std)
    - core.models.rects.SlotRect

Used By:
    - collage.engine.CollageEngine
    - collage.compositor
    - screens.collage
    - cli
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from .rects import SlotRect

# Fraction of canvas width taken by the main image in MAIN_WITH_SIDE
DEFAULT_MAIN_FRACTION = 0.7


class CollageLayout(Enum):
    """
    Fixed collage layouts.

    Member values are (label, required_count). Slots used by a layout are
    always the prefix 0 ..< required_count.

    Example:
        >>> CollageLayout.MAIN_WITH_SIDE.required_count
        3
        >>> [r.box for r in CollageLayout.VERTICAL_SPLIT.slot_rects(600, 600)]
        [(0, 0, 300, 600), (300, 0, 600, 600)]
    """

    GRID_2X2 = ("Grid", 4)
    VERTICAL_SPLIT = ("Vertical", 2)
    HORIZONTAL_SPLIT = ("Horizontal", 2)
    MAIN_WITH_SIDE = ("Main + Side", 3)

    def __init__(self, label: str, required_count: int) -> None:
        self.label = label
        self.required_count = required_count

    @property
    def used_slots(self) -> range:
        """Slot indices read by this layout."""
        return range(self.required_count)

    @property
    def draws_partial(self) -> bool:
        """
        Whether a partly filled layout still draws its filled slots.

        Only the grid draws slot by slot; the split layouts draw all of
        their slots or none.
        """
        return self is CollageLayout.GRID_2X2

    def slot_rects(
        self,
        width: int,
        height: int,
        *,
        main_fraction: float = DEFAULT_MAIN_FRACTION,
    ) -> Tuple[SlotRect, ...]:
        """
        Partition a canvas into destination rects, one per used slot.

        Splits use integer division; the right/bottom rect absorbs any odd
        pixel so the rects always tile the canvas exactly.

        Args:
            width: Canvas width in pixels
            height: Canvas height in pixels
            main_fraction: Width fraction of the main image (MAIN_WITH_SIDE only)

        Returns:
            Tuple of SlotRects ordered by slot index

        Raises:
            ValueError: If the canvas is too small to split
        """
        if width < 2 or height < 2:
            raise ValueError(f"Canvas too small to partition: {width}x{height}")

        half_w = width // 2
        half_h = height // 2

        if self is CollageLayout.GRID_2X2:
            # Row-major quadrants
            return (
                SlotRect(0, 0, 0, half_w, half_h),
                SlotRect(1, half_w, 0, width, half_h),
                SlotRect(2, 0, half_h, half_w, height),
                SlotRect(3, half_w, half_h, width, height),
            )

        if self is CollageLayout.VERTICAL_SPLIT:
            return (
                SlotRect(0, 0, 0, half_w, height),
                SlotRect(1, half_w, 0, width, height),
            )

        if self is CollageLayout.HORIZONTAL_SPLIT:
            return (
                SlotRect(0, 0, 0, width, half_h),
                SlotRect(1, 0, half_h, width, height),
            )

        if not 0.0 < main_fraction < 1.0:
            raise ValueError(f"main_fraction must be in (0, 1): {main_fraction}")
        main_w = min(max(int(round(width * main_fraction)), 1), width - 1)
        return (
            SlotRect(0, 0, 0, main_w, height),
            SlotRect(1, main_w, 0, width, half_h),
            SlotRect(2, main_w, half_h, width, height),
        )

    @classmethod
    def from_name(cls, value: "str | CollageLayout") -> CollageLayout:
        """
        Resolve a layout from a member, member name or display label.

        Matching ignores case, hyphens, underscores and spaces, so
        "grid2x2", "GRID_2X2", "main-with-side" and "Main + Side" all resolve.

        Raises:
            ValueError: If nothing matches
        """
        if isinstance(value, cls):
            return value

        def _norm(text: str) -> str:
            return "".join(ch for ch in text.lower() if ch.isalnum())

        wanted = _norm(str(value))
        for member in cls:
            if wanted in (_norm(member.name), _norm(member.label)):
                return member
        raise ValueError(f"Unknown collage layout: {value!r}")

    def __str__(self) -> str:
        return self.label
