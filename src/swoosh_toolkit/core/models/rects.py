"""
Module: rects

Purpose:
    Provides the SlotRect dataclass - a destination rectangle on the
    collage canvas bound to one slot index. Layouts partition the canvas
    into SlotRects; the compositor draws each slot image into its rect.

Key Functions:
    - SlotRect.box: (left, top, right, bottom) tuple for PIL
    - SlotRect.contains(x, y): Check if a pixel is inside the rect
    - SlotRect.overlaps(other): Check for overlap with another rect

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.layouts.CollageLayout
    - collage.compositor
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SlotRect:
    """
    Canvas region bound to a slot, in pixels.

    The region is [left, right) x [top, bottom):
    - left and top are inclusive
    - right and bottom are exclusive

    Attributes:
        slot: Slot index (0..3) whose image fills this rect
        left: X-coordinate of left edge (inclusive)
        top: Y-coordinate of top edge (inclusive)
        right: X-coordinate of right edge (exclusive)
        bottom: Y-coordinate of bottom edge (exclusive)

    Invariants:
        - slot >= 0
        - left >= 0, top >= 0
        - right > left, bottom > top

    Example:
        >>> rect = SlotRect(slot=1, left=300, top=0, right=600, bottom=600)
        >>> rect.size
        (300, 600)
        >>> rect.contains(599, 0)
        True
        >>> rect.contains(600, 0)  # right is exclusive
        False
    """

    slot: int
    left: int
    top: int
    right: int
    bottom: int

    def __post_init__(self) -> None:
        """Validate rect on construction."""
        if self.slot < 0:
            raise ValueError(f"slot must be >= 0: {self.slot}")
        if self.left < 0:
            raise ValueError(f"left must be >= 0: {self.left}")
        if self.top < 0:
            raise ValueError(f"top must be >= 0: {self.top}")
        if self.right <= self.left:
            raise ValueError(f"right must be > left: {self.right} <= {self.left}")
        if self.bottom <= self.top:
            raise ValueError(f"bottom must be > top: {self.bottom} <= {self.top}")

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def width(self) -> int:
        """Width of the rect in pixels."""
        return self.right - self.left

    @property
    def height(self) -> int:
        """Height of the rect in pixels."""
        return self.bottom - self.top

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) tuple, as PIL expects for resizing."""
        return (self.width, self.height)

    @property
    def box(self) -> tuple[int, int, int, int]:
        """(left, top, right, bottom) tuple for PIL paste/crop."""
        return (self.left, self.top, self.right, self.bottom)

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def contains(self, x: int, y: int) -> bool:
        """
        Check if a pixel coordinate lies within this rect.

        Args:
            x: X-coordinate to check
            y: Y-coordinate to check

        Returns:
            True if left <= x < right and top <= y < bottom
        """
        return self.left <= x < self.right and self.top <= y < self.bottom

    def overlaps(self, other: SlotRect) -> bool:
        """
        Check if this rect shares at least one pixel with another.

        Adjacent rects (one.right == other.left) do NOT overlap.
        """
        return not (
            self.right <= other.left
            or other.right <= self.left
            or self.bottom <= other.top
            or other.bottom <= self.top
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"SlotRect(slot={self.slot}, box={self.box})"
