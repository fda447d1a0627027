"""
Module: collage.errors

Purpose:
    Exceptions raised by the collage compose operation.

Key Classes:
    - ComposeError: Base class for compose failures
    - InsufficientImagesError: Layout needs more filled slots
    - RasterizationFailedError: Canvas allocation or drawing failed

Used By:
    - collage.engine, collage.compositor
    - screens.collage, cli
"""

from __future__ import annotations

from typing import Tuple


class ComposeError(Exception):
    """Error during collage composition."""
    pass


class InsufficientImagesError(ComposeError):
    """
    The active layout needs more filled slots.

    User-recoverable: the caller should ask for more images or pick another
    layout. Never retried automatically.

    Attributes:
        required: Number of slots the layout requires
        layout_name: Display label of the layout
        missing: Slot indices the layout reads that are empty
    """

    def __init__(
        self,
        required: int,
        layout_name: str,
        missing: Tuple[int, ...] = (),
    ) -> None:
        self.required = required
        self.layout_name = layout_name
        self.missing = tuple(missing)
        super().__init__(f"Need {required} images for the {layout_name} layout")


class RasterizationFailedError(ComposeError):
    """
    Canvas allocation or drawing failed (memory or image backend error).

    Engine state is unchanged when this is raised; the caller may retry.
    """
    pass
