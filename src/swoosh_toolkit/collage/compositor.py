"""
Module: collage.compositor

Purpose:
    Rasterizes slot images into a single collage image according to a
    layout. Pure functions: no engine state is read or written here.

Key Functions:
    - fit_to_rect(): Fit one source image to a destination size
    - compose_collage(): Draw the used slots of a layout onto a new canvas

Dependencies:
    - PIL.Image, PIL.ImageOps: Resizing, centre-cropping, pasting
    - collage.config: CollageConfig, FitMode

Used By:
    - collage.engine: CollageEngine.compose
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from PIL import Image, ImageOps

from swoosh_toolkit.core.models import CollageLayout

from .config import CollageConfig, FitMode
from .errors import RasterizationFailedError

logger = logging.getLogger(__name__)

_ALPHA_MODES = ("RGBA", "LA", "RGBa", "La", "PA")


def _has_alpha(image: Image.Image) -> bool:
    """True if pasting the image needs its alpha channel as a mask."""
    if image.mode in _ALPHA_MODES:
        return True
    return image.mode == "P" and "transparency" in image.info


def fit_to_rect(
    image: Image.Image,
    size: Tuple[int, int],
    mode: FitMode = FitMode.STRETCH,
) -> Image.Image:
    """
    Fit a source image to exactly `size`.

    STRETCH resizes straight to the rect, distorting the aspect ratio.
    FILL scales preserving aspect ratio until the rect is covered and
    centre-crops the excess.

    Args:
        image: Source image (not modified)
        size: (width, height) of the destination rect
        mode: Fit mode

    Returns:
        New image of exactly `size`, in RGBA if the source had alpha,
        otherwise RGB

    Example:
        >>> fitted = fit_to_rect(Image.new("RGB", (800, 200)), (300, 600))
        >>> fitted.size
        (300, 600)
    """
    source = image.convert("RGBA") if _has_alpha(image) else image.convert("RGB")

    if source.size == size:
        return source.copy()

    if mode is FitMode.STRETCH:
        return source.resize(size, Image.Resampling.LANCZOS)

    return ImageOps.fit(
        source,
        size,
        method=Image.Resampling.LANCZOS,
        centering=(0.5, 0.5),
    )


def compose_collage(
    slots: Sequence[Optional[Image.Image]],
    layout: CollageLayout,
    config: CollageConfig,
) -> Image.Image:
    """
    Compose slot images into one collage image.

    Allocates an opaque canvas of `config.canvas_size` filled with the
    background colour, then draws each filled slot the layout reads into
    its rect. In the grid, empty slots leave their rect showing the
    background; the other layouts draw nothing unless every slot they
    read is filled. Slots beyond the layout's required count are ignored.

    Args:
        slots: Slot images indexed by slot number (None = empty)
        layout: Layout whose partition to use
        config: Canvas size, background and fit mode

    Returns:
        New RGB image of `config.canvas_size`

    Raises:
        RasterizationFailedError: If allocating or drawing the canvas fails

    Example:
        >>> img = compose_collage([a, b, None, None], CollageLayout.VERTICAL_SPLIT, CollageConfig())
        >>> img.size
        (600, 600)
    """
    rects = layout.slot_rects(
        config.canvas_width,
        config.canvas_height,
        main_fraction=config.main_fraction,
    )

    sources = [slots[rect.slot] if rect.slot < len(slots) else None for rect in rects]
    if not layout.draws_partial and any(source is None for source in sources):
        logger.debug(f"{layout.label} layout not fully filled, leaving canvas blank")
        rects, sources = (), []

    try:
        canvas = Image.new("RGB", config.canvas_size, config.background)

        for rect, source in zip(rects, sources):
            if source is None:
                logger.debug(f"Slot {rect.slot} empty, leaving {rect.box} as background")
                continue

            fitted = fit_to_rect(source, rect.size, config.fit_mode)
            if fitted.mode == "RGBA":
                canvas.paste(fitted, (rect.left, rect.top), fitted)
            else:
                canvas.paste(fitted, (rect.left, rect.top))
    except (MemoryError, OSError, ValueError) as e:
        raise RasterizationFailedError(f"Failed to rasterize {layout.label} collage: {e}") from e

    logger.debug(f"Composed {layout.label} collage {canvas.size} from {len(rects)} rects")
    return canvas
