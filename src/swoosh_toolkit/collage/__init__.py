"""
Module: collage

Purpose:
    Collage engine: four image slots, a fixed set of layouts, a compose
    operation that rasterizes slots into one 600x600 image, and a bounded
    history of composed images.

Key Functions:
    - compose_collage(): Rasterize slots for a layout
    - fit_to_rect(): Fit one image to a destination size

Key Classes:
    - CollageEngine: Stateful engine (slots, layout, history)
    - CollageConfig: Configuration (canvas, history limit, policies)
    - CollageHistory: Bounded history of composed images

Dependencies:
    - PIL: Image manipulation
    - swoosh_toolkit.core.models: CollageLayout, SlotRect

Used By:
    - swoosh_toolkit.screens.collage: Collage screen controller
    - swoosh_toolkit.cli: collage subcommand
"""

from .config import CollageConfig, FitMode, FillPolicy
from .errors import ComposeError, InsufficientImagesError, RasterizationFailedError
from .compositor import compose_collage, fit_to_rect
from .history import CollageHistory
from .engine import CollageEngine, SLOT_COUNT

__all__ = [
    # Config
    "CollageConfig",
    "FitMode",
    "FillPolicy",
    # Errors
    "ComposeError",
    "InsufficientImagesError",
    "RasterizationFailedError",
    # Functions
    "compose_collage",
    "fit_to_rect",
    # Classes
    "CollageHistory",
    "CollageEngine",
    "SLOT_COUNT",
]
