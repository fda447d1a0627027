"""
Module: collage.config

Purpose:
    Configuration for the collage engine. Immutable configuration with
    validation on construction.

Key Classes:
    - CollageConfig: Canvas size, background, history capacity, policies
    - FitMode: How a source image is fitted into its slot rect
    - FillPolicy: How compose decides whether enough slots are filled

Dependencies:
    - dataclasses (std)

Used By:
    - collage.engine: CollageEngine
    - collage.compositor: compose_collage
    - cli: collage subcommand
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from swoosh_toolkit.core.models import DEFAULT_MAIN_FRACTION


# Fixed collage output size in pixels
DEFAULT_CANVAS_WIDTH = 600
DEFAULT_CANVAS_HEIGHT = 600
DEFAULT_BACKGROUND = "white"
DEFAULT_HISTORY_LIMIT = 10


class FitMode(Enum):
    """How a slot image is fitted into its destination rect."""

    STRETCH = "stretch"
    """Resize to exactly the rect size, ignoring aspect ratio."""

    FILL = "fill"
    """Scale preserving aspect ratio to cover the rect, centre-crop the excess."""


class FillPolicy(Enum):
    """How can_compose() counts filled slots."""

    REQUIRED_SLOTS = "required_slots"
    """Every slot the layout reads must be filled."""

    TOTAL_COUNT = "total_count"
    """Enough filled slots anywhere in the set; unread slots may count."""


@dataclass(frozen=True)
class CollageConfig:
    """
    Configuration for composing collages (immutable).

    Attributes:
        canvas_width: Output width in pixels
        canvas_height: Output height in pixels
        background: Background colour (any PIL colour spec, must be opaque)
        history_limit: Maximum number of composed images kept in history
        fit_mode: How slot images are fitted to their rects
        fill_policy: How compose validates slot fill
        main_fraction: Width fraction of the main image in MAIN_WITH_SIDE

    Example:
        >>> config = CollageConfig()
        >>> config.canvas_size
        (600, 600)
    """

    canvas_width: int = DEFAULT_CANVAS_WIDTH
    canvas_height: int = DEFAULT_CANVAS_HEIGHT
    background: str = DEFAULT_BACKGROUND
    history_limit: int = DEFAULT_HISTORY_LIMIT
    fit_mode: FitMode = FitMode.STRETCH
    fill_policy: FillPolicy = FillPolicy.REQUIRED_SLOTS
    main_fraction: float = DEFAULT_MAIN_FRACTION

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.canvas_width < 2:
            raise ValueError(f"canvas_width must be >= 2: {self.canvas_width}")
        if self.canvas_height < 2:
            raise ValueError(f"canvas_height must be >= 2: {self.canvas_height}")
        if self.history_limit <= 0:
            raise ValueError(f"history_limit must be positive: {self.history_limit}")
        if not 0.0 < self.main_fraction < 1.0:
            raise ValueError(f"main_fraction must be in (0, 1): {self.main_fraction}")
        if not isinstance(self.fit_mode, FitMode):
            raise ValueError(f"fit_mode must be a FitMode: {self.fit_mode!r}")
        if not isinstance(self.fill_policy, FillPolicy):
            raise ValueError(f"fill_policy must be a FillPolicy: {self.fill_policy!r}")

    @property
    def canvas_size(self) -> tuple[int, int]:
        """(width, height) of the output canvas."""
        return (self.canvas_width, self.canvas_height)
