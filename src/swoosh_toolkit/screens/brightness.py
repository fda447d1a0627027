"""
Module: screens.brightness

Purpose:
    Display brightness screen controller: a 0-100 % slider snapped to a
    step, quick presets, an auto-brightness toggle, and the colour
    scheme derived from the current level.

Key Classes:
    - BrightnessConfig: Slider step and presets
    - BrightnessScreenState: UI state
    - BrightnessScreen: Screen controller

Dependencies:
    - colorsys (std): Gradient stops
    - services.BrightnessService

Used By:
    - UI layer
"""

from __future__ import annotations

import colorsys
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from swoosh_toolkit.services import (
    BrightnessService,
    MemoryBrightnessService,
    ServiceError,
)

from .overlays import Toast

logger = logging.getLogger(__name__)

# (hue, saturation, brightness multiplier) for each gradient stop
GRADIENT_STOPS: Tuple[Tuple[float, float, float], ...] = (
    (0.58, 0.8, 0.8),
    (0.55, 0.9, 0.85),
    (0.52, 1.0, 0.9),
    (0.50, 1.0, 1.0),
    (0.47, 0.9, 0.9),
    (0.45, 0.8, 0.85),
    (0.42, 0.7, 0.8),
)


@dataclass(frozen=True)
class BrightnessConfig:
    """
    Slider configuration (immutable).

    Attributes:
        step: Slider step in percent
        presets: Quick preset levels in percent
    """

    step: int = 5
    presets: Tuple[int, ...] = (25, 50, 75, 100)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not 0 < self.step <= 100:
            raise ValueError(f"step must be in (0, 100]: {self.step}")
        for level in self.presets:
            if not 0 <= level <= 100:
                raise ValueError(f"preset out of range: {level}")


@dataclass
class BrightnessScreenState:
    """
    UI state of the brightness screen.

    Attributes:
        value: Brightness percent in [0, 100]
        auto_brightness: Whether the auto-brightness toggle is on
        editing: Whether the slider is being dragged
        toast: Toast currently shown, or None
    """

    value: float = 50.0
    auto_brightness: bool = False
    editing: bool = False
    toast: Optional[Toast] = None


def symbol_for(level: int) -> str:
    """Symbol shown on a preset button for a brightness level."""
    if level <= 25:
        return "moon.fill"
    if level <= 50:
        return "sun.min.fill"
    return "sun.max.fill"


class BrightnessScreen:
    """Controller for the brightness screen."""

    def __init__(
        self,
        service: Optional[BrightnessService] = None,
        config: Optional[BrightnessConfig] = None,
    ) -> None:
        self.service = service or MemoryBrightnessService()
        self.config = config or BrightnessConfig()
        self.state = BrightnessScreenState()

    def on_appear(self) -> None:
        """Sync the slider with the current display brightness."""
        self.state.value = self.service.get_brightness() * 100

    def _snap(self, value: float) -> float:
        clamped = min(max(value, 0.0), 100.0)
        return float(min(round(clamped / self.config.step) * self.config.step, 100))

    def _apply(self) -> bool:
        try:
            self.service.set_brightness(self.state.value / 100.0)
        except ServiceError as e:
            logger.warning(f"Could not set brightness: {e}")
            self.state.toast = Toast("Could not change brightness")
            return False
        return True

    def set_value(self, value: float) -> float:
        """Move the slider; the snapped value is applied immediately."""
        self.state.value = self._snap(value)
        self._apply()
        return self.state.value

    def begin_edit(self) -> None:
        self.state.editing = True

    def end_edit(self) -> None:
        """Finish a slider drag: apply and confirm with a toast."""
        self.state.editing = False
        if self._apply():
            self.state.toast = Toast(f"Brightness set to {int(self.state.value)}%")

    def apply_preset(self, level: int) -> None:
        if level not in self.config.presets:
            raise ValueError(f"Unknown preset: {level}")
        self.state.value = float(level)
        if self._apply():
            self.state.toast = Toast(f"Brightness set to {level}%")

    def set_auto_brightness(self, enabled: bool) -> None:
        self.state.auto_brightness = enabled
        self.state.toast = Toast(
            "Auto brightness enabled" if enabled else "Auto brightness disabled"
        )

    @property
    def slider_visible(self) -> bool:
        return not self.state.auto_brightness

    @property
    def foreground_color(self) -> str:
        """Text/icon colour readable on the current gradient."""
        return "black" if self.state.value > 50 else "white"

    def is_preset_selected(self, level: int) -> bool:
        return self.state.value == float(level)

    @property
    def gradient_colors(self) -> List[str]:
        """Background gradient stops as "#rrggbb", darker at lower brightness."""
        level = self.state.value / 100.0
        colors = []
        for hue, saturation, factor in GRADIENT_STOPS:
            r, g, b = colorsys.hsv_to_rgb(hue, saturation, min(level * factor, 1.0))
            colors.append(f"#{round(r * 255):02x}{round(g * 255):02x}{round(b * 255):02x}")
        return colors
