"""
Module: screens

Purpose:
    Headless screen controllers. Each screen owns its UI state as a plain
    dataclass and exposes the user actions as methods; a UI layer binds
    widgets to the state and calls the actions.

Key Classes:
    - CollageScreen: Collage creator
    - CompressScreen: Image compressor
    - BrightnessScreen: Display brightness
    - SpeechScreen: Text to speech
    - Toast, Alert: Transient feedback

Used By:
    - UI layer
"""

from .overlays import Alert, Toast
from .collage import CollageScreen, CollageScreenState
from .compress import CompressScreen, CompressScreenState
from .brightness import (
    BrightnessConfig,
    BrightnessScreen,
    BrightnessScreenState,
    symbol_for,
)
from .speech import SpeechScreen, SpeechScreenState

__all__ = [
    "Alert",
    "Toast",
    "CollageScreen",
    "CollageScreenState",
    "CompressScreen",
    "CompressScreenState",
    "BrightnessConfig",
    "BrightnessScreen",
    "BrightnessScreenState",
    "symbol_for",
    "SpeechScreen",
    "SpeechScreenState",
]
