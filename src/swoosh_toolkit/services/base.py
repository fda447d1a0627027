"""
Module: services.base

Purpose:
    Abstract interfaces for the platform services the screens delegate
    to. Each contract is deliberately narrow; implementations own all
    platform detail.

Key Classes:
    - BrightnessService: Read/write display brightness
    - SpeechService: Start/stop speech synthesis
    - ClipboardService: Copy images and text
    - PhotoLibraryService: Save images to the photo library
    - ShareService: Hand items to a share sheet
    - ImagePicker: Let the user pick one image
    - ServiceError: Exception for service failures

Dependencies:
    - PIL: Image type

Used By:
    - services.memory, services.desktop, services.qt: Implementations
    - screens: All screen controllers
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Sequence

from PIL import Image

DEFAULT_LANGUAGE = "en-US"


class ServiceError(Exception):
    """Platform service failed to perform an operation."""
    pass


class SpeechBoundary(Enum):
    """Where an in-progress utterance may be cut off."""

    IMMEDIATE = "immediate"
    WORD = "word"


class BrightnessService(ABC):
    """Display brightness, as a fraction in [0, 1]."""

    @abstractmethod
    def get_brightness(self) -> float:
        """
        Get the current display brightness.

        Returns:
            Brightness in [0, 1]
        """

    @abstractmethod
    def set_brightness(self, level: float) -> None:
        """
        Set the display brightness.

        Args:
            level: Brightness in [0, 1]

        Raises:
            ServiceError: If the platform rejects the change
        """


class SpeechService(ABC):
    """Text-to-speech synthesis."""

    @abstractmethod
    def speak(self, text: str, language: str = DEFAULT_LANGUAGE) -> None:
        """Start speaking `text` in `language` (BCP-47 tag)."""

    @abstractmethod
    def stop(self, boundary: SpeechBoundary = SpeechBoundary.IMMEDIATE) -> None:
        """Stop the current utterance at `boundary`. No-op when silent."""

    @property
    @abstractmethod
    def is_speaking(self) -> bool:
        """True while an utterance is in progress."""


class ClipboardService(ABC):
    """System clipboard."""

    @abstractmethod
    def copy_image(self, image: Image.Image) -> None:
        """Place an image on the clipboard."""

    @abstractmethod
    def copy_text(self, text: str) -> None:
        """Place text on the clipboard."""


class PhotoLibraryService(ABC):
    """User photo library."""

    @abstractmethod
    def save_image(self, image: Image.Image) -> str:
        """
        Save an image to the library.

        Returns:
            Identifier of the saved item (path, asset id)

        Raises:
            ServiceError: If the image could not be saved
        """


class ShareService(ABC):
    """Native share sheet."""

    @abstractmethod
    def share(self, items: Sequence[object]) -> None:
        """Present a share sheet for `items` (images and/or strings)."""


class ImagePicker(ABC):
    """Photo picker returning decoded images."""

    @abstractmethod
    def pick_image(self) -> Optional[Image.Image]:
        """
        Ask the user for one image.

        Returns:
            Decoded image, or None if the user cancelled
        """
