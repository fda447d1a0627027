"""
Module: services.memory

Purpose:
    In-process implementations of every service contract. Used for
    headless runs and as the default wiring where no platform backend
    exists. Each keeps what it was given so callers can inspect it.

Key Classes:
    - MemoryBrightnessService
    - MemorySpeechService
    - MemoryClipboardService
    - MemoryPhotoLibrary
    - MemoryShareService
    - QueuedImagePicker

Dependencies:
    - PIL: Image type
    - services.base: Contracts

Used By:
    - screens (default wiring), tests
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, List, Optional, Sequence, Tuple

from PIL import Image

from .base import (
    DEFAULT_LANGUAGE,
    BrightnessService,
    ClipboardService,
    ImagePicker,
    PhotoLibraryService,
    ServiceError,
    ShareService,
    SpeechBoundary,
    SpeechService,
)

logger = logging.getLogger(__name__)


class MemoryBrightnessService(BrightnessService):
    """Brightness held in memory, clamped to [0, 1]."""

    def __init__(self, level: float = 0.5) -> None:
        self._level = min(max(level, 0.0), 1.0)

    def get_brightness(self) -> float:
        return self._level

    def set_brightness(self, level: float) -> None:
        if not 0.0 <= level <= 1.0:
            raise ServiceError(f"Brightness out of range: {level}")
        self._level = level


class MemorySpeechService(SpeechService):
    """
    Records utterances instead of speaking them.

    An utterance stays "in progress" until stop() or finish() is called.
    """

    def __init__(self) -> None:
        self.spoken: List[Tuple[str, str]] = []
        self.stops: List[SpeechBoundary] = []
        self._speaking = False

    def speak(self, text: str, language: str = DEFAULT_LANGUAGE) -> None:
        self.spoken.append((text, language))
        self._speaking = True

    def stop(self, boundary: SpeechBoundary = SpeechBoundary.IMMEDIATE) -> None:
        if self._speaking:
            self.stops.append(boundary)
        self._speaking = False

    def finish(self) -> None:
        """Simulate the current utterance reaching its end."""
        self._speaking = False

    @property
    def is_speaking(self) -> bool:
        return self._speaking


class MemoryClipboardService(ClipboardService):
    """Clipboard holding the last copied item."""

    def __init__(self) -> None:
        self.content: Optional[object] = None

    def copy_image(self, image: Image.Image) -> None:
        self.content = image

    def copy_text(self, text: str) -> None:
        self.content = text


class MemoryPhotoLibrary(PhotoLibraryService):
    """Photo library backed by a list; identifiers are "memory://<n>"."""

    def __init__(self) -> None:
        self.saved: List[Image.Image] = []

    def save_image(self, image: Image.Image) -> str:
        self.saved.append(image)
        return f"memory://{len(self.saved) - 1}"


class MemoryShareService(ShareService):
    """Records each share request."""

    def __init__(self) -> None:
        self.shared: List[Tuple[object, ...]] = []

    def share(self, items: Sequence[object]) -> None:
        self.shared.append(tuple(items))


class QueuedImagePicker(ImagePicker):
    """
    Picker that returns queued images in order.

    A queued None, or an exhausted queue, counts as a cancelled pick.
    """

    def __init__(self, images: Iterable[Optional[Image.Image]] = ()) -> None:
        self._queue: deque[Optional[Image.Image]] = deque(images)

    def push(self, image: Optional[Image.Image]) -> None:
        self._queue.append(image)

    def pick_image(self) -> Optional[Image.Image]:
        if not self._queue:
            logger.debug("Picker queue empty, treating as cancel")
            return None
        return self._queue.popleft()
