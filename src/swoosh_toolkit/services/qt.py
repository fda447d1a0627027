"""
Module: services.qt

Purpose:
    PySide6-backed clipboard and speech services.

Key Classes:
    - QtClipboardService: System clipboard via QGuiApplication
    - QtSpeechService: Speech synthesis via QTextToSpeech

Dependencies:
    - PySide6: QtGui clipboard, QtTextToSpeech
    - PIL.ImageQt: PIL -> QImage conversion

Used By:
    - screens.compress: Copy action (desktop wiring)
    - screens.speech: Speech playback (desktop wiring)

Note:
    A QGuiApplication (or QApplication) must exist before these services
    are constructed.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from PIL import Image
from PIL.ImageQt import ImageQt
from PySide6.QtCore import QLocale
from PySide6.QtGui import QGuiApplication, QImage
from PySide6.QtTextToSpeech import QTextToSpeech

from .base import (
    DEFAULT_LANGUAGE,
    ClipboardService,
    ServiceError,
    SpeechBoundary,
    SpeechService,
)

logger = logging.getLogger(__name__)


def pil_to_qimage(image: Image.Image) -> QImage:
    """Convert a PIL image to a detached QImage (alpha preserved)."""
    # copy() detaches the QImage from the ImageQt buffer
    return QImage(ImageQt(image.convert("RGBA"))).copy()


class QtClipboardService(ClipboardService):
    """Clipboard backed by QGuiApplication.clipboard()."""

    def __init__(self) -> None:
        if QGuiApplication.instance() is None:
            raise ServiceError("QtClipboardService requires a running QGuiApplication")
        self._clipboard = QGuiApplication.clipboard()

    def copy_image(self, image: Image.Image) -> None:
        self._clipboard.setImage(pil_to_qimage(image))
        logger.debug(f"Copied {image.size} image to clipboard")

    def copy_text(self, text: str) -> None:
        self._clipboard.setText(text)


class QtSpeechService(SpeechService):
    """
    Speech synthesis backed by QTextToSpeech.

    Args:
        on_finished: Called when an utterance ends on its own or is stopped
        engine: QTextToSpeech engine name (None = platform default)
    """

    def __init__(
        self,
        on_finished: Optional[Callable[[], None]] = None,
        engine: Optional[str] = None,
    ) -> None:
        self._tts = QTextToSpeech(engine) if engine else QTextToSpeech()
        self._on_finished = on_finished
        self._was_speaking = False
        self._tts.stateChanged.connect(self._handle_state_changed)

    def speak(self, text: str, language: str = DEFAULT_LANGUAGE) -> None:
        if self._tts.state() == QTextToSpeech.State.Error:
            raise ServiceError(f"Speech engine error: {self._tts.errorString()}")
        self._tts.setLocale(QLocale(language.replace("-", "_")))
        self._tts.say(text)

    def stop(self, boundary: SpeechBoundary = SpeechBoundary.IMMEDIATE) -> None:
        hint = (
            QTextToSpeech.BoundaryHint.Word
            if boundary is SpeechBoundary.WORD
            else QTextToSpeech.BoundaryHint.Immediate
        )
        self._tts.stop(hint)

    @property
    def is_speaking(self) -> bool:
        return self._tts.state() == QTextToSpeech.State.Speaking

    def _handle_state_changed(self, state: QTextToSpeech.State) -> None:
        speaking = state == QTextToSpeech.State.Speaking
        if self._was_speaking and not speaking and self._on_finished is not None:
            self._on_finished()
        self._was_speaking = speaking
