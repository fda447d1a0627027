"""
Module: screens.speech

Purpose:
    Text-to-speech screen controller: edit text, play/stop it through a
    SpeechService, clear it, or share it.

Key Classes:
    - SpeechScreenState: UI state
    - SpeechScreen: Screen controller

Dependencies:
    - services: SpeechService, ShareService

Used By:
    - UI layer
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from swoosh_toolkit.services import (
    DEFAULT_LANGUAGE,
    MemoryShareService,
    MemorySpeechService,
    ServiceError,
    ShareService,
    SpeechBoundary,
    SpeechService,
)

logger = logging.getLogger(__name__)


@dataclass
class SpeechScreenState:
    """
    UI state of the text-to-speech screen.

    Attributes:
        text: Text in the editor
        is_speaking: Whether the Play button currently shows "Stop"
        animating: Whether the background gears rotate (paused while speaking)
        error: Last speech error message, or None
    """

    text: str = ""
    is_speaking: bool = False
    animating: bool = True
    error: Optional[str] = None


class SpeechScreen:
    """Controller for the text-to-speech screen."""

    def __init__(
        self,
        speech: Optional[SpeechService] = None,
        share_service: Optional[ShareService] = None,
        language: str = DEFAULT_LANGUAGE,
    ) -> None:
        self.speech = speech or MemorySpeechService()
        self.share_service = share_service or MemoryShareService()
        self.language = language
        self.state = SpeechScreenState()

    def set_text(self, text: str) -> None:
        self.state.text = text

    def speak(self) -> bool:
        """
        Speak the current text, interrupting any utterance at a word boundary.

        Blank text is ignored.

        Returns:
            True if speech was started
        """
        text = self.state.text
        if not text.strip():
            logger.debug("Ignoring speak request for blank text")
            return False

        if self.speech.is_speaking:
            self.speech.stop(SpeechBoundary.WORD)
        try:
            self.speech.speak(text, self.language)
        except ServiceError as e:
            logger.warning(f"Speech failed: {e}")
            self.state.error = str(e)
            return False

        self.state.error = None
        self.state.is_speaking = True
        self.state.animating = False
        return True

    def stop(self) -> None:
        if self.speech.is_speaking:
            self.speech.stop(SpeechBoundary.IMMEDIATE)
        self.state.is_speaking = False
        self.state.animating = True

    def toggle(self) -> None:
        """Play/Stop button."""
        if self.state.is_speaking:
            self.stop()
        else:
            self.speak()

    def on_finished(self) -> None:
        """Speech service reports the utterance ended."""
        self.state.is_speaking = False
        self.state.animating = True

    def clear(self) -> None:
        self.state.text = ""

    def share(self) -> None:
        self.share_service.share([self.state.text])
