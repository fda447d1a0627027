"""Unit tests for the text-to-speech screen controller."""

from unittest.mock import MagicMock

import pytest

from swoosh_toolkit.screens import SpeechScreen
from swoosh_toolkit.services import (
    MemoryShareService,
    MemorySpeechService,
    ServiceError,
    SpeechBoundary,
)


@pytest.fixture
def speech():
    return MemorySpeechService()


@pytest.fixture
def screen(speech):
    return SpeechScreen(speech, MemoryShareService())


class TestSpeechScreen:

    def test_speak_uses_default_language(self, screen, speech):
        screen.set_text("Hello there")
        assert screen.speak()
        assert speech.spoken == [("Hello there", "en-US")]
        assert screen.state.is_speaking
        assert not screen.state.animating

    def test_speak_interrupts_at_word_boundary(self, screen, speech):
        screen.set_text("first")
        screen.speak()
        screen.set_text("second")
        screen.speak()
        assert speech.stops == [SpeechBoundary.WORD]
        assert speech.spoken[-1] == ("second", "en-US")

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_speak_ignores_blank_text(self, screen, speech, text):
        screen.set_text(text)
        assert not screen.speak()
        assert speech.spoken == []
        assert not screen.state.is_speaking

    def test_stop_is_immediate(self, screen, speech):
        screen.set_text("words")
        screen.speak()
        screen.stop()
        assert speech.stops == [SpeechBoundary.IMMEDIATE]
        assert not screen.state.is_speaking
        assert screen.state.animating

    def test_toggle_starts_and_stops(self, screen, speech):
        screen.set_text("toggle me")
        screen.toggle()
        assert screen.state.is_speaking
        screen.toggle()
        assert not screen.state.is_speaking
        assert not speech.is_speaking

    def test_on_finished_resets_state(self, screen, speech):
        screen.set_text("done soon")
        screen.speak()
        speech.finish()
        screen.on_finished()
        assert not screen.state.is_speaking
        assert screen.state.animating

    def test_speak_failure_records_error(self):
        failing = MagicMock()
        failing.is_speaking = False
        failing.speak.side_effect = ServiceError("no voices")
        screen = SpeechScreen(failing)
        screen.set_text("hi")

        assert not screen.speak()
        assert screen.state.error == "no voices"
        assert not screen.state.is_speaking

    def test_clear_empties_text(self, screen):
        screen.set_text("something")
        screen.clear()
        assert screen.state.text == ""

    def test_share_sends_text(self, screen):
        screen.set_text("share me")
        screen.share()
        assert screen.share_service.shared == [("share me",)]
