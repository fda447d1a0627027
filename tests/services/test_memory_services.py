"""Unit tests for the in-memory service implementations."""

import pytest

from swoosh_toolkit.services import (
    MemoryBrightnessService,
    MemoryClipboardService,
    MemoryPhotoLibrary,
    MemoryShareService,
    MemorySpeechService,
    QueuedImagePicker,
    ServiceError,
    SpeechBoundary,
)


class TestMemoryBrightnessService:

    def test_initial_level_is_clamped(self):
        assert MemoryBrightnessService(1.5).get_brightness() == 1.0

    def test_set_then_get(self):
        service = MemoryBrightnessService()
        service.set_brightness(0.25)
        assert service.get_brightness() == 0.25

    def test_set_when_out_of_range_then_raises(self):
        with pytest.raises(ServiceError):
            MemoryBrightnessService().set_brightness(1.1)


class TestMemorySpeechService:

    def test_speak_records_text_and_language(self):
        speech = MemorySpeechService()
        speech.speak("hello", "en-GB")
        assert speech.spoken == [("hello", "en-GB")]
        assert speech.is_speaking

    def test_stop_records_boundary_only_while_speaking(self):
        speech = MemorySpeechService()
        speech.stop(SpeechBoundary.WORD)
        assert speech.stops == []

        speech.speak("hi")
        speech.stop(SpeechBoundary.WORD)
        assert speech.stops == [SpeechBoundary.WORD]
        assert not speech.is_speaking

    def test_finish_ends_utterance(self):
        speech = MemorySpeechService()
        speech.speak("hi")
        speech.finish()
        assert not speech.is_speaking


class TestOtherMemoryServices:

    def test_clipboard_keeps_last_item(self, red):
        clipboard = MemoryClipboardService()
        clipboard.copy_image(red)
        assert clipboard.content is red
        clipboard.copy_text("text")
        assert clipboard.content == "text"

    def test_photo_library_returns_identifiers(self, red, green):
        library = MemoryPhotoLibrary()
        assert library.save_image(red) == "memory://0"
        assert library.save_image(green) == "memory://1"
        assert library.saved == [red, green]

    def test_share_records_items(self, red):
        share = MemoryShareService()
        share.share([red, "caption"])
        assert share.shared == [(red, "caption")]

    def test_picker_returns_queue_then_cancels(self, red):
        picker = QueuedImagePicker([red, None])
        assert picker.pick_image() is red
        assert picker.pick_image() is None
        assert picker.pick_image() is None

    def test_picker_push_appends(self, red):
        picker = QueuedImagePicker()
        picker.push(red)
        assert picker.pick_image() is red
