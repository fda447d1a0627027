"""Unit tests for the collage screen controller."""

from unittest.mock import MagicMock

import pytest

from swoosh_toolkit.collage import CollageEngine, RasterizationFailedError
from swoosh_toolkit.core.errors import IndexOutOfRangeError
from swoosh_toolkit.core.models import CollageLayout
from swoosh_toolkit.screens import CollageScreen
from swoosh_toolkit.services import (
    MemoryPhotoLibrary,
    MemoryShareService,
    QueuedImagePicker,
    ServiceError,
)


@pytest.fixture
def picker():
    return QueuedImagePicker()


@pytest.fixture
def screen(picker):
    return CollageScreen(
        picker=picker,
        library=MemoryPhotoLibrary(),
        share_service=MemoryShareService(),
    )


def _pick(screen, picker, slot, image):
    picker.push(image)
    screen.tap_slot(slot)
    assert screen.run_picker()


class TestLayoutChooser:

    def test_choose_layout_collapses_options(self, screen):
        screen.toggle_layout_options()
        assert screen.state.layout_options_open
        screen.choose_layout("vertical")
        assert not screen.state.layout_options_open
        assert screen.engine.layout is CollageLayout.VERTICAL_SPLIT


class TestPicking:

    def test_tap_slot_opens_picker(self, screen):
        screen.tap_slot(2)
        assert screen.state.selected_slot == 2
        assert screen.state.picker_open

    def test_tap_slot_when_invalid_then_raises(self, screen):
        with pytest.raises(IndexOutOfRangeError):
            screen.tap_slot(4)
        assert not screen.state.picker_open

    def test_run_picker_places_image_and_toasts(self, screen, picker, red):
        _pick(screen, picker, 1, red)
        assert screen.engine.get_slot(1) is red
        assert screen.state.toast.message == "Image added!"
        assert not screen.state.picker_open
        assert screen.state.selected_slot is None

    def test_run_picker_when_cancelled_then_slot_unchanged(self, screen):
        screen.tap_slot(0)
        assert not screen.run_picker()
        assert screen.engine.get_slot(0) is None
        assert not screen.state.picker_open
        assert screen.state.toast is None

    def test_run_picker_when_decode_fails_then_toast(self, screen):
        failing = MagicMock()
        failing.pick_image.side_effect = ServiceError("bad file")
        screen.picker = failing
        screen.tap_slot(0)

        assert not screen.run_picker()
        assert screen.state.toast.message == "Could not load image"

    def test_run_picker_when_closed_then_noop(self, screen, picker, red):
        picker.push(red)
        assert not screen.run_picker()

    def test_cancel_pick_closes_picker(self, screen):
        screen.tap_slot(3)
        screen.cancel_pick()
        assert screen.state.selected_slot is None
        assert not screen.state.picker_open


class TestCreate:

    def test_create_when_underfilled_then_need_toast(self, screen, picker, red):
        _pick(screen, picker, 0, red)
        assert not screen.can_create
        assert screen.create() is None
        assert screen.state.toast.message == "Need 4 images for this layout"
        assert screen.state.preview is None

    def test_create_sets_preview_and_history(self, screen, picker, red, green):
        screen.choose_layout(CollageLayout.VERTICAL_SPLIT)
        _pick(screen, picker, 0, red)
        _pick(screen, picker, 1, green)
        assert screen.can_create

        image = screen.create()

        assert image.size == (600, 600)
        assert screen.state.preview is image
        assert screen.engine.history == (image,)
        assert screen.state.toast.message == "Collage created successfully!"

    def test_create_when_rasterization_fails_then_toast(self, red):
        engine = MagicMock(spec=CollageEngine)
        engine.compose.side_effect = RasterizationFailedError("oom")
        screen = CollageScreen(engine)

        assert screen.create() is None
        assert screen.state.toast.message == "Failed to create collage"

    def test_reset_clears_slots_and_preview(self, screen, picker, red, green):
        screen.choose_layout(CollageLayout.VERTICAL_SPLIT)
        _pick(screen, picker, 0, red)
        _pick(screen, picker, 1, green)
        screen.create()

        screen.reset()

        assert screen.engine.filled_count == 0
        assert screen.state.preview is None
        assert len(screen.engine.history) == 1
        assert screen.state.toast.message == "Cleared all images"


class TestHistoryAndExport:

    @pytest.fixture
    def composed(self, screen, picker, red, green):
        screen.choose_layout(CollageLayout.VERTICAL_SPLIT)
        _pick(screen, picker, 0, red)
        _pick(screen, picker, 1, green)
        first = screen.create()
        screen.engine.set_slot(0, green)
        second = screen.create()
        return first, second

    def test_restore_shows_entry(self, screen, composed):
        first, _ = composed
        assert screen.restore(0) is first
        assert screen.state.preview is first
        assert screen.state.toast.message == "Collage restored"

    def test_delete_history_entry(self, screen, composed):
        _, second = composed
        screen.delete_history_entry(0)
        assert screen.engine.history == (second,)
        assert screen.state.toast.message == "Deleted from history"

    def test_clear_history(self, screen, composed):
        screen.clear_history()
        assert screen.engine.history == ()
        assert screen.state.toast.message == "Cleared history"

    def test_save_preview(self, screen, composed):
        _, second = composed
        assert screen.save() == "memory://0"
        assert screen.library.saved == [second]
        assert screen.state.toast.message == "Saved to Photos"

    def test_save_history_item(self, screen, composed):
        first, _ = composed
        screen.save(first)
        assert screen.library.saved == [first]

    def test_save_when_library_fails_then_toast(self, screen, composed):
        library = MagicMock()
        library.save_image.side_effect = ServiceError("denied")
        screen.library = library
        assert screen.save() is None
        assert screen.state.toast.message == "Could not save collage"

    def test_save_when_nothing_composed_then_none(self, screen):
        assert screen.save() is None

    def test_share_preview(self, screen, composed):
        _, second = composed
        assert screen.share()
        assert screen.share_service.shared == [(second,)]

    def test_share_when_nothing_then_false(self, screen):
        assert not screen.share()

    def test_dismiss_toast(self, screen, composed):
        screen.dismiss_toast()
        assert screen.state.toast is None
