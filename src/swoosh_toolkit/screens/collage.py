"""
Module: screens.collage

Purpose:
    Collage screen controller. Holds the UI-only state (which slot is
    being picked, whether the picker or layout options are open, the
    preview, the current toast) and drives the CollageEngine through its
    public operations only.

Key Classes:
    - CollageScreenState: Plain UI state owned by the screen
    - CollageScreen: Screen controller

Dependencies:
    - collage.CollageEngine
    - services: ImagePicker, PhotoLibraryService, ShareService

Used By:
    - UI layer (binds widgets to state and actions)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from PIL import Image

from swoosh_toolkit.collage import (
    CollageEngine,
    InsufficientImagesError,
    RasterizationFailedError,
)
from swoosh_toolkit.core.models import CollageLayout
from swoosh_toolkit.services import (
    ImagePicker,
    MemoryPhotoLibrary,
    MemoryShareService,
    PhotoLibraryService,
    QueuedImagePicker,
    ServiceError,
    ShareService,
)

from .overlays import Toast

logger = logging.getLogger(__name__)


@dataclass
class CollageScreenState:
    """
    UI state of the collage screen.

    Attributes:
        selected_slot: Slot the open picker will fill, or None
        picker_open: Whether the photo picker sheet is shown
        layout_options_open: Whether the layout chooser is expanded
        preview: Image shown under "Your Collage", or None
        toast: Toast currently shown, or None
    """

    selected_slot: Optional[int] = None
    picker_open: bool = False
    layout_options_open: bool = False
    preview: Optional[Image.Image] = None
    toast: Optional[Toast] = None


class CollageScreen:
    """
    Controller for the collage screen.

    Every action updates `state` and, where the user needs feedback,
    sets `state.toast`.

    Example:
        >>> screen = CollageScreen(picker=QueuedImagePicker([a, b]))
        >>> screen.choose_layout(CollageLayout.VERTICAL_SPLIT)
        >>> screen.tap_slot(0); screen.run_picker()
        >>> screen.tap_slot(1); screen.run_picker()
        >>> screen.create()
        >>> screen.state.toast.message
        'Collage created successfully!'
    """

    def __init__(
        self,
        engine: Optional[CollageEngine] = None,
        *,
        picker: Optional[ImagePicker] = None,
        library: Optional[PhotoLibraryService] = None,
        share_service: Optional[ShareService] = None,
    ) -> None:
        self.engine = engine or CollageEngine()
        self.picker = picker or QueuedImagePicker()
        self.library = library or MemoryPhotoLibrary()
        self.share_service = share_service or MemoryShareService()
        self.state = CollageScreenState()

    def _toast(self, message: str) -> None:
        self.state.toast = Toast(message)

    def dismiss_toast(self) -> None:
        self.state.toast = None

    # Layout

    def toggle_layout_options(self) -> None:
        self.state.layout_options_open = not self.state.layout_options_open

    def choose_layout(self, layout: "CollageLayout | str") -> None:
        """Select a layout and collapse the chooser."""
        self.engine.set_layout(layout)
        self.state.layout_options_open = False

    @property
    def can_create(self) -> bool:
        """Whether the Create button is enabled."""
        return self.engine.can_compose()

    # Slots

    def tap_slot(self, index: int) -> None:
        """Open the picker for a slot."""
        self.engine.get_slot(index)  # validates the index
        self.state.selected_slot = index
        self.state.picker_open = True

    def complete_pick(self, image: Image.Image) -> None:
        """Put a picked image into the selected slot and close the picker."""
        slot = self.state.selected_slot
        if slot is not None:
            self.engine.set_slot(slot, image)
            self._toast("Image added!")
        self.state.selected_slot = None
        self.state.picker_open = False

    def cancel_pick(self) -> None:
        self.state.selected_slot = None
        self.state.picker_open = False

    def run_picker(self) -> bool:
        """
        Ask the picker service for an image for the selected slot.

        Returns:
            True if an image was placed, False on cancel or decode failure
        """
        if not self.state.picker_open:
            return False
        try:
            image = self.picker.pick_image()
        except ServiceError as e:
            logger.warning(f"Image pick failed: {e}")
            self.cancel_pick()
            self._toast("Could not load image")
            return False

        if image is None:
            self.cancel_pick()
            return False
        self.complete_pick(image)
        return True

    # Compose

    def create(self) -> Optional[Image.Image]:
        """
        Compose the collage and show it as the preview.

        Returns:
            The composed image, or None if composing was refused or failed
        """
        try:
            image = self.engine.compose()
        except InsufficientImagesError as e:
            self._toast(f"Need {e.required} images for this layout")
            return None
        except RasterizationFailedError as e:
            logger.warning(f"Collage rasterization failed: {e}")
            self._toast("Failed to create collage")
            return None

        self.state.preview = image
        self._toast("Collage created successfully!")
        return image

    def reset(self) -> None:
        """Clear all slots and the preview."""
        self.engine.reset()
        self.state.preview = None
        self._toast("Cleared all images")

    # History

    def restore(self, history_index: int) -> Image.Image:
        image = self.engine.restore(history_index)
        self.state.preview = image
        self._toast("Collage restored")
        return image

    def delete_history_entry(self, history_index: int) -> None:
        self.engine.delete_history_entry(history_index)
        self._toast("Deleted from history")

    def clear_history(self) -> None:
        self.engine.clear_history()
        self._toast("Cleared history")

    # Export

    def save(self, image: Optional[Image.Image] = None) -> Optional[str]:
        """
        Save an image (default: the preview) to the photo library.

        Returns:
            Library identifier, or None if there was nothing to save or saving failed
        """
        target = image if image is not None else self.state.preview
        if target is None:
            return None
        try:
            identifier = self.library.save_image(target)
        except ServiceError as e:
            logger.warning(f"Save failed: {e}")
            self._toast("Could not save collage")
            return None
        self._toast("Saved to Photos")
        return identifier

    def share(self, image: Optional[Image.Image] = None) -> bool:
        """Share an image (default: the preview). Returns False if nothing to share."""
        target = image if image is not None else self.state.preview
        if target is None:
            return False
        self.share_service.share([target])
        return True
