"""
Module: screens.compress

Purpose:
    Image compressor screen controller. The user picks an image, chooses
    a quality on a slider, compresses, then copies, saves or shares the
    result. Each compression is kept in a history that can restore both
    the image and the quality it was made at.

Key Classes:
    - CompressScreenState: UI state
    - CompressScreen: Screen controller

Dependencies:
    - compress: compress_image, size_in_kb, CompressionHistory
    - services: ImagePicker, ClipboardService, PhotoLibraryService, ShareService

Used By:
    - UI layer
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from PIL import Image

from swoosh_toolkit.compress import (
    CompressionConfig,
    CompressionHistory,
    compress_image,
    size_in_kb,
    snap_quality,
)
from swoosh_toolkit.services import (
    ClipboardService,
    ImagePicker,
    MemoryClipboardService,
    MemoryPhotoLibrary,
    MemoryShareService,
    PhotoLibraryService,
    QueuedImagePicker,
    ServiceError,
    ShareService,
)

from .overlays import Alert

logger = logging.getLogger(__name__)


@dataclass
class CompressScreenState:
    """
    UI state of the compressor screen.

    Attributes:
        selected_image: Image picked by the user
        compressed_image: Latest compressed (or restored) image
        quality: Slider value in [min_quality, max_quality]
        show_history: Whether the history strip is expanded
        alert: Modal alert currently shown, or None
        history: Past compression results, oldest first
    """

    selected_image: Optional[Image.Image] = None
    compressed_image: Optional[Image.Image] = None
    quality: float = 0.5
    show_history: bool = False
    alert: Optional[Alert] = None
    history: CompressionHistory = field(default_factory=CompressionHistory)


class CompressScreen:
    """Controller for the image compressor screen."""

    def __init__(
        self,
        config: Optional[CompressionConfig] = None,
        *,
        picker: Optional[ImagePicker] = None,
        clipboard: Optional[ClipboardService] = None,
        library: Optional[PhotoLibraryService] = None,
        share_service: Optional[ShareService] = None,
    ) -> None:
        self.config = config or CompressionConfig()
        self.picker = picker or QueuedImagePicker()
        self.clipboard = clipboard or MemoryClipboardService()
        self.library = library or MemoryPhotoLibrary()
        self.share_service = share_service or MemoryShareService()
        self.state = CompressScreenState(quality=self.config.default_quality)

    # ─────────────────────────────────────────────────────────────────────────
    # Derived values
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def active_image(self) -> Optional[Image.Image]:
        """Compressed image if there is one, otherwise the selected image."""
        if self.state.compressed_image is not None:
            return self.state.compressed_image
        return self.state.selected_image

    @property
    def quality_percent(self) -> int:
        return int(round(self.state.quality * 100))

    def active_size_kb(self) -> int:
        """Size label for the active image (0 when none)."""
        image = self.active_image
        return size_in_kb(image, self.config) if image is not None else 0

    # ─────────────────────────────────────────────────────────────────────────
    # Actions
    # ─────────────────────────────────────────────────────────────────────────

    def select_image(self) -> bool:
        """
        Pick a new source image; drops any previous compressed result.

        Returns:
            True if an image was picked
        """
        try:
            image = self.picker.pick_image()
        except ServiceError as e:
            logger.warning(f"Image pick failed: {e}")
            self._alert("Could not load the selected image", "Oops!", "exclamationmark.triangle.fill", "red")
            return False
        if image is None:
            return False
        self.state.selected_image = image
        self.state.compressed_image = None
        return True

    def set_quality(self, value: float) -> float:
        """Move the slider; value is clamped and snapped. Returns the stored value."""
        self.state.quality = snap_quality(value, self.config)
        return self.state.quality

    def compress(self) -> bool:
        """
        Compress the selected image at the current quality.

        Returns:
            False if no image is selected or encoding failed
        """
        source = self.state.selected_image
        if source is None:
            return False

        try:
            result = compress_image(source, self.state.quality, self.config)
        except (OSError, ValueError) as e:
            logger.warning(f"Compression failed: {e}")
            self._alert("The image could not be compressed", "Oops!", "exclamationmark.triangle.fill", "red")
            return False

        self.state.compressed_image = result.image
        self.state.history.append(result)
        logger.info(f"Compressed image at {result.quality_percent}% ({result.size_kb} KB)")
        self._alert(
            f"Image compressed to {result.quality_percent}%",
            "Compressed!",
            "arrow.down.circle.fill",
            "blue",
        )
        return True

    def clear_image(self) -> None:
        self.state.selected_image = None
        self.state.compressed_image = None

    def copy(self, image: Optional[Image.Image] = None) -> bool:
        target = image if image is not None else self.active_image
        if target is None:
            return False
        self.clipboard.copy_image(target)
        self._alert("Image copied", "Copied!", "doc.on.clipboard.fill", "purple")
        return True

    def save(self, image: Optional[Image.Image] = None) -> Optional[str]:
        target = image if image is not None else self.active_image
        if target is None:
            return None
        try:
            identifier = self.library.save_image(target)
        except ServiceError as e:
            logger.warning(f"Save failed: {e}")
            self._alert("The image could not be saved", "Oops!", "exclamationmark.triangle.fill", "red")
            return None
        self._alert("Image saved", "Saved!", "heart.fill", "pink")
        return identifier

    def share(self, image: Optional[Image.Image] = None) -> bool:
        target = image if image is not None else self.active_image
        if target is None:
            return False
        self.share_service.share([target])
        return True

    # History

    def toggle_history(self) -> None:
        self.state.show_history = not self.state.show_history

    def restore_from_history(self, index: int) -> None:
        """Show a past result and move the slider back to its quality."""
        entry = self.state.history.get(index)
        self.state.compressed_image = entry.image
        self.state.quality = entry.quality

    def remove_from_history(self, index: int) -> None:
        self.state.history.remove(index)
        if not self.state.history:
            self.state.show_history = False

    def clear_history(self) -> None:
        self.state.history.clear()
        self.state.show_history = False

    # Alerts

    def _alert(self, message: str, title: str, icon: str, color: str) -> None:
        self.state.alert = Alert(title=title, message=message, icon=icon, color=color)

    def dismiss_alert(self) -> None:
        self.state.alert = None
