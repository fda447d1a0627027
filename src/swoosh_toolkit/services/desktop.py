"""
Module: services.desktop

Purpose:
    Filesystem-backed photo library and image picker for desktop runs.

Key Classes:
    - FilePhotoLibrary: Saves images as PNG files into a directory
    - FileImagePicker: Decodes queued image files

Key Functions:
    - load_image(): Decode an image file with EXIF orientation applied

Dependencies:
    - PIL: Decoding, encoding, EXIF transpose
    - services.base: Contracts

Used By:
    - cli: Loading collage inputs
    - screens (desktop wiring)
"""

from __future__ import annotations

import logging
from collections import deque
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional, Union

from PIL import Image, ImageOps

from .base import ImagePicker, PhotoLibraryService, ServiceError

logger = logging.getLogger(__name__)


def load_image(path: Union[str, Path]) -> Image.Image:
    """
    Decode an image file fully into memory.

    EXIF orientation is applied so the result is upright. The file handle
    is closed before returning.

    Raises:
        ServiceError: If the file is missing or not a readable image
    """
    path = Path(path)
    try:
        with Image.open(path) as img:
            # exif_transpose always returns a new image detached from the file
            upright = ImageOps.exif_transpose(img)
            upright.load()
            return upright
    except OSError as e:
        raise ServiceError(f"Could not load image {path}: {e}") from e


class FilePhotoLibrary(PhotoLibraryService):
    """
    Saves images as PNG files into a directory.

    File names are timestamped ("<prefix>_YYYYMMDD_HHMMSS_ffffff.png");
    a numeric suffix is added on collision.

    Attributes:
        directory: Target directory (created on first save)
        prefix: File name prefix
    """

    def __init__(self, directory: Union[str, Path], prefix: str = "swoosh") -> None:
        self.directory = Path(directory)
        self.prefix = prefix

    def save_image(self, image: Image.Image) -> str:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            path = self._next_path()
            image.save(path, format="PNG")
        except (OSError, ValueError) as e:
            raise ServiceError(f"Failed to save image to {self.directory}: {e}") from e

        logger.info(f"Saved image to {path}")
        return str(path)

    def _next_path(self) -> Path:
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        path = self.directory / f"{self.prefix}_{stamp}.png"
        counter = 1
        while path.exists():
            path = self.directory / f"{self.prefix}_{stamp}_{counter}.png"
            counter += 1
        return path


class FileImagePicker(ImagePicker):
    """
    Picker that decodes queued image paths in order.

    An exhausted queue counts as a cancelled pick.
    """

    def __init__(self, paths: Iterable[Union[str, Path]] = ()) -> None:
        self._paths: deque[Path] = deque(Path(p) for p in paths)

    def push(self, path: Union[str, Path]) -> None:
        self._paths.append(Path(path))

    def pick_image(self) -> Optional[Image.Image]:
        if not self._paths:
            return None
        return load_image(self._paths.popleft())
