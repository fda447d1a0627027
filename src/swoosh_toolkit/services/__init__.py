"""
Module: services

Purpose:
    Narrow contracts for the platform services the screens delegate to,
    with in-memory, filesystem and PySide6 implementations.

Key Classes:
    - BrightnessService, SpeechService, ClipboardService,
      PhotoLibraryService, ShareService, ImagePicker: Contracts
    - Memory*: In-process implementations
    - FilePhotoLibrary, FileImagePicker: Filesystem implementations

Dependencies:
    - PIL: Image type
    - PySide6: Only in services.qt (imported explicitly by callers)

Used By:
    - swoosh_toolkit.screens
    - swoosh_toolkit.cli
"""

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
from .memory import (
    MemoryBrightnessService,
    MemoryClipboardService,
    MemoryPhotoLibrary,
    MemoryShareService,
    MemorySpeechService,
    QueuedImagePicker,
)
from .desktop import FileImagePicker, FilePhotoLibrary, load_image

__all__ = [
    # Contracts
    "DEFAULT_LANGUAGE",
    "BrightnessService",
    "ClipboardService",
    "ImagePicker",
    "PhotoLibraryService",
    "ServiceError",
    "ShareService",
    "SpeechBoundary",
    "SpeechService",
    # In-memory
    "MemoryBrightnessService",
    "MemoryClipboardService",
    "MemoryPhotoLibrary",
    "MemoryShareService",
    "MemorySpeechService",
    "QueuedImagePicker",
    # Filesystem
    "FileImagePicker",
    "FilePhotoLibrary",
    "load_image",
]
