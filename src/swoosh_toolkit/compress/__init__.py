"""
Module: compress

Purpose:
    JPEG re-encoding image compressor and its result history.

Key Functions:
    - compress_image(): Re-encode an image at a quality fraction
    - size_in_kb(): Encoded size at full quality
    - snap_quality(): Clamp and snap to the slider step

Key Classes:
    - CompressionConfig: Quality range and format
    - CompressionResult: Encoded bytes plus decoded image
    - CompressionHistory: Ordered list of results

Dependencies:
    - PIL: Encoding and decoding

Used By:
    - swoosh_toolkit.screens.compress
    - swoosh_toolkit.cli
"""

from .config import CompressionConfig
from .compressor import (
    CompressionResult,
    CompressionHistory,
    compress_image,
    size_in_kb,
    snap_quality,
)

__all__ = [
    "CompressionConfig",
    "CompressionResult",
    "CompressionHistory",
    "compress_image",
    "size_in_kb",
    "snap_quality",
]
