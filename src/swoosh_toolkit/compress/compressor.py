"""
Module: compress.compressor

Purpose:
    Lossy image compression by JPEG re-encoding at a chosen quality,
    and a history of compression results.

Key Functions:
    - compress_image(): Re-encode an image at a quality fraction
    - size_in_kb(): Encoded size of an image at full quality
    - snap_quality(): Clamp and snap a quality to the configured step

Key Classes:
    - CompressionResult: Encoded bytes plus the decoded image
    - CompressionHistory: Ordered list of results

Dependencies:
    - PIL: Encoding and decoding
    - compress.config: CompressionConfig

Used By:
    - screens.compress: CompressScreen
    - cli: compress subcommand
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from io import BytesIO
from typing import Iterator, List, Optional, Tuple

from PIL import Image

from swoosh_toolkit.core.errors import check_index

from .config import CompressionConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompressionResult:
    """
    Result of compressing one image (immutable).

    Attributes:
        image: Decoded compressed image
        quality: Quality fraction used, in (0, 1]
        data: Encoded bytes
        image_format: PIL format name of `data`
    """

    image: Image.Image = field(compare=False)
    quality: float
    data: bytes = field(repr=False)
    image_format: str = "JPEG"

    @property
    def size_kb(self) -> int:
        """Encoded size in whole kilobytes."""
        return len(self.data) // 1024

    @property
    def quality_percent(self) -> int:
        return int(round(self.quality * 100))


def _to_jpeg_mode(image: Image.Image, background: str) -> Image.Image:
    """Flatten alpha onto `background` and convert to a JPEG-safe mode."""
    if image.mode in ("RGB", "L"):
        return image
    if image.mode in ("RGBA", "LA", "PA") or (image.mode == "P" and "transparency" in image.info):
        rgba = image.convert("RGBA")
        flat = Image.new("RGB", rgba.size, background)
        flat.paste(rgba, (0, 0), rgba)
        return flat
    return image.convert("RGB")


def _encode(image: Image.Image, quality_percent: int, image_format: str, background: str) -> bytes:
    buffer = BytesIO()
    _to_jpeg_mode(image, background).save(buffer, format=image_format, quality=quality_percent)
    return buffer.getvalue()


def snap_quality(value: float, config: Optional[CompressionConfig] = None) -> float:
    """
    Clamp a quality to the configured range and snap it to the step.

    Example:
        >>> snap_quality(0.53)
        0.55
        >>> snap_quality(0.0)
        0.1
    """
    config = config or CompressionConfig()
    clamped = min(max(value, config.min_quality), config.max_quality)
    steps = round((clamped - config.min_quality) / config.quality_step)
    snapped = config.min_quality + steps * config.quality_step
    return round(min(snapped, config.max_quality), 4)


def compress_image(
    image: Image.Image,
    quality: float,
    config: Optional[CompressionConfig] = None,
) -> CompressionResult:
    """
    Re-encode an image at a quality fraction and decode it back.

    Args:
        image: Source image (not modified)
        quality: Quality in (0, 1]; mapped to encoder quality 1..100
        config: Output format and flatten colour

    Returns:
        CompressionResult with encoded bytes and decoded image

    Raises:
        ValueError: If quality is outside (0, 1]

    Example:
        >>> result = compress_image(photo, 0.5)
        >>> result.quality_percent
        50
    """
    config = config or CompressionConfig()
    if not 0.0 < quality <= 1.0:
        raise ValueError(f"quality must be in (0, 1]: {quality}")

    quality_percent = min(max(int(round(quality * 100)), 1), 100)
    data = _encode(image, quality_percent, config.image_format, config.background)

    decoded = Image.open(BytesIO(data))
    decoded.load()

    logger.debug(
        f"Compressed {image.size} image at {quality_percent}% to {len(data)} bytes"
    )
    return CompressionResult(
        image=decoded,
        quality=quality,
        data=data,
        image_format=config.image_format,
    )


def size_in_kb(image: Image.Image, config: Optional[CompressionConfig] = None) -> int:
    """Size of the image encoded at full quality, in whole kilobytes."""
    config = config or CompressionConfig()
    return len(_encode(image, 100, config.image_format, config.background)) // 1024


class CompressionHistory:
    """
    Ordered list of compression results, oldest first.

    Appending a result identical to the last entry (same bytes and
    quality) is skipped.
    """

    def __init__(self) -> None:
        self._entries: List[CompressionResult] = []

    def append(self, result: CompressionResult) -> bool:
        """
        Append a result unless it duplicates the last entry.

        Returns:
            True if the result was appended
        """
        if self._entries and self._entries[-1] == result:
            logger.debug("Skipping duplicate compression history entry")
            return False
        self._entries.append(result)
        return True

    def get(self, index: int) -> CompressionResult:
        check_index(index, len(self._entries), "history")
        return self._entries[index]

    def remove(self, index: int) -> CompressionResult:
        """
        Remove one entry.

        Raises:
            IndexOutOfRangeError: If index not in [0, len)
        """
        check_index(index, len(self._entries), "history")
        return self._entries.pop(index)

    def clear(self) -> None:
        self._entries.clear()

    @property
    def entries(self) -> Tuple[CompressionResult, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CompressionResult]:
        return iter(tuple(self._entries))

    def __bool__(self) -> bool:
        return bool(self._entries)
