"""
Module: compress.config

Purpose:
    Configuration for the image compressor (immutable).

Key Classes:
    - CompressionConfig: Quality range, step and output format

Dependencies:
    - dataclasses (std)

Used By:
    - compress.compressor
    - screens.compress: CompressScreen
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CompressionConfig:
    """
    Configuration for JPEG compression (immutable).

    Quality values are fractions in (0, 1]; 1.0 is best quality.

    Attributes:
        min_quality: Lowest selectable quality
        max_quality: Highest selectable quality
        quality_step: Slider step; selected qualities snap to it
        default_quality: Initial quality
        image_format: PIL format name used for encoding
        background: Colour used to flatten transparent images

    Example:
        >>> CompressionConfig().default_quality
        0.5
    """

    min_quality: float = 0.1
    max_quality: float = 1.0
    quality_step: float = 0.05
    default_quality: float = 0.5
    image_format: str = "JPEG"
    background: str = "white"

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not 0.0 < self.min_quality <= self.max_quality <= 1.0:
            raise ValueError(
                f"quality range must satisfy 0 < min <= max <= 1: "
                f"{self.min_quality}..{self.max_quality}"
            )
        if self.quality_step <= 0:
            raise ValueError(f"quality_step must be positive: {self.quality_step}")
        if not self.min_quality <= self.default_quality <= self.max_quality:
            raise ValueError(
                f"default_quality {self.default_quality} outside "
                f"{self.min_quality}..{self.max_quality}"
            )
