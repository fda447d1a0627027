"""
Unit Tests for the JPEG compressor

Tests quality snapping, encoding and the compression history.
"""

from io import BytesIO

import numpy as np
import pytest
from PIL import Image

from swoosh_toolkit.compress import (
    CompressionConfig,
    CompressionHistory,
    compress_image,
    size_in_kb,
    snap_quality,
)
from swoosh_toolkit.core.errors import IndexOutOfRangeError


@pytest.fixture
def photo():
    """Noisy image so quality changes the encoded size."""
    rng = np.random.default_rng(7)
    return Image.fromarray(rng.integers(0, 256, (256, 256, 3), dtype=np.uint8), "RGB")


class TestSnapQuality:

    @pytest.mark.parametrize(
        "value,expected",
        [(0.53, 0.55), (0.5, 0.5), (0.0, 0.1), (-3, 0.1), (1.2, 1.0), (0.99, 1.0), (0.12, 0.1)],
    )
    def test_snap_quality_clamps_and_snaps(self, value, expected):
        assert snap_quality(value) == pytest.approx(expected)

    def test_snap_quality_uses_config_step(self):
        config = CompressionConfig(quality_step=0.25, min_quality=0.25)
        assert snap_quality(0.6, config) == pytest.approx(0.5)


class TestCompressImage:

    def test_compress_returns_decoded_jpeg(self, photo):
        result = compress_image(photo, 0.5)

        assert result.image.size == photo.size
        assert result.image.format == "JPEG"
        assert result.quality == 0.5
        assert result.quality_percent == 50
        assert result.data[:2] == b"\xff\xd8"
        assert result.size_kb == len(result.data) // 1024

    def test_lower_quality_gives_smaller_data(self, photo):
        low = compress_image(photo, 0.1)
        high = compress_image(photo, 1.0)
        assert len(low.data) < len(high.data)

    def test_compress_does_not_modify_source(self, photo):
        before = photo.tobytes()
        compress_image(photo, 0.3)
        assert photo.tobytes() == before

    def test_transparent_image_is_flattened_on_white(self):
        clear = Image.new("RGBA", (32, 32), (0, 0, 0, 0))
        result = compress_image(clear, 1.0)
        assert result.image.mode == "RGB"
        assert min(result.image.getpixel((16, 16))) >= 250

    @pytest.mark.parametrize("quality", [0.0, -0.1, 1.01])
    def test_compress_when_quality_invalid_then_raises(self, photo, quality):
        with pytest.raises(ValueError, match="quality"):
            compress_image(photo, quality)

    def test_data_decodes_to_same_size(self, photo):
        result = compress_image(photo, 0.7)
        assert Image.open(BytesIO(result.data)).size == photo.size

    def test_size_in_kb_matches_full_quality_encoding(self, photo):
        assert size_in_kb(photo) == len(compress_image(photo, 1.0).data) // 1024


class TestCompressionConfig:

    def test_defaults(self):
        config = CompressionConfig()
        assert config.default_quality == 0.5
        assert config.image_format == "JPEG"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"min_quality": 0.0},
            {"min_quality": 0.8, "max_quality": 0.5},
            {"quality_step": 0},
            {"default_quality": 0.05},
        ],
    )
    def test_invalid_values_raise(self, kwargs):
        with pytest.raises(ValueError):
            CompressionConfig(**kwargs)


class TestCompressionHistory:

    def test_append_and_get(self, photo):
        history = CompressionHistory()
        first = compress_image(photo, 0.5)
        second = compress_image(photo, 0.3)

        assert history.append(first)
        assert history.append(second)
        assert history.get(1) is second
        assert history.entries == (first, second)

    def test_append_skips_duplicate_of_last(self, photo):
        history = CompressionHistory()
        history.append(compress_image(photo, 0.5))
        assert not history.append(compress_image(photo, 0.5))
        assert len(history) == 1

    def test_remove_and_clear(self, photo):
        history = CompressionHistory()
        a = compress_image(photo, 0.2)
        b = compress_image(photo, 0.4)
        history.append(a)
        history.append(b)

        assert history.remove(0) is a
        assert list(history) == [b]
        history.clear()
        assert not history

    def test_get_when_out_of_range_then_raises(self):
        with pytest.raises(IndexOutOfRangeError):
            CompressionHistory().get(0)
