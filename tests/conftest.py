import os
import sys
from pathlib import Path

import pytest
from PIL import Image

# Add src to sys.path so we can import swoosh_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

# Qt tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


# Common test fixtures
@pytest.fixture
def solid():
    """Factory for solid-colour RGB images."""
    def _make(color, size=(120, 80)):
        return Image.new("RGB", size, color)
    return _make


@pytest.fixture
def red(solid):
    return solid((255, 0, 0))


@pytest.fixture
def green(solid):
    return solid((0, 255, 0))


@pytest.fixture
def blue(solid):
    return solid((0, 0, 255))


@pytest.fixture
def yellow(solid):
    return solid((255, 255, 0))


@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a simple test image file."""
    img = Image.new("RGB", (200, 100), color="white")
    img_path = tmp_path / "sample.png"
    img.save(img_path)
    return img_path
