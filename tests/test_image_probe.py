"""
Tests for the source image probe.
"""

import pytest
from PIL import Image

from responsive_images.io.image_probe import ImageProbe


@pytest.fixture
def sample_images(tmp_path):
    """Create sample source images for testing."""
    sizes = {
        "hero.png": (1600, 900),
        "thumb.jpg": (320, 240),
    }

    paths = {}
    for name, size in sizes.items():
        image = Image.new("RGB", size, color="white")
        file_path = tmp_path / name
        image.save(file_path)
        paths[name] = file_path

    return paths


def test_probe_png(sample_images):
    source = ImageProbe().probe(sample_images["hero.png"])

    assert source.width == 1600
    assert source.height == 900
    assert source.format == "PNG"
    assert source.path == sample_images["hero.png"]


def test_probe_jpeg_from_string_path(sample_images):
    source = ImageProbe().probe(str(sample_images["thumb.jpg"]))

    assert (source.width, source.height) == (320, 240)
    assert source.format == "JPEG"


def test_probe_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ImageProbe().probe(tmp_path / "missing.png")


def test_probe_not_an_image(tmp_path):
    bogus = tmp_path / "notes.png"
    bogus.write_text("not an image", encoding="utf-8")

    with pytest.raises(ValueError, match="Not an image"):
        ImageProbe().probe(bogus)
