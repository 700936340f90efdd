"""
Unit tests for image loading and saving.
"""

import sys
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

sys.path.insert(0, str(Path(__file__).parent.parent))

from rpad.services.image_service import ImageService


@pytest.fixture
def service():
    return ImageService()


class TestLoadImage:
    """Test decoding files into ImageData."""

    def test_rgb_png_loaded_as_rgba(self, service, tmp_path):
        path = tmp_path / "photo.png"
        Image.new("RGB", (4, 3), (1, 2, 3)).save(path)

        data = service.load_image(path)
        assert data.path == path
        assert (data.width, data.height) == (4, 3)
        assert data.mode == "RGB"
        assert data.pil_image.mode == "RGBA"
        assert data.pil_image.getpixel((0, 0)) == (1, 2, 3, 255)
        assert data.size_bytes == path.stat().st_size

    def test_accepts_string_path(self, service, tmp_path):
        path = tmp_path / "a.png"
        Image.new("RGBA", (2, 2), (9, 9, 9, 9)).save(path)
        assert service.load_image(str(path)).width == 2

    def test_missing_file(self, service, tmp_path):
        with pytest.raises(FileNotFoundError):
            service.load_image(tmp_path / "nope.png")

    def test_directory_is_not_a_file(self, service, tmp_path):
        with pytest.raises(FileNotFoundError):
            service.load_image(tmp_path)

    def test_corrupt_file(self, service, tmp_path):
        path = tmp_path / "broken.png"
        path.write_bytes(b"definitely not an image")
        with pytest.raises(ValueError):
            service.load_image(path)


class TestSaveImage:
    """Test writing results next to the input name."""

    def test_output_path_keeps_file_name(self, service, tmp_path):
        assert service.output_path("/some/where/in.png", tmp_path) == tmp_path / "in.png"

    def test_png_round_trip_is_exact(self, service, tmp_path):
        out_dir = tmp_path / "out"
        out_dir.mkdir()
        arr = np.arange(5 * 4 * 4, dtype=np.uint8).reshape(5, 4, 4)
        image = Image.fromarray(arr)

        target = service.save_image(image, tmp_path / "source.png", out_dir)
        assert target == out_dir / "source.png"
        with Image.open(target) as saved:
            assert np.array_equal(np.asarray(saved.convert("RGBA")), arr)

    def test_missing_output_directory(self, service, tmp_path):
        image = Image.new("RGBA", (1, 1))
        with pytest.raises(FileNotFoundError, match="Output path not available"):
            service.save_image(image, "in.png", tmp_path / "missing")
