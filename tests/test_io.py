"""
Tests for image decode/encode.
"""

from pathlib import Path

import pytest
import numpy as np
from PIL import Image

from filtergram.exceptions import DecodeFailure, EncodeFailure
from filtergram.io.images import (
    derive_output_path, load_image, save_image, to_uint8,
)


def quantised_image(height=6, width=5, alpha=None):
    """Float image whose values are exact multiples of 1/255."""
    levels = np.arange(height * width * 4, dtype=np.uint8).reshape(height, width, 4)
    if alpha is not None:
        levels[..., 3] = alpha
    return levels.astype(np.float32) / np.float32(255.0)


class TestLoadSave:
    """Test reading and writing image files."""

    def test_png_keeps_alpha(self, tmp_path):
        image = quantised_image()
        path = save_image(image, tmp_path / "out.png")

        with Image.open(path) as img:
            assert img.mode == "RGBA"
        np.testing.assert_allclose(load_image(path), image, atol=1e-7)

    def test_opaque_png_saved_as_rgb(self, tmp_path):
        path = save_image(quantised_image(alpha=255), tmp_path / "opaque.png")
        with Image.open(path) as img:
            assert img.mode == "RGB"

    def test_jpeg_drops_alpha(self, tmp_path):
        path = save_image(quantised_image(alpha=128), tmp_path / "photo.jpg")
        with Image.open(path) as img:
            assert img.format == "JPEG"
            assert img.mode == "RGB"

    def test_load_expands_to_rgba(self, tmp_path):
        path = tmp_path / "gray.png"
        Image.new("L", (7, 3), 128).save(path)
        image = load_image(path)
        assert image.shape == (3, 7, 4)
        assert image.dtype == np.float32
        np.testing.assert_allclose(image[..., 0], 128 / 255.0, atol=1e-7)
        np.testing.assert_array_equal(image[..., 3], 1.0)

    def test_no_temporary_files_left(self, tmp_path):
        save_image(quantised_image(), tmp_path / "out.png")
        assert [p.name for p in tmp_path.iterdir()] == ["out.png"]

    def test_unsupported_extension(self, tmp_path):
        with pytest.raises(EncodeFailure):
            save_image(quantised_image(), tmp_path / "out.xyz")
        assert list(tmp_path.iterdir()) == []

    def test_missing_output_directory(self, tmp_path):
        with pytest.raises(EncodeFailure):
            save_image(quantised_image(), tmp_path / "missing" / "out.png")

    def test_corrupt_input(self, tmp_path):
        path = tmp_path / "broken.png"
        path.write_text("not an image")
        with pytest.raises(DecodeFailure) as exc_info:
            load_image(path)
        assert exc_info.value.path == path

    def test_missing_input(self, tmp_path):
        with pytest.raises(DecodeFailure):
            load_image(tmp_path / "nope.png")


class TestQuantisation:
    """Test float to 8-bit conversion."""

    def test_clamps_and_scales(self):
        values = np.array([-0.1, 0.0, 0.5, 1.0, 1.2], dtype=np.float32)
        np.testing.assert_array_equal(to_uint8(values), [0, 0, 128, 255, 255])


class TestOutputNaming:
    """Test default output paths."""

    def test_default_name(self):
        assert derive_output_path("photos/cat.jpg", "1977") == Path("photos/cat-1977.jpg")

    def test_output_dir(self, tmp_path):
        result = derive_output_path("photos/cat.jpg", "inkwell", tmp_path)
        assert result == tmp_path / "cat-inkwell.jpg"

    def test_no_extension(self):
        assert derive_output_path("scan", "moon") == Path("scan-moon.png")
