"""Tests for source logo loading."""

import pytest
from PIL import Image

from icongen.services.image_service import ImageService

from conftest import save_logo


def test_load_image_converts_to_rgba(tmp_path):
    src = tmp_path / "logo.png"
    Image.new("RGB", (30, 20), (10, 20, 30)).save(src)
    data = ImageService().load_image(src)
    assert data.mode == "RGBA"
    assert data.pil_image.mode == "RGBA"
    assert (data.width, data.height) == (30, 20)
    assert data.path == src
    assert data.size_bytes == src.stat().st_size


def test_load_image_accepts_str_path(tmp_path):
    src = save_logo(tmp_path / "logo.png", size=(8, 8))
    data = ImageService().load_image(str(src))
    assert data.pil_image.size == (8, 8)


def test_load_image_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        ImageService().load_image(tmp_path / "missing.png")


def test_load_image_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        ImageService().load_image(tmp_path)


def test_load_image_not_an_image(tmp_path):
    src = tmp_path / "logo.png"
    src.write_bytes(b"definitely not a png")
    with pytest.raises(ValueError):
        ImageService().load_image(src)


def test_is_readable(tmp_path):
    service = ImageService()
    src = save_logo(tmp_path / "logo.png", size=(4, 4))
    assert service.is_readable(src) is True
    assert service.is_readable(tmp_path / "missing.png") is False
    assert service.is_readable(tmp_path) is False
