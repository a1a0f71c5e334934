"""Tests for the command-line entry point."""

import logging
from unittest.mock import patch

from PIL import Image

from icongen.main import LOG_LEVELS, main, setup_logging
from icongen.models.icon_model import IconPaths

from conftest import save_logo


def test_main_generates_icons_in_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    paths = IconPaths.from_root(tmp_path)
    save_logo(paths.source, size=(64, 32))

    assert main() == 0
    for path in (paths.standard, paths.maskable):
        with Image.open(path) as icon:
            assert icon.size == (1024, 1024)
            assert icon.mode == "RGBA"


def test_main_missing_source_returns_error(tmp_path, monkeypatch, caplog):
    monkeypatch.chdir(tmp_path)
    assert main() == 1
    assert "garrett-integrations-logo.png" in caplog.text
    assert not (tmp_path / "src" / "images" / "icon.png").exists()


def test_main_corrupt_source_returns_error(tmp_path, monkeypatch, caplog):
    monkeypatch.chdir(tmp_path)
    paths = IconPaths.from_root(tmp_path)
    paths.source.parent.mkdir(parents=True)
    paths.source.write_bytes(b"garbage")

    assert main() == 1
    assert any(r.levelno == logging.ERROR for r in caplog.records)
    assert not paths.standard.exists()
    assert not paths.maskable.exists()


@patch("icongen.main.logging.basicConfig")
def test_setup_logging_levels(mock_config):
    setup_logging("DEBUG")
    assert mock_config.call_args.kwargs["level"] == logging.DEBUG
    setup_logging("warning")
    assert mock_config.call_args.kwargs["level"] == logging.WARNING


@patch("icongen.main.logging.basicConfig")
def test_setup_logging_unknown_level_falls_back_to_info(mock_config):
    logger = setup_logging("verbose")
    assert mock_config.call_args.kwargs["level"] == logging.INFO
    assert logger.name == "icongen"


def test_log_levels_cover_standard_names():
    assert set(LOG_LEVELS) == {"debug", "info", "warning", "error", "critical"}


def test_main_oversized_source_returns_error(tmp_path, monkeypatch, caplog):
    monkeypatch.chdir(tmp_path)
    paths = IconPaths.from_root(tmp_path)
    save_logo(paths.source, size=(100, 100))
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)

    assert main() == 1
    assert any(r.levelno == logging.ERROR and "garrett-integrations-logo.png" in r.getMessage()
               for r in caplog.records)
    assert not paths.standard.exists()
