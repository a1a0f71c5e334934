from pathlib import Path

import pytest
from PIL import Image

from icongen.models.icon_model import IconPaths


def save_logo(path: Path, size=(400, 200), color=(200, 30, 30, 255)) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGBA", size, color).save(path, format="PNG")
    return path


@pytest.fixture
def paths(tmp_path):
    return IconPaths.from_root(tmp_path)


@pytest.fixture
def logo(paths):
    return save_logo(paths.source)
