"""Параметры генерации иконок и результаты генерации.

Принципы:
- SRP: только структуры данных и производные от них значения.
- Чистый код: все модели неизменяемы, конфигурация передаётся явно.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path

from PIL import Image

DEFAULT_SIZE = 1024  # базовый размер; манифест сам уменьшит до 512/192, favicon до 16/32
DEFAULT_MASKABLE_SCALE = 0.72  # логотип maskable-иконки остаётся в безопасной зоне (~72%)

SOURCE_LOGO = Path("src/images/garrett-integrations-logo.png")
STANDARD_ICON = Path("src/images/icon.png")
MASKABLE_ICON = Path("src/images/icon-maskable.png")


def round_half_up(value: float) -> int:
    """Округление до ближайшего целого, половины вверх (368.5 -> 369)."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class IconSpec:
    """Геометрия иконок.

    Fields:
        size: Сторона квадратного холста, px.
        maskable_scale: Доля стороны холста, которую занимает логотип maskable-иконки, (0, 1].
    """
    size: int = DEFAULT_SIZE
    maskable_scale: float = DEFAULT_MASKABLE_SCALE

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"Размер иконки должен быть > 0: {self.size}")
        if not (0.0 < self.maskable_scale <= 1.0):
            raise ValueError(f"maskable_scale должен быть в (0, 1]: {self.maskable_scale}")

    @property
    def maskable_edge(self) -> int:
        """Сторона безопасной зоны maskable-иконки, px."""
        return round_half_up(self.size * self.maskable_scale)


@dataclass(frozen=True)
class IconPaths:
    """Пути к исходному логотипу и к двум выходным иконкам."""
    source: Path
    standard: Path
    maskable: Path

    @classmethod
    def from_root(cls, root: Path) -> "IconPaths":
        """Стандартные пути репозитория, разрешённые относительно `root`."""
        root = Path(root).resolve()
        return cls(
            source=root / SOURCE_LOGO,
            standard=root / STANDARD_ICON,
            maskable=root / MASKABLE_ICON,
        )


@dataclass(frozen=True)
class GeneratedIcon:
    """Результат одного шага генерации.

    Fields:
        path: Куда записан PNG.
        pil_image: Итоговое изображение (RGBA, квадрат).
        data: Закодированные байты PNG, ровно то, что записано на диск.
    """
    path: Path
    pil_image: Image.Image
    data: bytes

    @property
    def size(self) -> tuple[int, int]:
        return self.pil_image.size
