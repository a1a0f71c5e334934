"""Загрузка исходного логотипа с диска и упаковка метаданных.

Принципы:
- SRP: класс отвечает только за проверку наличия, декодирование и базовые свойства.
- LSP/ISP: возвращает `ImageData` с предсказуемыми полями; интерфейс узкий и конкретный.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from icongen.models.image_model import ImageData


class ImageService:
    def is_readable(self, file_path: str | Path) -> bool:
        """Проверяет, что путь указывает на существующий файл, доступный для чтения."""
        path = Path(file_path)
        return path.is_file() and os.access(path, os.R_OK)

    def load_image(self, file_path: str | Path) -> ImageData:
        """Загружает изображение с диска и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` c `PIL.Image.Image` (в режиме RGBA), размерами, режимом и размером файла.

        Проверка наличия повторяет `is_readable`; в конвейере она срабатывает, только если
        файл удалили между проверкой источника и декодированием.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            ValueError: если файл не распознан как изображение.
            OSError: если данные изображения повреждены или обрезаны.
            PIL.Image.DecompressionBombError: если изображение превышает `Image.MAX_IMAGE_PIXELS`.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {path}")

        try:
            with Image.open(path) as opened:
                pil_image = opened.convert("RGBA")
        except UnidentifiedImageError as exc:
            raise ValueError(f"Файл не является изображением: {path}") from exc

        width, height = pil_image.size
        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        return ImageData(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
            mode=pil_image.mode,
            size_bytes=size_bytes,
        )
