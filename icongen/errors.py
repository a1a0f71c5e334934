"""Ошибки генерации иконок."""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class IconError(Exception):
    """Базовая ошибка конвейера генерации."""


class SourceNotFound(IconError, FileNotFoundError):
    """Исходный логотип отсутствует или недоступен для чтения."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f"Исходный логотип не найден: {self.path}")

    def __str__(self) -> str:
        return self.args[0]


class GenerationError(IconError):
    """Сбой декодирования, обработки, кодирования или записи иконки.

    Attributes:
        path: Иконка, которую не удалось получить.
        stage: Этап, на котором произошёл сбой ("decode", "resize", "composite", "encode", "write").
    """

    def __init__(self, message: str, path: Optional[Path] = None, stage: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None
        self.stage = stage
