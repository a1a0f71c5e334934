"""Контроллер генерации иконок: оркестрация сервисов.

SOLID:
- SRP: класс управляет последовательностью шагов (без логики обработки изображений).
- DIP: зависит от сервисов как от ролей; конфигурация передаётся явно, глобальные константы не читаются.
Clean Code:
- Шаги компактны; работа с пикселями вынесена в сервисы.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from PIL import Image

from icongen.errors import GenerationError, SourceNotFound
from icongen.models.icon_model import GeneratedIcon, IconPaths, IconSpec
from icongen.services.analysis_service import AnalysisService
from icongen.services.icon_service import IconService
from icongen.services.image_service import ImageService

logger = logging.getLogger(__name__)


@dataclass
class IconController:
    """Получает стандартную и maskable-иконку из одного логотипа.

    Ответственности:
    - Проверка наличия исходного файла.
    - Декодирование через `ImageService`.
    - Вписывание, композиция, кодирование и запись через `IconService`.
    - Отчёт о результатах (границы содержимого через `AnalysisService`).
    """
    spec: IconSpec
    paths: IconPaths

    _image_service: ImageService = ImageService()
    _icon_service: IconService = IconService()
    _analysis_service: AnalysisService = AnalysisService()

    def run(self) -> Tuple[GeneratedIcon, GeneratedIcon]:
        """Проверяет источник и генерирует обе иконки строго по очереди.

        Первая ошибка прерывает конвейер. Уже записанные файлы не откатываются.
        """
        logger.info("Генерация иконок из логотипа %s", self.paths.source)
        self.verify_source(self.paths.source)
        standard = self.generate_standard_icon(self.paths.source, self.spec)
        maskable = self.generate_maskable_icon(self.paths.source, self.spec)
        logger.info("Готово.")
        return standard, maskable

    # ---- Steps ----
    def verify_source(self, path: Path) -> None:
        if not self._image_service.is_readable(path):
            raise SourceNotFound(path)
        logger.debug("Исходный логотип найден: %s", path)

    def generate_standard_icon(self, source: Path, spec: IconSpec) -> GeneratedIcon:
        """Логотип, вписанный в прозрачный квадрат spec.size x spec.size."""
        target = self.paths.standard
        logo = self._decode(source, target)
        try:
            icon = self._icon_service.contain(logo, spec.size)
        except (ValueError, OSError) as exc:
            raise GenerationError(f"Не удалось масштабировать {source}: {exc}", target, "resize") from exc
        return self._emit(icon, target)

    def generate_maskable_icon(self, source: Path, spec: IconSpec) -> GeneratedIcon:
        """Логотип в безопасной зоне spec.maskable_edge, по центру прозрачного квадрата spec.size."""
        target = self.paths.maskable
        logo = self._decode(source, target)
        try:
            safe_area = self._icon_service.contain(logo, spec.maskable_edge)
        except (ValueError, OSError) as exc:
            raise GenerationError(f"Не удалось масштабировать {source}: {exc}", target, "resize") from exc
        try:
            canvas = self._icon_service.blank_canvas(spec.size)
            icon = self._icon_service.composite_center(canvas, safe_area)
        except ValueError as exc:
            raise GenerationError(f"Не удалось собрать maskable-иконку: {exc}", target, "composite") from exc
        return self._emit(icon, target)

    # ---- Helpers ----
    def _decode(self, source: Path, target: Path) -> Image.Image:
        try:
            logo = self._image_service.load_image(source)
        except (OSError, ValueError, Image.DecompressionBombError) as exc:
            raise GenerationError(f"Не удалось декодировать {source}: {exc}", target, "decode") from exc
        logger.info(
            "Логотип %s: %dx%d, %s, %s байт",
            logo.path, logo.width, logo.height, logo.mode,
            logo.size_bytes if logo.size_bytes is not None else "?",
        )
        return logo.pil_image

    def _emit(self, icon: Image.Image, target: Path) -> GeneratedIcon:
        """Кодирует иконку в PNG, записывает на диск и сообщает о результате."""
        try:
            data = self._icon_service.encode_png(icon)
        except (OSError, ValueError) as exc:
            raise GenerationError(f"Не удалось закодировать PNG для {target}: {exc}", target, "encode") from exc
        logger.info("Запись %s…", target)
        try:
            self._icon_service.write(data, target)
        except OSError as exc:
            raise GenerationError(f"Не удалось записать {target}: {exc}", target, "write") from exc

        bounds = self._analysis_service.content_bounds(icon)
        logger.info(
            "✓ Создан: %s (%dx%d, %d байт, содержимое %s)",
            target, icon.width, icon.height, len(data), bounds,
        )
        return GeneratedIcon(path=target, pil_image=icon, data=data)
