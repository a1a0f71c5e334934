from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
from PIL import Image

Box = Tuple[int, int, int, int]


class AnalysisService:
    # ---------- Вспомогательные функции ----------
    def _alpha_np(self, image: Image.Image) -> np.ndarray:
        """
        Возвращает альфа-канал как numpy-массив uint8 формы (H, W).
        """
        rgba = image if image.mode == "RGBA" else image.convert("RGBA")
        return np.asarray(rgba, dtype=np.uint8)[:, :, 3]

    # ---------- Границы содержимого ----------
    def content_bounds(self, image: Image.Image) -> Optional[Box]:
        """
        Ограничивающий прямоугольник непрозрачных пикселей (alpha > 0).
        Возвращает (left, top, right, bottom), right/bottom не включаются.
        Для полностью прозрачного изображения возвращает None.
        """
        mask = self._alpha_np(image) > 0
        if not mask.any():
            return None
        rows = np.flatnonzero(mask.any(axis=1))
        cols = np.flatnonzero(mask.any(axis=0))
        return int(cols[0]), int(rows[0]), int(cols[-1]) + 1, int(rows[-1]) + 1

    def margins(self, image: Image.Image) -> Optional[Box]:
        """
        Прозрачные поля вокруг содержимого: (left, top, right, bottom), px.
        """
        bounds = self.content_bounds(image)
        if bounds is None:
            return None
        left, top, right, bottom = bounds
        return left, top, image.width - right, image.height - bottom

    def is_centered(self, image: Image.Image, tolerance: int = 1) -> bool:
        """
        Содержимое по центру: противоположные поля отличаются не больше чем на tolerance px.
        """
        m = self.margins(image)
        if m is None:
            return True
        left, top, right, bottom = m
        return abs(left - right) <= tolerance and abs(top - bottom) <= tolerance
