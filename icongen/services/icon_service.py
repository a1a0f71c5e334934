from __future__ import annotations

import io
from pathlib import Path
from typing import Tuple

from PIL import Image

from icongen.models.icon_model import round_half_up

TRANSPARENT = (0, 0, 0, 0)


class IconService:
    # ---------- Геометрия ----------
    def fit_size(self, width: int, height: int, box: int) -> Tuple[int, int]:
        """
        Размер изображения после вписывания ("contain") в квадрат box x box.
        Длинная сторона становится равной box, короткая масштабируется тем же
        коэффициентом и округляется половиной вверх, но не меньше 1 px.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Некорректный размер изображения: {width}x{height}")
        if width >= height:
            return box, max(1, round_half_up(height * box / width))
        return max(1, round_half_up(width * box / height)), box

    # ---------- Операции над изображениями ----------
    def blank_canvas(self, size: int) -> Image.Image:
        """
        Полностью прозрачный квадратный холст RGBA.
        """
        return Image.new("RGBA", (size, size), TRANSPARENT)

    def contain(self, image: Image.Image, box: int) -> Image.Image:
        """
        Вписывает изображение в прозрачный квадрат box x box без искажений и обрезки.
        Свободная часть холста остаётся прозрачной, изображение по центру.
        """
        src = image if image.mode == "RGBA" else image.convert("RGBA")
        new_size = self.fit_size(src.width, src.height, box)
        resized = src.resize(new_size, Image.Resampling.LANCZOS)
        canvas = self.blank_canvas(box)
        # холст прозрачный: пиксели логотипа переносятся без смешивания
        canvas.paste(resized, ((box - new_size[0]) // 2, (box - new_size[1]) // 2))
        return canvas

    def composite_center(self, canvas: Image.Image, overlay: Image.Image) -> Image.Image:
        """
        Накладывает overlay по центру canvas (альфа-композиция).
        Нечётный остаток отступа уходит влево/вверх: вместе с `contain`, где остаток уходит
        вправо/вниз, поля вокруг логотипа отличаются не больше чем на 1 px.
        Исходные изображения не изменяются.
        """
        if overlay.width > canvas.width or overlay.height > canvas.height:
            raise ValueError(
                f"Накладываемое изображение {overlay.width}x{overlay.height} "
                f"больше холста {canvas.width}x{canvas.height}"
            )
        out = canvas.copy() if canvas.mode == "RGBA" else canvas.convert("RGBA")
        top = overlay if overlay.mode == "RGBA" else overlay.convert("RGBA")
        dest = ((out.width - top.width + 1) // 2, (out.height - top.height + 1) // 2)
        out.alpha_composite(top, dest=dest)
        return out

    # ---------- Кодирование и запись ----------
    def encode_png(self, image: Image.Image) -> bytes:
        """
        Кодирует изображение в PNG без потерь с максимальным сжатием.
        Метаданные не пишутся, поэтому результат детерминирован.
        """
        buf = io.BytesIO()
        image.save(buf, format="PNG", optimize=True, compress_level=9)
        return buf.getvalue()

    def write(self, data: bytes, path: Path) -> None:
        """
        Записывает байты в файл, перезаписывая существующий. Каталоги не создаются.
        """
        Path(path).write_bytes(data)
