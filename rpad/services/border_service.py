"""Поиск однотонной рамки, её удаление и равномерное дополнение полями.

Принципы:
- SRP: только вычисления над пиксельным буфером, без ввода-вывода.
- Каждый шаг возвращает новое изображение; вход не мутируется.
"""
from __future__ import annotations

import logging
from typing import Tuple

import numpy as np
from PIL import Image

from rpad.models.image_model import (
    WHITE,
    BorderMeasurement,
    Color,
    EdgeDirection,
    StripResult,
)

logger = logging.getLogger(__name__)

# Предел размера стороны в Pillow (знаковый 32-битный int).
MAX_SIDE = 2**31 - 1


class BorderService:
    # ---------- Вспомогательные функции ----------
    def _to_rgba(self, image: Image.Image) -> Image.Image:
        """
        Приводит изображение к RGBA; проверяет, что оно непустое.
        """
        width, height = image.size
        if width < 1 or height < 1:
            raise ValueError(f"Пустое изображение: {width}x{height}")
        if image.mode == "RGBA":
            return image
        return image.convert("RGBA")

    def _image_to_rgba_np(self, image: Image.Image) -> np.ndarray:
        """
        Возвращает numpy-массив uint8 формы (height, width, 4).
        """
        return np.asarray(self._to_rgba(image), dtype=np.uint8)

    def _strip(self, pixels: np.ndarray, direction: EdgeDirection, index: int) -> np.ndarray:
        """
        Полоса толщиной 1 px на расстоянии `index` от заданного края.
        """
        height, width = pixels.shape[:2]
        if direction is EdgeDirection.LEFT:
            return pixels[:, index]
        if direction is EdgeDirection.TOP:
            return pixels[index, :]
        if direction is EdgeDirection.RIGHT:
            return pixels[:, width - 1 - index]
        # BOTTOM
        return pixels[height - 1 - index, :]

    def _extent(self, pixels: np.ndarray, direction: EdgeDirection) -> int:
        height, width = pixels.shape[:2]
        if direction in (EdgeDirection.LEFT, EdgeDirection.RIGHT):
            return width
        return height

    def _measure(self, pixels: np.ndarray, reference: np.ndarray, direction: EdgeDirection) -> int:
        # Не дальше противоположного края: для однотонной оси вернётся её длина.
        extent = self._extent(pixels, direction)
        count = 0
        while count < extent:
            strip = self._strip(pixels, direction, count)
            if not np.all(strip == reference):
                break
            count += 1
        return count

    def _clamp_pair(self, near: int, far: int, extent: int) -> Tuple[int, int]:
        """
        Если полосы с двух сторон перекрываются (вся ось одного цвета),
        оставляет центральный пиксель.
        """
        if near + far < extent:
            return near, far
        near = (extent - 1) // 2
        return near, extent - 1 - near

    # ---------- 1) Сканер рамки ----------
    def measure_border(self, image: Image.Image, reference_color: Color, direction: EdgeDirection) -> int:
        """Число подряд идущих однотонных полос от края `direction` внутрь.

        Args:
            image: Непустое изображение.
            reference_color: Эталонный цвет (обычно пиксель (0, 0)).
            direction: Край, с которого начинается сканирование.

        Returns:
            Количество полос, целиком совпадающих с эталоном. Не превышает
            ширину (LEFT/RIGHT) или высоту (TOP/BOTTOM) изображения.
        """
        pixels = self._image_to_rgba_np(image)
        reference = np.asarray(reference_color, dtype=np.uint8)
        return self._measure(pixels, reference, direction)

    def measure_borders(self, image: Image.Image, reference_color: Color) -> BorderMeasurement:
        pixels = self._image_to_rgba_np(image)
        reference = np.asarray(reference_color, dtype=np.uint8)
        return BorderMeasurement(
            left=self._measure(pixels, reference, EdgeDirection.LEFT),
            top=self._measure(pixels, reference, EdgeDirection.TOP),
            right=self._measure(pixels, reference, EdgeDirection.RIGHT),
            bottom=self._measure(pixels, reference, EdgeDirection.BOTTOM),
        )

    # ---------- 2) Удаление рамки ----------
    def strip(self, image: Image.Image) -> StripResult:
        """Находит однотонную рамку цвета пикселя (0, 0) и вырезает её.

        Рамка считается найденной, только если она есть со всех четырёх
        сторон. Иначе возвращается копия исходного изображения и белый цвет.
        """
        rgba = self._to_rgba(image)
        width, height = rgba.size
        reference: Color = tuple(rgba.getpixel((0, 0)))
        measured = self.measure_borders(rgba, reference)

        if not measured.has_frame:
            logger.info("No monochromic border, padding with white")
            return StripResult(
                image=rgba.copy(),
                color=WHITE,
                measurement=BorderMeasurement(0, 0, 0, 0),
                detected=measured,
                has_frame=measured.has_frame,
            )

        left, right = self._clamp_pair(measured.left, measured.right, width)
        top, bottom = self._clamp_pair(measured.top, measured.bottom, height)
        if (left, top, right, bottom) != (measured.left, measured.top, measured.right, measured.bottom):
            logger.warning("Image is entirely %s, keeping the centre pixel", reference)

        interior = rgba.crop((left, top, width - right, height - bottom))
        return StripResult(
            image=interior,
            color=reference,
            measurement=BorderMeasurement(left=left, top=top, right=right, bottom=bottom),
            detected=measured,
            has_frame=measured.has_frame,
        )

    def strip_border(self, image: Image.Image) -> Tuple[Image.Image, Color]:
        """Пара (внутреннее изображение, цвет полей)."""
        result = self.strip(image)
        return result.image, result.color

    # ---------- 3) Дополнение полями ----------
    def pad(self, image: Image.Image, color: Color, width: int) -> Image.Image:
        """Новое изображение с полями `width` px цвета `color` со всех сторон.

        Вставка выполняется без маски, поэтому альфа-канал копируется как есть,
        без смешивания с цветом полей.
        """
        if width < 0:
            raise ValueError(f"Ширина полей не может быть отрицательной: {width}")
        interior = self._to_rgba(image)
        w, h = interior.size
        if max(w, h) + 2 * width > MAX_SIDE:
            raise ValueError(f"Слишком большие поля: {width} px")
        canvas = Image.new("RGBA", (w + 2 * width, h + 2 * width), color=tuple(color))
        canvas.paste(interior, (width, width))
        return canvas

    def normalize(self, image: Image.Image, padding: int) -> Image.Image:
        interior, color = self.strip_border(image)
        return self.pad(interior, color, padding)


_default_service = BorderService()


def measure_border(image: Image.Image, reference_color: Color, direction: EdgeDirection) -> int:
    return _default_service.measure_border(image, reference_color, direction)


def strip_border(image: Image.Image) -> Tuple[Image.Image, Color]:
    return _default_service.strip_border(image)


def pad(image: Image.Image, color: Color, width: int) -> Image.Image:
    return _default_service.pad(image, color, width)
