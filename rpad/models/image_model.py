"""Модели данных для изображений и результатов поиска рамки.

Принципы:
- SRP: только структуры данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image

# RGBA, 8 бит на канал. Сравнение только точное.
Color = Tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)


class EdgeDirection(Enum):
    """Край изображения, с которого идёт сканирование полос внутрь."""
    LEFT = "left"
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class BorderMeasurement:
    """Толщина однотонной рамки с каждой стороны, px."""
    left: int
    top: int
    right: int
    bottom: int

    @property
    def has_frame(self) -> bool:
        """Рамка подтверждена только если она есть со всех четырёх сторон."""
        return self.left > 0 and self.top > 0 and self.right > 0 and self.bottom > 0


@dataclass(frozen=True)
class StripResult:
    """Результат удаления рамки.

    Fields:
        image: Внутреннее изображение (или копия исходного, если рамки нет).
        color: Цвет рамки либо белый.
        measurement: Фактически вырезанные полосы (для однотонного
            изображения урезаны так, чтобы остался центральный пиксель).
        detected: Измеренная толщина рамки до урезания.
        has_frame: Найдена ли рамка, совпадает с `detected.has_frame`.
    """
    image: Image.Image
    color: Color
    measurement: BorderMeasurement
    detected: BorderMeasurement
    has_frame: bool


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая модель изображения и его метаданные.

    Fields:
        path: Путь к исходному файлу.
        pil_image: Загруженное изображение PIL (RGBA).
        width: Ширина, px.
        height: Высота, px.
        mode: Режим PIL исходного файла, например "RGB".
        size_bytes: Размер файла, если доступен.
    """
    path: Path
    pil_image: Image.Image
    width: int
    height: int
    mode: str
    size_bytes: Optional[int]
