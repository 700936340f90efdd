"""Контроллер приложения: разбор позиционных аргументов и оркестрация сервисов.

SOLID:
- SRP: класс связывает ввод-вывод и алгоритм рамки (без логики обработки изображений).
- DIP: зависит от сервисов как от ролей; конкретные реализации инкапсулированы.
Clean Code:
- Значения по умолчанию приходят из `RpadConfig`, а не из глобального состояния.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from rpad.config import RpadConfig, parse_padding
from rpad.services.border_service import BorderService
from rpad.services.image_service import ImageService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JobOptions:
    """Итоговые параметры запуска после подстановки значений по умолчанию."""
    output_dir: Path
    padding: int


def resolve_arguments(output: Optional[str], size: Optional[str], config: RpadConfig) -> JobOptions:
    """Раскладывает необязательные позиционные аргументы `[output] [size]`.

    - ничего не задано: обе настройки по умолчанию;
    - задан один аргумент: целое число считается шириной полей, иначе это каталог вывода;
    - заданы оба: каталог должен существовать, размер обязан быть целым.

    Raises:
        ValueError: если размер во второй позиции не является целым >= 0.
        FileNotFoundError: если явно указанный вместе с размером каталог недоступен.
    """
    if output is None and size is None:
        logger.info("Using default padding %d px", config.default_padding)
        logger.info("Using default output path %s", config.output_dir)
        return JobOptions(output_dir=config.output_dir, padding=config.default_padding)

    if size is None:
        try:
            padding = parse_padding(output)
        except ValueError:
            # Не число, значит каталог вывода
            logger.info("Using default padding %d px", config.default_padding)
            return JobOptions(output_dir=Path(output), padding=config.default_padding)
        logger.info("Using default output path %s", config.output_dir)
        return JobOptions(output_dir=config.output_dir, padding=padding)

    padding = parse_padding(size)
    output_dir = Path(output)
    if not output_dir.is_dir():
        raise FileNotFoundError("Output path not available")
    return JobOptions(output_dir=output_dir, padding=padding)


@dataclass
class AppController:
    """Связывает аргументы командной строки с прикладной логикой.

    Ответственности:
    - Подстановка значений по умолчанию из `RpadConfig`.
    - Загрузка и сохранение изображений через `ImageService`.
    - Удаление рамки и дополнение полями через `BorderService`.
    """
    config: RpadConfig

    _image_service: ImageService = ImageService()
    _border_service: BorderService = BorderService()

    def run(self, input_path: str | Path, output: Optional[str] = None, size: Optional[str] = None) -> Path:
        """Полный цикл: загрузка, удаление рамки, поля, сохранение.

        Returns:
            Путь к сохранённому файлу.
        """
        options = resolve_arguments(output, size, self.config)
        image_data = self._image_service.load_image(input_path)
        logger.debug(
            "Loaded %s: %dx%d %s, %s bytes",
            image_data.path, image_data.width, image_data.height,
            image_data.mode, image_data.size_bytes,
        )

        result = self._border_service.strip(image_data.pil_image)
        if result.has_frame:
            m = result.measurement
            logger.debug(
                "Border %s: left=%d top=%d right=%d bottom=%d",
                result.color, m.left, m.top, m.right, m.bottom,
            )
        padded = self._border_service.pad(result.image, result.color, options.padding)

        return self._image_service.save_image(padded, image_data.path, options.output_dir)
