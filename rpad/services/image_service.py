"""Загрузка изображений с диска, упаковка метаданных и сохранение результата.

Принципы:
- SRP: класс отвечает только за ввод-вывод и базовое извлечение свойств.
- LSP/ISP: возвращает `ImageData` с предсказуемыми полями; интерфейс узкий и конкретный.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from rpad.models.image_model import ImageData

logger = logging.getLogger(__name__)


class ImageService:
    def load_image(self, file_path: str | Path) -> ImageData:
        """Загружает изображение с диска и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` c `PIL.Image.Image` (в режиме RGBA), размерами, исходным режимом и размером файла.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            ValueError: если файл не распознан как изображение или оно пустое.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            with Image.open(path) as source:
                mode = source.mode
                # Для анимаций берётся только первый кадр.
                pil_image = source.convert("RGBA")
        except UnidentifiedImageError as exc:
            raise ValueError(f"Not an image: {path}") from exc
        except OSError as exc:
            raise ValueError(f"Cannot decode image {path}: {exc}") from exc

        width, height = pil_image.size
        if width < 1 or height < 1:
            raise ValueError(f"Empty image: {path} ({width}x{height})")

        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        return ImageData(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
            mode=mode,
            size_bytes=size_bytes,
        )

    def output_path(self, input_path: str | Path, output_dir: str | Path) -> Path:
        """Файл результата: имя входного файла в каталоге `output_dir`."""
        return Path(output_dir) / Path(input_path).name

    def save_image(self, image: Image.Image, input_path: str | Path, output_dir: str | Path) -> Path:
        """Сохраняет изображение под именем входного файла в `output_dir`.

        Формат выбирается Pillow по расширению. Для точного сохранения пикселей
        нужен формат без потерь (PNG, BMP, TIFF).

        Raises:
            FileNotFoundError: если каталог вывода недоступен.
            ValueError: если Pillow не может записать файл в этом формате.
        """
        directory = Path(output_dir)
        if not directory.is_dir():
            raise FileNotFoundError("Output path not available")

        target = self.output_path(input_path, directory)
        try:
            image.save(target)
        except (KeyError, ValueError, OSError) as exc:
            raise ValueError(f"Cannot save {target}: {exc}") from exc

        logger.info("Saved the result as %s", target)
        return target
