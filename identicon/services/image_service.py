"""Сохранение готовых изображений на диск.

Принципы:
- SRP: класс отвечает только за запись файла; формат определяется по расширению.
- OCP: новые приёмники можно добавить отдельными методами.
"""
from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

logger = logging.getLogger(__name__)


class ImageService:
    def save_image(self, image: Image.Image, file_path: str | Path) -> Path:
        """Сохраняет изображение в файл.

        Args:
            image: Изображение PIL.
            file_path: Путь назначения; формат берётся из расширения (.png, .bmp, ...).

        Returns:
            Путь к записанному файлу.

        Raises:
            FileNotFoundError: если каталог назначения не существует.
            ValueError: если расширение не соответствует формату, известному Pillow.
        """
        path = Path(file_path)
        if not path.parent.exists() or not path.parent.is_dir():
            raise FileNotFoundError(f"Каталог не найден: {path.parent}")

        image_format = Image.registered_extensions().get(path.suffix.lower())
        if image_format is None:
            raise ValueError(f"Неизвестный формат файла: {path.name}")

        image.save(path, format=image_format)
        logger.info("saved %dx%d image to %s", image.width, image.height, path)
        return path
