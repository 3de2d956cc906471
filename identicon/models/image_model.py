"""Модель готового идентикона и его метаданных.

Принципы:
- SRP: только структура данных, без логики вычисления.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from PIL import Image

from identicon.models.hsl_model import HSL, RGB
from identicon.models.mode_model import Mode


@dataclass(frozen=True)
class IdenticonImage:
    """Неизменяемый результат рендера вместе с тем, из чего он получен.

    Fields:
        source: Байты источника (обычно хеш).
        mode: Режим вычисления цвета.
        size: Сторона изображения, px.
        hsl: Цвет переднего плана в HSL.
        foreground: Тот же цвет в RGB.
        pixels: Узор 5x5 в порядке строк.
        pil_image: Изображение PIL в режиме "RGB".
    """
    source: bytes
    mode: Mode
    size: int
    hsl: HSL
    foreground: RGB
    pixels: Tuple[bool, ...]
    pil_image: Image.Image

    @property
    def width(self) -> int:
        return self.pil_image.width

    @property
    def height(self) -> int:
        return self.pil_image.height

    @property
    def source_hex(self) -> str:
        return self.source.hex()

    @property
    def foreground_hex(self) -> str:
        r, g, b = self.foreground
        return f"#{r:02X}{g:02X}{b:02X}"
