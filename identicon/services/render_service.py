"""Растеризация узора 5x5 в RGB-изображение.

Принципы:
- SRP: только рисование; узор и цвет приходят готовыми.
- Рисование идёт в numpy-массив (H, W, 3), затем упаковывается в `PIL.Image`.

Раскладка спрайта всегда рассчитана на условный холст 350x350 (клетка 70 px,
отступ 35 px) и от `size` не зависит: при size != 350 спрайт обрезается
или оставляет рамку, масштабирования нет. Так ведут себя эталонные генераторы.
"""
from __future__ import annotations

from typing import Iterable, Iterator, Tuple

import numpy as np
from PIL import Image

from identicon.models.hsl_model import RGB
from identicon.services.pattern_service import SPRITE_SIZE

PIXEL_SIZE = 70
MARGIN = PIXEL_SIZE // 2
BACKGROUND: RGB = (240, 240, 240)

Rect = Tuple[int, int, int, int]


class RenderService:
    def render(
        self,
        pixels: Iterable[bool],
        foreground: RGB,
        size: int,
        background: RGB = BACKGROUND,
    ) -> Image.Image:
        """Рисует идентикон: фон целиком, затем квадраты закрашенных клеток.

        Args:
            pixels: 25 значений узора в порядке строк.
            foreground: Цвет закрашенных клеток.
            size: Сторона изображения, px.
            background: Цвет фона.

        Returns:
            `PIL.Image.Image` в режиме "RGB", размером size x size.
        """
        canvas = np.empty((size, size, 3), dtype=np.uint8)
        canvas[:, :] = background
        for x0, y0, x1, y1 in self.painted_rects(pixels, size):
            canvas[y0:y1, x0:x1] = foreground
        return Image.fromarray(canvas)

    def painted_rects(self, pixels: Iterable[bool], size: int) -> Iterator[Rect]:
        """Прямоугольники (x0, y0, x1, y1) закрашенных клеток, обрезанные по границам.

        Полуинтервалы: [x0, x1) x [y0, y1). Клетки целиком за пределами
        изображения пропускаются.
        """
        for index, painted in enumerate(pixels):
            if not painted:
                continue
            row, col = divmod(index, SPRITE_SIZE)
            x = col * PIXEL_SIZE + MARGIN
            y = row * PIXEL_SIZE + MARGIN
            x0, y0 = min(x, size), min(y, size)
            x1, y1 = min(x + PIXEL_SIZE, size), min(y + PIXEL_SIZE, size)
            if x0 < x1 and y0 < y1:
                yield x0, y0, x1, y1
