"""Построение зеркального узора 5x5 из полубайтов источника.

Принципы:
- SRP: только узор (какие клетки закрашены), без цвета и растеризации.
- Узор возвращается кортежем из 25 bool в порядке строк (row-major).
"""
from __future__ import annotations

from typing import Iterable, Tuple

from identicon.services.nibble_service import iter_nibbles

SPRITE_SIZE = 5
CELL_COUNT = SPRITE_SIZE * SPRITE_SIZE
# левая половина плюс центральный столбец
HALF_WIDTH = (SPRITE_SIZE + 1) // 2

PixelGrid = Tuple[bool, ...]


class PatternService:
    def pixels(self, source: bytes) -> PixelGrid:
        """Строит узор 5x5 с зеркальной симметрией относительно центрального столбца.

        Чётный полубайт означает закрашенную клетку. Столбцы обходятся от центра
        к левому краю (2, 1, 0), внутри столбца строки сверху вниз; каждый бит
        пишется в клетку и в её зеркало. Этот порядок определяет, какие биты хеша
        попадают в какие клетки, и должен сохраняться.

        Если полубайтов не хватило, оставшиеся клетки остаются незакрашенными.
        """
        paints = (nibble % 2 == 0 for nibble in iter_nibbles(source))
        cells = [False] * CELL_COUNT
        for col in reversed(range(HALF_WIDTH)):
            mirror_col = SPRITE_SIZE - 1 - col
            for row in range(SPRITE_SIZE):
                paint = next(paints, False)
                cells[row * SPRITE_SIZE + col] = paint
                cells[row * SPRITE_SIZE + mirror_col] = paint
        return tuple(cells)

    def rows(self, pixels: Iterable[bool]) -> Tuple[PixelGrid, ...]:
        """Разбивает узор на строки по SPRITE_SIZE клеток."""
        cells = tuple(pixels)
        return tuple(cells[i:i + SPRITE_SIZE] for i in range(0, len(cells), SPRITE_SIZE))

    def to_text(self, pixels: Iterable[bool], painted: str = "#", blank: str = ".") -> str:
        """Текстовое представление узора (по строке на ряд), удобно для CLI и отладки."""
        return "\n".join("".join(painted if cell else blank for cell in row) for row in self.rows(pixels))
