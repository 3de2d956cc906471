"""Корень вычисления идентикона: источник, размер, режим.

Принципы:
- Без состояния между запросами: каждый вызов `image()`/`render()` считает всё заново.
- Настройка «цепочкой»: `with_mode()`/`with_size()` возвращают новый объект.
- Источник копируется в неизменяемые `bytes`; длина не проверяется при создании,
  только при вычислении цвета (см. `SourceTooShortError`).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from PIL import Image

from identicon.models.hsl_model import HSL, RGB
from identicon.models.image_model import IdenticonImage
from identicon.models.mode_model import GitHub, Mode
from identicon.services.color_service import ColorService
from identicon.services.pattern_service import PatternService, PixelGrid
from identicon.services.render_service import RenderService

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 420

_color_service = ColorService()
_pattern_service = PatternService()
_render_service = RenderService()


@dataclass(frozen=True)
class Identicon:
    """Идентикон для последовательности байтов.

    Fields:
        source: Байты источника; для GitHub нужно >= 16, для Identicon.js >= 4.
        size: Сторона выходного изображения, px.
        mode: Режим вычисления цвета, по умолчанию `GitHub()`.
    """
    source: bytes
    size: int = DEFAULT_SIZE
    mode: Mode = field(default_factory=GitHub)

    def __post_init__(self) -> None:
        object.__setattr__(self, "source", bytes(self.source))
        if self.size <= 0:
            raise ValueError(f"Размер изображения должен быть положительным: {self.size}")

    def with_mode(self, mode: Mode) -> Identicon:
        return replace(self, mode=mode)

    def with_size(self, size: int) -> Identicon:
        return replace(self, size=size)

    def hsl(self) -> HSL:
        return _color_service.hsl(self.source, self.mode)

    def foreground(self) -> RGB:
        return _color_service.foreground(self.source, self.mode)

    def pixels(self) -> PixelGrid:
        return _pattern_service.pixels(self.source)

    def image(self) -> Image.Image:
        """Изображение size x size в режиме "RGB"."""
        return self.render().pil_image

    def render(self) -> IdenticonImage:
        """Считает цвет, узор и изображение и возвращает их вместе.

        Raises:
            SourceTooShortError: если источник короче минимума для режима.
        """
        logger.debug(
            "rendering identicon: mode=%s size=%d source_len=%d",
            getattr(self.mode, "name", type(self.mode).__name__),
            self.size,
            len(self.source),
        )
        hsl = self.hsl()
        foreground = hsl.rgb()
        pixels = self.pixels()
        pil_image = _render_service.render(pixels, foreground, self.size)
        return IdenticonImage(
            source=self.source,
            mode=self.mode,
            size=self.size,
            hsl=hsl,
            foreground=foreground,
            pixels=pixels,
            pil_image=pil_image,
        )
