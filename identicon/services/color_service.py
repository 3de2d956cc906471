"""Вычисление цвета переднего плана по байтам источника и режиму.

Принципы:
- SRP: только выбор HSL по режиму; перевод в RGB делегирован `HSL.rgb()`.
- Режимы образуют закрытое объединение `Mode`, разбор исчерпывающий, неизвестный тип даёт TypeError.
- Длина источника проверяется явно до чтения байтов: отрицательные индексы Python
  молча «заворачивались» бы на начало последовательности.
"""
from __future__ import annotations

import logging

import numpy as np

from identicon.models.hsl_model import HSL, RGB
from identicon.models.mode_model import GitHub, IdenticonJS, IdenticonJSOptions, Mode

logger = logging.getLogger(__name__)

GITHUB_MIN_SOURCE = 16
IDENTICON_JS_MIN_SOURCE = 4

_F = np.float32


class SourceTooShortError(ValueError):
    """Источник короче, чем требует выбранный режим."""

    def __init__(self, mode_name: str, required: int, actual: int) -> None:
        super().__init__(
            f"Режим {mode_name} требует не менее {required} байт источника, получено {actual}"
        )
        self.mode_name = mode_name
        self.required = required
        self.actual = actual


def map_range(value: int, vmin: int, vmax: int, dmin: int, dmax: int) -> float:
    """Аффинное отображение `value` из [vmin, vmax] в [dmin, dmax].

    Считается в одинарной точности, как в processing.org `map()`.
    Вызывающий гарантирует vmin <= value <= vmax и vmax != vmin.
    """
    scale = _F(dmax - dmin) / _F(vmax - vmin)
    return float(_F(value - vmin) * scale + _F(dmin))


class ColorService:
    def foreground(self, source: bytes, mode: Mode) -> RGB:
        """Цвет переднего плана в RGB.

        Raises:
            SourceTooShortError: если источник короче минимума для режима.
            TypeError: если `mode` не является одним из вариантов `Mode`.
        """
        return self.hsl(source, mode).rgb()

    def hsl(self, source: bytes, mode: Mode) -> HSL:
        if isinstance(mode, GitHub):
            return self._github_hsl(source)
        if isinstance(mode, IdenticonJS):
            return self._identicon_js_hsl(source, mode.options)
        raise TypeError(f"Неподдерживаемый режим: {mode!r}")

    def _github_hsl(self, source: bytes) -> HSL:
        # последние 28 бит 16-байтного хеша
        _require_length(source, GITHUB_MIN_SOURCE, GitHub.name)
        h = ((source[12] & 0x0F) << 8) | source[13]
        sat_byte = source[14]
        lum_byte = source[15]

        hue = map_range(h, 0, 4095, 0, 360)
        sat = map_range(sat_byte, 0, 255, 0, 20)
        lum = map_range(lum_byte, 0, 255, 0, 20)
        # приглушённые тона: насыщенность [45, 65], светлота [55, 75]
        return HSL(
            hue=hue,
            saturation=float(_F(65.0) - _F(sat)),
            luminance=float(_F(75.0) - _F(lum)),
        )

    def _identicon_js_hsl(self, source: bytes, options: IdenticonJSOptions) -> HSL:
        # Identicon.js берёт последние байты независимо от длины хеша
        _require_length(source, IDENTICON_JS_MIN_SOURCE, IdenticonJS.name)
        tail = source[-4:]
        h = tail[0] & 0x0F
        for byte in tail[1:]:
            h = (h << 8) | byte

        hue = map_range(h, 0, 0x0FFFFFFF, 0, 360)
        return HSL(
            hue=hue,
            saturation=float(_F(options.saturation) * _F(100.0)),
            luminance=float(_F(options.brightness) * _F(100.0)),
        )


def _require_length(source: bytes, required: int, mode_name: str) -> None:
    if len(source) < required:
        logger.debug("source too short for %s: %d < %d", mode_name, len(source), required)
        raise SourceTooShortError(mode_name, required, len(source))
