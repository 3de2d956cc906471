"""Цветовая модель HSL и её перевод в RGB.

Принципы:
- SRP: только значение цвета и одна производная операция `rgb()`.
- Неизменяемость (`frozen=True`): значение можно свободно передавать между сервисами.

Вычисления ведутся в одинарной точности (numpy.float32), чтобы результат
совпадал с эталонными генераторами идентиконов до последнего бита.
Алгоритм: http://www.w3.org/TR/css3-color/#hsl-color
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

RGB = Tuple[int, int, int]

_F = np.float32
_ONE = _F(1.0)
_ONE_SIXTH = _ONE / _F(6.0)
_ONE_THIRD = _ONE / _F(3.0)
_HALF = _ONE / _F(2.0)
_TWO_THIRDS = _F(2.0) / _F(3.0)


@dataclass(frozen=True)
class HSL:
    """Цвет в пространстве HSL.

    Fields:
        hue: Тон в градусах, [0, 360).
        saturation: Насыщенность в процентах, [0, 100].
        luminance: Светлота в процентах, [0, 100].
    """
    hue: float
    saturation: float
    luminance: float

    def rgb(self) -> RGB:
        """Переводит цвет в RGB (по 8 бит на канал)."""
        hue = _F(self.hue) / _F(360.0)
        sat = _F(self.saturation) / _F(100.0)
        lum = _F(self.luminance) / _F(100.0)

        if lum <= _HALF:
            b = lum * (sat + _ONE)
        else:
            b = lum + sat - lum * sat
        a = lum * _F(2.0) - b

        red = _hue_to_channel(a, b, hue + _ONE_THIRD)
        green = _hue_to_channel(a, b, hue)
        blue = _hue_to_channel(a, b, hue - _ONE_THIRD)
        return _to_u8(red), _to_u8(green), _to_u8(blue)


def _hue_to_channel(a: np.float32, b: np.float32, hue: np.float32) -> np.float32:
    # одна коррекция, без полного приведения по модулю
    if hue < 0:
        h = hue + _ONE
    elif hue > _ONE:
        h = hue - _ONE
    else:
        h = hue

    if h < _ONE_SIXTH:
        return a + (b - a) * _F(6.0) * h
    if h < _HALF:
        return b
    if h < _TWO_THIRDS:
        return a + (b - a) * (_TWO_THIRDS - h) * _F(6.0)
    return a


def _to_u8(channel: np.float32) -> int:
    """Масштабирует канал [0..1] в [0..255]: округление от нуля, насыщение в u8."""
    scaled = float(channel * _F(255.0))
    if math.isnan(scaled) or scaled <= 0:
        return 0
    return min(255, math.floor(scaled + 0.5))
