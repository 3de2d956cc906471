"""Режимы вычисления цвета идентикона.

Набор режимов закрыт: `GitHub` и `IdenticonJS`. Это размеченное объединение
(`Mode`), сервисы разбирают его через `isinstance` по всем вариантам.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

GITHUB = "github"
IDENTICON_JS = "identiconjs"
MODE_NAMES = (GITHUB, IDENTICON_JS)


@dataclass(frozen=True)
class IdenticonJSOptions:
    """Постоянные насыщенность и яркость Identicon.js, значения в [0.0, 1.0].

    Значения по умолчанию совпадают с identicon.js (0.7 и 0.5).
    Диапазон не проверяется: выход за него даёт «пересвеченный», но определённый цвет.
    """
    saturation: float = 0.7
    brightness: float = 0.5


@dataclass(frozen=True)
class GitHub:
    """Цвета как у GitHub. Режим по умолчанию."""

    name = GITHUB


@dataclass(frozen=True)
class IdenticonJS:
    """Цвета как у Identicon.js: тон из хвоста хеша, насыщенность/яркость из опций."""
    options: IdenticonJSOptions = field(default_factory=IdenticonJSOptions)

    name = IDENTICON_JS


Mode = Union[GitHub, IdenticonJS]


def mode_from_name(name: str, saturation: float = 0.7, brightness: float = 0.5) -> Mode:
    """Строит режим по имени ("github" | "identiconjs").

    Raises:
        ValueError: если имя режима неизвестно.
    """
    key = name.strip().lower().replace(".", "").replace("-", "").replace("_", "")
    if key == GITHUB:
        return GitHub()
    if key == IDENTICON_JS:
        return IdenticonJS(IdenticonJSOptions(saturation=saturation, brightness=brightness))
    raise ValueError(f"Неизвестный режим: {name!r} (ожидается одно из {', '.join(MODE_NAMES)})")
