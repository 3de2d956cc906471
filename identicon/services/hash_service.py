"""Подготовка источника: хеш текста или готовый hex-хеш.

GitHub строит идентиконы по MD5, поэтому он здесь по умолчанию.
"""
from __future__ import annotations

import hashlib
from typing import Tuple

DEFAULT_ALGORITHM = "md5"
ALGORITHMS: Tuple[str, ...] = ("md5", "sha1", "sha256", "sha512")


class HashService:
    def digest(self, text: str, algorithm: str = DEFAULT_ALGORITHM) -> bytes:
        """Хеширует текст (UTF-8) выбранным алгоритмом.

        Raises:
            ValueError: если алгоритм не поддерживается.
        """
        name = algorithm.strip().lower()
        if name not in ALGORITHMS:
            raise ValueError(f"Неподдерживаемый алгоритм: {algorithm!r} (доступны: {', '.join(ALGORITHMS)})")
        return hashlib.new(name, text.encode("utf-8")).digest()

    def from_hex(self, text: str) -> bytes:
        """Разбирает готовый хеш в hex-записи (пробелы и префикс 0x допускаются).

        Raises:
            ValueError: если строка не является корректной hex-записью.
        """
        cleaned = "".join(text.split())
        if cleaned[:2].lower() == "0x":
            cleaned = cleaned[2:]
        try:
            return bytes.fromhex(cleaned)
        except ValueError as exc:
            raise ValueError(f"Некорректная hex-строка: {text!r}") from exc
