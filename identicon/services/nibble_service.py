from __future__ import annotations

from typing import Iterator


def iter_nibbles(source: bytes) -> Iterator[int]:
    """
    Ленивая последовательность 4-битных значений: старший, затем младший полубайт
    каждого байта. Длина ровно 2 * len(source); пустой вход даёт пустую последовательность.
    Для повторного прохода генератор создаётся заново.
    """
    for byte in source:
        yield byte >> 4
        yield byte & 0x0F
