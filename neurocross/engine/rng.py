"""Deterministic pseudo-random stream shared by the selector and the placer.

The generator never touches :mod:`random`: puzzles must be reproducible
bit-for-bit from a 32-bit seed on any platform, so the Mulberry32 recurrence
is implemented directly on masked integers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, MutableSequence, TypeVar


UINT32_MASK = 0xFFFFFFFF
UINT32_SCALE = 4294967296.0
MULBERRY_INCREMENT = 0x6D2B79F5

T = TypeVar("T")


@dataclass
class Mulberry32:
    """Mulberry32 generator returning floats in ``[0, 1)``."""

    seed: int

    def __post_init__(self) -> None:
        self._state = self.seed & UINT32_MASK

    def random(self) -> float:
        self._state = (self._state + MULBERRY_INCREMENT) & UINT32_MASK
        t = self._state
        r = ((t ^ (t >> 15)) * (t | 1)) & UINT32_MASK
        r ^= (r + (((r ^ (r >> 7)) * (r | 61)) & UINT32_MASK)) & UINT32_MASK
        return ((r ^ (r >> 14)) & UINT32_MASK) / UINT32_SCALE

    __call__ = random

    def randbelow(self, n: int) -> int:
        """Return an integer in ``[0, n)``."""
        if n <= 0:
            raise ValueError("Upper bound must be positive")
        return int(self.random() * n)

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Fisher-Yates shuffle of ``items`` in place, last index first."""
        for i in range(len(items) - 1, 0, -1):
            j = self.randbelow(i + 1)
            items[i], items[j] = items[j], items[i]

    def shuffled(self, items: List[T]) -> List[T]:
        copy = list(items)
        self.shuffle(copy)
        return copy


def seed_rng(seed: int) -> Mulberry32:
    """Return a fresh stream for ``seed`` (masked to 32 bits)."""
    return Mulberry32(seed)
