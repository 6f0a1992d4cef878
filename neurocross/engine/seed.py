"""Stable string hashing used to turn a calendar date into a puzzle seed."""

from __future__ import annotations

from .rng import UINT32_MASK


FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193


def fnv1a_32(text: str) -> int:
    """32-bit FNV-1a over the UTF-16 code units of ``text``.

    Python's built-in :func:`hash` is salted per process and cannot be used.
    """

    h = FNV_OFFSET_BASIS
    raw = text.encode("utf-16-le")
    for i in range(0, len(raw), 2):
        code = raw[i] | (raw[i + 1] << 8)
        h = ((h ^ code) * FNV_PRIME) & UINT32_MASK
    return h


def date_to_seed(date_string: str) -> int:
    """Base seed for the puzzle of ``date_string`` (``YYYY-MM-DD``)."""
    return fnv1a_32(date_string)
