"""Shared helpers for answer normalization."""

from __future__ import annotations

import re
import unicodedata

ANSWER_RE = re.compile(r"[^A-Z]")


def clean_answer(text: str) -> str:
    """Return ``text`` upper-cased with accents folded and anything but A-Z removed."""

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return ANSWER_RE.sub("", stripped.upper())


__all__ = ["clean_answer"]
