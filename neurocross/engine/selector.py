"""Daily narrowing of the word bank into an ordered candidate list."""

from __future__ import annotations

from typing import List, Sequence, Set

from ..core.constants import MAX_ANSWER_LENGTH, MIN_ANSWER_LENGTH, PREFERRED_ANSWER_LENGTH
from ..core.models import WordEntry
from ..utils.logger import get_logger
from .rng import Mulberry32


LOGGER = get_logger(__name__)


def pick_daily_words(bank: Sequence[WordEntry], rng: Mulberry32) -> List[WordEntry]:
    """Return the day's candidates: medium lengths first, shuffled, filtered.

    ``sorted`` is stable, so entries at the same distance from the preferred
    length keep their bank order before the shuffle.
    """

    pool = sorted(bank, key=lambda entry: abs(len(entry.answer) - PREFERRED_ANSWER_LENGTH))
    rng.shuffle(pool)

    chosen: List[WordEntry] = []
    seen: Set[str] = set()
    for entry in pool:
        if not MIN_ANSWER_LENGTH <= len(entry.answer) <= MAX_ANSWER_LENGTH:
            continue
        if entry.answer in seen:
            continue
        chosen.append(entry)
        seen.add(entry.answer)

    LOGGER.debug("Selected %d of %d bank entries", len(chosen), len(bank))
    return chosen
