"""Single placement trial: lay the candidate words onto a fresh grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..core.constants import DEFAULT_GRID_SIZE, WORD_QUALITY_WEIGHT, Direction
from ..core.models import Placement, WordEntry
from ..utils.logger import get_logger
from .grid import CrosswordGrid
from .interlock import count_intersections, prune_isolated
from .rng import Mulberry32, seed_rng


LOGGER = get_logger(__name__)


@dataclass
class TrialLayout:
    """Outcome of one trial; the grid is not touched once the trial ends."""

    seed: int
    grid: CrosswordGrid
    placements: List[Placement] = field(default_factory=list)
    intersections: int = 0

    @property
    def placed_count(self) -> int:
        return len(self.placements)

    @property
    def quality(self) -> int:
        return self.placed_count * WORD_QUALITY_WEIGHT + self.intersections


def run_trial(
    words: Sequence[WordEntry], seed: int, size: int = DEFAULT_GRID_SIZE
) -> TrialLayout:
    """Place ``words`` in an order and at crossings drawn from ``seed``."""

    rng = seed_rng(seed)
    grid = CrosswordGrid(size)
    pending = rng.shuffled(list(words))

    anchor_index = _anchor_index(pending, size)
    if anchor_index is None:
        return TrialLayout(seed=seed, grid=grid)

    anchor = pending[anchor_index]
    row = size // 2
    col = max(0, min(size - anchor.length, size // 2 - anchor.length // 2))
    grid.place_word(anchor.answer, row, col, Direction.ACROSS)
    placements = [Placement(anchor.answer, anchor.clue, row, col, Direction.ACROSS)]

    for entry in pending[anchor_index + 1:]:
        placement = _find_crossing(grid, entry, rng)
        if placement is None:
            LOGGER.debug("Seed %s: no crossing for %s, dropping it", seed, entry.answer)
            continue
        grid.place_word(placement.answer, placement.row, placement.col, placement.direction)
        placements.append(placement)

    grid, placements = prune_isolated(grid, placements)
    return TrialLayout(
        seed=seed,
        grid=grid,
        placements=placements,
        intersections=count_intersections(size, placements),
    )


def _anchor_index(pending: Sequence[WordEntry], size: int) -> Optional[int]:
    for index, entry in enumerate(pending):
        if entry.length <= size:
            return index
        LOGGER.debug("%s does not fit a %sx%s grid", entry.answer, size, size)
    return None


def _find_crossing(
    grid: CrosswordGrid, entry: WordEntry, rng: Mulberry32
) -> Optional[Placement]:
    word = entry.answer
    letters = list(dict.fromkeys(word))
    rng.shuffle(letters)
    for letter in letters:
        positions = grid.letter_positions(letter)
        if not positions:
            continue
        indexes = [i for i, char in enumerate(word) if char == letter]
        rng.shuffle(indexes)
        for index in indexes:
            for row, col in positions:
                if grid.can_place(word, row, col - index, Direction.ACROSS):
                    return Placement(word, entry.clue, row, col - index, Direction.ACROSS)
                if grid.can_place(word, row - index, col, Direction.DOWN):
                    return Placement(word, entry.clue, row - index, col, Direction.DOWN)
    return None
