"""Coverage bookkeeping: isolated-word pruning and intersection scoring."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ..core.models import Placement
from ..utils.logger import get_logger
from .grid import CrosswordGrid


LOGGER = get_logger(__name__)


def coverage_counts(size: int, placements: Sequence[Placement]) -> List[List[int]]:
    """Number of placements covering each cell."""
    counts = [[0] * size for _ in range(size)]
    for placement in placements:
        for row, col in placement.cells:
            counts[row][col] += 1
    return counts


def is_interlocked(placement: Placement, counts: Sequence[Sequence[int]]) -> bool:
    return any(counts[row][col] > 1 for row, col in placement.cells)


def prune_isolated(
    grid: CrosswordGrid, placements: Sequence[Placement]
) -> Tuple[CrosswordGrid, List[Placement]]:
    """Drop placements that share no cell with another placement.

    When something is dropped the grid is rebuilt into a new buffer from the
    survivors; otherwise the inputs are returned as they are.
    """

    if len(placements) <= 1:
        return grid, list(placements)

    counts = coverage_counts(grid.size, placements)
    keep = [p for p in placements if is_interlocked(p, counts)]
    if len(keep) == len(placements):
        return grid, list(placements)

    dropped = [p.answer for p in placements if not is_interlocked(p, counts)]
    LOGGER.debug("Pruning isolated words: %s", ", ".join(dropped))
    return CrosswordGrid.from_placements(grid.size, keep), keep


def count_intersections(size: int, placements: Sequence[Placement]) -> int:
    """Cells shared by more than one placement."""
    counts = coverage_counts(size, placements)
    return sum(1 for row in counts for value in row if value > 1)
