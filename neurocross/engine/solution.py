"""Stateless helpers for the player-entered grid."""

from __future__ import annotations

from typing import List, Optional, Sequence


def blank_player_grid(solution: Sequence[Sequence[Optional[str]]]) -> List[List[Optional[str]]]:
    """Fresh mutable player grid: ``""`` on letter cells, ``None`` on blocks."""
    return [["" if letter is not None else None for letter in row] for row in solution]


def is_solved(
    player: Sequence[Sequence[Optional[str]]],
    solution: Sequence[Sequence[Optional[str]]],
) -> bool:
    """True when every solution letter is matched in ``player``.

    Comparison ignores case; empty solution cells are not checked and player
    cells missing from a short grid count as empty.
    """

    for r, row in enumerate(solution):
        for c, expected in enumerate(row):
            if expected is None:
                continue
            entered = player[r][c] if r < len(player) and c < len(player[r]) else None
            if (entered or "").upper() != expected.upper():
                return False
    return True
