"""Clue numbering of word-start cells."""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, Sequence

from ..core.models import Letter, Placement
from ..core.exceptions import ValidationError


def _is_letter(grid: Sequence[Sequence[Letter]], row: int, col: int) -> bool:
    return 0 <= row < len(grid) and 0 <= col < len(grid[row]) and grid[row][col] is not None


def starts_across(grid: Sequence[Sequence[Letter]], row: int, col: int) -> bool:
    return (
        _is_letter(grid, row, col)
        and not _is_letter(grid, row, col - 1)
        and _is_letter(grid, row, col + 1)
    )


def starts_down(grid: Sequence[Sequence[Letter]], row: int, col: int) -> bool:
    return (
        _is_letter(grid, row, col)
        and not _is_letter(grid, row - 1, col)
        and _is_letter(grid, row + 1, col)
    )


def number_grid(grid: Sequence[Sequence[Letter]]) -> List[List[Optional[int]]]:
    """Number every cell that starts a run of two or more letters.

    Numbers follow a row-major scan of the whole grid; a cell starting both
    an across and a down run gets a single number.
    """

    numbering: List[List[Optional[int]]] = [[None] * len(row) for row in grid]
    next_number = 1
    for r, row in enumerate(grid):
        for c in range(len(row)):
            if starts_across(grid, r, c) or starts_down(grid, r, c):
                numbering[r][c] = next_number
                next_number += 1
    return numbering


def attach_numbers(
    placements: Sequence[Placement], numbering: Sequence[Sequence[Optional[int]]]
) -> List[Placement]:
    """Return copies of ``placements`` carrying the number of their start cell."""

    numbered: List[Placement] = []
    for placement in placements:
        number = numbering[placement.row][placement.col]
        if number is None:
            raise ValidationError(
                f"{placement.answer} starts at unnumbered cell {(placement.row, placement.col)}"
            )
        numbered.append(replace(placement, number=number))
    return numbered
