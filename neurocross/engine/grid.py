"""Grid representation and placement helpers."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from ..core.constants import DEFAULT_GRID_SIZE, Direction
from ..core.exceptions import PlacementError
from ..core.models import Bounds, FrozenGrid, Letter, Placement


class CrosswordGrid:
    """Fixed-size square letter buffer owned by a single placement trial."""

    def __init__(self, size: int = DEFAULT_GRID_SIZE) -> None:
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self.cells: List[List[Letter]] = [[None] * size for _ in range(size)]

    @classmethod
    def from_placements(cls, size: int, placements: Iterable[Placement]) -> "CrosswordGrid":
        """Build a fresh grid holding exactly the letters of ``placements``."""
        grid = cls(size)
        for placement in placements:
            for (row, col), letter in zip(placement.cells, placement.answer):
                grid.cells[row][col] = letter
        return grid

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def letter(self, row: int, col: int) -> Letter:
        if not self.contains(row, col):
            return None
        return self.cells[row][col]

    def is_letter(self, row: int, col: int) -> bool:
        return self.letter(row, col) is not None

    def is_empty(self) -> bool:
        return all(cell is None for row in self.cells for cell in row)

    def letter_positions(self, letter: str) -> List[Tuple[int, int]]:
        """All cells holding ``letter``, scanned row-major."""
        return [
            (r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.cells[r][c] == letter
        ]

    def letter_bounds(self) -> Bounds:
        """Tight box around the letters; the whole grid when there are none."""
        rows = [r for r in range(self.size) if any(cell is not None for cell in self.cells[r])]
        cols = [
            c for c in range(self.size) if any(self.cells[r][c] is not None for r in range(self.size))
        ]
        if not rows:
            return Bounds(min_row=0, max_row=self.size - 1, min_col=0, max_col=self.size - 1)
        return Bounds(min_row=rows[0], max_row=rows[-1], min_col=cols[0], max_col=cols[-1])

    def freeze(self) -> FrozenGrid:
        return tuple(tuple(row) for row in self.cells)

    # ------------------------------------------------------------------
    # Word placement
    # ------------------------------------------------------------------
    def can_place(self, word: str, row: int, col: int, direction: Direction) -> bool:
        """Check whether ``word`` fits at ``(row, col)`` without breaking the grid.

        The word must lie inside the grid and the cells just before its first
        and just after its last letter must be empty. Every letter already on
        the grid must match and no two of them may be consecutive. Each newly
        filled cell needs empty neighbours across the other axis.
        """

        dr, dc = direction.step
        pr, pc = direction.perpendicular_step
        length = len(word)
        end_row = row + dr * (length - 1)
        end_col = col + dc * (length - 1)
        if not (self.contains(row, col) and self.contains(end_row, end_col)):
            return False

        if self.is_letter(row - dr, col - dc):
            return False
        if self.is_letter(end_row + dr, end_col + dc):
            return False

        shared_previous = False
        for index, letter in enumerate(word):
            r, c = row + dr * index, col + dc * index
            existing = self.cells[r][c]
            if existing is not None:
                # Two shared cells in a row means running along an existing word.
                if existing != letter or shared_previous:
                    return False
                shared_previous = True
                continue
            shared_previous = False
            if self.is_letter(r - pr, c - pc) or self.is_letter(r + pr, c + pc):
                return False
        return True

    def place_word(self, word: str, row: int, col: int, direction: Direction) -> None:
        """Write ``word`` cell by cell; callers validate with :meth:`can_place` first."""

        dr, dc = direction.step
        coords = [(row + dr * i, col + dc * i) for i in range(len(word))]
        for index, (r, c) in enumerate(coords):
            if not self.contains(r, c):
                raise PlacementError(f"Word {word} extends outside grid at {(r, c)}")
            existing = self.cells[r][c]
            if existing is not None and existing != word[index]:
                raise PlacementError(
                    f"Letter conflict at {(r, c)}: {existing} vs {word[index]}"
                )

        for index, (r, c) in enumerate(coords):
            self.cells[r][c] = word[index]

    def __repr__(self) -> str:
        filled = sum(1 for row in self.cells for cell in row if cell is not None)
        return f"CrosswordGrid(size={self.size}, filled={filled})"

