"""Data models supporting the crossword generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .constants import Direction


Letter = Optional[str]
FrozenGrid = Tuple[Tuple[Letter, ...], ...]
Numbering = Tuple[Tuple[Optional[int], ...], ...]


@dataclass(frozen=True)
class WordEntry:
    """An answer and its clue as provided by the word bank."""

    answer: str
    clue: str

    @property
    def length(self) -> int:
        return len(self.answer)


@dataclass(frozen=True)
class Placement:
    """A word fixed on the grid at a start cell and direction."""

    answer: str
    clue: str
    row: int
    col: int
    direction: Direction
    number: Optional[int] = None

    @property
    def length(self) -> int:
        return len(self.answer)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        dr, dc = self.direction.step
        return [(self.row + dr * i, self.col + dc * i) for i in range(len(self.answer))]

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "answer": self.answer,
            "clue": self.clue,
            "row": self.row,
            "col": self.col,
            "direction": self.direction.value,
            "number": self.number,
            "length": self.length,
        }


@dataclass(frozen=True)
class Bounds:
    """Tight bounding box of the letter cells, used for viewport sizing."""

    min_row: int
    max_row: int
    min_col: int
    max_col: int

    @property
    def rows(self) -> int:
        return self.max_row - self.min_row + 1

    @property
    def cols(self) -> int:
        return self.max_col - self.min_col + 1

    def contains(self, row: int, col: int) -> bool:
        return self.min_row <= row <= self.max_row and self.min_col <= col <= self.max_col

    def to_jsonable(self) -> Dict[str, int]:
        return {
            "min_row": self.min_row,
            "max_row": self.max_row,
            "min_col": self.min_col,
            "max_col": self.max_col,
        }


@dataclass(frozen=True)
class PuzzleResult:
    """Finished puzzle handed to consumers; never mutated after generation."""

    grid: FrozenGrid
    placements: Tuple[Placement, ...]
    numbering: Numbering
    bounds: Bounds
    seed: int = 0
    salt: int = 0

    @property
    def size(self) -> int:
        return len(self.grid)

    @property
    def across(self) -> List[Placement]:
        return self._by_direction(Direction.ACROSS)

    @property
    def down(self) -> List[Placement]:
        return self._by_direction(Direction.DOWN)

    def _by_direction(self, direction: Direction) -> List[Placement]:
        selected = [p for p in self.placements if p.direction is direction]
        return sorted(selected, key=lambda p: p.number or 0)

    def letter_count(self) -> int:
        return sum(1 for row in self.grid for letter in row if letter is not None)

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "size": self.size,
            "seed": self.seed,
            "salt": self.salt,
            "grid": [list(row) for row in self.grid],
            "numbering": [list(row) for row in self.numbering],
            "bounds": self.bounds.to_jsonable(),
            "placements": [p.to_jsonable() for p in self.placements],
            "across": [p.to_jsonable() for p in self.across],
            "down": [p.to_jsonable() for p in self.down],
        }
