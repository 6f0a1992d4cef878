"""Deterministic rule validation for generated puzzles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..core.constants import Direction
from ..core.exceptions import ValidationError
from ..core.models import PuzzleResult
from ..utils.logger import get_logger
from .interlock import coverage_counts, is_interlocked
from .numbering import number_grid


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str] = field(default_factory=list)


class PuzzleValidator:
    """Runs the structural checks every returned puzzle must satisfy."""

    def validate(self, result: PuzzleResult) -> ValidationResult:
        try:
            self._check_letters_valid(result)
            self._check_letter_consistency(result)
            self._check_full_coverage(result)
            self._check_interlock(result)
            self._check_numbering(result)
        except ValidationError as exc:
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True)

    def _check_letters_valid(self, result: PuzzleResult) -> None:
        for r, row in enumerate(result.grid):
            for c, letter in enumerate(row):
                if letter is None:
                    continue
                if len(letter) != 1 or not ("A" <= letter <= "Z"):
                    raise ValidationError(f"Invalid letter '{letter}' at ({r},{c})")

    def _check_letter_consistency(self, result: PuzzleResult) -> None:
        size = result.size
        for placement in result.placements:
            for (r, c), letter in zip(placement.cells, placement.answer):
                if not (0 <= r < size and 0 <= c < size):
                    raise ValidationError(f"{placement.answer} leaves the grid at ({r},{c})")
                if result.grid[r][c] != letter:
                    raise ValidationError(
                        f"{placement.answer} expects '{letter}' at ({r},{c}), "
                        f"grid holds '{result.grid[r][c]}'"
                    )

    def _check_full_coverage(self, result: PuzzleResult) -> None:
        covered = {cell for placement in result.placements for cell in placement.cells}
        for r, row in enumerate(result.grid):
            for c, letter in enumerate(row):
                if letter is not None and (r, c) not in covered:
                    raise ValidationError(f"Letter at ({r},{c}) belongs to no placement")

    def _check_interlock(self, result: PuzzleResult) -> None:
        if len(result.placements) <= 1:
            return
        counts = coverage_counts(result.size, result.placements)
        for placement in result.placements:
            if not is_interlocked(placement, counts):
                raise ValidationError(f"{placement.answer} does not cross any other word")

    def _check_numbering(self, result: PuzzleResult) -> None:
        expected = number_grid(result.grid)
        if [list(row) for row in result.numbering] != expected:
            raise ValidationError("Numbering does not follow the row-major start scan")
        for placement in result.placements:
            if placement.number != result.numbering[placement.row][placement.col]:
                raise ValidationError(
                    f"{placement.answer} carries number {placement.number}, "
                    f"start cell holds {result.numbering[placement.row][placement.col]}"
                )
        for direction in Direction:
            numbers = [p.number for p in result.placements if p.direction is direction]
            if any(number is None for number in numbers):
                raise ValidationError(f"Unnumbered {direction.value.lower()} placement")
            if len(set(numbers)) != len(numbers):
                raise ValidationError(f"Duplicate {direction.value.lower()} clue number")
