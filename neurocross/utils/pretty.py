"""Pretty-print helpers for generated puzzles."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from ..core.models import Placement, PuzzleResult
    from ..engine.validator import ValidationResult


BLOCK_SYMBOL = "#"


def format_grid(result: PuzzleResult, *, show_numbers: bool = False) -> str:
    """Render the bounded box of the solution grid.

    With ``show_numbers`` start cells show their clue number instead of the
    letter, which is the shape a blank printed puzzle takes.
    """

    bounds = result.bounds
    cols = range(bounds.min_col, bounds.max_col + 1)
    lines = ["    " + " ".join(f"{c:>2}" for c in cols)]
    lines.append("    " + "-" * (3 * len(cols) - 1))
    for r in range(bounds.min_row, bounds.max_row + 1):
        row_cells: List[str] = []
        for c in cols:
            letter = result.grid[r][c]
            number = result.numbering[r][c]
            if letter is None:
                row_cells.append(BLOCK_SYMBOL)
            elif show_numbers:
                row_cells.append(str(number) if number is not None else ".")
            else:
                row_cells.append(letter)
        lines.append(f"{r:>2} | " + " ".join(f"{symbol:>2}" for symbol in row_cells))
    return "\n".join(lines)


def _clue_line(placement: Placement) -> str:
    return f"{placement.number:>3}. {placement.clue} ({placement.length})"


def format_clues(result: PuzzleResult) -> str:
    lines: List[str] = []
    for title, placements in (("Across", result.across), ("Down", result.down)):
        if lines:
            lines.append("")
        lines.append(title)
        if not placements:
            lines.append("  (none)")
        lines.extend(_clue_line(p) for p in placements)
    return "\n".join(lines)


def print_puzzle_stats(
    result: PuzzleResult,
    validation: Optional[ValidationResult] = None,
    *,
    stream=None,
) -> None:
    """Print grid, clues and summary stats for a generated puzzle."""

    stream = stream or sys.stdout
    print(format_grid(result), file=stream)
    print(file=stream)
    print(format_clues(result), file=stream)

    total_cells = result.size * result.size
    letters = result.letter_count()
    lengths = [p.length for p in result.placements]
    length_dist = Counter(lengths)

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {result.size} x {result.size} ({total_cells} cells)", file=stream)
    print(f"  Used box:      {result.bounds.rows} x {result.bounds.cols}", file=stream)
    print(f"  Letters:       {letters} ({letters / total_cells * 100:.0f}%)", file=stream)

    print(file=stream)
    print("--- Words ---", file=stream)
    print(
        f"  Placed:        {len(result.placements)} "
        f"({len(result.across)} across, {len(result.down)} down)",
        file=stream,
    )
    if lengths:
        print(f"  Length range:  {min(lengths)}-{max(lengths)} (avg {sum(lengths) / len(lengths):.1f})", file=stream)
        dist_parts = [f"{length}:{count}" for length, count in sorted(length_dist.items())]
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)

    if validation is not None and validation.messages:
        print(file=stream)
        print("--- Validation ---", file=stream)
        for msg in validation.messages:
            print(f"  {msg}", file=stream)

    print(file=stream)
    print(f"Seed: {result.seed} (salt {result.salt})", file=stream)
