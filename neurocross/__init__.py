"""Deterministic daily neurology crossword generator.

This package exposes the public API surface via:

- ``neurocross.engine.generator.generate``: builds the puzzle of a date.
- ``neurocross.engine.solution.is_solved``: checks a player grid.
- ``neurocross.data.neurology.NEUROLOGY_BANK``: the built-in word bank.

The same bank, date string and configuration always produce the same puzzle.
"""

from .core.constants import Direction
from .core.models import Bounds, Placement, PuzzleResult, WordEntry
from .data.neurology import NEUROLOGY_BANK, default_bank
from .engine.generator import CrosswordGenerator, GeneratorConfig, generate
from .engine.solution import blank_player_grid, is_solved

__all__ = [
    "Bounds",
    "CrosswordGenerator",
    "Direction",
    "GeneratorConfig",
    "NEUROLOGY_BANK",
    "Placement",
    "PuzzleResult",
    "WordEntry",
    "blank_player_grid",
    "default_bank",
    "generate",
    "is_solved",
]

__version__ = "0.1.0"
