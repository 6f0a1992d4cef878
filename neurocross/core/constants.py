"""Shared constants and enumerations for the daily crossword generator."""

from __future__ import annotations

from enum import Enum
from typing import Tuple


DEFAULT_GRID_SIZE = 13
DEFAULT_MIN_WORDS = 8
DEFAULT_MAX_SALTS = 80

MIN_ANSWER_LENGTH = 3
MAX_ANSWER_LENGTH = 13
# Answers close to this length are favoured before the daily shuffle.
PREFERRED_ANSWER_LENGTH = 7

# Placed words outweigh intersections when ranking trials.
WORD_QUALITY_WEIGHT = 10

DEFAULT_TIMEZONE = "America/Phoenix"
DATE_FORMAT = "%Y-%m-%d"


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.ACROSS else (1, 0)

    @property
    def perpendicular_step(self) -> Tuple[int, int]:
        return (1, 0) if self is Direction.ACROSS else (0, 1)
