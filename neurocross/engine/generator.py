"""Daily crossword generation orchestration.

Pipeline:
  1. Derive the base seed from the date string and pick the day's words.
  2. Run placement trials at ``base_seed + salt`` until one places enough
     words, remembering the best layout seen.
  3. Number the chosen layout and freeze it into a :class:`PuzzleResult`.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..core.constants import DEFAULT_GRID_SIZE, DEFAULT_MAX_SALTS, DEFAULT_MIN_WORDS
from ..core.models import PuzzleResult, WordEntry
from ..utils.logger import get_logger
from .numbering import attach_numbers, number_grid
from .placer import TrialLayout, run_trial
from .rng import seed_rng
from .seed import date_to_seed
from .selector import pick_daily_words


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    grid_size: int = DEFAULT_GRID_SIZE
    min_words: int = DEFAULT_MIN_WORDS
    max_salts: int = DEFAULT_MAX_SALTS
    time_budget_seconds: Optional[float] = None
    bank_limit: Optional[int] = None

    def __post_init__(self) -> None:
        if self.grid_size <= 0:
            raise ValueError(f"grid_size must be positive, got {self.grid_size}")
        if self.bank_limit is not None and self.bank_limit < 0:
            raise ValueError(f"bank_limit cannot be negative, got {self.bank_limit}")


class CrosswordGenerator:
    """Turns a word bank and a date string into the puzzle of that day."""

    def __init__(self, bank: Sequence[WordEntry], config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or GeneratorConfig()
        limit = self.config.bank_limit
        self.bank: List[WordEntry] = list(bank if limit is None else bank[:limit])

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, date_string: str) -> PuzzleResult:
        base_seed = date_to_seed(date_string)
        LOGGER.info("Generating puzzle for %s (seed %s)", date_string, base_seed)
        words = self.select_words(base_seed)
        trial = self.run_trials(words, base_seed)
        result = self.finalize(trial, base_seed)
        LOGGER.info(
            "Puzzle for %s uses salt %s with %d words and %d crossings",
            date_string,
            result.salt,
            len(result.placements),
            trial.intersections,
        )
        return result

    def select_words(self, base_seed: int) -> List[WordEntry]:
        return pick_daily_words(self.bank, seed_rng(base_seed))

    def run_trials(self, words: Sequence[WordEntry], base_seed: int) -> TrialLayout:
        """Return the first trial reaching ``min_words``, else the best one seen.

        Later salts are never consulted once a trial meets the threshold, so
        a day's puzzle stays stable even if a later salt would score higher.
        """

        config = self.config
        best: Optional[TrialLayout] = None
        started = time.monotonic()
        for salt in range(config.max_salts):
            if salt and self._budget_spent(started):
                LOGGER.warning(
                    "Time budget of %.2fs spent after %d trials", config.time_budget_seconds, salt
                )
                break
            trial = run_trial(words, base_seed + salt, config.grid_size)
            LOGGER.debug(
                "Salt %d: %d words, %d crossings, quality %d",
                salt,
                trial.placed_count,
                trial.intersections,
                trial.quality,
            )
            if best is None or trial.quality > best.quality:
                best = trial
            if trial.placed_count >= config.min_words:
                return trial

        if best is None:
            return run_trial(words, base_seed, config.grid_size)
        LOGGER.info(
            "No trial reached %d words; keeping best layout with %d",
            config.min_words,
            best.placed_count,
        )
        return best

    def finalize(self, trial: TrialLayout, base_seed: int) -> PuzzleResult:
        numbering = number_grid(trial.grid.cells)
        placements = attach_numbers(trial.placements, numbering)
        return PuzzleResult(
            grid=trial.grid.freeze(),
            placements=tuple(placements),
            numbering=tuple(tuple(row) for row in numbering),
            bounds=trial.grid.letter_bounds(),
            seed=base_seed,
            salt=trial.seed - base_seed,
        )

    def _budget_spent(self, started: float) -> bool:
        budget = self.config.time_budget_seconds
        return budget is not None and time.monotonic() - started >= budget


def generate(
    bank: Sequence[WordEntry], date_string: str, config: Optional[GeneratorConfig] = None
) -> PuzzleResult:
    """Generate the puzzle for ``date_string``; deterministic for fixed inputs."""
    return CrosswordGenerator(bank, config).generate(date_string)
