import unittest
from dataclasses import replace

from neurocross.core.constants import Direction
from neurocross.core.models import Placement
from neurocross.engine.generator import CrosswordGenerator
from neurocross.engine.grid import CrosswordGrid
from neurocross.engine.interlock import count_intersections
from neurocross.engine.placer import TrialLayout
from neurocross.engine.validator import PuzzleValidator


def _result_for(size, placements):
    grid = CrosswordGrid.from_placements(size, placements)
    trial = TrialLayout(
        seed=7,
        grid=grid,
        placements=list(placements),
        intersections=count_intersections(size, placements),
    )
    return CrosswordGenerator([]).finalize(trial, base_seed=7)


class PuzzleValidatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.validator = PuzzleValidator()
        self.placements = [
            Placement("CAT", "Feline", 2, 1, Direction.ACROSS),
            Placement("OAT", "Grain", 1, 2, Direction.DOWN),
        ]

    def test_accepts_interlocked_layout(self) -> None:
        outcome = self.validator.validate(_result_for(5, self.placements))
        self.assertTrue(outcome.ok)
        self.assertEqual(outcome.messages, [])

    def test_single_word_needs_no_crossing(self) -> None:
        outcome = self.validator.validate(_result_for(5, self.placements[:1]))
        self.assertTrue(outcome.ok)

    def test_reports_floating_word(self) -> None:
        floating = self.placements + [Placement("DOG", "Pet", 6, 3, Direction.ACROSS)]
        outcome = self.validator.validate(_result_for(7, floating))
        self.assertFalse(outcome.ok)
        self.assertIn("DOG", outcome.messages[0])

    def test_reports_letter_mismatch(self) -> None:
        result = _result_for(5, self.placements)
        grid = [list(row) for row in result.grid]
        grid[2][3] = "X"
        tampered = replace(result, grid=tuple(tuple(row) for row in grid))
        outcome = self.validator.validate(tampered)
        self.assertFalse(outcome.ok)
        self.assertIn("CAT", outcome.messages[0])

    def test_reports_uncovered_letter(self) -> None:
        result = _result_for(5, self.placements)
        grid = [list(row) for row in result.grid]
        grid[4][4] = "Q"
        outcome = self.validator.validate(replace(result, grid=tuple(tuple(row) for row in grid)))
        self.assertFalse(outcome.ok)
        self.assertIn("(4,4)", outcome.messages[0])

    def test_reports_invalid_letter(self) -> None:
        result = _result_for(5, self.placements)
        grid = [list(row) for row in result.grid]
        grid[2][1] = "c"
        outcome = self.validator.validate(replace(result, grid=tuple(tuple(row) for row in grid)))
        self.assertFalse(outcome.ok)
        self.assertIn("Invalid letter", outcome.messages[0])

    def test_reports_wrong_clue_number(self) -> None:
        result = _result_for(5, self.placements)
        renumbered = tuple(replace(p, number=9) for p in result.placements)
        outcome = self.validator.validate(replace(result, placements=renumbered))
        self.assertFalse(outcome.ok)
        self.assertIn("number 9", outcome.messages[0])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
