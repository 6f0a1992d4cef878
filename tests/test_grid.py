import unittest

from neurocross.core.constants import Direction
from neurocross.core.exceptions import PlacementError
from neurocross.core.models import Bounds, Placement
from neurocross.engine.grid import CrosswordGrid


class CanPlaceTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = CrosswordGrid(5)
        self.assertTrue(self.grid.can_place("CAT", 2, 1, Direction.ACROSS))
        self.grid.place_word("CAT", 2, 1, Direction.ACROSS)

    def test_rejects_extension_past_existing_word(self) -> None:
        # (2,3) holds the T of CAT right after BAT would end.
        self.assertFalse(self.grid.can_place("BAT", 2, 0, Direction.ACROSS))

    def test_accepts_valid_down_crossing(self) -> None:
        self.assertTrue(self.grid.can_place("OAT", 1, 2, Direction.DOWN))
        self.grid.place_word("OAT", 1, 2, Direction.DOWN)
        self.assertEqual(self.grid.letter(1, 2), "O")
        self.assertEqual(self.grid.letter(2, 2), "A")
        self.assertEqual(self.grid.letter(3, 2), "T")

    def test_rejects_mismatched_crossing(self) -> None:
        self.assertFalse(self.grid.can_place("OFT", 1, 2, Direction.DOWN))

    def test_rejects_out_of_bounds(self) -> None:
        self.assertFalse(self.grid.can_place("ATLASES", 0, 2, Direction.DOWN))
        self.assertFalse(self.grid.can_place("TAX", 2, 3, Direction.ACROSS))
        self.assertFalse(self.grid.can_place("TAX", -1, 1, Direction.DOWN))

    def test_rejects_word_ending_next_to_letter(self) -> None:
        # AR would stop right above the C of CAT; ARC crosses it instead.
        self.assertFalse(self.grid.can_place("AR", 0, 1, Direction.DOWN))
        self.assertTrue(self.grid.can_place("ARC", 0, 1, Direction.DOWN))

    def test_rejects_parallel_neighbour(self) -> None:
        # Row 1 runs right above CAT without crossing it.
        self.assertFalse(self.grid.can_place("DOG", 1, 1, Direction.ACROSS))
        self.assertFalse(self.grid.can_place("DOG", 3, 2, Direction.ACROSS))

    def test_rejects_running_along_existing_word(self) -> None:
        grid = CrosswordGrid(7)
        grid.place_word("CAT", 3, 2, Direction.ACROSS)
        self.assertFalse(grid.can_place("CATS", 3, 2, Direction.ACROSS))
        self.assertFalse(grid.can_place("SCAT", 3, 1, Direction.ACROSS))
        self.assertTrue(grid.can_place("TAN", 2, 3, Direction.DOWN))

    def test_accepts_far_away_word(self) -> None:
        self.assertTrue(self.grid.can_place("DOG", 4, 0, Direction.ACROSS))
        self.assertTrue(self.grid.can_place("DOG", 0, 0, Direction.ACROSS))


class GridTests(unittest.TestCase):
    def test_place_word_raises_on_conflict(self) -> None:
        grid = CrosswordGrid(5)
        grid.place_word("CAT", 2, 1, Direction.ACROSS)
        with self.assertRaises(PlacementError):
            grid.place_word("DOG", 1, 2, Direction.DOWN)
        with self.assertRaises(PlacementError):
            grid.place_word("STROKE", 0, 0, Direction.ACROSS)
        # Nothing was written by the rejected calls.
        self.assertIsNone(grid.letter(1, 2))
        self.assertIsNone(grid.letter(0, 0))

    def test_letter_positions_are_row_major(self) -> None:
        grid = CrosswordGrid(5)
        grid.place_word("AXA", 1, 1, Direction.ACROSS)
        grid.place_word("BAA", 0, 3, Direction.DOWN)
        grid.place_word("AB", 0, 0, Direction.ACROSS)
        self.assertEqual(grid.letter_positions("A"), [(0, 0), (1, 1), (1, 3), (2, 3)])
        self.assertEqual(grid.letter_positions("Q"), [])

    def test_letter_bounds(self) -> None:
        grid = CrosswordGrid(7)
        self.assertEqual(grid.letter_bounds(), Bounds(0, 6, 0, 6))
        grid.place_word("PONS", 3, 1, Direction.ACROSS)
        grid.place_word("TOP", 2, 2, Direction.DOWN)
        self.assertEqual(grid.letter_bounds(), Bounds(min_row=2, max_row=4, min_col=1, max_col=4))

    def test_from_placements_builds_fresh_buffer(self) -> None:
        placements = [
            Placement("CAT", "", 2, 1, Direction.ACROSS),
            Placement("OAT", "", 1, 2, Direction.DOWN),
        ]
        grid = CrosswordGrid.from_placements(5, placements)
        self.assertEqual(grid.freeze()[2], (None, "C", "A", "T", None))
        self.assertEqual(grid.letter(1, 2), "O")
        self.assertFalse(grid.is_empty())
        self.assertTrue(CrosswordGrid.from_placements(5, []).is_empty())

    def test_rejects_non_positive_size(self) -> None:
        with self.assertRaises(ValueError):
            CrosswordGrid(0)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
