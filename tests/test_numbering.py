import unittest

from neurocross.core.constants import Direction
from neurocross.core.exceptions import ValidationError
from neurocross.core.models import Placement
from neurocross.engine.grid import CrosswordGrid
from neurocross.engine.numbering import attach_numbers, number_grid


class NumberGridTests(unittest.TestCase):
    def test_numbers_follow_row_major_starts(self) -> None:
        placements = [
            Placement("CAT", "Feline", 0, 0, Direction.ACROSS),
            Placement("TOE", "Digit", 0, 2, Direction.DOWN),
            Placement("BEE", "Insect", 2, 0, Direction.ACROSS),
        ]
        grid = CrosswordGrid.from_placements(3, placements).freeze()
        numbering = number_grid(grid)
        self.assertEqual(
            numbering,
            [
                [1, None, 2],
                [None, None, None],
                [3, None, None],
            ],
        )
        numbered = attach_numbers(placements, numbering)
        self.assertEqual([p.number for p in numbered], [1, 2, 3])
        self.assertIsNone(placements[0].number)

    def test_shared_start_cell_gets_one_number(self) -> None:
        placements = [
            Placement("CAT", "", 0, 0, Direction.ACROSS),
            Placement("COW", "", 0, 0, Direction.DOWN),
        ]
        grid = CrosswordGrid.from_placements(4, placements).freeze()
        numbering = number_grid(grid)
        self.assertEqual(numbering[0][0], 1)
        self.assertEqual(sum(1 for row in numbering for n in row if n is not None), 1)
        self.assertEqual([p.number for p in attach_numbers(placements, numbering)], [1, 1])

    def test_single_letters_are_not_numbered(self) -> None:
        grid = [[None, "A", None], [None, None, None], [None, None, None]]
        self.assertEqual(number_grid(grid), [[None] * 3 for _ in range(3)])

    def test_unnumbered_start_is_reported(self) -> None:
        placement = Placement("CAT", "", 1, 0, Direction.ACROSS)
        with self.assertRaises(ValidationError):
            attach_numbers([placement], [[None] * 3 for _ in range(3)])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
