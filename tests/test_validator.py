import unittest

from wordsearch.core.constants import Direction
from wordsearch.core.models import Coordinate, Placement, PuzzleResult, freeze
from wordsearch.engine.validator import PuzzleValidator, spells


def make_result(rows, placements=(), not_placed=()):
    return PuzzleResult(
        grid=freeze([list(row) for row in rows]),
        placements=list(placements),
        words_not_placed=list(not_placed),
    )


class SpellsTests(unittest.TestCase):
    def test_reads_along_each_direction(self) -> None:
        grid = freeze([list("CAT"), list("XOX"), list("YYG")])
        self.assertTrue(spells(grid, Placement("CAT", Coordinate(0, 0), Direction.RIGHT)))
        self.assertTrue(spells(grid, Placement("TAC", Coordinate(0, 2), Direction.LEFT)))
        self.assertTrue(spells(grid, Placement("COG", Coordinate(0, 0), Direction.DOWN_RIGHT)))
        self.assertFalse(spells(grid, Placement("CATS", Coordinate(0, 0), Direction.RIGHT)))
        self.assertFalse(spells(grid, Placement("CXY", Coordinate(0, 0), Direction.UP)))


class PuzzleValidatorTests(unittest.TestCase):
    def test_accepts_consistent_puzzle(self) -> None:
        result = make_result(
            ["CAT", "QWE", "RTY"],
            placements=[Placement("CAT", Coordinate(0, 0), Direction.RIGHT)],
        )
        validation = PuzzleValidator(3, 3).validate(result)
        self.assertTrue(validation.ok)
        self.assertEqual(validation.messages, [])

    def test_rejects_blank_cells(self) -> None:
        validation = PuzzleValidator(3, 2).validate(make_result(["ABC", "D F"]))
        self.assertFalse(validation.ok)
        self.assertIn("Invalid letter", validation.messages[0])

    def test_rejects_lowercase_letters(self) -> None:
        validation = PuzzleValidator(2, 1).validate(make_result(["Ab"]))
        self.assertFalse(validation.ok)

    def test_rejects_wrong_shape(self) -> None:
        self.assertFalse(PuzzleValidator(3, 3).validate(make_result(["ABC", "DEF"])).ok)
        self.assertFalse(PuzzleValidator(3, 2).validate(make_result(["ABC", "DE"])).ok)

    def test_rejects_placement_mismatch(self) -> None:
        result = make_result(
            ["DOG", "QWE"],
            placements=[Placement("CAT", Coordinate(0, 0), Direction.RIGHT)],
        )
        validation = PuzzleValidator(3, 2).validate(result)
        self.assertFalse(validation.ok)
        self.assertIn("CAT", validation.messages[0])

    def test_notes_unplaced_word_found_by_chance(self) -> None:
        result = make_result(["QCQ", "QAQ", "QTQ"], not_placed=["cat", "dog"])
        validation = PuzzleValidator(3, 3).validate(result)
        self.assertTrue(validation.ok)
        self.assertEqual(len(validation.messages), 1)
        self.assertIn("'cat'", validation.messages[0])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
