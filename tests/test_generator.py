import random
import unittest

from wordsearch.core.constants import BLANK, LETTERS
from wordsearch.core.exceptions import InputValidationError
from wordsearch.engine.generator import GeneratorConfig, PuzzleGenerator, generate_puzzle
from wordsearch.engine.validator import PuzzleValidator, spells


class GeneratePuzzleTests(unittest.TestCase):
    def test_grid_is_complete_snapshot(self) -> None:
        grid, not_placed = generate_puzzle(12, 9, ["apple", "kiwi", "melon"], random.Random(1))
        self.assertIsInstance(grid, tuple)
        self.assertEqual(len(grid), 9)
        for row in grid:
            self.assertIsInstance(row, tuple)
            self.assertEqual(len(row), 12)
            for cell in row:
                self.assertNotEqual(cell, BLANK)
                self.assertIn(cell, LETTERS)
        self.assertEqual(not_placed, [])

    def test_same_seed_same_puzzle(self) -> None:
        words = ["Alpha", "beta", "GAMMA", "delta", "epsilon", "zeta"]
        first = generate_puzzle(8, 8, words, random.Random(99))
        second = generate_puzzle(8, 8, words, random.Random(99))
        self.assertEqual(first, second)

    def test_words_longer_than_every_axis_are_not_placed(self) -> None:
        words = ["ok", "sixletters", "fine", "elevenchars"]
        for seed in range(5):
            grid, not_placed = generate_puzzle(5, 4, words, random.Random(seed))
            self.assertEqual(not_placed, ["sixletters", "elevenchars"])
            for word in not_placed:
                self.assertFalse(PuzzleValidator._occurs(grid, word.upper()))

    def test_no_words(self) -> None:
        grid, not_placed = generate_puzzle(3, 2, [], random.Random(0))
        self.assertEqual(len(grid), 2)
        self.assertEqual(not_placed, [])

    def test_empty_words_count_as_placed(self) -> None:
        _, not_placed = generate_puzzle(3, 3, ["", "abc", ""], random.Random(0))
        self.assertEqual(not_placed, [])

    def test_zero_width_without_words(self) -> None:
        grid, not_placed = generate_puzzle(0, 0, [], random.Random(0))
        self.assertEqual(grid, ())
        self.assertEqual(not_placed, [])


class PuzzleGeneratorTests(unittest.TestCase):
    def test_result_placements_spell_words(self) -> None:
        words = ["river", "stone", "cloud", "maple", "cedar"]
        result = PuzzleGenerator(GeneratorConfig(width=10, height=10, seed=5)).generate(words)
        self.assertEqual(result.seed, 5)
        self.assertEqual(len(result.placements) + len(result.words_not_placed), len(words))
        for placement in result.placements:
            self.assertTrue(spells(result.grid, placement))
        self.assertEqual(result.placed_words, [p.word for p in result.placements])
        self.assertTrue(PuzzleValidator(10, 10).validate(result).ok)

    def test_placed_words_keep_input_order_uppercased(self) -> None:
        words = ["one", "Two", "THREE"]
        result = PuzzleGenerator(GeneratorConfig(width=10, height=10, seed=1)).generate(words)
        self.assertEqual(result.placed_words, ["ONE", "TWO", "THREE"])
        self.assertTrue(result.complete)

    def test_seed_is_reproducible(self) -> None:
        words = ["north", "south", "east", "west"]
        first = PuzzleGenerator(GeneratorConfig(width=7, height=7, seed=3)).generate(words)
        second = PuzzleGenerator(GeneratorConfig(width=7, height=7, seed=3)).generate(words)
        self.assertEqual(first.grid, second.grid)
        self.assertEqual(first.placements, second.placements)

    def test_repeated_generate_calls_match(self) -> None:
        words = ["north", "south", "east", "west"]
        generator = PuzzleGenerator(GeneratorConfig(width=7, height=7, seed=12))
        first = generator.generate(words)
        second = generator.generate(words)
        self.assertEqual(first.grid, second.grid)
        self.assertEqual(first.placements, second.placements)

    def test_unplaceable_word_reported_after_all_attempts(self) -> None:
        config = GeneratorConfig(width=3, height=3, seed=8, max_attempts=4)
        result = PuzzleGenerator(config).generate(["cat", "giraffe"])
        self.assertFalse(result.complete)
        self.assertEqual(result.words_not_placed, ["giraffe"])
        self.assertEqual(result.placed_words, ["CAT"])

    def test_retries_can_rescue_crowded_grids(self) -> None:
        words = ["ab", "cd", "ef", "gh"]
        config = GeneratorConfig(width=2, height=4, seed=0, max_attempts=200)
        result = PuzzleGenerator(config).generate(words)
        self.assertLessEqual(len(result.words_not_placed), 1)

    def test_rejects_out_of_range_dimensions(self) -> None:
        for width, height in [(0, 5), (5, 0), (101, 5), (-3, 5)]:
            with self.assertRaises(InputValidationError):
                PuzzleGenerator(GeneratorConfig(width=width, height=height)).generate(["word"])

    def test_rejects_non_letter_words(self) -> None:
        generator = PuzzleGenerator(GeneratorConfig(width=5, height=5, seed=0))
        for word in ["two words", "abc1", "naïve", "x-ray"]:
            with self.assertRaises(InputValidationError):
                generator.generate([word])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
