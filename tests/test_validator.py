import random
import unittest
from dataclasses import replace

from wordhunt.core.models import GridCell, PlacedWord, PuzzleData
from wordhunt.data.words import DEFAULT_WORDS
from wordhunt.engine.generator import generate_puzzle
from wordhunt.engine.validator import PuzzleValidator


class PuzzleValidatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.validator = PuzzleValidator()
        self.puzzle = generate_puzzle(list(DEFAULT_WORDS), grid_size=12, rng=random.Random(8))

    def test_generated_puzzle_is_valid(self) -> None:
        result = self.validator.validate(self.puzzle)
        self.assertTrue(result.ok)
        self.assertEqual(result.messages, [])

    def test_detects_overwritten_letter(self) -> None:
        cell = self.puzzle.placed_words[0].cells[0]
        rows = [list(row) for row in self.puzzle.grid]
        rows[cell.row][cell.col] = "Z" if cell.letter != "Z" else "Y"
        broken = PuzzleData.from_placements(rows, self.puzzle.placed_words)
        result = self.validator.validate(broken)
        self.assertFalse(result.ok)
        self.assertIn("overwrites", result.messages[0])

    def test_detects_word_list_mismatch(self) -> None:
        broken = replace(self.puzzle, word_list=tuple(reversed(self.puzzle.word_list)) + ("EXTRA",))
        self.assertFalse(self.validator.validate(broken).ok)

    def test_detects_invalid_letters(self) -> None:
        broken = PuzzleData.from_placements([["a", "B"], ["C", "D"]], [])
        self.assertFalse(self.validator.validate(broken).ok)

    def test_detects_bent_word(self) -> None:
        grid = [["A", "B"], ["C", "D"]]
        bent = PlacedWord("ABD", (GridCell("A", 0, 0), GridCell("B", 0, 1), GridCell("D", 1, 1)))
        result = self.validator.validate(PuzzleData.from_placements(grid, [bent]))
        self.assertFalse(result.ok)
        self.assertIn("straight", result.messages[0])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
