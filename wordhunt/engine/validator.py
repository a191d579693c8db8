"""Deterministic integrity checks for generated puzzles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Set

from ..core.constants import ALPHABET, DIRECTIONS, Bounds
from ..core.exceptions import ValidationError
from ..core.models import PlacedWord, PuzzleData
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PuzzleValidator:
    """Runs deterministic validation over a finished puzzle."""

    def validate(self, puzzle: PuzzleData) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_shape(puzzle)
            self._check_letters_valid(puzzle)
            self._check_word_list(puzzle)
            self._check_no_duplicate_words(puzzle)
            for placed in puzzle.placed_words:
                self._check_placed_word(puzzle, placed)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_shape(self, puzzle: PuzzleData) -> None:
        size = len(puzzle.grid)
        if size == 0:
            raise ValidationError("Grid has no rows")
        for r, row in enumerate(puzzle.grid):
            if len(row) != size:
                raise ValidationError(f"Row {r} has {len(row)} cells, expected {size}")

    def _check_letters_valid(self, puzzle: PuzzleData) -> None:
        for r, row in enumerate(puzzle.grid):
            for c, letter in enumerate(row):
                if len(letter) != 1 or letter not in ALPHABET:
                    raise ValidationError(f"Invalid letter '{letter}' at ({r},{c})")

    def _check_word_list(self, puzzle: PuzzleData) -> None:
        expected = tuple(pw.word for pw in puzzle.placed_words)
        if tuple(puzzle.word_list) != expected:
            raise ValidationError(
                f"Word list {list(puzzle.word_list)} does not match placed words {list(expected)}"
            )

    def _check_no_duplicate_words(self, puzzle: PuzzleData) -> None:
        seen: Set[str] = set()
        for placed in puzzle.placed_words:
            if placed.word in seen:
                raise ValidationError(f"Duplicate word '{placed.word}'")
            seen.add(placed.word)

    def _check_placed_word(self, puzzle: PuzzleData, placed: PlacedWord) -> None:
        bounds = Bounds(rows=puzzle.size, cols=puzzle.size)
        if len(placed.cells) != len(placed.word):
            raise ValidationError(
                f"'{placed.word}' has {len(placed.cells)} cells for {len(placed.word)} letters"
            )
        for index, cell in enumerate(placed.cells):
            if not bounds.contains(cell.row, cell.col):
                raise ValidationError(f"'{placed.word}' leaves the grid at ({cell.row},{cell.col})")
            if cell.letter != placed.word[index]:
                raise ValidationError(
                    f"'{placed.word}' expects '{placed.word[index]}' at position {index}, cell holds '{cell.letter}'"
                )
            if puzzle.grid[cell.row][cell.col] != cell.letter:
                raise ValidationError(
                    f"Grid letter at ({cell.row},{cell.col}) overwrites '{placed.word}'"
                )
        if len(placed.cells) > 1 and placed.direction not in DIRECTIONS:
            raise ValidationError(f"'{placed.word}' does not follow a placement direction")
        dr, dc = placed.direction
        for prev, cell in zip(placed.cells, placed.cells[1:]):
            if (cell.row - prev.row, cell.col - prev.col) != (dr, dc):
                raise ValidationError(f"'{placed.word}' is not a straight line")
