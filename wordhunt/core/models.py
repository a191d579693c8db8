"""Data models shared by the generator and the selection engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple


Grid = Tuple[Tuple[str, ...], ...]


@dataclass(frozen=True)
class CellPosition:
    """A bare grid coordinate, as reported by pointer-to-cell mapping."""

    row: int
    col: int


@dataclass(frozen=True)
class GridCell:
    """One grid position together with the letter it holds."""

    letter: str
    row: int
    col: int


@dataclass(frozen=True)
class PlacedWord:
    """A word committed to the grid with the cells it occupies, in order."""

    word: str
    cells: Tuple[GridCell, ...]

    @property
    def start(self) -> GridCell:
        return self.cells[0]

    @property
    def end(self) -> GridCell:
        return self.cells[-1]

    @property
    def direction(self) -> Tuple[int, int]:
        if len(self.cells) < 2:
            return (0, 0)
        return (self.cells[1].row - self.cells[0].row, self.cells[1].col - self.cells[0].col)


@dataclass(frozen=True)
class PuzzleData:
    """Generator output: the letter grid and the words hidden in it."""

    grid: Grid
    placed_words: Tuple[PlacedWord, ...]
    word_list: Tuple[str, ...]

    @classmethod
    def from_placements(cls, grid: Sequence[Sequence[str]], placed_words: Sequence[PlacedWord]) -> "PuzzleData":
        return cls(
            grid=tuple(tuple(row) for row in grid),
            placed_words=tuple(placed_words),
            word_list=tuple(pw.word for pw in placed_words),
        )

    @property
    def size(self) -> int:
        return len(self.grid)

    def to_jsonable(self) -> dict:
        return {
            "size": self.size,
            "grid": ["".join(row) for row in self.grid],
            "placed_words": [
                {
                    "word": pw.word,
                    "start": [pw.start.row, pw.start.col],
                    "end": [pw.end.row, pw.end.col],
                    "direction": list(pw.direction),
                }
                for pw in self.placed_words
            ],
            "word_list": list(self.word_list),
        }


@dataclass
class Selection:
    """In-progress drag owned by a game session."""

    start: CellPosition
    end: CellPosition
    cells: List[GridCell] = field(default_factory=list)
