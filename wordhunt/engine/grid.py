"""Mutable letter grid used while words are being placed."""

from __future__ import annotations

import random
from typing import List, Optional, Tuple

from ..core.constants import ALPHABET, Bounds
from ..core.models import Grid, GridCell
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class LetterGrid:
    """Square placement buffer; ``None`` marks an unassigned cell.

    A buffer belongs to a single generation run and is frozen into an
    immutable tuple grid once filling is done.
    """

    def __init__(self, size: int) -> None:
        self.bounds = Bounds(rows=size, cols=size)
        self.cells: List[List[Optional[str]]] = [[None] * size for _ in range(size)]
        self._assigned = 0

    @property
    def size(self) -> int:
        return self.bounds.rows

    def assigned_count(self) -> int:
        return self._assigned

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def can_place(self, word: str, row: int, col: int, step: Tuple[int, int]) -> bool:
        """Return True when every letter of ``word`` fits from ``(row, col)``.

        A cell fits when it is in bounds and either unassigned or already
        holding the same letter, so words may cross on shared letters.
        """

        dr, dc = step
        for index, char in enumerate(word):
            r = row + index * dr
            c = col + index * dc
            if not self.bounds.contains(r, c):
                return False
            current = self.cells[r][c]
            if current is not None and current != char:
                return False
        return True

    def place(self, word: str, row: int, col: int, step: Tuple[int, int]) -> Tuple[GridCell, ...]:
        """Write ``word`` into the grid; callers must check :meth:`can_place` first."""

        dr, dc = step
        cells: List[GridCell] = []
        for index, char in enumerate(word):
            r = row + index * dr
            c = col + index * dc
            if self.cells[r][c] is None:
                self._assigned += 1
            self.cells[r][c] = char
            cells.append(GridCell(letter=char, row=r, col=c))
        return tuple(cells)

    # ------------------------------------------------------------------
    # Finalization
    # ------------------------------------------------------------------
    def fill_empty(self, rng: random.Random) -> int:
        """Fill every unassigned cell with a uniformly random letter."""

        filled = 0
        for r in range(self.bounds.rows):
            for c in range(self.bounds.cols):
                if self.cells[r][c] is None:
                    self.cells[r][c] = rng.choice(ALPHABET)
                    filled += 1
        self._assigned += filled
        LOGGER.debug("Filled %d empty cells with random letters", filled)
        return filled

    def freeze(self) -> Grid:
        return tuple(tuple(cell or "" for cell in row) for row in self.cells)
