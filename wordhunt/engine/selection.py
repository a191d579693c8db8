"""Map a drag gesture (start cell, end cell) to grid letters and word matches."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from ..core.models import GridCell


def is_straight_line(start_row: int, start_col: int, end_row: int, end_col: int) -> bool:
    """Return True for horizontal, vertical or exact-diagonal offsets (or none)."""

    dr = end_row - start_row
    dc = end_col - start_col
    return dr == 0 or dc == 0 or abs(dr) == abs(dc)


def _in_bounds(grid: Sequence[Sequence[str]], row: int, col: int) -> bool:
    return 0 <= row < len(grid) and 0 <= col < len(grid[row])


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def selected_cells(
    grid: Sequence[Sequence[str]],
    start_row: int,
    start_col: int,
    end_row: int,
    end_col: int,
) -> List[GridCell]:
    """Return the cells from start to end inclusive, or ``[]`` if not a line.

    Endpoints outside the grid also yield ``[]``.
    """

    if not is_straight_line(start_row, start_col, end_row, end_col):
        return []
    if not (_in_bounds(grid, start_row, start_col) and _in_bounds(grid, end_row, end_col)):
        return []

    dr = end_row - start_row
    dc = end_col - start_col
    steps = max(abs(dr), abs(dc))
    if steps == 0:
        return [GridCell(letter=grid[start_row][start_col], row=start_row, col=start_col)]

    step_r = _sign(dr)
    step_c = _sign(dc)
    cells: List[GridCell] = []
    for i in range(steps + 1):
        r = start_row + i * step_r
        c = start_col + i * step_c
        cells.append(GridCell(letter=grid[r][c], row=r, col=c))
    return cells


def cells_to_word(cells: Iterable[GridCell]) -> str:
    return "".join(cell.letter for cell in cells)


def validate_selection(cells: Sequence[GridCell], remaining_words: Iterable[str]) -> Optional[str]:
    """Return the word spelled by ``cells`` forwards or backwards, else ``None``.

    ``remaining_words`` should already exclude found words; nothing is mutated.
    """

    if not cells:
        return None
    remaining = set(remaining_words)
    word = cells_to_word(cells)
    if word in remaining:
        return word
    reversed_word = word[::-1]
    if reversed_word in remaining:
        return reversed_word
    return None
