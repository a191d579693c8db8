"""Pretty-print helpers for word hunt grids."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Set, Tuple

from ..core.models import PuzzleData


HIDDEN_SYMBOL = "."


def solution_cells(puzzle: PuzzleData, words: Optional[Iterable[str]] = None) -> Set[Tuple[int, int]]:
    """Return the coordinates covered by ``words`` (all placed words by default)."""

    wanted = set(puzzle.word_list if words is None else words)
    return {
        (cell.row, cell.col)
        for placed in puzzle.placed_words
        if placed.word in wanted
        for cell in placed.cells
    }


def format_grid(puzzle: PuzzleData, highlight: Optional[Set[Tuple[int, int]]] = None) -> str:
    """Render the grid; with ``highlight`` only those cells show their letter."""

    width = puzzle.size
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(puzzle.grid):
        symbols = [
            letter if highlight is None or (r, c) in highlight else HIDDEN_SYMBOL
            for c, letter in enumerate(row)
        ]
        row_render = " ".join(f"{symbol:>2}" for symbol in symbols)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_puzzle(
    puzzle: PuzzleData,
    *,
    found: Optional[Set[str]] = None,
    show_solution: bool = False,
) -> str:
    highlight = solution_cells(puzzle) if show_solution else None
    found = found or set()
    lines = [format_grid(puzzle, highlight), ""]
    lines.append(f"Words ({len(found)}/{len(puzzle.word_list)} found):")
    for word in puzzle.word_list:
        marker = "x" if word in found else " "
        lines.append(f"  [{marker}] {word}")
    return "\n".join(lines)


def pretty_print_puzzle(puzzle: PuzzleData, *, label: str | None = None, stream=None, **kwargs) -> None:
    """Print the puzzle grid and word list in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_puzzle(puzzle, **kwargs), file=stream)
