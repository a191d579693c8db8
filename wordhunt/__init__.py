"""Word hunt puzzle engine.

This package exposes the public API surface via:

- ``wordhunt.engine.generator``: places a word list into a letter grid.
- ``wordhunt.engine.selection``: turns a start/end drag into a word match.
- ``wordhunt.engine.session.GameSession``: found words, drag state and countdown.
"""

from .core.models import GridCell, PlacedWord, PuzzleData, Selection
from .engine.generator import GeneratorConfig, PuzzleGenerator, generate_puzzle
from .engine.selection import (cells_to_word, is_straight_line, selected_cells,
                               validate_selection)
from .engine.session import GameSession

__all__ = [
    "GridCell",
    "PlacedWord",
    "PuzzleData",
    "Selection",
    "GeneratorConfig",
    "PuzzleGenerator",
    "generate_puzzle",
    "cells_to_word",
    "is_straight_line",
    "selected_cells",
    "validate_selection",
    "GameSession",
]

__version__ = "0.1.0"
