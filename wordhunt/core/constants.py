"""Shared constants for the word hunt engine."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Tuple


ALPHABET = string.ascii_uppercase

ORTHOGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
DIAGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
# Every placement direction; selections are accepted along exactly these.
DIRECTIONS: Tuple[Tuple[int, int], ...] = ORTHOGONAL_STEPS + DIAGONAL_STEPS

DEFAULT_GRID_SIZE = 15
DEFAULT_MAX_WORDS = 20
DEFAULT_MAX_ATTEMPTS = 100

MIN_DURATION_SECONDS = 30
MAX_DURATION_SECONDS = 3600
DEFAULT_DURATION_SECONDS = 300


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
