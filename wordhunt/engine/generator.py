"""Word hunt puzzle generation.

Words are placed longest-first with a bounded random retry per word: each
attempt draws a start cell and one of eight directions and the first fitting
placement is kept. Words that never fit are skipped, so generation always
returns a puzzle, possibly with fewer words than requested.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..core.constants import (DEFAULT_GRID_SIZE, DEFAULT_MAX_ATTEMPTS,
                              DEFAULT_MAX_WORDS, DIRECTIONS)
from ..core.exceptions import ConfigurationError
from ..core.models import PlacedWord, PuzzleData
from ..utils.logger import get_logger
from .grid import LetterGrid


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    grid_size: int = DEFAULT_GRID_SIZE
    max_words: int = DEFAULT_MAX_WORDS
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    seed: Optional[int] = None

    def validate(self) -> None:
        if self.grid_size < 1:
            raise ConfigurationError(f"Grid size must be positive, got {self.grid_size}")
        if self.max_words < 0:
            raise ConfigurationError(f"max_words cannot be negative, got {self.max_words}")
        if self.max_attempts < 0:
            raise ConfigurationError(f"max_attempts cannot be negative, got {self.max_attempts}")


class PuzzleGenerator:
    """Places a word list into a square letter grid."""

    def __init__(self, config: Optional[GeneratorConfig] = None, rng: Optional[random.Random] = None) -> None:
        self.config = config or GeneratorConfig()
        self.config.validate()
        self.rng = rng or random.Random(self.config.seed)

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, word_list: Sequence[str]) -> PuzzleData:
        size = self.config.grid_size
        LOGGER.info(
            "Generating %dx%d puzzle from %d candidate words", size, size, len(word_list)
        )
        grid = LetterGrid(size)
        placed: List[PlacedWord] = []

        for word in self._placement_order(word_list):
            if len(placed) >= self.config.max_words:
                LOGGER.debug("Reached word cap of %d", self.config.max_words)
                break
            placement = self._attempt_place_word(grid, word)
            if placement is None:
                LOGGER.debug("Skipped '%s' after %d attempts", word, self.config.max_attempts)
                continue
            placed.append(placement)

        LOGGER.debug("Words cover %d of %d cells", grid.assigned_count(), size * size)
        grid.fill_empty(self.rng)
        LOGGER.info(
            "Placed %d/%d words", len(placed), min(len(word_list), self.config.max_words)
        )
        return PuzzleData.from_placements(grid.freeze(), placed)

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def _placement_order(self, word_list: Sequence[str]) -> List[str]:
        """Shuffle, then stable-sort longest first so equal lengths stay shuffled."""

        words = [word for word in word_list if word]
        self.rng.shuffle(words)
        words.sort(key=len, reverse=True)
        return words

    def _attempt_place_word(self, grid: LetterGrid, word: str) -> Optional[PlacedWord]:
        for _ in range(self.config.max_attempts):
            row = self.rng.randrange(grid.size)
            col = self.rng.randrange(grid.size)
            step = self.rng.choice(DIRECTIONS)
            if grid.can_place(word, row, col, step):
                return PlacedWord(word=word, cells=grid.place(word, row, col, step))
        return None


def generate_puzzle(
    word_list: Sequence[str],
    grid_size: int = DEFAULT_GRID_SIZE,
    max_words: int = DEFAULT_MAX_WORDS,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    rng: Optional[random.Random] = None,
) -> PuzzleData:
    """Generate a puzzle in one call. Pass ``rng`` for reproducible output."""

    config = GeneratorConfig(grid_size=grid_size, max_words=max_words, max_attempts=max_attempts)
    return PuzzleGenerator(config, rng=rng).generate(word_list)
