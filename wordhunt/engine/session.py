"""Game session controller: drag state machine, found words and countdown."""

from __future__ import annotations

from typing import List, Optional, Set

from ..core.constants import DEFAULT_DURATION_SECONDS
from ..core.models import CellPosition, GridCell, PuzzleData, Selection
from ..utils.logger import get_logger
from .selection import selected_cells, validate_selection


LOGGER = get_logger(__name__)


class GameSession:
    """Tracks one game against a generated puzzle.

    The session is ``Idle`` while :attr:`selection` is ``None`` and
    ``Selecting`` otherwise. Pointer input is ignored once time is up.
    """

    def __init__(self, puzzle: PuzzleData, duration_seconds: int = DEFAULT_DURATION_SECONDS) -> None:
        self.puzzle = puzzle
        self.found_words: Set[str] = set()
        self.selection: Optional[Selection] = None
        self.remaining_seconds = duration_seconds
        self.timer_running = True

    def new_game(self, puzzle: PuzzleData, duration_seconds: int = DEFAULT_DURATION_SECONDS) -> None:
        LOGGER.info("Starting new game with %d words", len(puzzle.word_list))
        self.puzzle = puzzle
        self.found_words = set()
        self.selection = None
        self.remaining_seconds = duration_seconds
        self.timer_running = True

    # ------------------------------------------------------------------
    # Progress
    # ------------------------------------------------------------------
    @property
    def remaining_words(self) -> List[str]:
        return [word for word in self.puzzle.word_list if word not in self.found_words]

    @property
    def found_count(self) -> int:
        return len(self.found_words)

    @property
    def total_count(self) -> int:
        return len(self.puzzle.word_list)

    @property
    def is_complete(self) -> bool:
        return self.found_count == self.total_count

    @property
    def is_time_up(self) -> bool:
        return self.remaining_seconds <= 0

    @property
    def is_selecting(self) -> bool:
        return self.selection is not None

    @property
    def current_cells(self) -> List[GridCell]:
        return list(self.selection.cells) if self.selection else []

    # ------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------
    def start_selection(self, row: int, col: int) -> List[GridCell]:
        if self.is_time_up:
            return []
        position = CellPosition(row, col)
        cells = selected_cells(self.puzzle.grid, row, col, row, col)
        self.selection = Selection(start=position, end=position, cells=cells)
        return list(cells)

    def move_selection(self, row: int, col: int) -> List[GridCell]:
        if self.selection is None or self.is_time_up:
            return self.current_cells
        start = self.selection.start
        self.selection.end = CellPosition(row, col)
        self.selection.cells = selected_cells(self.puzzle.grid, start.row, start.col, row, col)
        return list(self.selection.cells)

    def end_selection(self) -> Optional[str]:
        """Finish the drag; return the newly found word, if any."""

        selection, self.selection = self.selection, None
        if selection is None or self.is_time_up:
            return None
        word = validate_selection(selection.cells, self.remaining_words)
        if word is None:
            return None
        self.found_words.add(word)
        LOGGER.info("Found '%s' (%d/%d)", word, self.found_count, self.total_count)
        if self.is_complete:
            LOGGER.info("Puzzle complete with %ds left", self.remaining_seconds)
            self.timer_running = False
        return word

    # ------------------------------------------------------------------
    # Countdown
    # ------------------------------------------------------------------
    def tick(self, seconds: int = 1) -> int:
        """Advance the countdown, clamping at zero; returns the seconds left."""

        if not self.timer_running or self.is_complete:
            return self.remaining_seconds
        self.remaining_seconds = max(0, self.remaining_seconds - seconds)
        if self.remaining_seconds == 0:
            LOGGER.info("Time is up with %d/%d words found", self.found_count, self.total_count)
            self.timer_running = False
            self.selection = None
        return self.remaining_seconds
