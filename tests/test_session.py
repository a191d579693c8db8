import unittest

from wordhunt.core.models import GridCell, PlacedWord, PuzzleData
from wordhunt.engine.session import GameSession


def _placed(word, start, step):
    row, col = start
    dr, dc = step
    return PlacedWord(
        word=word,
        cells=tuple(GridCell(char, row + i * dr, col + i * dc) for i, char in enumerate(word)),
    )


def build_puzzle() -> PuzzleData:
    grid = [
        ["C", "A", "T"],
        ["X", "O", "Y"],
        ["Z", "Q", "G"],
    ]
    placed = [_placed("CAT", (0, 0), (0, 1)), _placed("COG", (0, 0), (1, 1))]
    return PuzzleData.from_placements(grid, placed)


class GameSessionSelectionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.session = GameSession(build_puzzle(), duration_seconds=60)

    def test_press_starts_single_cell_selection(self) -> None:
        cells = self.session.start_selection(1, 1)
        self.assertTrue(self.session.is_selecting)
        self.assertEqual(cells, [GridCell("O", 1, 1)])

    def test_drag_and_release_finds_word(self) -> None:
        self.session.start_selection(0, 0)
        self.session.move_selection(0, 1)
        cells = self.session.move_selection(0, 2)
        self.assertEqual("".join(c.letter for c in cells), "CAT")
        self.assertEqual(self.session.end_selection(), "CAT")
        self.assertEqual(self.session.found_words, {"CAT"})
        self.assertFalse(self.session.is_selecting)
        self.assertEqual(self.session.remaining_words, ["COG"])

    def test_reverse_drag_finds_word(self) -> None:
        self.session.start_selection(2, 2)
        self.session.move_selection(0, 0)
        self.assertEqual(self.session.end_selection(), "COG")

    def test_found_word_cannot_be_found_twice(self) -> None:
        for _ in range(2):
            self.session.start_selection(0, 0)
            self.session.move_selection(0, 2)
            result = self.session.end_selection()
        self.assertIsNone(result)
        self.assertEqual(self.session.found_count, 1)

    def test_non_line_move_empties_selection(self) -> None:
        self.session.start_selection(0, 0)
        self.assertEqual(self.session.move_selection(1, 2), [])
        self.assertIsNone(self.session.end_selection())
        self.assertFalse(self.session.is_selecting)

    def test_move_without_press_is_ignored(self) -> None:
        self.assertEqual(self.session.move_selection(0, 2), [])
        self.assertIsNone(self.session.end_selection())

    def test_completion_stops_timer(self) -> None:
        for end in [(0, 2), (2, 2)]:
            self.session.start_selection(0, 0)
            self.session.move_selection(*end)
            self.session.end_selection()
        self.assertTrue(self.session.is_complete)
        self.assertFalse(self.session.timer_running)
        self.assertEqual(self.session.tick(), 60)


class GameSessionTimerTests(unittest.TestCase):
    def test_tick_clamps_at_zero(self) -> None:
        session = GameSession(build_puzzle(), duration_seconds=3)
        self.assertEqual(session.tick(), 2)
        self.assertEqual(session.tick(5), 0)
        self.assertTrue(session.is_time_up)
        self.assertFalse(session.timer_running)
        self.assertEqual(session.tick(), 0)

    def test_input_ignored_after_time_up(self) -> None:
        session = GameSession(build_puzzle(), duration_seconds=1)
        session.start_selection(0, 0)
        session.tick()
        self.assertFalse(session.is_selecting)
        self.assertEqual(session.start_selection(0, 0), [])
        self.assertIsNone(session.end_selection())
        self.assertEqual(session.found_count, 0)

    def test_new_game_resets_state(self) -> None:
        session = GameSession(build_puzzle(), duration_seconds=1)
        session.start_selection(0, 0)
        session.move_selection(0, 2)
        session.end_selection()
        session.tick()

        session.new_game(build_puzzle(), duration_seconds=120)
        self.assertEqual(session.found_words, set())
        self.assertEqual(session.remaining_seconds, 120)
        self.assertTrue(session.timer_running)
        self.assertEqual(session.total_count, 2)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
