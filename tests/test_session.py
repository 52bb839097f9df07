"""Unit tests for the player game session."""

import pytest
from sudoku_game.errors import GameStateError, InvalidArgumentError
from sudoku_game.game import GameSession, GameStatus, MoveResult


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def wrong_digit(session, row, col):
    return session.solution.get(row, col) % 9 + 1


def empty_cells(session):
    return session.puzzle.get_empty_cells()


class TestSelection:
    """Tests for selecting cells."""

    def test_select_empty_cell(self, known_game):
        session = GameSession(known_game)
        assert session.select(0, 2)
        assert session.selected == (0, 2)

    def test_given_cell_cannot_be_selected(self, known_game):
        session = GameSession(known_game)
        session.select(0, 2)
        assert not session.select(0, 0)
        assert session.selected is None

    def test_out_of_range(self, known_game):
        session = GameSession(known_game)
        with pytest.raises(InvalidArgumentError):
            session.select(9, 0)

    def test_enter_without_selection(self, known_game):
        session = GameSession(known_game)
        with pytest.raises(GameStateError):
            session.enter(4)


class TestMoves:
    """Tests for entering, erasing and undoing digits."""

    def test_correct_entry(self, known_game):
        session = GameSession(known_game)
        session.select(0, 2)
        assert session.enter(4) is MoveResult.CORRECT
        assert session.board.get(0, 2) == 4
        assert session.error_count == 0

    def test_wrong_entry_counts_error(self, known_game):
        session = GameSession(known_game)
        session.select(0, 2)
        assert session.enter(7) is MoveResult.WRONG
        assert session.board.get(0, 2) == 7
        assert session.error_count == 1
        assert session.status is GameStatus.PLAYING

    def test_invalid_digit(self, known_game):
        session = GameSession(known_game)
        session.select(0, 2)
        with pytest.raises(InvalidArgumentError):
            session.enter(0)

    def test_puzzle_is_not_modified(self, known_game):
        before = known_game.puzzle.copy()
        session = GameSession(known_game)
        session.select(0, 2)
        session.enter(4)
        assert known_game.puzzle == before

    def test_erase_and_undo(self, known_game):
        session = GameSession(known_game)
        session.select(0, 2)
        session.enter(4)
        session.erase()
        assert session.board.is_empty(0, 2)

        assert session.undo()
        assert session.board.get(0, 2) == 4
        assert session.undo()
        assert session.board.is_empty(0, 2)
        assert not session.undo()

    def test_hint(self, known_game):
        session = GameSession(known_game)
        session.select(0, 2)
        assert session.hint() == 4
        assert session.board.get(0, 2) == 4
        # Already filled
        assert session.hint() is None

    def test_digit_counts(self, known_game):
        session = GameSession(known_game)
        counts = session.digit_counts()
        assert sum(counts.values()) == known_game.puzzle.count_filled()
        assert set(counts) == set(range(1, 10))

    def test_digit_unavailable_after_nine(self, known_game):
        session = GameSession(known_game)
        for row, col in empty_cells(session):
            if session.solution.get(row, col) == 1:
                session.select(row, col)
                session.enter(1)
        assert session.digit_counts()[1] == 9
        assert 1 not in session.available_digits()
        assert 2 in session.available_digits()


class TestGameEnd:
    """Tests for winning, losing and revealing."""

    def test_win(self, known_game):
        clock = FakeClock()
        session = GameSession(known_game, clock=clock)
        clock.now += 125
        for row, col in empty_cells(session):
            session.select(row, col)
            session.enter(session.solution.get(row, col))

        assert session.status is GameStatus.WON
        assert session.format_elapsed() == "02:05"
        clock.now += 30
        assert session.elapsed_seconds == 125

    def test_lose_after_max_errors(self, known_game):
        session = GameSession(known_game, max_errors=3)
        row, col = empty_cells(session)[0]
        session.select(row, col)
        for _ in range(3):
            session.enter(wrong_digit(session, row, col))

        assert session.status is GameStatus.LOST
        assert session.is_over
        with pytest.raises(GameStateError):
            session.enter(session.solution.get(row, col))

    def test_reveal(self, known_game):
        session = GameSession(known_game)
        board = session.reveal()
        assert board == known_game.solution
        assert session.status is GameStatus.REVEALED
        with pytest.raises(GameStateError):
            session.erase()

    def test_last_hint_wins(self, known_game):
        session = GameSession(known_game)
        cells = empty_cells(session)
        for row, col in cells[:-1]:
            session.select(row, col)
            session.enter(session.solution.get(row, col))
        session.select(*cells[-1])
        session.hint()
        assert session.status is GameStatus.WON

    def test_undo_refused_after_win(self, known_game):
        session = GameSession(known_game)
        for row, col in empty_cells(session):
            session.select(row, col)
            session.enter(session.solution.get(row, col))
        assert session.status is GameStatus.WON

        with pytest.raises(GameStateError):
            session.undo()
        assert session.status is GameStatus.WON
        assert session.board == known_game.solution

    def test_undo_refused_after_loss(self, known_game):
        session = GameSession(known_game, max_errors=1)
        row, col = empty_cells(session)[0]
        session.select(row, col)
        session.enter(wrong_digit(session, row, col))

        with pytest.raises(GameStateError):
            session.undo()
        assert session.board.get(row, col) == wrong_digit(session, row, col)

    def test_invalid_max_errors(self, known_game):
        with pytest.raises(InvalidArgumentError):
            GameSession(known_game, max_errors=0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
