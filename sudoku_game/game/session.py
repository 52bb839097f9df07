"""Player session state for a single generated puzzle."""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Set, Tuple

import numpy as np

from ..core.board import SudokuBoard, SIZE
from ..errors import GameStateError, InvalidArgumentError
from ..generator.generator import GeneratedPuzzle

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
    REVEALED = "revealed"


class MoveResult(Enum):
    CORRECT = "correct"
    WRONG = "wrong"


@dataclass
class HistoryEntry:
    """A single undoable change to the visible board."""
    row: int
    col: int
    previous: int


class GameSession:
    """
    Tracks a player working through one puzzle.

    The session owns the visible board, the current selection, the error
    counter, the undo history and the timer. It only reads the puzzle and
    solution produced by the generator and never changes them.
    """

    def __init__(
        self,
        generated: GeneratedPuzzle,
        max_errors: int = 3,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Start a session.

        Args:
            generated: Puzzle and solution to play.
            max_errors: Wrong entries allowed before the game is lost.
            clock: Time source in seconds, injectable for tests.
        """
        if max_errors < 1:
            raise InvalidArgumentError(f"max_errors must be positive, got {max_errors}")

        self.puzzle = generated.puzzle
        self.solution = generated.solution
        self.board = generated.puzzle.copy()
        self.givens: Set[Tuple[int, int]] = {
            (int(r), int(c)) for r, c in np.argwhere(self.puzzle.grid != 0)
        }
        self.max_errors = max_errors
        self.error_count = 0
        self.selected: Optional[Tuple[int, int]] = None
        self.history: List[HistoryEntry] = []
        self.status = GameStatus.PLAYING

        self._clock = clock
        self._started_at = clock()
        self._stopped_at: Optional[float] = None

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.PLAYING

    @property
    def elapsed_seconds(self) -> int:
        end = self._stopped_at if self._stopped_at is not None else self._clock()
        return int(end - self._started_at)

    def format_elapsed(self) -> str:
        """Elapsed time as MM:SS."""
        minutes, seconds = divmod(self.elapsed_seconds, 60)
        return f"{minutes:02d}:{seconds:02d}"

    def is_given(self, row: int, col: int) -> bool:
        return (row, col) in self.givens

    def select(self, row: int, col: int) -> bool:
        """
        Select a cell for input.

        Returns:
            False if the cell holds a given clue. The previous selection
            is dropped either way.
        """
        self._check_position(row, col)
        self.selected = None
        if self.is_given(row, col):
            return False
        self.selected = (row, col)
        return True

    def enter(self, value: int) -> MoveResult:
        """
        Write a digit into the selected cell.

        A wrong digit stays visible but counts as an error; reaching
        max_errors ends the game. Filling the last cell correctly wins it.
        """
        if not 1 <= value <= SIZE:
            raise InvalidArgumentError(f"Value must be 1-{SIZE}, got {value}")
        row, col = self._require_selection()

        self._record(row, col)
        self.board.set(row, col, value)

        if value != self.solution.get(row, col):
            self.error_count += 1
            logger.debug("Wrong entry %d at (%d, %d), errors=%d", value, row, col, self.error_count)
            if self.error_count >= self.max_errors:
                self._finish(GameStatus.LOST)
            return MoveResult.WRONG

        if self.board == self.solution:
            self._finish(GameStatus.WON)
        return MoveResult.CORRECT

    def erase(self) -> None:
        """Clear the selected cell."""
        row, col = self._require_selection()
        self._record(row, col)
        self.board.clear(row, col)

    def undo(self) -> bool:
        """Restore the cell changed by the most recent entry, erase or hint."""
        if self.is_over:
            raise GameStateError(f"Game is over ({self.status.value})")
        if not self.history:
            return False
        last = self.history.pop()
        self.board.set(last.row, last.col, last.previous)
        return True

    def hint(self) -> Optional[int]:
        """
        Fill the selected empty cell with its solution digit.

        Returns:
            The digit placed, or None when there is no empty selected cell.
        """
        if self.is_over or self.selected is None:
            return None
        row, col = self.selected
        if not self.board.is_empty(row, col):
            return None

        value = self.solution.get(row, col)
        self._record(row, col)
        self.board.set(row, col, value)
        if self.board == self.solution:
            self._finish(GameStatus.WON)
        return value

    def reveal(self) -> SudokuBoard:
        """Show the full solution and end the game."""
        self.board = self.solution.copy()
        self.selected = None
        if not self.is_over:
            self._finish(GameStatus.REVEALED)
        return self.board

    def digit_counts(self) -> Dict[int, int]:
        """How many times each digit 1-9 appears on the visible board."""
        values, counts = np.unique(self.board.grid, return_counts=True)
        found = {int(v): int(n) for v, n in zip(values, counts)}
        return {digit: found.get(digit, 0) for digit in range(1, SIZE + 1)}

    def available_digits(self) -> List[int]:
        """Digits that have not been placed nine times yet."""
        return [digit for digit, n in self.digit_counts().items() if n < SIZE]

    def _check_position(self, row: int, col: int) -> None:
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise InvalidArgumentError(f"Cell ({row}, {col}) is outside the board")

    def _require_selection(self) -> Tuple[int, int]:
        if self.is_over:
            raise GameStateError(f"Game is over ({self.status.value})")
        if self.selected is None:
            raise GameStateError("No cell selected")
        return self.selected

    def _record(self, row: int, col: int) -> None:
        self.history.append(HistoryEntry(row, col, self.board.get(row, col)))

    def _finish(self, status: GameStatus) -> None:
        self.status = status
        self._stopped_at = self._clock()
        logger.debug("Game finished: %s after %s", status.value, self.format_elapsed())
