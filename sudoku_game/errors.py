"""Exception types raised by the Sudoku game engine."""


class SudokuError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgumentError(SudokuError, ValueError):
    """An argument is outside the range the operation accepts."""


class GameStateError(SudokuError):
    """The requested action is not allowed in the current game state."""
