"""Sudoku puzzle generation, validation and play sessions."""

from .core import SudokuBoard, is_safe
from .errors import SudokuError, InvalidArgumentError, GameStateError
from .generator import Difficulty, GeneratedPuzzle, SudokuGenerator, generate, holes_for

__version__ = "1.0.0"

__all__ = [
    "SudokuBoard",
    "is_safe",
    "SudokuError",
    "InvalidArgumentError",
    "GameStateError",
    "Difficulty",
    "GeneratedPuzzle",
    "SudokuGenerator",
    "generate",
    "holes_for",
]
