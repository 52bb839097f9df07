"""Core module for Sudoku board representation and validation."""

from .board import SudokuBoard
from .validator import is_safe, is_valid_board, is_valid_solution, puzzle_matches_solution

__all__ = [
    "SudokuBoard",
    "is_safe",
    "is_valid_board",
    "is_valid_solution",
    "puzzle_matches_solution",
]
