"""Validation utilities for Sudoku grids."""

from __future__ import annotations
import numpy as np
from typing import Sequence, Union

from .board import SudokuBoard, BOX_SIZE

GridLike = Union[SudokuBoard, np.ndarray, Sequence[Sequence[int]]]


def _as_array(grid: GridLike) -> np.ndarray:
    if isinstance(grid, SudokuBoard):
        return grid.grid
    return np.asarray(grid)


def is_safe(grid: GridLike, row: int, col: int, value: int) -> bool:
    """
    Check if ``value`` may be placed at (row, col).

    The cell itself is included in the scan, so callers check an empty
    cell before writing to it.

    Args:
        grid: A SudokuBoard or a 9x9 matrix (may contain zeros).
        row: Row index, 0-8.
        col: Column index, 0-8.
        value: Candidate digit, 1-9.

    Returns:
        False if the value already occurs in the same row, column or
        3x3 box, True otherwise.
    """
    cells = _as_array(grid)

    if value in cells[row, :]:
        return False

    if value in cells[:, col]:
        return False

    start_row = row - row % BOX_SIZE
    start_col = col - col % BOX_SIZE
    if value in cells[start_row:start_row + BOX_SIZE, start_col:start_col + BOX_SIZE]:
        return False

    return True


def is_valid_board(board: GridLike) -> bool:
    """Check that no row, column or box repeats a digit."""
    if not isinstance(board, SudokuBoard):
        board = SudokuBoard(_as_array(board))
    return board.is_valid()


def is_valid_solution(board: GridLike) -> bool:
    """Check that the board is fully filled and conflict free."""
    if not isinstance(board, SudokuBoard):
        board = SudokuBoard(_as_array(board))
    return board.is_solved()


def puzzle_matches_solution(puzzle: GridLike, solution: GridLike) -> bool:
    """
    Check that every clue in ``puzzle`` agrees with ``solution``.

    Returns:
        True if each cell of the puzzle is either empty or equal to the
        corresponding solution cell.
    """
    clues = _as_array(puzzle)
    answer = _as_array(solution)
    if clues.shape != answer.shape:
        return False
    return bool(np.all((clues == 0) | (clues == answer)))
