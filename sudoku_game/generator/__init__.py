"""Generator module for creating Sudoku puzzles."""

from .generator import (
    Difficulty,
    GeneratedPuzzle,
    GenerationStats,
    SudokuGenerator,
    fill_board,
    generate,
    holes_for,
    remove_cells,
)

__all__ = [
    "Difficulty",
    "GeneratedPuzzle",
    "GenerationStats",
    "SudokuGenerator",
    "fill_board",
    "generate",
    "holes_for",
    "remove_cells",
]
