"""Shared fixtures for the test suite."""

import pytest

from sudoku_game.core.board import SudokuBoard
from sudoku_game.generator import GeneratedPuzzle


# A known puzzle and its solution
TEST_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

TEST_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep user configuration out of the tests."""
    for name in ("SUDOKU_DIFFICULTY", "SUDOKU_MAX_ERRORS", "SUDOKU_SEED", "SUDOKU_OUTPUT_DIR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def solution_board():
    return SudokuBoard.from_string(TEST_SOLUTION)


@pytest.fixture
def puzzle_board():
    return SudokuBoard.from_string(TEST_PUZZLE)


@pytest.fixture
def known_game(puzzle_board, solution_board):
    return GeneratedPuzzle(
        puzzle=puzzle_board,
        solution=solution_board,
        difficulty="custom",
        holes=puzzle_board.count_empty(),
    )
