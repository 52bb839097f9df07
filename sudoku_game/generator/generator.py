"""Sudoku puzzle generator with hole-count based difficulty levels."""

from __future__ import annotations
import logging
import numbers
import os
import random
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from tqdm import tqdm

from ..core.board import SudokuBoard, SIZE
from ..core.validator import is_safe
from ..errors import InvalidArgumentError

logger = logging.getLogger(__name__)

EASY_HOLES = 30
MEDIUM_HOLES = 40
HARD_HOLES = 50


class Difficulty(Enum):
    """Difficulty levels for Sudoku puzzles."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def holes(self) -> int:
        """Number of cells removed from the solution at this level."""
        return holes_for(self)

    @classmethod
    def parse(cls, value: Union[str, Difficulty]) -> Difficulty:
        """Convert a name to a level. Anything not easy or medium is hard."""
        if isinstance(value, Difficulty):
            return value
        if value == "easy":
            return cls.EASY
        return cls.MEDIUM if value == "medium" else cls.HARD


def holes_for(difficulty: Union[str, Difficulty] = "easy") -> int:
    """
    Map a difficulty name to the number of holes to carve.

    Only the literal names "easy" and "medium" are recognized; every other
    value, unknown strings included, gets the hard hole count.
    """
    if isinstance(difficulty, Difficulty):
        difficulty = difficulty.value
    if difficulty == "easy":
        return EASY_HOLES
    return MEDIUM_HOLES if difficulty == "medium" else HARD_HOLES


@dataclass
class GenerationStats:
    """Counters collected while generating one puzzle."""
    placements: int = 0
    backtracks: int = 0
    wasted_draws: int = 0
    time_seconds: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "placements": self.placements,
            "backtracks": self.backtracks,
            "wasted_draws": self.wasted_draws,
            "time_seconds": self.time_seconds,
        }


@dataclass
class GeneratedPuzzle:
    """A carved puzzle together with the solution it was carved from."""
    puzzle: SudokuBoard
    solution: SudokuBoard
    difficulty: str = Difficulty.EASY.value
    holes: int = EASY_HOLES
    stats: GenerationStats = field(default_factory=GenerationStats)

    @property
    def clues(self) -> int:
        return self.puzzle.count_filled()

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view for consumers that index ``puzzle[r][c]``."""
        return {
            "difficulty": self.difficulty,
            "holes": self.holes,
            "clues": self.clues,
            "puzzle": self.puzzle.to_list(),
            "solution": self.solution.to_list(),
        }


def fill_board(
    board: SudokuBoard,
    rng: Optional[random.Random] = None,
    stats: Optional[GenerationStats] = None,
) -> bool:
    """
    Fill the board in place using randomized backtracking.

    Cells are visited in row-major order. Each empty cell tries the digits
    1-9 in its own freshly shuffled order; a digit that leads to a dead end
    is reverted to 0 before the next one is tried.

    Args:
        board: Board to complete. Filled cells are kept as given.
        rng: Random source for candidate ordering.
        stats: Optional counters updated during the search.

    Returns:
        True if the board was completed, False if no completion exists
        from the current state.
    """
    rng = rng or random.Random()

    for row in range(SIZE):
        for col in range(SIZE):
            if not board.is_empty(row, col):
                continue

            candidates = list(range(1, SIZE + 1))
            rng.shuffle(candidates)

            for value in candidates:
                if is_safe(board, row, col, value):
                    board.set(row, col, value)
                    if stats is not None:
                        stats.placements += 1
                    if fill_board(board, rng, stats):
                        return True
                    board.clear(row, col)
                    if stats is not None:
                        stats.backtracks += 1
            return False

    return True


def remove_cells(
    solution: SudokuBoard,
    hole_count: int,
    rng: Optional[random.Random] = None,
    stats: Optional[GenerationStats] = None,
) -> SudokuBoard:
    """
    Carve a puzzle by clearing ``hole_count`` random cells of a copy.

    Cells are drawn uniformly at random; a draw that lands on a cell that
    is already empty is simply retried. The result is not checked for a
    unique solution.

    Raises:
        InvalidArgumentError: If hole_count is negative or larger than the
            number of filled cells.
    """
    filled = solution.count_filled()
    if not isinstance(hole_count, numbers.Integral) or isinstance(hole_count, bool):
        raise InvalidArgumentError(f"hole_count must be an integer, got {hole_count!r}")
    if hole_count < 0 or hole_count > filled:
        raise InvalidArgumentError(
            f"hole_count must be between 0 and {filled}, got {hole_count}"
        )

    rng = rng or random.Random()
    puzzle = solution.copy()
    remaining = int(hole_count)

    while remaining > 0:
        row = rng.randrange(SIZE)
        col = rng.randrange(SIZE)
        if not puzzle.is_empty(row, col):
            puzzle.clear(row, col)
            remaining -= 1
        elif stats is not None:
            stats.wasted_draws += 1

    return puzzle


class SudokuGenerator:
    """
    Generator for Sudoku puzzles at a chosen difficulty.

    Algorithm:
    1. Fill an empty board into a complete solution by randomized backtracking
    2. Copy the solution and clear a difficulty-dependent number of cells

    Each generator owns a private random source, so seeding one instance
    never disturbs the global ``random`` module.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility.
            rng: Explicit random source. Takes precedence over seed.
        """
        self.rng = rng if rng is not None else random.Random(seed)

    def generate(self, difficulty: Union[str, Difficulty] = "easy") -> GeneratedPuzzle:
        """
        Generate a puzzle and its solution.

        Args:
            difficulty: "easy", "medium" or "hard". Unrecognized names are
                treated as hard.

        Returns:
            A GeneratedPuzzle holding fresh puzzle and solution boards.
        """
        stats = GenerationStats()
        start_time = time.perf_counter()

        board = SudokuBoard()
        fill_board(board, self.rng, stats)
        solution = board.copy()

        holes = holes_for(difficulty)
        puzzle = remove_cells(board, holes, self.rng, stats)

        stats.time_seconds = time.perf_counter() - start_time
        name = difficulty.value if isinstance(difficulty, Difficulty) else str(difficulty)
        logger.debug(
            "Generated %s puzzle: %d holes, %d backtracks, %.4fs",
            name, holes, stats.backtracks, stats.time_seconds,
        )

        return GeneratedPuzzle(
            puzzle=puzzle,
            solution=solution,
            difficulty=name,
            holes=holes,
            stats=stats,
        )

    def generate_batch(
        self,
        count: int,
        difficulty: Union[str, Difficulty] = "easy",
        show_progress: bool = False,
    ) -> List[GeneratedPuzzle]:
        """
        Generate multiple puzzles of the same difficulty.

        Args:
            count: Number of puzzles to generate.
            difficulty: Desired difficulty level.
            show_progress: Display a tqdm progress bar.
        """
        return [
            self.generate(difficulty)
            for _ in tqdm(range(count), desc="Generating", disable=not show_progress)
        ]

    @staticmethod
    def save_to_folder(puzzles: List[GeneratedPuzzle], folder_path: str, prefix: str = "puzzle") -> List[str]:
        """
        Save puzzles to a folder as individual text files.

        Each file holds the puzzle string, the solution string and a
        pretty-printed puzzle.

        Returns:
            Paths of the written files.
        """
        os.makedirs(folder_path, exist_ok=True)

        paths = []
        for i, generated in enumerate(puzzles, 1):
            file_path = os.path.join(folder_path, f"{prefix}_{i}.txt")
            with open(file_path, "w") as f:
                f.write(generated.puzzle.to_string())
                f.write("\n")
                f.write(generated.solution.to_string())
                f.write("\n\nPretty format:\n")
                f.write(str(generated.puzzle))
                f.write("\n")
            paths.append(file_path)

        return paths


def generate(difficulty: Union[str, Difficulty] = "easy", seed: Optional[int] = None) -> GeneratedPuzzle:
    """Generate one puzzle with a fresh generator."""
    return SudokuGenerator(seed=seed).generate(difficulty)
