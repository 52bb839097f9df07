"""
Game configuration.

Defaults can be overridden through environment variables:
SUDOKU_DIFFICULTY, SUDOKU_MAX_ERRORS, SUDOKU_SEED and SUDOKU_OUTPUT_DIR.
"""

from dataclasses import dataclass
import os
from typing import Optional

from .errors import InvalidArgumentError


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgumentError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class GameConfig:
    """Configuration for generating and playing puzzles."""

    difficulty: str = ""
    max_errors: Optional[int] = None
    seed: Optional[int] = None
    output_dir: Optional[str] = None

    def __post_init__(self):
        if not self.difficulty:
            self.difficulty = os.getenv("SUDOKU_DIFFICULTY", "easy")
        if self.max_errors is None:
            self.max_errors = _env_int("SUDOKU_MAX_ERRORS")
        if self.max_errors is None:
            self.max_errors = 3
        if self.seed is None:
            self.seed = _env_int("SUDOKU_SEED")
        if self.output_dir is None:
            self.output_dir = os.getenv("SUDOKU_OUTPUT_DIR") or None

        if self.max_errors < 1:
            raise InvalidArgumentError(f"max_errors must be positive, got {self.max_errors}")
