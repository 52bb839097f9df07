"""Sudoku board representation for the standard 9x9 grid."""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Optional, Sequence

from ..errors import InvalidArgumentError


SIZE = 9
BOX_SIZE = 3


class SudokuBoard:
    """
    A 9x9 Sudoku grid backed by a numpy array.

    Cells hold 1-9, with 0 marking an empty cell. Rows can be indexed
    directly, so ``board[r][c]`` reads the same cell as ``board.get(r, c)``.
    """

    size = SIZE
    box_size = BOX_SIZE

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a Sudoku board.

        Args:
            grid: Optional initial 9x9 grid. If None, creates an empty board.
        """
        if grid is not None:
            grid = np.asarray(grid)
            if grid.shape != (SIZE, SIZE):
                raise InvalidArgumentError(
                    f"Grid shape must be ({SIZE}, {SIZE}), got {grid.shape}"
                )
            if grid.min() < 0 or grid.max() > SIZE:
                raise InvalidArgumentError(f"Grid values must be 0-{SIZE}")
            self.grid = grid.copy().astype(np.int32)
        else:
            self.grid = np.zeros((SIZE, SIZE), dtype=np.int32)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        new_board = SudokuBoard()
        new_board.grid = self.grid.copy()
        return new_board

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        if value < 0 or value > SIZE:
            raise InvalidArgumentError(f"Value must be 0-{SIZE}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.grid[row, col] = 0

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return self.grid[row, col] == 0

    def get_row(self, row: int) -> np.ndarray:
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        return self.grid[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row = row - row % BOX_SIZE
        box_col = col - col % BOX_SIZE
        return self.grid[box_row:box_row + BOX_SIZE,
                         box_col:box_col + BOX_SIZE].flatten()

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get all empty cell positions in row-major order."""
        return [(int(r), int(c)) for r, c in np.argwhere(self.grid == 0)]

    def count_empty(self) -> int:
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        return int(np.sum(self.grid != 0))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check if the current board state has no conflicts.
        Empty cells are ignored, so a partial board can be valid.
        """
        units = [self.get_row(i) for i in range(SIZE)]
        units += [self.get_col(j) for j in range(SIZE)]
        units += [
            self.get_box(box_row, box_col)
            for box_row in range(0, SIZE, BOX_SIZE)
            for box_col in range(0, SIZE, BOX_SIZE)
        ]
        for unit in units:
            non_zero = unit[unit != 0]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False
        return True

    def is_solved(self) -> bool:
        """Check if the board is completely and correctly filled."""
        return self.is_complete() and self.is_valid()

    def to_string(self) -> str:
        """Convert board to an 81-character string, 0 for empty cells."""
        return ''.join(str(v) for v in self.grid.flatten())

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of 81 characters. 0 or . for empty, 1-9 for values.
        """
        s = s.strip()
        if len(s) != SIZE * SIZE:
            raise InvalidArgumentError(
                f"String length must be {SIZE * SIZE}, got {len(s)}"
            )

        values = []
        for c in s:
            if c == '.':
                values.append(0)
            elif c in "0123456789":
                values.append(int(c))
            else:
                raise InvalidArgumentError(f"Invalid character in puzzle string: {c!r}")

        return cls(np.array(values, dtype=np.int32).reshape(SIZE, SIZE))

    @classmethod
    def from_2d_list(cls, data: Sequence[Sequence[int]]) -> SudokuBoard:
        """Create a board from a 2D list."""
        return cls(np.array(data, dtype=np.int32))

    def to_list(self) -> List[List[int]]:
        """Return the grid as nested Python lists."""
        return self.grid.tolist()

    def __getitem__(self, row: int) -> np.ndarray:
        return self.grid[row]

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for i in range(SIZE):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(SIZE):
                val = self.grid[i, j]
                row_str += ' .' if val == 0 else f' {val}'
                if (j + 1) % BOX_SIZE == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
