"""Board representation for the snake game."""

from __future__ import annotations

import enum
from collections.abc import Iterator

import numpy as np

from grid_snake.errors import InvalidConfiguration
from grid_snake.snake import Position


class CellState(enum.IntEnum):
    """Integer codes stored in the board array.

    ``OUTSIDE`` is only ever a move classification; it is never written
    into the array.
    """

    OUTSIDE = -1
    EMPTY = 0
    SNAKE = 1
    FOOD = 2


class Board:
    """NumPy-backed game board of ``rows x cols`` cells.

    Coordinates use (row, col) ordering consistent with NumPy indexing.
    Cells outside the board are not stored; :meth:`in_bounds` detects them.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise InvalidConfiguration(
                f"Board dimensions must be positive, got {rows}x{cols}.",
            )
        self.rows = rows
        self.cols = cols
        self.cells = np.full((rows, cols), CellState.EMPTY, dtype=np.int8)

    def in_bounds(self, position: Position) -> bool:
        """Check whether a coordinate lies within the board."""
        row, col = position
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, position: Position) -> CellState:
        """Return the cell state at the given coordinate."""
        return CellState(int(self.cells[position.row, position.col]))

    def set(self, position: Position, state: CellState) -> None:
        """Set the cell state at the given coordinate."""
        if state == CellState.OUTSIDE:
            raise ValueError("OUTSIDE cannot be stored on the board.")
        self.cells[position.row, position.col] = state

    def empty_positions(self) -> Iterator[Position]:
        """Yield every empty cell in row-major order.

        The scan runs against the current board each time it is called.
        """
        for row, col in np.argwhere(self.cells == CellState.EMPTY):
            yield Position(int(row), int(col))

    def positions_of(self, state: CellState) -> list[Position]:
        """Return all positions tagged with *state*, row-major."""
        return [
            Position(int(r), int(c))
            for r, c in np.argwhere(self.cells == state)
        ]

    def count(self, state: CellState) -> int:
        """Return how many cells hold *state*."""
        return int(np.count_nonzero(self.cells == state))

    def to_dict(self) -> dict:
        """Serialize board state to a dictionary."""
        return {
            "rows": self.rows,
            "cols": self.cols,
            "cells": self.cells.tolist(),
        }
