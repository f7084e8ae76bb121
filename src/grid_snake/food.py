"""Food spawning logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from grid_snake.board import CellState
from grid_snake.errors import BoardFull

if TYPE_CHECKING:
    from grid_snake.board import Board
    from grid_snake.snake import Position

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places food on a uniformly random empty cell.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    """

    def __init__(
        self,
        board: Board,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.board = board
        self.rng = rng if rng is not None else np.random.default_rng()

    def place(self) -> Position:
        """Tag one random empty cell as food and return it.

        Raises :class:`BoardFull` without touching the board when no cell
        is empty.
        """
        empty = list(self.board.empty_positions())
        if not empty:
            raise BoardFull(
                f"No empty cell on a {self.board.rows}x{self.board.cols} board.",
            )

        pos = empty[int(self.rng.integers(len(empty)))]
        self.board.set(pos, CellState.FOOD)
        logger.debug("Food placed at %s.", pos)
        return pos
