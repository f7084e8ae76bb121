"""Tick-based game engine composing board, snake, food, and input logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from grid_snake.board import Board, CellState
from grid_snake.direction_buffer import DirectionBuffer
from grid_snake.errors import BoardFull, InvalidConfiguration
from grid_snake.food import FoodSpawner
from grid_snake.snake import Direction, Position, Snake

if TYPE_CHECKING:
    from grid_snake.config import GameConfig

logger = logging.getLogger(__name__)

_INITIAL_LENGTH = 4
_INITIAL_TAIL_COL = 1


class GameEngine:
    """Single-snake, tick-based game engine.

    The engine owns the board, snake, direction buffer, and food spawner.
    Drivers call :meth:`change_direction` any number of times between
    ticks and :meth:`advance` once per tick; :meth:`advance` is the only
    method that mutates committed game state.
    """

    def __init__(
        self,
        rows: int = 16,
        cols: int = 16,
        seed: int | None = None,
        max_pending_directions: int = 2,
    ) -> None:
        if rows < 1 or cols < _INITIAL_TAIL_COL + _INITIAL_LENGTH:
            raise InvalidConfiguration(
                f"A {rows}x{cols} board cannot hold the starting snake; "
                f"need at least 1x{_INITIAL_TAIL_COL + _INITIAL_LENGTH}.",
            )
        self.board = Board(rows, cols)
        self.rng = np.random.default_rng(seed)
        self.buffer = DirectionBuffer(capacity=max_pending_directions)

        self.snake = Snake.horizontal(rows // 2, _INITIAL_TAIL_COL, _INITIAL_LENGTH)
        for pos in self.snake:
            self.board.set(pos, CellState.SNAKE)

        self.food_spawner = FoodSpawner(self.board, rng=self.rng)

        self.direction = Direction.RIGHT
        self.score = 0
        self.tick = 0
        self.game_over = False
        self.board_full = False

        self._place_food()

    @classmethod
    def from_config(cls, config: GameConfig) -> GameEngine:
        """Build a fresh session from a :class:`GameConfig`."""
        return cls(
            rows=config.rows,
            cols=config.cols,
            seed=config.seed,
            max_pending_directions=config.max_pending_directions,
        )

    # -- input ---------------------------------------------------------

    @property
    def pending_or_current_direction(self) -> Direction:
        """Direction new input is checked against: last queued, else facing."""
        return self.buffer.reference(self.direction)

    def change_direction(self, direction: Direction) -> bool:
        """Queue a direction change for an upcoming tick.

        Reversals, repeats of the reference direction, and input beyond
        the buffer bound are dropped silently. Returns whether the change
        was queued.
        """
        if self.game_over:
            return False
        accepted = self.buffer.offer(direction, self.direction)
        if not accepted:
            logger.debug(
                "Ignored direction %s (reference %s, %d pending).",
                direction.name, self.pending_or_current_direction.name,
                len(self.buffer),
            )
        return accepted

    # -- tick ----------------------------------------------------------

    def advance(self) -> CellState | None:
        """Advance the game by one tick.

        Returns how the move was classified, or ``None`` if the game had
        already ended, in which case nothing changes.
        """
        if self.game_over:
            return None

        queued = self.buffer.pop()
        if queued is not None:
            self.direction = queued

        candidate = self.snake.head.translate(self.direction)
        move = self._classify(candidate)

        if move in (CellState.OUTSIDE, CellState.SNAKE):
            self.game_over = True
            logger.info(
                "Game over at tick %d (%s at %s) with score %d.",
                self.tick, move.name, candidate, self.score,
            )
        elif move == CellState.EMPTY:
            self._remove_tail()
            self._add_head(candidate)
        else:
            self._add_head(candidate)
            self.score += 1
            self._place_food()

        self.tick += 1
        return move

    def peek(self, direction: Direction) -> CellState:
        """Classify a move from the current head without making it."""
        return self._classify(self.snake.head.translate(direction))

    def _classify(self, candidate: Position) -> CellState:
        if not self.board.in_bounds(candidate):
            return CellState.OUTSIDE
        # The tail leaves this cell on the same tick.
        if candidate == self.snake.tail:
            return CellState.EMPTY
        return self.board.get(candidate)

    def _add_head(self, position: Position) -> None:
        self.snake.add_head(position)
        self.board.set(position, CellState.SNAKE)

    def _remove_tail(self) -> None:
        tail = self.snake.remove_tail()
        self.board.set(tail, CellState.EMPTY)

    def _place_food(self) -> Position | None:
        try:
            return self.food_spawner.place()
        except BoardFull:
            self.board_full = True
            logger.warning(
                "Board full at tick %d; continuing without food.", self.tick,
            )
            return None

    # -- read accessors ------------------------------------------------

    @property
    def head_position(self) -> Position:
        return self.snake.head

    @property
    def tail_position(self) -> Position:
        return self.snake.tail

    @property
    def snake_positions(self) -> list[Position]:
        """Body positions, head first."""
        return list(self.snake)

    @property
    def facing_direction(self) -> Direction:
        return self.direction

    @property
    def is_over(self) -> bool:
        return self.game_over

    @property
    def rows(self) -> int:
        return self.board.rows

    @property
    def cols(self) -> int:
        return self.board.cols

    def cell_at(self, row: int, col: int) -> CellState:
        """Return the stored state of an in-bounds cell."""
        pos = Position(row, col)
        if not self.board.in_bounds(pos):
            raise IndexError(f"{pos} is outside the {self.rows}x{self.cols} board.")
        return self.board.get(pos)

    def food_positions(self) -> list[Position]:
        return self.board.positions_of(CellState.FOOD)

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "score": self.score,
            "game_over": self.game_over,
            "board_full": self.board_full,
            "direction": self.direction.name,
            "pending_directions": [d.name for d in self.buffer.pending()],
            "board": self.board.to_dict(),
            "snake": self.snake.to_dict(),
            "food": [list(p) for p in self.food_positions()],
        }
