"""Snake body and movement directions."""

from __future__ import annotations

import enum
from collections import deque
from typing import NamedTuple


class Direction(enum.Enum):
    """Cardinal movement directions with (row_delta, col_delta) values."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    def opposite(self) -> Direction:
        """Return the direction pointing the other way."""
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Position(NamedTuple):
    """A (row, col) cell coordinate."""

    row: int
    col: int

    def translate(self, direction: Direction) -> Position:
        """Return the neighbouring position one step in *direction*."""
        dr, dc = direction.value
        return Position(self.row + dr, self.col + dc)


class Snake:
    """A snake represented as an ordered deque of body positions.

    The head is ``body[0]``; the tail is ``body[-1]``. The snake knows
    nothing about the board; callers keep the grid tags in sync.
    """

    def __init__(self, positions: list[Position]) -> None:
        if not positions:
            raise ValueError("Snake needs at least one segment.")
        if len(set(positions)) != len(positions):
            raise ValueError("Snake segments must be distinct.")
        self.body: deque[Position] = deque(positions)

    @classmethod
    def horizontal(cls, row: int, first_col: int, length: int) -> Snake:
        """Build a snake lying on *row*, tail at *first_col*, head facing right."""
        return cls([
            Position(row, col)
            for col in range(first_col + length - 1, first_col - 1, -1)
        ])

    @property
    def head(self) -> Position:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> Position:
        """Return the tail coordinate."""
        return self.body[-1]

    def add_head(self, position: Position) -> None:
        self.body.appendleft(position)

    def remove_tail(self) -> Position:
        """Drop the tail segment and return it."""
        return self.body.pop()

    def occupies(self, position: Position) -> bool:
        """Check whether the snake occupies a given cell."""
        return position in self.body

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self):
        return iter(self.body)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "length": len(self.body),
        }
