"""Input sources that steer a session between ticks."""

from __future__ import annotations

import abc
from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

from grid_snake.board import CellState
from grid_snake.snake import Direction

if TYPE_CHECKING:
    from grid_snake.engine import GameEngine

ALL_DIRECTIONS: list[Direction] = list(Direction)

_FATAL = (CellState.OUTSIDE, CellState.SNAKE)


class Controller(abc.ABC):
    """Picks the direction to request before the next tick."""

    @abc.abstractmethod
    def choose(self, engine: GameEngine) -> Direction | None:
        """Return a direction to request, or ``None`` to keep going."""


class RandomController(Controller):
    """Turns at random with probability *turn_prob* each tick."""

    def __init__(
        self,
        turn_prob: float = 0.2,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.turn_prob = max(0.0, min(1.0, turn_prob))
        self.rng = rng if rng is not None else np.random.default_rng()

    def choose(self, engine: GameEngine) -> Direction | None:
        if self.rng.random() >= self.turn_prob:
            return None
        return ALL_DIRECTIONS[int(self.rng.integers(len(ALL_DIRECTIONS)))]


class GreedyController(Controller):
    """Heads for the nearest food while avoiding immediately fatal moves.

    A *random_action_prob* above zero mixes in random turns to make the
    player weaker.
    """

    def __init__(
        self,
        random_action_prob: float = 0.0,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.random_action_prob = max(0.0, min(1.0, random_action_prob))
        self.rng = rng if rng is not None else np.random.default_rng()

    def choose(self, engine: GameEngine) -> Direction | None:
        if self.random_action_prob and self.rng.random() < self.random_action_prob:
            return ALL_DIRECTIONS[int(self.rng.integers(len(ALL_DIRECTIONS)))]

        facing = engine.facing_direction
        safe = [
            d for d in ALL_DIRECTIONS
            if d != facing.opposite() and engine.peek(d) not in _FATAL
        ]
        if not safe:
            return None

        food = engine.food_positions()
        if not food:
            return facing if facing in safe else safe[0]

        head = engine.head_position

        def distance(direction: Direction) -> int:
            r, c = head.translate(direction)
            return min(abs(r - f.row) + abs(c - f.col) for f in food)

        # Prefer the current heading on ties so the snake does not zigzag.
        best = min(safe, key=lambda d: (distance(d), d != facing))
        return best


class ScriptedController(Controller):
    """Replays a fixed sequence of inputs, one entry per tick.

    ``None`` entries mean "no input"; once the script runs out the
    controller stays silent.
    """

    def __init__(self, script: Iterable[Direction | None]) -> None:
        self._script = list(script)
        self._index = 0

    def choose(self, engine: GameEngine) -> Direction | None:
        if self._index >= len(self._script):
            return None
        direction = self._script[self._index]
        self._index += 1
        return direction


def build_controller(
    name: str, rng: np.random.Generator | None = None,
) -> Controller:
    """Create a controller by CLI name."""
    if name == "random":
        return RandomController(rng=rng)
    if name == "greedy":
        return GreedyController(rng=rng)
    raise ValueError(f"Unknown controller {name!r}.")
