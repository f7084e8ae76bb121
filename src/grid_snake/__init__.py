"""Grid Snake — tick-based snake simulation core."""

from grid_snake.board import Board, CellState
from grid_snake.config import GameConfig
from grid_snake.direction_buffer import DirectionBuffer
from grid_snake.engine import GameEngine
from grid_snake.errors import BoardFull, GridSnakeError, InvalidConfiguration
from grid_snake.food import FoodSpawner
from grid_snake.snake import Direction, Position, Snake
from grid_snake.stats import GameStats, StatsStore

__all__ = [
    "Board",
    "BoardFull",
    "CellState",
    "Direction",
    "DirectionBuffer",
    "FoodSpawner",
    "GameConfig",
    "GameEngine",
    "GameStats",
    "GridSnakeError",
    "InvalidConfiguration",
    "Position",
    "Snake",
    "StatsStore",
]
