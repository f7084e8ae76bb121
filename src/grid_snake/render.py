"""Plain-text rendering of a game session."""

from __future__ import annotations

from typing import TYPE_CHECKING

from grid_snake.board import CellState
from grid_snake.snake import Direction

if TYPE_CHECKING:
    from grid_snake.engine import GameEngine
    from grid_snake.stats import GameStats

CELL_GLYPHS: dict[CellState, str] = {
    CellState.EMPTY: ".",
    CellState.SNAKE: "o",
    CellState.FOOD: "*",
}

# The head points the way the snake is facing.
HEAD_GLYPHS: dict[Direction, str] = {
    Direction.UP: "^",
    Direction.RIGHT: ">",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
}

DEAD_HEAD = "X"
DEAD_BODY = "x"


def render_rows(engine: GameEngine) -> list[list[str]]:
    """Return the board as a grid of glyphs, head marked by direction."""
    rows = [
        [CELL_GLYPHS[CellState(int(v))] for v in row]
        for row in engine.board.cells
    ]
    if engine.is_over:
        for i, (r, c) in enumerate(engine.snake_positions):
            rows[r][c] = DEAD_HEAD if i == 0 else DEAD_BODY
    else:
        head = engine.head_position
        rows[head.row][head.col] = HEAD_GLYPHS[engine.facing_direction]
    return rows


def render(engine: GameEngine) -> str:
    """Render the board followed by a score line."""
    lines = ["".join(row) for row in render_rows(engine)]
    lines.append(f"SCORE: {engine.score}")
    return "\n".join(lines)


def game_over_summary(score: int, stats: GameStats) -> str:
    """Text shown once a game ends."""
    return (
        f"Game over\nScore: {score}\n"
        f"{stats.percent_of_top(score):.1f}% of high score"
    )
