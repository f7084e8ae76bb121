"""Tests for text rendering."""

from grid_snake.board import CellState
from grid_snake.engine import GameEngine
from grid_snake.render import game_over_summary, render, render_rows
from grid_snake.snake import Direction, Position
from grid_snake.stats import GameStats


def _engine_without_food() -> GameEngine:
    engine = GameEngine(rows=3, cols=6, seed=0)
    cells = engine.board.cells
    cells[cells == CellState.FOOD] = CellState.EMPTY
    return engine


class TestRender:
    def test_board_glyphs(self):
        engine = _engine_without_food()
        engine.board.set(Position(0, 0), CellState.FOOD)
        rows = render_rows(engine)
        assert "".join(rows[0]) == "*....."
        assert "".join(rows[1]) == ".ooo>."

    def test_head_follows_direction(self):
        engine = _engine_without_food()
        engine.change_direction(Direction.UP)
        engine.advance()
        assert render_rows(engine)[0][4] == "^"

    def test_dead_snake(self):
        engine = _engine_without_food()
        engine.advance()
        engine.advance()
        assert engine.is_over
        assert "".join(render_rows(engine)[1]) == "..xxxX"

    def test_score_line(self):
        engine = _engine_without_food()
        assert render(engine).splitlines()[-1] == "SCORE: 0"

    def test_game_over_summary(self):
        text = game_over_summary(3, GameStats(top_score=4, games_played=2))
        assert text.splitlines() == ["Game over", "Score: 3", "75.0% of high score"]
