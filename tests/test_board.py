"""Tests for the Board module."""

import numpy as np
import pytest

from grid_snake.board import Board, CellState
from grid_snake.errors import InvalidConfiguration
from grid_snake.snake import Position


class TestBoardInit:
    def test_dimensions(self):
        board = Board(rows=8, cols=10)
        assert board.rows == 8
        assert board.cols == 10
        assert board.cells.shape == (8, 10)

    def test_non_positive_size_rejected(self):
        with pytest.raises(InvalidConfiguration, match="positive"):
            Board(rows=0, cols=4)
        with pytest.raises(InvalidConfiguration, match="positive"):
            Board(rows=4, cols=-2)

    def test_all_cells_start_empty(self):
        board = Board(rows=5, cols=5)
        assert np.all(board.cells == CellState.EMPTY)


class TestBoardOperations:
    def test_set_and_get(self):
        board = Board(rows=5, cols=5)
        board.set(Position(2, 3), CellState.SNAKE)
        assert board.get(Position(2, 3)) == CellState.SNAKE

    def test_outside_is_never_stored(self):
        board = Board(rows=5, cols=5)
        with pytest.raises(ValueError, match="OUTSIDE"):
            board.set(Position(0, 0), CellState.OUTSIDE)

    def test_in_bounds(self):
        board = Board(rows=5, cols=6)
        assert board.in_bounds(Position(0, 0))
        assert board.in_bounds(Position(4, 5))
        assert not board.in_bounds(Position(-1, 0))
        assert not board.in_bounds(Position(0, 6))
        assert not board.in_bounds(Position(5, 0))

    def test_count(self):
        board = Board(rows=4, cols=4)
        board.set(Position(0, 0), CellState.SNAKE)
        board.set(Position(0, 1), CellState.SNAKE)
        board.set(Position(1, 1), CellState.FOOD)
        assert board.count(CellState.SNAKE) == 2
        assert board.count(CellState.FOOD) == 1
        assert board.count(CellState.EMPTY) == 13


class TestEmptyPositions:
    def test_row_major_order(self):
        board = Board(rows=2, cols=3)
        board.set(Position(0, 1), CellState.SNAKE)
        assert list(board.empty_positions()) == [
            (0, 0), (0, 2), (1, 0), (1, 1), (1, 2),
        ]

    def test_is_lazy_and_restartable(self):
        board = Board(rows=3, cols=3)
        gen = board.empty_positions()
        assert next(gen) == (0, 0)
        assert len(list(board.empty_positions())) == 9

    def test_recomputed_each_call(self):
        board = Board(rows=3, cols=3)
        assert len(list(board.empty_positions())) == 9
        board.set(Position(1, 1), CellState.FOOD)
        assert Position(1, 1) not in list(board.empty_positions())

    def test_full_board_has_none(self):
        board = Board(rows=2, cols=2)
        board.cells[:] = CellState.SNAKE
        assert list(board.empty_positions()) == []


class TestBoardSerialization:
    def test_to_dict_reflects_state(self):
        board = Board(rows=4, cols=5)
        board.set(Position(1, 2), CellState.FOOD)
        d = board.to_dict()
        assert d["rows"] == 4
        assert d["cols"] == 5
        assert len(d["cells"]) == 4
        assert d["cells"][1][2] == CellState.FOOD
