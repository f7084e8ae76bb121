"""Exception types raised by the snake simulation."""

from __future__ import annotations


class GridSnakeError(Exception):
    """Base class for all grid_snake errors."""


class InvalidConfiguration(GridSnakeError, ValueError):
    """Raised when a board, buffer, or config cannot be constructed."""


class BoardFull(GridSnakeError):
    """Raised when food placement finds no empty cell."""
