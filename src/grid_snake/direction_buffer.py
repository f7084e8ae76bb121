"""Bounded queue of pending direction changes."""

from __future__ import annotations

from collections import deque

from grid_snake.errors import InvalidConfiguration
from grid_snake.snake import Direction


class DirectionBuffer:
    """FIFO of direction changes waiting for the next ticks.

    Keys pressed faster than the tick rate are queued instead of
    overwriting each other, up to *capacity* entries. Admission is checked
    against the last queued direction rather than the live one, so a quick
    "up, left" while moving right cannot fold the head back into the neck.
    """

    def __init__(self, capacity: int = 2) -> None:
        if capacity < 1:
            raise InvalidConfiguration("Direction buffer capacity must be at least 1.")
        self.capacity = capacity
        self._pending: deque[Direction] = deque()

    def reference(self, current: Direction) -> Direction:
        """Return the last queued direction, or *current* if none is queued."""
        if self._pending:
            return self._pending[-1]
        return current

    def can_accept(self, direction: Direction, current: Direction) -> bool:
        """Apply the admission rule without mutating the queue."""
        if len(self._pending) >= self.capacity:
            return False
        last = self.reference(current)
        return direction != last and direction != last.opposite()

    def offer(self, direction: Direction, current: Direction) -> bool:
        """Queue *direction* if admitted. Returns whether it was queued."""
        if not self.can_accept(direction, current):
            return False
        self._pending.append(direction)
        return True

    def pop(self) -> Direction | None:
        """Remove and return the oldest pending direction, if any."""
        if not self._pending:
            return None
        return self._pending.popleft()

    def clear(self) -> None:
        self._pending.clear()

    def pending(self) -> list[Direction]:
        """Return a snapshot of the queued directions, oldest first."""
        return list(self._pending)

    def __len__(self) -> int:
        return len(self._pending)
