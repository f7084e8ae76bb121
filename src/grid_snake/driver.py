"""Async game loop driving a session at a fixed tick cadence."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass

from grid_snake.board import CellState
from grid_snake.config import GameConfig
from grid_snake.controllers import Controller
from grid_snake.engine import GameEngine
from grid_snake.stats import GameStats, StatsStore

logger = logging.getLogger(__name__)

TickCallback = Callable[[GameEngine, CellState], None]
CountdownCallback = Callable[[int], None]


@dataclass
class GameResult:
    """Outcome of one driven session."""

    score: int
    ticks: int
    length: int
    board_full: bool
    truncated: bool
    stats: GameStats | None = None

    def summary(self) -> str:
        status = "truncated" if self.truncated else "over"
        return (
            f"Game {status} after {self.ticks} ticks | "
            f"score {self.score}, length {self.length}"
        )


class GameDriver:
    """Runs one session from countdown to game over.

    Input is collected from the controller immediately before each tick,
    so every ``change_direction`` call lands between two ``advance``
    calls on the same task.
    """

    def __init__(
        self,
        config: GameConfig,
        controller: Controller,
        *,
        stats_store: StatsStore | None = None,
        on_tick: TickCallback | None = None,
        on_countdown: CountdownCallback | None = None,
        max_ticks: int | None = None,
    ) -> None:
        if max_ticks is not None and max_ticks < 1:
            raise ValueError("max_ticks must be positive.")
        self.config = config
        self.controller = controller
        self.stats_store = stats_store
        self.on_tick = on_tick
        self.on_countdown = on_countdown
        self.max_ticks = max_ticks
        self.engine = GameEngine.from_config(config)

    async def countdown(self) -> None:
        for remaining in range(self.config.countdown_steps, 0, -1):
            if self.on_countdown is not None:
                self.on_countdown(remaining)
            await asyncio.sleep(self.config.countdown_step_ms / 1000.0)

    async def run(self) -> GameResult:
        """Play the session to the end and record it in the stats store."""
        await self.countdown()
        engine = self.engine
        truncated = False

        while not engine.is_over:
            if self.max_ticks is not None and engine.tick >= self.max_ticks:
                truncated = True
                logger.info("Stopping session at tick limit %d.", self.max_ticks)
                break
            await asyncio.sleep(self.config.tick_interval)
            direction = self.controller.choose(engine)
            if direction is not None:
                engine.change_direction(direction)
            move = engine.advance()
            if self.on_tick is not None and move is not None:
                self.on_tick(engine, move)

        if engine.is_over:
            # One frame per segment for the death animation.
            await asyncio.sleep(
                self.config.death_frame_ms / 1000.0 * len(engine.snake),
            )

        stats = None
        if self.stats_store is not None:
            stats = self.stats_store.record(engine.score)

        return GameResult(
            score=engine.score,
            ticks=engine.tick,
            length=len(engine.snake),
            board_full=engine.board_full,
            truncated=truncated,
            stats=stats,
        )


async def play_games(
    config: GameConfig,
    controller_factory: Callable[[], Controller],
    games: int = 1,
    *,
    stats_store: StatsStore | None = None,
    on_tick: TickCallback | None = None,
    max_ticks: int | None = None,
) -> list[GameResult]:
    """Play *games* sessions back to back, each with a fresh engine.

    Consecutive games with a fixed seed would be identical, so the seed is
    offset by the game index.
    """
    results: list[GameResult] = []
    for i in range(games):
        game_config = config
        if config.seed is not None:
            game_config = GameConfig(**{**config.to_dict(), "seed": config.seed + i})
        driver = GameDriver(
            game_config,
            controller_factory(),
            stats_store=stats_store,
            on_tick=on_tick,
            max_ticks=max_ticks,
        )
        result = await driver.run()
        logger.info("Game %d/%d: %s", i + 1, games, result.summary())
        results.append(result)
    return results
