"""Session and driver configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from grid_snake.errors import InvalidConfiguration

logger = logging.getLogger(__name__)

# The seeded snake spans columns 1..4 and needs one more column to move into.
MIN_COLS = 5
MIN_ROWS = 1


@dataclass(frozen=True)
class GameConfig:
    """Board, cadence, and storage settings for one game.

    Supports JSON serialization so a setup can be replayed exactly.
    """

    # Board
    rows: int = 16
    cols: int = 16
    seed: int | None = None

    # Input
    max_pending_directions: int = 2

    # Driver cadence
    tick_interval_ms: int = 90
    countdown_steps: int = 3
    countdown_step_ms: int = 500
    death_frame_ms: int = 35

    # Storage
    stats_path: str = "Stats.txt"

    def __post_init__(self) -> None:
        if self.rows < MIN_ROWS or self.cols < MIN_COLS:
            raise InvalidConfiguration(
                f"Board must be at least {MIN_ROWS}x{MIN_COLS}, "
                f"got {self.rows}x{self.cols}.",
            )
        if self.max_pending_directions < 1:
            raise InvalidConfiguration("max_pending_directions must be >= 1.")
        for name in (
            "tick_interval_ms", "countdown_steps",
            "countdown_step_ms", "death_frame_ms",
        ):
            if getattr(self, name) < 0:
                raise InvalidConfiguration(f"{name} must be >= 0.")

    @property
    def tick_interval(self) -> float:
        """Tick interval in seconds."""
        return self.tick_interval_ms / 1000.0

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        try:
            return cls(**raw)
        except TypeError as exc:
            raise InvalidConfiguration(f"Bad config file {path}: {exc}") from exc
