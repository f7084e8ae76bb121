"""Persisted top-score and games-played counters."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_TOP_SCORE_KEY = "Top Score:"
_GAMES_PLAYED_KEY = "Games played:"


@dataclass
class GameStats:
    """Aggregate results across sessions."""

    top_score: int = 0
    games_played: int = 0

    def record(self, score: int) -> None:
        """Count a finished game and raise the top score if beaten."""
        if score < 0:
            raise ValueError("Score cannot be negative.")
        self.top_score = max(self.top_score, score)
        self.games_played += 1

    def percent_of_top(self, score: int) -> float:
        """Return *score* as a percentage of the top score."""
        if self.top_score == 0:
            return 0.0
        return score / self.top_score * 100.0

    def to_text(self) -> str:
        return (
            f"{_TOP_SCORE_KEY} {self.top_score}\n"
            f"{_GAMES_PLAYED_KEY} {self.games_played}"
        )

    @classmethod
    def from_text(cls, text: str) -> GameStats:
        """Parse the two-line stats format.

        Unknown lines are skipped and unparsable values leave the counter
        at zero.
        """
        stats = cls()
        for line in text.splitlines():
            if line.startswith(_TOP_SCORE_KEY):
                stats.top_score = _parse_int(line[len(_TOP_SCORE_KEY):])
            elif line.startswith(_GAMES_PLAYED_KEY):
                stats.games_played = _parse_int(line[len(_GAMES_PLAYED_KEY):])
        return stats


def _parse_int(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        logger.warning("Ignoring malformed stats value %r.", raw.strip())
        return 0


class StatsStore:
    """Reads and writes :class:`GameStats` to a text file."""

    def __init__(self, path: str | Path = "Stats.txt") -> None:
        self.path = Path(path)

    def load(self) -> GameStats:
        """Return stored stats, or zeroed stats if the file does not exist."""
        if not self.path.exists():
            return GameStats()
        return GameStats.from_text(self.path.read_text())

    def save(self, stats: GameStats) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(stats.to_text())
        logger.info("Stats saved to %s", self.path)

    def record(self, score: int) -> GameStats:
        """Load, record one finished game, save, and return the new stats."""
        stats = self.load()
        stats.record(score)
        self.save(stats)
        return stats
