"""Tests for persisted game statistics."""

import pytest

from grid_snake.stats import GameStats, StatsStore


class TestGameStats:
    def test_record(self):
        stats = GameStats()
        stats.record(5)
        stats.record(3)
        assert stats.top_score == 5
        assert stats.games_played == 2

    def test_negative_score_rejected(self):
        with pytest.raises(ValueError, match="negative"):
            GameStats().record(-1)

    def test_percent_of_top(self):
        stats = GameStats(top_score=8, games_played=1)
        assert stats.percent_of_top(2) == pytest.approx(25.0)
        assert GameStats().percent_of_top(4) == 0.0

    def test_text_format(self):
        text = GameStats(top_score=12, games_played=7).to_text()
        assert text == "Top Score: 12\nGames played: 7"

    def test_from_text_tolerates_garbage(self):
        stats = GameStats.from_text(
            "Top Score: lots\nGames played:  4 \nsomething else\n",
        )
        assert stats.top_score == 0
        assert stats.games_played == 4


class TestStatsStore:
    def test_missing_file_is_zero(self, tmp_path):
        store = StatsStore(tmp_path / "Stats.txt")
        assert store.load() == GameStats()

    def test_save_and_load(self, tmp_path):
        store = StatsStore(tmp_path / "Stats.txt")
        store.save(GameStats(top_score=3, games_played=2))
        assert store.path.read_text() == "Top Score: 3\nGames played: 2"
        assert store.load() == GameStats(top_score=3, games_played=2)

    def test_record_updates_file(self, tmp_path):
        store = StatsStore(tmp_path / "Stats.txt")
        store.record(4)
        stats = store.record(2)
        assert stats == GameStats(top_score=4, games_played=2)
        assert store.load() == stats
