"""Tests for the game configuration dataclass."""

import json

import pytest

from grid_snake.config import GameConfig
from grid_snake.errors import InvalidConfiguration


class TestGameConfig:
    def test_defaults(self):
        cfg = GameConfig()
        assert cfg.rows == 16
        assert cfg.cols == 16
        assert cfg.max_pending_directions == 2
        assert cfg.tick_interval_ms == 90
        assert cfg.tick_interval == pytest.approx(0.09)
        assert cfg.stats_path == "Stats.txt"

    def test_to_dict(self):
        d = GameConfig(seed=3).to_dict()
        assert d["seed"] == 3
        assert d["countdown_steps"] == 3

    def test_save_and_load(self, tmp_path):
        cfg = GameConfig(rows=12, cols=20, seed=9, tick_interval_ms=50)
        path = tmp_path / "sub" / "config.json"
        cfg.save(path)
        assert json.loads(path.read_text())["cols"] == 20
        assert GameConfig.load(path) == cfg

    def test_load_unknown_key(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"rows": 10, "walls": "wrap"}))
        with pytest.raises(InvalidConfiguration, match="Bad config"):
            GameConfig.load(path)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"rows": 0},
            {"cols": 4},
            {"max_pending_directions": 0},
            {"tick_interval_ms": -1},
            {"countdown_steps": -2},
        ],
    )
    def test_validation(self, kwargs):
        with pytest.raises(InvalidConfiguration):
            GameConfig(**kwargs)
