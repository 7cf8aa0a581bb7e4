"""Tests for snake.config - board geometry and tunables."""

import pytest

from snake.config import CFG, Config, GRID_H, GRID_W, SCREEN_HEIGHT, SCREEN_WIDTH, UNIT_SIZE


class TestBoardConstants:
    def test_board_is_26_by_15(self):
        assert (SCREEN_WIDTH, SCREEN_HEIGHT, UNIT_SIZE) == (1300, 750, 50)
        assert (GRID_W, GRID_H) == (26, 15)
        assert CFG.game_units == 390

    def test_default_config_matches_constants(self):
        assert CFG.cols == GRID_W
        assert CFG.rows == GRID_H
        assert CFG.max_segments == 27 * 16
        assert CFG.tick_ms == 175
        assert CFG.initial_length == 6
        assert CFG.seed is None


class TestConfigValidation:
    def test_non_positive_tick_rejected(self):
        with pytest.raises(ValueError, match="tick_ms"):
            Config(tick_ms=0)

    def test_non_positive_unit_rejected(self):
        with pytest.raises(ValueError, match="unit_size"):
            Config(unit_size=0)

    def test_board_must_be_whole_cells(self):
        with pytest.raises(ValueError, match="whole number"):
            Config(screen_width=1310)

    def test_initial_length_bounds(self):
        with pytest.raises(ValueError, match="initial_length"):
            Config(initial_length=0)
        with pytest.raises(ValueError, match="initial_length"):
            Config(initial_length=15)
        assert Config(initial_length=14).initial_length == 14

    def test_small_board(self):
        cfg = Config(screen_width=200, screen_height=100, unit_size=50, initial_length=2)
        assert (cfg.cols, cfg.rows, cfg.game_units) == (4, 2, 8)
        assert cfg.max_segments == 15
