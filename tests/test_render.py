"""Tests for snake.render - drawing runs headless on an off-screen surface."""

import pygame
import pytest

from snake.config import BG, BODY_GREEN, HEAD_GREEN, RED
from snake.game import Direction, GameState, RunState
from snake.render import Renderer


@pytest.fixture
def surface():
    pygame.font.init()
    yield pygame.Surface((1300, 750))
    pygame.font.quit()


@pytest.fixture
def renderer(surface):
    return Renderer(surface)


def rgb(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


class TestRunningFrame:
    def test_draws_head_body_and_apple(self, renderer, surface, rng):
        game = GameState.from_segments([(650, 400), (600, 400)], apple=(100, 500), rng=rng)
        renderer.draw(game.snapshot())

        assert rgb(surface, 675, 425) == HEAD_GREEN
        assert rgb(surface, 625, 425) == BODY_GREEN
        assert rgb(surface, 125, 525) == RED
        # empty cell
        assert rgb(surface, 1025, 625) == BG

    def test_score_is_drawn_at_top(self, renderer, surface, rng):
        game = GameState.from_segments([(650, 400)], apple=(100, 500), rng=rng)
        renderer.draw(game.snapshot())
        top_band = [rgb(surface, x, y) for x in range(500, 800) for y in range(0, 40)]
        assert RED in top_band

    def test_drawing_does_not_touch_state(self, renderer, game):
        before = game.snapshot()
        renderer.draw(before)
        assert game.snapshot() == before


class TestGameOverFrame:
    @pytest.fixture
    def over(self, rng):
        game = GameState.from_segments([(0, 400)], Direction.LEFT, apple=(500, 100), rng=rng)
        assert game.tick() is RunState.GAME_OVER
        return game

    def test_board_is_not_drawn(self, renderer, surface, over):
        renderer.draw(over.snapshot())
        assert rgb(surface, 525, 125) == BG

    def test_button_rect_is_fixed(self, renderer):
        assert renderer.button_rect == pygame.Rect(500, 400, 300, 100)

    def test_button_hit(self, renderer):
        assert renderer.button_hit((650, 450))
        assert not renderer.button_hit((10, 10))
        assert not renderer.button_hit((650, 520))

    def test_game_over_text_drawn(self, renderer, surface, over):
        renderer.draw(over.snapshot())
        title_band = [rgb(surface, x, y) for x in range(450, 850, 2) for y in range(300, 375, 2)]
        assert RED in title_band
