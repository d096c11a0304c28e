import pygame
import pytest

from coin_runner.game import Game, start, step
from coin_runner.render import Renderer
from coin_runner.settings import SKY_COLOR, WorldConfig
from coin_runner.state import Controls, GameState


@pytest.fixture
def renderer():
    return Renderer(WorldConfig(), clock_ms=lambda: 0)


def test_draws_start_screen_before_running(renderer):
    surface = renderer.draw(GameState())
    assert surface.get_size() == (800, 500)
    assert surface.get_at((5, 495))[:3] == SKY_COLOR


@pytest.mark.parametrize("setup", ["running", "paused", "complete", "game_over"])
def test_draws_every_phase(renderer, setup):
    state = start(GameState())
    if setup == "paused":
        step(state, Controls(pause=True))
    elif setup == "complete":
        state.level_complete = True
        state.level_complete_timer = 10
    elif setup == "game_over":
        state.paused = True
        state.game_over = True

    surface = renderer.draw(state)
    assert isinstance(surface, pygame.Surface)


def test_ground_is_drawn_as_grass(renderer):
    state = start(GameState())
    surface = renderer.draw(state)
    # First level's ground starts at y=450
    assert surface.get_at((10, 452))[:3] != SKY_COLOR


def test_invulnerable_player_blinks():
    state = start(GameState())
    state.player.hit()

    hidden = Renderer(WorldConfig(), clock_ms=lambda: 0)
    shown = Renderer(WorldConfig(), clock_ms=lambda: 100)
    assert not hidden.player_visible(state.player)
    assert shown.player_visible(state.player)

    state.player.invulnerable = False
    assert hidden.player_visible(state.player)


def test_renderer_receives_hud_as_observer():
    renderer = Renderer(WorldConfig(), clock_ms=lambda: 0)
    game = Game(observers=[renderer])
    game.start()
    assert renderer.coins_text == "0/7"
    assert renderer.lives == 100
