import os

# Headless pygame for the renderer tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from coin_runner.game import start
from coin_runner.levels import CoinSpec, LevelDescriptor, PlatformSpec
from coin_runner.state import GameState

GROUND = PlatformSpec(0, 450, 800, 50)
FAR_COIN = (700, 50)


def build_state(platforms=(), enemies=(), coins=(FAR_COIN,)) -> GameState:
    descriptor = LevelDescriptor(
        name="Test",
        platforms=tuple(platforms),
        enemies=tuple(enemies),
        coins=tuple(CoinSpec(x, y) for x, y in coins),
    )
    state = GameState(levels=(descriptor,))
    start(state)
    return state


@pytest.fixture
def make_state():
    return build_state


@pytest.fixture
def ground_state():
    return build_state(platforms=[GROUND])
