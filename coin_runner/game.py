# game.py
# The simulation loop and high-level states:
# NOT_RUNNING -> RUNNING -> (PAUSED or LEVEL_COMPLETE) -> RUNNING ... -> GAME_OVER -> RUNNING
#
# step() advances a GameState by exactly one tick. It never draws, reads the
# keyboard or sleeps; whoever calls it (the pygame App, a test, a replay) owns
# scheduling. Game wraps a state and tells observers (renderer, HUD) about it.

from __future__ import annotations
import logging
from typing import Iterable, Protocol

from . import settings
from .actors import update_actor
from .collision import compact, resolve_collisions
from .level import load_level, reset_game
from .state import Controls, GameState
from .utils import clamp

logger = logging.getLogger(__name__)

IDLE = Controls()


# ------------------ Transitions ------------------

def start(state: GameState) -> GameState:
    """External start signal: full lives, first level, ticking."""
    state.running = True
    state.paused = False
    state.game_over = False
    reset_game(state)
    logger.info("Game started")
    return state


def toggle_pause(state: GameState) -> None:
    state.paused = not state.paused
    if not state.paused:
        state.game_over = False  # resuming dismisses the game-over banner
    logger.info("Game %s", "paused" if state.paused else "resumed")


def game_over(state: GameState) -> None:
    logger.info("Game over on level %d, restarting from level 1", state.current_level + 1)
    reset_game(state)
    state.game_over = True
    state.paused = True


def advance_level(state: GameState) -> None:
    """Leave a completed level: bonus life, then next level (or back to the first)."""
    state.player.lives += settings.LEVEL_BONUS_LIVES
    if state.is_last_level:
        logger.info("All %d levels complete, looping back to level 1", len(state.levels))
        load_level(state, 0)
    else:
        load_level(state, state.current_level + 1)


# ------------------ Per-tick pieces ------------------

def apply_controls(state: GameState, controls: Controls, jump_pressed: bool) -> None:
    body = state.player.body
    if controls.right:
        body.vel.x = settings.PLAYER_SPEED
    if controls.left:
        body.vel.x = -settings.PLAYER_SPEED

    # A press stays pending until the player is on the ground to use it.
    if jump_pressed:
        state.jump_pending = True
    if state.jump_pending and state.player.jump():
        state.jump_pending = False


def update_actors(state: GameState) -> None:
    update_actor(state.player, state.world)
    for platform in state.platforms:
        update_actor(platform, state.world)
    for enemy in state.enemies:
        update_actor(enemy, state.world)
    for coin in state.coins:
        update_actor(coin, state.world)


def clamp_player(state: GameState) -> None:
    body = state.player.body
    body.pos.x = clamp(body.pos.x, 0, state.world.width - body.width)
    if body.pos.y < 0:
        body.pos.y = 0


def step(state: GameState, controls: Controls = IDLE) -> GameState:
    """Advance one tick."""
    pause_pressed = controls.pause and not state.prev_controls.pause
    jump_pressed = controls.jump and not state.prev_controls.jump
    state.prev_controls = controls

    if not state.running:
        return state

    if pause_pressed:
        toggle_pause(state)
    if state.paused:
        return state

    state.tick_count += 1

    # Level complete: hold everything still until the countdown runs out
    if state.level_complete:
        state.level_complete_timer -= 1
        if state.level_complete_timer <= 0:
            advance_level(state)
        return state

    apply_controls(state, controls, jump_pressed)
    update_actors(state)

    report = resolve_collisions(state)
    if report.game_over:
        game_over(state)
        return state
    if report.level_completed:
        logger.info("Level %d complete (%s coins)", state.current_level + 1, state.coins_text)

    compact(state)
    clamp_player(state)

    # Fell out of the world: replay the level, no life lost
    if state.player.body.top > state.world.height:
        logger.info("Player fell off level %d, reloading", state.current_level + 1)
        load_level(state, state.current_level)

    return state


# ------------------ Observers ------------------

class GameObserver(Protocol):
    def on_hud(self, coins_text: str, lives: int) -> None: ...

    def on_frame(self, state: GameState) -> None: ...


class Game:
    """Owns a GameState and publishes it to observers after every tick."""

    def __init__(self, state: GameState | None = None, observers: Iterable[GameObserver] = ()):
        self.state = state if state is not None else GameState()
        self.observers: list[GameObserver] = list(observers)
        self._last_hud: tuple[str, int] | None = None

    def add_observer(self, observer: GameObserver) -> None:
        self.observers.append(observer)
        self._last_hud = None  # make sure the newcomer gets the HUD once

    def start(self) -> None:
        start(self.state)
        self.publish()

    def tick(self, controls: Controls = IDLE) -> GameState:
        step(self.state, controls)
        self.publish()
        return self.state

    def publish(self) -> None:
        hud = (self.state.coins_text, self.state.player.lives)
        if hud != self._last_hud:
            self._last_hud = hud
            for observer in self.observers:
                observer.on_hud(*hud)

        for observer in self.observers:
            observer.on_frame(self.state)
