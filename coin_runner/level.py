# level.py
# Level loading: turns a read-only LevelDescriptor into live actor lists.
#
# Every load builds brand new lists. Nothing from the previous level is reused,
# so stale references (e.g. the platform the player was standing on) go away.

from __future__ import annotations
import logging

from .actors import Coin, Enemy, Platform
from .levels import LevelDescriptor
from .state import GameState

logger = logging.getLogger(__name__)


def build_platforms(descriptor: LevelDescriptor) -> list[Platform]:
    return [Platform.from_spec(spec) for spec in descriptor.platforms]


def build_enemies(descriptor: LevelDescriptor) -> list[Enemy]:
    return [Enemy.from_spec(spec) for spec in descriptor.enemies]


def build_coins(descriptor: LevelDescriptor) -> list[Coin]:
    return [Coin.from_spec(spec) for spec in descriptor.coins]


def load_level(state: GameState, index: int) -> None:
    """Replace the level's actors and reset per-level counters.

    The player keeps lives and invulnerability; only its position and motion
    are reset. Asking for a level that does not exist is a programming error.
    """
    assert 0 <= index < len(state.levels), f"Level index {index} out of range (0..{len(state.levels) - 1})"

    descriptor = state.levels[index]
    logger.debug(
        "Building level %d (%s): %d platforms, %d enemies, %d coins",
        index, descriptor.name, len(descriptor.platforms), len(descriptor.enemies), len(descriptor.coins),
    )

    state.current_level = index
    state.platforms = build_platforms(descriptor)
    state.enemies = build_enemies(descriptor)
    state.coins = build_coins(descriptor)

    # Reset player
    state.player.respawn(state.world.spawn)

    # Reset counters
    state.coins_collected = 0
    state.total_coins = descriptor.total_coins
    state.level_complete = False
    state.level_complete_timer = 0
    state.jump_pending = False

    logger.info("Loaded level %d: %s (%d coins)", index + 1, descriptor.name, state.total_coins)


def reset_game(state: GameState) -> None:
    """Back to the first level with full lives."""
    state.player.lives = state.world.starting_lives
    load_level(state, 0)
