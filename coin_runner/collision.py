# collision.py
# Player interactions, resolved once per tick after every actor has moved.
#
# Order: ride moving platform -> platforms -> enemies -> coins.
# Direction is classified from where an edge was *before* this tick's motion
# (edge - velocity). That is a cheap stand-in for swept collision: it can
# misclassify very fast movers or very thin platforms.
#
# Defeated enemies and collected coins are only flagged here; compact() drops
# them at the end of the tick so nothing is removed mid-iteration.

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable

from . import settings
from .actors import Actor, Coin, Enemy, Platform, Player
from .entity import ActorKind
from .state import GameState

logger = logging.getLogger(__name__)


@dataclass
class CollisionReport:
    """What happened during one resolution pass."""
    landed: bool = False
    stomped: int = 0
    hits: int = 0
    coins: int = 0
    level_completed: bool = False
    game_over: bool = False


# --------------------------
# Moving platforms
# --------------------------

def carry_rider(state: GameState) -> None:
    """Move a grounded player along with the platform under its feet."""
    player = state.player
    platform = player.standing_on
    if not player.grounded or platform is None:
        return
    if not any(p is platform for p in state.platforms):
        return
    player.body.pos += platform.delta


# --------------------------
# Player vs platform
# --------------------------

def _stand_on(player: Player, platform: Platform) -> None:
    body = player.body
    body.pos.y = platform.body.top - body.height
    body.vel.y = 0.0
    player.grounded = True
    player.jumping = False
    player.standing_on = platform


def resolve_player_platform(state: GameState, player: Player, platform: Platform, report: CollisionReport) -> None:
    body, solid = player.body, platform.body

    if not body.intersects(solid):
        # Ground probe: resting exactly on top is touching, not overlapping,
        # so look a pixel below the feet to stay grounded while still.
        if (
            body.vel.y >= 0
            and body.overlaps_horizontally(solid)
            and solid.top - settings.GROUND_PROBE <= body.bottom <= solid.top
        ):
            _stand_on(player, platform)
        return

    vx, vy = body.vel.x, body.vel.y

    # Landing on top
    if vy > 0 and body.bottom - vy <= solid.top:
        _stand_on(player, platform)
        report.landed = True

    # Head bump from below
    elif vy < 0 and body.top - vy >= solid.bottom:
        body.pos.y = solid.bottom
        body.vel.y = 0.0

    # Moving right into the left side
    elif vx > 0 and body.right - vx <= solid.left:
        body.pos.x = solid.left - body.width
        body.vel.x = 0.0

    # Moving left into the right side
    elif vx < 0 and body.left - vx >= solid.right:
        body.pos.x = solid.right
        body.vel.x = 0.0


# --------------------------
# Player vs enemy
# --------------------------

def resolve_player_enemy(state: GameState, player: Player, enemy: Enemy, report: CollisionReport) -> None:
    if enemy.dead:
        return

    body = player.body
    if not body.intersects(enemy.body):
        return

    vy = body.vel.y
    if vy > 0 and body.bottom - vy <= enemy.body.top + settings.STOMP_TOLERANCE:
        enemy.defeat()
        body.vel.y = settings.STOMP_BOUNCE
        player.grounded = False
        player.standing_on = None
        report.stomped += 1
        logger.debug("Stomped %s at (%.1f, %.1f)", enemy.enemy_kind.value, enemy.body.pos.x, enemy.body.pos.y)
        return

    if player.hit():
        report.hits += 1
        logger.debug("Player hit by %s, lives left: %d", enemy.enemy_kind.value, player.lives)
        if player.is_dead():
            report.game_over = True


# --------------------------
# Player vs coin
# --------------------------

def resolve_player_coin(state: GameState, player: Player, coin: Coin, report: CollisionReport) -> None:
    if coin.collected or not player.body.intersects(coin.body):
        return

    coin.collected = True
    state.coins_collected += 1
    report.coins += 1
    logger.debug("Coin collected: %s", state.coins_text)

    if state.coins_collected >= state.total_coins and not state.level_complete:
        state.level_complete = True
        state.level_complete_timer = settings.LEVEL_COMPLETE_TICKS
        report.level_completed = True


Resolver = Callable[[GameState, Player, Actor, CollisionReport], None]

RESOLVERS: dict[tuple[ActorKind, ActorKind], Resolver] = {
    (ActorKind.PLAYER, ActorKind.PLATFORM): resolve_player_platform,
    (ActorKind.PLAYER, ActorKind.ENEMY): resolve_player_enemy,
    (ActorKind.PLAYER, ActorKind.COIN): resolve_player_coin,
}


def resolve(state: GameState, player: Player, other: Actor, report: CollisionReport) -> None:
    RESOLVERS[(player.kind, other.kind)](state, player, other, report)


def resolve_collisions(state: GameState) -> CollisionReport:
    """Run every player interaction for this tick, in priority order."""
    player = state.player
    report = CollisionReport()

    carry_rider(state)

    # Grounded is re-derived from scratch every tick
    player.grounded = False
    player.standing_on = None

    for platform in state.platforms:
        resolve(state, player, platform, report)

    for enemy in state.enemies:
        resolve(state, player, enemy, report)
        if report.game_over:
            # The game is about to be reset; the rest of this tick is moot.
            return report

    for coin in state.coins:
        resolve(state, player, coin, report)

    return report


def compact(state: GameState) -> None:
    """Drop defeated enemies and collected coins."""
    state.enemies[:] = [e for e in state.enemies if not e.dead]
    state.coins[:] = [c for c in state.coins if not c.collected]
