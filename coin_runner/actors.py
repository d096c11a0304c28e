# actors.py
# Actor records (player, platform, enemy, coin) and their per-tick updates.
#
# Each record owns a Body and is tagged with an ActorKind. The update rule for
# a record is a plain function picked from UPDATERS by that tag, so adding a
# new kind means adding a record and one function, not a subclass.

from __future__ import annotations
import math
from typing import Callable, Union
import pygame

from . import settings
from .animation import FrameCycle
from .entity import ActorKind, Body
from .levels import CoinSpec, EnemyKind, EnemySpec, Motion, PlatformSpec
from .settings import WorldConfig
from .utils import sign


class Player:
    kind = ActorKind.PLAYER

    def __init__(self, pos: tuple[float, float], lives: int = settings.STARTING_LIVES):
        self.body = Body(pos[0], pos[1], settings.PLAYER_WIDTH, settings.PLAYER_HEIGHT)

        # Physics
        self.grounded = False
        self.jumping = False
        self.facing = 1
        self.standing_on: Platform | None = None

        # Damage
        self.lives = lives
        self.invulnerable = False
        self.invulnerable_timer = 0

        # Run animation: frame 0 is the standing pose
        self.run_cycle = FrameCycle(settings.PLAYER_RUN_FRAMES, settings.PLAYER_FRAME_DELAY)

    # --------------------------
    # Actions
    # --------------------------

    def jump(self) -> bool:
        """Jump if standing on something. Returns True when the jump fired."""
        if not self.grounded:
            return False
        self.body.vel.y = settings.JUMP_FORCE
        self.jumping = True
        self.grounded = False
        self.standing_on = None
        return True

    def hit(self) -> bool:
        """Take one hit. Returns False (and does nothing) while invulnerable."""
        if self.invulnerable:
            return False
        self.invulnerable = True
        self.invulnerable_timer = settings.INVULNERABLE_TICKS
        self.body.vel.y = settings.HIT_BOUNCE
        self.grounded = False
        self.standing_on = None
        self.lives -= 1
        return True

    def is_dead(self) -> bool:
        return self.lives <= 0

    def respawn(self, pos: tuple[float, float]) -> None:
        """Put the player back at pos with no motion. Lives and invulnerability persist."""
        self.body.pos.update(pos[0], pos[1])
        self.body.vel.update(0.0, 0.0)
        self.grounded = False
        self.jumping = False
        self.standing_on = None

    @property
    def frame(self) -> int:
        return self.run_cycle.index


class Platform:
    kind = ActorKind.PLATFORM

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        motion: Motion = Motion.STATIONARY,
    ):
        self.body = Body(x, y, width, height)
        self.motion = motion
        self.origin = pygame.Vector2(x, y)
        self.direction = 1
        self.speed = 0.0 if motion is Motion.STATIONARY else settings.PLATFORM_SPEED

        if motion is Motion.HORIZONTAL:
            self.amplitude = settings.HORIZONTAL_AMPLITUDE
        elif motion is Motion.VERTICAL:
            self.amplitude = settings.VERTICAL_AMPLITUDE
        else:
            self.amplitude = 0.0

        # Displacement applied on the last tick; riders are carried by it.
        self.delta = pygame.Vector2(0.0, 0.0)

    @classmethod
    def from_spec(cls, spec: PlatformSpec) -> Platform:
        return cls(spec.x, spec.y, spec.width, spec.height, spec.motion)

    @property
    def moving(self) -> bool:
        return self.motion is not Motion.STATIONARY


class Enemy:
    kind = ActorKind.ENEMY

    def __init__(self, x: float, y: float, enemy_kind: EnemyKind = EnemyKind.GOOMBA):
        self.body = Body(x, y, settings.ENEMY_SIZE, settings.ENEMY_SIZE)
        self.body.vel.x = -settings.ENEMY_SPEED  # walk left first
        self.enemy_kind = enemy_kind
        self.facing = -1
        self.dead = False
        self.walk_cycle = FrameCycle(settings.ENEMY_WALK_FRAMES, settings.ENEMY_FRAME_DELAY)

    @classmethod
    def from_spec(cls, spec: EnemySpec) -> Enemy:
        return cls(spec.x, spec.y, spec.kind)

    def defeat(self) -> None:
        self.dead = True

    @property
    def frame(self) -> int:
        return self.walk_cycle.index


class Coin:
    kind = ActorKind.COIN

    SPIN_STEPS = 16  # pi/8 per step

    def __init__(self, x: float, y: float):
        self.body = Body(x, y, settings.COIN_SIZE, settings.COIN_SIZE)
        self.collected = False
        self.spin = FrameCycle(self.SPIN_STEPS, settings.COIN_FRAME_DELAY)

    @classmethod
    def from_spec(cls, spec: CoinSpec) -> Coin:
        return cls(spec.x, spec.y)

    @property
    def rotation(self) -> float:
        """Current spin angle in radians, in [0, 2*pi)."""
        return self.spin.index * (2 * math.pi / self.SPIN_STEPS)


Actor = Union[Player, Platform, Enemy, Coin]


# --------------------------
# Per-tick updates
# --------------------------

def update_player(player: Player, world: WorldConfig) -> None:
    body = player.body

    # Gravity (collision resolution decides grounded for the next tick)
    if not player.grounded:
        body.vel.y += settings.GRAVITY
    else:
        body.vel.y = 0.0

    # Friction
    body.vel.x *= settings.FRICTION

    # Run animation
    if abs(body.vel.x) > settings.PLAYER_RUN_THRESHOLD:
        player.run_cycle.tick()
    else:
        player.run_cycle.reset()

    # Invulnerability countdown
    if player.invulnerable:
        player.invulnerable_timer -= 1
        if player.invulnerable_timer <= 0:
            player.invulnerable_timer = 0
            player.invulnerable = False

    # Facing holds when exactly still
    if body.vel.x != 0:
        player.facing = sign(body.vel.x)

    body.integrate()


def update_platform(platform: Platform, world: WorldConfig) -> None:
    platform.delta = pygame.Vector2(0.0, 0.0)
    if not platform.moving:
        return

    step = platform.speed * platform.direction
    if platform.motion is Motion.HORIZONTAL:
        platform.body.pos.x += step
        platform.delta.x = step
        displacement = platform.body.pos.x - platform.origin.x
    else:
        platform.body.pos.y += step
        platform.delta.y = step
        displacement = platform.body.pos.y - platform.origin.y

    # Triangular wave: bounce back once the amplitude is reached
    if abs(displacement) >= platform.amplitude:
        platform.direction *= -1


def update_enemy(enemy: Enemy, world: WorldConfig) -> None:
    if enemy.dead:
        return

    body = enemy.body
    body.integrate()

    # Patrol: turn around at either edge of the world. Platform edges are ignored.
    if body.left <= 0 or body.right >= world.width:
        body.vel.x *= -1
        enemy.facing *= -1

    enemy.walk_cycle.tick()


def update_coin(coin: Coin, world: WorldConfig) -> None:
    if not coin.collected:
        coin.spin.tick()


UPDATERS: dict[ActorKind, Callable[..., None]] = {
    ActorKind.PLAYER: update_player,
    ActorKind.PLATFORM: update_platform,
    ActorKind.ENEMY: update_enemy,
    ActorKind.COIN: update_coin,
}


def update_actor(actor: Actor, world: WorldConfig) -> None:
    UPDATERS[actor.kind](actor, world)
