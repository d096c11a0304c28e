# settings.py
# Central place for constants so the game feel can be tweaked in one spot.
# All speeds are in pixels per tick; the simulation assumes 60 ticks/second.

from __future__ import annotations
from dataclasses import dataclass

# Window / render
WORLD_WIDTH = 800
WORLD_HEIGHT = 500
FPS = 60
SCALE = 1  # window pixels per world pixel

# Physics tuning
GRAVITY = 0.5
FRICTION = 0.8
JUMP_FORCE = -13.0
PLAYER_SPEED = 5.0
GROUND_PROBE = 1.0        # how far below the feet still counts as "standing"

# Sizes
PLAYER_WIDTH = 40
PLAYER_HEIGHT = 60
ENEMY_SIZE = 40
COIN_SIZE = 20

# Player
PLAYER_SPAWN = (50.0, 385.0)
STARTING_LIVES = 100
INVULNERABLE_TICKS = 60
HIT_BOUNCE = -5.0

# Enemies
ENEMY_SPEED = 1.0
STOMP_TOLERANCE = 10.0
STOMP_BOUNCE = -10.0

# Moving platforms
HORIZONTAL_AMPLITUDE = 100.0
VERTICAL_AMPLITUDE = 50.0
PLATFORM_SPEED = 1.0

# Progression
LEVEL_COMPLETE_TICKS = 120  # 2 seconds at 60 FPS
LEVEL_BONUS_LIVES = 1

# Animation (ticks per frame)
PLAYER_FRAME_DELAY = 5
PLAYER_RUN_FRAMES = 3
PLAYER_RUN_THRESHOLD = 0.5
ENEMY_FRAME_DELAY = 10
ENEMY_WALK_FRAMES = 2
COIN_FRAME_DELAY = 8

# Colours
SKY_COLOR = (107, 140, 255)
GRASS_COLOR = (70, 170, 60)
BRICK_COLOR = (170, 80, 40)
COIN_COLOR = (255, 215, 0)
GOOMBA_COLOR = (140, 80, 40)
KOOPA_COLOR = (60, 160, 70)
PLAYER_COLOR = (220, 40, 40)
PLAYER_OVERALLS_COLOR = (40, 70, 200)
TEXT_COLOR = (255, 255, 255)


@dataclass(frozen=True)
class WorldConfig:
    """World bounds and rules handed to the simulation."""
    width: int = WORLD_WIDTH
    height: int = WORLD_HEIGHT
    starting_lives: int = STARTING_LIVES
    spawn: tuple[float, float] = PLAYER_SPAWN
