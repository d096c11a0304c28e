# levels.py
# The campaign: an ordered tuple of read-only level descriptors.
#
# Coordinates are world pixels, top-left origin. Platforms default to
# "stationary"; enemies are "goomba" or "koopa" (purely cosmetic).

from __future__ import annotations
import enum
from dataclasses import dataclass


class Motion(enum.Enum):
    STATIONARY = "stationary"
    HORIZONTAL = "moving-horizontal"
    VERTICAL = "moving-vertical"


class EnemyKind(enum.Enum):
    GOOMBA = "goomba"
    KOOPA = "koopa"


@dataclass(frozen=True)
class PlatformSpec:
    x: float
    y: float
    width: float
    height: float
    motion: Motion = Motion.STATIONARY

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Platform size must be positive, got {self.width}x{self.height}")
        if not isinstance(self.motion, Motion):
            object.__setattr__(self, "motion", Motion(self.motion))


@dataclass(frozen=True)
class EnemySpec:
    x: float
    y: float
    kind: EnemyKind = EnemyKind.GOOMBA

    def __post_init__(self) -> None:
        if not isinstance(self.kind, EnemyKind):
            object.__setattr__(self, "kind", EnemyKind(self.kind))


@dataclass(frozen=True)
class CoinSpec:
    x: float
    y: float


@dataclass(frozen=True)
class LevelDescriptor:
    name: str
    platforms: tuple[PlatformSpec, ...]
    enemies: tuple[EnemySpec, ...]
    coins: tuple[CoinSpec, ...]

    def __post_init__(self) -> None:
        # A level is finished by collecting every coin, so it needs at least one.
        if not self.coins:
            raise ValueError(f"Level {self.name!r} has no coins and could never be completed.")

    @property
    def total_coins(self) -> int:
        return len(self.coins)


def _platform(x: float, y: float, w: float, h: float, motion: str = "stationary") -> PlatformSpec:
    return PlatformSpec(x, y, w, h, Motion(motion))


def _enemy(x: float, y: float, kind: str) -> EnemySpec:
    return EnemySpec(x, y, EnemyKind(kind))


def _coins(*points: tuple[float, float]) -> tuple[CoinSpec, ...]:
    return tuple(CoinSpec(x, y) for x, y in points)


LEVELS: tuple[LevelDescriptor, ...] = (
    LevelDescriptor(
        name="Introduction",
        platforms=(
            # Ground
            _platform(0, 450, 300, 50),
            _platform(350, 450, 450, 50),
            # Elevated
            _platform(150, 350, 100, 20),
            _platform(320, 300, 100, 20),
            _platform(470, 250, 100, 20, "moving-vertical"),
            _platform(600, 350, 100, 20),
        ),
        enemies=(
            _enemy(400, 410, "goomba"),
            _enemy(600, 410, "goomba"),
            _enemy(200, 310, "koopa"),
        ),
        coins=_coins(
            (180, 320), (350, 270), (500, 220), (630, 320),
            (450, 420), (250, 420), (700, 420),
        ),
    ),
    LevelDescriptor(
        name="Gaps and Moving Platforms",
        platforms=(
            _platform(0, 450, 200, 50),
            _platform(250, 450, 200, 50),
            _platform(500, 450, 300, 50),
            _platform(100, 350, 100, 20, "moving-horizontal"),
            _platform(300, 300, 100, 20),
            _platform(450, 250, 100, 20),
            _platform(600, 200, 100, 20),
        ),
        enemies=(
            _enemy(300, 410, "goomba"),
            _enemy(550, 410, "koopa"),
            _enemy(700, 410, "goomba"),
            _enemy(350, 260, "koopa"),
        ),
        coins=_coins(
            (150, 320), (350, 270), (500, 220), (650, 170),
            (300, 420), (550, 420), (700, 420),
        ),
    ),
    LevelDescriptor(
        name="Vertical Climb",
        platforms=(
            _platform(0, 450, 800, 50),
            # Climb
            _platform(100, 380, 100, 20),
            _platform(250, 330, 100, 20),
            _platform(100, 280, 100, 20),
            _platform(250, 230, 100, 20),
            _platform(100, 180, 100, 20),
            _platform(250, 130, 100, 20),
            # Top
            _platform(400, 130, 300, 20),
            _platform(500, 250, 100, 20, "moving-vertical"),
        ),
        enemies=(
            _enemy(150, 410, "goomba"),
            _enemy(300, 410, "goomba"),
            _enemy(450, 410, "koopa"),
            _enemy(130, 240, "goomba"),
            _enemy(550, 90, "koopa"),
        ),
        coins=_coins(
            (150, 350), (280, 300), (130, 250), (280, 200), (130, 150),
            (280, 100), (450, 100), (550, 100), (650, 100),
        ),
    ),
    LevelDescriptor(
        name="Moving Platform Challenge",
        platforms=(
            _platform(0, 450, 150, 50),
            _platform(200, 400, 100, 20, "moving-horizontal"),
            _platform(350, 350, 100, 20, "moving-vertical"),
            _platform(500, 300, 100, 20, "moving-horizontal"),
            _platform(650, 250, 100, 20, "moving-vertical"),
            _platform(700, 450, 100, 50),
        ),
        enemies=(
            _enemy(50, 410, "goomba"),
            _enemy(250, 360, "koopa"),
            _enemy(400, 310, "goomba"),
            _enemy(550, 260, "koopa"),
            _enemy(720, 410, "goomba"),
        ),
        coins=_coins(
            (100, 420), (250, 370), (400, 320), (550, 270), (700, 220), (750, 420),
        ),
    ),
    LevelDescriptor(
        name="Complex Maze",
        platforms=(
            # Ground
            _platform(0, 450, 150, 50),
            _platform(650, 450, 150, 50),
            # Left side
            _platform(0, 350, 100, 20),
            _platform(150, 300, 100, 20),
            _platform(0, 250, 100, 20),
            _platform(150, 200, 100, 20),
            # Middle
            _platform(300, 350, 200, 20),
            _platform(350, 250, 100, 20, "moving-vertical"),
            # Right side
            _platform(550, 300, 100, 20),
            _platform(650, 200, 150, 20),
            _platform(550, 100, 100, 20),
        ),
        enemies=(
            _enemy(50, 410, "goomba"),
            _enemy(50, 310, "koopa"),
            _enemy(180, 260, "goomba"),
            _enemy(50, 210, "koopa"),
            _enemy(400, 310, "goomba"),
            _enemy(600, 260, "koopa"),
            _enemy(700, 160, "goomba"),
            _enemy(600, 60, "koopa"),
        ),
        coins=_coins(
            (50, 320), (200, 270), (50, 220), (200, 170), (400, 320),
            (400, 220), (600, 270), (700, 170), (600, 70), (700, 420),
        ),
    ),
)
