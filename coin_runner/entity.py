# entity.py
# Shared geometry for every actor: a float rectangle that moves by its velocity.
#
# Actors (player, platforms, enemies, coins) do not inherit from each other.
# Each one owns a Body and carries an ActorKind tag; behaviour lives in free
# functions looked up by that tag (see actors.py and collision.py).

from __future__ import annotations
import enum
from typing import NamedTuple
import pygame


class ActorKind(enum.Enum):
    PLAYER = "player"
    PLATFORM = "platform"
    ENEMY = "enemy"
    COIN = "coin"


class Bounds(NamedTuple):
    left: float
    right: float
    top: float
    bottom: float


class Body:
    """Axis-aligned rectangle with a float position and a per-tick velocity."""

    __slots__ = ("pos", "vel", "width", "height")

    def __init__(self, x: float, y: float, width: float, height: float):
        self.pos = pygame.Vector2(x, y)   # top-left corner
        self.vel = pygame.Vector2(0.0, 0.0)
        self.width = width
        self.height = height

    def __repr__(self) -> str:
        return (
            f"Body(x={self.pos.x}, y={self.pos.y}, w={self.width}, h={self.height}, "
            f"vel=({self.vel.x}, {self.vel.y}))"
        )

    # --------------------------
    # Edges
    # --------------------------

    @property
    def left(self) -> float:
        return self.pos.x

    @property
    def right(self) -> float:
        return self.pos.x + self.width

    @property
    def top(self) -> float:
        return self.pos.y

    @property
    def bottom(self) -> float:
        return self.pos.y + self.height

    def bounds(self) -> Bounds:
        return Bounds(self.left, self.right, self.top, self.bottom)

    # --------------------------
    # Motion / overlap
    # --------------------------

    def integrate(self) -> None:
        """Move by one tick of velocity. Bounds checks are the caller's job."""
        self.pos += self.vel

    def intersects(self, other: Body) -> bool:
        """Strict overlap on both axes; rectangles that only touch do not intersect."""
        return (
            self.left < other.right
            and self.right > other.left
            and self.top < other.bottom
            and self.bottom > other.top
        )

    def overlaps_horizontally(self, other: Body) -> bool:
        return self.left < other.right and self.right > other.left

    def rect(self) -> pygame.Rect:
        """Integer rect for drawing."""
        return pygame.Rect(round(self.pos.x), round(self.pos.y), round(self.width), round(self.height))
