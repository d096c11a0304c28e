# state.py
# Everything the simulation knows lives in one GameState record.
# step() in game.py is the only thing that advances it.

from __future__ import annotations
import enum
from dataclasses import dataclass, field

from .actors import Coin, Enemy, Platform, Player
from .levels import LEVELS, LevelDescriptor
from .settings import WorldConfig


class Phase(enum.Enum):
    NOT_RUNNING = "not_running"
    RUNNING = "running"
    PAUSED = "paused"
    LEVEL_COMPLETE = "level_complete"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Controls:
    """Logical actions currently held down, sampled once per tick."""
    left: bool = False
    right: bool = False
    jump: bool = False
    pause: bool = False


@dataclass
class GameState:
    world: WorldConfig = field(default_factory=WorldConfig)
    levels: tuple[LevelDescriptor, ...] = LEVELS
    player: Player = field(init=False)

    # Actors for the current level (replaced wholesale on every load)
    platforms: list[Platform] = field(default_factory=list)
    enemies: list[Enemy] = field(default_factory=list)
    coins: list[Coin] = field(default_factory=list)

    # Progression
    current_level: int = 0
    coins_collected: int = 0
    total_coins: int = 0
    level_complete: bool = False
    level_complete_timer: int = 0

    # Loop
    running: bool = False
    paused: bool = False
    game_over: bool = False
    tick_count: int = 0

    # Input memory (edge detection + latched jump press)
    prev_controls: Controls = field(default_factory=Controls)
    jump_pending: bool = False

    def __post_init__(self) -> None:
        if not self.levels:
            raise ValueError("GameState needs at least one level.")
        self.player = Player(self.world.spawn, lives=self.world.starting_lives)

    @property
    def phase(self) -> Phase:
        if not self.running:
            return Phase.NOT_RUNNING
        if self.paused:
            return Phase.GAME_OVER if self.game_over else Phase.PAUSED
        if self.level_complete:
            return Phase.LEVEL_COMPLETE
        return Phase.RUNNING

    @property
    def level(self) -> LevelDescriptor:
        return self.levels[self.current_level]

    @property
    def is_last_level(self) -> bool:
        return self.current_level >= len(self.levels) - 1

    @property
    def coins_text(self) -> str:
        return f"{self.coins_collected}/{self.total_coins}"
