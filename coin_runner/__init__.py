"""Coin Runner: a small side-scrolling platformer built on pygame."""

from .game import Game, step, start
from .state import Controls, GameState, Phase

__all__ = ["Controls", "Game", "GameState", "Phase", "start", "step"]
