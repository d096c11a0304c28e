# render.py
# Draws a GameState snapshot with plain pygame shapes.
#
# The renderer is a GameObserver: it only reads state. Flicker while the
# player is invulnerable is based on wall-clock time, so it lives here and
# not in the simulation.

from __future__ import annotations
import math
from typing import Callable
import pygame

from . import settings
from .actors import Coin, Enemy, Platform, Player
from .levels import EnemyKind
from .settings import WorldConfig
from .state import GameState, Phase


class Renderer:
    def __init__(self, world: WorldConfig, clock_ms: Callable[[], int] = pygame.time.get_ticks):
        if not pygame.font.get_init():
            pygame.font.init()

        self.world = world
        self.surface = pygame.Surface((world.width, world.height))
        self.font = pygame.font.SysFont("arial", 20)
        self.big_font = pygame.font.SysFont("arial", 30, bold=True)
        self.clock_ms = clock_ms

        # HUD values arrive through on_hud, only when they change
        self.coins_text = "0/0"
        self.lives = 0

    # ------------------ Observer hooks ------------------

    def on_hud(self, coins_text: str, lives: int) -> None:
        self.coins_text = coins_text
        self.lives = lives

    def on_frame(self, state: GameState) -> None:
        self.draw(state)

    # ------------------ Draw ------------------

    def draw(self, state: GameState) -> pygame.Surface:
        target = self.surface
        target.fill(settings.SKY_COLOR)

        phase = state.phase
        if phase is Phase.NOT_RUNNING:
            self.draw_start_screen()
            return target

        # (Draw order: platforms -> coins -> enemies -> player)
        for platform in state.platforms:
            self.draw_platform(platform)

        for coin in state.coins:
            if not coin.collected:
                self.draw_coin(coin)

        for enemy in state.enemies:
            if not enemy.dead:
                self.draw_enemy(enemy)

        if self.player_visible(state.player):
            self.draw_player(state.player)

        self.draw_ui()

        if phase is Phase.PAUSED:
            self.draw_overlay(alpha=128)
            self.draw_center_text("GAME PAUSED", y=self.world.height // 2, big=True)
            self.draw_center_text("Press ENTER to continue", y=self.world.height // 2 + 40)

        elif phase is Phase.GAME_OVER:
            self.draw_overlay(alpha=180)
            self.draw_center_text("GAME OVER", y=self.world.height // 2 - 20, big=True)
            self.draw_center_text("Press ENTER to restart", y=self.world.height // 2 + 20)

        elif phase is Phase.LEVEL_COMPLETE:
            self.draw_overlay(alpha=128)
            self.draw_center_text(
                f"LEVEL {state.current_level + 1} COMPLETE!", y=self.world.height // 2 - 20, big=True
            )
            if state.is_last_level:
                self.draw_center_text("Congratulations! You completed all levels!", y=self.world.height // 2 + 20)
            else:
                self.draw_center_text("Get ready for next level...", y=self.world.height // 2 + 20)

        return target

    def player_visible(self, player: Player) -> bool:
        """Blink every 100ms while invulnerable."""
        return not player.invulnerable or (self.clock_ms() // 100) % 2 == 1

    # ------------------ Actors ------------------

    def draw_platform(self, platform: Platform) -> None:
        rect = platform.body.rect()
        pygame.draw.rect(self.surface, settings.BRICK_COLOR, rect)
        grass = pygame.Rect(rect.x, rect.y, rect.w, min(10, rect.h))
        pygame.draw.rect(self.surface, settings.GRASS_COLOR, grass)

    def draw_coin(self, coin: Coin) -> None:
        rect = coin.body.rect()
        center = pygame.Vector2(rect.center)
        half = coin.body.width / 2
        degrees = math.degrees(coin.rotation)
        corners = [
            center + pygame.Vector2(dx, dy).rotate(degrees)
            for dx, dy in ((-half, -half), (half, -half), (half, half), (-half, half))
        ]
        pygame.draw.polygon(self.surface, settings.COIN_COLOR, corners)

    def draw_enemy(self, enemy: Enemy) -> None:
        rect = enemy.body.rect()
        color = settings.GOOMBA_COLOR if enemy.enemy_kind is EnemyKind.GOOMBA else settings.KOOPA_COLOR
        pygame.draw.rect(self.surface, color, rect.inflate(0, -8).move(0, -4), border_radius=8)

        # Feet swap with the walk frame
        foot_w = rect.w // 3
        left_y = rect.bottom - (8 if enemy.frame == 0 else 6)
        right_y = rect.bottom - (6 if enemy.frame == 0 else 8)
        pygame.draw.rect(self.surface, (30, 30, 30), (rect.x + 2, left_y, foot_w, 6))
        pygame.draw.rect(self.surface, (30, 30, 30), (rect.right - 2 - foot_w, right_y, foot_w, 6))

        # Eye on the facing side
        eye_x = rect.centerx + enemy.facing * rect.w // 4
        pygame.draw.circle(self.surface, (255, 255, 255), (eye_x, rect.y + 12), 5)

    def draw_player(self, player: Player) -> None:
        rect = player.body.rect()
        top = pygame.Rect(rect.x, rect.y, rect.w, rect.h // 2)
        bottom = pygame.Rect(rect.x, top.bottom, rect.w, rect.h - top.h)
        pygame.draw.rect(self.surface, settings.PLAYER_COLOR, top)
        pygame.draw.rect(self.surface, settings.PLAYER_OVERALLS_COLOR, bottom)

        # Legs shift with the run frame
        stride = (0, 4, -4)[player.frame % 3]
        pygame.draw.rect(self.surface, (60, 40, 20), (rect.x + 4 + stride, rect.bottom - 6, 12, 6))
        pygame.draw.rect(self.surface, (60, 40, 20), (rect.right - 16 - stride, rect.bottom - 6, 12, 6))

        eye_x = rect.centerx + player.facing * rect.w // 4
        pygame.draw.circle(self.surface, (255, 255, 255), (eye_x, rect.y + 14), 4)

    # ------------------ UI helpers ------------------

    def draw_ui(self) -> None:
        coins = self.font.render(f"Coins: {self.coins_text}", True, settings.TEXT_COLOR)
        lives = self.font.render(f"Lives: {self.lives}", True, settings.TEXT_COLOR)
        self.surface.blit(coins, (10, 10))
        self.surface.blit(lives, (self.world.width - lives.get_width() - 10, 10))

    def draw_start_screen(self) -> None:
        self.draw_center_text("COIN RUNNER", y=170, big=True)
        self.draw_center_text("Press ENTER to start", y=240)
        self.draw_center_text("Arrows move, SPACE/UP jump, ENTER pause", y=280)

    def draw_center_text(self, text: str, y: int, big: bool = False) -> None:
        f = self.big_font if big else self.font
        surf = f.render(text, True, settings.TEXT_COLOR)
        rect = surf.get_rect(center=(self.world.width // 2, y))
        self.surface.blit(surf, rect)

    def draw_overlay(self, alpha: int = 160) -> None:
        overlay = pygame.Surface((self.world.width, self.world.height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, alpha))
        self.surface.blit(overlay, (0, 0))
