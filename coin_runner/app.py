# app.py
# The pygame host: window, keyboard, frame clock.
# It owns nothing about the rules; every frame it samples the keys into a
# Controls snapshot, ticks the Game once and shows whatever the Renderer drew.

from __future__ import annotations
import logging
import pygame

from . import settings
from .game import Game
from .render import Renderer
from .settings import WorldConfig
from .state import Controls, GameState

logger = logging.getLogger(__name__)


class App:
    def __init__(self, world: WorldConfig | None = None):
        pygame.init()

        self.world = world or WorldConfig()
        size = (self.world.width * settings.SCALE, self.world.height * settings.SCALE)
        self.window = pygame.display.set_mode(size)
        pygame.display.set_caption("Coin Runner")
        self.clock = pygame.time.Clock()

        self.renderer = Renderer(self.world)
        self.game = Game(GameState(world=self.world), observers=[self.renderer])
        self.running = True

        logger.info("Window opened at %dx%d", *size)

    # ------------------ Main loop ------------------
    def run(self) -> None:
        # Draw the start screen before the first input arrives
        self.game.publish()

        while self.running:
            self.clock.tick(settings.FPS)

            self.handle_events()
            self.game.tick(self.read_controls())
            self.present()

        logger.info("Quit after %d ticks", self.game.state.tick_count)
        pygame.quit()

    # ------------------ Events ------------------
    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False

                if event.key == pygame.K_RETURN and not self.game.state.running:
                    self.game.start()
                    # ENTER is also the pause key; the start press must not toggle pause.
                    self.game.state.prev_controls = Controls(pause=True)

    @staticmethod
    def read_controls() -> Controls:
        keys = pygame.key.get_pressed()
        return Controls(
            left=bool(keys[pygame.K_LEFT]),
            right=bool(keys[pygame.K_RIGHT]),
            jump=bool(keys[pygame.K_UP] or keys[pygame.K_SPACE]),
            pause=bool(keys[pygame.K_RETURN]),
        )

    # ------------------ Present ------------------
    def present(self) -> None:
        frame = self.renderer.surface
        if settings.SCALE != 1:
            frame = pygame.transform.scale(frame, self.window.get_size())
        self.window.blit(frame, (0, 0))
        pygame.display.flip()
