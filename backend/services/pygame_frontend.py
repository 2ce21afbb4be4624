"""
Interactive frontend: a pygame window that renders the game and feeds it
keyboard input and wall-clock time.
"""

import logging
import random
from typing import Optional, Tuple

import pygame

from config import Settings
from domain.position import Position

from .game_engine import SnakeGame
from .renderer import Renderer

logger = logging.getLogger(__name__)

FPS = 120  # Enough to resolve the 20ms tick at top speed
HUD_HEIGHT = 36
HUD_BACKGROUND = (30, 34, 44)
HUD_TEXT = (240, 240, 240)
MESSAGE_TEXT = (255, 220, 90)


class PygameRenderer(Renderer):
    """Draws blocks on the field area of a pygame surface."""

    def __init__(self, surface: pygame.Surface, background_color: str, block_border: int = 0):
        self.surface = surface
        self.background = pygame.Color(background_color)
        self.block_border = block_border

        self.elapsed_time = "00:00:00"
        self.length = 0
        self.speed = 0
        self.score = 0
        self.message = ""

        self.clear()

    def _rect(self, position: Position, size: int) -> Tuple[int, int, int, int]:
        inner = size - self.block_border
        return (position.x * size, position.y * size, inner, inner)

    def draw_block(self, position: Position, size: int, color: str) -> None:
        pygame.draw.rect(self.surface, pygame.Color(color), self._rect(position, size))

    def clear_block(self, position: Position, size: int) -> None:
        pygame.draw.rect(self.surface, self.background, self._rect(position, size))

    def clear(self) -> None:
        self.surface.fill(self.background)

    def update_elapsed_time(self, text: str) -> None:
        self.elapsed_time = text

    def update_infos(self, length: int, speed: int, score: int) -> None:
        self.length = length
        self.speed = speed
        self.score = score

    def update_message(self, text: str) -> None:
        self.message = text


class PygameFrontend:
    """Owns the window and runs the real-time loop."""

    def __init__(self, settings: Settings, rng: Optional[random.Random] = None):
        self.settings = settings

        pygame.init()
        pygame.display.set_caption("Snake")
        field_size = (settings.field_width * settings.block_size, settings.field_height * settings.block_size)
        self.screen = pygame.display.set_mode((field_size[0], field_size[1] + HUD_HEIGHT))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("consolas,dejavusans,arial", 18)

        field = self.screen.subsurface(pygame.Rect((0, 0), field_size))
        self.renderer = PygameRenderer(field, settings.background_color, settings.block_border)
        self.game = SnakeGame(
            width=settings.field_width,
            height=settings.field_height,
            renderer=self.renderer,
            block_size=settings.block_size,
            rng=rng or random.Random(settings.seed),
        )

    def _draw_hud(self) -> None:
        r = self.renderer
        top = self.screen.get_height() - HUD_HEIGHT
        pygame.draw.rect(self.screen, HUD_BACKGROUND, (0, top, self.screen.get_width(), HUD_HEIGHT))

        info = f"{r.elapsed_time}   length {r.length}   speed {r.speed}   score {r.score}"
        self.screen.blit(self.font.render(info, True, HUD_TEXT), (10, top + 8))
        if r.message:
            msg = self.font.render(r.message, True, MESSAGE_TEXT)
            self.screen.blit(msg, (self.screen.get_width() - msg.get_width() - 10, top + 8))

    def run(self) -> None:
        logger.info("Opening %sx%s field", self.settings.field_width, self.settings.field_height)
        running = True
        while running:
            elapsed_ms = self.clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        self.game.handle_key(pygame.key.name(event.key))

            self.game.scheduler.advance(elapsed_ms / 1000)
            self._draw_hud()
            pygame.display.flip()

        self.game.game_over()
        pygame.quit()
