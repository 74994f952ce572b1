# render.py
from __future__ import annotations
import random
import pygame
from config import Config
from entities.velocity import VelocityState
from world.starfield import Starfield


def twinkle_alpha(rng: random.Random) -> int:
    """Fresh per-frame opacity (0-255) for one star."""
    return rng.randint(Config.TWINKLE_MIN, Config.TWINKLE_MAX)


def line_width(z: float, scale: float) -> float:
    return Config.STAR_SIZE * z * scale


class RenderSystem:
    """All screen drawing: clear, then stars, then present."""

    def __init__(self, screen: pygame.Surface, rng: random.Random | None = None) -> None:
        self.screen = screen
        self.rng = rng or random.Random()
        self._layer: pygame.Surface | None = None

    # ----- Frame control ----------------------------------------------------
    def begin_frame(self) -> None:
        self.screen.fill(Config.BLACK)

    def end_frame(self) -> None:
        if self.screen is pygame.display.get_surface():
            pygame.display.flip()

    # ----- Stars ------------------------------------------------------------
    def _star_layer(self) -> pygame.Surface:
        """Transparent overlay the size of the screen, reused across frames."""
        size = self.screen.get_size()
        if self._layer is None or self._layer.get_size() != size:
            self._layer = pygame.Surface(size, pygame.SRCALPHA)
        self._layer.fill((0, 0, 0, 0))
        return self._layer

    def draw_stars(self, starfield: Starfield, velocity: VelocityState) -> None:
        layer = self._star_layer()
        scale = starfield.metrics.scale
        tail_x = velocity.x * Config.TAIL_LENGTH
        tail_y = velocity.y * Config.TAIL_LENGTH

        for star in starfield:
            color = (*Config.WHITE, twinkle_alpha(self.rng))
            width = line_width(star.z, scale)
            self.draw_segment(layer, color, (star.x, star.y),
                              (star.x + tail_x, star.y + tail_y), width)

        self.screen.blit(layer, (0, 0))

    @staticmethod
    def draw_segment(surface: pygame.Surface, color, start, end, width: float) -> None:
        """Stroke a line with round caps; a zero-length segment is a dot."""
        radius = max(1.0, width / 2)
        if start != end:
            pygame.draw.line(surface, color, start, end, max(1, round(width)))
            pygame.draw.circle(surface, color, end, radius)
        pygame.draw.circle(surface, color, start, radius)
