from __future__ import annotations

import logging
from typing import Callable

import pygame

from config import Config
from systems.physics import Simulator
from systems.render import RenderSystem
from world.starfield import Starfield
from world.surface import SurfaceMetrics

logger = logging.getLogger(__name__)

RESIZE_EVENTS = (pygame.VIDEORESIZE, pygame.WINDOWSIZECHANGED)


class FrameLoop:
    """Drives one simulate+draw pass per display refresh.

    Events (including resizes) are handled between frames on the same thread,
    so a resize never lands halfway through an update.
    """

    def __init__(self, screen: pygame.Surface, starfield: Starfield,
                 simulator: Simulator, renderer: RenderSystem,
                 clock: pygame.time.Clock | None = None,
                 measure: Callable[[], SurfaceMetrics] | None = None) -> None:
        self.screen = screen
        self.starfield = starfield
        self.simulator = simulator
        self.renderer = renderer
        self.clock = clock or pygame.time.Clock()
        self.measure = measure or self._measure_screen
        self.running = False
        self.frames = 0

    def _measure_screen(self) -> SurfaceMetrics:
        if self.screen is pygame.display.get_surface():
            return SurfaceMetrics.from_display()
        return SurfaceMetrics.from_surface(self.screen)

    # ----- Frame ------------------------------------------------------------
    def step(self) -> None:
        self.renderer.begin_frame()
        self.simulator.update()
        self.renderer.draw_stars(self.starfield, self.simulator.velocity)
        self.renderer.end_frame()
        self.frames += 1

    def resize(self) -> None:
        metrics = self.measure()
        self.starfield.resize(metrics)
        logger.debug("Surface resized to %.0fx%.0f", metrics.width, metrics.height)

    # ----- Events -----------------------------------------------------------
    def handle_event(self, e: pygame.event.Event) -> None:
        policy = self.simulator.policy
        metrics = self.starfield.metrics
        if e.type == pygame.QUIT:
            self.running = False
        elif e.type in RESIZE_EVENTS:
            self.resize()
        elif e.type == pygame.MOUSEMOTION:
            policy.on_pointer_move(e.pos[0], e.pos[1], metrics)
        elif e.type == pygame.FINGERMOTION:
            # finger coordinates are normalised to 0..1
            w, h = metrics.width / metrics.scale, metrics.height / metrics.scale
            policy.on_pointer_move(e.x * w, e.y * h, metrics, touch=True)
        elif e.type == pygame.WINDOWLEAVE:
            policy.on_pointer_leave()

    # ----- Loop -------------------------------------------------------------
    def run(self, max_frames: int | None = None) -> int:
        """Loop until the window closes (or max_frames). Returns frames drawn."""
        self.running = True
        start = self.frames
        try:
            while self.running:
                for e in pygame.event.get():
                    self.handle_event(e)
                if not self.running:
                    break
                self.step()
                self.clock.tick(Config.FPS)
                if max_frames is not None and self.frames - start >= max_frames:
                    break
        except KeyboardInterrupt:
            logger.info("Interrupted")
        finally:
            self.running = False
        drawn = self.frames - start
        logger.info("Frame loop stopped after %d frames (%d stars recycled)",
                    drawn, self.simulator.recycled)
        return drawn
