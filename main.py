from __future__ import annotations

import logging
import random
import sys

import pygame

from config import Config
from entities.velocity import InputDrivenVelocity, LockedVelocity, VelocityState
from logging_config import setup_logging
from systems.frame_loop import FrameLoop
from systems.physics import Simulator
from systems.render import RenderSystem
from world.starfield import Starfield, star_count_for
from world.surface import SurfaceMetrics

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging(Config.LOG_LEVEL, Config.LOG_FILE)

    # ------------------- Init -------------------
    pygame.init()
    try:
        screen = pygame.display.set_mode((Config.SCREEN_WIDTH, Config.SCREEN_HEIGHT),
                                         pygame.RESIZABLE)
    except pygame.error as exc:
        logger.error("Could not open display: %s", exc)
        pygame.quit()
        sys.exit(1)
    pygame.display.set_caption(Config.WINDOW_TITLE)

    win_w, win_h = pygame.display.get_window_size()
    rng = random.Random()

    starfield = Starfield(star_count_for(win_w, win_h), rng=rng)
    policy = InputDrivenVelocity() if Config.INTERACTIVE else LockedVelocity()
    simulator = Simulator(starfield, VelocityState(), policy)
    renderer = RenderSystem(screen, rng)
    loop = FrameLoop(screen, starfield, simulator, renderer)

    loop.resize()
    metrics: SurfaceMetrics = starfield.metrics
    logger.info("Starting with %d stars on %.0fx%.0f (scale %.2f)",
                len(starfield), metrics.width, metrics.height, metrics.scale)

    loop.run()
    pygame.quit()


if __name__ == "__main__":
    main()
