#placement.py

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import TYPE_CHECKING

from config import Config

if TYPE_CHECKING:
    from entities.velocity import VelocityState
    from world.starfield import Star
    from world.surface import SurfaceMetrics

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    """Where a recycled star re-enters the field."""
    Z = "z"
    LEFT = "l"
    RIGHT = "r"
    TOP = "t"
    BOTTOM = "b"


class PlacementStrategy:
    """Initial seeding and re-entry placement for stars.

    Recycled stars stream in from the side the field is drifting away from,
    so nothing pops into the middle of the screen while panning. Without
    noticeable planar drift they are reseeded deep (small) at a random spot.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def place_uniform(self, star: Star, metrics: SurfaceMetrics) -> None:
        star.x = self.rng.random() * metrics.width
        star.y = self.rng.random() * metrics.height

    def choose_direction(self, velocity: VelocityState) -> Direction:
        vx = abs(velocity.x)
        vy = abs(velocity.y)
        if not (vx > 1 or vy > 1):
            return Direction.Z

        # weighted coin flip; the guard above keeps vx + vy non-zero
        horizontal = self.rng.random() < vx / (vx + vy)
        if horizontal:
            return Direction.LEFT if velocity.x > 0 else Direction.RIGHT
        return Direction.TOP if velocity.y > 0 else Direction.BOTTOM

    def recycle(self, star: Star, velocity: VelocityState, metrics: SurfaceMetrics) -> Direction:
        """Move an out-of-bounds star back to the edge of the field, in place."""
        direction = self.choose_direction(velocity)
        threshold = Config.OVERFLOW_THRESHOLD

        star.z = Config.STAR_MIN_SCALE + self.rng.random() * (1 - Config.STAR_MIN_SCALE)

        if direction is Direction.Z:
            star.z = Config.RESEED_DEPTH
            self.place_uniform(star, metrics)
        elif direction is Direction.LEFT:
            star.x = -threshold
            star.y = metrics.height * self.rng.random()
        elif direction is Direction.RIGHT:
            star.x = metrics.width + threshold
            star.y = metrics.height * self.rng.random()
        elif direction is Direction.TOP:
            star.x = metrics.width * self.rng.random()
            star.y = -threshold
        else:
            star.x = metrics.width * self.rng.random()
            star.y = metrics.height + threshold
        return direction
