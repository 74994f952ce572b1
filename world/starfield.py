#starfield.py

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Iterator, List

from config import Config
from world.placement import PlacementStrategy
from world.surface import SurfaceMetrics

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Star:
    x: float
    y: float
    z: float


def star_count_for(viewport_w: float, viewport_h: float) -> int:
    """Number of stars for a viewport, fixed once at startup."""
    return math.ceil((viewport_w + viewport_h) / Config.STAR_DENSITY)


class Starfield:
    """Fixed-size pool of stars flying toward the viewer."""
    def __init__(self, count: int, metrics: SurfaceMetrics | None = None,
                 rng: random.Random | None = None) -> None:
        if count < 0:
            raise ValueError(f"star count must not be negative, got {count}")
        self.count = count
        self.rng = rng or random.Random()
        self.placement = PlacementStrategy(self.rng)
        self.metrics = metrics or SurfaceMetrics(0, 0)
        self.stars: List[Star] = []
        self.generate_stars()

    def __len__(self) -> int:
        return len(self.stars)

    def __iter__(self) -> Iterator[Star]:
        return iter(self.stars)

    def random_depth(self) -> float:
        return Config.STAR_MIN_SCALE + self.rng.random() * (1 - Config.STAR_MIN_SCALE)

    def generate_stars(self) -> None:
        """Build the pool; positions stay at the origin until placed."""
        self.stars = [Star(0.0, 0.0, self.random_depth()) for _ in range(self.count)]

    def place_star(self, star: Star) -> None:
        """Drop a star anywhere inside the surface, keeping its depth."""
        self.placement.place_uniform(star, self.metrics)

    def resize(self, metrics: SurfaceMetrics) -> None:
        """Adopt new surface metrics and spread every star over them."""
        self.metrics = metrics
        for star in self.stars:
            self.place_star(star)
        logger.debug("Repositioned %d stars for %.0fx%.0f (scale %.2f)",
                     len(self.stars), metrics.width, metrics.height, metrics.scale)
