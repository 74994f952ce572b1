from __future__ import annotations

import logging

from config import Config
from entities.velocity import LockedVelocity, VelocityPolicy, VelocityState
from world.placement import PlacementStrategy
from world.starfield import Star, Starfield
from world.surface import SurfaceMetrics

__all__ = ["Simulator", "is_out_of_bounds"]

logger = logging.getLogger(__name__)


def is_out_of_bounds(star: Star, metrics: SurfaceMetrics) -> bool:
    t = Config.OVERFLOW_THRESHOLD
    return (star.x < -t or star.x > metrics.width + t or
            star.y < -t or star.y > metrics.height + t)


class Simulator:
    """Advances every star by one frame: drift, zoom, recycle."""

    def __init__(self, starfield: Starfield, velocity: VelocityState | None = None,
                 policy: VelocityPolicy | None = None,
                 placement: PlacementStrategy | None = None) -> None:
        self.starfield = starfield
        self.velocity = velocity or VelocityState()
        self.policy = policy or LockedVelocity()
        self.placement = placement or starfield.placement
        self.recycled = 0

    def update(self) -> int:
        """Run one time-step. Returns how many stars were recycled."""
        metrics = self.starfield.metrics
        velocity = self.velocity
        self.policy.apply(velocity, metrics)

        cx, cy = metrics.center
        vz = velocity.z
        recycled = 0
        for star in self.starfield.stars:
            # nearer stars (larger z) drift faster
            star.x += velocity.x * star.z
            star.y += velocity.y * star.z

            # zoom: push away from the center, scaled by depth
            star.x += (star.x - cx) * vz * star.z
            star.y += (star.y - cy) * vz * star.z
            star.z += vz

            if is_out_of_bounds(star, metrics):
                self.placement.recycle(star, velocity, metrics)
                recycled += 1

        if recycled:
            logger.debug("Recycled %d stars", recycled)
        self.recycled += recycled
        return recycled
