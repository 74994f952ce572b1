from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from config import Config
from world.surface import SurfaceMetrics


@dataclass(slots=True)
class VelocityState:
    """Planar drift (current and target) plus the forward zoom rate."""
    x: float = 0.0
    y: float = 0.0
    tx: float = 0.0
    ty: float = 0.0
    z: float = field(default_factory=lambda: Config.BASE_VELOCITY_Z)


class VelocityPolicy(Protocol):
    def apply(self, velocity: VelocityState, metrics: SurfaceMetrics) -> None: ...
    def on_pointer_move(self, px: float, py: float, metrics: SurfaceMetrics,
                        touch: bool = False) -> None: ...
    def on_pointer_leave(self) -> None: ...


class LockedVelocity:
    """Non-interactive build: planar drift is held at zero every frame."""

    def apply(self, velocity: VelocityState, metrics: SurfaceMetrics) -> None:
        velocity.x = 0.0
        velocity.y = 0.0
        velocity.tx = 0.0
        velocity.ty = 0.0

    def on_pointer_move(self, px: float, py: float, metrics: SurfaceMetrics,
                        touch: bool = False) -> None:
        pass

    def on_pointer_leave(self) -> None:
        pass


class InputDrivenVelocity:
    """Pointer steering: the field drifts toward where the pointer sits
    relative to the surface center, easing in with damping/interpolation.
    """

    def __init__(self, damping: float | None = None, interpolation: float | None = None) -> None:
        self.damping = Config.VELOCITY_DAMPING if damping is None else damping
        self.interpolation = Config.VELOCITY_INTERPOLATION if interpolation is None else interpolation
        self.touch_input = False
        self._target: tuple[float, float] | None = None

    def on_pointer_move(self, px: float, py: float, metrics: SurfaceMetrics,
                        touch: bool = False) -> None:
        """Pointer position in logical pixels relative to the surface."""
        cx, cy = metrics.center
        self._target = ((px * metrics.scale - cx) * Config.POINTER_GAIN,
                        (py * metrics.scale - cy) * Config.POINTER_GAIN)
        self.touch_input = touch

    def on_pointer_leave(self) -> None:
        self._target = (0.0, 0.0)

    def apply(self, velocity: VelocityState, metrics: SurfaceMetrics) -> None:
        if self._target is not None:
            velocity.tx, velocity.ty = self._target
            self._target = None

        velocity.tx *= self.damping
        velocity.ty *= self.damping
        velocity.x += (velocity.tx - velocity.x) * self.interpolation
        velocity.y += (velocity.ty - velocity.y) * self.interpolation
