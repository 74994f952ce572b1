#surface.py

from __future__ import annotations

from dataclasses import dataclass

import pygame


@dataclass(frozen=True, slots=True)
class SurfaceMetrics:
    """Drawable size in device pixels plus the device pixel ratio."""
    width: float
    height: float
    scale: float = 1.0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"surface size must not be negative, got {self.width}x{self.height}")
        if self.scale <= 0:
            raise ValueError(f"scale must be positive, got {self.scale}")

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2

    @classmethod
    def from_window(cls, width: float, height: float, scale: float = 1.0) -> SurfaceMetrics:
        """Metrics for a window given in logical pixels."""
        return cls(width * scale, height * scale, scale)

    @classmethod
    def from_surface(cls, surface: pygame.Surface, scale: float = 1.0) -> SurfaceMetrics:
        w, h = surface.get_size()
        return cls(w, h, scale)

    @classmethod
    def from_display(cls) -> SurfaceMetrics:
        """Read size and pixel ratio from the active pygame display."""
        surface = pygame.display.get_surface()
        w, h = surface.get_size()
        win_w, _ = pygame.display.get_window_size()
        scale = w / win_w if win_w else 1.0
        return cls(w, h, scale)
