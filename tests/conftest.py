import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from world.starfield import Starfield
from world.surface import SurfaceMetrics


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def metrics():
    return SurfaceMetrics(800, 600)


@pytest.fixture
def starfield(rng, metrics):
    field = Starfield(10, rng=rng)
    field.resize(metrics)
    return field


@pytest.fixture
def display():
    pygame.display.init()
    screen = pygame.display.set_mode((320, 240))
    yield screen
    pygame.display.quit()
