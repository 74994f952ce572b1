import random

import pygame
import pytest

from entities.velocity import InputDrivenVelocity, VelocityState
from systems.frame_loop import FrameLoop
from systems.physics import Simulator
from systems.render import RenderSystem
from world.starfield import Starfield
from world.surface import SurfaceMetrics


@pytest.fixture
def loop(display):
    rng = random.Random(17)
    field = Starfield(30, rng=rng)
    sim = Simulator(field, VelocityState())
    frame_loop = FrameLoop(display, field, sim, RenderSystem(display, rng))
    frame_loop.resize()
    pygame.event.clear()
    return frame_loop


def test_initial_resize_measures_display(loop):
    metrics = loop.starfield.metrics
    assert (metrics.width, metrics.height) == (320, 240)
    assert metrics.scale == pytest.approx(1.0)
    assert all(0 <= s.x <= 320 and 0 <= s.y <= 240 for s in loop.starfield)


def test_run_draws_requested_frames(loop):
    assert loop.run(max_frames=5) == 5
    assert loop.frames == 5
    assert not loop.running


def test_quit_event_stops_loop(loop):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert loop.run(max_frames=100) == 0


def test_step_updates_then_draws(loop, monkeypatch):
    calls = []
    monkeypatch.setattr(loop.renderer, "begin_frame", lambda: calls.append("clear"))
    monkeypatch.setattr(loop.simulator, "update", lambda: calls.append("update"))
    monkeypatch.setattr(loop.renderer, "draw_stars", lambda *a: calls.append("draw"))
    loop.step()
    assert calls == ["clear", "update", "draw"]


def test_resize_event_repositions_every_star(loop):
    loop.measure = lambda: SurfaceMetrics(64, 48)
    loop.handle_event(pygame.event.Event(pygame.VIDEORESIZE, w=64, h=48, size=(64, 48)))

    assert len(loop.starfield) == 30
    assert loop.starfield.metrics == SurfaceMetrics(64, 48)
    assert all(0 <= s.x <= 64 and 0 <= s.y <= 48 for s in loop.starfield)


def test_pointer_is_inert_by_default(loop):
    loop.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(300, 10), rel=(0, 0), buttons=(0, 0, 0)))
    loop.simulator.update()
    velocity = loop.simulator.velocity
    assert (velocity.x, velocity.y) == (0, 0)


def test_pointer_steers_input_driven_policy(loop):
    policy = InputDrivenVelocity()
    loop.simulator.policy = policy
    loop.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(300, 120), rel=(0, 0), buttons=(0, 0, 0)))
    loop.simulator.update()
    assert loop.simulator.velocity.x > 0
    assert loop.simulator.velocity.y == 0

    loop.handle_event(pygame.event.Event(pygame.FINGERMOTION, x=0.0, y=0.0, dx=0.0, dy=0.0, finger_id=0, touch_id=0))
    assert policy.touch_input

    loop.handle_event(pygame.event.Event(pygame.WINDOWLEAVE))
    loop.simulator.update()
    assert (loop.simulator.velocity.tx, loop.simulator.velocity.ty) == (0, 0)
