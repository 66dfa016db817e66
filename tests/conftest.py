"""
Shared fixtures: headless pygame, a controllable time source and a
surface that records draw calls.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest
from fireworks.core.clock import Clock


class FakeTime:
    """Callable time source advanced by hand."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class RecordingSurface:
    """Stands in for DrawingSurface and keeps every call."""

    def __init__(self):
        self.circles = []
        self.clears = 0

    def clear(self, rect=None):
        self.clears += 1

    def draw_filled_circle(self, center, radius, color, opacity, additive=True):
        self.circles.append({
            "center": center,
            "radius": radius,
            "color": color,
            "opacity": opacity,
            "additive": additive,
        })


@pytest.fixture
def fake_time():
    return FakeTime()


@pytest.fixture
def clock(fake_time):
    return Clock(time_source=fake_time)


@pytest.fixture
def step(fake_time, clock):
    """Advance time by `dt` and update the clock, as the driver does each frame."""
    def _step(dt: float):
        fake_time.advance(dt)
        clock.update()
        return clock
    return _step


@pytest.fixture
def recording_surface():
    return RecordingSurface()
