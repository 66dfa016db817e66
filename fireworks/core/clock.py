"""
Fireworks - Simulation Clock
Tracks elapsed and per-frame delta time between update calls
"""

import time
from typing import Callable


class Clock:
    """
    Wall-clock time keeper owned by a Simulation.

    update() is called once per frame before any entity update. Entities
    read `delta` for integration and `elapsed` as the current timestamp.
    A non-monotonic source is passed through as-is (delta may go negative).
    """

    def __init__(self, time_source: Callable[[], float] = time.perf_counter):
        self.time_source = time_source
        self.start = time_source()
        self.previous = self.start
        self.delta = 0.0
        self.elapsed = 0.0

    def update(self):
        """Sample the time source and recompute delta/elapsed."""
        now = self.time_source()
        self.delta = now - self.previous
        self.elapsed = now - self.start
        self.previous = now
