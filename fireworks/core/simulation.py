"""
Fireworks - Simulation
Owns the rocket registry and the clock, and drives one frame at a time.
"""

import random
from typing import List, Optional

from fireworks.core.clock import Clock
from fireworks.core.logger import get_logger
from fireworks.entities.factories import create_rocket
from fireworks.entities.rocket import Rocket


class Simulation:
    """
    Explicit simulation context.

    One tick = clock update, update every rocket (each updates its whole tree
    depth-first), then drop rockets whose trees have fully expired. Rendering
    is a separate pass so the caller controls when frames are drawn.
    """

    def __init__(self, width: int, height: int, clock: Optional[Clock] = None,
                 max_rockets: int = 0, rng=random):
        self.width = width
        self.height = height
        self.clock = clock or Clock()
        self.max_rockets = max_rockets
        self.rng = rng
        self.rockets: List[Rocket] = []

        # Stats
        self.launched = 0
        self.exploded = 0

    def resize(self, width: int, height: int):
        self.width = width
        self.height = height
        get_logger().debug(f"Simulation resized to {width}x{height}")

    def launch_rocket(self, x: Optional[float] = None) -> Optional[Rocket]:
        """Add a rocket at the bottom edge. Random x across the width when omitted."""
        if self.max_rockets > 0 and len(self.rockets) >= self.max_rockets:
            get_logger().debug(f"Launch refused: {len(self.rockets)} rockets live (cap {self.max_rockets})")
            return None

        if x is None:
            x = self.rng.uniform(0, self.width)
        rocket = create_rocket(x, self.height, self.clock.elapsed, rng=self.rng)
        self.rockets.append(rocket)
        self.launched += 1
        get_logger().debug(f"Rocket #{self.launched} launched at x={x:.0f}")
        return rocket

    def tick(self):
        """Advance every rocket by one frame and drop the dead ones."""
        self.clock.update()
        now = self.clock.elapsed

        for rocket in self.rockets:
            was_exploded = rocket.exploded
            rocket.update(self.clock)
            if rocket.exploded and not was_exploded:
                self.exploded += 1

        self.rockets = [rocket for rocket in self.rockets if rocket.is_alive(now)]

    def render(self, surface):
        surface.clear()
        now = self.clock.elapsed
        for rocket in self.rockets:
            rocket.render(surface, now)

    def entity_count(self) -> int:
        """Live nodes across all rocket trees."""
        now = self.clock.elapsed
        return sum(rocket.count(now) for rocket in self.rockets)
