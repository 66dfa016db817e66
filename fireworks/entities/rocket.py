"""
Fireworks - Rocket
A climbing trail that bursts into a shower of spark trails at its apex.
"""

from typing import Callable, List

from fireworks.core.logger import get_logger
from fireworks.entities.body import Body, Entity, Spawn
from fireworks.entities.trail import ChildFactory, Trail

ExplosionFactory = Callable[[Spawn], List[Entity]]


class Rocket(Entity):
    """
    Wraps a Trail for its launch sparks and explosion debris.

    The explosion fires on the first update where the rocket is still within
    its lifetime and velocity.y >= 0 (no longer climbing). The burst is stored
    in the trail's own children and the rocket's lifetime is forced to zero,
    so it stops moving and spawning but keeps aging its debris until the
    whole tree has expired.
    """

    def __init__(self, body: Body, child_factory: ChildFactory,
                 explosion_factory: ExplosionFactory):
        self.trail = Trail(body, child_factory)
        self.explosion_factory = explosion_factory
        self.exploded = False

    @property
    def body(self) -> Body:
        return self.trail.body

    @property
    def children(self) -> List[Entity]:
        return self.trail.children

    def update(self, clock):
        now = clock.elapsed
        if self.remaining_fraction(now) > 0 and self.velocity.y >= 0:
            self.explode(now)
        self.trail.update(clock)

    def explode(self, now: float):
        burst = self.explosion_factory(self.body.snapshot(now))
        self.trail.children.extend(burst)
        self.body.expire()
        self.exploded = True
        get_logger().debug(
            f"Rocket exploded at ({self.position.x:.0f}, {self.position.y:.0f}) "
            f"into {len(burst)} trails"
        )

    def render(self, surface, now: float):
        self.trail.render(surface, now)

    def is_alive(self, now: float) -> bool:
        return self.trail.is_alive(now)

    def count(self, now: float) -> int:
        return self.trail.count(now)
