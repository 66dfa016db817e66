"""
Fireworks - Trail
An invisible moving head that leaves a stream of child particles behind.
"""

from typing import Callable, List

from fireworks.entities.body import Body, Entity, Spawn

ChildFactory = Callable[[Spawn], Entity]


class Trail(Entity):
    """
    Owns a list of child entities (particles or nested trails).

    Each update while the head is still within its lifetime spawns one child
    from `child_factory`. Expired children are pruned every frame; once the
    list is empty the trail is dead for good.
    """

    def __init__(self, body: Body, child_factory: ChildFactory):
        self.body = body
        self.child_factory = child_factory
        self.children: List[Entity] = []
        self.alive = True

    def update(self, clock):
        now = clock.elapsed
        fraction = self.remaining_fraction(now)

        if fraction > 0:
            self.body.integrate(clock.delta)

        if self.alive and fraction > 0:
            self.children.append(self.child_factory(self.body.snapshot(now)))

        self.children = [child for child in self.children if child.is_alive(now)]
        if not self.children:
            self.alive = False

        for child in self.children:
            child.update(clock)

    def render(self, surface, now: float):
        # The head itself is never drawn
        for child in self.children:
            child.render(surface, now)

    def is_alive(self, now: float) -> bool:
        return self.alive

    def count(self, now: float) -> int:
        if not self.alive:
            return 0
        return 1 + sum(child.count(now) for child in self.children)
