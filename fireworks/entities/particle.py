from fireworks.entities.body import Body, Entity


class Particle(Entity):
    """A glowing point that falls, shrinks and fades over its lifetime."""

    def __init__(self, body: Body):
        self.body = body

    def update(self, clock):
        if self.remaining_fraction(clock.elapsed) == 0:
            return
        self.body.integrate(clock.delta)

    def render(self, surface, now: float):
        fraction = self.remaining_fraction(now)
        if fraction == 0:
            return
        surface.draw_filled_circle(
            self.position.to_tuple(),
            self.body.radius * fraction,
            self.body.color,
            fraction,
            additive=True
        )

    def is_alive(self, now: float) -> bool:
        return self.remaining_fraction(now) > 0

    def count(self, now: float) -> int:
        return 1 if self.is_alive(now) else 0
