"""
Fireworks - Shared physical record for every entity
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Tuple

from fireworks.core.constants import GRAVITATION, COLORS
from fireworks.utils.vector import Vector2


class InvalidLifetimeError(ValueError):
    """Raised when a body is created with a lifetime that is not positive."""

    def __init__(self, lifetime: float):
        super().__init__(f"Lifetime must be > 0 seconds, got {lifetime}")
        self.lifetime = lifetime


@dataclass(frozen=True)
class Spawn:
    """Snapshot of a parent's state handed to a factory. Vectors are copies."""
    position: Vector2
    velocity: Vector2
    time: float


@dataclass
class Body:
    """
    Common state of particles, trails and rockets.

    Fields:
    - position/velocity: owned exclusively by this body
    - lifetime: seconds the body stays active, counted from created_at
    - created_at: simulation timestamp (Clock.elapsed) at creation
    - mass: scales the gravitational acceleration
    - radius/color: visual size and RGB colour at full strength
    """
    position: Vector2
    velocity: Vector2
    lifetime: float
    created_at: float = 0.0
    mass: float = 1.0
    radius: float = 1.0
    color: Tuple[int, int, int] = COLORS.WHITE

    def __post_init__(self):
        if self.lifetime <= 0:
            raise InvalidLifetimeError(self.lifetime)

    def remaining_fraction(self, now: float) -> float:
        """Share of the lifetime left at `now`, in [0, 1]."""
        if self.lifetime <= 0:
            return 0.0
        remaining = max(0.0, self.lifetime - (now - self.created_at))
        return min(1.0, remaining / self.lifetime)

    def integrate(self, delta: float):
        """Semi-implicit Euler step: velocity first, then position."""
        gravity = Vector2(*GRAVITATION).scale(self.mass * delta)
        self.velocity.add(gravity)
        self.position.add(self.velocity.clone().scale(delta))

    def expire(self):
        """End this body's life immediately."""
        self.lifetime = 0.0

    def snapshot(self, now: float) -> Spawn:
        return Spawn(self.position.clone(), self.velocity.clone(), now)


class Entity(ABC):
    """Capabilities shared by every node of a firework tree."""

    body: Body

    @property
    def position(self) -> Vector2:
        return self.body.position

    @property
    def velocity(self) -> Vector2:
        return self.body.velocity

    def remaining_fraction(self, now: float) -> float:
        return self.body.remaining_fraction(now)

    @abstractmethod
    def update(self, clock):
        """Advance physics and lifecycle by one frame."""

    @abstractmethod
    def render(self, surface, now: float):
        """Draw this entity (or its descendants) onto a DrawingSurface."""

    @abstractmethod
    def is_alive(self, now: float) -> bool:
        """Whether the owner should keep this entity."""

    @abstractmethod
    def count(self, now: float) -> int:
        """Number of live nodes in this entity's subtree, itself included."""
