"""
2D vector used for positions, velocities and gravitation
"""

import math
from typing import Tuple


class Vector2:
    """Mutable 2D vector. add() and scale() modify the receiver in place."""

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = float(x)
        self.y = float(y)

    def __eq__(self, other):
        if not isinstance(other, Vector2):
            return False
        return self.x == other.x and self.y == other.y

    def __repr__(self):
        return f"Vector2({self.x}, {self.y})"

    def add(self, other: 'Vector2') -> 'Vector2':
        """Add another vector to this one. Returns self."""
        self.x += other.x
        self.y += other.y
        return self

    def scale(self, scalar: float) -> 'Vector2':
        """Multiply both components by a scalar. Returns self."""
        self.x *= scalar
        self.y *= scalar
        return self

    def clone(self) -> 'Vector2':
        """Create an independent copy of this vector."""
        return Vector2(self.x, self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def from_polar(cls, angle: float, magnitude: float) -> 'Vector2':
        """Build a vector from an angle in radians and a length."""
        return cls(math.cos(angle) * magnitude, math.sin(angle) * magnitude)
