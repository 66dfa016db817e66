"""
Fireworks - Entity tree: particles, trails and rockets
"""

from fireworks.entities.body import Body, Entity, Spawn, InvalidLifetimeError
from fireworks.entities.particle import Particle
from fireworks.entities.trail import Trail
from fireworks.entities.rocket import Rocket

__all__ = ["Body", "Entity", "Spawn", "InvalidLifetimeError", "Particle", "Trail", "Rocket"]
