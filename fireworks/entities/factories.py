"""
Fireworks - Entity Factories
Parametrize colour, velocity and lifetime of everything a firework spawns.

Factories only read the Spawn snapshot and the random generator; they return
new entities and leave appending them to the caller.
"""

import math
import random
from functools import partial
from typing import List

from fireworks.core.constants import (
    ROCKET_LIFETIME, ROCKET_MASS, ROCKET_RADIUS,
    ROCKET_MIN_SPEED, ROCKET_MAX_SPEED, ROCKET_HORIZONTAL_JITTER,
    LAUNCH_TRAIL_DRAG, LAUNCH_TRAIL_JITTER,
    LAUNCH_TRAIL_HUE_MIN, LAUNCH_TRAIL_HUE_MAX,
    LAUNCH_TRAIL_MASS, LAUNCH_TRAIL_RADIUS,
    LAUNCH_TRAIL_MIN_LIFETIME, LAUNCH_TRAIL_MAX_LIFETIME,
    EXPLOSION_TRAIL_COUNT, EXPLOSION_MIN_SPEED, EXPLOSION_MAX_SPEED,
    EXPLOSION_TRAIL_MASS, EXPLOSION_TRAIL_MIN_LIFETIME, EXPLOSION_TRAIL_MAX_LIFETIME,
    SPARK_FORCE, SPARK_LIFETIME, SPARK_MASS, SPARK_RADIUS, SPARK_HUE_BAND,
    SPARK_MIN_LIGHTNESS, SPARK_MAX_LIGHTNESS
)
from fireworks.entities.body import Body, Spawn
from fireworks.entities.particle import Particle
from fireworks.entities.rocket import Rocket
from fireworks.entities.trail import Trail
from fireworks.utils.color import hsl
from fireworks.utils.vector import Vector2


def launch_trail_particle(spawn: Spawn, rng=random) -> Particle:
    """Faint warm ember left behind a climbing rocket."""
    velocity = spawn.velocity.clone().scale(LAUNCH_TRAIL_DRAG)
    velocity.add(Vector2(rng.uniform(-LAUNCH_TRAIL_JITTER, LAUNCH_TRAIL_JITTER), 0.0))

    hue = rng.uniform(LAUNCH_TRAIL_HUE_MIN, LAUNCH_TRAIL_HUE_MAX)
    return Particle(Body(
        position=spawn.position.clone(),
        velocity=velocity,
        lifetime=rng.uniform(LAUNCH_TRAIL_MIN_LIFETIME, LAUNCH_TRAIL_MAX_LIFETIME),
        created_at=spawn.time,
        mass=LAUNCH_TRAIL_MASS,
        radius=LAUNCH_TRAIL_RADIUS,
        color=hsl(hue, 100, rng.uniform(50, 70))
    ))


def spark_particle(spawn: Spawn, hue: float, rng=random) -> Particle:
    """Coloured spark flung outward from an explosion trail's head."""
    angle = rng.uniform(0, 2 * math.pi)
    shade = hue + rng.uniform(-SPARK_HUE_BAND, SPARK_HUE_BAND)
    return Particle(Body(
        position=spawn.position.clone(),
        velocity=Vector2.from_polar(angle, SPARK_FORCE),
        lifetime=SPARK_LIFETIME,
        created_at=spawn.time,
        mass=SPARK_MASS,
        radius=SPARK_RADIUS,
        color=hsl(shade, 100, rng.uniform(SPARK_MIN_LIGHTNESS, SPARK_MAX_LIGHTNESS))
    ))


def explosion_burst(spawn: Spawn, rng=random) -> List[Trail]:
    """Fan of spark-shedding trails radiating from the explosion point."""
    hue = rng.uniform(0, 360)
    sparks = partial(spark_particle, hue=hue, rng=rng)

    trails = []
    for _ in range(EXPLOSION_TRAIL_COUNT):
        angle = rng.uniform(0, 2 * math.pi)
        speed = rng.uniform(EXPLOSION_MIN_SPEED, EXPLOSION_MAX_SPEED)
        body = Body(
            position=spawn.position.clone(),
            velocity=Vector2.from_polar(angle, speed),
            lifetime=rng.uniform(EXPLOSION_TRAIL_MIN_LIFETIME, EXPLOSION_TRAIL_MAX_LIFETIME),
            created_at=spawn.time,
            mass=EXPLOSION_TRAIL_MASS
        )
        trails.append(Trail(body, sparks))
    return trails


def create_rocket(x: float, ground_y: float, now: float, rng=random) -> Rocket:
    """Rocket standing on the ground line at `x`, aimed (mostly) straight up."""
    velocity = Vector2(
        rng.uniform(-ROCKET_HORIZONTAL_JITTER, ROCKET_HORIZONTAL_JITTER),
        -rng.uniform(ROCKET_MIN_SPEED, ROCKET_MAX_SPEED)
    )
    body = Body(
        position=Vector2(x, ground_y),
        velocity=velocity,
        lifetime=ROCKET_LIFETIME,
        created_at=now,
        mass=ROCKET_MASS,
        radius=ROCKET_RADIUS
    )
    return Rocket(
        body,
        partial(launch_trail_particle, rng=rng),
        partial(explosion_burst, rng=rng)
    )
