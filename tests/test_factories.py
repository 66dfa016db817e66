"""
Tests for spark, trail, explosion and rocket factories
"""

import random
import pytest
from fireworks.core.constants import (
    EXPLOSION_TRAIL_COUNT, LAUNCH_TRAIL_DRAG, LAUNCH_TRAIL_JITTER,
    SPARK_FORCE, SPARK_LIFETIME, ROCKET_LIFETIME, ROCKET_MIN_SPEED, ROCKET_MAX_SPEED
)
from fireworks.entities.body import Spawn
from fireworks.entities.factories import (
    launch_trail_particle, spark_particle, explosion_burst, create_rocket
)
from fireworks.entities.particle import Particle
from fireworks.entities.rocket import Rocket
from fireworks.entities.trail import Trail
from fireworks.utils.color import hsl
from fireworks.utils.vector import Vector2


@pytest.fixture
def rng():
    return random.Random(1234)

@pytest.fixture
def spawn():
    return Spawn(Vector2(50, 60), Vector2(20, -300), 2.5)

def test_launch_trail_particle_trails_behind(spawn, rng):
    particle = launch_trail_particle(spawn, rng=rng)

    assert isinstance(particle, Particle)
    assert particle.position == Vector2(50, 60)
    assert particle.velocity.y == pytest.approx(LAUNCH_TRAIL_DRAG * -300)
    assert abs(particle.velocity.x - LAUNCH_TRAIL_DRAG * 20) <= LAUNCH_TRAIL_JITTER
    assert particle.body.created_at == 2.5

def test_launch_trail_colour_is_warm(spawn, rng):
    for _ in range(20):
        r, g, b = launch_trail_particle(spawn, rng=rng).body.color
        assert r >= g >= b

def test_spark_particle_flung_at_fixed_force(spawn, rng):
    spark = spark_particle(spawn, hue=200, rng=rng)

    assert spark.velocity.length() == pytest.approx(SPARK_FORCE)
    assert spark.body.lifetime == SPARK_LIFETIME
    assert spark.position == spawn.position
    assert spark.position is not spawn.position

def test_explosion_burst_count_and_origin(spawn, rng):
    trails = explosion_burst(spawn, rng=rng)

    assert len(trails) == EXPLOSION_TRAIL_COUNT
    for trail in trails:
        assert isinstance(trail, Trail)
        assert trail.alive
        assert trail.position == Vector2(50, 60)
        assert trail.body.created_at == 2.5

def test_explosion_burst_leaves_spawn_untouched(spawn, rng):
    explosion_burst(spawn, rng=rng)
    assert spawn.position == Vector2(50, 60)
    assert spawn.velocity == Vector2(20, -300)

def test_explosion_trails_share_one_base_hue(spawn, rng):
    trails = explosion_burst(spawn, rng=rng)
    hues = {trail.child_factory.keywords["hue"] for trail in trails}
    assert len(hues) == 1

def test_create_rocket(rng):
    rocket = create_rocket(320, 720, 1.0, rng=rng)

    assert isinstance(rocket, Rocket)
    assert rocket.position == Vector2(320, 720)
    assert ROCKET_MIN_SPEED <= -rocket.velocity.y <= ROCKET_MAX_SPEED
    assert rocket.body.lifetime == ROCKET_LIFETIME
    assert rocket.body.created_at == 1.0
    assert not rocket.exploded

def test_hsl_primaries():
    def close(a, b):
        return all(abs(x - y) <= 2 for x, y in zip(a, b))

    assert close(hsl(0, 100, 50), (255, 0, 0))
    assert close(hsl(120, 100, 50), (0, 255, 0))
    assert close(hsl(480, 100, 50), (0, 255, 0))
