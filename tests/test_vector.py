"""
Tests for Vector2
"""

import math
import pytest
from fireworks.utils.vector import Vector2

def test_add_mutates_receiver_only():
    v = Vector2(1, 2)
    other = Vector2(3, 4)

    result = v.add(other)

    assert result is v
    assert v == Vector2(4, 6)
    assert other == Vector2(3, 4)

def test_scale_in_place():
    v = Vector2(1.5, -2)
    assert v.scale(2) is v
    assert v == Vector2(3, -4)

def test_clone_is_independent():
    v = Vector2(1, 1)
    other = Vector2(5, 5)

    copy = v.clone().add(other)

    assert copy == Vector2(6, 6)
    assert v == Vector2(1, 1)
    assert other == Vector2(5, 5)

def test_from_polar():
    v = Vector2.from_polar(math.pi / 2, 10)
    assert v.x == pytest.approx(0.0, abs=1e-9)
    assert v.y == pytest.approx(10.0)
    assert v.length() == pytest.approx(10.0)
