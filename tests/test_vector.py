"""
Unit tests for vector.py
"""

import math
import random

import pytest

from vector import Vector2, ZERO


class TestArithmetic:

    def test_add_and_subtract(self):
        a = Vector2(1.0, 2.0)
        b = Vector2(3.0, -1.0)
        assert a + b == Vector2(4.0, 1.0)
        assert a - b == Vector2(-2.0, 3.0)

    def test_scale(self):
        v = Vector2(2.0, -4.0)
        assert v * 0.5 == Vector2(1.0, -2.0)
        assert 0.5 * v == Vector2(1.0, -2.0)
        assert v.scale(2) == Vector2(4.0, -8.0)

    def test_negate(self):
        assert -Vector2(1.0, -2.0) == Vector2(-1.0, 2.0)

    def test_dist_sq(self):
        assert Vector2(0, 0).dist_sq(Vector2(3, 4)) == 25
        assert Vector2(10, 10).dist_sq(Vector2(10, 10)) == 0

    def test_floor_handles_negatives(self):
        assert Vector2(1.7, -0.2).floor() == Vector2(1, -1)

    def test_equality_is_exact(self):
        assert Vector2(0.1 + 0.2, 0) != Vector2(0.3, 0)
        assert Vector2(1, 2) == Vector2(1.0, 2.0)

    def test_vectors_are_immutable(self):
        v = Vector2(1, 2)
        with pytest.raises(AttributeError):
            v.x = 5


class TestHelpers:

    def test_angle_and_length(self):
        assert Vector2(0, 1).angle() == pytest.approx(math.pi / 2)
        assert ZERO.angle() == 0.0
        assert Vector2(3, 4).length() == pytest.approx(5.0)

    def test_is_finite(self):
        assert Vector2(1, 2).is_finite()
        assert not Vector2(math.inf, 0).is_finite()
        assert not Vector2(0, math.nan).is_finite()

    def test_clamped(self):
        low, high = Vector2(0, 0), Vector2(10, 5)
        assert Vector2(-3, 7).clamped(low, high) == Vector2(0, 5)
        assert Vector2(4, 2).clamped(low, high) == Vector2(4, 2)

    def test_random_has_requested_length(self):
        rng = random.Random(7)
        for _ in range(20):
            v = Vector2.random(rng, scale=2.5)
            assert v.length() == pytest.approx(2.5)

    def test_random_is_reproducible(self):
        assert Vector2.random(random.Random(3)) == Vector2.random(random.Random(3))
