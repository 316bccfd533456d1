"""Tests for Ray."""

import pytest

from raymond.core.ray import Ray
from raymond.core.vector import Vector3


class TestRay:

    def test_point_at(self):
        ray = Ray(Vector3(1, 2, 3), Vector3(0, 0, 2))
        assert ray.point_at(0) == Vector3(1, 2, 3)
        assert ray.point_at(1.5) == Vector3(1, 2, 6)

    def test_cast_keeps_full_distance(self):
        ray = Ray.cast(Vector3(1, 1, 1), Vector3(4, 5, 1))
        assert ray.origin == Vector3(1, 1, 1)
        assert ray.direction == Vector3(3, 4, 0)
        assert ray.direction.length() == 5

    def test_unit_normalizes_direction_only(self):
        ray = Ray(Vector3(1, 2, 3), Vector3(0, 3, 4)).unit()
        assert ray.origin == Vector3(1, 2, 3)
        assert ray.direction.length() == pytest.approx(1.0)

    def test_reflect_mirrors_about_normal(self):
        ray = Ray(Vector3(0, 0, 0), Vector3(1, -1, 0))
        reflected = ray.reflect(Vector3(5, 0, 0), Vector3(0, 1, 0))
        assert reflected.origin == Vector3(5, 0, 0)
        assert reflected.direction == Vector3(1, 1, 0)

    def test_reflect_head_on_reverses(self):
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, 1))
        reflected = ray.reflect(Vector3(0, 0, 4), Vector3(0, 0, -1))
        assert reflected.direction == Vector3(0, 0, -1)

    @pytest.mark.parametrize("direction, normal", [
        (Vector3(1, -2, 3), Vector3(0, 1, 0)),
        (Vector3(-4, 0.5, 2), Vector3(1, 1, 1).unit()),
        (Vector3(0.3, 0.3, -7), Vector3(0.2, -0.9, 0.4).unit()),
    ])
    def test_reflect_preserves_magnitude(self, direction, normal):
        reflected = Ray(Vector3(0, 0, 0), direction).reflect(Vector3(0, 0, 0), normal)
        assert reflected.direction.length() == pytest.approx(direction.length(), rel=1e-12)
