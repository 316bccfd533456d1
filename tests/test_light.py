"""Tests for point lights and shadows."""

import math

import pytest

from raymond.core.color import Color
from raymond.core.vector import Vector3
from raymond.geometry.sphere import Sphere
from raymond.materials.light import Light, total_irradiance

EXPECTED = 100 / (4 * math.pi)


class TestIlluminate:

    def test_unobstructed_inverse_square(self):
        light = Light(Vector3(0, 0, 0), 100)
        value = light.illuminate([], Vector3(0, 0, 1), Vector3(0, 0, -1))
        assert value == pytest.approx(EXPECTED)
        assert value == pytest.approx(7.9577, abs=1e-4)

    def test_normal_need_not_be_unit(self):
        light = Light(Vector3(0, 0, 0), 100)
        assert light.illuminate([], Vector3(0, 0, 1), Vector3(0, 0, -5)) == pytest.approx(EXPECTED)

    def test_falls_off_with_distance_squared(self):
        light = Light(Vector3(0, 0, 0), 100)
        value = light.illuminate([], Vector3(0, 0, 2), Vector3(0, 0, -1))
        assert value == pytest.approx(EXPECTED / 4)

    def test_cosine_weighting(self):
        light = Light(Vector3(0, 0, 0), 100)
        # Light arrives at 60 degrees from the normal.
        normal = Vector3(0, math.sin(math.pi / 3), -math.cos(math.pi / 3))
        point = Vector3(0, 0, 1)
        assert light.illuminate([], point, Vector3(0, 0, -1)) * 0.5 == pytest.approx(
            light.illuminate([], point, normal))

    def test_surface_facing_away_is_negative(self):
        light = Light(Vector3(0, 0, 0), 100)
        assert light.illuminate([], Vector3(0, 0, 1), Vector3(0, 0, 1)) == pytest.approx(-EXPECTED)

    def test_occluder_casts_hard_shadow(self):
        light = Light(Vector3(0, 0, 0), 100)
        blocker = Sphere(Vector3(0, 0, 0.5), 0.1, Color.white())
        assert light.illuminate([blocker], Vector3(0, 0, 1), Vector3(0, 0, -1)) == 0

    def test_sphere_beyond_light_does_not_shadow(self):
        light = Light(Vector3(0, 0, 0), 100)
        beyond = Sphere(Vector3(0, 0, -3), 1, Color.white())
        assert light.illuminate([beyond], Vector3(0, 0, 1), Vector3(0, 0, -1)) == pytest.approx(EXPECTED)

    def test_shadows_can_be_disabled(self):
        light = Light(Vector3(0, 0, 0), 100)
        blocker = Sphere(Vector3(0, 0, 0.5), 0.1, Color.white())
        value = light.illuminate([blocker], Vector3(0, 0, 1), Vector3(0, 0, -1), shadows=False)
        assert value == pytest.approx(EXPECTED)

    def test_lit_surface_point_does_not_shadow_itself(self):
        sphere = Sphere(Vector3(0, 0, 5), 1, Color.white())
        light = Light(Vector3(0, 0, 0), 100)
        point = Vector3(0, 0, 4)
        value = light.illuminate([sphere], point, sphere.surface_normal(point))
        assert value == pytest.approx(100 / (4 * math.pi * 16))


class TestTotalIrradiance:

    def test_sums_all_lights_unclamped(self):
        lights = [Light(Vector3(0, 0, 0), 100), Light(Vector3(0, 0, 0), 300)]
        total = total_irradiance(lights, [], Vector3(0, 0, 1), Vector3(0, 0, -1))
        assert total == pytest.approx(4 * EXPECTED)
        assert total > 1

    def test_no_lights(self):
        assert total_irradiance([], [], Vector3(0, 0, 1), Vector3(0, 0, -1)) == 0
