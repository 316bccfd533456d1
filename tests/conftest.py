"""Pytest configuration and shared fixtures."""

import math

import pytest

from raymond.camera.camera import Camera, Film
from raymond.core.color import Color
from raymond.core.vector import Vector3
from raymond.geometry.sphere import Sphere
from raymond.materials.light import Light
from raymond.renderer.image import Image
from raymond.scene import RenderSettings, Scene


class CountdownFlag:
    """Cancellation flag that turns on after a number of checks."""

    def __init__(self, checks_before_set: int):
        self.remaining = checks_before_set
        self.checks = 0

    def is_set(self) -> bool:
        self.checks += 1
        if self.remaining <= 0:
            return True
        self.remaining -= 1
        return False


@pytest.fixture
def unit_sphere_at_five():
    """Sphere of radius 1 centred on (0, 0, 5)."""
    return Sphere(Vector3(0, 0, 5), 1, Color(1.0, 0.5, 0.25))


@pytest.fixture
def head_on_scene():
    """
    One matte sphere straight ahead of a light at the origin, powered so the
    near pole receives an irradiance of exactly 0.5.
    """
    camera = Camera(Vector3(0, 0, 0), Film(Vector3(-1, -1, 1), 2, 2))
    sphere = Sphere(Vector3(0, 0, 5), 1, Color(1.0, 0.5, 0.25))
    light = Light(Vector3(0, 0, 0), 32 * math.pi)
    return Scene(camera, [sphere], [light])


@pytest.fixture
def default_scene():
    return Scene.default()


@pytest.fixture
def mirror_scene():
    return Scene.mirrors()


@pytest.fixture
def empty_scene():
    camera = Camera(Vector3(3, 3, 0), Film(Vector3(0, 0, 3), 6, 6))
    return Scene(camera, [], [])


@pytest.fixture
def small_image():
    return Image(16, 12)


@pytest.fixture
def countdown_flag():
    return CountdownFlag


@pytest.fixture
def settings_scene_factory():
    """Builds the default scene with some features switched off."""
    def factory(**kwargs):
        return Scene.default(RenderSettings(**kwargs))
    return factory
