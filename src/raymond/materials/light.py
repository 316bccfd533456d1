# materials/light.py
import math
from typing import Sequence

from raymond.core.ray import Ray
from raymond.core.vector import Vector3
from raymond.geometry.sphere import Sphere

FOUR_PI = 4.0 * math.pi


class Light:
    """
    Point light radiating `power` equally in all directions.

    Illumination at a surface point falls off with the square of the
    distance and with the cosine between the surface normal and the
    direction to the light. Spheres are opaque, so any sphere between the
    point and the light puts the point in hard shadow.
    """
    __slots__ = ("position", "power")

    def __init__(self, position: Vector3, power: float):
        self.position = position
        self.power = power

    def is_occluded(self, spheres: Sequence[Sphere], to_light: Ray, distance: float) -> bool:
        for sphere in spheres:
            t = sphere.intersect(to_light)
            if t is not None and t < distance:
                return True
        return False

    def illuminate(self, spheres: Sequence[Sphere], point: Vector3, normal: Vector3,
                   shadows: bool = True) -> float:
        """
        Irradiance this light delivers at point.

        Args:
            spheres: Occluders to test the path to the light against.
            point: Surface point being lit.
            normal: Surface normal at point; need not be unit length.
            shadows: When False the occlusion test is skipped.

        Returns:
            float: power * cosine / (4 pi distance^2), or 0.0 when shadowed.
            Negative for surfaces facing away from the light.
        """
        ray = Ray.cast(point, self.position)
        distance = ray.direction.length()
        to_light = ray.unit()

        if shadows and self.is_occluded(spheres, to_light, distance):
            return 0.0

        cosine = normal.dot(to_light.direction) / normal.length()
        return self.power * cosine / (FOUR_PI * distance * distance)

    def __repr__(self) -> str:
        return f"Light({self.position!r}, {self.power})"


def total_irradiance(lights: Sequence[Light], spheres: Sequence[Sphere], point: Vector3,
                     normal: Vector3, shadows: bool = True) -> float:
    """Sum of every light's contribution at point, unclamped."""
    return sum(light.illuminate(spheres, point, normal, shadows) for light in lights)
