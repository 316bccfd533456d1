# geometry/sphere.py
import math
from typing import Optional

from raymond.core.color import Color
from raymond.core.ray import Ray
from raymond.core.vector import Vector3

# Intersections closer than this are dropped so that shadow and reflection
# rays leaving a surface do not hit that same surface again.
EPSILON = 1e-10


class Sphere:
    """
    Represents a sphere defined by its center, radius, flat color and
    glossiness (the weight of its mirror reflection, 0 to 1).
    """
    __slots__ = ("center", "radius", "color", "glossiness")

    def __init__(self, center: Vector3, radius: float, color: Color, glossiness: float = 0.0):
        self.center = center
        self.radius = radius
        self.color = color
        self.glossiness = glossiness

    def intersect(self, ray: Ray) -> Optional[float]:
        """
        Distance along the normalized ray direction to the first surface
        crossing at or beyond EPSILON, or None when the ray misses.
        """
        direction = ray.direction.unit()
        oc = ray.origin - self.center
        dot = direction.dot(oc)
        discriminant = dot * dot - (oc.dot(oc) - self.radius * self.radius)

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Nearer root first; a ray starting inside only has the far one.
        for root in (-dot - sqrt_disc, -dot + sqrt_disc):
            if root >= EPSILON:
                return root
        return None

    def surface_normal(self, point: Vector3) -> Vector3:
        """Outward normal at point, not normalized."""
        return point - self.center

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius}, {self.color!r}, glossiness={self.glossiness})"
