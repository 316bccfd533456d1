# core/ray.py
from raymond.core.vector import Vector3


class Ray:
    """
    Represents a ray in 3D space with an origin and direction. The direction
    is not required to be unit length unless an operation says so.
    """
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Vector3, direction: Vector3):
        self.origin = origin
        self.direction = direction

    @classmethod
    def cast(cls, start: Vector3, end: Vector3) -> "Ray":
        """Ray from start towards end; the direction keeps the full distance."""
        return cls(start, end - start)

    def point_at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def unit(self) -> "Ray":
        return Ray(self.origin, self.direction.unit())

    def reflect(self, point: Vector3, normal: Vector3) -> "Ray":
        """
        Mirror reflection about normal, starting at point. The normal must
        be unit length for the result to keep the direction's magnitude.
        """
        cosine = self.direction.dot(normal)
        return Ray(point, self.direction - normal * (2.0 * cosine))

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
