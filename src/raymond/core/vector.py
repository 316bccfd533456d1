# core/vector.py
import math

from raymond.core.errors import DegenerateVectorError


class Vector3:
    """
    A simple immutable-by-convention 3D vector supporting arithmetic, dot
    products, length and normalization. Every operation returns a new vector.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, f: float) -> "Vector3":
        return Vector3(self.x * f, self.y * f, self.z * f)

    def __rmul__(self, f: float) -> "Vector3":
        return self.__mul__(f)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def add(self, other: "Vector3") -> "Vector3":
        return self + other

    def subtract(self, other: "Vector3") -> "Vector3":
        return self - other

    def scale(self, f: float) -> "Vector3":
        return self * f

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def unit(self) -> "Vector3":
        """
        Returns the vector scaled to length 1.

        Raises DegenerateVectorError for a zero-length vector instead of
        handing back infinities.
        """
        l = self.length()
        if l == 0:
            raise DegenerateVectorError()
        return self * (1.0 / l)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
