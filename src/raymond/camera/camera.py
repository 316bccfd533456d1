# camera/camera.py
import enum

from raymond.core.ray import Ray
from raymond.core.vector import Vector3


class Film:
    """
    Rectangle in world space, parallel to the xy plane, acting as the image
    plane. `origin` is its bottom-left corner.
    """
    def __init__(self, origin: Vector3, width: float, height: float):
        self.origin = origin
        self.width = width
        self.height = height

    def project(self, x: float, y: float) -> Vector3:
        """
        Maps normalized image coordinates (0..1, top-left origin) to the
        matching world point on the film. y is flipped: y=0 is the top edge.
        """
        return Vector3(
            self.origin.x + self.width * x,
            self.origin.y + self.height - self.height * y,
            self.origin.z
        )

    def __repr__(self) -> str:
        return f"Film({self.origin!r}, {self.width}, {self.height})"


class Move(enum.Enum):
    """Unit translations of the camera: (axis, sign)."""
    LEFT = ("x", -1)
    RIGHT = ("x", 1)
    UP = ("y", 1)
    DOWN = ("y", -1)
    FORWARD = ("z", 1)
    BACK = ("z", -1)

    def offset(self, step: float) -> Vector3:
        axis, sign = self.value
        delta = sign * step
        return Vector3(
            delta if axis == "x" else 0.0,
            delta if axis == "y" else 0.0,
            delta if axis == "z" else 0.0
        )


class Camera:
    def __init__(self, eye: Vector3, film: Film):
        self.eye = eye
        self.film = film

    def cast(self, x: float, y: float) -> Ray:
        """Unit ray from the eye through the film point at (x, y)."""
        direction = (self.film.project(x, y) - self.eye).unit()
        return Ray(self.eye, direction)

    def move(self, move: Move, step: float = 1.0):
        """
        Translates eye and film together, keeping the field of view and
        focal distance. There are no bounds.
        """
        offset = move.offset(step)
        self.eye = self.eye + offset
        self.film = Film(self.film.origin + offset, self.film.width, self.film.height)

    def snapshot(self) -> "Camera":
        """Independent copy of the current pose."""
        return Camera(
            Vector3(self.eye.x, self.eye.y, self.eye.z),
            Film(Vector3(self.film.origin.x, self.film.origin.y, self.film.origin.z),
                 self.film.width, self.film.height)
        )

    def __repr__(self) -> str:
        return f"Camera({self.eye!r}, {self.film!r})"
