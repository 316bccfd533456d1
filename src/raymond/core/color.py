# core/color.py
import math
from typing import Tuple

OPAQUE = 255


def to_byte(channel: float) -> int:
    """
    Clamps a linear channel to [0, 1] and scales it to 0..255, rounding to
    the nearest integer (halves round up).
    """
    if channel <= 0.0:
        return 0
    if channel >= 1.0:
        return 255
    return int(math.floor(channel * 255.0 + 0.5))


class Color:
    """
    Linear RGB color. Channels are nominally in [0, 1] but are kept
    unclamped until the color is serialized.
    """
    __slots__ = ("red", "green", "blue")

    def __init__(self, red: float, green: float, blue: float):
        self.red = float(red)
        self.green = float(green)
        self.blue = float(blue)

    @staticmethod
    def black() -> "Color":
        return Color(0.0, 0.0, 0.0)

    @staticmethod
    def white() -> "Color":
        return Color(1.0, 1.0, 1.0)

    def shade(self, f: float) -> "Color":
        """Scales the color by an intensity, saturating at 0 and 1."""
        if f <= 0.0:
            return Color.black()
        if f >= 1.0:
            return Color(self.red, self.green, self.blue)
        return Color(self.red * f, self.green * f, self.blue * f)

    def add(self, other: "Color") -> "Color":
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __add__(self, other: "Color") -> "Color":
        return self.add(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (self.red, self.green, self.blue) == (other.red, other.green, other.blue)

    def __hash__(self) -> int:
        return hash((self.red, self.green, self.blue))

    def to_rgba8(self) -> Tuple[int, int, int, int]:
        return to_byte(self.red), to_byte(self.green), to_byte(self.blue), OPAQUE

    def __repr__(self) -> str:
        return f"Color({self.red}, {self.green}, {self.blue})"
