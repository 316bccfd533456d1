# materials/presets.py
from raymond.core.color import Color
from raymond.core.vector import Vector3
from raymond.materials.light import Light


class ColorPresets:
    """Flat colors used by the preset scenes."""

    RED = Color(1.0, 0.0, 0.0)
    GREEN = Color(0.0, 1.0, 0.0)
    BLUE = Color(0.0, 0.0, 1.0)
    WHITE = Color(1.0, 1.0, 1.0)
    SILVER = Color(0.75, 0.75, 0.75)
    BLACK = Color(0.0, 0.0, 0.0)


class LightPresets:
    """Predefined point lights."""

    @staticmethod
    def lamp(position: Vector3, power: float = 300.0) -> Light:
        return Light(position, power)

    @staticmethod
    def floodlight(position: Vector3) -> Light:
        return Light(position, 1000.0)
