from raymond.core.color import Color
from raymond.core.errors import (
    ConfigurationError,
    DegenerateVectorError,
    RaymondError,
    RenderCancelled,
)
from raymond.core.ray import Ray
from raymond.core.vector import Vector3

__all__ = [
    "Color",
    "ConfigurationError",
    "DegenerateVectorError",
    "RaymondError",
    "RenderCancelled",
    "Ray",
    "Vector3",
]
