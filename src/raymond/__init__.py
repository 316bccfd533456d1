"""raymond: ray casting of spheres and point lights into an RGBA8 buffer."""

from raymond.camera.camera import Camera, Film, Move
from raymond.core import Color, Ray, Vector3
from raymond.geometry.sphere import Sphere
from raymond.materials.light import Light
from raymond.renderer.image import Image
from raymond.renderer.raytracer import Renderer
from raymond.scene import RenderSettings, Scene

__version__ = "0.1.0"

__all__ = [
    "Camera",
    "Film",
    "Move",
    "Color",
    "Ray",
    "Vector3",
    "Sphere",
    "Light",
    "Image",
    "Renderer",
    "RenderSettings",
    "Scene",
]
