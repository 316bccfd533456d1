# scene/presets.py
import logging
from typing import Optional

from raymond.camera.camera import Camera, Film
from raymond.core.color import Color
from raymond.core.vector import Vector3
from raymond.geometry.sphere import Sphere
from raymond.materials.presets import ColorPresets, LightPresets
from raymond.scene.scene import Scene
from raymond.scene.settings import RenderSettings

logger = logging.getLogger(__name__)


def default_camera() -> Camera:
    # Eye three units in front of a 6x6 film whose bottom-left corner is at
    # the origin plane z=3.
    return Camera(Vector3(3, 3, 0), Film(Vector3(0, 0, 3), 6, 6))


def default_scene(settings: Optional[RenderSettings] = None, move_step: float = 1.0) -> Scene:
    """Three spheres and two lamps in front of the default camera."""
    spheres = [
        Sphere(Vector3(2, 6, 8), 1, ColorPresets.RED),
        Sphere(Vector3(1, 6, 5), 1, ColorPresets.BLUE, glossiness=0.5),
        Sphere(Vector3(3, 0, 12), 5, ColorPresets.GREEN, glossiness=0.25),
    ]
    lights = [
        LightPresets.lamp(Vector3(1, 8, 0)),
        LightPresets.lamp(Vector3(8, 5, 5)),
    ]
    scene = Scene(default_camera(), spheres, lights, settings, move_step)
    logger.info("Created default scene: %d spheres, %d lights", len(spheres), len(lights))
    return scene


def mirror_scene(settings: Optional[RenderSettings] = None, move_step: float = 1.0) -> Scene:
    """
    Two fully glossy spheres facing each other along the x axis. Rays caught
    between them bounce until the depth cap.
    """
    spheres = [
        Sphere(Vector3(0, 3, 10), 2, ColorPresets.SILVER, glossiness=1.0),
        Sphere(Vector3(6, 3, 10), 2, Color(0.9, 0.8, 0.6), glossiness=1.0),
    ]
    lights = [LightPresets.floodlight(Vector3(3, 9, 4))]
    scene = Scene(default_camera(), spheres, lights, settings, move_step)
    logger.info("Created mirror scene: %d spheres, %d lights", len(spheres), len(lights))
    return scene


PRESETS = {
    "default": default_scene,
    "mirrors": mirror_scene,
}
