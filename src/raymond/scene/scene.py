# scene/scene.py
import logging
import threading
from typing import Iterable, Optional

import numpy as np

from raymond.camera.camera import Camera, Move
from raymond.core.color import Color, to_byte, OPAQUE
from raymond.core.errors import RenderCancelled
from raymond.core.ray import Ray
from raymond.geometry.sphere import Sphere
from raymond.geometry.world import nearest_hit
from raymond.materials.light import Light, total_irradiance
from raymond.renderer.image import Image, CHANNELS
from raymond.scene.settings import RenderSettings

logger = logging.getLogger(__name__)


def sky_color(direction) -> Color:
    """
    Background for rays that miss everything: a gradient driven by the
    direction alone, brightest towards the horizon.
    """
    sky_factor = 0.7 - abs(direction.y)
    horizon = direction.x / 2.0
    if horizon < sky_factor:
        horizon = sky_factor
    return Color(horizon, sky_factor, horizon)


class Scene:
    """
    A camera, an ordered list of spheres and an ordered list of point lights.

    Spheres and lights are fixed once the scene is built; only the camera
    moves, through the movement commands. A lock guards the camera so that
    a render always works on one consistent pose.
    """
    def __init__(self, camera: Camera, spheres: Iterable[Sphere], lights: Iterable[Light],
                 settings: Optional[RenderSettings] = None, move_step: float = 1.0):
        self.camera = camera
        self.spheres = tuple(spheres)
        self.lights = tuple(lights)
        self.settings = settings if settings is not None else RenderSettings()
        self.move_step = move_step
        self._lock = threading.RLock()

    @classmethod
    def default(cls, settings: Optional[RenderSettings] = None, move_step: float = 1.0) -> "Scene":
        from raymond.scene.presets import default_scene
        return default_scene(settings, move_step)

    @classmethod
    def mirrors(cls, settings: Optional[RenderSettings] = None, move_step: float = 1.0) -> "Scene":
        from raymond.scene.presets import mirror_scene
        return mirror_scene(settings, move_step)

    def camera_snapshot(self) -> Camera:
        with self._lock:
            return self.camera.snapshot()

    # ------------------------------------------------------------------
    # Shading
    # ------------------------------------------------------------------
    def background(self, ray: Ray) -> Color:
        if not self.settings.sky:
            return Color.black()
        return sky_color(ray.direction)

    def light(self, ray: Ray, depth: int = 1) -> Color:
        """
        Color seen along a unit ray.

        The hit sphere's flat color, plus its mirror reflection weighted by
        glossiness, is shaded by the irradiance all lights deliver at the
        hit point. Reflections stop once depth reaches max_depth; at that
        point the unreflected color is returned.
        """
        sphere, t = nearest_hit(self.spheres, ray)
        if sphere is None:
            return self.background(ray)

        point = ray.point_at(t)
        normal = sphere.surface_normal(point)
        irradiance = total_irradiance(self.lights, self.spheres, point, normal,
                                      shadows=self.settings.shadows)

        color = sphere.color
        if (self.settings.reflections and sphere.glossiness > 0
                and depth < self.settings.max_depth):
            reflected = ray.reflect(point, normal.unit())
            color = color + self.light(reflected, depth + 1).shade(sphere.glossiness)

        return color.shade(irradiance)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render_rows(self, image: Image, camera: Camera, row_start: int, row_end: int):
        width, height = image.width, image.height
        row = bytearray(width * CHANNELS)
        for y in range(row_start, row_end):
            y_offset = y / height
            for x in range(width):
                color = self.light(camera.cast(x / width, y_offset))
                idx = CHANNELS * x
                row[idx] = to_byte(color.red)
                row[idx + 1] = to_byte(color.green)
                row[idx + 2] = to_byte(color.blue)
                row[idx + 3] = OPAQUE
            start = image.index(0, y)
            image.pixels[start:start + len(row)] = np.frombuffer(row, dtype=np.uint8)

    def render(self, image: Image, cancel=None):
        """
        Re-renders the whole image from the current camera pose.

        Args:
            image: Target buffer, overwritten in place.
            cancel: Optional flag with is_set() (e.g. threading.Event),
                checked before every scanline.

        Raises:
            RenderCancelled: when the flag is set mid-render.
        """
        camera = self.camera_snapshot()
        logger.debug("Rendering %dx%d from eye %s", image.width, image.height, camera.eye)
        for y in range(image.height):
            if cancel is not None and cancel.is_set():
                raise RenderCancelled(y)
            self.render_rows(image, camera, y, y + 1)

    # ------------------------------------------------------------------
    # Movement commands
    # ------------------------------------------------------------------
    def move(self, move: Move):
        with self._lock:
            self.camera.move(move, self.move_step)
        logger.debug("Camera moved %s to %s", move.name.lower(), self.camera.eye)

    def move_left(self):
        self.move(Move.LEFT)

    def move_right(self):
        self.move(Move.RIGHT)

    def move_up(self):
        self.move(Move.UP)

    def move_down(self):
        self.move(Move.DOWN)

    def move_forward(self):
        self.move(Move.FORWARD)

    def move_back(self):
        self.move(Move.BACK)

    # camelCase names for JavaScript-style hosts.
    moveLeft = move_left
    moveRight = move_right
    moveUp = move_up
    moveDown = move_down
    moveForward = move_forward
    moveBack = move_back

    def __repr__(self) -> str:
        return f"Scene({len(self.spheres)} spheres, {len(self.lights)} lights, {self.camera!r})"
