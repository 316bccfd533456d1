# renderer/raytracer.py
import logging
import time

import numpy as np

from raymond.config import BACKENDS
from raymond.core.errors import ConfigurationError, RenderCancelled
from raymond.renderer.image import Image
from raymond.scene.scene import Scene

logger = logging.getLogger(__name__)


class Renderer:
    """
    Drives renders of a Scene into an Image.

    The "python" backend runs Scene.render scanline by scanline. The "numba"
    backend packs the scene into arrays once and hands bands of scanlines to
    the compiled kernel, which renders the rows of a band in parallel. Both
    check the cancellation flag between bands.
    """
    def __init__(self, scene: Scene, backend: str = "numba", rows_per_band: int = 16):
        if backend not in BACKENDS:
            raise ConfigurationError(f"unknown backend {backend!r}, expected one of {BACKENDS}")
        if rows_per_band <= 0:
            raise ConfigurationError(f"rows_per_band must be positive, got {rows_per_band}")
        self.scene = scene
        self.backend = backend
        self.rows_per_band = rows_per_band
        self.frame_number = 0

        self.sphere_centers = None
        self.sphere_radii = None
        self.sphere_colors = None
        self.sphere_glossiness = None
        self.light_positions = None
        self.light_powers = None

        self.update_scene_data()
        logger.info("Renderer ready: backend=%s, %d rows per band", backend, rows_per_band)

    def update_scene_data(self) -> None:
        """
        Packs spheres and lights into contiguous float64 arrays for the
        compiled kernel. The packed order matches the scene order so that
        tie-breaking between equally near spheres is unchanged.
        """
        spheres = self.scene.spheres
        lights = self.scene.lights

        centers = np.zeros((len(spheres), 3), dtype=np.float64)
        radii = np.zeros(len(spheres), dtype=np.float64)
        colors = np.zeros((len(spheres), 3), dtype=np.float64)
        glossiness = np.zeros(len(spheres), dtype=np.float64)
        for i, sphere in enumerate(spheres):
            centers[i] = [sphere.center.x, sphere.center.y, sphere.center.z]
            radii[i] = sphere.radius
            colors[i] = [sphere.color.red, sphere.color.green, sphere.color.blue]
            glossiness[i] = sphere.glossiness

        positions = np.zeros((len(lights), 3), dtype=np.float64)
        powers = np.zeros(len(lights), dtype=np.float64)
        for i, light in enumerate(lights):
            positions[i] = [light.position.x, light.position.y, light.position.z]
            powers[i] = light.power

        self.sphere_centers = np.ascontiguousarray(centers)
        self.sphere_radii = np.ascontiguousarray(radii)
        self.sphere_colors = np.ascontiguousarray(colors)
        self.sphere_glossiness = np.ascontiguousarray(glossiness)
        self.light_positions = np.ascontiguousarray(positions)
        self.light_powers = np.ascontiguousarray(powers)
        logger.debug("Packed %d spheres and %d lights", len(spheres), len(lights))

    def bands(self, height: int):
        for row_start in range(0, height, self.rows_per_band):
            yield row_start, min(row_start + self.rows_per_band, height)

    def render(self, image: Image, cancel=None) -> float:
        """
        Renders the full image from one snapshot of the camera.

        Args:
            image: Target buffer, overwritten in place.
            cancel: Optional flag with is_set(), checked between bands.

        Returns:
            float: Seconds spent rendering.

        Raises:
            RenderCancelled: when the flag is set before the last band.
        """
        start = time.perf_counter()
        camera = self.scene.camera_snapshot()

        if self.backend == "numba":
            # Imported lazily: compiling the kernel is only paid for when used.
            from raymond.renderer.kernels import render_rows

            settings = self.scene.settings
            eye = np.array([camera.eye.x, camera.eye.y, camera.eye.z], dtype=np.float64)
            film_origin = np.array([camera.film.origin.x, camera.film.origin.y,
                                    camera.film.origin.z], dtype=np.float64)
            for row_start, row_end in self.bands(image.height):
                if cancel is not None and cancel.is_set():
                    raise RenderCancelled(row_start)
                render_rows(image.pixels, image.width, image.height, row_start, row_end,
                            eye, film_origin, float(camera.film.width), float(camera.film.height),
                            self.sphere_centers, self.sphere_radii, self.sphere_colors,
                            self.sphere_glossiness, self.light_positions, self.light_powers,
                            settings.shadows, settings.reflections, settings.sky,
                            settings.max_depth)
        else:
            for row_start, row_end in self.bands(image.height):
                if cancel is not None and cancel.is_set():
                    raise RenderCancelled(row_start)
                self.scene.render_rows(image, camera, row_start, row_end)

        elapsed = time.perf_counter() - start
        self.frame_number += 1
        logger.debug("Frame %d rendered in %.3fs (%s)", self.frame_number, elapsed, self.backend)
        return elapsed
