# renderer/image.py
from pathlib import Path
from typing import Tuple, Union

import numpy as np
from PIL import Image as PILImage

from raymond.core.color import Color

CHANNELS = 4


class Image:
    """
    Fixed-size RGBA8 pixel buffer written in place by the renderer.

    `pixels` is a flat uint8 array of width*height*4 bytes, row-major with
    the origin at the top-left corner. Hosts read it directly, e.g. to blit
    it into a window.
    """
    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros(width * height * CHANNELS, dtype=np.uint8)

    def index(self, x: int, y: int) -> int:
        return CHANNELS * (x + y * self.width)

    def draw(self, x: int, y: int, color: Color):
        idx = self.index(x, y)
        self.pixels[idx:idx + CHANNELS] = color.to_rgba8()

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        idx = self.index(x, y)
        return tuple(int(v) for v in self.pixels[idx:idx + CHANNELS])

    def pixels_bytes(self) -> bytes:
        return self.pixels.tobytes()

    def as_array(self) -> np.ndarray:
        """(height, width, 4) view sharing memory with `pixels`."""
        return self.pixels.reshape(self.height, self.width, CHANNELS)

    def clear(self):
        self.pixels.fill(0)

    def to_pil(self) -> PILImage.Image:
        return PILImage.fromarray(self.as_array())

    def save(self, path: Union[str, Path]):
        """Writes the buffer as an image file; format follows the suffix."""
        self.to_pil().save(path)

    def __repr__(self) -> str:
        return f"Image({self.width}x{self.height})"
