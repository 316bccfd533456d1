from raymond.scene.scene import Scene, sky_color
from raymond.scene.settings import RenderSettings, MAX_DEPTH
from raymond.scene.presets import PRESETS, default_scene, mirror_scene

__all__ = [
    "Scene",
    "sky_color",
    "RenderSettings",
    "MAX_DEPTH",
    "PRESETS",
    "default_scene",
    "mirror_scene",
]
