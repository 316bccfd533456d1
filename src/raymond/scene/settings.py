# scene/settings.py
from dataclasses import dataclass

MAX_DEPTH = 100


@dataclass(frozen=True)
class RenderSettings:
    """
    Feature switches for the shading pipeline. The defaults give the full
    pipeline; turning features off gives the plainer renderings (no shadows,
    no mirror bounces, black background).
    """
    shadows: bool = True
    reflections: bool = True
    sky: bool = True
    max_depth: int = MAX_DEPTH
