# geometry/world.py
import math
from typing import Optional, Sequence, Tuple

from raymond.core.ray import Ray
from raymond.geometry.sphere import Sphere


def nearest_hit(spheres: Sequence[Sphere], ray: Ray) -> Tuple[Optional[Sphere], float]:
    """
    Linear scan for the closest sphere along the ray.

    Returns (sphere, t), or (None, inf) when nothing is hit. Only a strictly
    smaller distance replaces the current best, so on exact ties the sphere
    listed first wins.
    """
    hit_sphere = None
    closest_so_far = math.inf
    for sphere in spheres:
        t = sphere.intersect(ray)
        if t is not None and t < closest_so_far:
            closest_so_far = t
            hit_sphere = sphere
    return hit_sphere, closest_so_far
