# renderer/kernels.py
#
# numba-compiled counterpart of Scene.render. Scene data arrives packed in
# flat float64 arrays (see Renderer.update_scene_data); vectors are passed as
# scalar triples so that nothing is allocated per ray.

import math

import numpy as np
from numba import njit, prange

INFINITY = np.inf
EPSILON = 1e-10
FOUR_PI = 4.0 * math.pi


@njit
def to_byte(channel):
    """Clamp to [0, 1], scale to 0..255, round half up."""
    if channel <= 0.0:
        return 0
    if channel >= 1.0:
        return 255
    return int(math.floor(channel * 255.0 + 0.5))


@njit
def ray_sphere_intersect(ox, oy, oz, dx, dy, dz, cx, cy, cz, radius):
    """Distance along the normalized direction to the first root >= EPSILON, or -1.0."""
    inv_length = 1.0 / math.sqrt(dx * dx + dy * dy + dz * dz)
    ux = dx * inv_length
    uy = dy * inv_length
    uz = dz * inv_length

    ocx = ox - cx
    ocy = oy - cy
    ocz = oz - cz

    dot = ux * ocx + uy * ocy + uz * ocz
    discriminant = dot * dot - (ocx * ocx + ocy * ocy + ocz * ocz - radius * radius)
    if discriminant < 0.0:
        return -1.0

    sqrtd = math.sqrt(discriminant)
    root = -dot - sqrtd
    if root >= EPSILON:
        return root
    root = -dot + sqrtd
    if root >= EPSILON:
        return root
    return -1.0


@njit
def nearest_sphere(ox, oy, oz, dx, dy, dz, centers, radii):
    """Index and distance of the closest sphere; (-1, inf) on a miss. First sphere wins ties."""
    best = -1
    best_t = INFINITY
    for i in range(radii.shape[0]):
        t = ray_sphere_intersect(ox, oy, oz, dx, dy, dz,
                                 centers[i, 0], centers[i, 1], centers[i, 2], radii[i])
        if t >= 0.0 and t < best_t:
            best_t = t
            best = i
    return best, best_t


@njit
def illuminate(px, py, pz, nx, ny, nz, lx, ly, lz, power, centers, radii, shadows):
    rx = lx - px
    ry = ly - py
    rz = lz - pz
    distance = math.sqrt(rx * rx + ry * ry + rz * rz)
    inv_distance = 1.0 / distance
    ux = rx * inv_distance
    uy = ry * inv_distance
    uz = rz * inv_distance

    if shadows:
        for i in range(radii.shape[0]):
            t = ray_sphere_intersect(px, py, pz, ux, uy, uz,
                                     centers[i, 0], centers[i, 1], centers[i, 2], radii[i])
            if t >= 0.0 and t < distance:
                return 0.0

    normal_length = math.sqrt(nx * nx + ny * ny + nz * nz)
    cosine = (nx * ux + ny * uy + nz * uz) / normal_length
    return power * cosine / (FOUR_PI * distance * distance)


@njit
def trace(ox, oy, oz, dx, dy, dz, centers, radii, colors, glossiness,
          light_positions, light_powers, shadows, reflections, sky, max_depth):
    """
    Color along a unit ray.

    Shading is a scalar multiply by clamp(irradiance, 0, 1), so the mirror
    recursion unrolls into a loop that carries the product of every shade
    and glossiness factor met so far.
    """
    r = 0.0
    g = 0.0
    b = 0.0
    weight = 1.0
    depth = 1
    while True:
        idx, t = nearest_sphere(ox, oy, oz, dx, dy, dz, centers, radii)
        if idx < 0:
            if sky:
                sky_factor = 0.7 - abs(dy)
                horizon = dx / 2.0
                if horizon < sky_factor:
                    horizon = sky_factor
                r += weight * horizon
                g += weight * sky_factor
                b += weight * horizon
            break

        px = ox + dx * t
        py = oy + dy * t
        pz = oz + dz * t
        nx = px - centers[idx, 0]
        ny = py - centers[idx, 1]
        nz = pz - centers[idx, 2]

        irradiance = 0.0
        for j in range(light_powers.shape[0]):
            irradiance += illuminate(px, py, pz, nx, ny, nz,
                                     light_positions[j, 0], light_positions[j, 1],
                                     light_positions[j, 2], light_powers[j],
                                     centers, radii, shadows)
        if irradiance <= 0.0:
            shade = 0.0
        elif irradiance >= 1.0:
            shade = 1.0
        else:
            shade = irradiance

        weight *= shade
        r += weight * colors[idx, 0]
        g += weight * colors[idx, 1]
        b += weight * colors[idx, 2]

        gloss = glossiness[idx]
        if not reflections or gloss <= 0.0 or depth >= max_depth or weight == 0.0:
            break

        inv_length = 1.0 / math.sqrt(nx * nx + ny * ny + nz * nz)
        nx *= inv_length
        ny *= inv_length
        nz *= inv_length
        cosine = dx * nx + dy * ny + dz * nz
        dx = dx - nx * (2.0 * cosine)
        dy = dy - ny * (2.0 * cosine)
        dz = dz - nz * (2.0 * cosine)
        ox = px
        oy = py
        oz = pz

        if gloss < 1.0:
            weight *= gloss
        depth += 1

    return r, g, b


@njit(parallel=True)
def render_rows(pixels, width, height, row_start, row_end, eye, film_origin, film_width,
                film_height, centers, radii, colors, glossiness, light_positions,
                light_powers, shadows, reflections, sky, max_depth):
    """
    Writes scanlines [row_start, row_end) of a width x height RGBA8 buffer.
    Scanlines run in parallel; each one only touches its own bytes.
    """
    for y in prange(row_start, row_end):
        y_offset = y / height
        for x in range(width):
            x_offset = x / width
            # Film projection, y flipped so row 0 is the top of the film.
            fx = film_origin[0] + film_width * x_offset
            fy = film_origin[1] + film_height - film_height * y_offset
            fz = film_origin[2]
            dx = fx - eye[0]
            dy = fy - eye[1]
            dz = fz - eye[2]
            inv_length = 1.0 / math.sqrt(dx * dx + dy * dy + dz * dz)
            dx *= inv_length
            dy *= inv_length
            dz *= inv_length

            r, g, b = trace(eye[0], eye[1], eye[2], dx, dy, dz, centers, radii, colors,
                            glossiness, light_positions, light_powers, shadows,
                            reflections, sky, max_depth)

            idx = 4 * (x + y * width)
            pixels[idx] = to_byte(r)
            pixels[idx + 1] = to_byte(g)
            pixels[idx + 2] = to_byte(b)
            pixels[idx + 3] = 255
