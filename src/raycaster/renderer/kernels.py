# renderer/kernels.py
import math
import numpy as np
from numba import njit, prange
from typing import Tuple
from raycaster.geometry.element import PLANE, SPHERE
from raycaster.geometry.intersectable import PARALLEL_EPSILON
from raycaster.geometry.world import Scene
from raycaster.renderer.raytracer import BACKGROUND

# Element type codes in the packed scene
SPHERE_TYPE = 0
PLANE_TYPE = 1

def pack_scene(scene: Scene) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Flattens the scene's elements into arrays the kernel can read.

    Returns:
        types: (n,) int64 element type codes, in scene order.
        params: (n, 6) float64. Spheres store [cx, cy, cz, radius, 0, 0],
            planes store [ox, oy, oz, nx, ny, nz] with the normalized normal.
        colors: (n, 4) uint8 RGBA colors.
    """
    n = len(scene.elements)
    types = np.zeros(n, dtype=np.int64)
    params = np.zeros((n, 6), dtype=np.float64)
    colors = np.zeros((n, 4), dtype=np.uint8)

    for i, element in enumerate(scene.elements):
        shape = element.shape
        if element.kind == SPHERE:
            types[i] = SPHERE_TYPE
            params[i] = [shape.center.x, shape.center.y, shape.center.z, shape.radius, 0.0, 0.0]
        elif element.kind == PLANE:
            types[i] = PLANE_TYPE
            params[i] = [shape.origin.x, shape.origin.y, shape.origin.z,
                         shape.normal.x, shape.normal.y, shape.normal.z]
        else:
            raise TypeError(f"Unsupported shape kind: {element.kind}")
        colors[i] = element.color().to_rgba()
    return types, params, colors

@njit
def ray_sphere_intersect(dx, dy, dz, cx, cy, cz, radius):
    """Ray-sphere test for a ray leaving the origin. Returns (hit, distance)."""
    adj = cx * dx + cy * dy + cz * dz
    d2 = (cx * cx + cy * cy + cz * cz) - adj * adj
    radius2 = radius * radius
    if d2 > radius2:
        return False, 0.0
    thc = math.sqrt(radius2 - d2)
    t0 = adj - thc
    t1 = adj + thc
    if t0 < 0.0 and t1 < 0.0:
        return False, 0.0
    return True, min(t0, t1)

@njit
def ray_plane_intersect(dx, dy, dz, ox, oy, oz, nx, ny, nz, epsilon):
    """Ray-plane test for a ray leaving the origin. Returns (hit, distance)."""
    denom = nx * dx + ny * dy + nz * dz
    if denom <= epsilon:
        return False, 0.0
    distance = (ox * nx + oy * ny + oz * nz) / denom
    if distance >= 0.0:
        return True, distance
    return False, 0.0

@njit(parallel=True)
def render_kernel(width, height, fov, types, params, colors, epsilon, out):
    fov_adjustment = math.tan(math.radians(fov) / 2.0)
    aspect_ratio = width / height

    # Each row is owned by exactly one worker
    for y in prange(height):
        sensor_y = (1.0 - ((y + 0.5) / height) * 2.0) * fov_adjustment
        for x in range(width):
            sensor_x = (((x + 0.5) / width) * 2.0 - 1.0) * aspect_ratio * fov_adjustment
            length = math.sqrt(sensor_x * sensor_x + sensor_y * sensor_y + 1.0)
            dx = sensor_x / length
            dy = sensor_y / length
            dz = -1.0 / length

            nearest = -1
            nearest_distance = 0.0
            for i in range(types.shape[0]):
                if types[i] == SPHERE_TYPE:
                    hit, distance = ray_sphere_intersect(
                        dx, dy, dz, params[i, 0], params[i, 1], params[i, 2], params[i, 3])
                else:
                    hit, distance = ray_plane_intersect(
                        dx, dy, dz, params[i, 0], params[i, 1], params[i, 2],
                        params[i, 3], params[i, 4], params[i, 5], epsilon)
                if hit and (nearest < 0 or distance < nearest_distance):
                    nearest = i
                    nearest_distance = distance

            if nearest >= 0:
                for c in range(4):
                    out[y, x, c] = colors[nearest, c]

def render_parallel(scene: Scene, background: Tuple[int, int, int, int] = BACKGROUND) -> np.ndarray:
    """
    Multi-threaded equivalent of raytracer.render, producing the same
    (height x width x 4) uint8 RGBA buffer.
    """
    assert scene.width > scene.height, \
        f"Scene must be wider than it is tall, got {scene.width}x{scene.height}"
    types, params, colors = pack_scene(scene)
    image = np.empty((scene.height, scene.width, 4), dtype=np.uint8)
    image[:, :] = background
    render_kernel(scene.width, scene.height, float(scene.fov), types, params, colors,
                  PARALLEL_EPSILON, image)
    return image
