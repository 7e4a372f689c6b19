# camera/camera.py
import math
from raycaster.core.ray import Ray
from raycaster.core.vector import Point, Vector3

def create_prime(x: int, y: int, scene) -> Ray:
    """
    Builds the ray from the camera through the center of pixel (x, y).

    The camera sits at the origin looking down -z with +y up; the field of
    view spans the image height. Only landscape scenes (width > height) are
    supported.
    """
    assert scene.width > scene.height, \
        f"Scene must be wider than it is tall, got {scene.width}x{scene.height}"
    fov_adjustment = math.tan(math.radians(scene.fov) / 2.0)
    aspect_ratio = scene.width / scene.height

    sensor_x = (((x + 0.5) / scene.width) * 2.0 - 1.0) * aspect_ratio * fov_adjustment
    # Image rows grow downward
    sensor_y = (1.0 - ((y + 0.5) / scene.height) * 2.0) * fov_adjustment

    return Ray(Point.zero(), Vector3(sensor_x, sensor_y, -1.0).normalize())
