# geometry/plane.py
from typing import Optional
from raycaster.core.color import Color
from raycaster.core.ray import Ray
from raycaster.core.vector import Point, Vector3
from raycaster.geometry.intersectable import Intersectable, PARALLEL_EPSILON

class Plane(Intersectable):
    """
    An infinite plane through origin. Only rays travelling along the normal
    hit it, so the normal should point away from the camera.
    """
    def __init__(self, origin: Point, normal: Vector3, color: Color):
        if normal.length() == 0:
            raise ValueError("Plane normal must be non-zero")
        self.origin = origin
        self.normal = normal.normalize()
        self.color = color

    def intersect(self, ray: Ray) -> Optional[float]:
        denom = self.normal.dot(ray.direction)
        if denom <= PARALLEL_EPSILON:
            return None
        v = self.origin - ray.origin
        distance = v.dot(self.normal) / denom
        if distance >= 0.0:
            return distance
        return None

    def __repr__(self) -> str:
        return f"Plane({self.origin}, {self.normal}, {self.color})"
