# geometry/sphere.py
import math
from typing import Optional
from raycaster.core.color import Color
from raycaster.core.ray import Ray
from raycaster.core.vector import Point
from raycaster.geometry.intersectable import Intersectable

class Sphere(Intersectable):
    """
    Represents a sphere defined by its center, radius, and surface color.
    """
    def __init__(self, center: Point, radius: float, color: Color):
        if not radius > 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = radius
        self.color = color

    def intersect(self, ray: Ray) -> Optional[float]:
        # Hypotenuse from the ray origin to the center
        l = self.center - ray.origin
        adj = l.dot(ray.direction)
        # Squared distance from the center to the ray's line
        d2 = l.dot(l) - adj * adj
        radius2 = self.radius * self.radius
        if d2 > radius2:
            return None

        thc = math.sqrt(radius2 - d2)
        t0 = adj - thc
        t1 = adj + thc
        if t0 < 0 and t1 < 0:
            return None
        # Negative when the ray starts inside the sphere.
        return min(t0, t1)

    def __repr__(self) -> str:
        return f"Sphere({self.center}, {self.radius}, {self.color})"
