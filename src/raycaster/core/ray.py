# core/ray.py
from raycaster.core.vector import Point, Vector3

class Ray:
    """
    Represents a ray in 3D space with an origin point and a unit direction.
    """
    def __init__(self, origin: Point, direction: Vector3):
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> Point:
        """
        Returns the point along the ray at distance t.
        """
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray({self.origin}, {self.direction})"
