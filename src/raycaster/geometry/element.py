# geometry/element.py
from typing import Optional, Union
from raycaster.core.color import Color
from raycaster.core.ray import Ray
from raycaster.core.vector import Point, Vector3
from raycaster.geometry.plane import Plane
from raycaster.geometry.sphere import Sphere

SPHERE = "sphere"
PLANE = "plane"

class Element:
    """
    A scene entry holding exactly one of the supported shapes.

    The set of shapes is closed: dispatch matches Sphere and Plane
    explicitly and construction rejects anything else.
    """
    def __init__(self, shape: Union[Sphere, Plane]):
        if isinstance(shape, Sphere):
            self.kind = SPHERE
        elif isinstance(shape, Plane):
            self.kind = PLANE
        else:
            raise TypeError(f"Unsupported shape: {type(shape).__name__}")
        self.shape = shape

    @staticmethod
    def sphere(center: Point, radius: float, color: Color) -> "Element":
        return Element(Sphere(center, radius, color))

    @staticmethod
    def plane(origin: Point, normal: Vector3, color: Color) -> "Element":
        return Element(Plane(origin, normal, color))

    def color(self) -> Color:
        return self.shape.color

    def intersect(self, ray: Ray) -> Optional[float]:
        if self.kind == SPHERE:
            return Sphere.intersect(self.shape, ray)
        elif self.kind == PLANE:
            return Plane.intersect(self.shape, ray)
        raise TypeError(f"Unsupported shape kind: {self.kind}")

    def __repr__(self) -> str:
        return f"Element({self.shape})"
