# geometry/world.py
from typing import List, Optional
from raycaster.core.color import Color
from raycaster.core.ray import Ray
from raycaster.core.vector import Vector3
from raycaster.geometry.element import Element

class Light:
    """
    A directional light. Carried with the scene but not used for coloring.
    """
    def __init__(self, direction: Vector3, color: Color, intensity: float):
        self.direction = direction
        self.color = color
        self.intensity = intensity

    def __repr__(self) -> str:
        return f"Light({self.direction}, {self.color}, {self.intensity})"

class Scene:
    """
    Everything needed to render one image: output size, vertical field of
    view in degrees, the elements in order, and the light.

    A scene is treated as read-only once rendering starts.
    """
    def __init__(self, width: int, height: int, fov: float,
                 elements: List[Element], light: Light):
        if width <= 0 or height <= 0:
            raise ValueError(f"Scene size must be positive, got {width}x{height}")
        if not 0.0 < fov < 180.0:
            raise ValueError(f"Field of view must be in (0, 180) degrees, got {fov}")
        self.width = width
        self.height = height
        self.fov = fov
        self.elements = elements
        self.light = light

    def __repr__(self) -> str:
        return f"Scene({self.width}x{self.height}, fov={self.fov}, {len(self.elements)} elements)"

class Intersection:
    """
    The nearest hit of a ray: how far along it, and which element.
    """
    def __init__(self, distance: float, element: Element):
        self.distance = distance
        self.element = element

    def __repr__(self) -> str:
        return f"Intersection({self.distance}, {self.element})"

def trace(scene: Scene, ray: Ray) -> Optional[Intersection]:
    """
    Finds the element closest along the ray, or None when nothing is hit.
    On an exact distance tie the element listed first wins.
    """
    closest = None
    for element in scene.elements:
        distance = element.intersect(ray)
        if distance is not None and (closest is None or distance < closest.distance):
            closest = Intersection(distance, element)
    return closest
