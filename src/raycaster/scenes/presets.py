# scenes/presets.py
from raycaster.core.color import Color
from raycaster.core.vector import Point, Vector3
from raycaster.geometry.element import Element
from raycaster.geometry.world import Light, Scene

class ColorPresets:
    """Common surface colors."""

    RED = Color(1.0, 0.0, 0.0)
    GREEN = Color(0.0, 1.0, 0.0)
    BLUE = Color(0.0, 0.0, 1.0)

    WHITE = Color(1.0, 1.0, 1.0)
    GRAY = Color(0.5, 0.5, 0.5)
    BLACK = Color(0.0, 0.0, 0.0)

class LightPresets:
    """Predefined directional lights."""

    @staticmethod
    def overhead(intensity: float = 1.0) -> Light:
        return Light(Vector3(0.0, -1.0, 0.0), ColorPresets.WHITE, intensity)

    @staticmethod
    def forward(intensity: float = 1.0) -> Light:
        return Light(Vector3(0.0, 0.0, -1.0), ColorPresets.WHITE, intensity)

def default_scene(width: int = 800, height: int = 600, fov: float = 90.0) -> Scene:
    """
    A gray floor plane through the camera with a green and a red sphere
    side by side in front of it.
    """
    elements = [
        Element.plane(Point(0.0, 0.0, 0.0), Vector3(0.0, -1.0, 0.0), ColorPresets.GRAY),
        Element.sphere(Point(1.0, 0.0, -5.0), 1.0, ColorPresets.GREEN),
        Element.sphere(Point(3.0, 0.0, -5.0), 1.0, ColorPresets.RED),
    ]
    return Scene(width, height, fov, elements, LightPresets.overhead(20.0))

def single_sphere_scene(width: int = 800, height: int = 600, fov: float = 90.0) -> Scene:
    """One green sphere straight ahead of the camera."""
    elements = [Element.sphere(Point(0.0, 0.0, -5.0), 1.0, ColorPresets.GREEN)]
    return Scene(width, height, fov, elements, LightPresets.forward())
