"""Ray casting renderer for scenes of spheres and planes."""
from raycaster.camera.camera import create_prime
from raycaster.core.color import Color
from raycaster.core.ray import Ray
from raycaster.core.vector import Point, Vector3
from raycaster.geometry.element import Element
from raycaster.geometry.plane import Plane
from raycaster.geometry.sphere import Sphere
from raycaster.geometry.world import Intersection, Light, Scene, trace
from raycaster.renderer.raytracer import BACKGROUND, render, to_image

__version__ = "0.1.0"
