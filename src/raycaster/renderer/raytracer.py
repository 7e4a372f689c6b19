# renderer/raytracer.py
import numpy as np
from PIL import Image
from typing import Tuple
from raycaster.camera.camera import create_prime
from raycaster.geometry.world import Scene, trace

# Transparent black for pixels whose ray hits nothing
BACKGROUND = (0, 0, 0, 0)

def render(scene: Scene, background: Tuple[int, int, int, int] = BACKGROUND) -> np.ndarray:
    """
    Casts one prime ray per pixel and records the color of the nearest
    element it hits.

    Returns:
        np.ndarray: A (height x width x 4) RGBA array of uint8, row-major.
    """
    assert scene.width > scene.height, \
        f"Scene must be wider than it is tall, got {scene.width}x{scene.height}"
    image = np.empty((scene.height, scene.width, 4), dtype=np.uint8)
    image[:, :] = background

    for y in range(scene.height):
        for x in range(scene.width):
            ray = create_prime(x, y, scene)
            hit = trace(scene, ray)
            if hit is not None:
                image[y, x] = hit.element.color().to_rgba()
    return image

def to_image(buffer: np.ndarray) -> Image.Image:
    """
    Wraps a rendered RGBA buffer as a Pillow image.
    """
    return Image.fromarray(buffer)
