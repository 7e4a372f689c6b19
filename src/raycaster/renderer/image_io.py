# renderer/image_io.py
import os
import numpy as np
from PIL import Image
from raycaster.renderer.raytracer import to_image

def save_image(buffer: np.ndarray, path: str) -> str:
    """
    Write a rendered RGBA buffer to disk. The format follows the file
    extension (PNG, TGA, ...); formats without alpha get the RGB channels.

    Args:
        buffer: (height x width x 4) uint8 array from a renderer
        path: Destination file

    Returns:
        The path written

    Raises:
        ValueError: If the format is unknown or the file can't be written
    """
    image = to_image(buffer)
    try:
        try:
            image.save(path)
        except OSError as e:
            # JPEG and friends refuse RGBA
            if "RGBA" not in str(e):
                raise
            image.convert("RGB").save(path)
    except (KeyError, ValueError, OSError) as e:
        raise ValueError(f"Error saving image {path}: {str(e)}")
    return path

def load_image(path: str) -> np.ndarray:
    """
    Read an image back as a (height x width x 4) uint8 RGBA array.

    Raises:
        FileNotFoundError: If the image file doesn't exist
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Image file not found: {path}")
    with Image.open(path) as img:
        if img.mode != 'RGBA':
            img = img.convert('RGBA')
        return np.array(img)
