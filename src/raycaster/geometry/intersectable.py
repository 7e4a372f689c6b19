# geometry/intersectable.py
from typing import Optional
from raycaster.core.ray import Ray

# Rays closer than this to parallel with a plane are treated as missing it.
PARALLEL_EPSILON = 1e-6

class Intersectable:
    """
    Abstract class for shapes that can be probed by a ray.
    """
    def intersect(self, ray: Ray) -> Optional[float]:
        """
        Returns the distance along the ray to the nearest intersection,
        or None when the ray misses.
        """
        raise NotImplementedError("intersect() must be implemented by subclasses.")
