# core/vector.py
import math

class Vector3:
    """
    A 3D direction/displacement supporting arithmetic, dot and cross products,
    and normalization. Positions are represented by Point instead.
    """
    def __init__(self, x: float, y: float, z: float):
        self.x = x
        self.y = y
        self.z = z

    @staticmethod
    def zero() -> "Vector3":
        return Vector3.from_one(0.0)

    @staticmethod
    def from_one(v: float) -> "Vector3":
        return Vector3(v, v, v)

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, t: float) -> "Vector3":
        if not isinstance(t, (int, float)):
            return NotImplemented
        return Vector3(self.x * t, self.y * t, self.z * t)

    def __rmul__(self, t: float) -> "Vector3":
        return self.__mul__(t)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def norm(self) -> float:
        """Squared length."""
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector3":
        """
        Returns the unit vector in this direction. The zero vector has no
        direction and normalizes to itself.
        """
        l = self.length()
        if l == 0:
            return Vector3(0.0, 0.0, 0.0)
        return self / l

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


class Point:
    """
    A position in world space. Differences of points are vectors, and a point
    moved by a vector is a point; nothing else mixes the two types.
    """
    def __init__(self, x: float, y: float, z: float):
        self.x = x
        self.y = y
        self.z = z

    @staticmethod
    def zero() -> "Point":
        return Point.from_one(0.0)

    @staticmethod
    def from_one(v: float) -> "Point":
        return Point(v, v, v)

    def __add__(self, other: Vector3) -> "Point":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if isinstance(other, Point):
            return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector3):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y}, {self.z})"
