# core/ray.py
from core.vector import Vector3

class Ray:
    """
    Represents a ray in 3D space with an origin, a direction and a time sample.

    The direction is not required to be unit length. The time sample lies in
    [0, 1) and is only consumed by moving objects (motion blur).
    """
    def __init__(self, origin: Vector3, direction: Vector3, time: float = 0.0):
        self.origin = origin
        self.direction = direction
        self.time = time

    @staticmethod
    def between(origin: Vector3, target: Vector3, time: float = 0.0) -> "Ray":
        """
        Returns the ray leaving origin that reaches target at t = 1.
        """
        return Ray(origin, target - origin, time)

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray({self.origin}, {self.direction}, time={self.time})"
