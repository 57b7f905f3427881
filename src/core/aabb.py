# src/core/aabb.py
from typing import Optional
from core.interval import Interval
from core.vector import Vector3

# Thinnest extent an axis may have; flat primitives get padded up to it.
MIN_THICKNESS = 0.0001

class AABB:
    """
    Axis-aligned bounding box stored as one interval per axis.
    """
    def __init__(self, x: Interval = None, y: Interval = None, z: Interval = None):
        self.x = x if x is not None else Interval.empty()
        self.y = y if y is not None else Interval.empty()
        self.z = z if z is not None else Interval.empty()

    @staticmethod
    def empty() -> "AABB":
        return AABB(Interval.empty(), Interval.empty(), Interval.empty())

    @staticmethod
    def from_points(a: Vector3, b: Vector3) -> "AABB":
        """Minimal box with a and b as opposite corners, in either order."""
        return AABB(
            Interval.from_values(a.x, b.x),
            Interval.from_values(a.y, b.y),
            Interval.from_values(a.z, b.z)
        )

    def axis_interval(self, n: int) -> Interval:
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        return self.x

    def is_empty(self) -> bool:
        return self.x.is_empty() or self.y.is_empty() or self.z.is_empty()

    def hit(self, ray, ray_t: Interval) -> bool:
        # Slab method: narrow the parameter window axis by axis.
        if self.is_empty():
            return False
        window = ray_t
        for axis in range(3):
            a = "xyz"[axis]
            slab = self.axis_interval(axis)
            origin = getattr(ray.origin, a)
            direction = getattr(ray.direction, a)
            if direction == 0.0:
                # Parallel to the slab: either always inside it or never.
                if not slab.contains(origin):
                    return False
                continue
            inv_d = 1.0 / direction
            t0 = (slab.min - origin) * inv_d
            t1 = (slab.max - origin) * inv_d
            window = window.intersect(Interval.from_values(t0, t1))
            if window is None:
                return False
        return True

    def union(self, other: "AABB") -> "AABB":
        return AABB(self.x.union(other.x), self.y.union(other.y), self.z.union(other.z))

    def intersect(self, other: "AABB") -> Optional["AABB"]:
        """Overlap of two boxes, or None when they are disjoint on any axis."""
        x = self.x.intersect(other.x)
        y = self.y.intersect(other.y)
        z = self.z.intersect(other.z)
        if x is None or y is None or z is None:
            return None
        return AABB(x, y, z)

    def translate(self, offset: Vector3) -> "AABB":
        return AABB(
            self.x.translate(offset.x),
            self.y.translate(offset.y),
            self.z.translate(offset.z)
        )

    def pad(self, min_size: float = MIN_THICKNESS) -> "AABB":
        """
        Grows every axis thinner than min_size around its own midpoint.
        """
        def padded(interval: Interval) -> Interval:
            if interval.is_empty() or interval.size() >= min_size:
                return interval
            return interval.expand(min_size)
        return AABB(padded(self.x), padded(self.y), padded(self.z))

    def longest_axis(self) -> int:
        # Ties go to the earlier axis: X, then Y, then Z.
        sx, sy, sz = self.x.size(), self.y.size(), self.z.size()
        if sx >= sy and sx >= sz:
            return 0
        if sy >= sz:
            return 1
        return 2

    def contains_box(self, other: "AABB") -> bool:
        return all(
            outer.min <= inner.min and inner.max <= outer.max
            for outer, inner in zip((self.x, self.y, self.z), (other.x, other.y, other.z))
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __repr__(self) -> str:
        return f"AABB({self.x}, {self.y}, {self.z})"
