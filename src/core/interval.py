# core/interval.py
import math
from typing import Optional

class Interval:
    """
    A closed range of real numbers [min, max].

    An interval with min > max is empty. Intervals are treated as values:
    every operation returns a new interval instead of mutating this one.
    """
    def __init__(self, minimum: float = math.inf, maximum: float = -math.inf):
        self.min = minimum
        self.max = maximum

    @staticmethod
    def empty() -> "Interval":
        return Interval(math.inf, -math.inf)

    @staticmethod
    def universe() -> "Interval":
        return Interval(-math.inf, math.inf)

    @staticmethod
    def from_values(a: float, b: float) -> "Interval":
        """Smallest interval containing both values, whatever their order."""
        return Interval(a, b) if a <= b else Interval(b, a)

    @staticmethod
    def about(centre: float, radius: float) -> "Interval":
        return Interval.from_values(centre - radius, centre + radius)

    def size(self) -> float:
        return self.max - self.min

    def is_empty(self) -> bool:
        return self.min > self.max

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def expand(self, delta: float) -> "Interval":
        padding = delta / 2
        return Interval(self.min - padding, self.max + padding)

    def translate(self, offset: float) -> "Interval":
        return Interval(self.min + offset, self.max + offset)

    def union(self, other: "Interval") -> "Interval":
        return Interval(min(self.min, other.min), max(self.max, other.max))

    def intersect(self, other: "Interval") -> Optional["Interval"]:
        """
        Overlap of the two intervals, or None when they share no point.
        """
        lo = max(self.min, other.min)
        hi = min(self.max, other.max)
        if lo > hi:
            return None
        return Interval(lo, hi)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __repr__(self) -> str:
        return f"Interval({self.min}, {self.max})"
