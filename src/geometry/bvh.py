# src/geometry/bvh.py
from typing import List, Optional, Sequence, Tuple
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

class BVHNode(Hittable):
    """
    Bounding volume hierarchy over a fixed set of hittables.

    A tree is one of three node shapes: EmptyNode, LeafNode (one object) or
    SplitNode (two subtrees). Build it with BVHNode.build(); it is never
    modified afterwards.
    """
    box: AABB

    @staticmethod
    def build(objects: Sequence[Hittable]) -> "BVHNode":
        """
        Median split along the longest axis of the enclosing box, recursively.
        The input sequence is left untouched.
        """
        boxed = [(obj.bounding_box(), obj) for obj in objects]
        return _build(boxed)

    def bounding_box(self) -> AABB:
        return self.box

    def depth(self) -> int:
        return 0


class EmptyNode(BVHNode):
    def __init__(self):
        self.box = AABB.empty()

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        return None


class LeafNode(BVHNode):
    def __init__(self, box: AABB, obj: Hittable):
        self.box = box
        self.object = obj

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        if not self.box.hit(ray, ray_t):
            return None
        return self.object.hit(ray, ray_t, rng)

    def depth(self) -> int:
        return 1


class SplitNode(BVHNode):
    def __init__(self, box: AABB, left: BVHNode, right: BVHNode):
        self.box = box
        self.left = left
        self.right = right

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        if not self.box.hit(ray, ray_t):
            return None

        hit_left = self.left.hit(ray, ray_t, rng)
        if hit_left is None:
            return self.right.hit(ray, ray_t, rng)

        # Anything on the right must beat the left hit to matter.
        hit_right = self.right.hit(ray, Interval(ray_t.min, hit_left.t), rng)
        if hit_right is not None and hit_right.t < hit_left.t:
            return hit_right
        return hit_left

    def depth(self) -> int:
        return 1 + max(self.left.depth(), self.right.depth())


def _build(boxed: List[Tuple[AABB, Hittable]]) -> BVHNode:
    if not boxed:
        return EmptyNode()
    if len(boxed) == 1:
        box, obj = boxed[0]
        return LeafNode(box, obj)

    box = AABB.empty()
    for item_box, _ in boxed:
        box = box.union(item_box)

    axis = box.longest_axis()
    # sorted() is stable, so equal keys keep their input order.
    ordered = sorted(boxed, key=lambda item: item[0].axis_interval(axis).min)
    mid = len(ordered) // 2
    return SplitNode(box, _build(ordered[:mid]), _build(ordered[mid:]))
