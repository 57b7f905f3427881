# src/geometry/world.py
from geometry.hittable import Hittable, HitRecord
from geometry.bvh import BVHNode
from typing import Optional, List
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray

class HittableList(Hittable):
    """
    A list of Hittable objects, itself hittable by a linear closest-hit scan.
    build_bvh() turns the current contents into an acceleration tree.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = []
        self.bbox = AABB.empty()
        for obj in objects or []:
            self.add(obj)

    def add(self, obj: Hittable):
        self.bbox = self.bbox.union(obj.bounding_box())
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()
        self.bbox = AABB.empty()

    def __len__(self) -> int:
        return len(self.objects)

    def build_bvh(self) -> BVHNode:
        return BVHNode.build(self.objects)

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far), rng)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        return self.bbox
