# geometry/transforms.py
import math
from typing import Optional
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from core.utils import degrees_to_radians
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord

class Translate(Hittable):
    """
    Places a hittable at a fixed offset without copying it.
    """
    def __init__(self, obj: Hittable, offset: Vector3):
        self.object = obj
        self.offset = offset
        self.bbox = obj.bounding_box().translate(offset)

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        # Move the ray into object space, intersect, then move the hit back.
        local_ray = Ray(ray.origin - self.offset, ray.direction, ray.time)
        rec = self.object.hit(local_ray, ray_t, rng)
        if rec is None:
            return None
        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self) -> AABB:
        return self.bbox


class Moving(Hittable):
    """
    Linear motion: the object sits at its original place at time 0 and is
    displaced by `displacement` at time 1. Drives motion blur.
    """
    def __init__(self, obj: Hittable, displacement: Vector3):
        self.object = obj
        self.displacement = displacement
        start = obj.bounding_box()
        self.bbox = start.union(start.translate(displacement))

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        shift = self.displacement * ray.time
        local_ray = Ray(ray.origin - shift, ray.direction, ray.time)
        rec = self.object.hit(local_ray, ray_t, rng)
        if rec is None:
            return None
        rec.p = rec.p + shift
        return rec

    def bounding_box(self) -> AABB:
        return self.bbox


class RotateY(Hittable):
    """
    Rotates a hittable by `angle` degrees about the Y axis.
    """
    def __init__(self, obj: Hittable, angle: float):
        self.object = obj
        radians = degrees_to_radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)
        self.bbox = self._rotated_box(obj.bounding_box())

    def _rotated_box(self, box: AABB) -> AABB:
        if box.is_empty():
            return AABB.empty()
        # Enclose all eight rotated corners of the child box.
        result = AABB.empty()
        for x in (box.x.min, box.x.max):
            for y in (box.y.min, box.y.max):
                for z in (box.z.min, box.z.max):
                    corner = self._to_world(Vector3(x, y, z))
                    result = result.union(AABB.from_points(corner, corner))
        return result

    def _to_object(self, p: Vector3) -> Vector3:
        return Vector3(
            self.cos_theta * p.x - self.sin_theta * p.z,
            p.y,
            self.sin_theta * p.x + self.cos_theta * p.z
        )

    def _to_world(self, p: Vector3) -> Vector3:
        return Vector3(
            self.cos_theta * p.x + self.sin_theta * p.z,
            p.y,
            -self.sin_theta * p.x + self.cos_theta * p.z
        )

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        local_ray = Ray(self._to_object(ray.origin), self._to_object(ray.direction), ray.time)
        rec = self.object.hit(local_ray, ray_t, rng)
        if rec is None:
            return None
        rec.p = self._to_world(rec.p)
        rec.normal = self._to_world(rec.normal)
        return rec

    def bounding_box(self) -> AABB:
        return self.bbox
