# geometry/sphere.py
import math
from typing import Optional
from core.vector import Vector3
from core.interval import Interval
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord
from core.aabb import AABB

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    A negative radius is clamped to zero; a zero-radius sphere is never hit.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = max(0.0, radius)
        self.material = material
        offset = Vector3(self.radius, self.radius, self.radius)
        self.bbox = AABB.from_points(center - offset, center + offset)

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        if self.radius == 0.0:
            return None
        oc = self.center - ray.origin
        a = ray.direction.length_squared()
        if a == 0.0:
            return None
        h = ray.direction.dot(oc)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = h * h - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (h - sqrt_disc) / a
        if not ray_t.surrounds(root):
            root = (h + sqrt_disc) / a
            if not ray_t.surrounds(root):
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - self.center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.u, rec.v = sphere_uv(outward_normal)
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        # The bounding box of a sphere is center ± radius
        return self.bbox

def sphere_uv(p: Vector3):
    """
    Latitude/longitude coordinates of a point p on the unit sphere.

    u is the angle around the Y axis from X = -1, v the angle from Y = -1,
    both scaled to [0, 1].
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return phi / (2 * math.pi), theta / math.pi
