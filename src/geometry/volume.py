# geometry/volume.py
import math
import random
from typing import Optional, Union
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord
from materials.isotropic import Isotropic
from materials.textures import Texture

# Gap between the entry hit and the search for the exit hit.
EXIT_EPSILON = 0.0001

class ConstantMedium(Hittable):
    """
    Participating medium of uniform density filling a closed boundary
    (smoke, fog). A ray scatters at an exponentially distributed depth inside
    the boundary, or passes through untouched.
    """
    def __init__(self, boundary: Hittable, density: float, albedo: Union[Vector3, Texture]):
        self.boundary = boundary
        self.density = density
        self.phase_function = Isotropic(albedo)

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        if self.density <= 0:
            return None
        rng = rng or random

        # Entry and exit along the whole line, then clip to the query window.
        rec1 = self.boundary.hit(ray, Interval.universe(), rng)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, Interval(rec1.t + EXIT_EPSILON, math.inf), rng)
        if rec2 is None:
            return None

        t1 = max(rec1.t, ray_t.min)
        t2 = min(rec2.t, ray_t.max)
        if t1 >= t2:
            return None
        t1 = max(t1, 0.0)

        ray_length = ray.direction.length()
        distance_inside = (t2 - t1) * ray_length
        # 1 - random() lies in (0, 1], keeping the logarithm finite.
        hit_distance = -math.log(1.0 - rng.random()) / self.density
        if hit_distance > distance_inside:
            return None

        t = t1 + hit_distance / ray_length
        # Normal and face are arbitrary: the isotropic phase ignores them.
        return HitRecord(
            p=ray.at(t),
            normal=Vector3(1, 0, 0),
            t=t,
            front_face=True,
            material=self.phase_function
        )

    def bounding_box(self) -> AABB:
        return self.boundary.bounding_box()
