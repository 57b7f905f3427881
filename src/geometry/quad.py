# geometry/quad.py
from typing import Optional
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord
from geometry.world import HittableList

# Rays closer to parallel with the plane than this are treated as misses.
PARALLEL_EPSILON = 1e-8

UNIT_INTERVAL = Interval(0.0, 1.0)

class Quad(Hittable):
    """
    Planar parallelogram spanned by the edges u and v from corner q.

    The winding of (u, v) decides the outward normal: u x v.
    """
    def __init__(self, q: Vector3, u: Vector3, v: Vector3, material):
        self.q = q
        self.u = u
        self.v = v
        self.material = material

        n = u.cross(v)
        self.normal = n.normalize()
        self.d = self.normal.dot(q)
        # Parallel edges leave no plane; such a quad can never be hit.
        nn = n.dot(n)
        self.w = n / nn if nn > 0 else Vector3(0, 0, 0)

        diagonal1 = AABB.from_points(q, q + u + v)
        diagonal2 = AABB.from_points(q + u, q + v)
        self.bbox = diagonal1.union(diagonal2).pad()

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        denom = self.normal.dot(ray.direction)
        if abs(denom) < PARALLEL_EPSILON:
            return None

        t = (self.d - self.normal.dot(ray.origin)) / denom
        if not ray_t.contains(t):
            return None

        # Express the hit point in the (u, v) frame of the quad.
        intersection = ray.at(t)
        planar = intersection - self.q
        alpha = self.w.dot(planar.cross(self.v))
        beta = self.w.dot(self.u.cross(planar))
        if not UNIT_INTERVAL.contains(alpha) or not UNIT_INTERVAL.contains(beta):
            return None

        rec = HitRecord(p=intersection, t=t, material=self.material, u=alpha, v=beta)
        rec.set_face_normal(ray, self.normal)
        return rec

    def bounding_box(self) -> AABB:
        return self.bbox

def make_box(a: Vector3, b: Vector3, material) -> HittableList:
    """
    Returns the six outward-facing quads of the box with opposite corners a and b.
    """
    sides = HittableList()

    lo = Vector3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))
    hi = Vector3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

    dx = Vector3(hi.x - lo.x, 0, 0)
    dy = Vector3(0, hi.y - lo.y, 0)
    dz = Vector3(0, 0, hi.z - lo.z)

    sides.add(Quad(Vector3(lo.x, lo.y, hi.z), dx, dy, material))   # front
    sides.add(Quad(Vector3(hi.x, lo.y, hi.z), -dz, dy, material))  # right
    sides.add(Quad(Vector3(hi.x, lo.y, lo.z), -dx, dy, material))  # back
    sides.add(Quad(Vector3(lo.x, lo.y, lo.z), dz, dy, material))   # left
    sides.add(Quad(Vector3(lo.x, hi.y, hi.z), dx, -dz, material))  # top
    sides.add(Quad(Vector3(lo.x, lo.y, lo.z), dx, dz, material))   # bottom

    return sides
