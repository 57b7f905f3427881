# core/utils.py
import math
import random
from typing import Optional
from core.vector import Vector3

def task_rng(seed: Optional[int], index: int) -> random.Random:
    """
    Returns an independent random stream for one unit of work (a scanline,
    a pixel...). The same (seed, index) pair always yields the same stream,
    so work can be split across processes without changing the result.
    """
    if seed is None:
        return random.Random()
    return random.Random(f"{seed}:{index}")

def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0

def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if 1e-160 < p.dot(p) < 1.0:
            return p

def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalize()

def random_in_unit_disk(rng) -> Vector3:
    """
    Returns a random point (x, y, 0) inside the unit disk, for lens sampling.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.dot(p) < 1:
            return p

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Bends the unit vector uv through a surface with normal n (Snell's law).
    The caller is responsible for ruling out total internal reflection.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel
