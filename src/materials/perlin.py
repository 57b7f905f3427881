# materials/perlin.py
import math
import numpy as np
from numba import njit

POINT_COUNT = 256

class Perlin:
    """
    Gradient lattice noise with three independent axis permutations.

    The tables are drawn once from `rng` (a random.Random) and never change,
    so noise() and turbulence() are pure functions of the sample point.
    """
    def __init__(self, rng):
        gradients = np.empty((POINT_COUNT, 3), dtype=np.float64)
        for i in range(POINT_COUNT):
            # Gaussian components give uniformly distributed orientations.
            while True:
                g = np.array([rng.gauss(0.0, 1.0) for _ in range(3)])
                norm = math.sqrt(float(np.dot(g, g)))
                if norm > 1e-12:
                    break
            gradients[i] = g / norm
        self.gradients = gradients
        self.perm_x = _make_permutation(rng)
        self.perm_y = _make_permutation(rng)
        self.perm_z = _make_permutation(rng)

    def noise(self, p) -> float:
        """Smoothed noise in roughly [-1, 1] at point p."""
        return _noise(self.gradients, self.perm_x, self.perm_y, self.perm_z,
                      float(p.x), float(p.y), float(p.z))

    def turbulence(self, p, depth: int = 7) -> float:
        """Absolute value of the sum of `depth` octaves of noise."""
        return _turbulence(self.gradients, self.perm_x, self.perm_y, self.perm_z,
                           float(p.x), float(p.y), float(p.z), depth)

def _make_permutation(rng) -> np.ndarray:
    perm = list(range(POINT_COUNT))
    rng.shuffle(perm)
    return np.array(perm, dtype=np.int64)

@njit
def _noise(gradients, perm_x, perm_y, perm_z, x, y, z):
    fx = math.floor(x)
    fy = math.floor(y)
    fz = math.floor(z)
    u = x - fx
    v = y - fy
    w = z - fz
    i = int(fx)
    j = int(fy)
    k = int(fz)

    # Hermite smoothing of the interpolation weights.
    uu = u * u * (3.0 - 2.0 * u)
    vv = v * v * (3.0 - 2.0 * v)
    ww = w * w * (3.0 - 2.0 * w)

    accum = 0.0
    for di in range(2):
        for dj in range(2):
            for dk in range(2):
                idx = (perm_x[(i + di) & (POINT_COUNT - 1)]
                       ^ perm_y[(j + dj) & (POINT_COUNT - 1)]
                       ^ perm_z[(k + dk) & (POINT_COUNT - 1)])
                dot = (gradients[idx, 0] * (u - di)
                       + gradients[idx, 1] * (v - dj)
                       + gradients[idx, 2] * (w - dk))
                accum += ((di * uu + (1 - di) * (1.0 - uu))
                          * (dj * vv + (1 - dj) * (1.0 - vv))
                          * (dk * ww + (1 - dk) * (1.0 - ww))
                          * dot)
    return accum

@njit
def _turbulence(gradients, perm_x, perm_y, perm_z, x, y, z, depth):
    accum = 0.0
    weight = 1.0
    for _ in range(depth):
        accum += weight * _noise(gradients, perm_x, perm_y, perm_z, x, y, z)
        weight *= 0.5
        x *= 2.0
        y *= 2.0
        z *= 2.0
    return abs(accum)
