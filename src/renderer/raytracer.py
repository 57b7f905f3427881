# renderer/raytracer.py
import os
import random
from concurrent.futures import ProcessPoolExecutor
from typing import Optional
import numpy as np
from camera.camera import Camera
from core.interval import Interval
from core.ray import Ray
from core.utils import task_rng
from core.vector import Vector3
from geometry.hittable import Hittable

# Lower bound of the hit window; avoids re-hitting the surface a ray leaves.
SHADOW_ACNE_EPSILON = 0.001

BLACK = Vector3(0.0, 0.0, 0.0)

class Renderer:
    """
    Monte Carlo path tracer over a hittable world (usually a BVH).

    Every scanline draws from its own random stream derived from `seed`, so a
    render is reproducible and gives the same image whether it runs in one
    process or is spread over `workers` processes.
    """
    def __init__(self, camera: Camera, world: Hittable, samples_per_pixel: int = 10,
                 max_depth: int = 10, background: Vector3 = BLACK,
                 seed: Optional[int] = None, workers: int = 1, verbose: bool = True):
        self.camera = camera
        self.world = world
        self.samples_per_pixel = max(1, samples_per_pixel)
        self.max_depth = max_depth
        self.background = background
        # Fix a base seed up front so worker processes agree on it.
        self.seed = seed if seed is not None else random.SystemRandom().randrange(2 ** 32)
        self.workers = workers if workers and workers > 0 else (os.cpu_count() or 1)
        self.verbose = verbose

    @property
    def width(self) -> int:
        return self.camera.image_width

    @property
    def height(self) -> int:
        return self.camera.image_height

    def ray_colour(self, ray: Ray, depth: int, rng) -> Vector3:
        """
        Radiance arriving along `ray`, following at most `depth` bounces.
        """
        if depth <= 0:
            return BLACK

        rec = self.world.hit(ray, Interval(SHADOW_ACNE_EPSILON, float("inf")), rng)
        if rec is None:
            return self.background

        emission = rec.material.emitted(rec.u, rec.v, rec.p)
        scatter = rec.material.scatter(ray, rec, rng)
        if scatter is None:
            return emission

        scattered, attenuation = scatter
        return emission + attenuation * self.ray_colour(scattered, depth - 1, rng)

    def render_pixel(self, i: int, j: int, rng) -> Vector3:
        """Average of samples_per_pixel radiance estimates for pixel (i, j)."""
        colour = Vector3(0.0, 0.0, 0.0)
        for _ in range(self.samples_per_pixel):
            ray = self.camera.get_ray(i, j, rng)
            colour = colour + self.ray_colour(ray, self.max_depth, rng)
        return colour / self.samples_per_pixel

    def render_row(self, j: int) -> np.ndarray:
        """Linear radiance of scanline j as a (width, 3) array."""
        rng = task_rng(self.seed, j)
        row = np.zeros((self.width, 3), dtype=np.float64)
        for i in range(self.width):
            row[i] = tuple(self.render_pixel(i, j, rng))
        return row

    def render(self) -> np.ndarray:
        """
        Renders the full image and returns linear radiance as a
        (height, width, 3) float array, row 0 at the top.
        """
        image = np.zeros((self.height, self.width, 3), dtype=np.float64)
        if self.workers == 1:
            rows = map(self.render_row, range(self.height))
            self._collect(image, rows)
        else:
            with ProcessPoolExecutor(max_workers=self.workers,
                                     initializer=_init_worker,
                                     initargs=(self,)) as pool:
                self._collect(image, pool.map(_render_row_in_worker, range(self.height)))
        if self.verbose:
            print("\rDONE                      ")
        return image

    def _collect(self, image: np.ndarray, rows):
        for j, row in enumerate(rows):
            if self.verbose:
                print(f"\rScanlines remaining: {self.height - j}   ", end="", flush=True)
            image[j] = row


_worker_renderer: Optional[Renderer] = None

def _init_worker(renderer: Renderer):
    global _worker_renderer
    _worker_renderer = renderer

def _render_row_in_worker(j: int) -> np.ndarray:
    return _worker_renderer.render_row(j)
