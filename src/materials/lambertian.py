# materials/lambertian.py

from typing import Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from core.utils import random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material, as_texture
from materials.textures import Texture

class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__()
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Tuple[Ray, Vector3]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Returns (scattered_ray, attenuation).
        """
        # Normal plus a random unit vector gives a cosine-weighted direction.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        scattered = Ray(rec.p, scatter_direction, ray_in.time)
        attenuation = self.texture.value(rec.u, rec.v, rec.p)
        return scattered, attenuation
