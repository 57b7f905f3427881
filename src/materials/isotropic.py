# materials/isotropic.py
from typing import Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from core.utils import random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material, as_texture
from materials.textures import Texture

class Isotropic(Material):
    """
    Phase function of a participating medium: scatters uniformly in all directions.
    """
    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__()
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Tuple[Ray, Vector3]:
        scattered = Ray(rec.p, random_unit_vector(rng), ray_in.time)
        return scattered, self.texture.value(rec.u, rec.v, rec.p)
