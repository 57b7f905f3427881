# materials/metal.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material, as_texture
from materials.textures import Texture

class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    fuzz (clamped to [0, 1]) blurs the mirror reflection.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float = 0.0):
        super().__init__()
        self.texture = as_texture(albedo)
        self.fuzz = max(0.0, min(fuzz, 1.0))

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Vector3]]:
        reflected = reflect(ray_in.direction, rec.normal).normalize()
        scattered = Ray(rec.p, reflected + random_unit_vector(rng) * self.fuzz, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            attenuation = self.texture.value(rec.u, rec.v, rec.p)
            return scattered, attenuation

        return None  # Absorb the ray if it does not scatter forward
