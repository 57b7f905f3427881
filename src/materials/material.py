# materials/material.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.textures import Texture, SolidColor

BLACK = Vector3(0.0, 0.0, 0.0)

def as_texture(value: Union[Vector3, Texture]) -> Texture:
    """Wraps a plain colour in a SolidColor; textures pass through."""
    if isinstance(value, Vector3):
        return SolidColor(value)
    return value

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials carry a texture for their colour-like property (albedo or emission).
    """
    def __init__(self):
        self.texture = None

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Ray, Vector3]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3) -> Vector3:
        """
        Radiance emitted at a surface point. Only lights emit.
        """
        return BLACK
