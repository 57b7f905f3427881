# materials/textures.py
import math
from typing import Union
import numpy as np
from core.interval import Interval
from core.vector import Vector3
from materials.perlin import Perlin

UNIT_INTERVAL = Interval(0.0, 1.0)

class Texture:
    """Base class for all textures: maps (u, v, point) to a colour."""
    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        """Sample the texture at the surface coordinates (u, v) of point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.color

class CheckerTexture(Texture):
    """
    Solid 3D checker pattern: alternates between two textures every `scale`
    units along each world axis, whatever the surface parameterisation.
    """
    def __init__(self, scale: float, even: Union[Vector3, Texture], odd: Union[Vector3, Texture]):
        self.inv_scale = 1.0 / scale
        self.even = SolidColor(even) if isinstance(even, Vector3) else even
        self.odd = SolidColor(odd) if isinstance(odd, Vector3) else odd

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        x = math.floor(self.inv_scale * p.x)
        y = math.floor(self.inv_scale * p.y)
        z = math.floor(self.inv_scale * p.z)
        if (x + y + z) % 2 == 0:
            return self.even.value(u, v, p)
        return self.odd.value(u, v, p)

class ImageTexture(Texture):
    """
    Nearest-pixel lookup in an image held as a (height, width, 3) array of
    floats. Row 0 is the top of the image. No gamma conversion is applied.
    """
    def __init__(self, data: np.ndarray):
        data = np.asarray(data, dtype=np.float64)
        if data.ndim != 3 or data.shape[0] == 0 or data.shape[1] == 0 or data.shape[2] < 3:
            raise ValueError(f"Image texture needs a non-empty (height, width, 3) array, got {data.shape}")
        self.data = data
        self.height = data.shape[0]
        self.width = data.shape[1]

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        u = UNIT_INTERVAL.clamp(u)
        v = 1.0 - UNIT_INTERVAL.clamp(v)  # Flip V: image rows run top to bottom

        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        return Vector3(float(color[0]), float(color[1]), float(color[2]))

class NoiseTexture(Texture):
    """
    Marble-like pattern: a sine wave along Z phase-shifted by turbulence.
    """
    def __init__(self, rng, scale: float = 1.0):
        self.noise = Perlin(rng)
        self.scale = scale

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        phase = self.scale * p.z + 10.0 * self.noise.turbulence(p, 7)
        grey = 0.5 * (1.0 + math.sin(phase))
        return Vector3(grey, grey, grey)
