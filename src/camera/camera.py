# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray
from core.utils import degrees_to_radians, random_in_unit_disk

class Camera:
    """
    Thin-lens camera looking from `look_from` towards `look_at`.

    vfov is the vertical field of view in degrees. defocus_angle (degrees) is
    the cone angle subtended by the lens from the focus plane; 0 gives a
    pinhole camera with everything in focus.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vup: Vector3 = None,
                 vfov: float = 90.0, aspect_ratio: float = 1.0, image_width: int = 100,
                 defocus_angle: float = 0.0, focus_dist: float = 10.0):
        self.look_from = look_from
        self.look_at = look_at
        self.vup = vup if vup is not None else Vector3(0, 1, 0)
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.image_width = image_width
        self.defocus_angle = defocus_angle
        self.focus_dist = focus_dist
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        self.image_height = max(1, int(self.image_width / self.aspect_ratio))
        self.center = self.look_from

        # Viewport dimensions on the focus plane
        h = math.tan(degrees_to_radians(self.vfov) / 2)
        viewport_height = 2.0 * h * self.focus_dist
        viewport_width = viewport_height * (self.image_width / self.image_height)

        # Orthonormal basis: w points backwards, u right, v up
        self.w = (self.look_from - self.look_at).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Image rows run downwards, so the vertical edge points along -v
        viewport_u = self.u * viewport_width
        viewport_v = -self.v * viewport_height

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (self.center -
                               self.w * self.focus_dist -
                               viewport_u * 0.5 -
                               viewport_v * 0.5)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        self.defocus_radius = self.focus_dist * math.tan(degrees_to_radians(self.defocus_angle / 2))
        self.defocus_disk_u = self.u * self.defocus_radius
        self.defocus_disk_v = self.v * self.defocus_radius

    def get_ray(self, i: int, j: int, rng) -> Ray:
        """
        Generates a ray through a random point of pixel (i, j), leaving a random
        point of the lens at a random time in [0, 1).
        """
        offset_x = rng.random() - 0.5
        offset_y = rng.random() - 0.5
        pixel_sample = (self.pixel00_loc +
                        self.pixel_delta_u * (i + offset_x) +
                        self.pixel_delta_v * (j + offset_y))

        if self.defocus_angle <= 0:
            ray_origin = self.center
        else:
            ray_origin = self.defocus_disk_sample(rng)

        return Ray.between(ray_origin, pixel_sample, rng.random())

    def defocus_disk_sample(self, rng) -> Vector3:
        """Random point on the lens disk around the camera center."""
        p = random_in_unit_disk(rng)
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y
