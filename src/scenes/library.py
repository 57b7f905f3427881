# scenes/library.py
import os
from typing import Callable, Dict, Optional
from camera.camera import Camera
from core.vector import Vector3
from geometry.hittable import Hittable
from geometry.quad import Quad, make_box
from geometry.sphere import Sphere
from geometry.transforms import Moving, RotateY, Translate
from geometry.volume import ConstantMedium
from geometry.world import HittableList
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.texture_loader import create_image_material
from materials.textures import CheckerTexture, NoiseTexture

SKY = Vector3(0.70, 0.80, 1.00)
BLACK = Vector3(0.0, 0.0, 0.0)

class Scene:
    """
    A world ready to render plus the camera and render defaults that frame it.
    """
    def __init__(self, world: Hittable, camera_params: dict, background: Vector3 = SKY,
                 samples_per_pixel: int = 100, max_depth: int = 50):
        self.world = world
        self.camera_params = camera_params
        self.background = background
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth

    @property
    def image_width(self) -> int:
        return self.camera_params.get("image_width", 400)

    def build_camera(self, image_width: Optional[int] = None) -> Camera:
        params = dict(self.camera_params)
        if image_width is not None:
            params["image_width"] = image_width
        return Camera(**params)

def random_colour_light(rng) -> Vector3:
    """Random pale colour, each channel in [0.5, 1)."""
    return Vector3((1.0 + rng.random()) * 0.5,
                   (1.0 + rng.random()) * 0.5,
                   (1.0 + rng.random()) * 0.5)

def random_colour_sq(rng) -> Vector3:
    """Random saturated colour, each channel a product of two uniforms."""
    return Vector3(rng.random() * rng.random(),
                   rng.random() * rng.random(),
                   rng.random() * rng.random())

def bouncing_spheres(rng, assets_dir: str = "assets") -> Scene:
    world = HittableList()

    checker = CheckerTexture(0.32, Vector3(0.2, 0.3, 0.1), Vector3(0.9, 0.9, 0.9))
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(checker)))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                # Diffuse spheres bounce upwards during the exposure
                sphere = Sphere(center, 0.2, Lambertian(random_colour_sq(rng)))
                world.add(Moving(sphere, Vector3(0, rng.uniform(0, 0.5), 0)))
            elif choose_mat < 0.95:
                world.add(Sphere(center, 0.2, Metal(random_colour_light(rng), rng.uniform(0, 0.5))))
            else:
                world.add(Sphere(center, 0.2, Dielectric(1.5)))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, Metal(Vector3(0.7, 0.6, 0.5), 0.0)))

    camera = dict(aspect_ratio=16.0 / 9.0, image_width=400, vfov=20,
                  look_from=Vector3(13, 2, 3), look_at=Vector3(0, 0, 0), vup=Vector3(0, 1, 0),
                  defocus_angle=0.6, focus_dist=10.0)
    return Scene(world.build_bvh(), camera, SKY)

def checkered_spheres(rng, assets_dir: str = "assets") -> Scene:
    world = HittableList()
    checker = CheckerTexture(0.32, Vector3(0.2, 0.3, 0.1), Vector3(0.9, 0.9, 0.9))
    world.add(Sphere(Vector3(0, -10, 0), 10, Lambertian(checker)))
    world.add(Sphere(Vector3(0, 10, 0), 10, Lambertian(checker)))

    camera = dict(aspect_ratio=16.0 / 9.0, image_width=400, vfov=20,
                  look_from=Vector3(13, 2, 3), look_at=Vector3(0, 0, 0))
    return Scene(world.build_bvh(), camera, SKY)

def earth(rng, assets_dir: str = "assets") -> Scene:
    surface = create_image_material(os.path.join(assets_dir, "earthmap.jpg"), Lambertian)
    globe = Sphere(Vector3(0, 0, 0), 2, surface)

    camera = dict(aspect_ratio=16.0 / 9.0, image_width=400, vfov=20,
                  look_from=Vector3(0, 0, 12), look_at=Vector3(0, 0, 0))
    return Scene(HittableList([globe]).build_bvh(), camera, SKY)

def perlin_spheres(rng, assets_dir: str = "assets") -> Scene:
    world = HittableList()
    marble = NoiseTexture(rng, 4)
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(marble)))
    world.add(Sphere(Vector3(0, 2, 0), 2, Lambertian(marble)))

    camera = dict(aspect_ratio=16.0 / 9.0, image_width=400, vfov=20,
                  look_from=Vector3(13, 2, 3), look_at=Vector3(0, 0, 0))
    return Scene(world.build_bvh(), camera, SKY)

def quads(rng, assets_dir: str = "assets") -> Scene:
    world = HittableList()

    left_red = Lambertian(Vector3(1.0, 0.2, 0.2))
    back_green = Lambertian(Vector3(0.2, 1.0, 0.2))
    right_blue = Lambertian(Vector3(0.2, 0.2, 1.0))
    upper_orange = Lambertian(Vector3(1.0, 0.5, 0.0))
    lower_teal = Lambertian(Vector3(0.2, 0.8, 0.8))

    world.add(Quad(Vector3(-3, -2, 5), Vector3(0, 0, -4), Vector3(0, 4, 0), left_red))
    world.add(Quad(Vector3(-2, -2, 0), Vector3(4, 0, 0), Vector3(0, 4, 0), back_green))
    world.add(Quad(Vector3(3, -2, 1), Vector3(0, 0, 4), Vector3(0, 4, 0), right_blue))
    world.add(Quad(Vector3(-2, 3, 1), Vector3(4, 0, 0), Vector3(0, 0, 4), upper_orange))
    world.add(Quad(Vector3(-2, -3, 5), Vector3(4, 0, 0), Vector3(0, 0, -4), lower_teal))

    camera = dict(aspect_ratio=1.0, image_width=400, vfov=80,
                  look_from=Vector3(0, 0, 9), look_at=Vector3(0, 0, 0))
    return Scene(world.build_bvh(), camera, SKY)

def simple_light(rng, assets_dir: str = "assets") -> Scene:
    world = HittableList()
    marble = NoiseTexture(rng, 4)
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(marble)))
    world.add(Sphere(Vector3(0, 2, 0), 2, Lambertian(marble)))

    light = DiffuseLight(Vector3(4, 4, 4))
    world.add(Sphere(Vector3(0, 7, 0), 2, light))
    world.add(Quad(Vector3(3, 1, -2), Vector3(2, 0, 0), Vector3(0, 2, 0), light))

    camera = dict(aspect_ratio=16.0 / 9.0, image_width=400, vfov=20,
                  look_from=Vector3(26, 3, 6), look_at=Vector3(0, 2, 0))
    return Scene(world.build_bvh(), camera, BLACK)

def _cornell_walls(world: HittableList) -> Lambertian:
    """Adds the five walls of the 555-unit Cornell box; returns the white material."""
    red = Lambertian(Vector3(0.65, 0.05, 0.05))
    white = Lambertian(Vector3(0.73, 0.73, 0.73))
    green = Lambertian(Vector3(0.12, 0.45, 0.15))

    world.add(Quad(Vector3(555, 0, 0), Vector3(0, 555, 0), Vector3(0, 0, 555), green))
    world.add(Quad(Vector3(0, 0, 0), Vector3(0, 555, 0), Vector3(0, 0, 555), red))
    world.add(Quad(Vector3(0, 0, 0), Vector3(555, 0, 0), Vector3(0, 0, 555), white))
    world.add(Quad(Vector3(555, 555, 555), Vector3(-555, 0, 0), Vector3(0, 0, -555), white))
    world.add(Quad(Vector3(0, 0, 555), Vector3(555, 0, 0), Vector3(0, 555, 0), white))
    return white

def _cornell_camera() -> dict:
    return dict(aspect_ratio=1.0, image_width=600, vfov=40,
                look_from=Vector3(278, 278, -800), look_at=Vector3(278, 278, 0))

def cornell_box(rng, assets_dir: str = "assets") -> Scene:
    world = HittableList()
    white = _cornell_walls(world)
    light = DiffuseLight(Vector3(15, 15, 15))
    world.add(Quad(Vector3(343, 554, 332), Vector3(-130, 0, 0), Vector3(0, 0, -105), light))

    box1 = make_box(Vector3(0, 0, 0), Vector3(165, 330, 165), white)
    world.add(Translate(RotateY(box1, 15), Vector3(265, 0, 295)))

    box2 = make_box(Vector3(0, 0, 0), Vector3(165, 165, 165), white)
    world.add(Translate(RotateY(box2, -18), Vector3(130, 0, 65)))

    return Scene(world.build_bvh(), _cornell_camera(), BLACK, samples_per_pixel=200)

def cornell_smoke(rng, assets_dir: str = "assets") -> Scene:
    world = HittableList()
    white = _cornell_walls(world)
    light = DiffuseLight(Vector3(7, 7, 7))
    world.add(Quad(Vector3(113, 554, 127), Vector3(330, 0, 0), Vector3(0, 0, 305), light))

    box1 = Translate(RotateY(make_box(Vector3(0, 0, 0), Vector3(165, 330, 165), white), 15),
                     Vector3(265, 0, 295))
    box2 = Translate(RotateY(make_box(Vector3(0, 0, 0), Vector3(165, 165, 165), white), -18),
                     Vector3(130, 0, 65))

    world.add(ConstantMedium(box1, 0.01, Vector3(0, 0, 0)))
    world.add(ConstantMedium(box2, 0.01, Vector3(1, 1, 1)))

    return Scene(world.build_bvh(), _cornell_camera(), BLACK, samples_per_pixel=200)

def final_scene(rng, assets_dir: str = "assets") -> Scene:
    boxes1 = HittableList()
    ground = Lambertian(Vector3(0.48, 0.83, 0.53))
    boxes_per_side = 20
    for i in range(boxes_per_side):
        for j in range(boxes_per_side):
            w = 100.0
            x0 = -1000.0 + i * w
            z0 = -1000.0 + j * w
            y1 = rng.uniform(1, 101)
            boxes1.add(make_box(Vector3(x0, 0.0, z0), Vector3(x0 + w, y1, z0 + w), ground))

    world = HittableList()
    world.add(boxes1.build_bvh())

    light = DiffuseLight(Vector3(7, 7, 7))
    world.add(Quad(Vector3(123, 554, 147), Vector3(300, 0, 0), Vector3(0, 0, 265), light))

    moving_material = Lambertian(Vector3(0.7, 0.3, 0.1))
    world.add(Moving(Sphere(Vector3(400, 400, 200), 50, moving_material), Vector3(30, 0, 0)))

    world.add(Sphere(Vector3(260, 150, 45), 50, Dielectric(1.5)))
    world.add(Sphere(Vector3(0, 150, 145), 50, Metal(Vector3(0.8, 0.8, 0.9), 1.0)))

    # Glass shell filled with blue fog, then a thin mist over everything
    boundary = Sphere(Vector3(360, 150, 145), 70, Dielectric(1.5))
    world.add(boundary)
    world.add(ConstantMedium(boundary, 0.2, Vector3(0.2, 0.4, 0.9)))
    mist = Sphere(Vector3(0, 0, 0), 5000, Dielectric(1.5))
    world.add(ConstantMedium(mist, 0.0001, Vector3(1, 1, 1)))

    world.add(Sphere(Vector3(220, 280, 300), 80, Lambertian(NoiseTexture(rng, 0.2))))

    white = Lambertian(Vector3(0.73, 0.73, 0.73))
    cluster = HittableList()
    for _ in range(1000):
        cluster.add(Sphere(Vector3(rng.uniform(0, 165), rng.uniform(0, 165), rng.uniform(0, 165)),
                           10, white))
    world.add(Translate(RotateY(cluster.build_bvh(), 15), Vector3(-100, 270, 395)))

    camera = dict(aspect_ratio=1.0, image_width=800, vfov=40,
                  look_from=Vector3(478, 278, -600), look_at=Vector3(278, 278, 0))
    return Scene(world.build_bvh(), camera, BLACK, samples_per_pixel=250, max_depth=40)

SCENES: Dict[str, Callable[..., Scene]] = {
    "bouncing_spheres": bouncing_spheres,
    "checkered_spheres": checkered_spheres,
    "earth": earth,
    "perlin_spheres": perlin_spheres,
    "quads": quads,
    "simple_light": simple_light,
    "cornell_box": cornell_box,
    "cornell_smoke": cornell_smoke,
    "final_scene": final_scene,
}
