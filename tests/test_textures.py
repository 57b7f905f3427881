"""Unit tests for textures, Perlin noise and image loading."""

import random

import numpy as np
import pytest
from PIL import Image

from core.vector import Vector3
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.perlin import POINT_COUNT, Perlin
from materials.texture_loader import create_image_material, load_image, load_texture
from materials.textures import CheckerTexture, ImageTexture, NoiseTexture, SolidColor

WHITE = Vector3(1.0, 1.0, 1.0)
BLACK = Vector3(0.0, 0.0, 0.0)

RED = [1.0, 0.0, 0.0]
GREEN = [0.0, 1.0, 0.0]
BLUE = [0.0, 0.0, 1.0]
GREY = [0.5, 0.5, 0.5]


def two_by_two():
    """Red top-left, green top-right, blue bottom-left, grey bottom-right."""
    return np.array([[RED, GREEN], [BLUE, GREY]], dtype=np.float64)


class TestSolidAndChecker:
    def test_solid_colour_ignores_inputs(self):
        texture = SolidColor(Vector3(0.1, 0.2, 0.3))
        assert texture.value(0.0, 0.0, Vector3(0, 0, 0)) == Vector3(0.1, 0.2, 0.3)
        assert texture.value(0.7, 0.2, Vector3(9, -4, 2)) == Vector3(0.1, 0.2, 0.3)

    def test_parity_flips_every_scale_step(self):
        checker = CheckerTexture(2.0, WHITE, BLACK)
        for k in range(-4, 4):
            colour = checker.value(0.0, 0.0, Vector3(0.5 + 2.0 * k, 0.5, 0.5))
            assert colour == (WHITE if k % 2 == 0 else BLACK)

    def test_parity_sums_over_axes(self):
        checker = CheckerTexture(1.0, WHITE, BLACK)
        assert checker.value(0, 0, Vector3(0.5, 0.5, 0.5)) == WHITE
        assert checker.value(0, 0, Vector3(1.5, 0.5, 0.5)) == BLACK
        assert checker.value(0, 0, Vector3(1.5, 1.5, 0.5)) == WHITE
        assert checker.value(0, 0, Vector3(-0.5, 0.5, 0.5)) == BLACK

    def test_ignores_surface_coordinates(self):
        checker = CheckerTexture(1.0, WHITE, BLACK)
        p = Vector3(0.5, 0.5, 0.5)
        assert checker.value(0.0, 0.0, p) == checker.value(0.9, 0.3, p)

    def test_nested_textures(self):
        inner = CheckerTexture(0.5, Vector3(0.2, 0.2, 0.2), Vector3(0.8, 0.8, 0.8))
        outer = CheckerTexture(2.0, inner, BLACK)
        assert outer.value(0, 0, Vector3(0.25, 0.25, 0.25)) == Vector3(0.2, 0.2, 0.2)
        assert outer.value(0, 0, Vector3(0.75, 0.25, 0.25)) == Vector3(0.8, 0.8, 0.8)


class TestImageTexture:
    def test_corners(self):
        texture = ImageTexture(two_by_two())
        p = Vector3(0, 0, 0)
        assert tuple(texture.value(0.0, 1.0, p)) == tuple(RED)
        assert tuple(texture.value(0.99, 0.99, p)) == tuple(GREEN)
        assert tuple(texture.value(0.0, 0.0, p)) == tuple(BLUE)
        assert tuple(texture.value(1.0, 0.0, p)) == tuple(GREY)

    def test_coordinates_are_clamped(self):
        texture = ImageTexture(two_by_two())
        p = Vector3(0, 0, 0)
        assert tuple(texture.value(-5.0, 7.0, p)) == tuple(RED)
        assert tuple(texture.value(3.0, -2.0, p)) == tuple(GREY)

    @pytest.mark.parametrize("shape", [(0, 0, 3), (0, 4, 3), (4, 0, 3), (4, 4)])
    def test_invalid_image_raises(self, shape):
        with pytest.raises(ValueError):
            ImageTexture(np.zeros(shape))


class TestPerlin:
    def test_permutations(self):
        noise = Perlin(random.Random(3))
        for perm in (noise.perm_x, noise.perm_y, noise.perm_z):
            assert sorted(perm.tolist()) == list(range(POINT_COUNT))

    def test_gradients_are_unit(self):
        noise = Perlin(random.Random(3))
        norms = np.linalg.norm(noise.gradients, axis=1)
        assert np.allclose(norms, 1.0)

    def test_deterministic_for_same_seed(self):
        a = Perlin(random.Random(42))
        b = Perlin(random.Random(42))
        p = Vector3(1.3, -2.7, 0.45)
        assert a.noise(p) == a.noise(p)
        assert a.noise(p) == b.noise(p)
        assert a.turbulence(p) == b.turbulence(p)

    def test_different_seeds_differ(self):
        a = Perlin(random.Random(1))
        b = Perlin(random.Random(2))
        points = [Vector3(0.3 * i, 0.7 * i, 0.11 * i + 0.5) for i in range(1, 20)]
        assert any(a.noise(p) != b.noise(p) for p in points)

    def test_zero_on_lattice_points(self):
        noise = Perlin(random.Random(5))
        for p in (Vector3(0, 0, 0), Vector3(3, -2, 7), Vector3(-100, 50, 1)):
            assert noise.noise(p) == pytest.approx(0.0, abs=1e-12)

    def test_bounded_and_smooth(self):
        noise = Perlin(random.Random(8))
        rng = random.Random(9)
        for _ in range(200):
            p = Vector3(rng.uniform(-20, 20), rng.uniform(-20, 20), rng.uniform(-20, 20))
            n = noise.noise(p)
            assert -2.0 < n < 2.0
            nearby = noise.noise(Vector3(p.x + 1e-6, p.y, p.z))
            assert abs(n - nearby) < 1e-4

    def test_turbulence_is_non_negative(self):
        noise = Perlin(random.Random(8))
        rng = random.Random(10)
        for _ in range(100):
            p = Vector3(rng.uniform(-5, 5), rng.uniform(-5, 5), rng.uniform(-5, 5))
            assert noise.turbulence(p) >= 0.0


class TestNoiseTexture:
    def test_grey_values_in_unit_range(self):
        texture = NoiseTexture(random.Random(4), scale=4.0)
        rng = random.Random(5)
        for _ in range(100):
            p = Vector3(rng.uniform(-3, 3), rng.uniform(-3, 3), rng.uniform(-3, 3))
            colour = texture.value(0.0, 0.0, p)
            assert colour.x == colour.y == colour.z
            assert 0.0 <= colour.x <= 1.0

    def test_same_seed_same_pattern(self):
        a = NoiseTexture(random.Random(4), scale=4.0)
        b = NoiseTexture(random.Random(4), scale=4.0)
        p = Vector3(0.2, 1.4, -0.6)
        assert a.value(0, 0, p) == b.value(0, 0, p)


class TestTextureLoader:
    def test_load_image(self, tmp_path):
        path = tmp_path / "tile.png"
        pixels = np.array([[[255, 0, 0], [0, 255, 0]],
                           [[0, 0, 255], [255, 255, 255]]], dtype=np.uint8)
        Image.fromarray(pixels).save(path)

        data = load_image(str(path))
        assert data.shape == (2, 2, 3)
        assert data[0, 0].tolist() == [1.0, 0.0, 0.0]
        assert data[1, 1].tolist() == [1.0, 1.0, 1.0]

    def test_greyscale_is_expanded_to_rgb(self, tmp_path):
        path = tmp_path / "grey.png"
        Image.fromarray(np.full((3, 4), 51, dtype=np.uint8)).save(path)
        data = load_image(str(path))
        assert data.shape == (3, 4, 3)
        assert data[0, 0].tolist() == pytest.approx([0.2, 0.2, 0.2])

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_image(str(tmp_path / "nope.png"))

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "broken.jpg"
        path.write_bytes(b"this is not an image")
        with pytest.raises(ValueError):
            load_texture(str(path))

    def test_create_image_material(self, tmp_path):
        path = tmp_path / "tile.png"
        Image.fromarray(np.zeros((2, 2, 3), dtype=np.uint8)).save(path)

        diffuse = create_image_material(str(path), Lambertian)
        assert isinstance(diffuse.texture, ImageTexture)
        shiny = create_image_material(str(path), Metal, fuzz=0.3)
        assert shiny.fuzz == pytest.approx(0.3)
