"""Tests for the built-in scene library and the command line entry point."""

import random

import numpy as np
import pytest
from PIL import Image

from main import main, parse_args
from materials.textures import ImageTexture
from renderer.raytracer import Renderer
from scenes.library import SCENES, Scene, earth, random_colour_light, random_colour_sq

SELF_CONTAINED = sorted(name for name in SCENES if name != "earth")


def write_earth_map(directory):
    pixels = np.zeros((8, 16, 3), dtype=np.uint8)
    pixels[:, :8] = (20, 60, 200)
    pixels[:, 8:] = (40, 160, 40)
    Image.fromarray(pixels).save(directory / "earthmap.jpg")


class RecordingRenderer(Renderer):
    """Keeps the settings main() passes in and skips the actual render."""
    created = []

    def __init__(self, camera, world, **kwargs):
        super().__init__(camera, world, **kwargs)
        RecordingRenderer.created.append(self)

    def render(self):
        return np.zeros((self.camera.image_height, self.camera.image_width, 3))


class TestSceneLibrary:
    @pytest.mark.parametrize("name", SELF_CONTAINED)
    def test_builds(self, name):
        scene = SCENES[name](random.Random(1))
        assert isinstance(scene, Scene)
        assert not scene.world.bounding_box().is_empty()
        camera = scene.build_camera(16)
        assert camera.image_width == 16
        assert camera.image_height >= 1

    @pytest.mark.parametrize("name", ["quads", "cornell_box", "simple_light"])
    def test_tiny_render(self, name):
        scene = SCENES[name](random.Random(2))
        renderer = Renderer(scene.build_camera(6), scene.world, samples_per_pixel=1,
                            max_depth=3, background=scene.background, seed=2, verbose=False)
        image = renderer.render()
        assert np.all(np.isfinite(image))
        assert np.all(image >= 0.0)

    def test_image_width_defaults_to_camera_setting(self):
        scene = SCENES["cornell_box"](random.Random(1))
        assert scene.image_width == scene.camera_params["image_width"]
        assert scene.build_camera().image_width == scene.image_width

    def test_earth_needs_its_texture(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            earth(random.Random(1), str(tmp_path))

    def test_earth_with_texture(self, tmp_path):
        write_earth_map(tmp_path)
        scene = earth(random.Random(1), str(tmp_path))
        assert not scene.world.bounding_box().is_empty()
        assert isinstance(scene.world.object.material.texture, ImageTexture)

    def test_random_colours(self):
        rng = random.Random(3)
        for _ in range(100):
            light = random_colour_light(rng)
            assert all(0.5 <= c < 1.0 for c in light)
            saturated = random_colour_sq(rng)
            assert all(0.0 <= c < 1.0 for c in saturated)


class TestCommandLine:
    def test_defaults(self):
        args = parse_args([])
        assert args.scene == "bouncing_spheres"
        assert args.quality is None
        assert args.workers == 1
        assert args.output == "image.png"
        assert args.width is None and args.samples is None and args.depth is None
        assert not args.preview and not args.quiet

    def test_unknown_scene_is_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--scene", "teapot"])

    def test_renders_to_file(self, tmp_path):
        output = tmp_path / "quads.png"
        status = main(["--scene", "quads", "--width", "8", "--samples", "1", "--depth", "2",
                       "--seed", "3", "--output", str(output), "--quiet"])
        assert status == 0
        with Image.open(output) as img:
            assert img.size == (8, 8)

    def test_same_seed_same_file(self, tmp_path):
        common = ["--scene", "quads", "--width", "6", "--samples", "2", "--depth", "3",
                  "--seed", "11", "--quiet"]
        main(common + ["--output", str(tmp_path / "a.png")])
        main(common + ["--output", str(tmp_path / "b.png")])
        with Image.open(tmp_path / "a.png") as a, Image.open(tmp_path / "b.png") as b:
            assert np.array_equal(np.asarray(a), np.asarray(b))

    def test_missing_asset_returns_error(self, tmp_path, capsys):
        status = main(["--scene", "earth", "--assets", str(tmp_path), "--quiet",
                       "--output", str(tmp_path / "earth.png")])
        assert status == 1
        assert "Cannot build scene 'earth'" in capsys.readouterr().err
        assert not (tmp_path / "earth.png").exists()

    def test_verbose_run_reports_progress(self, tmp_path, capsys):
        main(["--scene", "quads", "--width", "4", "--samples", "1", "--depth", "1",
              "--seed", "1", "--output", str(tmp_path / "q.png")])
        out = capsys.readouterr().out
        assert "Scene: quads" in out
        assert "Render resolution: 4x4" in out

    def test_scene_settings_used_without_preset(self, tmp_path, monkeypatch):
        monkeypatch.setattr("main.Renderer", RecordingRenderer)
        monkeypatch.setattr(RecordingRenderer, "created", [])
        status = main(["--scene", "cornell_box", "--width", "4", "--quiet",
                       "--output", str(tmp_path / "cornell.png")])
        assert status == 0
        renderer = RecordingRenderer.created[0]
        assert renderer.samples_per_pixel == 200
        assert renderer.max_depth == 50

    def test_preset_overrides_scene_settings(self, tmp_path, monkeypatch):
        monkeypatch.setattr("main.Renderer", RecordingRenderer)
        monkeypatch.setattr(RecordingRenderer, "created", [])
        main(["--scene", "cornell_box", "--quality", "draft", "--quiet",
              "--output", str(tmp_path / "cornell.png")])
        renderer = RecordingRenderer.created[0]
        assert renderer.samples_per_pixel == 4
        assert renderer.max_depth == 4
        assert renderer.camera.image_width == 300
