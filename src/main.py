# main.py
"""Render one of the built-in scenes to an image file.

Usage:
    python src/main.py --scene cornell_box --quality balanced --output cornell.png

Without --quality the scene's own samples, depth and width are used.
Explicit --width/--samples/--depth override both.
"""
import argparse
import random
import sys
import time
from typing import List, Optional
from renderer.output import save_image
from renderer.raytracer import Renderer
from renderer.settings import QUALITY_LEVELS, resolve_settings
from renderer.tone_mapping import to_display
from scenes.library import SCENES

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Offline Monte Carlo path tracer.")
    parser.add_argument("--scene", choices=sorted(SCENES), default="bouncing_spheres",
                        help="Scene to render (default: bouncing_spheres)")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default=None,
                        help="Quality preset (default: the scene's own settings)")
    parser.add_argument("--width", type=int, default=None, help="Image width in pixels")
    parser.add_argument("--samples", type=int, default=None, help="Samples per pixel")
    parser.add_argument("--depth", type=int, default=None, help="Maximum bounce depth")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed; the same seed reproduces the same image")
    parser.add_argument("--workers", type=int, default=1,
                        help="Worker processes, 0 for one per CPU (default: 1)")
    parser.add_argument("--output", default="image.png", help="Output file (default: image.png)")
    parser.add_argument("--assets", default="assets",
                        help="Directory holding texture images (default: assets)")
    parser.add_argument("--preview", action="store_true",
                        help="Show the finished image in a window")
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")
    return parser.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    verbose = not args.quiet

    scene_rng = random.Random(args.seed)
    try:
        scene = SCENES[args.scene](scene_rng, args.assets)
    except (FileNotFoundError, ValueError) as e:
        print(f"Cannot build scene '{args.scene}': {e}", file=sys.stderr)
        return 1

    settings = resolve_settings(args.quality, args.samples, args.depth, args.width,
                                scene_width=scene.image_width,
                                scene_samples=scene.samples_per_pixel,
                                scene_bounces=scene.max_depth)
    camera = scene.build_camera(settings["width"])
    renderer = Renderer(
        camera,
        scene.world,
        samples_per_pixel=settings["samples"],
        max_depth=settings["bounces"],
        background=scene.background,
        seed=args.seed,
        workers=args.workers,
        verbose=verbose,
    )

    if verbose:
        print(f"Scene: {args.scene}")
        print(f"Render resolution: {camera.image_width}x{camera.image_height}")
        print(f"Samples per pixel: {renderer.samples_per_pixel}")
        print(f"Max bounces: {renderer.max_depth}")
        print(f"Workers: {renderer.workers}, seed: {renderer.seed}")

    start = time.time()
    pixels = to_display(renderer.render())
    save_image(pixels, args.output)
    if verbose:
        print(f"Wrote {args.output} in {time.time() - start:.1f}s")

    if args.preview:
        from renderer.preview import show_image
        show_image(pixels, caption=f"{args.scene} - {args.output}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
