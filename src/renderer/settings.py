# renderer/settings.py
from typing import Optional

# Quality presets: samples per pixel, maximum bounce depth and a scale
# applied to the scene's own image width.
QUALITY_LEVELS = {
    "draft": {"samples": 4, "bounces": 4, "scale": 0.5},
    "balanced": {"samples": 50, "bounces": 20, "scale": 1.0},
    "high_quality": {"samples": 500, "bounces": 50, "scale": 1.0},
}

def resolve_settings(quality: Optional[str] = None, samples: int = None,
                     bounces: int = None, width: int = None, scene_width: int = 400,
                     scene_samples: int = 100, scene_bounces: int = 50) -> dict:
    """
    Pick samples, bounce depth and image width for a render.

    Explicit values win. Without a quality preset the scene's own defaults
    fill the gaps; a preset replaces the scene's samples and bounces and
    scales its width.

    Raises:
        KeyError: If the preset name is unknown
    """
    if quality is None:
        preset = {"samples": scene_samples, "bounces": scene_bounces, "scale": 1.0}
    elif quality in QUALITY_LEVELS:
        preset = QUALITY_LEVELS[quality]
    else:
        raise KeyError(f"Unknown quality level '{quality}', choose from {sorted(QUALITY_LEVELS)}")
    return {
        "samples": samples if samples is not None else preset["samples"],
        "bounces": bounces if bounces is not None else preset["bounces"],
        "width": width if width is not None else max(1, int(scene_width * preset["scale"])),
    }
