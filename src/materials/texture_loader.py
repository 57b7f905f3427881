# materials/texture_loader.py
import os
from PIL import Image
import numpy as np
from materials.textures import ImageTexture

def load_image(image_path: str) -> np.ndarray:
    """
    Load an image file as a (height, width, 3) float array with values in [0, 1].

    Raises:
        FileNotFoundError: If the image file doesn't exist
        ValueError: If the image cannot be decoded
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            # Convert to RGB if necessary
            if img.mode != 'RGB':
                img = img.convert('RGB')
            return np.asarray(img, dtype=np.float64) / 255.0
    except (OSError, SyntaxError) as e:
        raise ValueError(f"Error loading texture {image_path}: {str(e)}") from e

def load_texture(image_path: str) -> ImageTexture:
    """
    Load an image file as a texture.

    Args:
        image_path: Path to the image file

    Returns:
        ImageTexture object
    """
    return ImageTexture(load_image(image_path))

def create_image_material(image_path: str, material_class, **material_params):
    """
    Build `material_class` with the image at image_path as its albedo or
    emission texture; extra keyword arguments go to the material (fuzz=...).
    Loading errors propagate as in load_image().
    """
    return material_class(load_texture(image_path), **material_params)
