# renderer/output.py
import os
import numpy as np
from PIL import Image

def save_image(pixels: np.ndarray, path: str) -> str:
    """
    Write an (height, width, 3) uint8 array to `path`. Pillow picks the file
    format from the extension (.png, .ppm, .jpg, ...).
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    Image.fromarray(np.asarray(pixels, dtype=np.uint8)).save(path)
    return path
