# renderer/tone_mapping.py
import numpy as np
from numba import njit

def to_display(linear: np.ndarray) -> np.ndarray:
    """
    Convert a linear radiance image to 8-bit display values: square-root
    (gamma 2) correction, clamping to [0, 1), then quantisation to 0..255.
    """
    linear = np.ascontiguousarray(linear, dtype=np.float64)
    output = np.empty(linear.shape, dtype=np.uint8)
    _quantize(linear.reshape(-1), output.reshape(-1))
    return output

@njit
def gamma_correct(linear):
    if linear > 0.0:
        return np.sqrt(linear)
    return 0.0

@njit
def _quantize(linear, output):
    for n in range(linear.shape[0]):
        c = gamma_correct(linear[n])
        # Clamp below 1 so that 1.0 maps to 255 rather than 256.
        if c > 0.999:
            c = 0.999
        output[n] = np.uint8(int(c * 256.0))
