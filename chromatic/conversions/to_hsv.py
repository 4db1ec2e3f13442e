import numpy as np
from numpy import ndarray as NDArray

from .to_hsl import _rgb_hue


## RGB to HSV

def unit_rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSV.

    Args:
        r, g, b: RGB components in [0, 1]

    Returns:
        Tuple[float, float, float]: (h [0, 360), s [0, 1], v [0, 1])
    """
    max_val = max(r, g, b)
    min_val = min(r, g, b)
    delta = max_val - min_val

    if delta == 0:
        return 0.0, 0.0, max_val

    return _rgb_hue(r, g, b, max_val, delta), delta / max_val, max_val


def np_unit_rgb_to_hsv(rgb: NDArray) -> NDArray:
    """
    Vectorized: RGB of shape (..., 3) to HSV of shape (..., 3).
    """
    rgb = np.asarray(rgb, dtype=float)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    max_val = np.max(rgb, axis=-1)
    min_val = np.min(rgb, axis=-1)
    delta = max_val - min_val

    grey = delta == 0
    safe_delta = np.where(grey, 1.0, delta)

    h = np.where(
        max_val == r,
        60 * (((g - b) / safe_delta) % 6),
        np.where(
            max_val == g,
            60 * ((b - r) / safe_delta + 2),
            60 * ((r - g) / safe_delta + 4),
        ),
    )
    h = np.where(grey, 0.0, h % 360)
    s = np.where(grey, 0.0, delta / np.where(grey, 1.0, max_val))

    return np.stack([h, s, max_val], axis=-1)
