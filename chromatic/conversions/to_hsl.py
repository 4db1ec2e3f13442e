import numpy as np
from numpy import ndarray as NDArray

from .numbers import normalize_hue


def _rgb_hue(r: float, g: float, b: float, max_val: float, delta: float) -> float:
    """Hexcone hue in degrees for a non-grey RGB triple."""
    if max_val == r:
        h = 60 * (((g - b) / delta) % 6)
    elif max_val == g:
        h = 60 * ((b - r) / delta + 2)
    else:
        h = 60 * ((r - g) / delta + 4)
    return normalize_hue(h)


## RGB to HSL

def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL.

    Greys (max == min) get hue 0 and saturation 0.

    Args:
        r, g, b: RGB components in [0, 1]

    Returns:
        Tuple[float, float, float]: (h [0, 360), s [0, 1], l [0, 1])
    """
    max_val = max(r, g, b)
    min_val = min(r, g, b)
    delta = max_val - min_val
    l = (max_val + min_val) / 2

    if delta == 0:
        return 0.0, 0.0, l

    s = delta / (1 - abs(2 * l - 1))
    return _rgb_hue(r, g, b, max_val, delta), s, l


def np_unit_rgb_to_hsl(rgb: NDArray) -> NDArray:
    """
    Vectorized: RGB of shape (..., 3) to HSL of shape (..., 3).
    """
    rgb = np.asarray(rgb, dtype=float)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    max_val = np.max(rgb, axis=-1)
    min_val = np.min(rgb, axis=-1)
    delta = max_val - min_val
    l = (max_val + min_val) / 2

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

    denom = 1 - np.abs(2 * l - 1)
    s = np.where(grey, 0.0, delta / np.where(grey, 1.0, denom))

    return np.stack([h, s, l], axis=-1)
