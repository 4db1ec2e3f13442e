import numpy as np
from numpy import ndarray as NDArray

# Rec. 709 luma weights, the Y row of RGB_TO_XYZ rounded to four places
LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)


def rgb_to_grey(r: float, g: float, b: float) -> float:
    """Perceptual luma of a linear RGB triple."""
    return float(LUMA_WEIGHTS @ np.array([r, g, b], dtype=np.float64))


def np_rgb_to_grey(rgb: NDArray) -> NDArray:
    """Vectorized: linear RGB of shape (..., 3) to grey of shape (..., 1)."""
    rgb = np.asarray(rgb, dtype=float)
    return (rgb @ LUMA_WEIGHTS)[..., None]


def xyz_to_grey(x: float, y: float, z: float) -> float:
    """Grey level of an XYZ triple is its luminance Y."""
    return y


def np_xyz_to_grey(xyz: NDArray) -> NDArray:
    xyz = np.asarray(xyz, dtype=float)
    return xyz[..., 1:2].copy()
