import numpy as np
from numpy import ndarray as NDArray

from .gamma import gamma_encode, np_gamma_encode


def linear_rgb_to_srgb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Gamma-encode linear-light RGB into sRGB."""
    return gamma_encode(r), gamma_encode(g), gamma_encode(b)


def np_linear_rgb_to_srgb(rgb: NDArray) -> NDArray:
    """Vectorized: linear RGB of shape (..., 3) to sRGB."""
    return np_gamma_encode(np.asarray(rgb, dtype=float))
