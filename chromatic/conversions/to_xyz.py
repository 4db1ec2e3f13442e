import numpy as np
from numpy import ndarray as NDArray

from ..types.array_types import Matrix3x3

from .white_points import D65, WhitePoint

# Linear sRGB (D65 primaries) -> CIE XYZ
RGB_TO_XYZ: Matrix3x3 = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

# CIE Lab piecewise constants
LAB_DELTA = 6.0 / 29.0
LAB_DELTA_SQUARED_X3 = 3.0 * LAB_DELTA ** 2
LAB_OFFSET = 4.0 / 29.0


## Linear RGB to XYZ

def linear_rgb_to_xyz(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert linear-light RGB to CIE XYZ.

    Args:
        r, g, b: Linear RGB components in [0, 1]

    Returns:
        Tuple[float, float, float]: (X, Y, Z), white maps to the D65 white point
    """
    x, y, z = RGB_TO_XYZ @ np.array([r, g, b], dtype=np.float64)
    return float(x), float(y), float(z)


def np_linear_rgb_to_xyz(rgb: NDArray) -> NDArray:
    """
    Vectorized: convert linear RGB of shape (..., 3) to XYZ of shape (..., 3).
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    return rgb @ RGB_TO_XYZ.T


## Lab to XYZ

def lab_f_inverse(t: float) -> float:
    """Inverse of the CIE Lab companding function."""
    if t > LAB_DELTA:
        return t ** 3
    return LAB_DELTA_SQUARED_X3 * (t - LAB_OFFSET)


def lab_to_xyz(l: float, a: float, b: float, white: WhitePoint = D65) -> tuple[float, float, float]:
    """
    Convert CIE Lab to XYZ relative to ``white``.

    Args:
        l: Lightness L* in [0, 100]
        a: a* in [-128, 127]
        b: b* in [-128, 127]
        white: Reference white (Xn, Yn, Zn)

    Returns:
        Tuple[float, float, float]: (X, Y, Z)
    """
    f_y = (l + 16.0) / 116.0
    f_x = f_y + a / 500.0
    f_z = f_y - b / 200.0

    xn, yn, zn = white
    return (
        lab_f_inverse(f_x) * xn,
        lab_f_inverse(f_y) * yn,
        lab_f_inverse(f_z) * zn,
    )


def np_lab_to_xyz(lab: NDArray, white: WhitePoint = D65) -> NDArray:
    """
    Vectorized: Lab of shape (..., 3) to XYZ of shape (..., 3).
    """
    lab = np.asarray(lab, dtype=np.float64)
    f_y = (lab[..., 0] + 16.0) / 116.0
    f = np.stack([f_y + lab[..., 1] / 500.0, f_y, f_y - lab[..., 2] / 200.0], axis=-1)
    t = np.where(f > LAB_DELTA, f ** 3, LAB_DELTA_SQUARED_X3 * (f - LAB_OFFSET))
    return t * np.asarray(white, dtype=np.float64)
