import numpy as np
from boundednumbers.functions import clamp
from boundednumbers.np_functions import clamp as np_clamp
from numpy import ndarray as NDArray

from .to_xyz import LAB_DELTA, LAB_DELTA_SQUARED_X3, LAB_OFFSET
from .white_points import D65, WhitePoint

LAB_EPSILON = LAB_DELTA ** 3
CHROMA_MIN = -128.0
CHROMA_MAX = 127.0


def lab_f(t: float) -> float:
    """CIE Lab companding function: cube root above (6/29)^3, linear below."""
    if t > LAB_EPSILON:
        return t ** (1.0 / 3.0)
    return t / LAB_DELTA_SQUARED_X3 + LAB_OFFSET


def xyz_to_lab(x: float, y: float, z: float, white: WhitePoint = D65) -> tuple[float, float, float]:
    """
    Convert CIE XYZ to Lab relative to ``white``.

    a* and b* are clamped into [-128, 127] after computation.

    Args:
        x, y, z: XYZ components
        white: Reference white (Xn, Yn, Zn)

    Returns:
        Tuple[float, float, float]: (L* [0, 100], a*, b*)
    """
    xn, yn, zn = white
    f_x = lab_f(x / xn)
    f_y = lab_f(y / yn)
    f_z = lab_f(z / zn)

    lightness = 116.0 * f_y - 16.0
    a_star = clamp(500.0 * (f_x - f_y), CHROMA_MIN, CHROMA_MAX)
    b_star = clamp(200.0 * (f_y - f_z), CHROMA_MIN, CHROMA_MAX)
    return lightness, a_star, b_star


def np_xyz_to_lab(xyz: NDArray, white: WhitePoint = D65) -> NDArray:
    """
    Vectorized: XYZ of shape (..., 3) to Lab of shape (..., 3).
    """
    t = np.asarray(xyz, dtype=np.float64) / np.asarray(white, dtype=np.float64)
    f = np.where(t > LAB_EPSILON, np.cbrt(t), t / LAB_DELTA_SQUARED_X3 + LAB_OFFSET)
    f_x, f_y, f_z = f[..., 0], f[..., 1], f[..., 2]

    lightness = 116.0 * f_y - 16.0
    a_star = np_clamp(500.0 * (f_x - f_y), CHROMA_MIN, CHROMA_MAX)
    b_star = np_clamp(200.0 * (f_y - f_z), CHROMA_MIN, CHROMA_MAX)
    return np.stack([lightness, a_star, b_star], axis=-1)
