import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.array_types import Matrix3x3

from .gamma import gamma_decode, np_gamma_decode
from .numbers import normalize_hue

# CIE XYZ -> linear sRGB (D65 primaries), inverse of RGB_TO_XYZ
XYZ_TO_RGB: Matrix3x3 = np.array([
    [3.2404542, -1.5371385, -0.4985314],
    [-0.9692660, 1.8760108, 0.0415560],
    [0.0556434, -0.2040259, 1.0572252],
], dtype=np.float64)


def _hue_sector_to_rgb(h: float, chroma: float, m: float) -> tuple[float, float, float]:
    """
    Place ``chroma`` on the RGB hexcone for hue ``h`` and lift by ``m``.

    Args:
        h: Hue in degrees [0, 360)
        chroma: Max - min of the resulting RGB channels
        m: Min of the resulting RGB channels
    """
    h = normalize_hue(h)
    x = chroma * (1 - abs((h / 60) % 2 - 1))

    hue_section = int(math.floor(h / 60))

    if hue_section == 0:
        r, g, b = chroma, x, 0.0
    elif hue_section == 1:
        r, g, b = x, chroma, 0.0
    elif hue_section == 2:
        r, g, b = 0.0, chroma, x
    elif hue_section == 3:
        r, g, b = 0.0, x, chroma
    elif hue_section == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return r + m, g + m, b + m


## HSL to RGB

def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    chroma = (1 - abs(2 * l - 1)) * s
    return _hue_sector_to_rgb(h, chroma, l - chroma / 2)


## HSV to RGB

def hsv_to_unit_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to RGB.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    chroma = v * s
    return _hue_sector_to_rgb(h, chroma, v - chroma)


## sRGB to linear RGB

def srgb_to_linear_rgb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Decode gamma-encoded sRGB into linear-light RGB."""
    return gamma_decode(r), gamma_decode(g), gamma_decode(b)


def np_srgb_to_linear_rgb(srgb: NDArray) -> NDArray:
    """Vectorized: sRGB of shape (..., 3) to linear RGB."""
    return np_gamma_decode(srgb)


## XYZ to linear RGB

def xyz_to_linear_rgb(x: float, y: float, z: float) -> tuple[float, float, float]:
    """
    Convert CIE XYZ to linear RGB.

    The result may leave [0, 1] for colours outside the sRGB gamut; callers
    fit it into the target domain.
    """
    r, g, b = XYZ_TO_RGB @ np.array([x, y, z], dtype=np.float64)
    return float(r), float(g), float(b)


def np_xyz_to_linear_rgb(xyz: NDArray) -> NDArray:
    """Vectorized: XYZ of shape (..., 3) to linear RGB of shape (..., 3)."""
    xyz = np.asarray(xyz, dtype=np.float64)
    return xyz @ XYZ_TO_RGB.T


## Grey to RGB

def grey_to_rgb(grey: float) -> tuple[float, float, float]:
    return grey, grey, grey


def np_grey_to_rgb(grey: NDArray) -> NDArray:
    """Vectorized: grey of shape (..., 1) to RGB of shape (..., 3)."""
    grey = np.asarray(grey, dtype=float)
    return np.repeat(grey[..., :1], 3, axis=-1)


def _np_hue_sector_to_rgb(h: NDArray, chroma: NDArray, m: NDArray) -> NDArray:
    h = np.mod(h, 360)
    x = chroma * (1 - np.abs((h / 60) % 2 - 1))
    zero = np.zeros_like(chroma)

    hue_section = np.clip(np.floor(h / 60).astype(int), 0, 5)
    sections = [hue_section == i for i in range(6)]

    r = np.select(sections, [chroma, x, zero, zero, x, chroma])
    g = np.select(sections, [x, chroma, chroma, x, zero, zero])
    b = np.select(sections, [zero, zero, x, chroma, chroma, x])

    return np.stack([r + m, g + m, b + m], axis=-1)


def np_hsl_to_unit_rgb(hsl: NDArray) -> NDArray:
    """
    Vectorized: HSL of shape (..., 3) to RGB of shape (..., 3).
    """
    hsl = np.asarray(hsl, dtype=float)
    h, s, l = hsl[..., 0], hsl[..., 1], hsl[..., 2]
    chroma = (1 - np.abs(2 * l - 1)) * s
    return _np_hue_sector_to_rgb(h, chroma, l - chroma / 2)


def np_hsv_to_unit_rgb(hsv: NDArray) -> NDArray:
    """
    Vectorized: HSV of shape (..., 3) to RGB of shape (..., 3).
    """
    hsv = np.asarray(hsv, dtype=float)
    h, s, v = hsv[..., 0], hsv[..., 1], hsv[..., 2]
    chroma = v * s
    return _np_hue_sector_to_rgb(h, chroma, v - chroma)
