"""
Chromatic Colour Space Conversions
==================================

Numeric transforms between the Grey, RGB, sRGB, HSL, HSV, CIE Lab and CIE XYZ
colour spaces, with scalar and vectorized (numpy) implementations.

Every conversion is routed through one of two hubs:

- linear RGB, for Grey, RGB, sRGB, HSL and HSV
- CIE XYZ (D65), for Lab and XYZ

and the two hubs are linked by the sRGB primaries matrices.

Conversion Functions
--------------------

Linear RGB <-> sRGB:
    linear_rgb_to_srgb(r, g, b) / srgb_to_linear_rgb(r, g, b)
    gamma_encode(v) / gamma_decode(v)

Linear RGB <-> XYZ:
    linear_rgb_to_xyz(r, g, b) / xyz_to_linear_rgb(x, y, z)

XYZ <-> Lab:
    xyz_to_lab(x, y, z, white=D65) / lab_to_xyz(l, a, b, white=D65)

RGB <-> HSL / HSV:
    unit_rgb_to_hsl(r, g, b) / hsl_to_unit_rgb(h, s, l)
    unit_rgb_to_hsv(r, g, b) / hsv_to_unit_rgb(h, s, v)

Grey:
    rgb_to_grey(r, g, b)  (Rec. 709 luma)
    grey_to_rgb(g)

Each scalar function has an ``np_`` counterpart taking arrays of shape (..., 3).

High-Level API
--------------

convert(components, from_space, to_space)
    Validated conversion of a single colour tuple, alpha carried through.
np_convert(colours, from_space, to_space)
    The same for arrays of shape (..., N).

Examples
--------
>>> convert((1.0, 0.0, 0.0), "rgb", "hsl")
(0.0, 1.0, 0.5)
>>> convert((0.0, 0.0, 1.0), "rgb", "grey")
(0.0722,)
"""

from .gamma import gamma_decode, gamma_encode, np_gamma_decode, np_gamma_encode
from .numbers import (
    circular_distance,
    fit_to_channels,
    hue_arc_span,
    normalize_hue,
    shortest_hue_delta,
    validate_channel,
    validate_components,
)
from .to_grey import LUMA_WEIGHTS, rgb_to_grey, xyz_to_grey
from .to_hsl import np_unit_rgb_to_hsl, unit_rgb_to_hsl
from .to_hsv import np_unit_rgb_to_hsv, unit_rgb_to_hsv
from .to_lab import np_xyz_to_lab, xyz_to_lab
from .to_rgb import (
    grey_to_rgb,
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    np_hsl_to_unit_rgb,
    np_hsv_to_unit_rgb,
    np_xyz_to_linear_rgb,
    srgb_to_linear_rgb,
    xyz_to_linear_rgb,
)
from .to_srgb import linear_rgb_to_srgb, np_linear_rgb_to_srgb
from .to_xyz import lab_to_xyz, linear_rgb_to_xyz, np_lab_to_xyz, np_linear_rgb_to_xyz
from .white_points import D50, D65, WhitePoint
from .wrapper import convert, np_convert

__all__ = [
    "gamma_decode", "gamma_encode", "np_gamma_decode", "np_gamma_encode",
    "circular_distance", "fit_to_channels", "hue_arc_span", "normalize_hue",
    "shortest_hue_delta", "validate_channel", "validate_components",
    "LUMA_WEIGHTS", "rgb_to_grey", "xyz_to_grey", "grey_to_rgb",
    "unit_rgb_to_hsl", "np_unit_rgb_to_hsl", "unit_rgb_to_hsv", "np_unit_rgb_to_hsv",
    "hsl_to_unit_rgb", "np_hsl_to_unit_rgb", "hsv_to_unit_rgb", "np_hsv_to_unit_rgb",
    "xyz_to_lab", "np_xyz_to_lab", "lab_to_xyz", "np_lab_to_xyz",
    "linear_rgb_to_xyz", "np_linear_rgb_to_xyz", "xyz_to_linear_rgb", "np_xyz_to_linear_rgb",
    "linear_rgb_to_srgb", "np_linear_rgb_to_srgb", "srgb_to_linear_rgb",
    "D50", "D65", "WhitePoint",
    "convert", "np_convert",
]
