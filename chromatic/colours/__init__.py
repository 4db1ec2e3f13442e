"""
Chromatic Colour Classes
========================

Immutable colour values for the Grey, RGB, sRGB, HSL, HSV, CIE Lab and
CIE XYZ colour spaces, each with an alpha variant.

Features
--------
- Immutable instances (frozen after initialization), validated on
  construction: an out-of-range channel raises, it is never clamped
- Named channel access (``colour.red``, ``colour.hue``, ``colour.alpha``)
- Byte, hex (``#RRGGBB``) and decimal (``"r, g, b"``) forms
- Conversion between any two spaces
- Linear interpolation, shortest-arc for hue, and weighted mixing
- Tolerance equality (``==``), hue compared on the colour wheel
- Single or double precision storage

Usage
-----
>>> from chromatic.colours import Rgb, Hsl
>>> red = Rgb(1.0, 0.0, 0.0)
>>> red.convert("hsl")
Hsl(hue=0.0, saturation=1.0, lightness=0.5)
>>> red.interpolate(Rgb(0.0, 0.0, 1.0), 0.5)
Rgb(red=0.5, green=0.0, blue=0.5)
>>> Hsl(350, 1, 0.5).interpolate(Hsl(10, 1, 0.5), 0.5).hue
0.0
>>> red.with_alpha(0.5).to_hex()
'#FF000080'

Colour Classes
--------------
    - Grey, GreyAlpha: single grey level in [0, 1]
    - Rgb, RgbAlpha: linear-light RGB in [0, 1]
    - Srgb, SrgbAlpha: gamma-encoded sRGB in [0, 1]
    - Hsl, HslAlpha: hue [0, 360), saturation and lightness in [0, 1]
    - Hsv, HsvAlpha: hue [0, 360), saturation and value in [0, 1]
    - Lab, LabAlpha: L* [0, 100], a* and b* in [-128, 127]
    - Xyz, XyzAlpha: CIE XYZ bounded by the D65 white

Notes
-----
- Hue given as exactly 360 is stored as 0
- Hsl/Hsv hex codes are the bytes of the Rgb projection, Lab/Xyz hex codes
  the bytes of the Srgb projection
"""

from .colour import colour_convert, get_colour_class, unified_space_to_class
from .colour_base import ColourBase, WithAlpha
from .grey import Grey, GreyAlpha
from .hsl import Hsl, HslAlpha
from .hsv import Hsv, HsvAlpha
from .lab import Lab, LabAlpha
from .mixing import interpolate, mix
from .rgb import Rgb, RgbAlpha
from .srgb import Srgb, SrgbAlpha
from .tolerance import approx_equal
from .xyz import Xyz, XyzAlpha

__all__ = [
    "ColourBase", "WithAlpha",
    "Grey", "GreyAlpha", "Rgb", "RgbAlpha", "Srgb", "SrgbAlpha",
    "Hsl", "HslAlpha", "Hsv", "HsvAlpha", "Lab", "LabAlpha", "Xyz", "XyzAlpha",
    "colour_convert", "get_colour_class", "unified_space_to_class",
    "interpolate", "mix", "approx_equal",
]
