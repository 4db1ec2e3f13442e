"""
Chromatic
=========

Colour-space conversion, interpolation and colour maps.
"""

__version__ = "0.3.0"

from .colours import (
    ColourBase,
    Grey,
    GreyAlpha,
    Hsl,
    HslAlpha,
    Hsv,
    HsvAlpha,
    Lab,
    LabAlpha,
    Rgb,
    RgbAlpha,
    Srgb,
    SrgbAlpha,
    WithAlpha,
    Xyz,
    XyzAlpha,
    approx_equal,
    get_colour_class,
    interpolate,
    mix,
)
from .conversions import D50, D65, convert, np_convert
from .errors import (
    ChromaticError,
    ColourMapError,
    FormatError,
    FormatErrorKind,
    HueOrderWarning,
    InterpolationError,
    MixError,
    RangeConversionError,
    ValidationError,
)
from .gradients import ColourMap
from .types import Channel, ColourSpace, Precision

__all__ = [
    "__version__",
    "ColourBase", "WithAlpha",
    "Grey", "GreyAlpha", "Rgb", "RgbAlpha", "Srgb", "SrgbAlpha",
    "Hsl", "HslAlpha", "Hsv", "HsvAlpha", "Lab", "LabAlpha", "Xyz", "XyzAlpha",
    "approx_equal", "get_colour_class", "interpolate", "mix",
    "D50", "D65", "convert", "np_convert",
    "ChromaticError", "ColourMapError", "FormatError", "FormatErrorKind", "HueOrderWarning",
    "InterpolationError", "MixError", "RangeConversionError", "ValidationError",
    "ColourMap",
    "Channel", "ColourSpace", "Precision",
]
