"""
Colour maps: positioned control points sampled by interpolation.

>>> from chromatic import ColourMap, Rgb
>>> cmap = ColourMap([Rgb(1, 0, 0), Rgb(0, 0, 1)], [0.0, 1.0])
>>> cmap.sample(0.5)
Rgb(red=0.5, green=0.0, blue=0.5)
"""

from .colour_map import ColourMap
from .positions import find_segment, uniform_positions, validate_positions

__all__ = ["ColourMap", "find_segment", "uniform_positions", "validate_positions"]
