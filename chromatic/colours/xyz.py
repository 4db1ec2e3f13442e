from __future__ import annotations
import math
from typing import Callable, ClassVar, Optional, Tuple

from ..conversions.white_points import D50, D65, WhitePoint
from ..types.colour_types import Channel, ColourSpace, ScalarVector, space_channels
from .colour_base import ColourBase, WithAlpha, build_registry


class XyzMetrics:
    """Geometry in XYZ shared by Xyz and XyzAlpha. Alpha is ignored."""
    __slots__ = ()

    _components: ScalarVector
    convert: Callable[..., ColourBase]

    def distance(self, other: ColourBase) -> float:
        """Euclidean distance to ``other`` in XYZ (other spaces are converted first)."""
        if other.space.base is not ColourSpace.XYZ:
            other = other.convert(ColourSpace.XYZ)
        return math.dist(self._components[:3], other.to_components()[:3])

    def relative_to_white(self, white: WhitePoint = D65) -> Tuple[float, float, float]:
        """Coordinates divided by the reference white, so the white maps to (1, 1, 1)."""
        x, y, z = self._components[:3]
        xn, yn, zn = white
        return x / xn, y / yn, z / zn

    @staticmethod
    def d65_reference_white() -> WhitePoint:
        return D65

    @staticmethod
    def d50_reference_white() -> WhitePoint:
        return D50


class Xyz(XyzMetrics, ColourBase):
    __slots__ = ()
    space: ClassVar[ColourSpace] = ColourSpace.XYZ
    channels: ClassVar[Tuple[Channel, ...]] = space_channels(ColourSpace.XYZ)
    num_channels: ClassVar[int] = 3
    hex_projection: ClassVar[Optional[ColourSpace]] = ColourSpace.SRGB


class XyzAlpha(WithAlpha, XyzMetrics, ColourBase):
    __slots__ = ()
    space: ClassVar[ColourSpace] = ColourSpace.XYZ_ALPHA
    channels: ClassVar[Tuple[Channel, ...]] = space_channels(ColourSpace.XYZ_ALPHA)
    num_channels: ClassVar[int] = 4
    hex_projection: ClassVar[Optional[ColourSpace]] = ColourSpace.SRGB_ALPHA


xyz_space_to_class = build_registry(Xyz, XyzAlpha)
