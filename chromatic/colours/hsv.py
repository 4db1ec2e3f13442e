from typing import ClassVar, Optional, Tuple
from ..types.colour_types import Channel, ColourSpace, space_channels
from .colour_base import ColourBase, WithAlpha, build_registry


class Hsv(ColourBase):
    __slots__ = ()
    space: ClassVar[ColourSpace] = ColourSpace.HSV
    channels: ClassVar[Tuple[Channel, ...]] = space_channels(ColourSpace.HSV)
    num_channels: ClassVar[int] = 3
    hex_projection: ClassVar[Optional[ColourSpace]] = ColourSpace.RGB


class HsvAlpha(WithAlpha, ColourBase):
    __slots__ = ()
    space: ClassVar[ColourSpace] = ColourSpace.HSV_ALPHA
    channels: ClassVar[Tuple[Channel, ...]] = space_channels(ColourSpace.HSV_ALPHA)
    num_channels: ClassVar[int] = 4
    hex_projection: ClassVar[Optional[ColourSpace]] = ColourSpace.RGB_ALPHA


hsv_space_to_class = build_registry(Hsv, HsvAlpha)
