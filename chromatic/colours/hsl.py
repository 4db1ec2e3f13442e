from typing import ClassVar, Optional, Tuple
from ..types.colour_types import Channel, ColourSpace, space_channels
from .colour_base import ColourBase, WithAlpha, build_registry


class Hsl(ColourBase):
    __slots__ = ()
    space: ClassVar[ColourSpace] = ColourSpace.HSL
    channels: ClassVar[Tuple[Channel, ...]] = space_channels(ColourSpace.HSL)
    num_channels: ClassVar[int] = 3
    hex_projection: ClassVar[Optional[ColourSpace]] = ColourSpace.RGB


class HslAlpha(WithAlpha, ColourBase):
    __slots__ = ()
    space: ClassVar[ColourSpace] = ColourSpace.HSL_ALPHA
    channels: ClassVar[Tuple[Channel, ...]] = space_channels(ColourSpace.HSL_ALPHA)
    num_channels: ClassVar[int] = 4
    hex_projection: ClassVar[Optional[ColourSpace]] = ColourSpace.RGB_ALPHA


hsl_space_to_class = build_registry(Hsl, HslAlpha)
