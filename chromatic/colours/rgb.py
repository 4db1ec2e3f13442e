"""Linear-light RGB. Channels are proportional to emitted light, no gamma curve."""

from typing import ClassVar, Tuple
from ..types.colour_types import Channel, ColourSpace, space_channels
from .colour_base import ColourBase, WithAlpha, build_registry


class Rgb(ColourBase):
    __slots__ = ()
    space: ClassVar[ColourSpace] = ColourSpace.RGB
    channels: ClassVar[Tuple[Channel, ...]] = space_channels(ColourSpace.RGB)
    num_channels: ClassVar[int] = 3


class RgbAlpha(WithAlpha, ColourBase):
    __slots__ = ()
    space: ClassVar[ColourSpace] = ColourSpace.RGB_ALPHA
    channels: ClassVar[Tuple[Channel, ...]] = space_channels(ColourSpace.RGB_ALPHA)
    num_channels: ClassVar[int] = 4


rgb_space_to_class = build_registry(Rgb, RgbAlpha)
