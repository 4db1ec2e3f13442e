from typing import ClassVar, Tuple
from ..types.colour_types import Channel, ColourSpace, space_channels
from .colour_base import ColourBase, WithAlpha, build_registry


class Grey(ColourBase):
    __slots__ = ()
    space: ClassVar[ColourSpace] = ColourSpace.GREY
    channels: ClassVar[Tuple[Channel, ...]] = space_channels(ColourSpace.GREY)
    num_channels: ClassVar[int] = 1


class GreyAlpha(WithAlpha, ColourBase):
    __slots__ = ()
    space: ClassVar[ColourSpace] = ColourSpace.GREY_ALPHA
    channels: ClassVar[Tuple[Channel, ...]] = space_channels(ColourSpace.GREY_ALPHA)
    num_channels: ClassVar[int] = 2


grey_space_to_class = build_registry(Grey, GreyAlpha)
