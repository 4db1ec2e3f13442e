"""Gamma-encoded sRGB, the form stored in images and written as hex on the web."""

from typing import ClassVar, Tuple
from ..types.colour_types import Channel, ColourSpace, space_channels
from .colour_base import ColourBase, WithAlpha, build_registry


class Srgb(ColourBase):
    __slots__ = ()
    space: ClassVar[ColourSpace] = ColourSpace.SRGB
    channels: ClassVar[Tuple[Channel, ...]] = space_channels(ColourSpace.SRGB)
    num_channels: ClassVar[int] = 3


class SrgbAlpha(WithAlpha, ColourBase):
    __slots__ = ()
    space: ClassVar[ColourSpace] = ColourSpace.SRGB_ALPHA
    channels: ClassVar[Tuple[Channel, ...]] = space_channels(ColourSpace.SRGB_ALPHA)
    num_channels: ClassVar[int] = 4


srgb_space_to_class = build_registry(Srgb, SrgbAlpha)
