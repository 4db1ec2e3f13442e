from __future__ import annotations
from enum import Enum
from typing import NamedTuple, Sequence, Tuple, Union

from ..errors import UnknownColourSpaceError

Scalar = Union[int, float]
ScalarVector = Tuple[float, ...]
ByteVector = Tuple[int, ...]


class ColourSpace(str, Enum):
    GREY = "grey"
    GREY_ALPHA = "grey_alpha"
    RGB = "rgb"
    RGB_ALPHA = "rgb_alpha"
    SRGB = "srgb"
    SRGB_ALPHA = "srgb_alpha"
    HSL = "hsl"
    HSL_ALPHA = "hsl_alpha"
    HSV = "hsv"
    HSV_ALPHA = "hsv_alpha"
    LAB = "lab"
    LAB_ALPHA = "lab_alpha"
    XYZ = "xyz"
    XYZ_ALPHA = "xyz_alpha"

    @property
    def has_alpha(self) -> bool:
        return self.value.endswith("_alpha")

    @property
    def base(self) -> ColourSpace:
        """The space without its alpha channel."""
        return ColourSpace(self.value.removesuffix("_alpha"))

    @property
    def with_alpha(self) -> ColourSpace:
        if self.has_alpha:
            return self
        return ColourSpace(f"{self.value}_alpha")


HUE_SPACES = {ColourSpace.HSL, ColourSpace.HSL_ALPHA, ColourSpace.HSV, ColourSpace.HSV_ALPHA}


class Channel(NamedTuple):
    """Name and domain of one colour channel.

    Cyclic channels (hue) wrap at ``maximum`` and are interpolated along the
    shortest arc.
    """
    name: str
    minimum: float
    maximum: float
    cyclic: bool = False

    @property
    def span(self) -> float:
        return self.maximum - self.minimum

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum


UNIT = (0.0, 1.0)
ALPHA = Channel("alpha", *UNIT)
HUE = Channel("hue", 0.0, 360.0, cyclic=True)


def is_hue_space(colour_space: Union[ColourSpace, str]) -> bool:
    """Check if the given colour space carries a hue channel (HSV or HSL)."""
    return as_colour_space(colour_space) in HUE_SPACES


def channel_names(channels: Sequence[Channel]) -> Tuple[str, ...]:
    return tuple(channel.name for channel in channels)


# Channel layout of every colour space. XYZ channels are bounded by the D65
# white, Lab chroma axes by the signed byte range.
_BASE_CHANNELS = {
    ColourSpace.GREY: (Channel("grey", *UNIT),),
    ColourSpace.RGB: (Channel("red", *UNIT), Channel("green", *UNIT), Channel("blue", *UNIT)),
    ColourSpace.SRGB: (Channel("red", *UNIT), Channel("green", *UNIT), Channel("blue", *UNIT)),
    ColourSpace.HSL: (HUE, Channel("saturation", *UNIT), Channel("lightness", *UNIT)),
    ColourSpace.HSV: (HUE, Channel("saturation", *UNIT), Channel("value", *UNIT)),
    ColourSpace.LAB: (Channel("lightness", 0.0, 100.0), Channel("a", -128.0, 127.0), Channel("b", -128.0, 127.0)),
    ColourSpace.XYZ: (Channel("x", 0.0, 0.95047), Channel("y", 0.0, 1.0), Channel("z", 0.0, 1.08883)),
}

SPACE_CHANNELS = {
    **_BASE_CHANNELS,
    **{space.with_alpha: channels + (ALPHA,) for space, channels in _BASE_CHANNELS.items()},
}


def space_channels(colour_space: Union[ColourSpace, str]) -> Tuple[Channel, ...]:
    return SPACE_CHANNELS[as_colour_space(colour_space)]


def as_colour_space(value: Union[ColourSpace, str]) -> ColourSpace:
    """Coerce ``value`` to a ColourSpace, raising UnknownColourSpaceError."""
    try:
        return ColourSpace(value)
    except ValueError:
        raise UnknownColourSpaceError(value) from None
