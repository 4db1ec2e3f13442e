from .colour_types import (
    ALPHA,
    HUE,
    Channel,
    ColourSpace,
    HUE_SPACES,
    SPACE_CHANNELS,
    channel_names,
    is_hue_space,
    space_channels,
)
from .precision import Precision, quantize
from .array_types import ndarray_1d, ndarray_2d

__all__ = [
    "ALPHA", "HUE", "Channel", "ColourSpace", "HUE_SPACES", "SPACE_CHANNELS",
    "channel_names", "is_hue_space", "space_channels",
    "Precision", "quantize", "ndarray_1d", "ndarray_2d",
]
