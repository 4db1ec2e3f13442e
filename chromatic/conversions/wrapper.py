import numpy as np
from boundednumbers.functions import clamp01
from boundednumbers.np_functions import clamp as np_clamp
from typing import Callable, Dict, Sequence, Tuple, Union

from ..config import SNAP_EPSILON
from ..errors import ValidationError
from ..types.array_types import ndarray_2d
from ..types.colour_types import ColourSpace, as_colour_space, space_channels

from .numbers import fit_to_channels, validate_components
from .to_grey import np_rgb_to_grey, np_xyz_to_grey, rgb_to_grey, xyz_to_grey
from .to_hsl import np_unit_rgb_to_hsl, unit_rgb_to_hsl
from .to_hsv import np_unit_rgb_to_hsv, unit_rgb_to_hsv
from .to_lab import np_xyz_to_lab, xyz_to_lab
from .to_rgb import (
    grey_to_rgb,
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    np_grey_to_rgb,
    np_hsl_to_unit_rgb,
    np_hsv_to_unit_rgb,
    np_srgb_to_linear_rgb,
    np_xyz_to_linear_rgb,
    srgb_to_linear_rgb,
    xyz_to_linear_rgb,
)
from .to_srgb import linear_rgb_to_srgb, np_linear_rgb_to_srgb
from .to_xyz import lab_to_xyz, linear_rgb_to_xyz, np_lab_to_xyz, np_linear_rgb_to_xyz

SpaceLike = Union[ColourSpace, str]
Components = Tuple[float, ...]

RGB_HUB = ColourSpace.RGB
XYZ_HUB = ColourSpace.XYZ


def _identity(*values: float) -> Components:
    return tuple(values)


def _grey(value: float) -> Components:
    return (value,)


# Every base space belongs to exactly one hub.
HUB_OF: Dict[ColourSpace, ColourSpace] = {
    ColourSpace.GREY: RGB_HUB,
    ColourSpace.RGB: RGB_HUB,
    ColourSpace.SRGB: RGB_HUB,
    ColourSpace.HSL: RGB_HUB,
    ColourSpace.HSV: RGB_HUB,
    ColourSpace.LAB: XYZ_HUB,
    ColourSpace.XYZ: XYZ_HUB,
}

TO_HUB: Dict[ColourSpace, Callable[..., Components]] = {
    ColourSpace.GREY: grey_to_rgb,
    ColourSpace.RGB: _identity,
    ColourSpace.SRGB: srgb_to_linear_rgb,
    ColourSpace.HSL: hsl_to_unit_rgb,
    ColourSpace.HSV: hsv_to_unit_rgb,
    ColourSpace.LAB: lab_to_xyz,
    ColourSpace.XYZ: _identity,
}

# (hub, target) -> function of the three hub components
FROM_HUB: Dict[Tuple[ColourSpace, ColourSpace], Callable[..., Components]] = {
    (RGB_HUB, ColourSpace.GREY): lambda r, g, b: _grey(rgb_to_grey(r, g, b)),
    (RGB_HUB, ColourSpace.RGB): _identity,
    (RGB_HUB, ColourSpace.SRGB): linear_rgb_to_srgb,
    (RGB_HUB, ColourSpace.HSL): unit_rgb_to_hsl,
    (RGB_HUB, ColourSpace.HSV): unit_rgb_to_hsv,
    (XYZ_HUB, ColourSpace.LAB): xyz_to_lab,
    (XYZ_HUB, ColourSpace.XYZ): _identity,
    (XYZ_HUB, ColourSpace.GREY): lambda x, y, z: _grey(xyz_to_grey(x, y, z)),
}

BETWEEN_HUBS: Dict[Tuple[ColourSpace, ColourSpace], Callable[..., Components]] = {
    (RGB_HUB, XYZ_HUB): linear_rgb_to_xyz,
    (XYZ_HUB, RGB_HUB): xyz_to_linear_rgb,
}

NP_TO_HUB: Dict[ColourSpace, Callable[[np.ndarray], np.ndarray]] = {
    ColourSpace.GREY: np_grey_to_rgb,
    ColourSpace.RGB: lambda rgb: rgb,
    ColourSpace.SRGB: np_srgb_to_linear_rgb,
    ColourSpace.HSL: np_hsl_to_unit_rgb,
    ColourSpace.HSV: np_hsv_to_unit_rgb,
    ColourSpace.LAB: np_lab_to_xyz,
    ColourSpace.XYZ: lambda xyz: xyz,
}

NP_FROM_HUB: Dict[Tuple[ColourSpace, ColourSpace], Callable[[np.ndarray], np.ndarray]] = {
    (RGB_HUB, ColourSpace.GREY): np_rgb_to_grey,
    (RGB_HUB, ColourSpace.RGB): lambda rgb: rgb,
    (RGB_HUB, ColourSpace.SRGB): np_linear_rgb_to_srgb,
    (RGB_HUB, ColourSpace.HSL): np_unit_rgb_to_hsl,
    (RGB_HUB, ColourSpace.HSV): np_unit_rgb_to_hsv,
    (XYZ_HUB, ColourSpace.LAB): np_xyz_to_lab,
    (XYZ_HUB, ColourSpace.XYZ): lambda xyz: xyz,
    (XYZ_HUB, ColourSpace.GREY): np_xyz_to_grey,
}

NP_BETWEEN_HUBS: Dict[Tuple[ColourSpace, ColourSpace], Callable[[np.ndarray], np.ndarray]] = {
    (RGB_HUB, XYZ_HUB): np_linear_rgb_to_xyz,
    (XYZ_HUB, RGB_HUB): np_xyz_to_linear_rgb,
}


def _route(source: ColourSpace, target: ColourSpace) -> Tuple[ColourSpace, ColourSpace]:
    """Hub the source enters and hub the target is produced from.

    Grey is reachable from both hubs, so a grey target never forces a hop.
    """
    source_hub = HUB_OF[source]
    if target is ColourSpace.GREY:
        return source_hub, source_hub
    return source_hub, HUB_OF[target]


def _convert_base(values: Sequence[float], source: ColourSpace, target: ColourSpace) -> Components:
    if source is target:
        return tuple(values)
    entry_hub, exit_hub = _route(source, target)
    hub_values = TO_HUB[source](*values)
    if entry_hub is not exit_hub:
        hub_values = BETWEEN_HUBS[(entry_hub, exit_hub)](*hub_values)
        if exit_hub is RGB_HUB:
            # XYZ outside the sRGB gamut: clamp before decomposing into hue spaces
            hub_values = tuple(clamp01(v) for v in hub_values)
    return tuple(FROM_HUB[(exit_hub, target)](*hub_values))


def convert(
    components: Sequence[float],
    from_space: SpaceLike,
    to_space: SpaceLike,
) -> Components:
    """
    Convert one colour given as a plain tuple between any two spaces.

    ``components`` are validated against ``from_space`` first. Alpha is
    carried over unchanged, defaults to 1.0 when the source has none and is
    dropped when the target has none. The result is fitted into the target
    domain (hue wrapped, other channels clamped).

    Raises:
        ValidationError: if ``components`` do not fit ``from_space``.
        RangeConversionError: if a computed value is not finite.
    """
    source = as_colour_space(from_space)
    target = as_colour_space(to_space)
    values = validate_components(components, space_channels(source))

    if source is target:
        return values

    if source.has_alpha:
        base_values, alpha = values[:-1], values[-1]
    else:
        base_values, alpha = values, 1.0

    converted = _convert_base(base_values, source.base, target.base)
    if target.has_alpha:
        converted = converted + (alpha,)
    return fit_to_channels(converted, space_channels(target))


def np_convert(
    colours: np.ndarray,
    from_space: SpaceLike,
    to_space: SpaceLike,
) -> ndarray_2d:
    """
    Vectorized :func:`convert` over an array of shape (..., N).

    Every value is checked against its channel domain up front, after the
    same epsilon snap as :func:`convert`; the first offending value is
    reported.
    """
    source = as_colour_space(from_space)
    target = as_colour_space(to_space)
    source_channels = space_channels(source)
    target_channels = space_channels(target)

    colours = np.asarray(colours, dtype=np.float64)
    if colours.ndim == 0 or colours.shape[-1] != len(source_channels):
        raise ValidationError(
            "components", len(source_channels), len(source_channels),
            colours.shape[-1] if colours.ndim else 0,
            f"expected arrays of shape (..., {len(source_channels)})",
        )
    colours = colours.copy()
    for index, channel in enumerate(source_channels):
        epsilon = SNAP_EPSILON * max(1.0, channel.span)
        column = colours[..., index]
        below = (column < channel.minimum) & (column >= channel.minimum - epsilon)
        above = (column > channel.maximum) & (column <= channel.maximum + epsilon)
        column = np.where(below, channel.minimum, np.where(above, channel.maximum, column))
        colours[..., index] = column
        bad = ~((column >= channel.minimum) & (column <= channel.maximum))
        if bad.any():
            raise ValidationError(channel.name, channel.minimum, channel.maximum, float(column[bad].flat[0]))
        if channel.cyclic:
            colours[..., index] = np.where(column == channel.maximum, channel.minimum, column)

    if source is target:
        return colours

    if source.has_alpha:
        base, alpha = colours[..., :-1], colours[..., -1:]
    else:
        base, alpha = colours, np.ones(colours.shape[:-1] + (1,))

    if source.base is target.base:
        out = base
    else:
        entry_hub, exit_hub = _route(source.base, target.base)
        hub_values = NP_TO_HUB[source.base](base)
        if entry_hub is not exit_hub:
            hub_values = NP_BETWEEN_HUBS[(entry_hub, exit_hub)](hub_values)
            if exit_hub is RGB_HUB:
                hub_values = np_clamp(hub_values, 0.0, 1.0)
        out = NP_FROM_HUB[(exit_hub, target.base)](hub_values)

    if target.has_alpha:
        out = np.concatenate([out, alpha], axis=-1)

    fitted = np.empty_like(out)
    for index, channel in enumerate(target_channels):
        column = out[..., index]
        if channel.cyclic:
            wrapped = np.mod(column, channel.maximum)
            fitted[..., index] = np.where(wrapped >= channel.maximum, channel.minimum, wrapped)
        else:
            fitted[..., index] = np_clamp(column, channel.minimum, channel.maximum)
    return fitted
