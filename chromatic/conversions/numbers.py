import math
from numbers import Real
from typing import Iterable, Sequence, Tuple

from boundednumbers.functions import clamp, cyclic_wrap_float

from ..config import HALF_TURN, HUE_360, MAX_HUE_WRAP_ITERATIONS, SNAP_EPSILON
from ..errors import RangeConversionError, ValidationError
from ..types.colour_types import Channel, channel_names


def normalize_hue(h: float) -> float:
    """Normalize hue to the [0, 360) range by repeated +/-360 steps.

    Raises:
        RangeConversionError: if ``h`` is not finite or needs more than
            ``MAX_HUE_WRAP_ITERATIONS`` steps.
    """
    if not math.isfinite(h):
        raise RangeConversionError(f"Cannot normalise non-finite hue {h!r}")
    hue = float(h)
    for _ in range(MAX_HUE_WRAP_ITERATIONS):
        if hue >= HUE_360:
            hue -= HUE_360
        elif hue < 0.0:
            hue += HUE_360
        else:
            return hue
    raise RangeConversionError(
        f"Hue {h!r} did not normalise within {MAX_HUE_WRAP_ITERATIONS} steps of 360"
    )


def shortest_hue_delta(h0: float, h1: float) -> float:
    """Signed hue difference from ``h0`` to ``h1`` along the shorter arc."""
    diff = h1 - h0
    if diff > HALF_TURN:
        diff -= HUE_360
    elif diff < -HALF_TURN:
        diff += HUE_360
    return diff


def circular_distance(h0: float, h1: float) -> float:
    """Unsigned angular distance between two hues, in [0, 180]."""
    diff = cyclic_wrap_float(abs(h1 - h0), 0.0, HUE_360)
    return min(diff, HUE_360 - diff)


def hue_arc_span(hues: Iterable[float]) -> float:
    """Smallest arc of the hue wheel that covers every hue given."""
    ordered = sorted(cyclic_wrap_float(h, 0.0, HUE_360) for h in hues)
    if len(ordered) < 2:
        return 0.0
    gaps = [b - a for a, b in zip(ordered, ordered[1:])]
    gaps.append(ordered[0] + HUE_360 - ordered[-1])
    return HUE_360 - max(gaps)


def snap_to_channel(value: float, channel: Channel) -> float:
    """Pull floating point noise a hair outside the channel bounds back onto them.

    Values further out are returned untouched so validation can reject them.
    """
    if channel.contains(value):
        return value
    epsilon = SNAP_EPSILON * max(1.0, channel.span)
    if channel.minimum - epsilon <= value < channel.minimum:
        return channel.minimum
    if channel.maximum < value <= channel.maximum + epsilon:
        return channel.maximum
    return value


def fit_to_channels(values: Sequence[float], channels: Sequence[Channel]) -> Tuple[float, ...]:
    """Fit computed values into their channel domains (hue wrapped, others clamped).

    Only used on conversion outputs, never on caller input.
    """
    fitted = []
    for value, channel in zip(values, channels):
        if not math.isfinite(value):
            raise RangeConversionError(f"Conversion produced non-finite {channel.name}: {value!r}")
        if channel.cyclic:
            fitted.append(normalize_hue(value))
        else:
            fitted.append(float(clamp(value, channel.minimum, channel.maximum)))
    return tuple(fitted)


def validate_channel(value: object, channel: Channel) -> float:
    """Check one caller-supplied value against its channel domain.

    Returns the value as a float, snapped onto the bounds when it is within
    float noise of them. A cyclic channel accepts its maximum and stores it
    as the minimum (360 degrees is 0 degrees).

    Raises:
        ValidationError: for non-real, NaN or out-of-domain values.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(channel.name, channel.minimum, channel.maximum, value, "not a real number")
    number = float(value)
    if math.isnan(number):
        raise ValidationError(channel.name, channel.minimum, channel.maximum, value, "NaN")
    number = snap_to_channel(number, channel)
    if not channel.contains(number):
        raise ValidationError(channel.name, channel.minimum, channel.maximum, value)
    if channel.cyclic and number == channel.maximum:
        return channel.minimum
    return number


def validate_components(values: Iterable[object], channels: Sequence[Channel]) -> Tuple[float, ...]:
    """Validate a full component vector, raising on the first bad channel."""
    values = tuple(values)
    if len(values) != len(channels):
        raise ValidationError(
            "components", len(channels), len(channels), len(values),
            f"expected {len(channels)} values ({', '.join(channel_names(channels))})",
        )
    return tuple(validate_channel(value, channel) for value, channel in zip(values, channels))
