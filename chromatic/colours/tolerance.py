from __future__ import annotations
import math
from numbers import Real
from typing import TYPE_CHECKING, Optional, Set

from ..config import DEFAULT_TOLERANCE
from ..conversions.numbers import circular_distance
from ..errors import ValidationError
from ..types.colour_types import ColourSpace

if TYPE_CHECKING:
    from .colour_base import ColourBase


def _ignored_channels(a: ColourBase, b: ColourBase, tolerance: float) -> Set[int]:
    """Channels that carry no information for this pair of hue colours.

    Hue is meaningless for greys; hue and saturation are meaningless for
    black (and, in HSL, for white).
    """
    base = a.space.base
    if base is ColourSpace.HSL:
        _, sa, la = a.to_components()[:3]
        _, sb, lb = b.to_components()[:3]
        if (la <= tolerance and lb <= tolerance) or (la >= 1 - tolerance and lb >= 1 - tolerance):
            return {0, 1}
    elif base is ColourSpace.HSV:
        _, sa, va = a.to_components()[:3]
        _, sb, vb = b.to_components()[:3]
        if va <= tolerance and vb <= tolerance:
            return {0, 1}
    else:
        return set()
    if sa <= tolerance and sb <= tolerance:
        return {0}
    return set()


def approx_equal(a: ColourBase, b: ColourBase, tolerance: Optional[float] = None) -> bool:
    """
    Tolerance equality of two colours of the same class.

    Each channel may differ by ``tolerance`` times its span (default 1/256).
    Hue is compared by circular distance and ignored where it carries no
    information. Colours of different classes are never equal.
    """
    if tolerance is None:
        tolerance = DEFAULT_TOLERANCE
    if isinstance(tolerance, bool) or not isinstance(tolerance, Real) or not tolerance >= 0:
        raise ValidationError("tolerance", 0.0, math.inf, tolerance)
    if type(a) is not type(b):
        return False

    ignored = _ignored_channels(a, b, tolerance)
    for index, (x, y, channel) in enumerate(zip(a.to_components(), b.to_components(), a.channels)):
        if index in ignored:
            continue
        if channel.cyclic:
            diff = circular_distance(x, y)
        else:
            diff = abs(x - y)
        if diff > tolerance * channel.span:
            return False
    return True
