"""
Weighted N-way blending built from repeated pairwise interpolation.
"""
from __future__ import annotations
import math
import warnings
from numbers import Real
from typing import Sequence, TypeVar

from ..config import HALF_TURN
from ..conversions.numbers import hue_arc_span
from ..errors import (
    DegenerateWeightError,
    EmptyInputError,
    HueOrderWarning,
    InterpolationError,
    LengthMismatchError,
    NegativeWeightError,
)
from ..types.colour_types import Scalar, is_hue_space
from .colour_base import ColourBase

C = TypeVar("C", bound=ColourBase)


def interpolate(a: C, b: C, t: Scalar) -> C:
    """Functional form of :meth:`ColourBase.interpolate`."""
    return a.interpolate(b, t)


def _check_weights(weights: Sequence[Scalar]) -> float:
    for index, weight in enumerate(weights):
        if isinstance(weight, bool) or not isinstance(weight, Real) or not weight >= 0:
            raise NegativeWeightError(weight, index)
    total = math.fsum(weights)
    if not math.isfinite(total) or total <= 0:
        raise DegenerateWeightError(total)
    return total


def _warn_if_order_dependent(colours: Sequence[ColourBase], stacklevel: int) -> None:
    if len(colours) <= 2 or not is_hue_space(colours[0].space):
        return
    hue_index = colours[0].channel_index("hue")
    span = hue_arc_span(colour.to_components()[hue_index] for colour in colours)
    if span > HALF_TURN:
        warnings.warn(
            f"Mixing {len(colours)} hues spread over {span:.1f} degrees; "
            "the result depends on the order of the colours",
            HueOrderWarning,
            stacklevel=stacklevel,
        )


def mix(colours: Sequence[C], weights: Sequence[Scalar]) -> C:
    """
    Weighted blend of colours of one class.

    Folds left to right: the running blend is interpolated towards each next
    colour by that colour's share of the weight seen so far. Hue channels
    follow the shorter arc at every step, so with more than two colours
    spread over more than half the wheel the result depends on their order;
    a :class:`HueOrderWarning` is issued in that case.

    Raises:
        EmptyInputError: no colours.
        LengthMismatchError: ``colours`` and ``weights`` differ in length.
        NegativeWeightError: a weight is negative or not a real number.
        DegenerateWeightError: the weights do not sum to a positive finite number.
        InterpolationError: the colours are not all of one class.
    """
    return _mix(colours, weights, stacklevel=3)


def _mix(colours: Sequence[C], weights: Sequence[Scalar], stacklevel: int) -> C:
    """Body of :func:`mix`; ``stacklevel`` is the frame of the caller to blame, counted from here."""
    colours = list(colours)
    weights = list(weights)
    if not colours:
        raise EmptyInputError()
    if len(colours) != len(weights):
        raise LengthMismatchError(len(colours), len(weights))
    total = _check_weights(weights)

    first = colours[0]
    for index, colour in enumerate(colours[1:], start=1):
        if type(colour) is not type(first):
            raise InterpolationError(
                f"Cannot mix {type(first).__name__} with {type(colour).__name__} at index {index}"
            )

    if len(colours) == 1:
        return first

    _warn_if_order_dependent(colours, stacklevel + 1)

    blended = first
    blended_weight = weights[0] / total
    for colour, weight in zip(colours[1:], weights[1:]):
        share = weight / total
        denominator = blended_weight + share
        local_t = share / denominator if denominator > 0 else 0.0
        blended = blended.interpolate(colour, local_t)
        blended_weight += share
    return blended
