from __future__ import annotations

import numpy as np
from boundednumbers.functions import clamp01
from numbers import Integral
from typing import Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar, Union

from ..colours.colour import ColourTarget
from ..colours.colour_base import ColourBase, PrecisionLike
from ..conversions.wrapper import np_convert
from ..errors import (
    ColourMapError,
    EmptyColourMapError,
    InvalidSampleError,
    MismatchedLengthsError,
    MixedColourTypesError,
)
from ..types.array_types import ndarray_1d, ndarray_2d
from ..types.colour_types import ColourSpace
from .positions import find_segment, is_real_sample, uniform_positions, validate_positions

C = TypeVar("C", bound=ColourBase)


class ColourMap(Generic[C]):
    """
    Ordered control points (position in [0, 1], colour) sampled by
    interpolating between the two neighbouring points.

    All colours share one class; positions are strictly ascending. Sampling
    below the first or above the last position returns the end colour.
    """

    __slots__ = ('_colours', '_positions', '_colour_class')

    def __init__(self, colours: Sequence[C], positions: Sequence[float]) -> None:
        self._colours, self._positions, self._colour_class = self._validated(list(colours), list(positions))

    @staticmethod
    def _validated(colours: List[C], positions: List[float]) -> Tuple[Tuple[C, ...], ndarray_1d, type[C]]:
        if not colours:
            raise EmptyColourMapError()
        if len(colours) != len(positions):
            raise MismatchedLengthsError(len(colours), len(positions))

        position_array = validate_positions(positions)
        position_array.flags.writeable = False

        colour_class = type(colours[0])
        for index, colour in enumerate(colours):
            if not isinstance(colour, ColourBase) or type(colour) is not colour_class:
                expected = colour_class if isinstance(colours[0], ColourBase) else ColourBase
                raise MixedColourTypesError(expected, type(colour), index)
        return tuple(colours), position_array, colour_class

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def uniform(cls, colours: Sequence[C]) -> ColourMap[C]:
        """Evenly spaced control points: ``i / (k - 1)``, or just 0 for one colour."""
        colours = list(colours)
        if not colours:
            raise EmptyColourMapError()
        return cls(colours, uniform_positions(len(colours)).tolist())

    @classmethod
    def from_hex(
        cls,
        codes: Sequence[str],
        colour_class: type[C],
        positions: Optional[Sequence[float]] = None,
        *,
        precision: PrecisionLike = None,
    ) -> ColourMap[C]:
        """Build a map from hex codes, uniformly spaced unless ``positions`` is given."""
        colours = [colour_class.from_hex(code, precision=precision) for code in codes]
        if positions is None:
            return cls.uniform(colours)
        return cls(colours, positions)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def colours(self) -> Tuple[C, ...]:
        return self._colours

    @property
    def positions(self) -> Tuple[float, ...]:
        return tuple(float(p) for p in self._positions)

    @property
    def colour_class(self) -> type[C]:
        return self._colour_class

    def __len__(self) -> int:
        return len(self._colours)

    def __iter__(self) -> Iterator[Tuple[float, C]]:
        return iter(zip(self.positions, self._colours))

    def __repr__(self) -> str:
        points = ", ".join(f"{p:g}: {c}" for p, c in self)
        return f"ColourMap[{self._colour_class.__name__}]({points})"

    # ------------------ SAMPLING ------------------
    def sample(self, t: float) -> C:
        """
        Colour at position ``t``; ``t`` outside [0, 1] is clamped.

        Raises:
            InvalidSampleError: if ``t`` is NaN or not a real number.
        """
        if not is_real_sample(t):
            raise InvalidSampleError(t)
        t = float(clamp01(t))

        positions = self._positions
        if t <= positions[0]:
            return self._colours[0]
        if t >= positions[-1]:
            return self._colours[-1]

        lo, hi, local_t = find_segment(positions, t)
        return self._colours[lo].interpolate(self._colours[hi], local_t)

    def sample_many(self, ts: Sequence[float]) -> List[C]:
        return [self.sample(t) for t in ts]

    def render(self, steps: int, target: Optional[Union[ColourSpace, str]] = None) -> ndarray_2d:
        """
        Sample ``steps`` uniformly spaced positions from 0 to 1.

        Args:
            steps: Number of samples, at least 1.
            target: Optional colour space to convert the samples to.

        Returns:
            Array of shape (steps, N) of channel values.
        """
        if isinstance(steps, bool) or not isinstance(steps, Integral) or steps < 1:
            raise ColourMapError(f"render needs a positive integer step count, got {steps!r}")
        samples = self.sample_many(uniform_positions(int(steps)).tolist())
        values = np.array([colour.to_components() for colour in samples], dtype=np.float64)
        if target is None:
            return values
        return np_convert(values, self._colour_class.space, target)

    # ------------------ DERIVED MAPS ------------------
    def insert(self, colour: C, position: float) -> None:
        """
        Add a control point, keeping positions sorted.

        The whole point set is validated again and the map only changes if
        that succeeds. Not safe to call while another thread samples this map.
        """
        colours = list(self._colours)
        positions = [float(p) for p in self._positions]
        if is_real_sample(position):
            index = int(np.searchsorted(self._positions, position, side="left"))
        else:
            index = len(positions)
        colours.insert(index, colour)
        positions.insert(index, position)
        self._colours, self._positions, self._colour_class = self._validated(colours, positions)

    def convert(self, target: ColourTarget) -> ColourMap:
        """Same positions, every colour converted to ``target``."""
        return ColourMap([colour.convert(target) for colour in self._colours], self.positions)
