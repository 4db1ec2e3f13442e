import math
from numbers import Real
from typing import Sequence

import numpy as np

from ..errors import NonAscendingPositionsError, PositionOutOfRangeError
from ..types.array_types import ndarray_1d


def validate_positions(positions: Sequence[float]) -> ndarray_1d:
    """
    Check control point positions: real numbers in [0, 1], strictly ascending.

    Returns:
        The positions as a float64 array.
    """
    for index, position in enumerate(positions):
        if isinstance(position, bool) or not isinstance(position, Real) or not 0.0 <= position <= 1.0:
            raise PositionOutOfRangeError(position, index)
    for index in range(1, len(positions)):
        if positions[index] <= positions[index - 1]:
            raise NonAscendingPositionsError(positions[index - 1], index, positions[index])
    return np.asarray(positions, dtype=np.float64)


def uniform_positions(count: int) -> ndarray_1d:
    """``count`` evenly spaced positions with endpoints exactly 0 and 1 (just 0 for one)."""
    if count == 1:
        return np.zeros(1)
    positions = np.linspace(0.0, 1.0, count)
    positions[-1] = 1.0
    return positions


def find_segment(positions: ndarray_1d, t: float) -> tuple[int, int, float]:
    """
    Segment of a sorted position array that contains ``t``.

    ``t`` must lie strictly between the first and last positions. Binary
    search finds the smallest ``i`` with ``positions[i] > t``.

    Returns:
        (lo, hi, local_t) with ``local_t`` in [0, 1).
    """
    hi = int(np.searchsorted(positions, t, side="right"))
    lo = hi - 1
    local_t = (t - positions[lo]) / (positions[hi] - positions[lo])
    return lo, hi, float(min(max(local_t, 0.0), 1.0))


def is_real_sample(t: object) -> bool:
    return not isinstance(t, bool) and isinstance(t, Real) and not math.isnan(t)
