from enum import Enum
import math
import numpy as np

from ..errors import RangeConversionError


class Precision(str, Enum):
    SINGLE = "float32"
    DOUBLE = "float64"


precision_dtypes = {
    Precision.SINGLE: np.float32,
    Precision.DOUBLE: np.float64,
}


def quantize(value: float, precision: Precision) -> float:
    """Round ``value`` to the given precision and return it as a Python float.

    Raises:
        RangeConversionError: if the value is not finite in that precision.
    """
    dtype = precision_dtypes[Precision(precision)]
    with np.errstate(over="ignore"):
        stored = float(dtype(value))
    if not math.isfinite(stored):
        raise RangeConversionError(f"{value!r} is not representable as {Precision(precision).value}")
    return stored
