import numpy as np
from numpy import ndarray as NDArray

# sRGB transfer curve constants
ENCODE_THRESHOLD = 0.0031308
DECODE_THRESHOLD = 0.04045
LINEAR_SLOPE = 12.92
GAMMA = 2.4
OFFSET = 0.055
SCALE = 1.055


def gamma_encode(linear: float) -> float:
    """Linear-light component -> gamma-encoded sRGB component."""
    if linear <= ENCODE_THRESHOLD:
        return LINEAR_SLOPE * linear
    return SCALE * linear ** (1.0 / GAMMA) - OFFSET


def gamma_decode(encoded: float) -> float:
    """Gamma-encoded sRGB component -> linear-light component."""
    if encoded <= DECODE_THRESHOLD:
        return encoded / LINEAR_SLOPE
    return ((encoded + OFFSET) / SCALE) ** GAMMA


def np_gamma_encode(linear: NDArray) -> NDArray:
    """Vectorized: linear-light components -> gamma-encoded sRGB components."""
    linear = np.asarray(linear, dtype=float)
    curved = SCALE * np.power(np.maximum(linear, ENCODE_THRESHOLD), 1.0 / GAMMA) - OFFSET
    return np.where(linear <= ENCODE_THRESHOLD, LINEAR_SLOPE * linear, curved)


def np_gamma_decode(encoded: NDArray) -> NDArray:
    """Vectorized: gamma-encoded sRGB components -> linear-light components."""
    encoded = np.asarray(encoded, dtype=float)
    curved = np.power((np.maximum(encoded, DECODE_THRESHOLD) + OFFSET) / SCALE, GAMMA)
    return np.where(encoded <= DECODE_THRESHOLD, encoded / LINEAR_SLOPE, curved)
