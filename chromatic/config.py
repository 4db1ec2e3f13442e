# No dependencies
"""Library-wide numeric settings."""

from .types.precision import Precision

# Largest value of a single byte channel.
BYTE_MAX = 255

# Default tolerance for approximate colour equality, as a fraction of each
# channel's span (one quantisation step of an 8-bit channel).
DEFAULT_TOLERANCE = 1.0 / 256.0

# Floating point noise this far outside a channel's bounds (relative to the
# channel span) is snapped back onto the bound.
SNAP_EPSILON = 1e-9

# Hue normalisation gives up after this many +/-360 steps.
MAX_HUE_WRAP_ITERATIONS = 64

DEFAULT_PRECISION = Precision.DOUBLE

HUE_360 = 360.0
HALF_TURN = 180.0
