"""CIE standard illuminant reference whites (2° observer, Y normalised to 1)."""

from typing import Tuple

WhitePoint = Tuple[float, float, float]

# Daylight, 6504K
D65: WhitePoint = (0.95047, 1.0, 1.08883)

# Horizon light, 5003K
D50: WhitePoint = (0.96422, 1.0, 0.82521)
