from __future__ import annotations
import math
from typing import Callable, ClassVar, Optional, Tuple

from ..types.colour_types import Channel, ColourSpace, ScalarVector, space_channels
from .colour_base import ColourBase, WithAlpha, build_registry

# CIE94 graphic arts weighting
K1 = 0.045
K2 = 0.015
K_L = K_C = K_H = 1.0


class LabMetrics:
    """Colour difference measures shared by Lab and LabAlpha. Alpha is ignored."""
    __slots__ = ()

    _components: ScalarVector
    convert: Callable[..., ColourBase]

    def _lab_of(self, other: ColourBase) -> ScalarVector:
        if other.space.base is not ColourSpace.LAB:
            other = other.convert(ColourSpace.LAB)
        return other.to_components()[:3]

    def delta_e(self, other: ColourBase) -> float:
        """CIE76 colour difference: Euclidean distance in Lab."""
        l1, a1, b1 = self._components[:3]
        l2, a2, b2 = self._lab_of(other)
        return math.sqrt((l1 - l2) ** 2 + (a1 - a2) ** 2 + (b1 - b2) ** 2)

    def delta_e94(self, other: ColourBase) -> float:
        """
        CIE94 colour difference with graphic arts weights, ``self`` as reference.

        Not symmetric: chroma weighting uses this colour's chroma.
        """
        l1, a1, b1 = self._components[:3]
        l2, a2, b2 = self._lab_of(other)

        delta_l = l1 - l2
        c1 = math.hypot(a1, b1)
        c2 = math.hypot(a2, b2)
        delta_c = c1 - c2
        delta_h_squared = max(0.0, (a1 - a2) ** 2 + (b1 - b2) ** 2 - delta_c ** 2)

        s_l = 1.0
        s_c = 1.0 + K1 * c1
        s_h = 1.0 + K2 * c1

        return math.sqrt(
            (delta_l / (K_L * s_l)) ** 2
            + (delta_c / (K_C * s_c)) ** 2
            + delta_h_squared / (K_H * s_h) ** 2
        )


class Lab(LabMetrics, ColourBase):
    __slots__ = ()
    space: ClassVar[ColourSpace] = ColourSpace.LAB
    channels: ClassVar[Tuple[Channel, ...]] = space_channels(ColourSpace.LAB)
    num_channels: ClassVar[int] = 3
    hex_projection: ClassVar[Optional[ColourSpace]] = ColourSpace.SRGB


class LabAlpha(WithAlpha, LabMetrics, ColourBase):
    __slots__ = ()
    space: ClassVar[ColourSpace] = ColourSpace.LAB_ALPHA
    channels: ClassVar[Tuple[Channel, ...]] = space_channels(ColourSpace.LAB_ALPHA)
    num_channels: ClassVar[int] = 4
    hex_projection: ClassVar[Optional[ColourSpace]] = ColourSpace.SRGB_ALPHA


lab_space_to_class = build_registry(Lab, LabAlpha)
