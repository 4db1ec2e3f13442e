from __future__ import annotations
from typing import Union

from ..conversions.wrapper import convert
from ..types.colour_types import ColourSpace, Scalar, as_colour_space
from .colour_base import ColourBase
from .grey import grey_space_to_class
from .hsl import hsl_space_to_class
from .hsv import hsv_space_to_class
from .lab import lab_space_to_class
from .rgb import rgb_space_to_class
from .srgb import srgb_space_to_class
from .tolerance import approx_equal
from .xyz import xyz_space_to_class

ColourTarget = Union[ColourSpace, str, type[ColourBase]]

unified_space_to_class: dict[ColourSpace, type[ColourBase]] = {
    **grey_space_to_class,
    **rgb_space_to_class,
    **srgb_space_to_class,
    **hsl_space_to_class,
    **hsv_space_to_class,
    **lab_space_to_class,
    **xyz_space_to_class,
}


def get_colour_class(colour_space: Union[ColourSpace, str]) -> type[ColourBase]:
    return unified_space_to_class[as_colour_space(colour_space)]


def _target_class(target: ColourTarget) -> type[ColourBase]:
    if isinstance(target, type) and issubclass(target, ColourBase):
        return target
    return get_colour_class(target)


def colour_convert(self: ColourBase, target: ColourTarget) -> ColourBase:
    """
    Convert this colour to another colour space.

    Args:
        target: A ``ColourSpace``, its string value (e.g. ``"hsl"``) or a
            colour class.

    Returns:
        New colour of the target class, with the same precision. Alpha is
        kept, set to 1.0 or dropped depending on the target.
    """
    cls = _target_class(target)
    if cls is type(self):
        return self
    values = convert(self.to_components(), self.space, cls.space)
    return cls(*values, precision=self.precision)


def with_alpha(self: ColourBase, alpha: Scalar = 1.0) -> ColourBase:
    """
    Return the alpha variant of this opaque colour with the given alpha.
    """
    cls = get_colour_class(self.space.with_alpha)
    return cls(*self.to_components(), alpha, precision=self.precision)


ColourBase.convert = colour_convert
ColourBase.with_alpha = with_alpha
ColourBase.approx_eq = approx_equal
