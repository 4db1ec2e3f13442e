from __future__ import annotations
import math
from abc import ABC
from numbers import Integral, Real
from typing import Any, Callable, ClassVar, Iterable, Iterator, Optional, Self, Sequence, Tuple, Union

from boundednumbers.functions import clamp

from ..config import BYTE_MAX, DEFAULT_PRECISION
from ..conversions.numbers import fit_to_channels, normalize_hue, shortest_hue_delta, validate_components
from ..errors import InterpolationError, UnknownChannelError, ValidationError
from ..formats.decimal import format_decimal, parse_decimal
from ..formats.hex_codes import format_hex, parse_hex
from ..types.colour_types import ByteVector, Channel, ColourSpace, Scalar, ScalarVector, channel_names
from ..types.precision import Precision, quantize

PrecisionLike = Union[Precision, str, None]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class ColourBase:
    """
    Immutable colour value of one colour space.

    Subclasses are pure data: ``space``, ``channels`` and ``hex_projection``
    drive validation, byte scaling, text forms and interpolation.
    """
    __slots__ = ('_components', '_precision', '_is_frozen')

    space: ClassVar[ColourSpace]
    channels: ClassVar[Tuple[Channel, ...]]
    num_channels: ClassVar[int]
    # Space whose bytes make up the hex form; None means this space's own channels
    hex_projection: ClassVar[Optional[ColourSpace]] = None

    # bound in colour.py
    convert: Callable[..., ColourBase]
    with_alpha: Callable[..., ColourBase]
    approx_eq: Callable[..., bool]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *components: Scalar, precision: PrecisionLike = None) -> None:
        precision = Precision(precision or DEFAULT_PRECISION)
        values = validate_components(components, self.channels)

        stored = []
        for value, channel in zip(values, self.channels):
            value = quantize(value, precision)
            # rounding to single precision can land a hair outside the bounds
            if channel.cyclic and value >= channel.maximum:
                value = channel.minimum
            stored.append(float(clamp(value, channel.minimum, channel.maximum)))

        self._components = tuple(stored)
        self._precision = precision

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_components(cls, values: Iterable[Scalar], *, precision: PrecisionLike = None) -> Self:
        """Build a colour from raw channel values, validating every one."""
        return cls(*values, precision=precision)

    @classmethod
    def _from_computed(cls, values: Sequence[float], precision: PrecisionLike = None) -> Self:
        """Build a colour from computed values, fitting float noise into the channel domains."""
        return cls(*fit_to_channels(values, cls.channels), precision=precision)

    @classmethod
    def from_bytes(cls, data: Iterable[int], *, precision: PrecisionLike = None) -> Self:
        """
        Build a colour from one byte per channel.

        Byte ``b`` maps to ``min + b / 255 * span``; cyclic (hue) channels use
        ``b / 256`` so that byte 255 stays below a full turn.

        Raises:
            ValidationError: for a wrong byte count or a byte outside 0..255.
        """
        data = tuple(data)
        if len(data) != cls.num_channels:
            raise ValidationError(
                "bytes", cls.num_channels, cls.num_channels, len(data),
                f"{cls.__name__} expects {cls.num_channels} bytes",
            )
        values = []
        for byte, channel in zip(data, cls.channels):
            if isinstance(byte, bool) or not isinstance(byte, Integral) or not 0 <= byte <= BYTE_MAX:
                raise ValidationError(channel.name, 0, BYTE_MAX, byte, "byte")
            divisor = BYTE_MAX + 1 if channel.cyclic else BYTE_MAX
            values.append(channel.minimum + int(byte) / divisor * channel.span)
        return cls(*values, precision=precision)

    @classmethod
    def from_hex(cls, text: str, *, precision: PrecisionLike = None) -> Self:
        """
        Parse ``#RGB``-style text (digit count depends on the channel count).

        Hue and Lab/XYZ colours are read through their ``hex_projection``.
        """
        data = parse_hex(text, cls.num_channels)
        if cls.hex_projection is None:
            return cls.from_bytes(data, precision=precision)
        from .colour import get_colour_class
        projected = get_colour_class(cls.hex_projection).from_bytes(data, precision=precision)
        return projected.convert(cls)

    @classmethod
    def from_str(cls, text: str, *, precision: PrecisionLike = None) -> Self:
        """Parse either hex (``#...``) or decimal (``"r, g, b[, a]"``) text."""
        if text.strip().startswith("#"):
            return cls.from_hex(text, precision=precision)
        values = parse_decimal(text, cls.num_channels, has_alpha=cls.space.has_alpha)
        return cls(*values, precision=precision)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def precision(self) -> Precision:
        return self._precision

    @property
    def has_alpha(self) -> bool:
        return self.space.has_alpha

    @property
    def has_hue(self) -> bool:
        return any(channel.cyclic for channel in self.channels)

    def to_components(self) -> ScalarVector:
        return self._components

    def to_bytes(self) -> ByteVector:
        """Scale every channel to a byte, rounding half up and clamping to 0..255."""
        out = []
        for value, channel in zip(self._components, self.channels):
            scale = BYTE_MAX + 1 if channel.cyclic else BYTE_MAX
            byte = _round_half_up((value - channel.minimum) / channel.span * scale)
            out.append(int(clamp(byte, 0, BYTE_MAX)))
        return tuple(out)

    def to_hex(self) -> str:
        colour = self if self.hex_projection is None else self.convert(self.hex_projection)
        return format_hex(colour.to_bytes())

    def to_decimal(self) -> str:
        return format_decimal(self._components)

    # ------------------ CHANNELS ------------------
    @classmethod
    def channel_index(cls, name: str) -> int:
        for index, channel in enumerate(cls.channels):
            if channel.name == name:
                return index
        raise UnknownChannelError(cls.__name__, name, channel_names(cls.channels))

    def channel(self, name: str) -> float:
        """Value of the channel called ``name``."""
        return self._components[self.channel_index(name)]

    def __getattr__(self, name: str) -> Any:
        # only reached when regular lookup fails
        if name.startswith('_'):
            raise AttributeError(name)
        for index, channel in enumerate(self.channels):
            if channel.name == name:
                return self._components[index]
        raise AttributeError(f"{self.__class__.__name__} has no attribute or channel {name!r}")

    def with_channel(self, name: str, value: Scalar) -> Self:
        """Copy with one channel replaced; the whole value is validated again."""
        values = list(self._components)
        values[self.channel_index(name)] = value
        return self.__class__(*values, precision=self._precision)

    def with_components(self, values: Iterable[Scalar]) -> Self:
        return self.__class__(*values, precision=self._precision)

    # ------------------ BLENDING ------------------
    def interpolate(self, other: ColourBase, t: Scalar) -> Self:
        """
        Blend towards ``other`` by factor ``t`` in [0, 1].

        Ordinary channels blend linearly; hue follows the shorter arc of the
        colour wheel.

        Raises:
            InterpolationError: if ``t`` is outside [0, 1] or not a real
                number, or if ``other`` is a different colour class.
        """
        if type(other) is not type(self):
            raise InterpolationError(
                f"Cannot interpolate {type(self).__name__} with {type(other).__name__}"
            )
        if isinstance(t, bool) or not isinstance(t, Real) or not 0.0 <= t <= 1.0:
            raise InterpolationError(f"Interpolation factor must be within [0, 1], got {t!r}")

        t = float(t)
        values = []
        for a, b, channel in zip(self._components, other._components, self.channels):
            if channel.cyclic:
                values.append(normalize_hue(a + t * shortest_hue_delta(a, b)))
            else:
                values.append(a * (1.0 - t) + b * t)
        return self._from_computed(values, self._precision)

    @classmethod
    def mix(cls, colours: Sequence[ColourBase], weights: Sequence[Scalar]) -> Self:
        """Weighted blend of colours of this class, see :func:`chromatic.colours.mixing.mix`."""
        from .mixing import _mix
        for index, colour in enumerate(colours):
            if type(colour) is not cls:
                raise InterpolationError(
                    f"{cls.__name__}.mix got {type(colour).__name__} at index {index}"
                )
        return _mix(colours, weights, stacklevel=3)

    # ------------------ DUNDER ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColourBase):
            return NotImplemented
        return self.approx_eq(other)

    __hash__ = None  # tolerance equality is not transitive

    def __iter__(self) -> Iterator[float]:
        return iter(self._components)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index: int) -> float:
        return self._components[index]

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{channel.name}={value!r}" for channel, value in zip(self.channels, self._components)
        )
        return f"{self.__class__.__name__}({fields})"


class WithAlpha(ABC):
    """
    Mixin for a ColourBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.

    List it before ColourBase so its ``with_alpha`` wins over the opaque one.
    """
    __slots__ = ()

    # Tell static checkers these come from the real subclass (ColourBase)
    space: ClassVar[ColourSpace]
    _components: ScalarVector
    _precision: Precision
    convert: Callable[..., ColourBase]
    with_channel: Callable[..., Any]

    alpha_index: ClassVar[int] = -1

    @property
    def alpha(self) -> float:
        return self._components[self.alpha_index]

    def with_alpha(self, alpha: Scalar = 1.0) -> Self:
        """Return a copy with a new, validated alpha."""
        return self.with_channel("alpha", alpha)

    def without_alpha(self) -> ColourBase:
        """Drop alpha, returning the opaque colour of the same space."""
        return self.convert(self.space.base)


def build_registry(*classes: type[ColourBase]) -> dict[ColourSpace, type[ColourBase]]:
    return {cls.space: cls for cls in classes}
