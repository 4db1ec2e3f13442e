"""
Chromatic Exceptions
====================

Every error raised by the library derives from :class:`ChromaticError` and
from the builtin exception a caller would expect at that boundary
(``ValueError`` for bad input, ``ArithmeticError`` for numeric failures).

Hierarchy
---------
ChromaticError
    ValidationError          channel or position outside its domain
    UnknownChannelError      channel name the colour class does not have
    UnknownColourSpaceError  colour space name that is not supported
    FormatError              hex / decimal text that cannot be parsed
    RangeConversionError     value not representable in the target precision
    InterpolationError       factor outside [0, 1], mismatched colour types
    MixError
        EmptyInputError
        LengthMismatchError
        NegativeWeightError
        DegenerateWeightError
    ColourMapError
        EmptyColourMapError
        MismatchedLengthsError
        PositionOutOfRangeError
        NonAscendingPositionsError
        MixedColourTypesError
        InvalidSampleError

Warnings
--------
HueOrderWarning              multi-colour hue blends that depend on fold order
"""

from __future__ import annotations
from enum import Enum
from typing import Any


class ChromaticError(Exception):
    """Base class for all library errors."""


class ValidationError(ChromaticError, ValueError):
    """A channel value lies outside the channel's domain."""

    def __init__(self, channel: str, minimum: float, maximum: float, value: Any, detail: str | None = None) -> None:
        self.channel = channel
        self.minimum = minimum
        self.maximum = maximum
        self.value = value
        message = f"{channel} must be within [{minimum}, {maximum}], got {value!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class FormatErrorKind(str, Enum):
    PARSE_FLOAT = "parse_float"
    PARSE_HEX = "parse_hex"
    INVALID_FORMAT = "invalid_format"


class FormatError(ChromaticError, ValueError):
    """Text could not be parsed into colour components."""

    def __init__(self, kind: FormatErrorKind, text: str, detail: str) -> None:
        self.kind = kind
        self.text = text
        super().__init__(f"{detail}: {text!r}")


class RangeConversionError(ChromaticError, ArithmeticError):
    """A computed value is not representable (non-finite or cannot be normalised)."""


class InterpolationError(ChromaticError, ValueError):
    """Invalid interpolation factor or incompatible colours."""


class UnknownChannelError(ChromaticError, ValueError):
    """A channel name that the colour class does not have."""

    def __init__(self, class_name: str, name: str, available: tuple) -> None:
        self.name = name
        super().__init__(f"{class_name} has no channel {name!r}; channels are {', '.join(available)}")


class UnknownColourSpaceError(ChromaticError, ValueError):
    def __init__(self, space: object) -> None:
        self.space = space
        super().__init__(f"Unsupported colour space: {space!r}")


# ------------------ Mixing ------------------

class MixError(ChromaticError, ValueError):
    """Invalid input to a weighted mix."""


class EmptyInputError(MixError):
    def __init__(self) -> None:
        super().__init__("Cannot mix an empty list of colours")


class LengthMismatchError(MixError):
    def __init__(self, colours: int, weights: int) -> None:
        self.colours = colours
        self.weights = weights
        super().__init__(f"Colour and weight lists differ in length: {colours} colours, {weights} weights")


class NegativeWeightError(MixError):
    def __init__(self, weight: Any, index: int) -> None:
        self.weight = weight
        self.index = index
        super().__init__(f"Weight at index {index} must be a non-negative number, got {weight!r}")


class DegenerateWeightError(MixError):
    def __init__(self, total: float) -> None:
        self.total = total
        super().__init__(f"Weights must sum to a positive finite number, got {total!r}")


# ------------------ Colour maps ------------------

class ColourMapError(ChromaticError, ValueError):
    """Invalid colour map construction or sampling."""


class EmptyColourMapError(ColourMapError):
    def __init__(self) -> None:
        super().__init__("Colour map needs at least one colour")


class MismatchedLengthsError(ColourMapError):
    def __init__(self, colours: int, positions: int) -> None:
        self.colours = colours
        self.positions = positions
        super().__init__(f"Colour and position lists differ in length: {colours} colours, {positions} positions")


class PositionOutOfRangeError(ColourMapError):
    def __init__(self, position: Any, index: int) -> None:
        self.position = position
        self.index = index
        super().__init__(f"Position {position!r} at index {index} is outside [0, 1]")


class NonAscendingPositionsError(ColourMapError):
    def __init__(self, previous: float, index: int, position: float) -> None:
        self.previous = previous
        self.index = index
        self.position = position
        super().__init__(
            f"Positions must be strictly ascending: {previous} at index {index - 1} "
            f">= {position} at index {index}"
        )


class MixedColourTypesError(ColourMapError):
    def __init__(self, expected: type, found: type, index: int) -> None:
        self.expected = expected
        self.found = found
        self.index = index
        super().__init__(
            f"Colour map holds {expected.__name__} colours, got {found.__name__} at index {index}"
        )


class InvalidSampleError(ColourMapError):
    def __init__(self, position: Any) -> None:
        self.position = position
        super().__init__(f"Cannot sample a colour map at {position!r}")


# ------------------ Warnings ------------------

class HueOrderWarning(RuntimeWarning):
    """A hue blend of more than two colours depends on the order they are given in."""
