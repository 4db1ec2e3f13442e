from typing import Iterable, Tuple

from ..errors import FormatError, FormatErrorKind

DEFAULT_ALPHA = 1.0


def parse_decimal(text: str, num_channels: int, has_alpha: bool = False) -> Tuple[float, ...]:
    """
    Parse ``"r, g, b[, a]"``-style text into floats.

    The values are not range-checked here. When ``has_alpha`` is set the last
    value may be omitted and defaults to 1.0.

    Raises:
        FormatError: ``PARSE_FLOAT`` for a value that is not a number,
            ``INVALID_FORMAT`` for a wrong value count.
    """
    if not text.strip():
        raise FormatError(FormatErrorKind.INVALID_FORMAT, text, "Empty colour text")

    values = []
    for part in text.split(","):
        try:
            values.append(float(part.strip()))
        except ValueError:
            raise FormatError(FormatErrorKind.PARSE_FLOAT, text, f"Invalid number {part.strip()!r}") from None

    if has_alpha and len(values) == num_channels - 1:
        values.append(DEFAULT_ALPHA)
    if len(values) != num_channels:
        raise FormatError(
            FormatErrorKind.INVALID_FORMAT,
            text,
            f"Expected {num_channels} comma-separated values, got {len(values)}",
        )
    return tuple(values)


def format_decimal(values: Iterable[float]) -> str:
    return ", ".join(repr(float(value)) for value in values)
