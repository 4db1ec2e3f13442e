from typing import Iterable, Tuple

from ..errors import FormatError, FormatErrorKind

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# A short-form digit d expands to the byte dd, i.e. d * 17.
NIBBLE_REPLICATION = 17


def parse_hex(text: str, num_bytes: int) -> Tuple[int, ...]:
    """
    Parse ``#`` + hex digits into ``num_bytes`` bytes.

    Accepts one digit per byte (short form, expanded by nibble replication)
    or two digits per byte. Case-insensitive; surrounding whitespace ignored.

    Raises:
        FormatError: ``INVALID_FORMAT`` for a missing ``#`` or wrong digit
            count, ``PARSE_HEX`` for a non-hex digit.
    """
    stripped = text.strip()
    if not stripped.startswith("#"):
        raise FormatError(FormatErrorKind.INVALID_FORMAT, text, "Hex colour must start with '#'")

    digits = stripped[1:]
    bad = [d for d in digits if d not in HEX_DIGITS]
    if bad:
        raise FormatError(FormatErrorKind.PARSE_HEX, text, f"Invalid hex digit {bad[0]!r}")

    if len(digits) == num_bytes:
        return tuple(int(d, 16) * NIBBLE_REPLICATION for d in digits)
    if len(digits) == 2 * num_bytes:
        return tuple(int(digits[i:i + 2], 16) for i in range(0, len(digits), 2))

    raise FormatError(
        FormatErrorKind.INVALID_FORMAT,
        text,
        f"Expected {num_bytes} or {2 * num_bytes} hex digits, got {len(digits)}",
    )


def format_hex(data: Iterable[int]) -> str:
    """Canonical uppercase ``#`` form, two digits per byte."""
    return "#" + "".join(f"{byte:02X}" for byte in data)
