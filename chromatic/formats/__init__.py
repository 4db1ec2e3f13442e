"""Text forms of colours: ``#RRGGBB``-style hex and ``"r, g, b[, a]"`` decimal."""

from .decimal import format_decimal, parse_decimal
from .hex_codes import format_hex, parse_hex

__all__ = ["format_decimal", "parse_decimal", "format_hex", "parse_hex"]
