"""
bigradix — arbitrary-precision integers in any radix from 2 to 36.

Plain digit strings ("ff" in base 16) and tagged literals compatible with
Python's integer literal syntax ("0xff", "-0b101", "0o17", "42") plus a
generic "<base>_" tag for every other radix ("13_a").
"""

from bigradix.api import (
    ParseResult,
    convert_base,
    convert_tagged,
    format_tagged,
    format_to_base,
    parse_from_base,
    parse_tagged,
    try_parse_from_base,
    try_parse_tagged,
)
from bigradix.core.domain import Conversion
from bigradix.core.errors import (
    EmptyInput,
    InvalidBase,
    InvalidDigit,
    RadixConversionError,
)
from bigradix.core.math import MAX_BASE, MIN_BASE, WELL_KNOWN_TAGS

__version__ = "0.1.0"

__all__ = [
    # Strict API
    "parse_from_base",
    "parse_tagged",
    "format_to_base",
    "format_tagged",
    # Try API
    "ParseResult",
    "try_parse_from_base",
    "try_parse_tagged",
    # Conversion
    "Conversion",
    "convert_base",
    "convert_tagged",
    # Errors
    "RadixConversionError",
    "EmptyInput",
    "InvalidDigit",
    "InvalidBase",
    # Constants
    "MIN_BASE",
    "MAX_BASE",
    "WELL_KNOWN_TAGS",
]
