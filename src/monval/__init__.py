"""
monval - Exact Monetary Amounts

Lossless conversion between monetary text and amounts stored as integer
minor units, with the reverse conversion back to text.

Key Features:
- Single-pass parser tolerant of currency codes, symbols and grouping
- Truncating (never rounding) handling of extra fractional digits
- Exact Decimal bridging, lossy float bridging kept separate
- pandas helpers and a command-line interface for bulk conversion

Example Usage:
    from monval import parse, format_amount

    parse("USD 1,234.56")   # 123456
    format_amount(-4)       # "-0.04"
"""

__version__ = "0.1.0"
__author__ = "monval contributors"

from .core.codec import (
    AmountOverflowError,
    ParseError,
    format_amount,
    format_with_code,
    format_with_symbol,
    from_decimal,
    from_double,
    from_integer,
    parse,
    to_decimal,
    to_double,
)
from .core.config import OverflowPolicy, get_config
from .core.money import Money

__all__ = [
    # Codec
    "parse",
    "format_amount",
    "format_with_code",
    "format_with_symbol",
    "to_decimal",
    "to_double",
    "from_double",
    "from_decimal",
    "from_integer",

    # Errors
    "ParseError",
    "AmountOverflowError",

    # Types and configuration
    "Money",
    "OverflowPolicy",
    "get_config",
]
