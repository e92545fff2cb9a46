"""
Core Package

Amount codec, Money value type, configuration and tabular helpers.

This package provides:
- Parsing of free-form monetary text into integer minor units
- Canonical formatting, optionally labeled with a currency code or symbol
- Conversions to and from float, Decimal and whole major units
- Configuration management for environment-specific settings
"""

from .codec import (
    MAX_AMOUNT,
    MIN_AMOUNT,
    AmountOverflowError,
    ParseError,
    fit_amount,
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
from .config import (
    Config,
    Environment,
    OverflowPolicy,
    get_config,
    get_overflow_policy,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .money import Money

__all__ = [
    "MAX_AMOUNT",
    "MIN_AMOUNT",
    "AmountOverflowError",
    # Configuration
    "Config",
    "Environment",
    "Money",
    "OverflowPolicy",
    "ParseError",
    # Codec
    "fit_amount",
    "format_amount",
    "format_with_code",
    "format_with_symbol",
    "from_decimal",
    "from_double",
    "from_integer",
    "get_config",
    "get_overflow_policy",
    "is_development",
    "is_production",
    "is_test",
    "parse",
    "reload_config",
    "to_decimal",
    "to_double",
]
