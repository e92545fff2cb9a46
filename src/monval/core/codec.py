#!/usr/bin/env python3
"""
Amount Parsing, Formatting and Conversion

Converts between human-readable monetary text and amounts stored as a signed
64-bit count of minor units (hundredths of the major currency unit).

Representations:
- Amount: integer minor units, 100 = 1.00, -1 = -0.01
- Text: "[-]<major>.<minor>", e.g. "45.45", "-0.04"
- Decimal: exact value with scale 2, e.g. Decimal("45.45")
- Float: display/interop only, never re-parsed into exact amounts

Key Principles:
- Parsing is a single left-to-right scan using integer arithmetic only
- Fractional digits beyond the second are truncated, never rounded
- The sign is applied once, to the assembled magnitude
- Float and Decimal conversions keep their own rounding behavior
"""

import logging
import math
import unicodedata
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal

from .config import OverflowPolicy, get_overflow_policy

logger = logging.getLogger(__name__)

MINOR_DIGITS = 2
MINOR_PER_MAJOR = 10**MINOR_DIGITS

MIN_AMOUNT = -(2**63)
MAX_AMOUNT = 2**63 - 1

# Any magnitude with this many integer digits is outside the 64-bit range
_MAX_AMOUNT_DIGITS = len(str(MAX_AMOUNT))

_GROUPING_SEPARATORS = (",", " ")

# Wide enough that scaling by a power of ten never rounds
_EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


class ParseError(ValueError):
    """Raised when text cannot be parsed as a monetary amount."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Can't parse monetary amount, {reason}: {text!r}")
        self.text = text
        self.reason = reason


class AmountOverflowError(OverflowError):
    """Raised when a converted amount does not fit in a signed 64-bit integer."""

    def __init__(self, value: int | Decimal, source: str) -> None:
        super().__init__(f"Amount {value} converted from {source} is outside the 64-bit range")
        self.value = value
        self.source = source


def _digit_value(char: str) -> int | None:
    """Return the value of a decimal digit character, or None for anything else."""
    return unicodedata.decimal(char, None)


def _fraction_digit(text: str, index: int) -> int:
    digit = _digit_value(text[index])
    if digit is None:
        raise ParseError(text, f"{text[index]!r} is not a valid digit")
    return digit


def _resolve_policy(overflow: OverflowPolicy | None) -> OverflowPolicy:
    return overflow if overflow is not None else get_overflow_policy()


def fit_amount(value: int, overflow: OverflowPolicy | None = None, source: str = "arithmetic") -> int:
    """
    Fit a value into the signed 64-bit range according to the overflow policy.

    Args:
        value: Exact result in minor units
        overflow: Policy for out-of-range values (uses config if None)
        source: What produced the value, for messages

    Returns:
        The value itself, or its two's-complement wraparound under WRAP

    Raises:
        AmountOverflowError: If the value is out of range under RAISE
    """
    if MIN_AMOUNT <= value <= MAX_AMOUNT:
        return value

    if _resolve_policy(overflow) is OverflowPolicy.WRAP:
        wrapped = (value - MIN_AMOUNT) % 2**64 + MIN_AMOUNT
        logger.debug("Wrapped out-of-range amount %d from %s to %d", value, source, wrapped)
        return wrapped
    raise AmountOverflowError(value, source)


def parse(text: str, overflow: OverflowPolicy | None = None) -> int:
    """
    Parse free-form monetary text to minor units.

    A dot separates the integer and decimal parts. A minus sign anywhere before
    the first digit makes the amount negative. Currency codes or symbols before
    the number are skipped, commas and spaces inside the integer part are
    ignored, and text after the number is ignored. At most two fractional
    digits are read; further digits are truncated.

    Args:
        text: String like "USD -1,234.56", "$ 4.00" or "345 689.25"
        overflow: Policy for results outside the 64-bit range (uses config if None)

    Returns:
        Amount in minor units

    Raises:
        ParseError: If the text is empty, has no digits, has more than one
            minus sign, has a decimal point before any digit, or has a
            non-digit in one of the two fractional positions

    Examples:
        parse("345,689.25") -> 34568925
        parse("-0.01") -> -1
        parse("2.501") -> 250
        parse("13abc") -> 1300
    """
    size = len(text)
    if size == 0:
        raise ParseError(text, "string is empty")

    negative = False
    integer_part = 0

    # Skip currency codes and symbols up to the first digit
    i = 0
    while i < size:
        char = text[i]
        if char == "-":
            if negative:
                raise ParseError(text, "only one minus sign is allowed")
            negative = True
        elif char == ".":
            raise ParseError(text, "decimal point found before any digits")
        else:
            digit = _digit_value(char)
            if digit is not None:
                integer_part = digit
                break
        i += 1

    if i == size:
        raise ParseError(text, "string contains no digits")

    # Integer part, ends at the decimal point or at trailing text
    decimal_part = 0
    i += 1
    while i < size:
        char = text[i]
        if char == ".":
            remaining = size - i - 1
            if remaining >= 1:
                decimal_part = _fraction_digit(text, i + 1) * 10
            if remaining >= 2:
                decimal_part += _fraction_digit(text, i + 2)
            break
        if char not in _GROUPING_SEPARATORS:
            digit = _digit_value(char)
            if digit is None:
                break
            integer_part = integer_part * 10 + digit
        i += 1

    amount = integer_part * MINOR_PER_MAJOR + decimal_part
    if negative:
        amount = -amount

    try:
        return fit_amount(amount, overflow, "text")
    except AmountOverflowError as e:
        raise ParseError(text, "amount is outside the 64-bit range") from e


def format_amount(amount: int) -> str:
    """
    Format minor units as canonical amount text using integer arithmetic.

    Args:
        amount: Amount in minor units

    Returns:
        String with no grouping and exactly two fractional digits

    Example:
        format_amount(4505) -> "45.05"
        format_amount(-4) -> "-0.04"
    """
    is_negative = amount < 0
    major, minor = divmod(abs(amount), MINOR_PER_MAJOR)

    if is_negative:
        return f"-{major}.{minor:02d}"
    return f"{major}.{minor:02d}"


def format_with_code(amount: int, currency_code: str) -> str:
    """Format an amount prefixed by a currency code, e.g. "USD 45.45"."""
    return f"{currency_code} {format_amount(amount)}"


def format_with_symbol(amount: int, currency_symbol: str) -> str:
    """Format an amount prefixed by a currency symbol, e.g. "$ 45.45"."""
    return f"{currency_symbol} {format_amount(amount)}"


def to_decimal(amount: int) -> Decimal:
    """
    Convert minor units to an exact Decimal with scale 2.

    Example:
        to_decimal(-555550) -> Decimal("-5555.50")
    """
    return Decimal(amount).scaleb(-MINOR_DIGITS, context=_EXACT)


def to_double(amount: int) -> float:
    """
    Convert minor units to a float in major units.

    Lossy: binary floating point cannot represent most cent values exactly.
    Use for display and interop only.
    """
    return float(amount) / MINOR_PER_MAJOR


def from_double(value: float, overflow: OverflowPolicy | None = None) -> int:
    """
    Convert a float in major units to minor units, truncating toward zero.

    Lossy for values with more than two fractional digits or magnitudes near
    the limits of float precision.

    Args:
        value: Amount in major units, e.g. 453.341
        overflow: Policy for results outside the 64-bit range (uses config if None)

    Returns:
        Amount in minor units

    Raises:
        ValueError: If value is NaN or infinite

    Example:
        from_double(453.01999999) -> 45301
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot convert non-finite value {value!r} to an amount")
    return fit_amount(int(value * 100.0), overflow, "float")


def from_decimal(value: Decimal, overflow: OverflowPolicy | None = None) -> int:
    """
    Convert a Decimal in major units to minor units, truncating toward zero.

    Exact at any precision: the value is rescaled to two fractional digits
    and the unscaled integer is returned.

    Args:
        value: Amount in major units
        overflow: Policy for results outside the 64-bit range (uses config if None)

    Returns:
        Amount in minor units

    Raises:
        ValueError: If value is NaN or infinite
        AmountOverflowError: If the result is outside the 64-bit range under RAISE

    Examples:
        from_decimal(Decimal("5555.556")) -> 555555
        from_decimal(Decimal("-5555.559")) -> -555555
    """
    if not value.is_finite():
        raise ValueError(f"Cannot convert non-finite value {value!r} to an amount")

    if value.is_zero():
        return 0

    # Below 10**19 once scaled, so materializing the integer is cheap
    if value.adjusted() + MINOR_DIGITS < _MAX_AMOUNT_DIGITS:
        return fit_amount(int(value.scaleb(MINOR_DIGITS, context=_EXACT)), overflow, "decimal")

    if _resolve_policy(overflow) is not OverflowPolicy.WRAP:
        raise AmountOverflowError(value, "decimal")

    sign, digits, exponent = value.as_tuple()
    scale = exponent + MINOR_DIGITS
    if scale < 0:
        # Digits are bounded by the coefficient, which the caller already holds
        minor_units = int(value.scaleb(MINOR_DIGITS, context=_EXACT))
    else:
        coefficient = int(Decimal((0, digits, 0)))
        minor_units = coefficient * pow(10, scale, 2**64)
        if sign:
            minor_units = -minor_units
    return fit_amount(minor_units, OverflowPolicy.WRAP, "decimal")


def from_integer(value: int, overflow: OverflowPolicy | None = None) -> int:
    """Convert whole major units to minor units, e.g. from_integer(43) -> 4300."""
    return fit_amount(value * MINOR_PER_MAJOR, overflow, "integer")
