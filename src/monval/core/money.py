#!/usr/bin/env python3
"""
Money Primitive Type

Immutable wrapper over an amount in integer minor units.
Gives callers a typed value with constructors for every supported input
representation, while the codec functions remain usable on plain integers.
Arithmetic results stay in the signed 64-bit range under the configured
overflow policy.
"""

from dataclasses import dataclass
from decimal import Decimal

from .codec import (
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


@dataclass(frozen=True, order=True)
class Money:
    """
    Immutable money value in minor units (cents).

    Supports both positive and negative amounts. Carries no currency; labels
    are supplied only when formatting.

    Examples:
        >>> price = Money.parse("USD 12.34")
        >>> str(price)
        '12.34'

        >>> refund = Money.from_decimal(Decimal("-45.999"))
        >>> refund.cents
        -4599

        >>> (price + refund).format_with_code("USD")
        'USD -33.65'

        >>> refund.abs()
        Money(cents=4599)
    """

    cents: int

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from minor units."""
        return cls(cents=cents)

    @classmethod
    def parse(cls, text: str) -> "Money":
        """
        Parse from monetary text like '$123.45' or '1,234.5 EUR'.

        Raises:
            ParseError: If the text is not a valid amount
        """
        return cls(cents=parse(text))

    @classmethod
    def from_float(cls, value: float) -> "Money":
        """Create Money from a float in major units, truncating toward zero."""
        return cls(cents=from_double(value))

    @classmethod
    def from_decimal(cls, value: Decimal) -> "Money":
        """Create Money from a Decimal in major units, truncating toward zero."""
        return cls(cents=from_decimal(value))

    @classmethod
    def from_units(cls, units: int) -> "Money":
        """Create Money from whole major units."""
        return cls(cents=from_integer(units))

    def to_cents(self) -> int:
        """Get value in minor units."""
        return self.cents

    def to_decimal(self) -> Decimal:
        """Get exact Decimal value in major units."""
        return to_decimal(self.cents)

    def to_float(self) -> float:
        """Get float value in major units (lossy)."""
        return to_double(self.cents)

    def format_with_code(self, currency_code: str) -> str:
        """Format with a leading currency code."""
        return format_with_code(self.cents, currency_code)

    def format_with_symbol(self, currency_symbol: str) -> str:
        """Format with a leading currency symbol."""
        return format_with_symbol(self.cents, currency_symbol)

    def abs(self) -> "Money":
        """
        Return absolute value of Money.

        Useful for display purposes when sign doesn't matter.
        """
        return Money(cents=fit_amount(abs(self.cents)))

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        if not isinstance(other, Money):
            return NotImplemented
        return Money(cents=fit_amount(self.cents + other.cents))

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects."""
        if not isinstance(other, Money):
            return NotImplemented
        return Money(cents=fit_amount(self.cents - other.cents))

    def __mul__(self, scalar: int) -> "Money":
        """Multiply Money by integer scalar."""
        if not isinstance(scalar, int):
            return NotImplemented
        return Money(cents=fit_amount(self.cents * scalar))

    def __neg__(self) -> "Money":
        return Money(cents=fit_amount(-self.cents))

    def __str__(self) -> str:
        """Format as canonical amount text."""
        return format_amount(self.cents)

    def __repr__(self) -> str:
        """Repr format."""
        return f"Money(cents={self.cents})"
