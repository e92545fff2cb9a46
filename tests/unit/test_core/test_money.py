#!/usr/bin/env python3
"""Tests for Money primitive type."""

from decimal import Decimal

import pytest

from monval.core.codec import MAX_AMOUNT, MIN_AMOUNT, AmountOverflowError, ParseError
from monval.core.config import reload_config
from monval.core.money import Money


class TestMoneyConstruction:
    """Test Money class construction."""

    @pytest.mark.currency
    def test_from_cents(self):
        """Test creating Money from cents."""
        m = Money.from_cents(1234)
        assert m.to_cents() == 1234

    @pytest.mark.currency
    def test_parse(self):
        """Test parsing from monetary text."""
        assert Money.parse("$12.34").to_cents() == 1234
        assert Money.parse("12.34 USD").to_cents() == 1234
        assert Money.parse("-1,000").to_cents() == -100000

    @pytest.mark.currency
    def test_parse_invalid(self):
        """Test that invalid text raises ParseError."""
        with pytest.raises(ParseError):
            Money.parse("12.x4")

    @pytest.mark.currency
    def test_from_units(self):
        """Test creating from whole major units."""
        assert Money.from_units(12).to_cents() == 1200

    @pytest.mark.currency
    def test_from_decimal_and_float(self):
        """Test truncating constructors."""
        assert Money.from_decimal(Decimal("-45.999")).to_cents() == -4599
        assert Money.from_float(453.041).to_cents() == 45304


class TestMoneyConversion:
    """Test Money output conversions."""

    @pytest.mark.currency
    def test_to_decimal(self):
        """Test exact Decimal output."""
        assert Money.from_cents(-555550).to_decimal() == Decimal("-5555.50")

    @pytest.mark.currency
    def test_to_float(self):
        """Test float output."""
        assert Money.from_cents(555).to_float() == 5.55

    @pytest.mark.currency
    def test_string_formats(self):
        """Test canonical and labeled text."""
        m = Money.from_cents(-4)
        assert str(m) == "-0.04"
        assert m.format_with_code("USD") == "USD -0.04"
        assert m.format_with_symbol("$") == "$ -0.04"
        assert repr(m) == "Money(cents=-4)"


class TestMoneyArithmetic:
    """Test Money arithmetic operations."""

    @pytest.mark.currency
    def test_addition_and_subtraction(self):
        """Test adding and subtracting Money objects."""
        a = Money.from_cents(100)
        b = Money.from_cents(30)
        assert (a + b).to_cents() == 130
        assert (a - b).to_cents() == 70

    @pytest.mark.currency
    def test_multiplication(self):
        """Test multiplying Money by scalar."""
        assert (Money.from_cents(50) * 3).to_cents() == 150

    @pytest.mark.currency
    def test_negation_and_abs(self):
        """Test sign helpers."""
        m = Money.from_cents(-4599)
        assert m.abs() == Money(cents=4599)
        assert -m == Money(cents=4599)

    @pytest.mark.currency
    def test_arithmetic_overflow_raises(self):
        """Test that results outside the 64-bit range fail by default."""
        largest = Money.from_cents(MAX_AMOUNT)
        smallest = Money.from_cents(MIN_AMOUNT)

        with pytest.raises(AmountOverflowError):
            largest + Money.from_cents(1)
        with pytest.raises(AmountOverflowError):
            smallest - Money.from_cents(1)
        with pytest.raises(AmountOverflowError):
            largest * 2
        with pytest.raises(AmountOverflowError):
            -smallest
        with pytest.raises(AmountOverflowError):
            smallest.abs()

    @pytest.mark.currency
    def test_arithmetic_overflow_wraps(self, monkeypatch):
        """Test wraparound when the configured policy is wrap."""
        monkeypatch.setenv("MONVAL_OVERFLOW", "wrap")
        reload_config()

        assert Money.from_cents(MAX_AMOUNT) + Money.from_cents(1) == Money(cents=MIN_AMOUNT)
        assert -Money.from_cents(MIN_AMOUNT) == Money(cents=MIN_AMOUNT)

    @pytest.mark.currency
    def test_mixed_types_rejected(self):
        """Test that plain numbers cannot be added to Money."""
        with pytest.raises(TypeError):
            Money.from_cents(100) + 1


class TestMoneyComparison:
    """Test Money comparison operations."""

    @pytest.mark.currency
    def test_equality(self):
        """Test Money equality."""
        assert Money.from_cents(100) == Money.parse("1.00")
        assert Money.from_cents(100) != Money.from_cents(50)

    @pytest.mark.currency
    def test_ordering(self):
        """Test Money ordering."""
        small = Money.from_cents(-1)
        large = Money.from_cents(1)
        assert small < large
        assert large >= small
        assert sorted([large, small]) == [small, large]

    @pytest.mark.currency
    def test_immutable(self):
        """Test that Money cannot be modified."""
        m = Money.from_cents(100)
        with pytest.raises(AttributeError):
            m.cents = 200  # type: ignore[misc]
