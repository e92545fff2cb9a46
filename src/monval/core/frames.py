#!/usr/bin/env python3
"""
Tabular Amount Conversion

Applies the amount codec to pandas Series and CSV columns, for exports and
statements where amounts arrive as free-form text.
"""

import logging
from pathlib import Path

import pandas as pd

from .codec import ParseError, format_amount, format_with_code, parse

logger = logging.getLogger(__name__)

_ERROR_MODES = ("raise", "coerce")


def parse_series(series: pd.Series, errors: str = "raise") -> pd.Series:
    """
    Parse a Series of monetary text into minor units.

    Args:
        series: Series of strings like "$1,234.56"
        errors: "raise" to propagate the first ParseError, "coerce" to
            replace unparseable or missing cells with <NA>

    Returns:
        Series of nullable Int64 amounts with the original index
    """
    if errors not in _ERROR_MODES:
        raise ValueError(f"errors must be one of {_ERROR_MODES}, got {errors!r}")

    amounts: list[int | None] = []
    failures = 0
    for label, value in series.items():
        if pd.isna(value):
            if errors == "raise":
                raise ParseError("", f"missing value at row {label!r}")
            amounts.append(None)
            failures += 1
            continue
        try:
            amounts.append(parse(str(value)))
        except ParseError as e:
            if errors == "raise":
                raise
            logger.warning("Could not parse amount at row %r: %s", label, e)
            amounts.append(None)
            failures += 1

    if failures:
        logger.info("Coerced %d of %d amounts to missing", failures, len(series))
    return pd.Series(amounts, index=series.index, name=series.name, dtype="Int64")


def format_series(series: pd.Series, currency_code: str | None = None) -> pd.Series:
    """
    Format a Series of minor units as amount text.

    Missing amounts stay missing.

    Args:
        series: Series of integer amounts
        currency_code: Optional code to prefix, e.g. "USD"

    Returns:
        Series of strings like "45.45" or "USD 45.45"
    """

    def _format(value: object) -> object:
        if pd.isna(value):
            return pd.NA
        if currency_code:
            return format_with_code(int(value), currency_code)
        return format_amount(int(value))

    return series.map(_format).astype("string")


def convert_csv(
    input_path: Path | str,
    column: str,
    output_path: Path | str | None = None,
    errors: str = "raise",
) -> pd.DataFrame:
    """
    Add a parsed amount column to a CSV file.

    Every column is read as text so amounts keep their original formatting.
    The parsed amounts go into a new "<column>_cents" column.

    Args:
        input_path: CSV file to read
        column: Name of the column holding monetary text
        output_path: Optional CSV file to write the result to
        errors: "raise" or "coerce", as in parse_series

    Returns:
        DataFrame with the added column

    Raises:
        KeyError: If the column is not present in the file
    """
    df = pd.read_csv(input_path, dtype=str, keep_default_na=False, na_values=[""])
    if column not in df.columns:
        raise KeyError(f"Column {column!r} not found in {input_path}")

    df[f"{column}_cents"] = parse_series(df[column], errors=errors)
    logger.info("Converted %d amounts from column %r of %s", len(df), column, input_path)

    if output_path is not None:
        df.to_csv(output_path, index=False)
        logger.info("Wrote converted amounts to %s", output_path)

    return df
