#!/usr/bin/env python3
"""
Amount CLI - Parse, Format and Convert

Command-line access to the amount codec. Negative values may be passed
directly (e.g. `monval format -4`) or after a `--` separator, so these
commands define long options only.
"""

from decimal import Decimal, InvalidOperation
from pathlib import Path

import click

from ..core.codec import (
    AmountOverflowError,
    ParseError,
    format_amount,
    format_with_code,
    format_with_symbol,
    from_decimal,
    from_double,
    from_integer,
    parse,
)
from ..core.config import get_config
from ..core.frames import convert_csv as convert_csv_file

# Lets values like "-0.01" through as arguments instead of options
_ARGUMENT_SETTINGS = {"ignore_unknown_options": True}


@click.command("parse", context_settings=_ARGUMENT_SETTINGS)
@click.argument("texts", nargs=-1, required=True)
@click.option("--verbose", is_flag=True, help="Show the canonical text next to each amount")
def parse_cmd(texts: tuple[str, ...], verbose: bool) -> None:
    """
    Parse monetary text into minor units.

    Examples:
      monval parse "USD 1,234.56"
      monval parse -- "-0.01" "345 689.25"
    """
    for text in texts:
        try:
            amount = parse(text)
        except ParseError as e:
            raise click.ClickException(str(e)) from e

        if verbose:
            click.echo(f"{amount}\t{format_amount(amount)}")
        else:
            click.echo(amount)


@click.command("format", context_settings=_ARGUMENT_SETTINGS)
@click.argument("amount", type=int)
@click.option("--code", help="Currency code to prefix, e.g. USD")
@click.option("--symbol", help="Currency symbol to prefix, e.g. $")
def format_cmd(amount: int, code: str | None, symbol: str | None) -> None:
    """
    Format an amount in minor units as text.

    Uses MONVAL_CURRENCY_CODE when neither --code nor --symbol is given.

    Examples:
      monval format 4545 --code USD
      monval format -- -4
    """
    if code and symbol:
        raise click.UsageError("Use only one of --code and --symbol")

    if symbol:
        click.echo(format_with_symbol(amount, symbol))
        return

    code = code or get_config().currency_code
    if code:
        click.echo(format_with_code(amount, code))
    else:
        click.echo(format_amount(amount))


@click.command(context_settings=_ARGUMENT_SETTINGS)
@click.argument("value")
@click.option(
    "--from",
    "source",
    type=click.Choice(["double", "decimal", "integer"]),
    default="decimal",
    show_default=True,
    help="How to read VALUE: float, exact decimal or whole major units",
)
def convert(value: str, source: str) -> None:
    """
    Convert a numeric value in major units to minor units.

    Examples:
      monval convert 5555.556
      monval convert 453.01999999 --from double
      monval convert 43 --from integer
    """
    try:
        if source == "double":
            amount = from_double(float(value))
        elif source == "decimal":
            amount = from_decimal(Decimal(value))
        else:
            amount = from_integer(int(value))
    except (ValueError, InvalidOperation, AmountOverflowError) as e:
        raise click.ClickException(f"Cannot convert {value!r} as {source}: {e}") from e

    click.echo(amount)


@click.command("convert-csv")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--column", required=True, help="Column holding monetary text")
@click.option("--output", "output_file", type=click.Path(dir_okay=False, path_type=Path), help="Write result here")
@click.option("--coerce", is_flag=True, help="Leave unparseable amounts empty instead of failing")
def convert_csv(input_file: Path, column: str, output_file: Path | None, coerce: bool) -> None:
    """
    Add a parsed <column>_cents column to a CSV file.

    Prints the converted CSV unless --output is given.

    Examples:
      monval convert-csv statement.csv --column amount
      monval convert-csv statement.csv --column amount --output parsed.csv --coerce
    """
    try:
        df = convert_csv_file(
            input_file, column, output_path=output_file, errors="coerce" if coerce else "raise"
        )
    except KeyError as e:
        raise click.ClickException(str(e.args[0])) from e
    except ParseError as e:
        raise click.ClickException(f"{e} (use --coerce to skip invalid amounts)") from e

    if output_file is None:
        click.echo(df.to_csv(index=False), nl=False)
    else:
        missing = int(df[f"{column}_cents"].isna().sum())
        click.echo(f"Converted {len(df)} amounts to {output_file}")
        if missing:
            click.echo(f"  {missing} amounts could not be parsed")
