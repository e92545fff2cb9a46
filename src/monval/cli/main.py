#!/usr/bin/env python3
"""
Main CLI Entry Point for monval

Provides a command-line interface over the amount codec.
"""

import logging
import os

import click

from ..core.config import get_config, reload_config

_CONFIG_LABELS = {
    "overflow": "Overflow Policy",
    "debug": "Debug Mode",
}


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    monval - exact monetary amounts

    Parses monetary text into integer minor units and formats it back.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)

    # Set environment if specified
    if config_env:
        os.environ["MONVAL_ENV"] = config_env
        reload_config()

    # Configure debug logging if requested
    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("monval").setLevel(logging.DEBUG)

    # Store global options
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = get_config()

    if verbose:
        click.echo(f"Environment: {ctx.obj['config'].environment.value}")
        click.echo(f"Overflow policy: {ctx.obj['config'].overflow.value}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show version information."""
    from monval import __author__, __version__

    click.echo(f"monval v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    for field_name, value in config_obj.to_dict().items():
        label = _CONFIG_LABELS.get(field_name, field_name.replace("_", " ").title())
        click.echo(f"  {label}: {'(none)' if value is None else value}")


# Import amount commands
from .amounts import convert, convert_csv, format_cmd, parse_cmd  # noqa: E402

main.add_command(parse_cmd)
main.add_command(format_cmd)
main.add_command(convert)
main.add_command(convert_csv)


if __name__ == "__main__":
    main()
