#!/usr/bin/env python3
"""
Main CLI Entry Point for Bank Ledger

Provides the unified command-line interface: one-shot account commands and the
interactive menu.
"""

import logging
import os
from pathlib import Path

import click

from ..accounts.datastore import LedgerFileStore
from ..core.config import get_config, reload_config


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option(
    "--ledger-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Ledger file to use instead of the configured one",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(
    ctx: click.Context, config_env: str | None, ledger_file: Path | None, verbose: bool, debug: bool
) -> None:
    """
    Bank Ledger - Console Account Management

    Create, look up, fund and close bank accounts kept in a flat text file.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["BANKLEDGER_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("bankledger").setLevel(logging.DEBUG)

    try:
        config = reload_config() if (config_env or debug) else get_config()
    except ValueError as e:
        raise click.ClickException(str(e))

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config
    ctx.obj["ledger_file"] = ledger_file or config.ledger_file

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"Ledger file: {ctx.obj['ledger_file']}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from bankledger import __author__, __version__

    click.echo(f"Bank Ledger v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Ledger File: {ctx.obj['ledger_file']}")
    click.echo(f"  Strict Load: {config_obj.strict_load}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")

    store = LedgerFileStore(ctx.obj["ledger_file"])
    click.echo(f"\n{store.summary_text()}")
    last_mod = store.last_modified()
    if last_mod is not None:
        click.echo(f"  Last Modified: {last_mod:%Y-%m-%d %H:%M:%S} ({store.age_days()} days ago)")
        click.echo(f"  Size: {store.size_bytes()} bytes")


from .accounts import accounts  # noqa: E402
from .menu import menu  # noqa: E402

main.add_command(accounts)
main.add_command(menu)


if __name__ == "__main__":
    main()
