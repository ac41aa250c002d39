#!/usr/bin/env python3
"""
Accounts CLI - One-Shot Ledger Commands

Each command loads the ledger file, performs one operation and saves the file
again if anything changed.
"""

from pathlib import Path

import click

from ..accounts.ledger import Ledger, OperationResult
from ..accounts.models import Account
from ..core.exceptions import LedgerError, LedgerIOError
from ..core.money import Money
from .params import ACCOUNT_NUMBER, NAME, NON_NEGATIVE_AMOUNT, PIN, POSITIVE_AMOUNT


def prompt_pin(account: Account) -> str:
    """Read a PIN for the given account without echoing it."""
    return click.prompt(f"Enter PIN for account {account.account_number}", hide_input=True, default="", show_default=False)


def render_account(account: Account) -> str:
    """Single-line account summary for listings."""
    return f"Name: {account.name} | Account: {account.account_number} | Balance: {account.balance}"


def open_ledger(ctx: click.Context) -> tuple[Ledger, Path]:
    """Build a ledger for this invocation and load it from the configured file."""
    ledger_file: Path = ctx.obj["ledger_file"]
    config = ctx.obj["config"]

    ledger = Ledger(pin_supplier=prompt_pin)
    try:
        count = ledger.load_from_file(ledger_file, strict=config.strict_load)
    except LedgerError as e:
        raise click.ClickException(str(e))

    if ctx.obj.get("verbose"):
        click.echo(f"Loaded {count} accounts from {ledger_file}")
    return ledger, ledger_file


def save_ledger(ledger: Ledger, ledger_file: Path) -> None:
    """Save the ledger, turning write failures into a CLI error."""
    try:
        ledger.save_to_file(ledger_file)
    except LedgerIOError as e:
        raise click.ClickException(f"Failed to save ledger, changes were NOT written: {e}")


def report(ctx: click.Context, ledger: Ledger, ledger_file: Path, result: OperationResult) -> None:
    """Echo an operation outcome, saving on success and exiting non-zero otherwise."""
    if not result.ok:
        click.echo(result.message, err=True)
        ctx.exit(1)

    save_ledger(ledger, ledger_file)
    click.echo(result.message)


@click.group()
def accounts() -> None:
    """Bank account management commands."""
    pass


@accounts.command()
@click.option("--name", prompt="Name", type=NAME, help="Account holder name")
@click.option("--number", prompt="Account Number", type=ACCOUNT_NUMBER, help="Account number")
@click.option("--balance", prompt="Initial Balance", type=NON_NEGATIVE_AMOUNT, help="Opening balance")
@click.pass_context
def create(ctx: click.Context, name: str, number: int, balance: Money) -> None:
    """
    Create a new account. The 4-digit PIN is always prompted for.

    Example:
      bankledger accounts create --name Alice --number 1001 --balance 100
    """
    ledger, ledger_file = open_ledger(ctx)
    pin = click.prompt("Set 4-digit PIN", type=PIN, hide_input=True, confirmation_prompt=True)

    try:
        ledger.add_account(name, number, balance, pin)
    except LedgerError as e:
        raise click.ClickException(str(e))

    save_ledger(ledger, ledger_file)
    click.echo("Account created successfully.")


@accounts.command(name="list")
@click.pass_context
def list_accounts(ctx: click.Context) -> None:
    """Show all accounts in stored order."""
    ledger, _ = open_ledger(ctx)

    click.echo("--- All Accounts ---")
    if not len(ledger):
        click.echo("No accounts available.")
        return

    for account in ledger:
        click.echo(render_account(account))

    if ctx.obj.get("verbose"):
        click.echo(f"Total: {len(ledger)} accounts, {ledger.total_balance()}")


@accounts.command()
@click.argument("number", type=ACCOUNT_NUMBER)
@click.pass_context
def show(ctx: click.Context, number: int) -> None:
    """Look up one account by number."""
    ledger, _ = open_ledger(ctx)

    account = ledger.find_account(number)
    if account is None:
        click.echo("Account not found.", err=True)
        ctx.exit(1)
    click.echo(f"Found -> {account.name} | Balance: {account.balance}")


@accounts.command()
@click.argument("number", type=ACCOUNT_NUMBER)
@click.argument("amount", type=POSITIVE_AMOUNT)
@click.pass_context
def deposit(ctx: click.Context, number: int, amount: Money) -> None:
    """Deposit AMOUNT into account NUMBER."""
    ledger, ledger_file = open_ledger(ctx)
    try:
        result = ledger.deposit(number, amount)
    except LedgerError as e:
        raise click.ClickException(str(e))
    report(ctx, ledger, ledger_file, result)


@accounts.command()
@click.argument("number", type=ACCOUNT_NUMBER)
@click.argument("amount", type=POSITIVE_AMOUNT)
@click.pass_context
def withdraw(ctx: click.Context, number: int, amount: Money) -> None:
    """Withdraw AMOUNT from account NUMBER."""
    ledger, ledger_file = open_ledger(ctx)
    try:
        result = ledger.withdraw(number, amount)
    except LedgerError as e:
        raise click.ClickException(str(e))
    report(ctx, ledger, ledger_file, result)


@accounts.command()
@click.argument("from_number", type=ACCOUNT_NUMBER)
@click.argument("to_number", type=ACCOUNT_NUMBER)
@click.argument("amount", type=POSITIVE_AMOUNT)
@click.pass_context
def transfer(ctx: click.Context, from_number: int, to_number: int, amount: Money) -> None:
    """Transfer AMOUNT from FROM_NUMBER to TO_NUMBER (source PIN required)."""
    ledger, ledger_file = open_ledger(ctx)
    try:
        result = ledger.transfer(from_number, to_number, amount)
    except LedgerError as e:
        raise click.ClickException(str(e))
    report(ctx, ledger, ledger_file, result)


@accounts.command()
@click.argument("number", type=ACCOUNT_NUMBER)
@click.pass_context
def close(ctx: click.Context, number: int) -> None:
    """Close (permanently remove) account NUMBER."""
    ledger, ledger_file = open_ledger(ctx)
    report(ctx, ledger, ledger_file, ledger.close_account(number))


@accounts.command()
@click.argument("number", type=ACCOUNT_NUMBER)
@click.argument("new_name", type=NAME)
@click.pass_context
def rename(ctx: click.Context, number: int, new_name: str) -> None:
    """Change the name on account NUMBER."""
    ledger, ledger_file = open_ledger(ctx)
    try:
        result = ledger.update_name(number, new_name)
    except LedgerError as e:
        raise click.ClickException(str(e))
    report(ctx, ledger, ledger_file, result)


@accounts.command()
@click.argument("threshold", type=NON_NEGATIVE_AMOUNT)
@click.pass_context
def above(ctx: click.Context, threshold: Money) -> None:
    """List accounts with a balance of at least THRESHOLD."""
    ledger, _ = open_ledger(ctx)

    click.echo(f"--- Accounts above {threshold} ---")
    matches = ledger.accounts_above_balance(threshold)
    if not matches:
        click.echo("No accounts meet the threshold.")
        return
    for account in matches:
        click.echo(render_account(account))


@accounts.command()
@click.pass_context
def sort(ctx: click.Context) -> None:
    """Reorder the stored accounts by ascending balance."""
    ledger, ledger_file = open_ledger(ctx)
    ledger.sort_by_balance()
    save_ledger(ledger, ledger_file)
    click.echo("Accounts sorted by balance.")


if __name__ == "__main__":
    accounts()
