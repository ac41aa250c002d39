#!/usr/bin/env python3
"""
Interactive Menu

Numbered menu loop over a single in-memory ledger. The ledger is loaded once
on entry and saved when the user chooses Exit.
"""

from enum import IntEnum

import click

from ..accounts.ledger import Ledger
from ..core.exceptions import LedgerError
from .accounts import open_ledger, render_account, save_ledger
from .params import ACCOUNT_NUMBER, NAME, NON_NEGATIVE_AMOUNT, PIN, POSITIVE_AMOUNT


class MenuChoice(IntEnum):
    EXIT = 0
    CREATE_ACCOUNT = 1
    SHOW_ALL = 2
    SEARCH = 3
    DEPOSIT = 4
    WITHDRAW = 5
    TRANSFER = 6
    CLOSE_ACCOUNT = 7
    UPDATE_NAME = 8
    HIGH_BALANCE = 9
    SORT_ACCOUNTS = 10


MENU_TEXT = """
=== Bank Ledger ===
1. Create Account
2. Show All Accounts
3. Search Account
4. Deposit Money
5. Withdraw Money
6. Transfer Money
7. Close Account
8. Update Account Name
9. Show High Balance Accounts
10. Sort Accounts by Balance
0. Exit"""


def _show_all(ledger: Ledger) -> None:
    click.echo("\n--- All Accounts ---")
    if not len(ledger):
        click.echo("No accounts available.")
        return
    for account in ledger:
        click.echo(render_account(account))


def _dispatch(ledger: Ledger, choice: MenuChoice) -> None:
    """Run one menu action. Ledger errors propagate to the loop."""
    if choice == MenuChoice.CREATE_ACCOUNT:
        name = click.prompt("Name", type=NAME)
        number = click.prompt("Account Number", type=ACCOUNT_NUMBER)
        balance = click.prompt("Initial Balance", type=NON_NEGATIVE_AMOUNT)
        pin = click.prompt("Set 4-digit PIN", type=PIN, hide_input=True)
        ledger.add_account(name, number, balance, pin)
        click.echo("Account created successfully.")

    elif choice == MenuChoice.SHOW_ALL:
        _show_all(ledger)

    elif choice == MenuChoice.SEARCH:
        number = click.prompt("Enter account number", type=ACCOUNT_NUMBER)
        account = ledger.find_account(number)
        if account is None:
            click.echo("Account not found.")
        else:
            click.echo(f"Found -> {account.name} | Balance: {account.balance}")

    elif choice == MenuChoice.DEPOSIT:
        number = click.prompt("Account number", type=ACCOUNT_NUMBER)
        amount = click.prompt("Amount", type=POSITIVE_AMOUNT)
        click.echo(ledger.deposit(number, amount).message)

    elif choice == MenuChoice.WITHDRAW:
        number = click.prompt("Account number", type=ACCOUNT_NUMBER)
        amount = click.prompt("Amount", type=POSITIVE_AMOUNT)
        click.echo(ledger.withdraw(number, amount).message)

    elif choice == MenuChoice.TRANSFER:
        from_number = click.prompt("From account", type=ACCOUNT_NUMBER)
        to_number = click.prompt("To account", type=ACCOUNT_NUMBER)
        amount = click.prompt("Amount", type=POSITIVE_AMOUNT)
        click.echo(ledger.transfer(from_number, to_number, amount).message)

    elif choice == MenuChoice.CLOSE_ACCOUNT:
        number = click.prompt("Enter account to close", type=ACCOUNT_NUMBER)
        click.echo(ledger.close_account(number).message)

    elif choice == MenuChoice.UPDATE_NAME:
        number = click.prompt("Enter account number", type=ACCOUNT_NUMBER)
        new_name = click.prompt("New Name", type=NAME)
        click.echo(ledger.update_name(number, new_name).message)

    elif choice == MenuChoice.HIGH_BALANCE:
        threshold = click.prompt("Enter threshold", type=NON_NEGATIVE_AMOUNT)
        click.echo(f"--- Accounts above {threshold} ---")
        matches = ledger.accounts_above_balance(threshold)
        if not matches:
            click.echo("No accounts meet the threshold.")
        for account in matches:
            click.echo(render_account(account))

    elif choice == MenuChoice.SORT_ACCOUNTS:
        ledger.sort_by_balance()
        click.echo("Accounts sorted by balance.")


@click.command()
@click.pass_context
def menu(ctx: click.Context) -> None:
    """
    Interactive menu over the ledger. Choosing 0 (Exit) saves the ledger.

    Example:
      bankledger menu
    """
    ledger, ledger_file = open_ledger(ctx)

    while True:
        click.echo(MENU_TEXT)
        choice = MenuChoice(click.prompt("Enter choice", type=click.IntRange(0, len(MenuChoice) - 1)))

        if choice == MenuChoice.EXIT:
            click.echo("Saving data...")
            save_ledger(ledger, ledger_file)
            return

        try:
            _dispatch(ledger, choice)
        except LedgerError as e:
            click.echo(f"Error: {e}", err=True)
