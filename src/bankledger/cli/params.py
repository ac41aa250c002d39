#!/usr/bin/env python3
"""
Click parameter types for ledger input pre-validation.

The ledger expects already-validated primitives; these types make click
reject (or re-prompt for) bad amounts and PINs before the ledger sees them.
"""

from typing import Any

import click

from ..accounts.pin import is_valid_pin
from ..core.money import Money


class MoneyParamType(click.ParamType):
    """Dollar amount such as 12.34 or $1,000, with an optional lower bound."""

    name = "amount"

    def __init__(self, minimum: Money | None = None):
        self.minimum = minimum

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Money:
        if isinstance(value, Money):
            return value
        try:
            money = Money.from_dollars(str(value))
        except ValueError:
            self.fail(f"{value!r} is not a valid amount", param, ctx)

        if self.minimum is not None and money < self.minimum:
            self.fail(f"{value} is below the minimum of {self.minimum}", param, ctx)
        return money


class PinParamType(click.ParamType):
    """Exactly four digits."""

    name = "pin"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> str:
        value = str(value).strip()
        if not is_valid_pin(value):
            self.fail("PIN must be 4 digits.", param, ctx)
        return value


class NonEmptyString(click.ParamType):
    """String that is not empty after stripping whitespace."""

    name = "text"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> str:
        value = str(value).strip()
        if not value:
            self.fail("Input cannot be empty.", param, ctx)
        return value


ACCOUNT_NUMBER = click.IntRange(min=1)
POSITIVE_AMOUNT = MoneyParamType(minimum=Money.from_cents(1))
NON_NEGATIVE_AMOUNT = MoneyParamType(minimum=Money.zero())
PIN = PinParamType()
NAME = NonEmptyString()
