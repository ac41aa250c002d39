#!/usr/bin/env python3
"""
Account Domain Model

A single bank account. The account owns its own mutation rules (deposit,
withdraw, rename) and PIN verification; cross-account rules live in Ledger.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Union

from ..core.exceptions import InsufficientFunds, InvalidAmount, ValidationError
from ..core.money import Money
from .pin import DEFAULT_VERIFIER, PinVerifier, is_valid_pin

Amount = Union[Money, Decimal, int, float, str]

_WRITE_ONCE_FIELDS = ("account_number", "pin_digest")


def as_money(amount: Amount) -> Money:
    """
    Coerce a caller-supplied amount to Money.

    Plain numbers and strings are dollar amounts, not cents.
    """
    if isinstance(amount, Money):
        return amount
    try:
        return Money.from_dollars(amount)
    except ValueError as e:
        raise InvalidAmount(str(e)) from e


@dataclass
class Account:
    """
    Bank account with a balance that never goes negative.

    The account number is immutable once created and the PIN digest is set
    exactly once. Use Account.create() for new accounts; the constructor is
    for restoring stored records whose digest is already known.
    """

    name: str
    account_number: int
    balance: Money
    pin_digest: int
    verifier: PinVerifier = field(default=DEFAULT_VERIFIER, repr=False, compare=False)

    def __setattr__(self, name: str, value) -> None:
        if name in _WRITE_ONCE_FIELDS and name in self.__dict__:
            raise AttributeError(f"{name} cannot be changed once the account exists")
        super().__setattr__(name, value)

    @classmethod
    def create(
        cls,
        name: str,
        account_number: int,
        initial_balance: Amount,
        pin: str,
        verifier: PinVerifier | None = None,
    ) -> "Account":
        """
        Create a new account from validated primitive inputs.

        Args:
            name: Display name, must be non-empty
            account_number: Positive integer
            initial_balance: Opening balance in dollars, must be >= 0
            pin: Exactly four digits; only its digest is kept
            verifier: Digest scheme (default: unsalted 64-bit digest)

        Raises:
            ValidationError: If any input has the wrong shape
        """
        if not name:
            raise ValidationError("Name cannot be empty")
        if isinstance(account_number, bool) or not isinstance(account_number, int) or account_number <= 0:
            raise ValidationError(f"Account number must be a positive integer: {account_number!r}")
        try:
            balance = as_money(initial_balance)
        except InvalidAmount as e:
            raise ValidationError(str(e)) from e
        if balance.is_negative():
            raise ValidationError("Initial balance cannot be negative")
        if not is_valid_pin(pin):
            raise ValidationError("PIN must be 4 digits")

        verifier = verifier or DEFAULT_VERIFIER
        return cls(
            name=name,
            account_number=account_number,
            balance=balance,
            pin_digest=verifier.digest(pin),
            verifier=verifier,
        )

    def verify_pin(self, candidate: str) -> bool:
        """Check a candidate PIN against the stored digest."""
        return self.verifier.verify(candidate, self.pin_digest)

    def deposit(self, amount: Amount) -> None:
        """Add a positive amount to the balance."""
        money = as_money(amount)
        if not money.is_positive():
            raise InvalidAmount("Deposit must be positive")
        self.balance = self.balance + money

    def withdraw(self, amount: Amount) -> None:
        """Remove a positive amount, never taking the balance below zero."""
        money = as_money(amount)
        if not money.is_positive():
            raise InvalidAmount("Withdrawal must be positive")
        if money > self.balance:
            raise InsufficientFunds(
                f"Insufficient balance in account {self.account_number}: "
                f"requested {money}, available {self.balance}"
            )
        self.balance = self.balance - money

    def rename(self, new_name: str) -> None:
        """Replace the display name."""
        if not new_name:
            raise ValidationError("Name cannot be empty")
        self.name = new_name
