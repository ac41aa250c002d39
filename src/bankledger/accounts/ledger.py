#!/usr/bin/env python3
"""
Ledger - Account Collection Manager

Owns an insertion-ordered collection of accounts unique by account number,
enforces cross-account rules and gates every mutation of an existing account
behind PIN authentication.

Outcome model:
- "Account not found" and "wrong PIN" are expected outcomes, returned as an
  OperationResult rather than raised.
- Malformed input, rejected amounts, broken transfer rules and save failures
  raise LedgerError subclasses.

A Ledger is not safe for concurrent use from multiple threads or processes.
"""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ..core.exceptions import (
    AccountNotFound,
    DuplicateAccount,
    SameAccountTransfer,
)
from ..core.money import Money
from .datastore import LedgerFileStore
from .models import Account, Amount, as_money
from .pin import DEFAULT_VERIFIER, PinVerifier

logger = logging.getLogger(__name__)

# Called with the account being unlocked; returns the candidate PIN.
PinSupplier = Callable[[Account], str]


class OperationStatus(Enum):
    """Outcome of a gated ledger operation."""

    OK = "ok"
    NOT_FOUND = "not_found"
    AUTH_FAILED = "auth_failed"


@dataclass(frozen=True)
class OperationResult:
    """Status plus a user-facing message for a gated ledger operation."""

    status: OperationStatus
    message: str

    @property
    def ok(self) -> bool:
        return self.status is OperationStatus.OK

    def __bool__(self) -> bool:
        return self.ok


def _not_found(account_number: int) -> OperationResult:
    return OperationResult(OperationStatus.NOT_FOUND, f"Account {account_number} not found.")


def _auth_failed() -> OperationResult:
    return OperationResult(OperationStatus.AUTH_FAILED, "Authentication failed. Invalid PIN.")


class Ledger:
    """
    In-memory ledger of bank accounts.

    Construct one explicitly at program start and pass it to whatever drives it.

    Args:
        pin_supplier: Default source of candidate PINs for authentication. Each
            gated operation also accepts its own supplier, which takes precedence.
        verifier: Digest scheme used for new and loaded accounts.
    """

    def __init__(self, pin_supplier: PinSupplier | None = None, verifier: PinVerifier | None = None):
        self._accounts: list[Account] = []
        self.pin_supplier = pin_supplier
        self.verifier = verifier or DEFAULT_VERIFIER

    @property
    def accounts(self) -> tuple[Account, ...]:
        """Accounts in collection order."""
        return tuple(self._accounts)

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(tuple(self._accounts))

    def __contains__(self, account_number: object) -> bool:
        return any(acc.account_number == account_number for acc in self._accounts)

    def total_balance(self) -> Money:
        """Sum of all balances."""
        return sum((acc.balance for acc in self._accounts), Money.zero())

    def add_account(self, name: str, account_number: int, balance: Amount, pin: str) -> Account:
        """
        Create and append a new account.

        Raises:
            DuplicateAccount: If the account number is already in use
            ValidationError: If the inputs have the wrong shape
        """
        if account_number in self:
            raise DuplicateAccount(account_number)

        account = Account.create(name, account_number, balance, pin, verifier=self.verifier)
        self._accounts.append(account)
        logger.info("Created account %d", account_number)
        return account

    def find_account(self, account_number: int) -> Account | None:
        """Return the account with this number, or None."""
        for account in self._accounts:
            if account.account_number == account_number:
                return account
        logger.debug("Account %d not found", account_number)
        return None

    def authenticate(self, account: Account, pin_supplier: PinSupplier | None = None) -> bool:
        """
        Ask for a PIN and check it against the account.

        Returns False on mismatch; never raises for a wrong PIN.

        Raises:
            RuntimeError: If no PIN supplier is available
        """
        supplier = pin_supplier or self.pin_supplier
        if supplier is None:
            raise RuntimeError("No PIN supplier configured for authentication")

        if not account.verify_pin(supplier(account)):
            logger.warning("Authentication failed for account %d", account.account_number)
            return False
        return True

    def deposit(self, account_number: int, amount: Amount, pin_supplier: PinSupplier | None = None) -> OperationResult:
        """Deposit into an account after authenticating."""
        account = self.find_account(account_number)
        if account is None:
            return _not_found(account_number)
        if not self.authenticate(account, pin_supplier):
            return _auth_failed()

        account.deposit(amount)
        return OperationResult(OperationStatus.OK, "Deposit successful.")

    def withdraw(self, account_number: int, amount: Amount, pin_supplier: PinSupplier | None = None) -> OperationResult:
        """
        Withdraw from an account after authenticating.

        Raises:
            InsufficientFunds: If the amount exceeds the balance
            InvalidAmount: If the amount is not positive
        """
        account = self.find_account(account_number)
        if account is None:
            return _not_found(account_number)
        if not self.authenticate(account, pin_supplier):
            return _auth_failed()

        account.withdraw(amount)
        return OperationResult(OperationStatus.OK, "Withdrawal successful.")

    def transfer(
        self,
        from_account_number: int,
        to_account_number: int,
        amount: Amount,
        pin_supplier: PinSupplier | None = None,
    ) -> OperationResult:
        """
        Move money between two accounts, authenticating against the source only.

        The source is debited first. If crediting the destination fails, the
        debit is reversed before the error propagates.

        Raises:
            AccountNotFound: If either account does not exist
            SameAccountTransfer: If source and destination are the same
            InsufficientFunds: If the source balance is too low
            InvalidAmount: If the amount is not positive
        """
        source = self.find_account(from_account_number)
        destination = self.find_account(to_account_number)
        if source is None or destination is None:
            raise AccountNotFound("One or both accounts not found")
        if from_account_number == to_account_number:
            raise SameAccountTransfer("Cannot transfer to same account")
        if not self.authenticate(source, pin_supplier):
            return _auth_failed()

        money = as_money(amount)
        source.withdraw(money)
        try:
            destination.deposit(money)
        except Exception:
            source.deposit(money)
            raise

        logger.info("Transferred %s from %d to %d", money, from_account_number, to_account_number)
        return OperationResult(OperationStatus.OK, "Transfer successful.")

    def update_name(self, account_number: int, new_name: str, pin_supplier: PinSupplier | None = None) -> OperationResult:
        """Rename an account after authenticating."""
        account = self.find_account(account_number)
        if account is None:
            return _not_found(account_number)
        if not self.authenticate(account, pin_supplier):
            return _auth_failed()

        account.rename(new_name)
        return OperationResult(OperationStatus.OK, "Account name updated.")

    def close_account(self, account_number: int, pin_supplier: PinSupplier | None = None) -> OperationResult:
        """Remove an account after authenticating; the others keep their order."""
        account = self.find_account(account_number)
        if account is None:
            return _not_found(account_number)
        if not self.authenticate(account, pin_supplier):
            return _auth_failed()

        self._accounts.remove(account)
        logger.info("Closed account %d", account_number)
        return OperationResult(OperationStatus.OK, "Account closed successfully.")

    def accounts_above_balance(self, threshold: Amount) -> list[Account]:
        """Accounts whose balance is at least the threshold, in collection order."""
        floor = as_money(threshold)
        return [acc for acc in self._accounts if acc.balance >= floor]

    def sort_by_balance(self) -> None:
        """Stable in-place sort, ascending by balance."""
        self._accounts.sort(key=lambda acc: acc.balance.to_cents())

    def save_to_file(self, path: Path | str) -> None:
        """
        Write every account to the ledger file, replacing its contents.

        Raises:
            LedgerIOError: If the file cannot be written
        """
        LedgerFileStore(path, self.verifier).save(self._accounts)

    def load_from_file(self, path: Path | str, strict: bool = False) -> int:
        """
        Replace the accounts with those stored in the ledger file.

        A missing file is a first run: the ledger is left as is.

        Args:
            path: Ledger file location
            strict: Raise on a malformed line instead of stopping there

        Returns:
            Number of accounts loaded

        Raises:
            LedgerFormatError: In strict mode; the ledger is left unchanged
        """
        store = LedgerFileStore(path, self.verifier, strict=strict)
        if not store.exists():
            logger.debug("No ledger file at %s; starting empty", store.path)
            return 0

        loaded = store.load()
        self._accounts = loaded
        return len(loaded)
