#!/usr/bin/env python3
"""
Ledger Exceptions

Raised for truly exceptional conditions only: malformed construction input,
rejected amounts, broken cross-account rules and file I/O failures. Expected
outcomes such as an unknown account number or a wrong PIN are reported through
return values instead (see bankledger.accounts.ledger.OperationResult).
"""


class LedgerError(Exception):
    """Base class for all ledger errors."""

    pass


class ValidationError(LedgerError, ValueError):
    """Raised when account input has the wrong shape (empty name, bad PIN, bad number)."""

    pass


class InvalidAmount(ValidationError):
    """Raised when a deposit, withdrawal or transfer amount is not positive."""

    pass


class DuplicateAccount(LedgerError):
    """Raised when an account number is already present in the ledger."""

    def __init__(self, account_number: int):
        super().__init__(f"Account number {account_number} already exists")
        self.account_number = account_number


class AccountNotFound(LedgerError, LookupError):
    """Raised when a transfer names an account that does not exist."""

    pass


class InsufficientFunds(LedgerError):
    """Raised when a withdrawal would take a balance below zero."""

    pass


class SameAccountTransfer(LedgerError):
    """Raised when source and destination of a transfer are the same account."""

    pass


class LedgerIOError(LedgerError, OSError):
    """Raised when the ledger file cannot be written."""

    pass


class LedgerFormatError(LedgerError, ValueError):
    """Raised by strict loading when a ledger file line cannot be parsed."""

    def __init__(self, line_number: int, line: str, reason: str):
        super().__init__(f"Malformed ledger record on line {line_number}: {reason}")
        self.line_number = line_number
        self.line = line
        self.reason = reason
