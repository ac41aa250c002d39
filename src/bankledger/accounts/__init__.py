"""
Accounts Domain Package

The account entity, the ledger that owns the collection, and the flat-file
persistence format.

Example:
    from bankledger.accounts import Ledger

    ledger = Ledger(pin_supplier=lambda account: "1234")
    ledger.add_account("Alice", 1001, "100.00", "1234")
    ledger.deposit(1001, "25.00")
    ledger.save_to_file("accounts_secure.txt")
"""

from .datastore import LedgerFileStore, format_record, parse_record
from .ledger import Ledger, OperationResult, OperationStatus, PinSupplier
from .models import Account, as_money
from .pin import PinVerifier, UnsaltedPinVerifier, is_valid_pin

__all__ = [
    "Account",
    "Ledger",
    "LedgerFileStore",
    "OperationResult",
    "OperationStatus",
    "PinSupplier",
    "PinVerifier",
    "UnsaltedPinVerifier",
    "as_money",
    "format_record",
    "is_valid_pin",
    "parse_record",
]
