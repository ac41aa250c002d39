"""
Bank Ledger - Console Account Management

A single-user ledger of bank accounts kept in memory and persisted to a flat
text file between runs.

Domain Packages:
- core: Money, currency helpers, exceptions, configuration
- accounts: Account entity, Ledger collection manager, file persistence
- cli: Command-line interface and interactive menu

Example Usage:
    from bankledger import Ledger, Money

    ledger = Ledger(pin_supplier=lambda account: "1234")
    ledger.load_from_file("accounts_secure.txt")
"""

__version__ = "0.1.0"
__author__ = "Bank Ledger Contributors"

from .accounts import Account, Ledger, OperationResult, OperationStatus
from .core.config import Config, Environment, get_config
from .core.money import Money

__all__ = [
    "Account",
    "Config",
    "Environment",
    "Ledger",
    "Money",
    "OperationResult",
    "OperationStatus",
    "get_config",
]
