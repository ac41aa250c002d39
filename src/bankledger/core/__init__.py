"""
Core Utilities Package

Shared building blocks for the bank ledger.

This package provides:
- Currency handling with integer arithmetic for precision
- The Money value type
- The ledger exception hierarchy
- Configuration management for environment-specific settings
"""

from .config import (
    Config,
    Environment,
    get_config,
    reload_config,
)
from .currency import (
    cents_to_dollars_str,
    decimal_to_cents,
    format_cents,
    parse_dollars_to_cents,
)
from .exceptions import (
    AccountNotFound,
    DuplicateAccount,
    InsufficientFunds,
    InvalidAmount,
    LedgerError,
    LedgerFormatError,
    LedgerIOError,
    SameAccountTransfer,
    ValidationError,
)
from .money import Money

__all__ = [
    "AccountNotFound",
    # Configuration
    "Config",
    "DuplicateAccount",
    "Environment",
    "InsufficientFunds",
    "InvalidAmount",
    # Exceptions
    "LedgerError",
    "LedgerFormatError",
    "LedgerIOError",
    "Money",
    "SameAccountTransfer",
    "ValidationError",
    # Currency utilities
    "cents_to_dollars_str",
    "decimal_to_cents",
    "format_cents",
    "get_config",
    "parse_dollars_to_cents",
    "reload_config",
]
