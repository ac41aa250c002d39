#!/usr/bin/env python3
"""
Ledger File DataStore

Flat text persistence for the ledger. One account per line, fields separated
by single spaces, name quoted:

    <account_number> <balance> <pin_digest> "<name>"

Inside the quoted name, double quotes and backslashes are escaped with a
backslash. Line feeds and carriage returns are written as backslash-n and
backslash-r so each record stays on one line. Reading accepts an unquoted
single-word name as well.

Loading stops at the first line that does not parse and returns the accounts
read up to that point. Strict mode raises LedgerFormatError instead.
"""

import logging
import re
from datetime import datetime
from pathlib import Path

from ..core.currency import decimal_to_cents
from ..core.exceptions import LedgerFormatError, LedgerIOError
from ..core.money import Money
from .models import Account
from .pin import DEFAULT_VERIFIER, MAX_DIGEST, PinVerifier

logger = logging.getLogger(__name__)

_RECORD_RE = re.compile(r"^\s*(\S+)\s+(\S+)\s+(\S+)\s+(\S.*)$")
_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_DIGEST_RE = re.compile(r"^\d+$")

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r"}
_UNESCAPES = {"n": "\n", "r": "\r"}


class RecordParseError(ValueError):
    """Raised when a single ledger line does not match the record format."""

    pass


def quote_name(name: str) -> str:
    """Wrap a name in double quotes, escaping quotes, backslashes and line breaks."""
    escaped = "".join(_ESCAPES.get(ch, ch) for ch in name)
    return f'"{escaped}"'


def unquote_name(text: str) -> str:
    """
    Read the name field from the remainder of a record line.

    Args:
        text: Everything after the digest field, leading whitespace removed

    Returns:
        The unescaped name

    Raises:
        RecordParseError: Unterminated quote, trailing garbage or empty name
    """
    if not text.startswith('"'):
        parts = text.split()
        if len(parts) != 1:
            raise RecordParseError("unquoted name must be a single word")
        return parts[0]

    chars: list[str] = []
    i = 1
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            if i + 1 >= len(text):
                break
            chars.append(_UNESCAPES.get(text[i + 1], text[i + 1]))
            i += 2
            continue
        if ch == '"':
            if text[i + 1 :].strip():
                raise RecordParseError("unexpected characters after closing quote")
            name = "".join(chars)
            if not name:
                raise RecordParseError("empty name")
            return name
        chars.append(ch)
        i += 1

    raise RecordParseError("unterminated quoted name")


def format_record(account: Account) -> str:
    """Serialize one account as a record line (without the newline)."""
    return (
        f"{account.account_number} {account.balance.to_plain_str()} "
        f"{account.pin_digest} {quote_name(account.name)}"
    )


def parse_record(line: str, verifier: PinVerifier | None = None) -> Account:
    """
    Parse one record line into an Account.

    Raises:
        RecordParseError: If any field is missing or out of range
    """
    match = _RECORD_RE.match(line.rstrip("\r\n"))
    if match is None:
        raise RecordParseError("expected four fields")

    number_text, balance_text, digest_text, name_text = match.groups()

    if not _INTEGER_RE.match(number_text):
        raise RecordParseError(f"account number is not an integer: {number_text!r}")
    account_number = int(number_text)
    if account_number <= 0:
        raise RecordParseError(f"account number must be positive: {account_number}")

    try:
        balance = Money.from_cents(decimal_to_cents(balance_text))
    except ValueError as e:
        raise RecordParseError(f"bad balance {balance_text!r}") from e
    if balance.is_negative():
        raise RecordParseError(f"negative balance: {balance_text}")

    if not _DIGEST_RE.match(digest_text) or int(digest_text) > MAX_DIGEST:
        raise RecordParseError(f"PIN digest is not an unsigned 64-bit integer: {digest_text!r}")

    name = unquote_name(name_text)

    return Account(
        name=name,
        account_number=account_number,
        balance=balance,
        pin_digest=int(digest_text),
        verifier=verifier or DEFAULT_VERIFIER,
    )


class LedgerFileStore:
    """
    DataStore for the flat-file ledger.

    Saves and loads the full ordered account list; there is no incremental
    persistence and no backup of the previous file.
    """

    def __init__(self, path: Path | str, verifier: PinVerifier | None = None, strict: bool = False):
        """
        Initialize the ledger file store.

        Args:
            path: Ledger file location
            verifier: Digest scheme attached to loaded accounts
            strict: Raise LedgerFormatError on a malformed line instead of stopping
        """
        self.path = Path(path)
        self.verifier = verifier or DEFAULT_VERIFIER
        self.strict = strict

    def exists(self) -> bool:
        """Check if the ledger file exists."""
        return self.path.is_file()

    def load(self) -> list[Account]:
        """
        Load accounts in file order.

        Returns:
            Accounts read before the first malformed line (all of them if none is)

        Raises:
            FileNotFoundError: If the ledger file doesn't exist
            LedgerFormatError: In strict mode, on the first malformed line
        """
        if not self.exists():
            raise FileNotFoundError(f"Ledger file not found: {self.path}")

        accounts: list[Account] = []
        seen: set[int] = set()

        with open(self.path, encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                try:
                    account = parse_record(line, self.verifier)
                    if account.account_number in seen:
                        raise RecordParseError(f"duplicate account number {account.account_number}")
                except RecordParseError as e:
                    if self.strict:
                        raise LedgerFormatError(line_number, line.rstrip("\r\n"), str(e)) from e
                    logger.warning(
                        "Stopped loading %s at line %d (%s); kept %d accounts",
                        self.path,
                        line_number,
                        e,
                        len(accounts),
                    )
                    break

                seen.add(account.account_number)
                accounts.append(account)

        logger.info("Loaded %d accounts from %s", len(accounts), self.path)
        return accounts

    def save(self, accounts: list[Account]) -> None:
        """
        Overwrite the ledger file with the given accounts.

        Raises:
            LedgerIOError: If the file cannot be opened or written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                for account in accounts:
                    f.write(format_record(account) + "\n")
        except OSError as e:
            raise LedgerIOError(f"Cannot open file for saving: {self.path} ({e})") from e

        logger.info("Saved %d accounts to %s", len(accounts), self.path)

    def last_modified(self) -> datetime | None:
        """Get timestamp of the ledger file."""
        if not self.exists():
            return None
        return datetime.fromtimestamp(self.path.stat().st_mtime)

    def age_days(self) -> int | None:
        """Get age in days of the ledger file."""
        last_mod = self.last_modified()
        if last_mod is None:
            return None
        return (datetime.now() - last_mod).days

    def item_count(self) -> int | None:
        """Get count of loadable accounts in the file."""
        if not self.exists():
            return None
        try:
            return len(LedgerFileStore(self.path, self.verifier).load())
        except (OSError, UnicodeDecodeError):
            return 0

    def size_bytes(self) -> int | None:
        """Get size of the ledger file."""
        if not self.exists():
            return None
        return self.path.stat().st_size

    def summary_text(self) -> str:
        """Get human-readable summary."""
        count = self.item_count()
        if count is None:
            return f"No ledger file at {self.path}"
        return f"Ledger file: {count} accounts"
