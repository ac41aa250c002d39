#!/usr/bin/env python3
"""Tests for PIN digests and the verifier interface."""

import pytest

from bankledger.accounts.ledger import Ledger
from bankledger.accounts.models import Account
from bankledger.accounts.pin import MAX_DIGEST, UnsaltedPinVerifier, is_valid_pin


class ReversingVerifier:
    """Toy scheme used to check the verifier is swappable."""

    def digest(self, pin: str) -> int:
        return int(pin[::-1])

    def verify(self, pin: str, digest: int) -> bool:
        return pin.isdigit() and self.digest(pin) == digest


@pytest.mark.unit
@pytest.mark.parametrize("value,expected", [("0000", True), ("1234", True), ("123", False), ("abcd", False), ("12 4", False)])
def test_is_valid_pin(value, expected):
    assert is_valid_pin(value) is expected


@pytest.mark.unit
def test_unsalted_digest_is_deterministic_uint64():
    verifier = UnsaltedPinVerifier()
    digest = verifier.digest("1234")

    assert digest == verifier.digest("1234")
    assert digest != verifier.digest("1235")
    assert 0 <= digest <= MAX_DIGEST


@pytest.mark.unit
def test_unsalted_verify():
    verifier = UnsaltedPinVerifier()
    digest = verifier.digest("4321")

    assert verifier.verify("4321", digest)
    assert not verifier.verify("1234", digest)
    assert not verifier.verify("4321", -1)
    assert not verifier.verify("4321", MAX_DIGEST + 1)


@pytest.mark.unit
def test_custom_verifier_is_used_by_accounts_and_ledger():
    verifier = ReversingVerifier()
    account = Account.create("A", 1, 0, "1234", verifier=verifier)
    assert account.pin_digest == 4321
    assert account.verify_pin("1234")

    ledger = Ledger(pin_supplier=lambda acc: "5678", verifier=verifier)
    created = ledger.add_account("B", 2, 10, "5678")
    assert created.pin_digest == 8765
    assert ledger.deposit(2, 1).ok
