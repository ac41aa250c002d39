#!/usr/bin/env python3
"""
PIN Digests

Accounts never keep the raw PIN. They store a fixed-size, one-way digest and
verify candidates by digesting them and comparing digest to digest.

The default verifier is deliberately weak: an unsalted hash truncated to an
unsigned 64-bit integer, which is what the ledger file format stores. Swap in a
different PinVerifier to change the scheme without touching ledger logic.
"""

import hashlib
import hmac
from typing import Protocol

PIN_LENGTH = 4
DIGEST_BYTES = 8
MAX_DIGEST = 2 ** (DIGEST_BYTES * 8) - 1


def is_valid_pin(pin: str) -> bool:
    """Check that a PIN is exactly four ASCII digits."""
    return isinstance(pin, str) and len(pin) == PIN_LENGTH and pin.isascii() and pin.isdigit()


class PinVerifier(Protocol):
    """Digest scheme used by accounts to store and check PINs."""

    def digest(self, pin: str) -> int:
        """Compute the digest of a PIN as an unsigned 64-bit integer."""
        ...

    def verify(self, pin: str, digest: int) -> bool:
        """Check a candidate PIN against a stored digest."""
        ...


class UnsaltedPinVerifier:
    """First eight bytes of SHA-256 over the UTF-8 PIN, big-endian."""

    def digest(self, pin: str) -> int:
        raw = hashlib.sha256(pin.encode("utf-8")).digest()[:DIGEST_BYTES]
        return int.from_bytes(raw, "big")

    def verify(self, pin: str, digest: int) -> bool:
        if not 0 <= digest <= MAX_DIGEST:
            return False
        candidate = self.digest(pin).to_bytes(DIGEST_BYTES, "big")
        return hmac.compare_digest(candidate, digest.to_bytes(DIGEST_BYTES, "big"))


DEFAULT_VERIFIER: PinVerifier = UnsaltedPinVerifier()
