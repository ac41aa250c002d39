#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer cents internally.
Prevents floating-point errors and provides type-safe currency operations.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from .currency import (
    cents_to_dollars_str,
    decimal_to_cents,
    format_cents,
    parse_dollars_to_cents,
)


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in cents (USD).

    Examples:
        >>> balance = Money.from_dollars("100.00")
        >>> str(balance - Money.from_cents(3000))
        '$70.00'
        >>> Money.from_dollars(12.5).to_cents()
        1250
        >>> Money.zero() < Money.from_cents(1)
        True
    """

    cents: int

    @classmethod
    def zero(cls) -> "Money":
        """Create a zero amount."""
        return cls(cents=0)

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    @classmethod
    def from_dollars(cls, dollars: Union[str, int, float, Decimal]) -> "Money":
        """
        Parse from a dollar string like '$123.45' or a numeric dollar amount.

        Args:
            dollars: String like "$12.34", or a number like 12, 12.5, Decimal("12.34")

        Returns:
            Money object, rounded half-up to the cent

        Raises:
            ValueError: If the value is not a finite number
        """
        if isinstance(dollars, str):
            return cls(cents=parse_dollars_to_cents(dollars))
        return cls(cents=decimal_to_cents(dollars))

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def to_decimal(self) -> Decimal:
        """Get value in dollars as an exact Decimal."""
        return Decimal(self.cents).scaleb(-2)

    def to_plain_str(self) -> str:
        """Get value as an unadorned decimal string ("70.00")."""
        return cents_to_dollars_str(self.cents)

    def is_positive(self) -> bool:
        """Check whether the amount is strictly greater than zero."""
        return self.cents > 0

    def is_negative(self) -> bool:
        """Check whether the amount is strictly below zero."""
        return self.cents < 0

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        return Money(cents=self.cents + other.cents)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects."""
        return Money(cents=self.cents - other.cents)

    def __lt__(self, other: "Money") -> bool:
        return self.cents < other.cents

    def __le__(self, other: "Money") -> bool:
        return self.cents <= other.cents

    def __gt__(self, other: "Money") -> bool:
        return self.cents > other.cents

    def __ge__(self, other: "Money") -> bool:
        return self.cents >= other.cents

    def __str__(self) -> str:
        """Format as dollar string."""
        return format_cents(self.cents)

    def __repr__(self) -> str:
        return f"Money(cents={self.cents})"
