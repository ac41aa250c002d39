#!/usr/bin/env python3
"""
Currency Conversion and Handling Utilities

All balance arithmetic in the ledger uses integer cents to avoid floating-point
errors. Text coming from the user or from the ledger file is parsed with
Decimal and rounded half-up to the nearest cent exactly once, at the boundary.

Currency Systems:
- Internal calculations use cents: 100 cents = $1.00
- Ledger file uses plain decimals: "70.00"
- Display uses dollar strings: "$70.00"
"""

from decimal import ROUND_HALF_UP, Decimal, DecimalException, InvalidOperation, localcontext
from typing import Union

CENT = Decimal("0.01")


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to dollar string using pure integer arithmetic.

    Args:
        cents: Amount in cents

    Returns:
        Formatted dollar string

    Example:
        cents_to_dollars_str(4599) -> "45.99"
    """
    is_negative = cents < 0
    abs_cents = abs(int(cents))

    dollars = abs_cents // 100
    remainder = abs_cents % 100

    if is_negative:
        return f"-{dollars}.{remainder:02d}"
    return f"{dollars}.{remainder:02d}"


def decimal_to_cents(amount: Union[Decimal, int, float, str]) -> int:
    """
    Convert a decimal dollar amount to integer cents, rounding half-up.

    Floats are routed through their shortest string form so that 0.1 becomes
    10 cents rather than 9.

    Args:
        amount: Dollar amount

    Returns:
        Amount in cents

    Raises:
        ValueError: If the amount is not a finite number
    """
    try:
        if isinstance(amount, float):
            value = Decimal(repr(amount))
        else:
            value = Decimal(amount)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise ValueError(f"Invalid amount: {amount!r}") from e

    if not value.is_finite():
        raise ValueError(f"Amount must be finite: {amount!r}")

    # Enough digits for every whole dollar plus the two cent places
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        try:
            return int(value.quantize(CENT, rounding=ROUND_HALF_UP).scaleb(2))
        except DecimalException as e:
            # exponent beyond the context limits
            raise ValueError(f"Amount out of range: {amount!r}") from e


def parse_dollars_to_cents(dollars_str: str) -> int:
    """
    Parse a user-entered or stored dollar string to cents.

    Accepts an optional leading "$", thousands separators and any standard
    decimal or float literal.

    Examples:
        parse_dollars_to_cents("12.34") -> 1234
        parse_dollars_to_cents("$1,234.56") -> 123456
        parse_dollars_to_cents("7.05e1") -> 7050
        parse_dollars_to_cents("12.345") -> 1235

    Raises:
        ValueError: If the string is empty or not a number
    """
    clean = dollars_str.replace("$", "").replace(",", "").strip()
    if not clean:
        raise ValueError("Amount cannot be empty")
    return decimal_to_cents(clean)


def format_cents(cents: int) -> str:
    """Format cents as dollar string with $ prefix."""
    if cents < 0:
        return f"-${cents_to_dollars_str(-cents)}"
    return f"${cents_to_dollars_str(cents)}"
