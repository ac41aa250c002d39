"""Shared test helpers."""

from bankledger.accounts.models import Account


def pin(value: str):
    """PIN supplier that always answers the given value."""
    return lambda account: value


class RecordingPinSupplier:
    """PIN supplier that answers from a fixed mapping and records who was asked."""

    def __init__(self, pins: dict[int, str]):
        self.pins = pins
        self.asked: list[int] = []

    def __call__(self, account: Account) -> str:
        self.asked.append(account.account_number)
        return self.pins.get(account.account_number, "")
