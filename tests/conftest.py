"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path

import pytest

from bankledger.accounts.ledger import Ledger
from bankledger.core.config import reload_config


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Point configuration at a per-test data directory."""
    monkeypatch.setenv("BANKLEDGER_ENV", "test")
    monkeypatch.setenv("BANKLEDGER_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("BANKLEDGER_LEDGER_FILE", raising=False)
    monkeypatch.delenv("BANKLEDGER_STRICT_LOAD", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    reload_config()


@pytest.fixture
def ledger() -> Ledger:
    """Ledger whose default PIN supplier always answers 1234."""
    return Ledger(pin_supplier=lambda account: "1234")


@pytest.fixture
def alice_and_bob(ledger: Ledger) -> Ledger:
    """Ledger holding Alice (1001, $100, PIN 1234) and Bob (1002, $50, PIN 5678)."""
    ledger.add_account("Alice", 1001, 100.0, "1234")
    ledger.add_account("Bob", 1002, 50.0, "5678")
    return ledger


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "currency: Tests for currency handling and precision"
    )
    config.addinivalue_line(
        "markers", "ledger: Tests for ledger collection operations"
    )
    config.addinivalue_line(
        "markers", "persistence: Tests for the ledger file format"
    )
