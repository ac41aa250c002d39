#!/usr/bin/env python3
"""
Integration tests for the interactive menu.

Scripts a whole session through stdin and checks what ends up in the ledger
file after Exit.
"""

import pytest
from click.testing import CliRunner

from bankledger.accounts.ledger import Ledger
from bankledger.cli.main import main
from bankledger.cli.menu import MenuChoice
from bankledger.core.money import Money


def session(*steps: str) -> str:
    return "".join(f"{step}\n" for step in steps)


def run_menu(ledger_file, script: str):
    return CliRunner().invoke(main, ["--ledger-file", str(ledger_file), "menu"], input=script)


@pytest.mark.integration
class TestMenuSession:
    """Test scripted menu sessions."""

    def test_exit_saves_ledger(self, tmp_path):
        path = tmp_path / "accounts_secure.txt"
        script = session(
            "1", "Alice", "1001", "100", "1234",
            "1", "Bob", "1002", "50", "5678",
            "6", "1001", "1002", "30", "1234",
            "2",
            "0",
        )

        result = run_menu(path, script)

        assert result.exit_code == 0, result.output
        assert "Transfer successful." in result.output
        assert "Name: Bob | Account: 1002 | Balance: $80.00" in result.output
        assert "Saving data..." in result.output

        ledger = Ledger()
        ledger.load_from_file(path)
        assert ledger.find_account(1001).balance == Money.from_cents(7000)
        assert ledger.find_account(1002).balance == Money.from_cents(8000)

    def test_errors_are_shown_and_loop_continues(self, tmp_path):
        path = tmp_path / "accounts_secure.txt"
        script = session(
            "1", "Bob", "1002", "80", "5678",
            "5", "1002", "1000", "5678",
            "3", "1002",
            "0",
        )

        result = run_menu(path, script)

        assert result.exit_code == 0, result.output
        assert "Error: Insufficient balance" in result.output
        assert "Found -> Bob | Balance: $80.00" in result.output

    def test_wrong_pin_and_unknown_account_are_reported(self, tmp_path):
        path = tmp_path / "accounts_secure.txt"
        script = session(
            "1", "Carol", "7", "10", "1111",
            "4", "7", "5", "2222",
            "7", "99",
            "8", "7", "Caroline", "1111",
            "0",
        )

        result = run_menu(path, script)

        assert result.exit_code == 0, result.output
        assert "Authentication failed. Invalid PIN." in result.output
        assert "Account 99 not found." in result.output
        assert "Account name updated." in result.output

        ledger = Ledger()
        ledger.load_from_file(path)
        carol = ledger.find_account(7)
        assert carol.name == "Caroline"
        assert carol.balance == Money.from_cents(1000)

    def test_filter_sort_and_close(self, tmp_path):
        path = tmp_path / "accounts_secure.txt"
        seed = Ledger()
        seed.add_account("Big", 1, 500, "1234")
        seed.add_account("Small", 2, 5, "1234")
        seed.add_account("Mid", 3, 50, "1234")
        seed.save_to_file(path)

        script = session(
            "9", "50",
            "10",
            "7", "1", "1234",
            "0",
        )

        result = run_menu(path, script)

        assert result.exit_code == 0, result.output
        assert "--- Accounts above $50.00 ---" in result.output
        assert "Name: Small" not in result.output.split("Accounts above")[1].split("Accounts sorted")[0]
        assert "Account closed successfully." in result.output

        ledger = Ledger()
        ledger.load_from_file(path)
        assert [a.account_number for a in ledger] == [2, 3]

    def test_quitting_without_exit_does_not_save(self, tmp_path):
        path = tmp_path / "accounts_secure.txt"
        result = run_menu(path, session("1", "Ghost", "5", "1", "1234"))

        assert result.exit_code != 0
        assert not path.exists()


def test_menu_choices_cover_all_operations():
    assert [c.value for c in MenuChoice] == list(range(11))
