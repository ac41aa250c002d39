#!/usr/bin/env python3
"""
Integration tests for CLI Main Entry Point

Tests end-to-end CLI command execution with real command invocation.
"""

import logging

import pytest
from click.testing import CliRunner

from bankledger.accounts.ledger import Ledger
from bankledger.cli.main import main


@pytest.mark.integration
class TestCLIMainIntegration:
    """Test main CLI entry point with real command execution."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()

    def test_help_command_lists_all_subcommands(self):
        result = self.runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Bank Ledger" in result.output
        for command in ["accounts", "menu", "config", "version"]:
            assert command in result.output

    def test_accounts_help_lists_operations(self):
        result = self.runner.invoke(main, ["accounts", "--help"])

        assert result.exit_code == 0
        for command in ["create", "list", "show", "deposit", "withdraw", "transfer", "close", "rename", "above", "sort"]:
            assert command in result.output

    def test_version_command_shows_version_info(self):
        result = self.runner.invoke(main, ["version"])

        assert result.exit_code == 0
        assert "Bank Ledger v" in result.output
        assert "Author:" in result.output

    def test_config_command_shows_configuration(self, tmp_path):
        result = self.runner.invoke(main, ["config"])

        assert result.exit_code == 0
        assert "Current Configuration:" in result.output
        assert "Environment: test" in result.output
        assert "Ledger File:" in result.output
        assert str(tmp_path / "data") in result.output

    def test_ledger_file_option_overrides_config(self, tmp_path):
        target = tmp_path / "override.txt"
        result = self.runner.invoke(main, ["--ledger-file", str(target), "config"])

        assert result.exit_code == 0
        assert f"Ledger File: {target}" in result.output

    def test_config_command_reports_ledger_file_status(self, tmp_path):
        target = tmp_path / "ledger.txt"

        missing = self.runner.invoke(main, ["--ledger-file", str(target), "config"])
        assert missing.exit_code == 0
        assert f"No ledger file at {target}" in missing.output
        assert "Last Modified:" not in missing.output

        ledger = Ledger()
        ledger.add_account("Alice", 1001, 100, "1234")
        ledger.add_account("Bob", 1002, 50, "5678")
        ledger.save_to_file(target)

        present = self.runner.invoke(main, ["--ledger-file", str(target), "config"])
        assert present.exit_code == 0
        assert "Ledger file: 2 accounts" in present.output
        assert "(0 days ago)" in present.output
        assert f"Size: {target.stat().st_size} bytes" in present.output

    def test_debug_flag_lowers_package_log_level(self):
        package_logger = logging.getLogger("bankledger")
        levels = (logging.getLogger().level, package_logger.level)
        try:
            result = self.runner.invoke(main, ["--debug", "config"])

            assert result.exit_code == 0
            assert "Debug logging enabled" in result.output
            assert package_logger.level == logging.DEBUG
        finally:
            logging.getLogger().setLevel(levels[0])
            package_logger.setLevel(levels[1])

    def test_verbose_flag_enables_verbose_output(self):
        result = self.runner.invoke(main, ["--verbose", "config"])

        assert result.exit_code == 0
        assert "Environment:" in result.output
        assert "Ledger file:" in result.output

    def test_invalid_command_shows_error(self):
        result = self.runner.invoke(main, ["invalid-command"])

        assert result.exit_code != 0
        assert "Error" in result.output or "No such" in result.output
