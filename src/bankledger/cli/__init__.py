"""
Command Line Interface Package

Unified CLI for ledger operations.

Command Structure:
- bankledger: Main entry point with utility commands (version, config)
- bankledger accounts: One-shot commands (create, list, show, deposit,
  withdraw, transfer, close, rename, above, sort)
- bankledger menu: Interactive numbered menu; Exit saves the ledger
"""
