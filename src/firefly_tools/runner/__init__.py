"""
CLI runner module.

Provides commands:
- accounts: Asset account balances
- transaction: Record a withdrawal, deposit or transfer
- recent: Latest transactions
- delete: Remove a transaction
- summary: Current month overview
- categories: Category spent/earned sums
"""

from .main import create_cli, main

__all__ = [
    "create_cli",
    "main",
]
