"""
Firefly III tools for agents

A small, credential-aware client for the Firefly III REST API: check
balances, record and delete transactions, and read the monthly summary and
categories, with every response normalized into stable result shapes.
"""

__version__ = "0.1.0"
