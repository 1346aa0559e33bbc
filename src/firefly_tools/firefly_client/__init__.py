"""
Firefly III API Client.

Provides:
- Asset account balances (GET /api/v1/accounts?type=asset)
- Create transactions (POST /api/v1/transactions)
- List and delete transactions
- Monthly summary and categories

Treats Firefly errors as loud failures with actionable messages.
"""

from .client import (
    AccountNotFoundError,
    DestinationNotFoundError,
    FireflyAPIError,
    FireflyClient,
    FireflyConnectionError,
    FireflyError,
)

__all__ = [
    "FireflyClient",
    "FireflyError",
    "FireflyAPIError",
    "FireflyConnectionError",
    "AccountNotFoundError",
    "DestinationNotFoundError",
]
