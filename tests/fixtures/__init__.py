"""
Shared test data for the Firefly III client.

Constants and builders used across test modules:
- BASE_URL / TOKEN: direct url+token credentials
- FROZEN_TODAY: the pinned "today" for date-dependent operations
- account_item(): one entry of GET /api/v1/accounts
"""

from datetime import date

BASE_URL = "http://firefly.test:8080"
TOKEN = "test-token-12345"

# Fixed "today" used wherever the client needs the current date
FROZEN_TODAY = date(2026, 2, 16)


def account_item(account_id: str, name: str, balance: str = "0.00", symbol: str = "$") -> dict:
    """One entry of GET /api/v1/accounts."""
    return {
        "type": "accounts",
        "id": account_id,
        "attributes": {
            "name": name,
            "type": "asset",
            "active": True,
            "current_balance": balance,
            "currency_code": "USD",
            "currency_symbol": symbol,
        },
    }
