"""
Response normalizers.

Pure functions: decoded Firefly JSON in, normalized result types out.
No network or filesystem access happens here.
"""

from typing import Any

from ..schemas.firefly_models import (
    FireflyAccount,
    FireflyCategory,
    FireflyTransactionGroup,
)
from ..schemas.results import (
    AccountBalance,
    AccountsResult,
    CategoryInfo,
    TransactionRecord,
    TransactionResult,
)

# Used when there is no account to take a currency symbol from
DEFAULT_CURRENCY_SYMBOL = "$"


def parse_accounts(response: dict[str, Any]) -> list[FireflyAccount]:
    """Parse an account list response into FireflyAccount objects."""
    return [FireflyAccount.from_api_response(item) for item in response["data"]]


def normalize_accounts(response: dict[str, Any]) -> AccountsResult:
    """
    Normalize GET /api/v1/accounts?type=asset.

    Balances are parsed from Firefly's decimal strings as floats and summed.
    """
    accounts = [
        AccountBalance(
            name=account.name,
            balance=float(account.current_balance),
            currency=account.currency_symbol,
        )
        for account in parse_accounts(response)
    ]

    total = sum(account.balance for account in accounts)
    currency = (accounts[0].currency if accounts else None) or DEFAULT_CURRENCY_SYMBOL

    return AccountsResult(accounts=accounts, total=total, currency=currency)


def normalize_created_transaction(response: dict[str, Any]) -> TransactionResult:
    """Normalize the POST /api/v1/transactions response (first split only)."""
    group = FireflyTransactionGroup.from_api_response(response["data"])
    tx = group.first_split

    return TransactionResult(
        id=group.id,
        type=tx.type,
        amount=tx.amount,
        currency=tx.currency_symbol,
        description=tx.description,
        date=tx.date,
        category=tx.category_name or None,
    )


def normalize_recent_transactions(response: dict[str, Any]) -> list[TransactionRecord]:
    """
    Normalize GET /api/v1/transactions.

    Dates are cut down to YYYY-MM-DD; a missing date becomes "".
    """
    records = []
    for item in response["data"]:
        group = FireflyTransactionGroup.from_api_response(item)
        tx = group.first_split
        records.append(
            TransactionRecord(
                id=group.id,
                date=(tx.date or "").split("T")[0],
                type=tx.type,
                amount=f"{tx.currency_symbol or ''}{tx.amount}",
                description=tx.description,
                category=tx.category_name or None,
                source=tx.source_name,
                destination=tx.destination_name,
            )
        )
    return records


def _first_sum(breakdown: list[dict[str, Any]]) -> str | None:
    if not breakdown:
        return None
    return breakdown[0].get("sum") or None


def normalize_categories(response: dict[str, Any]) -> list[CategoryInfo]:
    """Normalize GET /api/v1/categories using the first currency entry of spent/earned."""
    categories = []
    for item in response["data"]:
        category = FireflyCategory.from_api_response(item)
        categories.append(
            CategoryInfo(
                id=category.id,
                name=category.name,
                spent=_first_sum(category.spent),
                earned=_first_sum(category.earned),
            )
        )
    return categories
