"""Test fixtures and utilities."""

from datetime import date

import pytest
from fixtures import BASE_URL, FROZEN_TODAY, TOKEN, account_item

from firefly_tools.config import FireflyConfig


@pytest.fixture
def firefly_config() -> FireflyConfig:
    """Direct url+token configuration."""
    return FireflyConfig(url=BASE_URL, token=TOKEN)


@pytest.fixture
def frozen_today(monkeypatch) -> date:
    """Pin the client's notion of today."""
    monkeypatch.setattr("firefly_tools.firefly_client.client.utc_today", lambda: FROZEN_TODAY)
    return FROZEN_TODAY


@pytest.fixture
def sample_accounts_response() -> dict:
    """Sample asset account list."""
    return {
        "data": [
            account_item("1", "Checking", "1000.50"),
            account_item("2", "Savings", "5000.00"),
        ],
        "meta": {"pagination": {"total": 2, "total_pages": 1}},
    }


@pytest.fixture
def sample_created_transaction_response() -> dict:
    """Sample POST /api/v1/transactions response."""
    return {
        "data": {
            "type": "transactions",
            "id": "123",
            "attributes": {
                "group_title": None,
                "transactions": [
                    {
                        "type": "withdrawal",
                        "date": "2026-02-16T00:00:00+00:00",
                        "amount": "50.00",
                        "currency_symbol": "$",
                        "currency_code": "USD",
                        "description": "Groceries",
                        "source_id": "1",
                        "source_name": "Checking",
                        "destination_id": "9",
                        "destination_name": "(no name)",
                        "category_id": "4",
                        "category_name": "Food",
                    }
                ],
            },
        }
    }


@pytest.fixture
def sample_transactions_response() -> dict:
    """Sample GET /api/v1/transactions response."""
    return {
        "data": [
            {
                "id": "201",
                "attributes": {
                    "transactions": [
                        {
                            "type": "withdrawal",
                            "date": "2026-02-15T12:30:00+01:00",
                            "amount": "12.50",
                            "currency_symbol": "€",
                            "description": "Coffee beans",
                            "source_name": "Checking",
                            "destination_name": "Roastery",
                            "category_name": "Food",
                        }
                    ]
                },
            },
            {
                "id": "202",
                "attributes": {
                    "transactions": [
                        {
                            "type": "deposit",
                            "amount": "2500.00",
                            "currency_symbol": "€",
                            "description": "Salary",
                            "category_name": None,
                        }
                    ]
                },
            },
        ]
    }


@pytest.fixture
def sample_categories_response() -> dict:
    """Sample GET /api/v1/categories response."""
    return {
        "data": [
            {
                "id": "4",
                "attributes": {
                    "name": "Food",
                    "spent": [{"sum": "-245.10", "currency_symbol": "$"}],
                    "earned": [],
                },
            },
            {
                "id": "5",
                "attributes": {
                    "name": "Salary",
                    "earned": [
                        {"sum": "2500.00", "currency_symbol": "$"},
                        {"sum": "100.00", "currency_symbol": "€"},
                    ],
                },
            },
        ]
    }
