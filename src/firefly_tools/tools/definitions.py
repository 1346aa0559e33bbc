"""
Tool definitions exposed to an agent host.

Each tool pairs a name, a description and a JSON parameter schema with an
executor factory. Executors wrap the client's normalized result in a text
content envelope:

    {"content": [{"type": "text", "text": "<json>"}]}

Only firefly_transaction turns failures into an "Error: ..." message; every
other tool lets client errors propagate to the host.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from ..firefly_client import FireflyClient, FireflyError
from ..schemas.results import TransactionType

logger = logging.getLogger(__name__)

Executor = Callable[..., dict[str, Any]]


def text_content(text: str) -> dict[str, Any]:
    """Wrap text in the host's content envelope."""
    return {"content": [{"type": "text", "text": text}]}


def json_content(data: Any) -> dict[str, Any]:
    return text_content(json.dumps(data, indent=2, ensure_ascii=False))


def _object_schema(properties: dict | None = None, required: list[str] | None = None) -> dict:
    return {
        "type": "object",
        "properties": properties or {},
        "required": required or [],
    }


@dataclass
class Tool:
    """A named, schema-described operation."""

    name: str
    description: str
    create_executor: Callable[[FireflyClient], Executor]
    parameters: dict[str, Any] = field(default_factory=_object_schema)


# ---------------------------------------------------------------------------
# Executors
# ---------------------------------------------------------------------------


def _accounts_executor(client: FireflyClient) -> Executor:
    def execute(params: dict | None = None) -> dict[str, Any]:
        return json_content(client.get_accounts().to_dict())

    return execute


def _transaction_executor(client: FireflyClient) -> Executor:
    def execute(params: dict | None = None) -> dict[str, Any]:
        try:
            result = client.create_transaction(params or {})
        except (FireflyError, ValueError) as e:
            logger.warning("firefly_transaction failed: %s", e)
            return text_content(f"Error: {e}")

        return json_content(result.to_dict())

    return execute


def _recent_executor(client: FireflyClient) -> Executor:
    def execute(params: dict | None = None) -> dict[str, Any]:
        limit = (params or {}).get("limit")
        if limit is None:
            limit = FireflyClient.DEFAULT_RECENT_LIMIT
        transactions = client.get_recent_transactions(limit)
        return json_content([tx.to_dict() for tx in transactions])

    return execute


def _delete_executor(client: FireflyClient) -> Executor:
    def execute(params: dict | None = None) -> dict[str, Any]:
        transaction_id = (params or {})["transaction_id"]
        client.delete_transaction(transaction_id)
        return text_content(json.dumps({"success": True, "deleted": transaction_id}))

    return execute


def _summary_executor(client: FireflyClient) -> Executor:
    def execute(params: dict | None = None) -> dict[str, Any]:
        return json_content(client.get_monthly_summary())

    return execute


def _categories_executor(client: FireflyClient) -> Executor:
    def execute(params: dict | None = None) -> dict[str, Any]:
        return json_content([category.to_dict() for category in client.get_categories()])

    return execute


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

ACCOUNTS_TOOL = Tool(
    name="firefly_accounts",
    description=(
        "Get all asset account balances from Firefly III. Use when the user asks "
        "about their money, balances, or how much they have."
    ),
    create_executor=_accounts_executor,
)

TRANSACTION_TOOL = Tool(
    name="firefly_transaction",
    description=(
        "Record a new transaction (expense, income, or transfer) in Firefly III. "
        "Use when the user spent, paid, bought, received or transferred money."
    ),
    create_executor=_transaction_executor,
    parameters=_object_schema(
        properties={
            "type": {
                "type": "string",
                "enum": [t.value for t in TransactionType],
                "description": "Transaction type: withdrawal (expense), deposit (income), transfer",
            },
            "amount": {
                "type": "number",
                "description": "Transaction amount (positive number)",
            },
            "description": {
                "type": "string",
                "description": "What was this transaction for",
            },
            "account": {
                "type": "string",
                "description": "Source account name (e.g., 'Checking', 'Savings')",
            },
            "category": {
                "type": "string",
                "description": "Optional category (e.g., 'Food', 'Transport')",
            },
            "destination_account": {
                "type": "string",
                "description": "Destination account (required for transfers)",
            },
        },
        required=["type", "amount", "description", "account"],
    ),
)

RECENT_TOOL = Tool(
    name="firefly_recent",
    description=(
        "Get recent transactions from Firefly III. Use for latest expenses, "
        "recent transactions, or what the user spent money on."
    ),
    create_executor=_recent_executor,
    parameters=_object_schema(
        properties={
            "limit": {
                "type": "number",
                "description": (
                    f"Number of transactions to return (default {FireflyClient.DEFAULT_RECENT_LIMIT})"
                ),
            },
        },
    ),
)

DELETE_TOOL = Tool(
    name="firefly_delete",
    description="Delete a transaction from Firefly III by its ID.",
    create_executor=_delete_executor,
    parameters=_object_schema(
        properties={
            "transaction_id": {
                "type": "string",
                "description": "The transaction ID to delete",
            },
        },
        required=["transaction_id"],
    ),
)

SUMMARY_TOOL = Tool(
    name="firefly_summary",
    description=(
        "Get a financial summary for the current month from Firefly III. Use for "
        "monthly overviews or how much the user spent this month."
    ),
    create_executor=_summary_executor,
)

CATEGORIES_TOOL = Tool(
    name="firefly_categories",
    description="List spending categories from Firefly III with amounts spent and earned.",
    create_executor=_categories_executor,
)

TOOLS: list[Tool] = [
    ACCOUNTS_TOOL,
    TRANSACTION_TOOL,
    RECENT_TOOL,
    DELETE_TOOL,
    SUMMARY_TOOL,
    CATEGORIES_TOOL,
]


def get_tool(name: str) -> Tool:
    """Look up a tool by name; raises KeyError for unknown names."""
    for tool in TOOLS:
        if tool.name == name:
            return tool
    raise KeyError(name)
