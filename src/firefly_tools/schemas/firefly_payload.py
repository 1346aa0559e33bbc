"""
Firefly III transaction payload builder (SSOT).

This is THE single builder that maps TransactionInput → Firefly TransactionStore JSON.

Rules:
- Always set required fields: type/date/amount/description/source_id
- date is always today's UTC date; callers cannot backdate
- category_name is passed through as-is (Firefly creates unknown categories)
- destination_id only for transfers
- Exactly one split per store
"""

import json
import logging
from dataclasses import dataclass
from datetime import date
from typing import Any

from .results import TransactionInput, TransactionType

logger = logging.getLogger(__name__)


@dataclass
class FireflyTransactionSplitStore:
    """
    Single transaction split for Firefly III API.

    Maps to TransactionSplitStore in Firefly API.
    """

    # Required fields
    type: str  # withdrawal, deposit, transfer
    date: str  # YYYY-MM-DD
    amount: str  # Decimal string with dot
    description: str
    source_id: str

    destination_id: str | None = None
    category_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to Firefly API JSON format."""
        result: dict[str, Any] = {
            "type": self.type,
            "date": self.date,
            "amount": self.amount,
            "description": self.description,
            "source_id": self.source_id,
        }

        # Add optional fields only if set
        if self.category_name is not None:
            result["category_name"] = self.category_name
        if self.destination_id is not None:
            result["destination_id"] = self.destination_id

        return result


@dataclass
class FireflyTransactionStore:
    """
    Root transaction store for Firefly III API.

    Maps to TransactionStore in Firefly API.
    """

    transactions: list[FireflyTransactionSplitStore]

    def to_dict(self) -> dict[str, Any]:
        """Convert to Firefly API JSON format."""
        return {"transactions": [t.to_dict() for t in self.transactions]}

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


def format_amount(amount: float) -> str:
    """Render an amount as a plain decimal string (50 → "50", 12.5 → "12.5")."""
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount)


def build_transaction_payload(
    tx_input: TransactionInput,
    source_id: str,
    today: date,
    destination_id: str | None = None,
) -> FireflyTransactionStore:
    """
    Build Firefly III transaction payload from a TransactionInput.

    Args:
        tx_input: The caller's transaction
        source_id: Resolved id of tx_input.account
        today: Booking date (UTC calendar date)
        destination_id: Resolved id of the destination account (transfers only)

    Returns:
        FireflyTransactionStore ready for API submission
    """
    split = FireflyTransactionSplitStore(
        type=TransactionType(tx_input.type).value,
        date=today.isoformat(),
        amount=format_amount(tx_input.amount),
        description=tx_input.description,
        source_id=source_id,
    )

    if tx_input.category:
        split.category_name = tx_input.category

    if split.type == TransactionType.TRANSFER.value and destination_id is not None:
        split.destination_id = destination_id

    logger.debug("Built %s payload for source_id=%s", split.type, source_id)
    return FireflyTransactionStore(transactions=[split])
