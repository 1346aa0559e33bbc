"""
Normalized result types handed to callers (and the tool layer).

These are the stable output shapes: every to_dict() returns exactly the keys
a calling agent sees, independent of how Firefly formats its responses.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class TransactionType(str, Enum):
    """Transaction type for Firefly III."""

    WITHDRAWAL = "withdrawal"
    DEPOSIT = "deposit"
    TRANSFER = "transfer"


@dataclass
class AccountBalance:
    name: str
    balance: float
    currency: str


@dataclass
class AccountsResult:
    """All asset accounts with their summed balance.

    currency is the first account's symbol, or "$" when there are no
    accounts at all.
    """

    accounts: list[AccountBalance]
    total: float
    currency: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class TransactionInput:
    """Caller-supplied transaction to record."""

    type: TransactionType
    amount: float
    description: str
    account: str
    category: str | None = None
    destination_account: str | None = None

    REQUIRED_FIELDS = ("type", "amount", "description", "account")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TransactionInput":
        """
        Build from tool/CLI parameters.

        Raises:
            ValueError: If a required field is missing or type is unknown
        """
        missing = [name for name in cls.REQUIRED_FIELDS if data.get(name) in (None, "")]
        if missing:
            raise ValueError(f"Missing required field(s): {', '.join(missing)}")

        try:
            tx_type = TransactionType(data["type"])
        except ValueError as e:
            allowed = ", ".join(t.value for t in TransactionType)
            raise ValueError(
                f"Invalid transaction type '{data['type']}'. Expected one of: {allowed}"
            ) from e

        return cls(
            type=tx_type,
            amount=data["amount"],
            description=data["description"],
            account=data["account"],
            category=data.get("category") or None,
            destination_account=data.get("destination_account") or None,
        )


@dataclass
class TransactionResult:
    id: str
    type: str
    amount: str
    currency: str | None
    description: str
    date: str | None
    category: str | None = None
    success: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "id": self.id,
            "type": self.type,
            "amount": self.amount,
            "currency": self.currency,
            "description": self.description,
            "date": self.date,
            "category": self.category,
        }


@dataclass
class TransactionRecord:
    """One line of the recent-transactions listing.

    amount is the currency symbol followed by the magnitude, e.g. "$12.50".
    """

    id: str
    date: str
    type: str
    amount: str
    description: str
    category: str | None = None
    source: str | None = None
    destination: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self.id,
            "date": self.date,
            "type": self.type,
            "amount": self.amount,
            "description": self.description,
            "category": self.category,
        }
        # Omitted rather than null when Firefly leaves them out
        if self.source is not None:
            result["source"] = self.source
        if self.destination is not None:
            result["destination"] = self.destination
        return result


@dataclass
class CategoryInfo:
    id: str
    name: str
    spent: str | None = None
    earned: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
