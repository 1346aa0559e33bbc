"""
Firefly III API response shapes (read side).

Only the fields this package consumes are modelled. Required fields are
indexed directly, so a payload missing one fails with KeyError where it is
read; optional fields default to None.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class FireflyAccount:
    """Asset account as returned by GET /api/v1/accounts."""

    id: str
    name: str
    current_balance: str | None = None
    currency_symbol: str | None = None
    currency_code: str | None = None
    type: str | None = None
    active: bool | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "FireflyAccount":
        attrs = data["attributes"]
        return cls(
            id=str(data["id"]),
            name=attrs["name"],
            current_balance=attrs.get("current_balance"),
            currency_symbol=attrs.get("currency_symbol"),
            currency_code=attrs.get("currency_code"),
            type=attrs.get("type"),
            active=attrs.get("active"),
        )


@dataclass
class FireflyTransactionSplit:
    """Single split inside a Firefly transaction group."""

    type: str
    amount: str
    description: str
    date: str | None = None
    currency_symbol: str | None = None
    currency_code: str | None = None
    source_id: str | None = None
    source_name: str | None = None
    destination_id: str | None = None
    destination_name: str | None = None
    category_id: str | None = None
    category_name: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "FireflyTransactionSplit":
        return cls(
            type=data["type"],
            amount=data["amount"],
            description=data["description"],
            date=data.get("date"),
            currency_symbol=data.get("currency_symbol"),
            currency_code=data.get("currency_code"),
            source_id=data.get("source_id"),
            source_name=data.get("source_name"),
            destination_id=data.get("destination_id"),
            destination_name=data.get("destination_name"),
            category_id=data.get("category_id"),
            category_name=data.get("category_name"),
        )


@dataclass
class FireflyTransactionGroup:
    """Transaction group: an id plus its splits.

    Only the first split is used by this package; split groups created
    elsewhere are reported by their primary line.
    """

    id: str
    splits: list[FireflyTransactionSplit]

    @property
    def first_split(self) -> FireflyTransactionSplit:
        return self.splits[0]

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "FireflyTransactionGroup":
        return cls(
            id=str(data["id"]),
            splits=[
                FireflyTransactionSplit.from_api_response(tx)
                for tx in data["attributes"]["transactions"]
            ],
        )


@dataclass
class FireflyCategory:
    """Category with optional per-currency spent/earned breakdowns."""

    id: str
    name: str
    spent: list[dict[str, Any]] = field(default_factory=list)
    earned: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "FireflyCategory":
        attrs = data["attributes"]
        return cls(
            id=str(data["id"]),
            name=attrs["name"],
            spent=attrs.get("spent") or [],
            earned=attrs.get("earned") or [],
        )
