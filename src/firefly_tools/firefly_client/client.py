"""
Firefly III API client implementation.
"""

import json
import logging
from datetime import date, datetime, timezone
from typing import Any

import requests

from ..config import Credentials, FireflyConfig, resolve_credentials
from ..schemas.firefly_models import FireflyAccount
from ..schemas.firefly_payload import build_transaction_payload
from ..schemas.results import (
    AccountsResult,
    CategoryInfo,
    TransactionInput,
    TransactionRecord,
    TransactionResult,
    TransactionType,
)
from .normalizers import (
    normalize_accounts,
    normalize_categories,
    normalize_created_transaction,
    normalize_recent_transactions,
    parse_accounts,
)

logger = logging.getLogger(__name__)


class FireflyError(Exception):
    """Base exception for Firefly client errors."""

    pass


class FireflyAPIError(FireflyError):
    """API returned an error response."""

    def __init__(
        self,
        status_code: int,
        status_text: str,
        response_body: str | None = None,
    ):
        self.status_code = status_code
        self.status_text = status_text
        self.response_body = response_body
        super().__init__(f"Firefly API error {status_code} {status_text}: {response_body}")


class FireflyConnectionError(FireflyError):
    """Failed to connect to Firefly."""

    pass


class AccountNotFoundError(FireflyError):
    """Source account name did not match any asset account."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(f"Account '{name}' not found. Available: {', '.join(available)}")


class DestinationNotFoundError(FireflyError):
    """Transfer destination name did not match any asset account."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Destination account '{name}' not found.")


def utc_today() -> date:
    """Current calendar date in UTC."""
    return datetime.now(timezone.utc).date()


class FireflyClient:
    """
    Client for Firefly III API.

    Features:
    - Asset account balances and name lookup
    - Create, list and delete transactions
    - Current-month summary
    - Category spent/earned overview

    No retries and no caching: every call is one fresh round trip (two for
    create_transaction). Without a timeout, a request waits indefinitely.

    Each client owns a requests.Session, which is not guaranteed to be
    thread-safe; use one client per thread.
    """

    ACCOUNTS_ENDPOINT = "/api/v1/accounts"
    TRANSACTIONS_ENDPOINT = "/api/v1/transactions"
    SUMMARY_ENDPOINT = "/api/v1/summary/basic"
    CATEGORIES_ENDPOINT = "/api/v1/categories"

    DEFAULT_RECENT_LIMIT = 10

    def __init__(self, config: FireflyConfig, timeout: float | None = None):
        """
        Initialize Firefly client.

        Args:
            config: Connection configuration; credentials are resolved once here
            timeout: Request timeout in seconds (overrides config.timeout;
                None in both means no timeout)

        Raises:
            ConfigurationError: If no usable credentials are configured
        """
        self.credentials: Credentials = resolve_credentials(config)
        self.timeout = timeout if timeout is not None else config.timeout

        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {self.credentials.token}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
        )

    @property
    def base_url(self) -> str:
        return self.credentials.base_url

    def _request(
        self,
        method: str,
        endpoint: str,
        params: dict | None = None,
        json_data: dict | None = None,
        headers: dict | None = None,
    ) -> Any:
        """Make an API request; returns decoded JSON, or None for 204 No Content."""
        url = f"{self.base_url}{endpoint}"

        logger.debug(f"API Request: {method} {url}")
        if json_data:
            logger.debug(f"Request body: {json.dumps(json_data, indent=2)}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_data,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Connection error to {url}: {e}")
            raise FireflyConnectionError(
                f"Failed to connect to Firefly at {self.base_url}: {e}"
            ) from e
        except requests.exceptions.Timeout as e:
            logger.error(f"Timeout for {url}: {e}")
            raise FireflyConnectionError(f"Request to Firefly timed out: {e}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request error for {url}: {e}")
            raise FireflyError(f"Request failed: {e}") from e

        logger.debug(f"Response status: {response.status_code}")

        if not response.ok:
            error_body = response.text
            logger.error(f"API Error {response.status_code}: {response.reason}")
            logger.debug(f"Full response body: {error_body}")

            raise FireflyAPIError(
                status_code=response.status_code,
                status_text=response.reason or "",
                response_body=error_body,
            )

        if response.status_code == 204:
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Non-JSON response from {url}: {response.text[:200]}")
            raise FireflyError(
                f"Firefly returned a non-JSON response ({response.status_code}) for {endpoint}"
            ) from e

    # ------------------------------------------------------------------
    # Accounts
    # ------------------------------------------------------------------

    def list_asset_accounts(self) -> list[FireflyAccount]:
        """List asset accounts (single page, no caching)."""
        response = self._request("GET", self.ACCOUNTS_ENDPOINT, params={"type": "asset"})
        return parse_accounts(response)

    def find_account_by_name(self, name: str) -> FireflyAccount | None:
        """
        Find an asset account by name.

        Matching is case-insensitive but otherwise exact.

        Returns:
            The account, or None if no account has that name
        """
        wanted = name.lower()
        for account in self.list_asset_accounts():
            if account.name.lower() == wanted:
                return account
        return None

    def get_accounts(self) -> AccountsResult:
        """Get all asset account balances with their total."""
        response = self._request("GET", self.ACCOUNTS_ENDPOINT, params={"type": "asset"})
        return normalize_accounts(response)

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    def create_transaction(self, tx_input: TransactionInput | dict) -> TransactionResult:
        """
        Record a transaction dated today (UTC).

        Args:
            tx_input: TransactionInput or its dict form

        Returns:
            Normalized result of the created transaction

        Raises:
            AccountNotFoundError: If tx_input.account is not an asset account;
                the message lists every available account
            DestinationNotFoundError: If a transfer's destination_account is
                not an asset account (no list of alternatives)
            FireflyAPIError: If API returns an error
            ValueError: If a dict input is incomplete or has an unknown type
        """
        if isinstance(tx_input, dict):
            tx_input = TransactionInput.from_dict(tx_input)

        source = self.find_account_by_name(tx_input.account)
        if source is None:
            available = [account.name for account in self.list_asset_accounts()]
            raise AccountNotFoundError(tx_input.account, available)

        destination_id = None
        if tx_input.type == TransactionType.TRANSFER and tx_input.destination_account:
            destination = self.find_account_by_name(tx_input.destination_account)
            if destination is None:
                raise DestinationNotFoundError(tx_input.destination_account)
            destination_id = destination.id

        payload = build_transaction_payload(
            tx_input,
            source_id=source.id,
            today=utc_today(),
            destination_id=destination_id,
        )

        response = self._request(
            "POST",
            self.TRANSACTIONS_ENDPOINT,
            json_data=payload.to_dict(),
        )

        result = normalize_created_transaction(response)
        logger.info(f"Created Firefly transaction id={result.id}")
        return result

    def get_recent_transactions(self, limit: int = DEFAULT_RECENT_LIMIT) -> list[TransactionRecord]:
        """Get the most recent transactions (first page only)."""
        response = self._request(
            "GET",
            self.TRANSACTIONS_ENDPOINT,
            params={"limit": limit},
        )
        return normalize_recent_transactions(response)

    def delete_transaction(self, transaction_id: str) -> None:
        """
        Delete a transaction by ID.

        Raises:
            FireflyAPIError: If API returns an error (including unknown IDs)
        """
        self._request("DELETE", f"{self.TRANSACTIONS_ENDPOINT}/{transaction_id}")
        logger.info(f"Deleted Firefly transaction id={transaction_id}")

    # ------------------------------------------------------------------
    # Summary & categories
    # ------------------------------------------------------------------

    def get_monthly_summary(self) -> dict[str, Any]:
        """
        Get Firefly's basic summary for the current month.

        The window runs from the first of the month through today (UTC).
        The response is returned unmodified.
        """
        today = utc_today()
        start = today.replace(day=1)

        return self._request(
            "GET",
            self.SUMMARY_ENDPOINT,
            params={"start": start.isoformat(), "end": today.isoformat()},
        )

    def get_categories(self) -> list[CategoryInfo]:
        """List categories with their spent/earned sums."""
        response = self._request("GET", self.CATEGORIES_ENDPOINT)
        return normalize_categories(response)
