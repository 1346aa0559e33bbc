"""
CLI main entry point.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from ..config import ConfigurationError, FireflyConfig, load_config
from ..firefly_client import FireflyClient, FireflyError
from ..schemas.results import TransactionType
from ..tools import get_tool

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_cli() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="firefly-tools",
        description="Check balances and record transactions in Firefly III",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("config.yaml"),
        help="Path to config file (default: config.yaml)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # accounts command
    subparsers.add_parser("accounts", help="Show asset account balances")

    # transaction command
    tx_parser = subparsers.add_parser("transaction", help="Record a new transaction")
    tx_parser.add_argument(
        "--type",
        dest="tx_type",
        choices=[t.value for t in TransactionType],
        required=True,
        help="withdrawal (expense), deposit (income) or transfer",
    )
    tx_parser.add_argument("--amount", type=float, required=True, help="Positive amount")
    tx_parser.add_argument("--description", required=True, help="What the transaction was for")
    tx_parser.add_argument("--account", required=True, help="Source account name")
    tx_parser.add_argument("--category", help="Optional category name")
    tx_parser.add_argument(
        "--destination-account",
        help="Destination account name (transfers)",
    )

    # recent command
    recent_parser = subparsers.add_parser("recent", help="List recent transactions")
    recent_parser.add_argument(
        "--limit",
        type=int,
        default=FireflyClient.DEFAULT_RECENT_LIMIT,
        help=f"Number of transactions (default: {FireflyClient.DEFAULT_RECENT_LIMIT})",
    )

    # delete command
    delete_parser = subparsers.add_parser("delete", help="Delete a transaction by ID")
    delete_parser.add_argument("transaction_id", help="Transaction ID to delete")

    # summary command
    subparsers.add_parser("summary", help="Show this month's summary")

    # categories command
    subparsers.add_parser("categories", help="List categories")

    return parser


def build_tool_params(parsed: argparse.Namespace) -> tuple[str, dict[str, Any]]:
    """Map parsed CLI arguments onto a tool name and its parameters."""
    if parsed.command == "transaction":
        params: dict[str, Any] = {
            "type": parsed.tx_type,
            "amount": parsed.amount,
            "description": parsed.description,
            "account": parsed.account,
        }
        if parsed.category:
            params["category"] = parsed.category
        if parsed.destination_account:
            params["destination_account"] = parsed.destination_account
        return "firefly_transaction", params

    if parsed.command == "recent":
        return "firefly_recent", {"limit": parsed.limit}

    if parsed.command == "delete":
        return "firefly_delete", {"transaction_id": parsed.transaction_id}

    return f"firefly_{parsed.command}", {}


def run_tool(config: FireflyConfig, tool_name: str, params: dict[str, Any]) -> int:
    """Run one tool against a fresh client and print its text output."""
    try:
        client = FireflyClient(config)
    except ConfigurationError as e:
        print(f"❌ {e}")
        return 1

    execute = get_tool(tool_name).create_executor(client)

    try:
        result = execute(params)
    except FireflyError as e:
        logger.debug("Tool %s failed", tool_name, exc_info=True)
        print(f"❌ {e}")
        return 1

    text = result["content"][0]["text"]
    print(text)

    # firefly_transaction reports failures in-band
    return 1 if text.startswith("Error: ") else 0


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_cli()
    parsed = parser.parse_args(args)

    setup_logging(parsed.verbose)

    if not parsed.command:
        parser.print_help()
        return 1

    # Load config
    try:
        config = load_config(parsed.config)
    except Exception as e:
        print(f"❌ Failed to load config: {e}")
        return 1

    tool_name, params = build_tool_params(parsed)
    return run_tool(config, tool_name, params)


if __name__ == "__main__":
    sys.exit(main())
