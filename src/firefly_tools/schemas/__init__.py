"""
Data schemas.

- firefly_models: Firefly III response shapes (read side)
- firefly_payload: Firefly III TransactionStore builder (write side)
- results: Normalized output types returned to callers
"""

from .firefly_models import (
    FireflyAccount,
    FireflyCategory,
    FireflyTransactionGroup,
    FireflyTransactionSplit,
)
from .firefly_payload import (
    FireflyTransactionSplitStore,
    FireflyTransactionStore,
    build_transaction_payload,
    format_amount,
)
from .results import (
    AccountBalance,
    AccountsResult,
    CategoryInfo,
    TransactionInput,
    TransactionRecord,
    TransactionResult,
    TransactionType,
)

__all__ = [
    "FireflyAccount",
    "FireflyCategory",
    "FireflyTransactionGroup",
    "FireflyTransactionSplit",
    "FireflyTransactionSplitStore",
    "FireflyTransactionStore",
    "build_transaction_payload",
    "format_amount",
    "AccountBalance",
    "AccountsResult",
    "CategoryInfo",
    "TransactionInput",
    "TransactionRecord",
    "TransactionResult",
    "TransactionType",
]
