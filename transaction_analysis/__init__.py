"""Public interface for the ``transaction_analysis`` package.

This module exposes the ledger, its record model and the ingest helpers as the
stable import surface. There is no runtime logic here, only re-exports.
"""

from .errors import (
    InvalidTransactionError,
    TransactionAnalysisError,
    TransactionDataError,
)
from .ingest import load_transactions_json, parse_transactions
from .ledger import TransactionLedger
from .models import (
    TransactionRecord,
    Transactions,
    TransactionTypeMajority,
)

__all__ = [
    # Core
    "TransactionLedger",
    # Models / types
    "TransactionRecord",
    "TransactionTypeMajority",
    "Transactions",
    # Ingest
    "load_transactions_json",
    "parse_transactions",
    # Errors
    "InvalidTransactionError",
    "TransactionAnalysisError",
    "TransactionDataError",
]
