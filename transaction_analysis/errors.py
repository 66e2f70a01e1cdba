"""Exception types raised by ``transaction_analysis``.

Query operations on :class:`~transaction_analysis.ledger.TransactionLedger`
never raise for well-formed input. Exceptions are reserved for the ledger
boundary (records that cannot be validated) and for ingest (documents with the
wrong shape).
"""

from __future__ import annotations


class TransactionAnalysisError(Exception):
    """Base class for package errors."""


class InvalidTransactionError(TransactionAnalysisError, ValueError):
    """A record could not be validated into a ``TransactionRecord``.

    ``index`` is the 0-based position of the offending record in its input
    collection when known, else ``None``.
    """

    def __init__(self, message: str, *, index: int | None = None) -> None:
        if index is not None:
            message = f"transaction at index {index}: {message}"
        super().__init__(message)
        self.index = index


class TransactionDataError(TransactionAnalysisError, ValueError):
    """A transactions document could not be decoded or has the wrong shape."""


__all__ = [
    "InvalidTransactionError",
    "TransactionAnalysisError",
    "TransactionDataError",
]
