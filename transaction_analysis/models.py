"""Data models and type aliases for ``transaction_analysis``.

The ledger consumes records in the shape of the source JSON document: six
named fields per transaction. Records are validated once, at the ledger
boundary, into an immutable :class:`TransactionRecord`; after that no code in
this package mutates them.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import StrEnum
from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import InvalidTransactionError

# ---------------------------------------------------------------------------
# Core record
# ---------------------------------------------------------------------------


class TransactionRecord(BaseModel):
    """A single financial transaction entry.

    Attributes
    ----------
    transaction_id:
        Identifier, unique within a ledger by convention. Uniqueness is not
        enforced; lookups return the first match.
    transaction_date:
        Calendar date, optionally with time, kept as the original string.
        Parsing happens at query time (see :mod:`transaction_analysis.dates`),
        so a malformed value is stored verbatim and simply never matches a
        date filter.
    transaction_amount:
        Signed amount; no range is enforced.
    transaction_type:
        Open vocabulary; observed values are ``"debit"`` and ``"credit"``.
    merchant_name:
        Merchant display name.
    transaction_description:
        Free text.

    Extra keys present in the input are preserved and serialized after the
    declared fields.
    """

    model_config = ConfigDict(frozen=True, extra="allow", coerce_numbers_to_str=True)

    transaction_id: str
    transaction_date: str
    transaction_amount: float
    transaction_type: str
    merchant_name: str
    transaction_description: str


class TransactionTypeMajority(StrEnum):
    """Which of ``debit``/``credit`` occurs more often in a ledger."""

    DEBIT = "debit"
    CREDIT = "credit"
    EQUAL = "equal"


DEBIT = "debit"
CREDIT = "credit"


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------

RecordLike: TypeAlias = TransactionRecord | Mapping[str, Any]
"""Either a validated record or a raw mapping with the six record fields."""

Transactions: TypeAlias = Iterable[RecordLike]
"""An iterable of records or raw mappings, in insertion order."""


def to_record(obj: Any, *, index: int | None = None) -> TransactionRecord:
    """Validate ``obj`` into a :class:`TransactionRecord`.

    Already-validated records are returned as-is. Anything else goes through
    pydantic; failures are re-raised as :class:`InvalidTransactionError` with
    a compact, field-oriented message.
    """

    if isinstance(obj, TransactionRecord):
        return obj
    try:
        return TransactionRecord.model_validate(obj)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<record>'}: {err['msg']}"
            for err in exc.errors()
        )
        raise InvalidTransactionError(problems, index=index) from exc


__all__ = [
    "CREDIT",
    "DEBIT",
    "RecordLike",
    "TransactionRecord",
    "TransactionTypeMajority",
    "Transactions",
    "to_record",
]
