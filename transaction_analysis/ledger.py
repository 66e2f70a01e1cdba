"""In-memory transaction ledger: append plus aggregate/filter/lookup queries.

:class:`TransactionLedger` owns a list of immutable
:class:`~transaction_analysis.models.TransactionRecord` values in insertion
order. Every query is a single pass over the current snapshot; results that
are sub-sequences are new lists in insertion order, so callers can never alter
the ledger except through :meth:`TransactionLedger.add_transaction`.

Date handling
-------------
All date-based queries use :func:`~transaction_analysis.dates.parse_transaction_date`.
A record whose date cannot be parsed never matches a date filter and is left
out of month buckets; the skip count is logged at WARNING. An unparseable
query bound makes the query return an empty list.

The ledger does no locking. Share it between threads only behind external
synchronization.
"""

from __future__ import annotations

import json
from collections import Counter
from collections.abc import Iterable, Iterator
from datetime import date, datetime
from typing import TypeAlias

from .dates import parse_transaction_date
from .logging_setup import get_logger
from .models import (
    CREDIT,
    DEBIT,
    RecordLike,
    TransactionRecord,
    Transactions,
    TransactionTypeMajority,
    to_record,
)

logger = get_logger("transaction_analysis.ledger")

DateLike: TypeAlias = str | date | datetime


def _sum_amounts(records: Iterable[TransactionRecord]) -> float:
    return sum((tx.transaction_amount for tx in records), 0.0)


class TransactionLedger:
    """A query-only (plus append) collection of transaction records.

    Parameters
    ----------
    transactions:
        Initial records, possibly empty. Raw mappings are validated into
        :class:`TransactionRecord`; a record missing a required field raises
        :class:`~transaction_analysis.errors.InvalidTransactionError` naming its
        index. The input iterable is copied, never adopted.
    """

    def __init__(self, transactions: Transactions = ()) -> None:
        self._transactions: list[TransactionRecord] = [
            to_record(tx, index=i) for i, tx in enumerate(transactions)
        ]
        logger.debug("ledger created with %d transactions", len(self._transactions))

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[TransactionRecord]:
        return iter(list(self._transactions))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._transactions)} transactions)"

    def __str__(self) -> str:
        return self.serialize()

    # ---- Mutation ----------------------------------------------------------

    def add_transaction(self, record: RecordLike) -> None:
        """Append ``record`` to the end of the ledger."""

        tx = to_record(record)
        self._transactions.append(tx)
        logger.debug("added transaction %s (%d total)", tx.transaction_id, len(self._transactions))

    # ---- Internal helpers --------------------------------------------------

    def _dated(
        self, records: Iterable[TransactionRecord], operation: str
    ) -> list[tuple[TransactionRecord, datetime]]:
        """Pair each record with its parsed date, dropping unparseable ones."""

        out: list[tuple[TransactionRecord, datetime]] = []
        skipped = 0
        for tx in records:
            when = parse_transaction_date(tx.transaction_date)
            if when is None:
                skipped += 1
                continue
            out.append((tx, when))
        if skipped:
            logger.warning(
                "%s: skipped %d transaction(s) with unparseable dates", operation, skipped
            )
        return out

    def _busiest_month(self, records: Iterable[TransactionRecord], operation: str) -> int | None:
        counts = Counter(when.month - 1 for _, when in self._dated(records, operation))
        if not counts:
            return None
        # Highest count wins; ties go to the earliest month.
        return min(counts, key=lambda month: (-counts[month], month))

    def _count_type(self, transaction_type: str) -> int:
        return sum(1 for tx in self._transactions if tx.transaction_type == transaction_type)

    # ---- Queries -----------------------------------------------------------

    def get_all_transactions(self) -> list[TransactionRecord]:
        """Return every record in insertion order (a new list)."""

        return list(self._transactions)

    def get_unique_transaction_types(self) -> set[str]:
        return {tx.transaction_type for tx in self._transactions}

    def calculate_total_amount(self) -> float:
        """Sum of all amounts; ``0.0`` for an empty ledger."""

        return _sum_amounts(self._transactions)

    def calculate_total_amount_by_date(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> float:
        """Sum amounts of records whose date matches every given component.

        ``None`` components are wildcards and ``month`` is 1-based. With no
        component given this is the grand total, malformed dates included.
        Dates carrying a UTC offset are compared by their UTC calendar date,
        so ``2019-01-01T00:30+05:00`` counts toward 2018-12-31.
        """

        if year is None and month is None and day is None:
            return self.calculate_total_amount()

        matched = [
            tx
            for tx, when in self._dated(self._transactions, "calculate_total_amount_by_date")
            if (year is None or when.year == year)
            and (month is None or when.month == month)
            and (day is None or when.day == day)
        ]
        return _sum_amounts(matched)

    def get_transactions_by_type(self, transaction_type: str) -> list[TransactionRecord]:
        return [tx for tx in self._transactions if tx.transaction_type == transaction_type]

    def get_transactions_in_date_range(
        self, start_date: DateLike, end_date: DateLike
    ) -> list[TransactionRecord]:
        """Records dated within ``[start_date, end_date]`` (both inclusive)."""

        start = parse_transaction_date(start_date)
        end = parse_transaction_date(end_date)
        if start is None or end is None:
            logger.warning("unparseable date range bound: %r .. %r", start_date, end_date)
            return []
        return [
            tx
            for tx, when in self._dated(self._transactions, "get_transactions_in_date_range")
            if start <= when <= end
        ]

    def get_transactions_by_merchant(self, merchant_name: str) -> list[TransactionRecord]:
        return [tx for tx in self._transactions if tx.merchant_name == merchant_name]

    def calculate_average_transaction_amount(self) -> float:
        """Mean amount; ``0.0`` for an empty ledger."""

        if not self._transactions:
            return 0.0
        return self.calculate_total_amount() / len(self._transactions)

    def get_transactions_by_amount_range(
        self, min_amount: float, max_amount: float
    ) -> list[TransactionRecord]:
        """Records with ``min_amount <= amount <= max_amount``.

        The bounds are not reordered, so ``min_amount > max_amount`` matches
        nothing.
        """

        return [
            tx for tx in self._transactions if min_amount <= tx.transaction_amount <= max_amount
        ]

    def calculate_total_debit_amount(self) -> float:
        return _sum_amounts(self.get_transactions_by_type(DEBIT))

    def find_most_transactions_month(self) -> int | None:
        """0-based month (January = 0) with the most records, or ``None``.

        Ties go to the lowest month index. ``None`` when no record has a
        parseable date.
        Offset-carrying dates are bucketed by their UTC month.
        """

        return self._busiest_month(self._transactions, "find_most_transactions_month")

    def find_most_debit_transactions_month(self) -> int | None:
        """Like :meth:`find_most_transactions_month`, over debit records only."""

        return self._busiest_month(
            self.get_transactions_by_type(DEBIT), "find_most_debit_transactions_month"
        )

    def most_transaction_types(self) -> TransactionTypeMajority:
        debit_count = self._count_type(DEBIT)
        credit_count = self._count_type(CREDIT)
        if debit_count > credit_count:
            return TransactionTypeMajority.DEBIT
        if credit_count > debit_count:
            return TransactionTypeMajority.CREDIT
        return TransactionTypeMajority.EQUAL

    def get_transactions_before_date(self, before: DateLike) -> list[TransactionRecord]:
        """Records dated strictly before ``before``."""

        target = parse_transaction_date(before)
        if target is None:
            logger.warning("unparseable target date: %r", before)
            return []
        return [
            tx
            for tx, when in self._dated(self._transactions, "get_transactions_before_date")
            if when < target
        ]

    def find_transaction_by_id(self, transaction_id: str) -> TransactionRecord | None:
        """First record with ``transaction_id``, or ``None`` when absent."""

        for tx in self._transactions:
            if tx.transaction_id == transaction_id:
                return tx
        return None

    def map_transaction_descriptions(self) -> list[str]:
        return [tx.transaction_description for tx in self._transactions]

    def serialize(self) -> str:
        """Pretty-printed JSON of all records, in insertion order."""

        return json.dumps(
            [tx.model_dump(mode="json") for tx in self._transactions],
            indent=2,
            ensure_ascii=False,
        )


__all__ = ["DateLike", "TransactionLedger"]
