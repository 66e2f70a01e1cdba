"""Plain-text rendering of ledger results for the console.

Both helpers return strings; printing is the caller's job.
"""

from __future__ import annotations

import calendar
from collections.abc import Iterable

from .ledger import TransactionLedger
from .models import DEBIT, TransactionRecord

_COLUMNS = (
    "transaction_id",
    "transaction_date",
    "transaction_amount",
    "transaction_type",
    "merchant_name",
    "transaction_description",
)


def _month_name(month_index: int | None) -> str:
    if month_index is None:
        return "n/a"
    return calendar.month_name[month_index + 1]


def render_summary(ledger: TransactionLedger) -> str:
    """Summarize a ledger in a few labelled lines."""

    types = ", ".join(sorted(ledger.get_unique_transaction_types())) or "none"
    debits = ledger.get_transactions_by_type(DEBIT)
    lines = [
        f"Transactions: {len(ledger)}",
        f"Unique transaction types: {types}",
        f"Total amount of transactions: {ledger.calculate_total_amount():.2f}",
        f"Average transaction amount: {ledger.calculate_average_transaction_amount():.2f}",
        f"Debit transactions: {len(debits)} (total {ledger.calculate_total_debit_amount():.2f})",
        f"Month with most transactions: {_month_name(ledger.find_most_transactions_month())}",
        "Month with most debit transactions: "
        f"{_month_name(ledger.find_most_debit_transactions_month())}",
        f"Most frequent transaction type: {ledger.most_transaction_types().value}",
    ]
    return "\n".join(lines)


def render_transactions(records: Iterable[TransactionRecord]) -> str:
    """Render records as a tab-separated table with a header row."""

    rows = ["\t".join(_COLUMNS)]
    for tx in records:
        rows.append(
            "\t".join(
                [
                    tx.transaction_id,
                    tx.transaction_date,
                    f"{tx.transaction_amount:.2f}",
                    tx.transaction_type,
                    tx.merchant_name,
                    # Keep one record per line
                    " ".join(tx.transaction_description.split()),
                ]
            )
        )
    return "\n".join(rows)


__all__ = ["render_summary", "render_transactions"]
