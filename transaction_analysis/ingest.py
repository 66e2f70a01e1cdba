"""Load transaction records from a JSON document.

The document is either a top-level array of transaction objects or an object
with a ``"transactions"`` array. Each element is validated into a
:class:`~transaction_analysis.models.TransactionRecord`, so malformed input
fails here rather than surfacing later as missing fields in a query.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from os import PathLike
from pathlib import Path
from typing import Any

from .errors import TransactionDataError
from .logging_setup import get_logger
from .models import TransactionRecord, to_record

logger = get_logger("transaction_analysis.ingest")


def parse_transactions(document: Any) -> list[TransactionRecord]:
    """Validate an already-decoded JSON document into records.

    Raises :class:`TransactionDataError` when the top-level shape is wrong and
    :class:`~transaction_analysis.errors.InvalidTransactionError` (carrying the
    element index) when an element fails validation.
    """

    if isinstance(document, Mapping):
        if "transactions" not in document:
            raise TransactionDataError("JSON object has no 'transactions' key")
        document = document["transactions"]
    if not isinstance(document, list):
        raise TransactionDataError(
            f"expected a JSON array of transactions, got {type(document).__name__}"
        )
    return [to_record(item, index=i) for i, item in enumerate(document)]


def load_transactions_json(json_path: str | PathLike[str]) -> list[TransactionRecord]:
    """Read ``json_path`` (UTF-8) and return its transactions in file order.

    ``FileNotFoundError`` and ``PermissionError`` propagate unchanged; bytes that
    are not UTF-8 or not JSON raise :class:`TransactionDataError`.
    """

    p = Path(json_path)
    try:
        document = json.loads(p.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise TransactionDataError(f"invalid JSON in {p}: {exc}") from exc

    records = parse_transactions(document)
    logger.info("loaded %d transactions from %s", len(records), p)
    return records


__all__ = ["load_transactions_json", "parse_transactions"]
